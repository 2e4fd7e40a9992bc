from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.services.exercise_books import issue_exercise_books
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

exercise_books_bp = Blueprint("exercise_books", __name__)


@exercise_books_bp.route("/exercise-book-stock", methods=["GET"])
@read_required("exercise-books")
def list_stock():
    return jsonify([s.to_dict() for s in get_store().exercise_book_stock.all()]), 200


@exercise_books_bp.route("/exercise-book-issues", methods=["GET"])
@read_required("exercise-books")
def list_issues():
    return jsonify([i.to_dict() for i in get_store().exercise_book_issues.all()]), 200


@exercise_books_bp.route("/exercise-book-issues", methods=["POST"])
@jwt_required()
def issue_books():
    user = get_current_user()
    issue = issue_exercise_books(get_store(), user, request.get_json(silent=True) or {})

    log_event("EXERCISE_BOOKS_ISSUED", user_id=user.id, ip=request.remote_addr,
              description=f"{issue.quantity} book(s) of {issue.subject_id} to {issue.student_name}")
    return jsonify(issue.to_dict()), 201
