from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.services import discipline
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

discipline_bp = Blueprint("discipline", __name__)


@discipline_bp.route("/suspensions", methods=["GET"])
@read_required("suspensions")
def list_suspensions():
    status = request.args.get("status")
    records = get_store().suspensions.all()
    if status:
        records = [r for r in records if r.status.value == status]
    return jsonify([r.to_dict() for r in records]), 200


@discipline_bp.route("/suspensions", methods=["POST"])
@jwt_required()
def suspend_student():
    user = get_current_user()
    record = discipline.suspend_student(get_store(), user, request.get_json(silent=True) or {})

    log_event("STUDENT_SUSPENDED", user_id=user.id, ip=request.remote_addr,
              description=f"{record.student_id} until {record.end_date}", level="WARNING")
    return jsonify(record.to_dict()), 201


@discipline_bp.route("/black-book-entries", methods=["GET"])
@read_required("black-book-entries")
def list_black_book_entries():
    return jsonify([e.to_dict() for e in get_store().black_book_entries.all()]), 200


@discipline_bp.route("/black-book-entries", methods=["POST"])
@jwt_required()
def report_student():
    user = get_current_user()
    entry = discipline.report_to_black_book(get_store(), user, request.get_json(silent=True) or {})

    log_event("BLACK_BOOK_REPORTED", user_id=user.id, ip=request.remote_addr,
              description=f"Case {entry.id} for {entry.student_id}")
    return jsonify(entry.to_dict()), 201


@discipline_bp.route("/black-book-entries/<entry_id>/resolve", methods=["PUT"])
@jwt_required()
def resolve_entry(entry_id):
    user = get_current_user()
    entry = discipline.resolve_black_book_entry(get_store(), user, entry_id, request.get_json(silent=True) or {})

    log_event("BLACK_BOOK_RESOLVED", user_id=user.id, ip=request.remote_addr,
              description=f"Case {entry.id}")
    return jsonify(entry.to_dict()), 200
