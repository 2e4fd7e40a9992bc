from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.services import library
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

library_bp = Blueprint("library", __name__)


@library_bp.route("/books", methods=["GET"])
@read_required("books")
def list_books():
    return jsonify([b.to_dict() for b in get_store().books.all()]), 200


@library_bp.route("/books", methods=["POST"])
@jwt_required()
def add_book():
    user = get_current_user()
    book = library.add_book(get_store(), user, request.get_json(silent=True) or {})

    log_event("BOOK_ADDED", user_id=user.id, ip=request.remote_addr,
              description=f"{book.title} x{book.quantity}")
    return jsonify(book.to_dict()), 201


@library_bp.route("/library/transactions", methods=["GET"])
@read_required("transactions")
def list_transactions():
    transactions = sorted(get_store().transactions.all(), key=lambda t: t.issue_date, reverse=True)
    return jsonify([t.to_dict() for t in transactions]), 200


@library_bp.route("/library/transactions", methods=["POST"])
@jwt_required()
def issue_book():
    user = get_current_user()
    transaction = library.issue_book(get_store(), user, request.get_json(silent=True) or {})

    log_event("BOOK_ISSUED", user_id=user.id, ip=request.remote_addr,
              description=f"Book {transaction.book_id} to student {transaction.student_id}, due {transaction.due_date}")
    return jsonify(transaction.to_dict()), 201


@library_bp.route("/library/transactions/<transaction_id>/return", methods=["PUT"])
@jwt_required()
def return_book(transaction_id):
    user = get_current_user()
    transaction = library.return_book(get_store(), user, transaction_id)

    log_event("BOOK_RETURNED", user_id=user.id, ip=request.remote_addr,
              description=f"Transaction {transaction.id}")
    return jsonify(transaction.to_dict()), 200
