from flask import Blueprint, jsonify
from school_mis.store import get_store
from utils.decorators import read_required

users_bp = Blueprint("users", __name__)


@users_bp.route("/users", methods=["GET"])
@read_required("users")
def list_users():
    return jsonify([user.to_dict() for user in get_store().users.all()]), 200
