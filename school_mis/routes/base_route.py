from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from utils.access_control import visible_views, allowed_actions

base_bp = Blueprint("base", __name__)


@base_bp.route("/")
def home():
    return jsonify({"message": "Welcome to the School Management API!"})


@base_bp.route("/navigation")
@jwt_required()
def navigation():
    user = get_current_user()
    return jsonify({
        "user": user.to_dict(),
        "views": visible_views(user.role),
        "actions": allowed_actions(user.role),
    })
