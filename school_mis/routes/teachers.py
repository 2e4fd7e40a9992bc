from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.services import people
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

teachers_bp = Blueprint("teachers", __name__)


@teachers_bp.route("/teachers", methods=["GET"])
@read_required("teachers")
def list_teachers():
    return jsonify([t.to_dict() for t in get_store().teachers.all()]), 200


@teachers_bp.route("/teachers", methods=["POST"])
@jwt_required()
def create_teacher():
    user = get_current_user()
    teacher = people.create_teacher(get_store(), user, request.get_json(silent=True) or {})

    log_event("TEACHER_CREATED", user_id=user.id, ip=request.remote_addr,
              description=f"{teacher.name} ({teacher.employee_id}) added with account {teacher.user_id}")
    return jsonify(teacher.to_dict()), 201
