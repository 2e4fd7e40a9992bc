from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.services import people
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

students_bp = Blueprint("students", __name__)


@students_bp.route("/students", methods=["GET"])
@read_required("students")
def list_students():
    return jsonify([s.to_dict() for s in get_store().students.all()]), 200


@students_bp.route("/students/<student_id>", methods=["GET"])
@read_required("students")
def get_student(student_id):
    return jsonify(get_store().students.get_or_raise(student_id).to_dict()), 200


@students_bp.route("/students", methods=["POST"])
@jwt_required()
def create_student():
    user = get_current_user()
    student = people.create_student(get_store(), user, request.get_json(silent=True) or {})

    log_event("STUDENT_CREATED", user_id=user.id, ip=request.remote_addr,
              description=f"{student.name} ({student.admission_number}) registered in {student.class_name}")
    return jsonify(student.to_dict()), 201
