from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.services import staff
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

staff_bp = Blueprint("staff", __name__)


@staff_bp.route("/leave-requests", methods=["GET"])
@read_required("leave-requests")
def list_leave_requests():
    return jsonify([r.to_dict() for r in get_store().leave_requests.all()]), 200


@staff_bp.route("/leave-requests", methods=["POST"])
@jwt_required()
def request_leave():
    user = get_current_user()
    leave = staff.request_leave(get_store(), user, request.get_json(silent=True) or {})

    log_event("LEAVE_REQUESTED", user_id=user.id, ip=request.remote_addr,
              description=f"{leave.leave_start_date} to {leave.leave_end_date}")
    return jsonify(leave.to_dict()), 201


@staff_bp.route("/leave-requests/<leave_id>/respond", methods=["PUT"])
@jwt_required()
def respond_to_leave(leave_id):
    user = get_current_user()
    leave = staff.respond_to_leave(get_store(), user, leave_id, request.get_json(silent=True) or {})

    log_event("LEAVE_ANSWERED", user_id=user.id, ip=request.remote_addr,
              description=f"Leave {leave.id} {leave.status.value}")
    return jsonify(leave.to_dict()), 200


@staff_bp.route("/attendance", methods=["GET"])
@read_required("attendance")
def list_attendance():
    store = get_store()
    user_type = request.args.get("user_type")
    records = store.attendance.all()
    if user_type:
        records = [r for r in records if r.user_type.value == user_type]
    return jsonify([r.to_dict() for r in records]), 200


@staff_bp.route("/attendance", methods=["POST"])
@jwt_required()
def record_attendance():
    user = get_current_user()
    record = staff.record_attendance(get_store(), user, request.get_json(silent=True) or {})

    log_event("ATTENDANCE_RECORDED", user_id=user.id, ip=request.remote_addr,
              description=f"{record.user_type.value} {record.user_id} at {record.time_in} on {record.date}")
    return jsonify(record.to_dict()), 201
