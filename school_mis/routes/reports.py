from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import get_current_user
from school_mis.services import reports
from school_mis.store import get_store
from utils.decorators import view_required

reports_bp = Blueprint('reports', __name__)


@reports_bp.route('/performance')
@view_required("performance-reports")
def performance():
    class_name = request.args.get("class_name")
    if class_name == "All":
        class_name = None
    return jsonify(reports.performance_report(get_store(), class_name, request.args.get("term")))


@reports_bp.route('/class-performance')
@view_required("class-performance")
def class_performance():
    return jsonify(reports.class_performance_report(get_store(), get_current_user(), request.args.get("term")))


@reports_bp.route('/library')
@view_required("library")
def library():
    return jsonify(reports.library_report(get_store(), request.args.get("period", "yearly")))


@reports_bp.route('/inventory')
@view_required("inventory")
def inventory():
    return jsonify(reports.inventory_report(get_store(), request.args.get("period", "yearly")))


@reports_bp.route('/attendance/students')
@view_required("students")
def student_attendance():
    return jsonify(reports.student_attendance_report(get_store(), current_app.config["TERM_ATTENDANCE_DAYS"]))


@reports_bp.route('/attendance/teachers')
@view_required("teachers")
def teacher_attendance():
    return jsonify(reports.teacher_attendance_report(
        get_store(),
        request.args.get("year", type=int),
        request.args.get("month", type=int),
    ))
