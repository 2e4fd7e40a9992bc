from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.models import RECOMMENDED_TERMS
from school_mis.services.grades import submit_grades
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

grades_bp = Blueprint("grades", __name__)


@grades_bp.route("/subjects", methods=["GET"])
@read_required("subjects")
def list_subjects():
    return jsonify([s.to_dict() for s in get_store().subjects.all()]), 200


@grades_bp.route("/grades", methods=["GET"])
@read_required("grades")
def list_grades():
    store = get_store()
    term = request.args.get("term")
    grades = store.grades.filter_by(term=term) if term else store.grades.all()
    return jsonify([g.to_dict() for g in grades]), 200


@grades_bp.route("/grades/terms", methods=["GET"])
@jwt_required()
def list_terms():
    return jsonify({"recommended": list(RECOMMENDED_TERMS)}), 200


@grades_bp.route("/grades", methods=["POST"])
@grades_bp.route("/grades/bulk-update", methods=["POST"])
@jwt_required()
def save_grades():
    user = get_current_user()
    data = request.get_json(silent=True)
    # Accept a bare list, {"grades": [...]} or a single grade object
    if isinstance(data, dict) and "grades" in data:
        entries = data["grades"]
    elif isinstance(data, dict):
        entries = [data]
    else:
        entries = data

    saved = submit_grades(get_store(), user, entries)

    log_event("GRADES_SAVED", user_id=user.id, ip=request.remote_addr,
              description=f"{len(saved)} grade(s) saved")
    return jsonify([g.to_dict() for g in saved]), 200
