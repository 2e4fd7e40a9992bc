from flask import Blueprint, request, jsonify
from flask_jwt_extended import get_current_user
from school_mis.services.dashboards import build_dashboard
from school_mis.store import get_store
from utils.decorators import view_required

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/dashboard')
@view_required("dashboard")
def dashboard():
    return jsonify(build_dashboard(get_store(), get_current_user(), request.args.get("term")))
