from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.services import inventory
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

inventory_bp = Blueprint("inventory", __name__)


@inventory_bp.route("/inventory", methods=["GET"])
@read_required("inventory")
def list_items():
    return jsonify([i.to_dict() for i in get_store().inventory.all()]), 200


@inventory_bp.route("/inventory", methods=["POST"])
@jwt_required()
def add_item():
    user = get_current_user()
    item = inventory.add_item(get_store(), user, request.get_json(silent=True) or {})

    log_event("INVENTORY_ITEM_ADDED", user_id=user.id, ip=request.remote_addr,
              description=f"{item.name} ({item.category.value}) x{item.quantity}")
    return jsonify(item.to_dict()), 201


@inventory_bp.route("/inventory/issued", methods=["GET"])
@read_required("issued-inventory")
def list_issued():
    return jsonify([i.to_dict() for i in get_store().issued_inventory.all()]), 200


@inventory_bp.route("/inventory/issued", methods=["POST"])
@jwt_required()
def issue_item():
    user = get_current_user()
    issued = inventory.issue_item(get_store(), user, request.get_json(silent=True) or {})

    log_event("INVENTORY_ISSUED", user_id=user.id, ip=request.remote_addr,
              description=f"{issued.quantity} of {issued.item_id} to teacher {issued.teacher_id}")
    return jsonify(issued.to_dict()), 201


@inventory_bp.route("/inventory/requests", methods=["GET"])
@read_required("inventory-requests")
def list_requests():
    return jsonify([r.to_dict() for r in get_store().inventory_requests.all()]), 200


@inventory_bp.route("/inventory/requests", methods=["POST"])
@jwt_required()
def request_item():
    user = get_current_user()
    item_request = inventory.request_item(get_store(), user, request.get_json(silent=True) or {})

    log_event("INVENTORY_REQUESTED", user_id=user.id, ip=request.remote_addr,
              description=f"Request {item_request.id}: {item_request.quantity} of {item_request.item_id}")
    return jsonify(item_request.to_dict()), 201


@inventory_bp.route("/inventory/requests/<request_id>/approve", methods=["PUT"])
@jwt_required()
def approve_request(request_id):
    user = get_current_user()
    item_request = inventory.approve_request(get_store(), user, request_id)

    log_event("INVENTORY_REQUEST_ANSWERED", user_id=user.id, ip=request.remote_addr,
              description=f"Request {item_request.id} {item_request.status.value}")
    return jsonify(item_request.to_dict()), 200


@inventory_bp.route("/inventory/requests/<request_id>/reject", methods=["PUT"])
@jwt_required()
def reject_request(request_id):
    user = get_current_user()
    item_request = inventory.reject_request(get_store(), user, request_id, request.get_json(silent=True) or {})

    log_event("INVENTORY_REQUEST_ANSWERED", user_id=user.id, ip=request.remote_addr,
              description=f"Request {item_request.id} {item_request.status.value}")
    return jsonify(item_request.to_dict()), 200
