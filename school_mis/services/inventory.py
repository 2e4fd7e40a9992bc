from school_mis.errors import ValidationError
from school_mis.models import InventoryItem, IssuedInventory, InventoryRequest, InventoryCategory, RequestStatus
from school_mis.services import teacher_for
from utils import clock
from utils.access_control import authorize
from utils.validation import clean_text, parse_int

INSUFFICIENT_STOCK_REASON = "Insufficient stock at time of approval."


def add_item(store, actor, data):
    authorize(actor, "inventory:create")
    name = clean_text(data, "name")
    try:
        category = InventoryCategory(data.get("category"))
    except ValueError:
        raise ValidationError(f"Invalid category: {data.get('category')}")
    quantity = parse_int(data.get("quantity"), "quantity", minimum=0)
    min_stock_level = parse_int(data.get("min_stock_level", 0), "min_stock_level", minimum=0)

    with store.transaction():
        item = store.inventory.add(InventoryItem(
            name=name, category=category, quantity=quantity, min_stock_level=min_stock_level,
        ))
    return item


def issue_item(store, actor, data):
    authorize(actor, "inventory:issue")

    item = store.inventory.get_or_raise(data.get("item_id"))
    teacher = store.teachers.get_or_raise(data.get("teacher_id"))
    quantity = parse_int(data.get("quantity"), "quantity", minimum=1)
    if quantity > item.quantity:
        raise ValidationError("Not enough items in stock")

    with store.transaction():
        item.quantity -= quantity
        issued = store.issued_inventory.add(IssuedInventory(
            item_id=item.id,
            teacher_id=teacher.id,
            quantity=quantity,
            date=clock.today(),
            notes=clean_text(data, "notes", required=False),
        ))
    return issued


def request_item(store, actor, data):
    authorize(actor, "inventory:request")
    teacher = teacher_for(store, actor)

    item = store.inventory.get_or_raise(data.get("item_id"))
    quantity = parse_int(data.get("quantity"), "quantity", minimum=1)

    with store.transaction():
        request = store.inventory_requests.add(InventoryRequest(
            teacher_id=teacher.id,
            item_id=item.id,
            quantity=quantity,
            status=RequestStatus.PENDING,
            request_date=clock.today(),
        ))
    return request


def _pending_request(store, request_id):
    request = store.inventory_requests.get_or_raise(request_id)
    if request.status is not RequestStatus.PENDING:
        raise ValidationError(f"This request has already been {request.status.value.lower()}.")
    return request


def approve_request(store, actor, request_id):
    """Approve a pending request against the stock on hand right now.

    If stock has dropped below the requested quantity since the request was
    made, the request is rejected instead and stock is left untouched.
    """
    authorize(actor, "inventory:respond")
    request = _pending_request(store, request_id)
    item = store.inventory.get_or_raise(request.item_id)

    with store.transaction():
        request.responded_by_id = actor.id
        if item.quantity < request.quantity:
            request.status = RequestStatus.REJECTED
            request.rejection_reason = INSUFFICIENT_STOCK_REASON
            return request

        request.status = RequestStatus.APPROVED
        item.quantity -= request.quantity
        store.issued_inventory.add(IssuedInventory(
            item_id=item.id,
            teacher_id=request.teacher_id,
            quantity=request.quantity,
            date=clock.today(),
            notes=f"From approved request {request.id}",
        ))
    return request


def reject_request(store, actor, request_id, data):
    authorize(actor, "inventory:respond")
    request = _pending_request(store, request_id)
    reason = clean_text(data, "reason", required=False)

    with store.transaction():
        request.status = RequestStatus.REJECTED
        request.rejection_reason = reason
        request.responded_by_id = actor.id
    return request
