from school_mis.extensions import db
from school_mis.models import User, UserRole
from tests.conftest import SECRETARY, TEACHER, PRINCIPAL


def _item(client, headers, item_id):
    return next(i for i in client.get("/inventory", headers=headers).get_json() if i["id"] == item_id)


def test_approval_with_short_stock_becomes_rejection(client, login):
    headers = login(SECRETARY)
    response = client.put("/inventory/requests/req-1/approve", headers=headers)
    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "Rejected"
    assert body["rejection_reason"] == "Insufficient stock at time of approval."
    assert _item(client, headers, "inv-4")["quantity"] == 4


def test_approval_issues_stock(client, login):
    created = client.post("/inventory/requests", json={"item_id": "inv-3", "quantity": 3}, headers=login(TEACHER))
    assert created.status_code == 201
    request_id = created.get_json()["id"]
    assert created.get_json()["status"] == "Pending"
    assert created.get_json()["teacher_id"] == "teach-1"

    headers = login(PRINCIPAL)
    response = client.put(f"/inventory/requests/{request_id}/approve", headers=headers)
    assert response.get_json()["status"] == "Approved"
    assert _item(client, headers, "inv-3")["quantity"] == 97

    issued = client.get("/inventory/issued", headers=headers).get_json()
    notes = [i["notes"] for i in issued]
    assert f"From approved request {request_id}" in notes


def test_answered_request_cannot_be_answered_again(client, login):
    headers = login(SECRETARY)
    assert client.put("/inventory/requests/req-2/approve", headers=headers).status_code == 400
    assert client.put("/inventory/requests/req-2/reject", json={"reason": "x"}, headers=headers).status_code == 400


def test_reject_records_reason(client, login):
    response = client.put("/inventory/requests/req-1/reject", json={"reason": "Budget freeze"}, headers=login(SECRETARY))
    assert response.get_json()["status"] == "Rejected"
    assert response.get_json()["rejection_reason"] == "Budget freeze"


def test_teachers_cannot_answer_requests(client, login):
    assert client.put("/inventory/requests/req-1/approve", headers=login(TEACHER)).status_code == 403


def test_only_teachers_request_items(client, login):
    response = client.post("/inventory/requests", json={"item_id": "inv-3", "quantity": 1}, headers=login(SECRETARY))
    assert response.status_code == 403


def test_teacher_account_without_record_is_refused(app, client, login):
    with app.app_context():
        db.session.add(User(name="Ghost Teacher", role=UserRole.TEACHER))
        db.session.commit()
    response = client.post("/inventory/requests", json={"item_id": "inv-3", "quantity": 1},
                           headers=login("Ghost Teacher"))
    assert response.status_code == 403
    assert response.get_json()["error"] == "Logged in user is not a recognized teacher."


def test_direct_issue_checks_stock(client, login):
    headers = login(SECRETARY)
    response = client.post("/inventory/issued", json={"item_id": "inv-2", "teacher_id": "teach-4", "quantity": 9},
                           headers=headers)
    assert response.status_code == 400
    assert response.get_json()["error"] == "Not enough items in stock"

    response = client.post("/inventory/issued", json={"item_id": "inv-2", "teacher_id": "teach-4", "quantity": 8},
                           headers=headers)
    assert response.status_code == 201
    assert _item(client, headers, "inv-2")["quantity"] == 0


def test_new_item_with_unknown_category_is_rejected(client, login):
    response = client.post("/inventory", json={"name": "Desk", "category": "Furniture", "quantity": 3},
                           headers=login(PRINCIPAL))
    assert response.status_code == 400


def test_low_stock_flag(client, login):
    assert _item(client, login(SECRETARY), "inv-4")["is_low_stock"] is True
