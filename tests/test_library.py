from datetime import date
from tests.conftest import LIBRARIAN, PRINCIPAL, STUDENT


def _book(client, headers, book_id):
    return next(b for b in client.get("/books", headers=headers).get_json() if b["id"] == book_id)


def test_issue_decrements_availability_and_sets_due_date(client, login, frozen_today):
    frozen_today(date(2025, 3, 10))
    headers = login(LIBRARIAN)
    response = client.post("/library/transactions", json={"book_id": "book-1", "student_id": "stud-3"}, headers=headers)
    assert response.status_code == 201
    body = response.get_json()
    assert body["issue_date"] == "2025-03-10"
    assert body["due_date"] == "2025-03-24"
    assert body["return_date"] is None
    assert _book(client, headers, "book-1")["available"] == 7


def test_return_restores_availability(client, login):
    headers = login(LIBRARIAN)
    issued = client.post("/library/transactions", json={"book_id": "book-2", "student_id": "stud-3"}, headers=headers)
    transaction_id = issued.get_json()["id"]

    response = client.put(f"/library/transactions/{transaction_id}/return", headers=headers)
    assert response.status_code == 200
    assert response.get_json()["return_date"] is not None
    assert _book(client, headers, "book-2")["available"] == 15


def test_returned_book_is_never_overdue(client, login, frozen_today):
    frozen_today(date(2025, 3, 10))
    headers = login(LIBRARIAN)
    issued = client.post("/library/transactions", json={"book_id": "book-2", "student_id": "stud-3"}, headers=headers)
    transaction_id = issued.get_json()["id"]
    assert client.put(f"/library/transactions/{transaction_id}/return", headers=headers).status_code == 200

    frozen_today(date(2025, 5, 1))
    returned = next(t for t in client.get("/library/transactions", headers=headers).get_json()
                    if t["id"] == transaction_id)
    assert returned["due_date"] == "2025-03-24"
    assert returned["is_overdue"] is False
    assert returned["days_overdue"] == 0


def test_double_return_is_rejected(client, login):
    headers = login(LIBRARIAN)
    response = client.put("/library/transactions/txn-3/return", headers=headers)
    assert response.status_code == 400
    assert _book(client, headers, "book-1")["available"] == 8


def test_unavailable_book_cannot_be_issued(client, login):
    headers = login(PRINCIPAL)
    book = client.post("/books", json={"title": "Rare", "author": "Anon", "quantity": 1}, headers=headers).get_json()
    assert client.post("/library/transactions", json={"book_id": book["id"], "student_id": "stud-1"},
                       headers=headers).status_code == 201

    response = client.post("/library/transactions", json={"book_id": book["id"], "student_id": "stud-2"}, headers=headers)
    assert response.status_code == 400
    assert response.get_json()["error"] == "Book not available"
    assert _book(client, headers, book["id"])["available"] == 0


def test_unknown_student_checked_before_book(client, login):
    response = client.post("/library/transactions", json={"book_id": "book-404", "student_id": "stud-404"},
                           headers=login(LIBRARIAN))
    assert response.status_code == 404
    assert response.get_json()["error"] == "Student not found"


def test_suspended_student_is_refused_until_suspension_lapses(client, login, frozen_today):
    frozen_today(date(2025, 3, 10))
    suspension = client.post(
        "/suspensions",
        json={"student_id": "stud-3", "days": 3, "reason": "Fighting"},
        headers=login(PRINCIPAL),
    )
    assert suspension.status_code == 201
    assert suspension.get_json()["end_date"] == "2025-03-13"

    headers = login(LIBRARIAN)
    payload = {"book_id": "book-2", "student_id": "stud-3"}

    response = client.post("/library/transactions", json=payload, headers=headers)
    assert response.status_code == 400
    assert response.get_json()["error"] == "Cannot issue book. Student is currently suspended."

    # still active on the last day
    frozen_today(date(2025, 3, 13))
    assert client.post("/library/transactions", json=payload, headers=headers).status_code == 400

    frozen_today(date(2025, 3, 14))
    statuses = [s["status"] for s in client.get("/suspensions", headers=headers).get_json()]
    assert statuses == ["Completed"]
    assert client.post("/library/transactions", json=payload, headers=headers).status_code == 201


def test_students_cannot_issue_books(client, login):
    response = client.post("/library/transactions", json={"book_id": "book-1", "student_id": "stud-1"},
                           headers=login(STUDENT))
    assert response.status_code == 403


def test_transactions_report_overdue_days(client, login, frozen_today):
    frozen_today(date(2024, 6, 13))
    transactions = client.get("/library/transactions", headers=login(LIBRARIAN)).get_json()
    by_id = {t["id"]: t for t in transactions}
    assert by_id["txn-4"]["is_overdue"] is True
    assert by_id["txn-4"]["days_overdue"] == 10
    assert by_id["txn-3"]["is_overdue"] is False
