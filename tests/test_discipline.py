from datetime import date
from tests.conftest import TEACHER, OTHER_TEACHER, DEPUTY, HOD, LIBRARIAN, PRINCIPAL


def test_suspension_length_is_restricted(client, login):
    response = client.post("/suspensions", json={"student_id": "stud-1", "days": 5, "reason": "Late"},
                           headers=login(HOD))
    assert response.status_code == 400


def test_suspension_status_is_computed_on_read(client, login, frozen_today):
    frozen_today(date(2025, 5, 1))
    headers = login(DEPUTY)
    created = client.post("/suspensions", json={"student_id": "stud-2", "days": 7, "reason": "Truancy"},
                          headers=headers).get_json()
    assert created["status"] == "Active"
    assert created["end_date"] == "2025-05-08"

    frozen_today(date(2025, 5, 9))
    first = client.get("/suspensions", headers=headers).get_json()
    second = client.get("/suspensions", headers=headers).get_json()
    assert first[0]["status"] == second[0]["status"] == "Completed"
    assert client.get("/suspensions", query_string={"status": "Active"}, headers=headers).get_json() == []


def test_librarian_cannot_suspend(client, login):
    response = client.post("/suspensions", json={"student_id": "stud-1", "days": 3, "reason": "x"},
                           headers=login(LIBRARIAN))
    assert response.status_code == 403
    assert response.get_json()["error"] == "You are not authorized to suspend students."


def test_one_open_black_book_case_per_student(client, login):
    first = client.post("/black-book-entries", json={"student_id": "stud-5", "reason": "Bullying"},
                        headers=login(TEACHER))
    assert first.status_code == 201
    assert first.get_json()["status"] == "Open"

    second = client.post("/black-book-entries", json={"student_id": "stud-5", "reason": "Again"},
                         headers=login(OTHER_TEACHER))
    assert second.status_code == 400
    assert second.get_json()["error"] == "This student already has an open case in the Black Book."


def test_resolving_reopens_the_book_for_that_student(client, login):
    entry = client.post("/black-book-entries", json={"student_id": "stud-5", "reason": "Bullying"},
                        headers=login(TEACHER)).get_json()

    response = client.put(f"/black-book-entries/{entry['id']}/resolve", json={"resolution_notes": "Parents met"},
                          headers=login(DEPUTY))
    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "Resolved"
    assert body["resolved_by_name"] == DEPUTY
    assert body["resolution_date"] is not None

    again = client.put(f"/black-book-entries/{entry['id']}/resolve", json={"resolution_notes": "x"},
                       headers=login(PRINCIPAL))
    assert again.status_code == 400

    assert client.post("/black-book-entries", json={"student_id": "stud-5", "reason": "New case"},
                       headers=login(TEACHER)).status_code == 201


def test_only_deputy_or_principal_resolve(client, login):
    entry = client.post("/black-book-entries", json={"student_id": "stud-6", "reason": "Vandalism"},
                        headers=login(TEACHER)).get_json()
    response = client.put(f"/black-book-entries/{entry['id']}/resolve", json={"resolution_notes": "x"},
                          headers=login(HOD))
    assert response.status_code == 403
    assert response.get_json()["error"] == "You are not authorized to resolve Black Book cases."


def test_only_teachers_report(client, login):
    response = client.post("/black-book-entries", json={"student_id": "stud-6", "reason": "x"}, headers=login(DEPUTY))
    assert response.status_code == 403
    assert response.get_json()["error"] == "Only teachers can add students to the Black Book."


def test_suspension_starts_on_the_day_it_is_issued(client, login, frozen_today):
    frozen_today(date(2025, 3, 10))
    headers = login(PRINCIPAL)
    response = client.post("/suspensions", json={"student_id": "stud-3", "days": 3, "reason": "Fighting",
                                                 "start_date": "2025-06-01"}, headers=headers)
    assert response.status_code == 400
    assert response.get_json()["error"] == "A suspension starts on the day it is issued."
    assert client.get("/suspensions", headers=headers).get_json() == []

    assert client.post("/library/transactions", json={"book_id": "book-2", "student_id": "stud-3"},
                       headers=login(LIBRARIAN)).status_code == 201


def test_todays_start_date_is_accepted(client, login, frozen_today):
    frozen_today(date(2025, 3, 10))
    response = client.post("/suspensions", json={"student_id": "stud-3", "days": 3, "reason": "Fighting",
                                                 "start_date": "2025-03-10"}, headers=login(PRINCIPAL))
    assert response.status_code == 201
    assert response.get_json()["start_date"] == "2025-03-10"
    assert response.get_json()["end_date"] == "2025-03-13"
