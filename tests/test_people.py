from school_mis.models import Teacher, User, UserRole
from school_mis.extensions import db
from tests.conftest import PRINCIPAL, REGISTRAR, TEACHER, DEPUTY


def test_registrar_registers_student_with_next_admission_number(client, login):
    response = client.post("/students", json={"name": "Grace Wambui", "class_name": "Form 1"}, headers=login(REGISTRAR))
    assert response.status_code == 201
    body = response.get_json()
    assert body["admission_number"] == "S008"
    assert body["id"].startswith("stud-")


def test_duplicate_admission_number_is_rejected(client, login):
    response = client.post(
        "/students", json={"name": "Copy", "class_name": "Form 1", "admission_number": "S001"}, headers=login(PRINCIPAL)
    )
    assert response.status_code == 400


def test_teacher_cannot_register_students(client, login):
    response = client.post("/students", json={"name": "Nope", "class_name": "Form 1"}, headers=login(TEACHER))
    assert response.status_code == 403


def test_student_needs_name_and_class(client, login):
    response = client.post("/students", json={"name": "No Class"}, headers=login(REGISTRAR))
    assert response.status_code == 400
    assert response.get_json()["type"] == "ValidationError"


def test_creating_teacher_provisions_linked_account(app, client, login):
    response = client.post(
        "/teachers",
        json={"name": "Mr. Otieno", "subject_ids": ["subj-1"], "class_in_charge": "Form 2"},
        headers=login(DEPUTY),
    )
    assert response.status_code == 201
    body = response.get_json()
    assert body["employee_id"] == "T006"

    with app.app_context():
        users = db.session.query(User).filter_by(name="Mr. Otieno").all()
        assert len(users) == 1
        assert users[0].role is UserRole.TEACHER
        teacher = db.session.get(Teacher, body["id"])
        assert teacher.user_id == users[0].id
        assert users[0].teacher.id == teacher.id


def test_new_teacher_can_act_as_teacher(client, login):
    client.post("/teachers", json={"name": "Mr. Otieno"}, headers=login(PRINCIPAL))
    response = client.post(
        "/leave-requests",
        json={"leave_start_date": "2025-02-03", "leave_end_date": "2025-02-04", "reason": "Graduation"},
        headers=login("Mr. Otieno"),
    )
    assert response.status_code == 201
    assert response.get_json()["teacher_name"] == "Mr. Otieno"


def test_teacher_name_must_be_unique_across_users(client, login):
    response = client.post("/teachers", json={"name": PRINCIPAL}, headers=login(PRINCIPAL))
    assert response.status_code == 400


def test_teacher_with_unknown_subject_is_not_found(client, login):
    response = client.post("/teachers", json={"name": "Mr. X", "subject_ids": ["subj-99"]}, headers=login(PRINCIPAL))
    assert response.status_code == 404


def test_reads_are_copies(client, login):
    headers = login(PRINCIPAL)
    first = client.get("/students", headers=headers).get_json()
    first[0]["name"] = "Changed"
    second = client.get("/students", headers=headers).get_json()
    assert second[0]["name"] != "Changed"
