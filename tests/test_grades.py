from tests.conftest import TEACHER, PRINCIPAL


def _grades_for(client, headers, student_id, term="Term 2 Endterm"):
    grades = client.get("/grades", query_string={"term": term}, headers=headers).get_json()
    return [g for g in grades if g["student_id"] == student_id]


def test_existing_grade_is_updated_in_place(client, login):
    headers = login(TEACHER)
    response = client.post(
        "/grades",
        json={"student_id": "stud-1", "subject_id": "subj-1", "score": 90, "term": "Term 2 Endterm"},
        headers=headers,
    )
    assert response.status_code == 200
    saved = response.get_json()
    assert saved[0]["id"] == "grade-1"
    assert saved[0]["score"] == 90

    grades = _grades_for(client, headers, "stud-1")
    assert len(grades) == 2
    assert {g["id"]: g["score"] for g in grades}["grade-1"] == 90


def test_new_tuple_inserts_grade(client, login):
    headers = login(TEACHER)
    response = client.post(
        "/grades/bulk-update",
        json={"grades": [
            {"student_id": "stud-3", "subject_id": "subj-1", "score": 64, "term": "Term 2 Endterm"},
            {"student_id": "stud-3", "subject_id": "subj-4", "score": 71, "term": "Term 2 Endterm"},
        ]},
        headers=headers,
    )
    assert response.status_code == 200
    assert len(_grades_for(client, headers, "stud-3")) == 2


def test_invalid_entry_rejects_whole_batch(client, login):
    headers = login(TEACHER)
    response = client.post(
        "/grades/bulk-update",
        json={"grades": [
            {"student_id": "stud-3", "subject_id": "subj-1", "score": 70, "term": "Term 2 Endterm"},
            {"student_id": "stud-3", "subject_id": "subj-2", "score": 150, "term": "Term 2 Endterm"},
        ]},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.get_json()["error"] == "Score must be between 0 and 100"
    assert _grades_for(client, headers, "stud-3") == []


def test_score_must_be_numeric(client, login):
    response = client.post(
        "/grades",
        json={"student_id": "stud-1", "subject_id": "subj-1", "score": "ninety", "term": "Term 1 Midterm"},
        headers=login(TEACHER),
    )
    assert response.status_code == 400


def test_unknown_student_is_not_found(client, login):
    response = client.post(
        "/grades",
        json={"student_id": "stud-404", "subject_id": "subj-1", "score": 50, "term": "Term 1 Midterm"},
        headers=login(TEACHER),
    )
    assert response.status_code == 404


def test_only_teachers_submit_grades(client, login):
    response = client.post(
        "/grades",
        json={"student_id": "stud-1", "subject_id": "subj-1", "score": 50, "term": "Term 1 Midterm"},
        headers=login(PRINCIPAL),
    )
    assert response.status_code == 403
