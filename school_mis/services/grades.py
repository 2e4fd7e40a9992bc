from school_mis.errors import ValidationError
from school_mis.models import Grade
from utils import clock
from utils.access_control import authorize
from utils.validation import clean_text, parse_int, parse_score


def _parse_entry(store, entry):
    if not isinstance(entry, dict):
        raise ValidationError("Each grade must be an object")
    student = store.students.get_or_raise(entry.get("student_id"))
    subject = store.subjects.get_or_raise(entry.get("subject_id"))
    term = clean_text(entry, "term")
    score = parse_score(entry.get("score"))
    year = parse_int(entry["year"], "year", minimum=2000) if entry.get("year") else clock.today().year
    return student.id, subject.id, term, score, year


def submit_grades(store, actor, entries):
    """Insert or update grades keyed by (student, subject, term).

    The whole batch is validated before anything is written; an existing
    grade keeps its id and takes the latest score.
    """
    authorize(actor, "grades:submit")
    if not isinstance(entries, list) or not entries:
        raise ValidationError("At least one grade is required")

    parsed = [_parse_entry(store, entry) for entry in entries]

    saved = []
    with store.transaction():
        for student_id, subject_id, term, score, year in parsed:
            grade = store.grades.first(student_id=student_id, subject_id=subject_id, term=term)
            if grade is None:
                grade = store.grades.add(Grade(
                    student_id=student_id, subject_id=subject_id, term=term, score=score, year=year,
                ))
            else:
                grade.score = score
                grade.year = year
            saved.append(grade)
    return saved
