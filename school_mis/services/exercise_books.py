from school_mis.errors import NotFoundError, ValidationError
from school_mis.models import ExerciseBookIssue
from utils import clock
from utils.access_control import authorize
from utils.validation import clean_text, parse_int


def issue_exercise_books(store, actor, data):
    """HODs hand out exercise books to a student identified by admission number."""
    authorize(actor, "exercise-books:issue")

    admission_number = clean_text(data, "admission_number")
    student = store.students.first(admission_number=admission_number)
    if student is None:
        raise NotFoundError("Student with that admission number not found.")
    subject = store.subjects.get_or_raise(data.get("subject_id"))
    stock = store.exercise_book_stock.first(subject_id=subject.id)
    if stock is None:
        raise NotFoundError(f"No exercise book stock recorded for {subject.name}.")

    quantity = parse_int(data.get("quantity"), "quantity", minimum=1)
    if stock.quantity < quantity:
        raise ValidationError(f"Not enough stock. Only {stock.quantity} books available for {subject.name}.")

    today = clock.today()
    with store.transaction():
        stock.quantity -= quantity
        stock.last_issued_date = today
        issue = store.exercise_book_issues.add(ExerciseBookIssue(
            student_id=student.id,
            student_name=student.name,
            subject_id=subject.id,
            quantity=quantity,
            issued_by_id=actor.id,
            issue_date=today,
        ))
    return issue
