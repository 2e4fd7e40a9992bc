from datetime import timedelta
from flask import current_app
from school_mis.errors import ValidationError
from school_mis.models import Book, LibraryTransaction
from utils import clock
from utils.access_control import authorize
from utils.validation import clean_text, parse_int


def add_book(store, actor, data):
    authorize(actor, "books:create")
    title = clean_text(data, "title")
    author = clean_text(data, "author")
    isbn = clean_text(data, "isbn", required=False)
    quantity = parse_int(data.get("quantity"), "quantity", minimum=1)

    with store.transaction():
        book = store.books.add(Book(
            title=title, author=author, isbn=isbn, quantity=quantity, available=quantity,
        ))
    return book


def is_suspended(store, student_id):
    return any(record.is_active for record in store.suspensions.filter_by(student_id=student_id))


def issue_book(store, actor, data):
    authorize(actor, "library:issue")

    student = store.students.get_or_raise(data.get("student_id"))
    if is_suspended(store, student.id):
        raise ValidationError("Cannot issue book. Student is currently suspended.")
    book = store.books.get_or_raise(data.get("book_id"))
    if book.available <= 0:
        raise ValidationError("Book not available")

    today = clock.today()
    with store.transaction():
        book.available -= 1
        transaction = store.transactions.add(LibraryTransaction(
            book_id=book.id,
            student_id=student.id,
            issue_date=today,
            due_date=today + timedelta(days=current_app.config["LOAN_PERIOD_DAYS"]),
            issued_by_id=actor.id,
        ))
    return transaction


def return_book(store, actor, transaction_id):
    authorize(actor, "library:return")

    transaction = store.transactions.get_or_raise(transaction_id)
    if not transaction.is_open:
        raise ValidationError("This book has already been returned.")

    with store.transaction():
        transaction.return_date = clock.today()
        book = store.books.get(transaction.book_id)
        if book is not None:
            book.available = min(book.available + 1, book.quantity)
    return transaction
