from school_mis.extensions import db
from utils import clock
from utils.serialization import to_dict
from .base import id_column


class Book(db.Model):
    __tablename__ = 'books'

    id = id_column("book")
    title = db.Column(db.String(255), nullable=False)
    author = db.Column(db.String(255), nullable=False)
    isbn = db.Column(db.String(32), nullable=True)
    quantity = db.Column(db.Integer, nullable=False)
    available = db.Column(db.Integer, nullable=False)

    transactions = db.relationship('LibraryTransaction', back_populates='book', lazy=True)

    __table_args__ = (
        db.CheckConstraint('available >= 0 AND available <= quantity', name='ck_book_available_range'),
    )

    def to_dict(self):
        return to_dict(self)


class LibraryTransaction(db.Model):
    __tablename__ = 'library_transactions'

    id = id_column("txn")
    book_id = db.Column(db.String(40), db.ForeignKey('books.id'), nullable=False)
    student_id = db.Column(db.String(40), db.ForeignKey('students.id'), nullable=False)
    issue_date = db.Column(db.Date, nullable=False)
    due_date = db.Column(db.Date, nullable=False)
    return_date = db.Column(db.Date, nullable=True)
    issued_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=True)

    book = db.relationship('Book', back_populates='transactions')
    student = db.relationship('Student')

    @property
    def is_open(self):
        return self.return_date is None

    @property
    def is_overdue(self):
        return self.is_open and self.due_date < clock.today()

    @property
    def days_overdue(self):
        if not self.is_overdue:
            return 0
        return (clock.today() - self.due_date).days

    def to_dict(self):
        data = to_dict(self)
        data["book_title"] = self.book.title if self.book else None
        data["student_name"] = self.student.name if self.student else None
        data["is_overdue"] = self.is_overdue
        data["days_overdue"] = self.days_overdue
        return data
