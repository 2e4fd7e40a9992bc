"""
Store seam between the services and the database.

Services never touch ``db.session`` or ``Model.query`` directly: they get a
``Store`` and talk to its repositories. The default factory binds the
Flask-SQLAlchemy session, so the backing database is whatever
``SQLALCHEMY_DATABASE_URI`` points at (in-memory SQLite by default).
"""
from contextlib import contextmanager
from flask import current_app, g
from sqlalchemy.exc import OperationalError
from school_mis.errors import NotFoundError, TransientError
from school_mis.extensions import db
from school_mis.models import (
    User, Student, Teacher, Subject, Grade, Book, LibraryTransaction,
    InventoryItem, IssuedInventory, InventoryRequest, LeaveRequest,
    AttendanceRecord, PastPaper, TimecFile, ExerciseBookStock,
    ExerciseBookIssue, SuspensionRecord, BlackBookEntry
)


class Repository:
    """Query helpers for one collection."""

    def __init__(self, session, model, label):
        self.session = session
        self.model = model
        self.label = label

    def _query(self):
        return self.session.query(self.model)

    def all(self):
        return self._query().all()

    def get(self, record_id):
        if record_id is None:
            return None
        return self.session.get(self.model, record_id)

    def get_or_raise(self, record_id, message=None):
        record = self.get(record_id)
        if record is None:
            raise NotFoundError(message or f"{self.label} not found")
        return record

    def filter_by(self, **criteria):
        return self._query().filter_by(**criteria).all()

    def first(self, **criteria):
        return self._query().filter_by(**criteria).first()

    def exists(self, **criteria):
        return self.first(**criteria) is not None

    def count(self, **criteria):
        return self._query().filter_by(**criteria).count()

    def add(self, record):
        self.session.add(record)
        self.session.flush()
        return record


class Store:
    def __init__(self, session):
        self.session = session
        self.users = Repository(session, User, "User")
        self.students = Repository(session, Student, "Student")
        self.teachers = Repository(session, Teacher, "Teacher")
        self.subjects = Repository(session, Subject, "Subject")
        self.grades = Repository(session, Grade, "Grade")
        self.books = Repository(session, Book, "Book")
        self.transactions = Repository(session, LibraryTransaction, "Transaction")
        self.inventory = Repository(session, InventoryItem, "Inventory item")
        self.issued_inventory = Repository(session, IssuedInventory, "Issued inventory record")
        self.inventory_requests = Repository(session, InventoryRequest, "Inventory request")
        self.leave_requests = Repository(session, LeaveRequest, "Leave request")
        self.attendance = Repository(session, AttendanceRecord, "Attendance record")
        self.past_papers = Repository(session, PastPaper, "Past paper")
        self.timec_files = Repository(session, TimecFile, "TIMEC file")
        self.exercise_book_stock = Repository(session, ExerciseBookStock, "Exercise book stock")
        self.exercise_book_issues = Repository(session, ExerciseBookIssue, "Exercise book issue")
        self.suspensions = Repository(session, SuspensionRecord, "Suspension record")
        self.black_book_entries = Repository(session, BlackBookEntry, "Black Book entry")

    @contextmanager
    def transaction(self):
        """One commit per logical operation; nothing is kept if the block raises."""
        try:
            yield self
            self.session.commit()
        except OperationalError as exc:
            self.session.rollback()
            raise TransientError("The data store is temporarily unavailable. Please retry.") from exc
        except Exception:
            self.session.rollback()
            raise


def sqlalchemy_store_factory():
    return Store(db.session)


def get_store():
    if "store" not in g:
        factory = current_app.extensions.get("school_store", sqlalchemy_store_factory)
        g.store = factory()
    return g.store
