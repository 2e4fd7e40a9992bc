import pytest
from sqlalchemy.exc import OperationalError
from school_mis.errors import NotFoundError, TransientError, ValidationError
from school_mis.extensions import db
from school_mis.models import Subject
from school_mis.store import Store, get_store


class BrokenSession:
    def __init__(self):
        self.rolled_back = False

    def commit(self):
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    def rollback(self):
        self.rolled_back = True


def test_backend_outage_is_transient():
    session = BrokenSession()
    store = Store(session)
    with pytest.raises(TransientError) as excinfo:
        with store.transaction():
            pass
    assert excinfo.value.status_code == 503
    assert session.rolled_back


def test_failed_block_leaves_no_partial_writes(app):
    with app.app_context():
        store = Store(db.session)
        with pytest.raises(ValidationError):
            with store.transaction():
                store.subjects.add(Subject(name="Music", code="MUS101"))
                raise ValidationError("abort")
        assert not store.subjects.exists(code="MUS101")


def test_get_or_raise_names_the_collection(app):
    with app.app_context():
        with pytest.raises(NotFoundError) as excinfo:
            Store(db.session).books.get_or_raise("book-missing")
        assert excinfo.value.message == "Book not found"


def test_store_factory_is_injectable(app):
    sentinel = Store(db.session)
    app.extensions["school_store"] = lambda: sentinel
    with app.test_request_context("/"):
        assert get_store() is sentinel
        assert get_store() is sentinel
