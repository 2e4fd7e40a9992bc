import pytest
from school_mis import create_app
from school_mis.config import TestingConfig
from school_mis.extensions import db
from school_mis.seed import seed_data

PRINCIPAL = "Joseph Maina"
DEPUTY = "Mrs. Susan Okech"
ADMIN = "Mr. Admin"
TEACHER = "Mr. John Doe"
OTHER_TEACHER = "Mrs. Jane Smith"
STUDENT = "Alice Johnson"
LIBRARIAN = "Mr. David Korir"
REGISTRAR = "Mrs. Mary Akinyi"
SECRETARY = "Ms. Fatuma Ali"
ACADEMICS = "Mr. Nzuki"
HOD = "Mr. James Maina"


@pytest.fixture
def app(tmp_path):
    class Config(TestingConfig):
        AUDIT_LOG_FILE = str(tmp_path / "audit.log")

    app = create_app(Config)
    with app.app_context():
        seed_data()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(app):
    """Log in as a seeded user and return the Authorization header."""
    def _login(name, password=None):
        body = {"username": name}
        if password is not None:
            body["password"] = password
        response = app.test_client().post("/auth/login", json=body)
        assert response.status_code == 200, response.get_json()
        return {"Authorization": f"Bearer {response.get_json()['access_token']}"}
    return _login


@pytest.fixture
def frozen_today(monkeypatch):
    """Pin utils.clock.today to a chosen date; call again to move time."""
    from utils import clock

    def _freeze(day):
        monkeypatch.setattr(clock, "today", lambda: day)
        return day
    return _freeze
