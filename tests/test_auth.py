from school_mis.models import AuditLog
from tests.conftest import PRINCIPAL, TEACHER


def test_login_returns_token_and_user(client):
    response = client.post("/auth/login", json={"username": PRINCIPAL})
    assert response.status_code == 200
    body = response.get_json()
    assert body["access_token"]
    assert body["user"] == {"id": "user-1", "name": PRINCIPAL, "role": "Principal"}
    assert "access_token_cookie" in response.headers.get("Set-Cookie", "")


def test_login_unknown_user(client):
    response = client.post("/auth/login", json={"username": "Nobody"})
    assert response.status_code == 401


def test_login_requires_username(client):
    assert client.post("/auth/login", json={}).status_code == 400


def test_me_returns_current_actor(client, login):
    response = client.get("/auth/me", headers=login(TEACHER))
    assert response.get_json()["role"] == "Teacher"


def test_missing_token_is_rejected(client):
    response = client.get("/students")
    assert response.status_code == 401
    assert response.get_json()["type"] == "Unauthorized"


def test_garbage_token_is_rejected(client):
    response = client.get("/students", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code in (401, 422)


def test_logout_revokes_token(client, login):
    headers = login(PRINCIPAL)
    assert client.post("/auth/logout", headers=headers).status_code == 200
    response = client.get("/auth/me", headers=headers)
    assert response.status_code == 401
    assert response.get_json()["error"] == "Token has been revoked"


def test_login_is_audited(app, client):
    client.post("/auth/login", json={"username": PRINCIPAL})
    with open(app.config["AUDIT_LOG_FILE"]) as log_file:
        contents = log_file.read()
    assert "LOGIN_SUCCESS" in contents
    assert "USER: user-1" in contents


def test_password_is_checked_when_set(app, client, login):
    response = client.post("/teachers", json={"name": "Ms. Wanjiru", "password": "s3cret"}, headers=login(PRINCIPAL))
    assert response.status_code == 201
    assert client.post("/auth/login", json={"username": "Ms. Wanjiru", "password": "wrong"}).status_code == 401
    assert client.post("/auth/login", json={"username": "Ms. Wanjiru", "password": "s3cret"}).status_code == 200


def test_unknown_path_is_json_404(client, login):
    response = client.get("/no-such-resource", headers=login(PRINCIPAL))
    assert response.status_code == 404
    assert response.get_json()["type"] == "NotFoundError"


def test_unsupported_method_is_json_405(client, login):
    response = client.delete("/books", headers=login(PRINCIPAL))
    assert response.status_code == 405
    assert "error" in response.get_json()


def test_login_rate_limit_is_logged(tmp_path):
    from school_mis import create_app
    from school_mis.config import TestingConfig
    from school_mis.extensions import db

    class LimitedConfig(TestingConfig):
        RATELIMIT_ENABLED = True
        AUDIT_LOG_FILE = str(tmp_path / "audit.log")

    app = create_app(LimitedConfig)
    client = app.test_client()
    statuses = [client.post("/auth/login", json={"username": "Nobody"}).status_code for _ in range(6)]
    assert statuses[:5] == [401] * 5
    assert statuses[5] == 429

    with app.app_context():
        entries = db.session.query(AuditLog).all()
        assert any(entry.action.startswith("RATE_LIMIT_EXCEEDED") for entry in entries)
        db.session.remove()
        db.drop_all()
