import time
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from .config import Config
from .errors import SchoolError
from .extensions import db, jwt, limiter, migrate, cors
from .store import sqlalchemy_store_factory


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)
    limiter.init_app(app)
    migrate.init_app(app, db)
    app.extensions["school_store"] = sqlalchemy_store_factory

    from .routes import register_routes
    register_routes(app)
    _register_jwt_loaders()
    _register_error_handlers(app)

    @app.before_request
    def simulate_latency():
        delay = app.config.get("SIMULATED_LATENCY_MS") or 0
        if delay > 0:
            time.sleep(min(delay, 5000) / 1000.0)

    with app.app_context():
        db.create_all()
        if app.config.get("SEED_DEMO_DATA"):
            from .seed import seed_data
            seed_data()

    return app


def _register_jwt_loaders():
    from .models import User, TokenBlocklist

    @jwt.user_lookup_loader
    def load_user(jwt_header, jwt_payload):
        return db.session.get(User, jwt_payload["sub"])

    @jwt.token_in_blocklist_loader
    def check_if_token_revoked(jwt_header, jwt_payload):
        jti = jwt_payload["jti"]
        token = db.session.query(TokenBlocklist).filter_by(jti=jti).first()
        return token is not None

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"error": reason, "type": "Unauthorized"}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"error": reason, "type": "Unauthorized"}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"error": "Token has expired", "type": "Unauthorized"}), 401

    @jwt.revoked_token_loader
    def revoked_token(jwt_header, jwt_payload):
        return jsonify({"error": "Token has been revoked", "type": "Unauthorized"}), 401

    @jwt.user_lookup_error_loader
    def unknown_user(jwt_header, jwt_payload):
        return jsonify({"error": "User not found", "type": "Unauthorized"}), 401


def _register_error_handlers(app):

    @app.errorhandler(SchoolError)
    def handle_school_error(error):
        db.session.rollback()
        if error.status_code >= 500:
            app.logger.error("%s on %s %s: %s", type(error).__name__, request.method, request.path, error.message)
        else:
            app.logger.info("%s on %s %s: %s", type(error).__name__, request.method, request.path, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if error.code == 404:
            body = {"error": f"Resource not found: {request.path}", "type": "NotFoundError"}
        elif error.code == 405:
            body = {"error": f"Method {request.method} not allowed on {request.path}", "type": "OperationNotSupported"}
        else:
            body = {"error": error.description, "type": error.name}
        return jsonify(body), error.code

    @app.errorhandler(500)
    def handle_server_error(error):
        db.session.rollback()
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error", "type": "InternalServerError"}), 500
