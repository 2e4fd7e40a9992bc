from datetime import datetime
from flask import Blueprint, request, jsonify, current_app, make_response
from flask_jwt_extended import (
    create_access_token, jwt_required, get_current_user, get_jwt
)
from school_mis.extensions import limiter
from school_mis.models import TokenBlocklist
from school_mis.store import get_store
from utils.audit import log_event

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['POST'])
@limiter.limit("5 per minute", override_defaults=False)
def login():
    data = request.get_json(silent=True) or {}
    username = (data.get('username') or '').strip()
    password = data.get('password') or ''
    ip = request.remote_addr

    if not username:
        return jsonify({"error": "Username is required"}), 400

    user = get_store().users.first(name=username)

    if user and user.check_password(password):
        access_token = create_access_token(identity=user.id, additional_claims={"role": user.role.value})

        response = make_response(jsonify({"access_token": access_token, "user": user.to_dict()}))
        response.set_cookie(
            "access_token_cookie",
            access_token,
            max_age=int(current_app.config["JWT_ACCESS_TOKEN_EXPIRES"].total_seconds()),
            httponly=True,
            secure=current_app.config["JWT_COOKIE_SECURE"],
            samesite=current_app.config["JWT_COOKIE_SAMESITE"],
            path="/"
        )

        log_event("LOGIN_SUCCESS", user_id=user.id, ip=ip, description=f"{username} logged in")
        return response

    log_event("LOGIN_FAILED", ip=ip, description=f"Failed login attempt for {username}", level="WARNING")
    return jsonify({"error": "Invalid username or password"}), 401


@auth_bp.route('/me', methods=['GET'])
@jwt_required()
def me():
    return jsonify(get_current_user().to_dict()), 200


@auth_bp.route("/logout", methods=["POST"])
@jwt_required()
def logout():
    claims = get_jwt()
    user = get_current_user()
    store = get_store()

    with store.transaction():
        store.session.add(TokenBlocklist(
            jti=claims["jti"],
            token_type=claims.get("type", "access"),
            user_id=user.id,
            expires_at=datetime.utcfromtimestamp(claims["exp"]),
        ))

    response = make_response(jsonify({"message": "Successfully logged out"}))
    response.delete_cookie("access_token_cookie", path="/")

    log_event("LOGOUT", user_id=user.id, ip=request.remote_addr)
    return response
