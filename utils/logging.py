from flask import request, current_app
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from utils import clock


def log_rate_limit_violation(request_limit):
    from school_mis.extensions import db
    from school_mis.models import AuditLog

    try:
        verify_jwt_in_request(optional=True)
        user_id = get_jwt_identity()
    except Exception:
        user_id = None

    log = AuditLog(
        user_id=user_id,
        action=f"RATE_LIMIT_EXCEEDED: {request.method} {request.path} ({request_limit.limit})",
        ip_address=request.remote_addr,
        timestamp=clock.now(),
    )
    db.session.add(log)
    db.session.commit()
    current_app.logger.warning("Rate limit exceeded for %s %s from %s",
                               request.method, request.path, request.remote_addr)
