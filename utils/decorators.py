from functools import wraps
from flask_jwt_extended import get_current_user, verify_jwt_in_request
from utils.access_control import require_view, require_read


def view_required(view):
    """
    Restrict an endpoint to roles that can see the given view.
    Usage: @view_required("performance-reports")
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            require_view(get_current_user(), view)
            return fn(*args, **kwargs)
        return wrapper
    return decorator


def read_required(collection):
    """Restrict a collection read to roles whose views or actions use it."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            require_read(get_current_user(), collection)
            return fn(*args, **kwargs)
        return wrapper
    return decorator
