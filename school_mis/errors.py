"""
Typed errors raised by the services and the store.

Each error carries a human-readable message and the HTTP status the API
answers with. Views never catch them: the handlers registered in
``create_app`` turn them into ``{"error": ..., "type": ...}`` responses.
"""


class SchoolError(Exception):
    status_code = 400

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"error": self.message, "type": self.__class__.__name__}


class AuthorizationError(SchoolError):
    """The actor's role forbids the requested action."""
    status_code = 403


class ValidationError(SchoolError):
    """Missing or malformed input, or a domain invariant would be violated."""
    status_code = 400


class NotFoundError(SchoolError):
    status_code = 404


class OperationNotSupported(SchoolError):
    status_code = 405


class TransientError(SchoolError):
    """Backend temporarily unavailable; the caller may retry."""
    status_code = 503
