"""
Domain operations.

Every mutating service takes ``(store, actor, data)`` and checks, in order:
the actor's role, the referenced records, then the domain rules. Only then
does it write, inside a single ``store.transaction()``.
"""
from school_mis.errors import AuthorizationError


def teacher_for(store, actor):
    """The Teacher record linked to the acting user's account."""
    teacher = store.teachers.first(user_id=actor.id) if actor is not None else None
    if teacher is None:
        raise AuthorizationError("Logged in user is not a recognized teacher.")
    return teacher
