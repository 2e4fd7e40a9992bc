from school_mis.errors import AuthorizationError
from school_mis.models.base import UserRole

ADMIN = UserRole.ADMIN
TEACHER = UserRole.TEACHER
LIBRARIAN = UserRole.LIBRARIAN
STUDENT = UserRole.STUDENT
PRINCIPAL = UserRole.PRINCIPAL
DP = UserRole.DEPUTY_PRINCIPAL
REGISTRAR = UserRole.REGISTRAR
SECRETARY = UserRole.SECRETARY
ACADEMICS = UserRole.ACADEMICS_DEPT
HOD = UserRole.HOD

# view key -> (label, path, roles that see it)
VIEW_PERMISSIONS = {
    'dashboard':           ("Dashboard", "/dashboard", frozenset(UserRole)),
    'students':            ("Students", "/students", frozenset({ADMIN, TEACHER, REGISTRAR, PRINCIPAL, DP})),
    'teachers':            ("Teachers", "/teachers", frozenset({ADMIN, PRINCIPAL, DP})),
    'grades':              ("Grades", "/grades", frozenset({TEACHER})),
    'class-performance':   ("My Class Performance", "/reports/class-performance", frozenset({TEACHER})),
    'library':             ("Library", "/books", frozenset({ADMIN, LIBRARIAN, STUDENT, PRINCIPAL})),
    'inventory':           ("Inventory", "/inventory", frozenset({ADMIN, PRINCIPAL, SECRETARY})),
    'past-papers':         ("Past Papers", "/past-papers", frozenset({ADMIN, PRINCIPAL, TEACHER, STUDENT})),
    'discipline':          ("Discipline", "/suspensions", frozenset({PRINCIPAL, HOD, ACADEMICS, DP})),
    'performance-reports': ("Performance Reports", "/reports/performance", frozenset({PRINCIPAL, ACADEMICS})),
}

# action key -> (roles allowed, denial message)
ACTION_PERMISSIONS = {
    'students:create':       ({ADMIN, REGISTRAR, PRINCIPAL}, "You are not authorized to register students."),
    'teachers:create':       ({ADMIN, PRINCIPAL, DP}, "You are not authorized to add teachers."),
    'grades:submit':         ({TEACHER}, "Only teachers can submit grades."),
    'books:create':          ({ADMIN, LIBRARIAN, PRINCIPAL}, "You are not authorized to add new books."),
    'library:issue':         ({ADMIN, LIBRARIAN, PRINCIPAL}, "You are not authorized to issue books."),
    'library:return':        ({ADMIN, LIBRARIAN, PRINCIPAL}, "You are not authorized to receive returned books."),
    'inventory:create':      ({ADMIN, PRINCIPAL, SECRETARY}, "You are not authorized to add inventory items."),
    'inventory:issue':       ({ADMIN, PRINCIPAL, SECRETARY}, "You are not authorized to issue inventory."),
    'inventory:respond':     ({ADMIN, PRINCIPAL, SECRETARY}, "You are not authorized to respond to inventory requests."),
    'inventory:request':     ({TEACHER}, "Only teachers can request inventory."),
    'leave:request':         ({TEACHER}, "Only teachers can request leave."),
    'leave:respond':         ({PRINCIPAL}, "Only the Principal can respond to leave requests."),
    'attendance:record':     ({ADMIN, PRINCIPAL, DP, SECRETARY, TEACHER}, "You are not authorized to record attendance."),
    'past-papers:upload':    ({TEACHER}, "Only teachers can upload past papers."),
    'timec-files:upload':    ({ACADEMICS}, "Only the Academics Department can upload TIMEC files."),
    'exercise-books:issue':  ({HOD}, "Only HODs can issue exercise books."),
    'suspensions:create':    ({PRINCIPAL, DP, HOD, ACADEMICS}, "You are not authorized to suspend students."),
    'black-book:create':     ({TEACHER}, "Only teachers can add students to the Black Book."),
    'black-book:resolve':    ({DP, PRINCIPAL}, "You are not authorized to resolve Black Book cases."),
}

# collection -> (views that show it, actions that need it); readers are derived from both tables
COLLECTION_SOURCES = {
    'users':                (("teachers",), ("teachers:create",)),
    'students':             (("students", "grades", "class-performance", "discipline", "performance-reports"),
                             ("students:create", "library:issue", "exercise-books:issue", "black-book:create",
                              "attendance:record")),
    'teachers':             (("teachers",), ("teachers:create", "inventory:issue", "leave:respond", "attendance:record")),
    'subjects':             (("grades", "teachers", "past-papers", "performance-reports"),
                             ("teachers:create", "past-papers:upload", "exercise-books:issue")),
    'grades':               (("grades", "class-performance", "performance-reports"), ()),
    'books':                (("library",), ("books:create", "library:issue")),
    'transactions':         ((), ("library:issue", "library:return")),
    'inventory':            (("inventory",), ("inventory:request", "inventory:issue")),
    'issued-inventory':     (("inventory",), ("inventory:issue",)),
    'inventory-requests':   (("inventory",), ("inventory:request", "inventory:respond")),
    'leave-requests':       ((), ("leave:request", "leave:respond")),
    'attendance':           (("students", "teachers"), ("attendance:record",)),
    'past-papers':          (("past-papers",), ("past-papers:upload",)),
    'timec-files':          (("performance-reports",), ("timec-files:upload",)),
    'exercise-books':       ((), ("exercise-books:issue",)),
    'suspensions':          (("discipline",), ("suspensions:create", "library:issue")),
    'black-book-entries':   (("discipline",), ("black-book:create", "black-book:resolve")),
}


def _role_of(actor_or_role):
    return getattr(actor_or_role, "role", actor_or_role)


def can_view(role, view):
    entry = VIEW_PERMISSIONS.get(view)
    return entry is not None and _role_of(role) in entry[2]


def visible_views(role):
    """Navigation entries for a role, in table order."""
    return [
        {"key": key, "label": label, "path": path}
        for key, (label, path, roles) in VIEW_PERMISSIONS.items()
        if _role_of(role) in roles
    ]


def is_allowed(role, action):
    entry = ACTION_PERMISSIONS.get(action)
    return entry is not None and _role_of(role) in entry[0]


def allowed_actions(role):
    return [action for action in ACTION_PERMISSIONS if is_allowed(role, action)]


def authorize(actor, action):
    if actor is None:
        raise AuthorizationError("You must be logged in to perform this action.")
    if not is_allowed(actor, action):
        _, message = ACTION_PERMISSIONS.get(action, (None, "You are not authorized to perform this action."))
        raise AuthorizationError(message)


def require_view(actor, view):
    if actor is None or not can_view(actor, view):
        raise AuthorizationError("You do not have access to this page.")


def can_read(role, collection):
    entry = COLLECTION_SOURCES.get(collection)
    if entry is None:
        return False
    views, actions = entry
    return any(can_view(role, v) for v in views) or any(is_allowed(role, a) for a in actions)


def require_read(actor, collection):
    if actor is None or not can_read(actor, collection):
        raise AuthorizationError("You do not have access to these records.")
