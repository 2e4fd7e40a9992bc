import enum
import uuid
from school_mis.extensions import db


def new_id(prefix):
    return f"{prefix}-{uuid.uuid4().hex[:10]}"


def id_column(prefix):
    return db.Column(db.String(40), primary_key=True, default=lambda: new_id(prefix))


def enum_column(enum_class, **kwargs):
    """Enum column persisted by value ("Deputy Principal"), not by member name."""
    return db.Column(
        db.Enum(enum_class, values_callable=lambda members: [m.value for m in members],
                name=enum_class.__name__.lower(), validate_strings=True),
        **kwargs
    )


class UserRole(enum.Enum):
    ADMIN = "Administrator"
    TEACHER = "Teacher"
    LIBRARIAN = "Librarian"
    STUDENT = "Student"
    PRINCIPAL = "Principal"
    DEPUTY_PRINCIPAL = "Deputy Principal"
    REGISTRAR = "Registrar"
    SECRETARY = "Secretary"
    ACADEMICS_DEPT = "Academics Department"
    HOD = "Head of Department"


class InventoryCategory(enum.Enum):
    UNIFORM = "Uniform"
    LAB_EQUIPMENT = "Lab Equipment"
    SPORTS_ITEM = "Sports Item"
    STATIONERY = "Stationery"
    TEACHING_MATERIAL = "Teaching Material"
    EXERCISE_BOOKS = "Exercise Books"


class RequestStatus(enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class SuspensionStatus(enum.Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"


class BlackBookStatus(enum.Enum):
    OPEN = "Open"
    RESOLVED = "Resolved"


class AttendeeType(enum.Enum):
    STUDENT = "student"
    TEACHER = "teacher"


RECOMMENDED_TERMS = (
    "Term 1 Midterm", "Term 1 Endterm",
    "Term 2 Midterm", "Term 2 Endterm",
    "Term 3 Midterm", "Term 3 Endterm",
)

SUSPENSION_LENGTHS = (3, 7, 14, 21)
