from school_mis.errors import ValidationError
from school_mis.models import Student, Teacher, User, UserRole
from utils.access_control import authorize
from utils.validation import clean_text, parse_date


def _next_code(prefix, existing):
    """Next free ``S001``-style code given the codes already in use."""
    numbers = [
        int(code[len(prefix):]) for code in existing
        if code and code.startswith(prefix) and code[len(prefix):].isdigit()
    ]
    return f"{prefix}{(max(numbers, default=0) + 1):03d}"


def create_student(store, actor, data):
    authorize(actor, "students:create")

    name = clean_text(data, "name")
    class_name = clean_text(data, "class_name")
    admission_number = clean_text(data, "admission_number", required=False)
    date_of_birth = parse_date(data["date_of_birth"], "date_of_birth") if data.get("date_of_birth") else None
    parent_phone = clean_text(data, "parent_phone_number", required=False)

    if admission_number is None:
        admission_number = _next_code("S", [s.admission_number for s in store.students.all()])
    elif store.students.exists(admission_number=admission_number):
        raise ValidationError(f"Admission number {admission_number} is already in use.")

    with store.transaction():
        student = store.students.add(Student(
            name=name,
            admission_number=admission_number,
            class_name=class_name,
            date_of_birth=date_of_birth,
            parent_phone_number=parent_phone,
        ))
    return student


def create_teacher(store, actor, data):
    """Create a teacher together with the Teacher-role login account it uses."""
    authorize(actor, "teachers:create")

    name = clean_text(data, "name")
    employee_id = clean_text(data, "employee_id", required=False)
    class_in_charge = clean_text(data, "class_in_charge", required=False)
    subject_ids = data.get("subject_ids") or []
    if not isinstance(subject_ids, list):
        raise ValidationError("subject_ids must be a list")
    for subject_id in subject_ids:
        store.subjects.get_or_raise(subject_id, f"Subject {subject_id} not found")

    if store.users.exists(name=name):
        raise ValidationError(f"A user named {name} already exists.")
    if employee_id is None:
        employee_id = _next_code("T", [t.employee_id for t in store.teachers.all()])
    elif store.teachers.exists(employee_id=employee_id):
        raise ValidationError(f"Employee ID {employee_id} is already in use.")

    with store.transaction():
        user = store.users.add(User(name=name, role=UserRole.TEACHER))
        password = data.get("password")
        if password:
            user.set_password(password)
        teacher = store.teachers.add(Teacher(
            name=name,
            employee_id=employee_id,
            subject_ids=list(subject_ids),
            class_in_charge=class_in_charge,
            user_id=user.id,
        ))
    return teacher
