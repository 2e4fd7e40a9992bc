from datetime import date, timedelta
from school_mis.extensions import db
from school_mis.models import (
    User, UserRole, Student, Teacher, Subject, Grade, Book, LibraryTransaction,
    InventoryItem, InventoryCategory, IssuedInventory, InventoryRequest, RequestStatus,
    LeaveRequest, AttendanceRecord, AttendeeType, PastPaper, TimecFile, ExerciseBookStock
)
from utils import clock

DUMMY_PDF = b"%PDF-1.4\n1 0 obj <</Type /Catalog>> endobj\n% Past Paper\n%%EOF\n"
DUMMY_DOC = b"TIMEC Document"

SUBJECTS = [
    ('subj-1', 'Mathematics', 'MATH101'),
    ('subj-2', 'English', 'ENG101'),
    ('subj-3', 'Kiswahili', 'SWA101'),
    ('subj-4', 'Physics', 'PHY201'),
    ('subj-5', 'Chemistry', 'CHEM201'),
    ('subj-6', 'Biology', 'BIO201'),
    ('subj-7', 'History', 'HIST201'),
    ('subj-8', 'Geography', 'GEO201'),
    ('subj-9', 'Computer Studies', 'COMP101'),
]

USERS = [
    ('user-1', 'Joseph Maina', UserRole.PRINCIPAL),
    ('user-dp-1', 'Mrs. Susan Okech', UserRole.DEPUTY_PRINCIPAL),
    ('user-2', 'Mr. Admin', UserRole.ADMIN),
    ('user-3', 'Mr. John Doe', UserRole.TEACHER),
    ('user-4', 'Mrs. Jane Smith', UserRole.TEACHER),
    ('user-5', 'Mr. Peter Jones', UserRole.TEACHER),
    ('user-6', 'Mr. Muchangi', UserRole.TEACHER),
    ('user-7', 'Alice Johnson', UserRole.STUDENT),
    ('user-8', 'Bob Williams', UserRole.STUDENT),
    ('user-9', 'Mr. David Korir', UserRole.LIBRARIAN),
    ('user-10', 'Mrs. Mary Akinyi', UserRole.REGISTRAR),
    ('user-11', 'Ms. Fatuma Ali', UserRole.SECRETARY),
    ('user-12', 'Mr. Nzuki', UserRole.ACADEMICS_DEPT),
    ('user-hod-1', 'Mr. James Maina', UserRole.HOD),
    ('user-13', 'Madam Kamau', UserRole.TEACHER),
]

# id, name, employee id, subjects, class in charge, login account
TEACHERS = [
    ('teach-1', 'Mr. John Doe', 'T001', ['subj-1', 'subj-4'], 'Form 4', 'user-3'),
    ('teach-2', 'Mrs. Jane Smith', 'T002', ['subj-2', 'subj-3'], None, 'user-4'),
    ('teach-3', 'Mr. Peter Jones', 'T003', ['subj-5', 'subj-6'], 'Form 3', 'user-5'),
    ('teach-4', 'Mr. Muchangi', 'T004', ['subj-7', 'subj-8'], None, 'user-6'),
    ('teach-5', 'Madam Kamau', 'T005', ['subj-9'], None, 'user-13'),
]

STUDENTS = [
    ('stud-1', 'Alice Johnson', 'S001', 'Form 4', date(2006, 5, 15), '0722123456'),
    ('stud-2', 'Bob Williams', 'S002', 'Form 4', date(2006, 3, 22), '0723987654'),
    ('stud-3', 'Charlie Brown', 'S003', 'Form 4', date(2006, 8, 10), '0724112233'),
    ('stud-4', 'Diana Miller', 'S004', 'Form 3', date(2007, 1, 30), '0725445566'),
    ('stud-5', 'Ethan Davis', 'S005', 'Form 3', date(2007, 7, 19), '0726778899'),
    ('stud-6', 'Fiona Garcia', 'S006', 'Form 2', date(2008, 4, 5), '0727101112'),
    ('stud-7', 'George Rodriguez', 'S007', 'Form 1', date(2009, 11, 12), '0728131415'),
]

GRADES = [
    ('grade-1', 'stud-1', 'subj-1', 85),
    ('grade-2', 'stud-1', 'subj-2', 92),
    ('grade-3', 'stud-2', 'subj-1', 78),
    ('grade-4', 'stud-2', 'subj-2', 88),
    ('grade-5', 'stud-4', 'subj-5', 75),
    ('grade-6', 'stud-4', 'subj-6', 81),
]

TEACHER_DAYS_THIS_MONTH = {
    'teach-1': [1, 2, 3, 4, 5, 8, 9, 10, 11, 12, 15, 16, 17, 18, 19, 22],
    'teach-2': [1, 2, 3, 5, 8, 9, 10, 11, 12, 15, 16, 18, 19, 22],
}
TEACHER_DAYS_LAST_MONTH = {
    'teach-1': [3, 4, 5, 6, 7, 10, 11, 12, 13, 14, 17, 18, 19, 20, 21],
    'teach-2': [3, 4, 5, 6, 7, 10, 11, 13, 14, 17, 18, 19, 20, 21, 24, 25, 26, 27, 28],
    'teach-3': [3, 4, 6, 7, 10, 11, 12, 13, 14, 17, 18, 19, 21],
    'teach-4': [4, 5, 6, 7, 10, 11, 12, 13, 17, 18, 19, 20, 21, 24, 25, 26],
}
STUDENT_DAYS_THIS_MONTH = {
    'stud-1': [1, 2, 3, 4, 5, 8, 9, 10, 11, 12, 15, 16, 17, 18, 19, 22],
    'stud-4': [1, 2, 4, 5, 8, 10, 11, 16, 17, 19, 22],
}


def _attendance(user_id, user_type, year, month, days, until, time_in="07:30"):
    records = []
    for day in days:
        try:
            when = date(year, month, day)
        except ValueError:
            continue
        if when <= until:
            records.append(AttendanceRecord(user_id=user_id, user_type=user_type, date=when, time_in=time_in))
    return records


def seed_data():
    """Load the demo school. Does nothing if users already exist."""
    if db.session.query(User).first() is not None:
        return

    today = clock.today()
    last_month_end = today.replace(day=1) - timedelta(days=1)

    db.session.add_all(Subject(id=sid, name=name, code=code) for sid, name, code in SUBJECTS)
    db.session.add_all(User(id=uid, name=name, role=role) for uid, name, role in USERS)
    db.session.flush()

    db.session.add_all(
        Teacher(id=tid, name=name, employee_id=emp, subject_ids=subjects, class_in_charge=klass, user_id=uid)
        for tid, name, emp, subjects, klass, uid in TEACHERS
    )
    db.session.add_all(
        Student(id=sid, name=name, admission_number=adm, class_name=klass, date_of_birth=dob, parent_phone_number=phone)
        for sid, name, adm, klass, dob, phone in STUDENTS
    )
    db.session.flush()

    db.session.add_all(
        Grade(id=gid, student_id=stud, subject_id=subj, score=score, term='Term 2 Endterm', year=2024)
        for gid, stud, subj, score in GRADES
    )

    db.session.add_all([
        Book(id='book-1', title="A Doll's House", author='Henrik Ibsen', isbn='978-0486270623', quantity=10, available=8),
        Book(id='book-2', title='The River and the Source', author='Margaret Ogola', isbn='978-9966882033',
             quantity=15, available=15),
        Book(id='book-3', title='Physics for Secondary Schools', author='KIE', isbn='978-9966100123',
             quantity=20, available=18),
    ])
    db.session.flush()
    db.session.add_all([
        LibraryTransaction(id='txn-1', book_id='book-1', student_id='stud-1',
                           issue_date=date(2024, 7, 10), due_date=date(2024, 7, 24)),
        LibraryTransaction(id='txn-2', book_id='book-3', student_id='stud-2',
                           issue_date=date(2024, 7, 12), due_date=date(2024, 7, 26)),
        LibraryTransaction(id='txn-3', book_id='book-1', student_id='stud-4',
                           issue_date=date(2024, 6, 1), due_date=date(2024, 6, 15), return_date=date(2024, 6, 14)),
        LibraryTransaction(id='txn-4', book_id='book-2', student_id='stud-5',
                           issue_date=date(2024, 5, 20), due_date=date(2024, 6, 3)),
    ])

    db.session.add_all([
        InventoryItem(id='inv-1', name='Lab Coats', category=InventoryCategory.LAB_EQUIPMENT, quantity=50, min_stock_level=10),
        InventoryItem(id='inv-2', name='Football', category=InventoryCategory.SPORTS_ITEM, quantity=8, min_stock_level=5),
        InventoryItem(id='inv-3', name='Chalk Box', category=InventoryCategory.TEACHING_MATERIAL, quantity=100,
                      min_stock_level=20),
        InventoryItem(id='inv-4', name='Ream Papers', category=InventoryCategory.STATIONERY, quantity=4, min_stock_level=10),
    ])
    db.session.flush()
    db.session.add_all([
        IssuedInventory(id='iss-1', item_id='inv-3', teacher_id='teach-1', quantity=2, date=date(2024, 7, 18),
                        notes='For Form 4 Maths'),
        IssuedInventory(id='iss-2', item_id='inv-1', teacher_id='teach-3', quantity=10, date=date(2024, 7, 15),
                        notes='For Chem practicals'),
        InventoryRequest(id='req-1', teacher_id='teach-1', item_id='inv-4', quantity=5,
                         status=RequestStatus.PENDING, request_date=date(2024, 7, 22)),
        InventoryRequest(id='req-2', teacher_id='teach-2', item_id='inv-3', quantity=1,
                         status=RequestStatus.APPROVED, request_date=date(2024, 7, 20)),
        LeaveRequest(id='leave-1', teacher_id='teach-2', request_date=date(2024, 7, 20),
                     leave_start_date=date(2024, 8, 1), leave_end_date=date(2024, 8, 5),
                     reason='Family event', status=RequestStatus.PENDING),
        LeaveRequest(id='leave-2', teacher_id='teach-4', request_date=date(2024, 7, 15),
                     leave_start_date=date(2024, 7, 22), leave_end_date=date(2024, 7, 23),
                     reason='Medical appointment', status=RequestStatus.APPROVED, responder_comment='Approved'),
    ])

    attendance = [
        AttendanceRecord(user_id='stud-1', user_type=AttendeeType.STUDENT, date=today, time_in='07:30'),
        AttendanceRecord(user_id='stud-2', user_type=AttendeeType.STUDENT, date=today, time_in='07:35'),
        AttendanceRecord(user_id='teach-1', user_type=AttendeeType.TEACHER, date=today, time_in='07:15'),
        AttendanceRecord(user_id='teach-2', user_type=AttendeeType.TEACHER, date=today, time_in='07:20'),
    ]
    for teacher_id, days in TEACHER_DAYS_THIS_MONTH.items():
        attendance += _attendance(teacher_id, AttendeeType.TEACHER, today.year, today.month, days, today, "07:25")
    for teacher_id, days in TEACHER_DAYS_LAST_MONTH.items():
        attendance += _attendance(teacher_id, AttendeeType.TEACHER, last_month_end.year, last_month_end.month,
                                  days, last_month_end, "07:25")
    for student_id, days in STUDENT_DAYS_THIS_MONTH.items():
        attendance += _attendance(student_id, AttendeeType.STUDENT, today.year, today.month, days, today, "07:40")
    db.session.add_all(attendance)

    db.session.add_all([
        PastPaper(id='pp-1', subject_id='subj-1', class_name='Form 4', term='Term 1 Midterm', year=2023,
                  file_name='math-f4-t1-mid-2023.pdf', file_content=DUMMY_PDF, uploaded_by_id='teach-1',
                  upload_date=date(2023, 4, 15)),
        PastPaper(id='pp-2', subject_id='subj-4', class_name='Form 4', term='Term 2 Endterm', year=2023,
                  file_name='phy-f4-t2-end-2023.pdf', file_content=DUMMY_PDF, uploaded_by_id='teach-1',
                  upload_date=date(2023, 8, 20)),
        PastPaper(id='pp-3', subject_id='subj-2', class_name='Form 3', term='Term 2 Endterm', year=2023,
                  file_name='eng-f3-t2-end-2023.pdf', file_content=DUMMY_PDF, uploaded_by_id='teach-2',
                  upload_date=date(2023, 8, 21)),
        TimecFile(id='timec-1', title='2024 Curriculum Review Minutes', file_name='Curriculum_Review_2024.doc',
                  file_content=DUMMY_DOC, uploaded_by_id='user-12', uploaded_by_role=UserRole.ACADEMICS_DEPT,
                  upload_date=date(2024, 7, 20)),
    ])

    db.session.add_all(
        ExerciseBookStock(id=f'ex-stock-{sid}', subject_id=sid, quantity=500) for sid, _, _ in SUBJECTS
    )

    db.session.commit()
