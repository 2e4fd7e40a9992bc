from datetime import datetime
from school_mis.extensions import db
from utils.serialization import to_dict
from .base import id_column


class Student(db.Model):
    __tablename__ = 'students'

    id = id_column("stud")
    name = db.Column(db.String(120), nullable=False)
    admission_number = db.Column(db.String(20), unique=True, nullable=False)
    class_name = db.Column(db.String(50), nullable=False, index=True)
    date_of_birth = db.Column(db.Date, nullable=True)
    parent_phone_number = db.Column(db.String(20), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    grades = db.relationship('Grade', back_populates='student', lazy=True)

    def to_dict(self):
        return to_dict(self, exclude=("created_at",))


class Subject(db.Model):
    __tablename__ = 'subjects'

    id = id_column("subj")
    name = db.Column(db.String(100), nullable=False)
    code = db.Column(db.String(20), unique=True, nullable=False)

    def to_dict(self):
        return to_dict(self)


class Grade(db.Model):
    __tablename__ = 'grades'

    id = id_column("grade")
    student_id = db.Column(db.String(40), db.ForeignKey('students.id'), nullable=False)
    subject_id = db.Column(db.String(40), db.ForeignKey('subjects.id'), nullable=False)
    score = db.Column(db.Float, nullable=False)
    term = db.Column(db.String(50), nullable=False, index=True)
    year = db.Column(db.Integer, nullable=False, default=lambda: datetime.utcnow().year)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    student = db.relationship('Student', back_populates='grades')
    subject = db.relationship('Subject')

    __table_args__ = (
        db.UniqueConstraint('student_id', 'subject_id', 'term', name='uq_student_subject_term'),
        db.CheckConstraint('score >= 0 AND score <= 100', name='ck_grade_score_range'),
    )

    def to_dict(self):
        return to_dict(self, exclude=("updated_at",))
