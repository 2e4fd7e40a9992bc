from school_mis.extensions import db
from utils.serialization import to_dict
from .base import id_column


class ExerciseBookStock(db.Model):
    __tablename__ = 'exercise_book_stock'

    id = id_column("ex-stock")
    subject_id = db.Column(db.String(40), db.ForeignKey('subjects.id'), unique=True, nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=0)
    last_issued_date = db.Column(db.Date, nullable=True)

    subject = db.relationship('Subject')

    __table_args__ = (
        db.CheckConstraint('quantity >= 0', name='ck_exercise_stock_non_negative'),
    )

    def to_dict(self):
        data = to_dict(self)
        data["subject_name"] = self.subject.name if self.subject else None
        return data


class ExerciseBookIssue(db.Model):
    __tablename__ = 'exercise_book_issues'

    id = id_column("ex-issue")
    student_id = db.Column(db.String(40), db.ForeignKey('students.id'), nullable=False)
    student_name = db.Column(db.String(120), nullable=False)  # snapshot at issue time
    subject_id = db.Column(db.String(40), db.ForeignKey('subjects.id'), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    issued_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=False)
    issue_date = db.Column(db.Date, nullable=False)

    def to_dict(self):
        return to_dict(self)
