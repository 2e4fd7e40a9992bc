from school_mis.extensions import db
from utils import clock
from utils.serialization import to_dict
from .base import SuspensionStatus, BlackBookStatus, id_column, enum_column


class SuspensionRecord(db.Model):
    __tablename__ = 'suspension_records'

    id = id_column("susp")
    student_id = db.Column(db.String(40), db.ForeignKey('students.id'), nullable=False, index=True)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    reason = db.Column(db.Text, nullable=False)
    punishment = db.Column(db.Text, nullable=True)
    issued_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=False)

    student = db.relationship('Student')

    @property
    def status(self):
        # Derived on every read: a suspension completes once its end date has passed.
        if self.end_date < clock.today():
            return SuspensionStatus.COMPLETED
        return SuspensionStatus.ACTIVE

    @property
    def is_active(self):
        return self.status is SuspensionStatus.ACTIVE

    @property
    def days_remaining(self):
        return max((self.end_date - clock.today()).days, 0)

    def to_dict(self):
        data = to_dict(self)
        data["status"] = self.status.value
        data["days_remaining"] = self.days_remaining
        data["student_name"] = self.student.name if self.student else None
        data["student_class"] = self.student.class_name if self.student else None
        return data


class BlackBookEntry(db.Model):
    __tablename__ = 'black_book_entries'

    id = id_column("bb")
    student_id = db.Column(db.String(40), db.ForeignKey('students.id'), nullable=False, index=True)
    reported_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=False)
    reason = db.Column(db.Text, nullable=False)
    report_date = db.Column(db.Date, nullable=False)
    status = enum_column(BlackBookStatus, nullable=False, default=BlackBookStatus.OPEN)
    resolved_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=True)
    resolution_notes = db.Column(db.Text, nullable=True)
    resolution_date = db.Column(db.Date, nullable=True)

    student = db.relationship('Student')
    reported_by = db.relationship('User', foreign_keys=[reported_by_id])
    resolved_by = db.relationship('User', foreign_keys=[resolved_by_id])

    def to_dict(self):
        data = to_dict(self)
        data["student_name"] = self.student.name if self.student else None
        data["student_class"] = self.student.class_name if self.student else None
        data["reported_by_name"] = self.reported_by.name if self.reported_by else None
        data["resolved_by_name"] = self.resolved_by.name if self.resolved_by else None
        return data
