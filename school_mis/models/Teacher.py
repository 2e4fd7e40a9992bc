from datetime import datetime
from school_mis.extensions import db
from utils.serialization import to_dict
from .base import RequestStatus, id_column, enum_column


class Teacher(db.Model):
    __tablename__ = 'teachers'

    id = id_column("teach")
    name = db.Column(db.String(120), nullable=False)
    employee_id = db.Column(db.String(20), unique=True, nullable=False)
    subject_ids = db.Column(db.JSON, nullable=False, default=list)
    class_in_charge = db.Column(db.String(50), nullable=True)
    # Explicit link to the login account provisioned with the teacher
    user_id = db.Column(db.String(40), db.ForeignKey('users.id'), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user = db.relationship('User', backref=db.backref('teacher', uselist=False))
    leave_requests = db.relationship('LeaveRequest', back_populates='teacher', lazy=True)

    def to_dict(self):
        return to_dict(self, exclude=("created_at",))


class LeaveRequest(db.Model):
    __tablename__ = 'leave_requests'

    id = id_column("leave")
    teacher_id = db.Column(db.String(40), db.ForeignKey('teachers.id'), nullable=False)
    request_date = db.Column(db.Date, nullable=False)
    leave_start_date = db.Column(db.Date, nullable=False)
    leave_end_date = db.Column(db.Date, nullable=False)
    reason = db.Column(db.Text, nullable=False)
    status = enum_column(RequestStatus, nullable=False, default=RequestStatus.PENDING)
    responder_comment = db.Column(db.Text, nullable=True)
    responded_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=True)

    teacher = db.relationship('Teacher', back_populates='leave_requests')

    def to_dict(self):
        data = to_dict(self)
        data["teacher_name"] = self.teacher.name if self.teacher else None
        return data
