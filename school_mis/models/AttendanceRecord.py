from school_mis.extensions import db
from utils.serialization import to_dict
from .base import AttendeeType, id_column, enum_column


class AttendanceRecord(db.Model):
    __tablename__ = 'attendance_records'

    id = id_column("att")
    # Student id or teacher id depending on user_type
    user_id = db.Column(db.String(40), nullable=False, index=True)
    user_type = enum_column(AttendeeType, nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)
    time_in = db.Column(db.String(5), nullable=False)  # HH:MM
    recorded_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=True)

    def to_dict(self):
        return to_dict(self)
