from school_mis.extensions import db
from utils.serialization import to_dict
from .base import UserRole, id_column, enum_column


class PastPaper(db.Model):
    __tablename__ = 'past_papers'

    id = id_column("pp")
    subject_id = db.Column(db.String(40), db.ForeignKey('subjects.id'), nullable=False)
    class_name = db.Column(db.String(50), nullable=False)
    term = db.Column(db.String(50), nullable=False)
    year = db.Column(db.Integer, nullable=False)
    file_name = db.Column(db.String(255), nullable=False)
    file_content = db.Column(db.LargeBinary, nullable=False)
    uploaded_by_id = db.Column(db.String(40), db.ForeignKey('teachers.id'), nullable=False)
    upload_date = db.Column(db.Date, nullable=False)

    subject = db.relationship('Subject')
    uploaded_by = db.relationship('Teacher')

    def to_dict(self, include_content=True):
        data = to_dict(self, include_binary=include_content)
        data["subject_name"] = self.subject.name if self.subject else None
        data["uploaded_by_name"] = self.uploaded_by.name if self.uploaded_by else None
        return data


class TimecFile(db.Model):
    __tablename__ = 'timec_files'

    id = id_column("timec")
    title = db.Column(db.String(255), nullable=False)
    file_name = db.Column(db.String(255), nullable=False)
    file_content = db.Column(db.LargeBinary, nullable=False)
    uploaded_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=False)
    uploaded_by_role = enum_column(UserRole, nullable=False)
    upload_date = db.Column(db.Date, nullable=False)

    uploaded_by = db.relationship('User')

    def to_dict(self, include_content=True):
        data = to_dict(self, include_binary=include_content)
        data["uploader_name"] = self.uploaded_by.name if self.uploaded_by else None
        return data
