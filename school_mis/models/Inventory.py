from school_mis.extensions import db
from utils.serialization import to_dict
from .base import InventoryCategory, RequestStatus, id_column, enum_column


class InventoryItem(db.Model):
    __tablename__ = 'inventory_items'

    id = id_column("inv")
    name = db.Column(db.String(120), nullable=False)
    category = enum_column(InventoryCategory, nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=0)
    min_stock_level = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.CheckConstraint('quantity >= 0', name='ck_inventory_quantity_non_negative'),
    )

    @property
    def is_low_stock(self):
        return self.quantity <= self.min_stock_level

    def to_dict(self):
        data = to_dict(self)
        data["is_low_stock"] = self.is_low_stock
        return data


class IssuedInventory(db.Model):
    __tablename__ = 'issued_inventory'

    id = id_column("iss")
    item_id = db.Column(db.String(40), db.ForeignKey('inventory_items.id'), nullable=False)
    teacher_id = db.Column(db.String(40), db.ForeignKey('teachers.id'), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    date = db.Column(db.Date, nullable=False)
    notes = db.Column(db.Text, nullable=True)

    item = db.relationship('InventoryItem')
    teacher = db.relationship('Teacher')

    def to_dict(self):
        data = to_dict(self)
        data["item_name"] = self.item.name if self.item else None
        data["teacher_name"] = self.teacher.name if self.teacher else None
        return data


class InventoryRequest(db.Model):
    __tablename__ = 'inventory_requests'

    id = id_column("req")
    teacher_id = db.Column(db.String(40), db.ForeignKey('teachers.id'), nullable=False)
    item_id = db.Column(db.String(40), db.ForeignKey('inventory_items.id'), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    status = enum_column(RequestStatus, nullable=False, default=RequestStatus.PENDING)
    request_date = db.Column(db.Date, nullable=False)
    rejection_reason = db.Column(db.Text, nullable=True)
    responded_by_id = db.Column(db.String(40), db.ForeignKey('users.id'), nullable=True)

    item = db.relationship('InventoryItem')
    teacher = db.relationship('Teacher')

    def to_dict(self):
        data = to_dict(self)
        data["item_name"] = self.item.name if self.item else None
        data["teacher_name"] = self.teacher.name if self.teacher else None
        return data
