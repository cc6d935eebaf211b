# --- models/user.py ---
from models import db, BIGINT
from datetime import datetime


class User(db.Model):
    __tablename__ = "shop_user"

    id = db.Column(BIGINT, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(128), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=True)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    cart_lines = db.relationship(
        "CartLine",
        backref="user",
        cascade="all, delete-orphan",
        order_by="CartLine.id",
        lazy=True,
    )
    orders = db.relationship(
        "Order",
        backref="user",
        cascade="all, delete-orphan",
        order_by="Order.id",
        lazy=True,
    )

    def cart_line_for(self, item_id):
        for line in self.cart_lines:
            if line.item_id == item_id:
                return line
        return None

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "dateOfBirth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "isAdmin": bool(self.is_admin),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "cart": [line.to_dict() for line in self.cart_lines],
        }

    def __repr__(self):
        return f"<User id={self.id} email={self.email} admin={self.is_admin}>"
