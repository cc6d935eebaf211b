from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from models import db, BIGINT
from datetime import datetime


class Order(db.Model):
    __tablename__ = "shop_order"
    __table_args__ = (
        db.Index("ix_shop_order_user_created", "user_id", "created_at"),
    )
    id = Column(BIGINT, primary_key=True)
    user_id = Column(BIGINT, ForeignKey("shop_user.id"), nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)
    shipping_address = Column(String(255), nullable=False)
    shipping_city = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    items = db.relationship(
        "OrderItem",
        backref="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
        lazy=True,
    )

    def to_dict(self):
        return {
            "id": self.id,
            "items": [oi.to_dict() for oi in self.items],
            "totalAmount": float(self.total_amount),
            "shippingAddress": {
                "address": self.shipping_address,
                "city": self.shipping_city,
            },
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class OrderItem(db.Model):
    __tablename__ = "order_item"
    id = db.Column(BIGINT, primary_key=True)
    order_id = db.Column(BIGINT, db.ForeignKey("shop_order.id"), nullable=False)
    item_id = db.Column(BIGINT, nullable=False)

    # Snapshot taken at checkout
    title = db.Column(db.String(200), nullable=False)
    price = db.Column(db.Numeric(12, 4), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)

    def to_dict(self):
        return {
            "itemId": self.item_id,
            "title": self.title,
            "quantity": self.quantity,
            "price": float(self.price),
        }
