from models import db, BIGINT
from datetime import datetime


class CartLine(db.Model):
    __tablename__ = "cart_line"
    __table_args__ = (
        db.UniqueConstraint("user_id", "item_id", name="uq_cart_line_user_item"),
        db.CheckConstraint("quantity >= 1", name="ck_cart_line_quantity_positive"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(BIGINT, db.ForeignKey("shop_user.id"), nullable=False)
    # No FK: items may be deleted while still referenced by a cart line
    item_id = db.Column(BIGINT, nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=1)
    added_at = db.Column(db.DateTime, default=datetime.utcnow)
    last_updated = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {"itemId": self.item_id, "quantity": self.quantity}

    def __repr__(self):
        return f"<CartLine user={self.user_id} item={self.item_id} qty={self.quantity}>"
