# --- models/item.py ---
from models import db, BIGINT
from datetime import datetime


class ShopItem(db.Model):
    __tablename__ = "shop_item"
    __table_args__ = (
        db.CheckConstraint("price >= 0", name="ck_shop_item_price_non_negative"),
        db.CheckConstraint("available_count >= 0", name="ck_shop_item_available_count_non_negative"),
        db.Index("ix_shop_item_category", "category"),
    )

    id = db.Column(BIGINT, primary_key=True)

    # Core details
    title = db.Column(db.String(200), nullable=False)
    image = db.Column(db.String(500), nullable=True)              # URL of the image
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False)          # genre or category

    # Pricing
    price = db.Column(db.Float, nullable=False)

    # Inventory: units still available to sell; cart lines hold the rest
    available_count = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "image": self.image,
            "price": self.price,
            "description": self.description,
            "availableCount": self.available_count,
            "category": self.category,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<ShopItem id={self.id} title={self.title!r} available={self.available_count}>"
