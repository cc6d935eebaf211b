import re
from typing import List, Optional

from models import db
from models.item import ShopItem
from app.services.errors import ItemNotFound
from app.services.inventory import get_item

PRICE_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)?$")

ITEM_FIELDS = ("title", "image", "price", "description", "available_count", "category")


def is_valid_price(value) -> bool:
    return value is not None and bool(PRICE_PATTERN.match(str(value)))


def search_items(
    title: Optional[str] = None,
    description: Optional[str] = None,
    category: Optional[str] = None,
    min_price=None,
    max_price=None,
    category_exact: bool = True,
) -> List[ShopItem]:
    """Filter the catalog. Malformed price bounds are ignored."""
    query = ShopItem.query
    if title:
        query = query.filter(ShopItem.title.icontains(title, autoescape=True))
    if description:
        query = query.filter(ShopItem.description.icontains(description, autoescape=True))
    if category:
        if category_exact:
            query = query.filter(ShopItem.category == category)
        else:
            query = query.filter(ShopItem.category.icontains(category, autoescape=True))
    if is_valid_price(min_price):
        query = query.filter(ShopItem.price >= float(min_price))
    if is_valid_price(max_price):
        query = query.filter(ShopItem.price <= float(max_price))
    return query.order_by(ShopItem.id).all()


def create_item(data: dict) -> ShopItem:
    item = ShopItem(**{k: v for k, v in data.items() if k in ITEM_FIELDS})
    db.session.add(item)
    db.session.flush()
    return item


def update_item(item_id, changes: dict) -> ShopItem:
    item = get_item(item_id)
    for key, value in changes.items():
        if key in ITEM_FIELDS:
            setattr(item, key, value)
    db.session.flush()
    return item


def delete_item(item_id) -> None:
    item = db.session.get(ShopItem, item_id)
    if item is None:
        raise ItemNotFound()
    db.session.delete(item)
    db.session.flush()
