"""
Inventory ledger: the ``available_count`` of each item.

Cart operations reserve stock when units go into a cart and release it when
they come back out. Nothing here commits; the caller's unit of work does.
"""
import logging

from models import db
from models.cart import CartLine
from models.item import ShopItem
from app.services.errors import ItemNotFound, InsufficientStock, InvalidQuantity

logger = logging.getLogger(__name__)


def get_item(item_id) -> ShopItem:
    item = db.session.get(ShopItem, item_id)
    if item is None:
        raise ItemNotFound()
    return item


def _locked_item(item_id) -> ShopItem:
    item = (
        ShopItem.query.filter_by(id=item_id)
        .with_for_update(of=ShopItem)
        .populate_existing()
        .first()
    )
    if item is None:
        raise ItemNotFound()
    return item


def _check_quantity(quantity):
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
        raise InvalidQuantity()


def reserve(item_id, quantity: int) -> ShopItem:
    """Take ``quantity`` units out of stock.

    Raises ItemNotFound, InvalidQuantity or InsufficientStock without touching
    the item.
    """
    _check_quantity(quantity)
    item = _locked_item(item_id)
    if item.available_count < quantity:
        raise InsufficientStock()
    item.available_count -= quantity
    logger.info("Reserved %s unit(s) of item %s, %s left", quantity, item.id, item.available_count)
    return item


def release(item_id, quantity: int) -> ShopItem:
    """Put ``quantity`` units back into stock. There is no upper bound."""
    _check_quantity(quantity)
    item = _locked_item(item_id)
    item.available_count += quantity
    logger.info("Released %s unit(s) of item %s, %s left", quantity, item.id, item.available_count)
    return item


def stock_report():
    """Available stock next to the units currently held in carts, per item."""
    held = dict(
        db.session.query(CartLine.item_id, db.func.sum(CartLine.quantity))
        .group_by(CartLine.item_id)
        .all()
    )
    return [
        {
            "itemId": item.id,
            "title": item.title,
            "availableCount": item.available_count,
            "reserved": int(held.get(item.id) or 0),
        }
        for item in ShopItem.query.order_by(ShopItem.id).all()
    ]
