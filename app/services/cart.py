"""
Cart aggregate.

A user holds at most one line per item. Every change to a line quantity is
paired with a ledger reserve/release so that stock plus all cart reservations
stays constant.
"""
import logging
from typing import List

from models import db
from models.cart import CartLine
from models.item import ShopItem
from models.user import User
from app.auth.session import ActingUser
from app.services import inventory
from app.services.errors import (
    DuplicateLine,
    InvalidDecrease,
    InvalidQuantity,
    ItemNotFound,
    NotInCart,
    UserNotFound,
)
from app.services.money import line_total, to_money

logger = logging.getLogger(__name__)


def load_user(acting: ActingUser) -> User:
    user = db.session.get(User, acting.id) if acting else None
    if user is None:
        raise UserNotFound()
    return user


def _validate_quantity(quantity):
    if quantity is None or isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantity()


def _existing_line(user: User, item_id) -> CartLine:
    line = user.cart_line_for(item_id)
    if line is None:
        raise NotInCart()
    return line


def add_line(acting: ActingUser, item_id, quantity) -> CartLine:
    _validate_quantity(quantity)
    user = load_user(acting)
    inventory.get_item(item_id)
    if user.cart_line_for(item_id) is not None:
        raise DuplicateLine()
    inventory.reserve(item_id, quantity)
    line = CartLine(item_id=item_id, quantity=quantity)
    user.cart_lines.append(line)
    db.session.flush()
    logger.info("User %s added %s x item %s to cart", user.id, quantity, item_id)
    return line


def increase_line(acting: ActingUser, item_id, quantity) -> CartLine:
    _validate_quantity(quantity)
    user = load_user(acting)
    line = _existing_line(user, item_id)
    inventory.reserve(item_id, quantity)
    line.quantity += quantity
    logger.info("User %s increased item %s to %s", user.id, item_id, line.quantity)
    return line


def decrease_line(acting: ActingUser, item_id, quantity) -> CartLine:
    _validate_quantity(quantity)
    user = load_user(acting)
    line = _existing_line(user, item_id)
    # A line only reaches zero through remove_line.
    if quantity >= line.quantity:
        raise InvalidDecrease(line.quantity)
    inventory.release(item_id, quantity)
    line.quantity -= quantity
    logger.info("User %s decreased item %s to %s", user.id, item_id, line.quantity)
    return line


def remove_line(acting: ActingUser, item_id) -> int:
    """Delete the line and return its quantity to stock."""
    user = load_user(acting)
    line = _existing_line(user, item_id)
    released = line.quantity
    if db.session.get(ShopItem, item_id) is None:
        logger.warning("Item %s no longer exists; dropping cart line without release", item_id)
    else:
        inventory.release(item_id, released)
    user.cart_lines.remove(line)
    db.session.flush()
    logger.info("User %s removed item %s (%s unit(s)) from cart", user.id, item_id, released)
    return released


def release_all(user: User) -> None:
    """Return every reservation held by ``user`` to stock, leaving lines in place."""
    for line in user.cart_lines:
        if db.session.get(ShopItem, line.item_id) is not None:
            inventory.release(line.item_id, line.quantity)


def list_lines(acting: ActingUser) -> List[dict]:
    user = load_user(acting)
    lines = []
    for line in user.cart_lines:
        item = db.session.get(ShopItem, line.item_id)
        if item is None:
            raise ItemNotFound()
        lines.append({
            "itemId": line.item_id,
            "itemName": item.title,
            "quantity": line.quantity,
            "price": item.price,
            "totalPrice": float(line_total(item.price, line.quantity)),
        })
    return lines


def cart_total(lines: List[dict]) -> float:
    return float(sum((to_money(line["totalPrice"]) for line in lines), to_money(0)))
