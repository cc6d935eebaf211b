"""
Checkout: turn a cart into an immutable order.

Each order line freezes the item title and unit price as they are at checkout.
The total is the sum of the line totals in two-decimal money. Stock is not
touched here because it was reserved when the units entered the cart.
"""
import logging
from decimal import Decimal
from typing import List

from models import db
from models.order import Order, OrderItem
from models.user import User
from app.auth.session import ActingUser
from app.services import inventory
from app.services.cart import load_user
from app.services.errors import EmptyCart
from app.services.money import line_total, to_money

logger = logging.getLogger(__name__)


def checkout(acting: ActingUser, address: str, city: str) -> Order:
    """Turn the user's cart into an order and empty the cart.

    Stock was committed when the lines were added, so it is not checked
    again. Prices and titles are read from the items as they are now.
    """
    user = load_user(acting)
    lines = list(user.cart_lines)
    if not lines:
        raise EmptyCart()

    order = Order(shipping_address=address, shipping_city=city, total_amount=Decimal("0.00"))
    total = to_money(0)
    for line in lines:
        item = inventory.get_item(line.item_id)
        total += line_total(item.price, line.quantity)
        order.items.append(
            OrderItem(
                item_id=item.id,
                title=item.title,
                price=Decimal(str(item.price)),
                quantity=line.quantity,
            )
        )
    order.total_amount = total
    user.orders.append(order)

    for line in lines:
        user.cart_lines.remove(line)
    db.session.flush()
    logger.info("User %s placed order %s for %s", user.id, order.id, total)
    return order


def list_orders(acting: ActingUser) -> List[Order]:
    user = load_user(acting)
    return list(user.orders)


def list_all_orders() -> List[dict]:
    rows = (
        db.session.query(Order, User)
        .join(User, Order.user_id == User.id)
        .order_by(Order.id.desc())
        .all()
    )
    result = []
    for order, user in rows:
        data = order.to_dict()
        data["userId"] = user.id
        data["customerEmail"] = user.email
        result.append(data)
    return result
