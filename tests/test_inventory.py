import pytest

from app.services import inventory
from app.services.errors import InsufficientStock, InvalidQuantity, ItemNotFound
from app.utils.db import transactional
from shop_helpers import create_item, stock_of


def test_reserve_and_release(app):
    item_id = create_item()
    with transactional("reserve"):
        inventory.reserve(item_id, 10)
    assert stock_of(item_id) == 140

    with transactional("release"):
        inventory.release(item_id, 4)
    assert stock_of(item_id) == 144


def test_reserve_whole_stock(app):
    item_id = create_item(available_count=3)
    with transactional("reserve"):
        inventory.reserve(item_id, 3)
    assert stock_of(item_id) == 0


def test_reserve_more_than_available(app):
    item_id = create_item(available_count=3)
    with pytest.raises(InsufficientStock):
        with transactional("reserve"):
            inventory.reserve(item_id, 4)
    assert stock_of(item_id) == 3


@pytest.mark.parametrize("quantity", [0, -1, 1.5, True, None])
def test_rejects_non_positive_quantities(app, quantity):
    item_id = create_item()
    with pytest.raises(InvalidQuantity):
        inventory.reserve(item_id, quantity)
    with pytest.raises(InvalidQuantity):
        inventory.release(item_id, quantity)
    assert stock_of(item_id) == 150


def test_unknown_item(app):
    with pytest.raises(ItemNotFound):
        inventory.reserve(4242, 1)
    with pytest.raises(ItemNotFound):
        inventory.release(4242, 1)
    with pytest.raises(ItemNotFound):
        inventory.get_item(4242)


def test_release_has_no_upper_bound(app):
    item_id = create_item(available_count=0)
    with transactional("release"):
        inventory.release(item_id, 500)
    assert stock_of(item_id) == 500


def test_failed_unit_of_work_rolls_back_earlier_reservation(app):
    first = create_item()
    second = create_item(available_count=1)
    with pytest.raises(InsufficientStock):
        with transactional("reserve both"):
            inventory.reserve(first, 10)
            inventory.reserve(second, 2)
    assert stock_of(first) == 150
    assert stock_of(second) == 1


def test_stock_report_counts_units_held_in_carts(app):
    from app.auth.session import ActingUser
    from app.services import cart as cart_service
    from shop_helpers import CUSTOMER, create_user

    held = create_item()
    untouched = create_item(title="Olive Soap")
    user_id = create_user(**CUSTOMER)
    with transactional("add"):
        cart_service.add_line(ActingUser(id=user_id, email=CUSTOMER["email"]), held, 12)

    report = {row["itemId"]: row for row in inventory.stock_report()}
    assert report[held]["availableCount"] == 138
    assert report[held]["reserved"] == 12
    assert report[untouched]["reserved"] == 0
