from app.version import API_PREFIX
from shop_helpers import (
    ADMIN,
    CUSTOMER,
    SHOP_ITEM,
    create_item,
    create_user,
    signed_in_admin,
    signin,
    signout,
    stock_of,
)

ADMIN_API = f"{API_PREFIX}/admin"
CART = f"{API_PREFIX}/customer/cart"
CHECKOUT = f"{API_PREFIX}/customer/checkout"
SHIPPING = {"shippingAddress": {"address": "Downtown", "city": "Dubai"}}


# -------------------- Items --------------------

def test_add_item(client, app):
    signed_in_admin(client)
    resp = client.post(f"{ADMIN_API}/items", json=SHOP_ITEM)
    assert resp.status_code == 201
    item = resp.get_json()["item"]
    assert item["title"] == SHOP_ITEM["title"]
    assert item["availableCount"] == 150
    assert item["price"] == 3.99

    resp = client.get(f"{ADMIN_API}/items/{item['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["item"]["category"] == "Health"


def test_add_item_validation(client, app):
    signed_in_admin(client)
    for bad in ({"price": -1}, {"availableCount": -5}, {"title": ""}):
        resp = client.post(f"{ADMIN_API}/items", json=dict(SHOP_ITEM, **bad))
        assert resp.status_code == 400, bad
    payload = dict(SHOP_ITEM)
    del payload["category"]
    assert client.post(f"{ADMIN_API}/items", json=payload).status_code == 400


def test_update_item_partial(client, app):
    signed_in_admin(client)
    item_id = create_item()
    resp = client.put(f"{ADMIN_API}/items/{item_id}", json={"price": 4.5, "availableCount": 10})
    assert resp.status_code == 200
    item = resp.get_json()["item"]
    assert item["price"] == 4.5
    assert item["availableCount"] == 10
    assert item["title"] == SHOP_ITEM["title"]


def test_update_missing_item(client, app):
    signed_in_admin(client)
    resp = client.put(f"{ADMIN_API}/items/999", json={"price": 1})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Item not found"


def test_delete_item(client, app):
    signed_in_admin(client)
    item_id = create_item()
    resp = client.delete(f"{ADMIN_API}/items/{item_id}")
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Item deleted successfully"
    assert client.get(f"{ADMIN_API}/items/{item_id}").status_code == 404
    assert client.delete(f"{ADMIN_API}/items/{item_id}").status_code == 404


def test_admin_search_is_partial(client, app):
    signed_in_admin(client)
    brush = create_item()
    create_item(title="Garden Hose", description="Rubber hose", category="Garden")

    items = client.get(f"{ADMIN_API}/items/search?name=bamboo").get_json()["items"]
    assert [i["id"] for i in items] == [brush]
    items = client.get(f"{ADMIN_API}/items/search?genre=heal").get_json()["items"]
    assert [i["id"] for i in items] == [brush]
    items = client.get(f"{ADMIN_API}/items/search?description=rubber").get_json()["items"]
    assert [i["title"] for i in items] == ["Garden Hose"]
    assert len(client.get(f"{ADMIN_API}/items").get_json()["items"]) == 2


# -------------------- Customers & Orders --------------------

def test_list_and_get_customers(client, app):
    customer_id = create_user(**CUSTOMER)
    signed_in_admin(client)

    customers = client.get(f"{ADMIN_API}/customers").get_json()["customers"]
    emails = {c["email"] for c in customers}
    assert CUSTOMER["email"] in emails
    assert all("password_hash" not in c for c in customers)

    resp = client.get(f"{ADMIN_API}/customers/{customer_id}")
    assert resp.status_code == 200
    customer = resp.get_json()["customer"]
    assert customer["email"] == CUSTOMER["email"]
    assert customer["orders"] == []

    resp = client.get(f"{ADMIN_API}/customers/9999")
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Customer not found"


def test_delete_customer_releases_cart(client, app):
    item_id = create_item()
    customer_id = create_user(**CUSTOMER)
    signin(client, CUSTOMER["email"], CUSTOMER["password"])
    client.post(CART, json={"itemId": item_id, "quantity": 7})
    assert stock_of(item_id) == 143
    signout(client)

    signed_in_admin(client)
    resp = client.delete(f"{ADMIN_API}/customers/{customer_id}")
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Customer profile deleted successfully"
    assert stock_of(item_id) == 150
    assert client.get(f"{ADMIN_API}/customers/{customer_id}").status_code == 404


def test_delete_customer_refuses_admins(client, app):
    admin_id = signed_in_admin(client)
    resp = client.delete(f"{ADMIN_API}/customers/{admin_id}")
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Customer not found or customer is admin"


def test_all_orders_lists_every_customer(client, app):
    item_id = create_item()
    create_user(**CUSTOMER)
    signin(client, CUSTOMER["email"], CUSTOMER["password"])
    client.post(CART, json={"itemId": item_id, "quantity": 2})
    assert client.post(CHECKOUT, json=SHIPPING).status_code == 200
    signout(client)

    signed_in_admin(client)
    orders = client.get(f"{ADMIN_API}/orders").get_json()["orders"]
    assert len(orders) == 1
    assert orders[0]["customerEmail"] == CUSTOMER["email"]
    assert orders[0]["totalAmount"] == 7.98


# -------------------- Admin profile --------------------

def test_admin_profile_update_and_delete(client, app):
    signed_in_admin(client)
    resp = client.get(f"{ADMIN_API}/profile")
    assert resp.status_code == 200
    assert resp.get_json()["user"]["email"] == ADMIN["email"]

    resp = client.put(f"{ADMIN_API}/profile", json={"name": "Admin Renamed"})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["name"] == "Admin Renamed"

    resp = client.delete(f"{ADMIN_API}/profile")
    assert resp.status_code == 200
    assert client.get(f"{ADMIN_API}/profile").status_code == 401


def test_update_item_rejects_null_for_required_fields(client, app):
    signed_in_admin(client)
    item_id = create_item()
    for field in ("title", "price", "description", "category", "availableCount"):
        resp = client.put(f"{ADMIN_API}/items/{item_id}", json={field: None})
        assert resp.status_code == 400, field
        assert resp.get_json()["message"] == f"{field} cannot be null"
    item = client.get(f"{ADMIN_API}/items/{item_id}").get_json()["item"]
    assert item["title"] == SHOP_ITEM["title"]
    assert item["availableCount"] == 150


def test_update_item_can_clear_image(client, app):
    signed_in_admin(client)
    item_id = create_item()
    resp = client.put(f"{ADMIN_API}/items/{item_id}", json={"image": None})
    assert resp.status_code == 200
    assert resp.get_json()["item"]["image"] is None
