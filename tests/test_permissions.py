from app.version import API_PREFIX
from models import db
from models.user import User
from shop_helpers import (
    ADMIN,
    CUSTOMER,
    ROOT_EMAIL,
    ROOT_PASS,
    create_user,
    signed_in_admin,
    signed_in_customer,
    signin,
)

ADMIN_API = f"{API_PREFIX}/admin"
CUSTOMER_API = f"{API_PREFIX}/customer"


def test_customer_routes_require_session(client, app):
    for path in ("/items", "/cart", "/orders", "/profile"):
        resp = client.get(f"{CUSTOMER_API}{path}")
        assert resp.status_code == 401, path
        assert resp.get_json()["message"] == "Unauthorized the user is not signed in"


def test_admin_routes_require_session(client, app):
    resp = client.get(f"{ADMIN_API}/items")
    assert resp.status_code == 401


def test_admin_routes_reject_customers(client, app):
    signed_in_customer(client)
    for path in ("/items", "/customers", "/orders", "/profile"):
        resp = client.get(f"{ADMIN_API}{path}")
        assert resp.status_code == 403, path
        assert resp.get_json()["message"] == "Unauthorized the user is not an admin"


def test_admin_gate_rechecks_database(client, app):
    user_id = signed_in_admin(client)
    assert client.get(f"{ADMIN_API}/items").status_code == 200

    db.session.get(User, user_id).is_admin = False
    db.session.commit()
    resp = client.get(f"{ADMIN_API}/items")
    assert resp.status_code == 403
    assert resp.get_json()["message"] == "Unauthorized the user is not an admin"


def test_admin_gate_rejects_deleted_user(client, app):
    user_id = signed_in_admin(client)
    db.session.delete(db.session.get(User, user_id))
    db.session.commit()

    resp = client.get(f"{ADMIN_API}/items")
    assert resp.status_code == 403
    assert resp.get_json()["message"] == (
        "Unauthorized the user either does not exist or is not signed in"
    )


def test_admins_can_use_customer_routes(client, app):
    signed_in_admin(client)
    assert client.get(f"{CUSTOMER_API}/items").status_code == 200


def test_root_admin_cannot_be_demoted(client, app):
    signed_in_admin(client)
    resp = client.put(f"{ADMIN_API}/new-admin", json={"email": ROOT_EMAIL, "isAdmin": False})
    assert resp.status_code == 403
    assert resp.get_json()["message"] == "Cannot change the status of the main Admin"
    assert User.query.filter_by(email=ROOT_EMAIL).first().is_admin is True


def test_root_admin_cannot_edit_or_delete_itself(client, app):
    assert signin(client, ROOT_EMAIL, ROOT_PASS).status_code == 200

    resp = client.put(f"{ADMIN_API}/profile", json={"name": "Someone else"})
    assert resp.status_code == 403
    assert resp.get_json()["message"] == "Cannot change the main Admin"

    resp = client.delete(f"{ADMIN_API}/profile")
    assert resp.status_code == 403
    assert resp.get_json()["message"] == "Cannot delete the main Admin"
    assert User.query.filter_by(email=ROOT_EMAIL).count() == 1


def test_root_admin_can_promote_and_demote(client, app):
    create_user(**CUSTOMER)
    assert signin(client, ROOT_EMAIL, ROOT_PASS).status_code == 200

    resp = client.put(f"{ADMIN_API}/new-admin", json={"email": CUSTOMER["email"], "isAdmin": True})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["isAdmin"] is True

    resp = client.put(f"{ADMIN_API}/new-admin", json={"email": CUSTOMER["email"], "isAdmin": False})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["isAdmin"] is False


def test_new_admin_unknown_user(client, app):
    signed_in_admin(client)
    resp = client.put(f"{ADMIN_API}/new-admin", json={"email": "ghost@example.com", "isAdmin": True})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "User not found"


def test_new_admin_requires_flag(client, app):
    signed_in_admin(client)
    resp = client.put(f"{ADMIN_API}/new-admin", json={"email": ADMIN["email"]})
    assert resp.status_code == 400
