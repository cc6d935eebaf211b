from app.version import API_PREFIX
from models.user import User
from shop_helpers import CUSTOMER, create_item, create_user, signed_in_customer, signin, stock_of

PROFILE = f"{API_PREFIX}/customer/profile"
CART = f"{API_PREFIX}/customer/cart"


def test_view_profile(client, app):
    signed_in_customer(client)
    resp = client.get(PROFILE)
    assert resp.status_code == 200
    user = resp.get_json()["user"]
    assert user["email"] == CUSTOMER["email"]
    assert user["isAdmin"] is False


def test_update_profile_fields(client, app):
    signed_in_customer(client)
    resp = client.put(PROFILE, json={
        "name": "Customer Seven",
        "email": "Customer7@Customer.com",
        "dateOfBirth": "1990-04-01",
    })
    assert resp.status_code == 200
    user = resp.get_json()["user"]
    assert user["name"] == "Customer Seven"
    assert user["email"] == "customer7@customer.com"
    assert user["dateOfBirth"] == "1990-04-01"


def test_update_password_allows_new_signin(client, app):
    signed_in_customer(client)
    assert client.put(PROFILE, json={"password": "Changed$99"}).status_code == 200
    client.get(f"{API_PREFIX}/user/signout")

    assert signin(client, CUSTOMER["email"], CUSTOMER["password"]).status_code == 400
    assert signin(client, CUSTOMER["email"], "Changed$99").status_code == 200


def test_update_profile_rejects_taken_email(client, app):
    create_user("Other", "other@customer.com", "Other$123")
    signed_in_customer(client)
    resp = client.put(PROFILE, json={"email": "other@customer.com"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "other@customer.com: email already exist"


def test_update_profile_rejects_weak_password(client, app):
    signed_in_customer(client)
    resp = client.put(PROFILE, json={"password": "weak"})
    assert resp.status_code == 400


def test_update_profile_cannot_grant_admin(client, app):
    user_id = signed_in_customer(client)
    assert client.put(PROFILE, json={"isAdmin": True, "name": "Sneaky"}).status_code == 200
    from models import db
    db.session.expire_all()
    assert db.session.get(User, user_id).is_admin is False


def test_delete_profile_releases_cart(client, app):
    item_id = create_item()
    signed_in_customer(client)
    client.post(CART, json={"itemId": item_id, "quantity": 5})
    assert stock_of(item_id) == 145

    resp = client.delete(PROFILE)
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Profile deleted successfully"
    assert stock_of(item_id) == 150
    assert User.query.filter_by(email=CUSTOMER["email"]).first() is None
    assert client.get(PROFILE).status_code == 401


def test_cannot_take_root_admin_email_before_it_is_seeded(client, app):
    from models import db
    from shop_helpers import ROOT_EMAIL

    User.query.filter_by(email=ROOT_EMAIL).delete()
    db.session.commit()
    user_id = signed_in_customer(client)

    resp = client.put(PROFILE, json={"email": ROOT_EMAIL})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == f"{ROOT_EMAIL}: email is reserved"
    db.session.expire_all()
    assert db.session.get(User, user_id).email == CUSTOMER["email"]
