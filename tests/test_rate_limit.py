from app.version import API_PREFIX
from shop_helpers import CUSTOMER, create_user

SIGNIN = f"{API_PREFIX}/user/signin"
SIGNUP = f"{API_PREFIX}/user/signup"


def test_signin_is_limited_per_ip(client, app, monkeypatch):
    monkeypatch.setitem(app.config, "LOGIN_LIMIT_PER_IP", "3 per minute")
    create_user(**CUSTOMER)
    env = {"REMOTE_ADDR": "10.1.1.1"}
    wrong = {"email": CUSTOMER["email"], "password": "Wrong$Pass1"}

    for _ in range(3):
        assert client.post(SIGNIN, json=wrong, environ_base=env).status_code == 400
    resp = client.post(SIGNIN, json=wrong, environ_base=env)
    assert resp.status_code == 429
    assert resp.get_json()["status"] == "error"

    other = client.post(SIGNIN, json=wrong, environ_base={"REMOTE_ADDR": "10.1.1.2"})
    assert other.status_code == 400


def test_signup_is_limited_per_ip(client, app, monkeypatch):
    monkeypatch.setitem(app.config, "SIGNUP_LIMIT_PER_IP", "1 per minute")
    env = {"REMOTE_ADDR": "10.2.2.2"}
    assert client.post(SIGNUP, json=CUSTOMER, environ_base=env).status_code == 201
    client.get(f"{API_PREFIX}/user/signout", environ_base=env)

    second = dict(CUSTOMER, email="customer7@customer.com")
    assert client.post(SIGNUP, json=second, environ_base=env).status_code == 429
