"""Tests for password hashing, sessions and the login gate."""
from farmlog.services.auth import (
    authenticate_user,
    hash_password,
    seed_admin_if_missing,
    verify_password,
)
from farmlog.models.user import User

ADMIN_USER = "admin"
ADMIN_PASSWORD = "test-password"


class TestPasswordHashing:
    def test_hash_format(self):
        stored = hash_password("secret", salt=b"\x00" * 16)
        hashed, salt = stored.split(".")
        assert salt == "00" * 16
        assert len(hashed) == 64

    def test_verify(self):
        stored = hash_password("secret")
        assert verify_password("secret", stored)
        assert not verify_password("Secret", stored)

    def test_salts_differ(self):
        assert hash_password("secret") != hash_password("secret")

    def test_malformed_stored_value(self):
        assert not verify_password("secret", "nodot")
        assert not verify_password("secret", "zz.zz")


class TestUsers:
    def test_seed_admin_is_idempotent(self, store):
        seed_admin_if_missing(store, "admin", "pw-one")
        seed_admin_if_missing(store, "admin", "pw-two")

        assert store.count(User) == 1
        assert authenticate_user(store, "admin", "pw-one") is not None
        assert authenticate_user(store, "admin", "pw-two") is None

    def test_unknown_user(self, store):
        assert authenticate_user(store, "nobody", "x") is None


class TestSessionApi:
    """Tests for /api/login, /api/logout and /api/user."""

    def test_login_and_current_user(self, client, admin):
        resp = client.post("/api/login", json={"username": ADMIN_USER, "password": ADMIN_PASSWORD})
        assert resp.status_code == 200
        assert resp.json() == {"id": admin.id, "username": ADMIN_USER}

        assert client.get("/api/user").json()["username"] == ADMIN_USER

    def test_bad_credentials(self, client, admin):
        resp = client.post("/api/login", json={"username": ADMIN_USER, "password": "wrong"})
        assert resp.status_code == 401
        assert resp.json() == {"message": "Invalid username or password"}

    def test_logout_clears_session(self, logged_in_client):
        assert logged_in_client.post("/api/logout").status_code == 200
        assert logged_in_client.get("/api/user").status_code == 401

    def test_financial_list_requires_login(self, client, admin):
        resp = client.get("/api/financials")
        assert resp.status_code == 401
        assert resp.json() == {"message": "Not authenticated"}

        client.post("/api/login", json={"username": ADMIN_USER, "password": ADMIN_PASSWORD})
        assert client.get("/api/financials").status_code == 200

    def test_financial_summary_is_public(self, client):
        assert client.get("/api/financials/summary").status_code == 200
