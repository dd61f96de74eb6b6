# farmlog/services/auth.py
import hmac
import logging
import os
from hashlib import pbkdf2_hmac
from typing import Optional

from fastapi import Request

from farmlog.models.user import User
from farmlog.services.store import RecordStore

logger = logging.getLogger(__name__)

# Session Keys
SESSION_USER_ID = "user_id"

PBKDF2_ITERATIONS = 310_000


# ---------- Password hashing (PBKDF2) ----------
# Stored as "<hash hex>.<salt hex>"

def hash_password(plain: str, *, salt: bytes | None = None) -> str:
    salt = salt or os.urandom(16)
    dk = pbkdf2_hmac("sha256", plain.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{dk.hex()}.{salt.hex()}"


def verify_password(plain: str, stored: str) -> bool:
    hashed, sep, salt_hex = stored.partition(".")
    if not sep or not hashed or not salt_hex:
        return False
    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hashed)
    except ValueError:
        return False
    test = pbkdf2_hmac("sha256", plain.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(test, expected)


# ---------- Auth helpers ----------

def authenticate_user(store: RecordStore, username: str, password: str) -> Optional[User]:
    user = store.get_user_by_username(username)
    if not user or not verify_password(password, user.password):
        logger.warning("failed login for %r", username)
        return None
    return user


def login_user(request: Request, user: User) -> None:
    request.session[SESSION_USER_ID] = user.id


def logout_user(request: Request) -> None:
    request.session.pop(SESSION_USER_ID, None)


def get_current_user(request: Request, store: RecordStore) -> Optional[User]:
    uid = request.session.get(SESSION_USER_ID)
    if not uid:
        return None
    return store.get_user(uid)


# ---------- Seeds ----------

def seed_admin_if_missing(store: RecordStore, username: str, password: str) -> None:
    """Creates the operator account on first start."""
    if store.get_user_by_username(username) is not None:
        return
    store.create_user(username, hash_password(password))
    logger.info("created admin user %r", username)
