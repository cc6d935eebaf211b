"""
User accounts: signup/signin, profiles, admin management, root admin seeding.

Functions stage changes on the session; callers wrap them in ``transactional``.
"""
import logging
from typing import List, Optional

from flask import current_app

from models import db
from models.user import User
from app.auth.permissions import is_root_admin, is_root_admin_email
from app.auth.session import ActingUser
from app.services import cart as cart_service
from app.services.errors import (
    DuplicateEmail,
    Forbidden,
    InvalidCredentials,
    NotFound,
    ReservedEmail,
    UserNotFound,
)
from app.utils.security import hash_password, normalize_email, verify_password

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "email", "password", "date_of_birth")


def find_by_email(email: str) -> Optional[User]:
    return User.query.filter_by(email=normalize_email(email)).first()


def register(name: str, email: str, password: str) -> User:
    email = normalize_email(email)
    if is_root_admin_email(email):
        raise ReservedEmail(email)
    if find_by_email(email) is not None:
        raise DuplicateEmail(email)
    user = User(name=name.strip(), email=email, password_hash=hash_password(password))
    db.session.add(user)
    db.session.flush()
    logger.info({"event": "signup", "user_id": user.id, "email": email})
    return user


def authenticate(email: str, password: str) -> User:
    user = find_by_email(email)
    if user is None:
        raise InvalidCredentials("Wrong email")
    if not verify_password(password, user.password_hash):
        raise InvalidCredentials("Wrong password")
    return user


def _apply_changes(user: User, changes: dict) -> User:
    if "email" in changes and changes["email"] is not None:
        email = normalize_email(changes["email"])
        if is_root_admin_email(email) and not is_root_admin(user):
            raise ReservedEmail(email)
        other = find_by_email(email)
        if other is not None and other.id != user.id:
            raise DuplicateEmail(email)
        user.email = email
    if changes.get("name"):
        user.name = changes["name"].strip()
    if changes.get("password"):
        user.password_hash = hash_password(changes["password"])
    if "date_of_birth" in changes:
        user.date_of_birth = changes["date_of_birth"]
    return user


def update_profile(acting: ActingUser, changes: dict) -> User:
    user = cart_service.load_user(acting)
    if is_root_admin(user):
        raise Forbidden("Cannot change the main Admin")
    _apply_changes(user, {k: v for k, v in changes.items() if k in PROFILE_FIELDS})
    db.session.flush()
    return user


def _delete_user(user: User) -> None:
    # Cart lines go with the user; their reservations go back to stock first.
    cart_service.release_all(user)
    db.session.delete(user)
    db.session.flush()


def delete_profile(acting: ActingUser) -> None:
    user = cart_service.load_user(acting)
    if is_root_admin(user):
        raise Forbidden("Cannot delete the main Admin")
    _delete_user(user)
    logger.info("User %s deleted their profile", acting.id)


def set_admin_status(email: str, is_admin: bool) -> User:
    if is_root_admin_email(email):
        raise Forbidden("Cannot change the status of the main Admin")
    user = find_by_email(email)
    if user is None:
        raise UserNotFound()
    user.is_admin = bool(is_admin)
    db.session.flush()
    logger.info("Admin status of user %s set to %s", user.id, user.is_admin)
    return user


def list_customers() -> List[User]:
    return User.query.order_by(User.id).all()


def get_customer(user_id) -> User:
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound("Customer not found")
    return user


def delete_customer(user_id) -> None:
    user = db.session.get(User, user_id)
    if user is None or user.is_admin:
        raise NotFound("Customer not found or customer is admin")
    _delete_user(user)
    logger.info("Customer %s deleted by admin", user_id)


def ensure_root_admin() -> Optional[User]:
    """Create the root admin from ADMIN_EMAIL / ADMIN_PASS if it does not exist."""
    email = normalize_email(current_app.config.get("ADMIN_EMAIL") or "")
    password = current_app.config.get("ADMIN_PASS")
    if not email or not password:
        logger.warning("ADMIN_EMAIL or ADMIN_PASS not configured; root admin not created")
        return None
    user = find_by_email(email)
    if user is not None:
        if not user.is_admin:
            user.is_admin = True
        logger.info("Admin root user already exists")
        return user
    user = User(
        name=current_app.config.get("ADMIN_NAME", "Root Admin"),
        email=email,
        password_hash=hash_password(password),
        is_admin=True,
    )
    db.session.add(user)
    db.session.flush()
    logger.info("Admin root user created")
    return user
