"""
Root admin rules.

The root admin is the account whose email matches ``ADMIN_EMAIL``. It can
never be demoted, edited through profile endpoints or deleted.
"""
from flask import current_app


def root_admin_email() -> str:
    return (current_app.config.get("ADMIN_EMAIL") or "").strip().lower()


def is_root_admin(user) -> bool:
    root = root_admin_email()
    return bool(root) and user is not None and (user.email or "").lower() == root


def is_root_admin_email(email: str) -> bool:
    root = root_admin_email()
    return bool(root) and (email or "").strip().lower() == root
