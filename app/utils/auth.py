from functools import wraps
from flask import g
from .responses import error
from app.auth.session import current_acting_user
from models import db
from models.user import User


def auth_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        acting = current_acting_user()
        if acting is None:
            return error("Unauthorized the user is not signed in", status=401)
        g.acting_user = acting
        return func(*args, **kwargs)

    return wrapper


def admin_required(func):
    """Require the signed-in user to still exist and carry the admin flag."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        acting = getattr(g, "acting_user", None) or current_acting_user()
        user = db.session.get(User, acting.id) if acting else None
        if not user:
            return error(
                "Unauthorized the user either does not exist or is not signed in",
                status=403,
            )
        if not user.is_admin:
            return error("Unauthorized the user is not an admin", status=403)
        g.acting_user = acting
        return func(*args, **kwargs)

    return wrapper
