from .session import ActingUser, current_acting_user, sign_in, sign_out, refresh_identity
from .permissions import is_root_admin, is_root_admin_email

__all__ = [
    "ActingUser",
    "current_acting_user",
    "sign_in",
    "sign_out",
    "refresh_identity",
    "is_root_admin",
    "is_root_admin_email",
]
