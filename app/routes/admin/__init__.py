from flask import Blueprint
from app.version import API_PREFIX
from app.utils import auth_required, admin_required

admin_bp = Blueprint("admin", __name__, url_prefix=f"{API_PREFIX}/admin")


@admin_bp.before_request
@auth_required
@admin_required
def _enforce_admin_role():
    """Ensure the requester is a signed-in admin."""
    return None

from . import items  # noqa: E402
from . import customers  # noqa: E402
from . import orders  # noqa: E402
from . import profile  # noqa: E402
