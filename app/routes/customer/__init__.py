from flask import Blueprint
from app.version import API_PREFIX
from app.utils import auth_required

customer_bp = Blueprint("customer", __name__, url_prefix=f"{API_PREFIX}/customer")


@customer_bp.before_request
@auth_required
def _enforce_signed_in():
    """Ensure the requester has an active session."""
    return None

from . import items  # noqa: E402
from . import cart  # noqa: E402
from . import orders  # noqa: E402
from . import profile  # noqa: E402
