"""Self-service profile handlers shared by the customer and admin blueprints."""
from flask import jsonify, g
from app.auth.session import refresh_identity, sign_out
from app.services import accounts
from app.services.cart import load_user
from app.services.errors import ServiceError
from app.utils import transactional, error, internal_error_response


def show_profile():
    try:
        user = load_user(g.acting_user)
    except ServiceError as e:
        return error(str(e), status=e.status)
    return jsonify({"status": "success", "user": user.to_dict()}), 200


def change_profile(data):
    try:
        with transactional("Failed to update profile"):
            user = accounts.update_profile(g.acting_user, data.model_dump(exclude_unset=True))
    except ServiceError as e:
        return error(str(e), status=e.status)
    except Exception:
        return internal_error_response()
    refresh_identity(user)
    return jsonify({"status": "success", "message": "Profile updated", "user": user.to_dict()}), 200


def remove_profile():
    try:
        with transactional("Failed to delete profile"):
            accounts.delete_profile(g.acting_user)
    except ServiceError as e:
        return error(str(e), status=e.status)
    except Exception:
        return internal_error_response()
    sign_out()
    return jsonify({"status": "success", "message": "Profile deleted successfully"}), 200
