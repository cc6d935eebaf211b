from flask import request, jsonify
from app.routes.profile_views import show_profile, change_profile, remove_profile
from app.schemas.profile import AdminStatusRequest, ProfileUpdateRequest
from app.services import accounts
from app.services.errors import ServiceError
from app.utils import transactional, error, internal_error_response
from app.utils.validation import validate_schema
from . import admin_bp


@admin_bp.route("/new-admin", methods=["PUT"])
@validate_schema(AdminStatusRequest)
def set_admin_status():
    data: AdminStatusRequest = request.validated_data
    try:
        with transactional("Failed to change admin status"):
            user = accounts.set_admin_status(data.email, data.is_admin)
    except ServiceError as e:
        return error(str(e), status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Admin status updated", "user": user.to_dict()}), 200


@admin_bp.route("/profile", methods=["GET"])
def get_profile():
    return show_profile()


@admin_bp.route("/profile", methods=["PUT"])
@validate_schema(ProfileUpdateRequest)
def update_profile():
    return change_profile(request.validated_data)


@admin_bp.route("/profile", methods=["DELETE"])
def delete_profile():
    return remove_profile()
