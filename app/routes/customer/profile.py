from flask import request
from app.routes.profile_views import show_profile, change_profile, remove_profile
from app.schemas.profile import ProfileUpdateRequest
from app.utils.validation import validate_schema
from . import customer_bp


@customer_bp.route("/profile", methods=["GET"])
def get_profile():
    return show_profile()


@customer_bp.route("/profile", methods=["PUT"])
@validate_schema(ProfileUpdateRequest)
def update_profile():
    return change_profile(request.validated_data)


@customer_bp.route("/profile", methods=["DELETE"])
def delete_profile():
    return remove_profile()
