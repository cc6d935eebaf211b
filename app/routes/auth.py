import logging
from flask import Blueprint, request, jsonify, current_app, g
from flask_limiter.util import get_remote_address
from extensions import limiter
from app.version import API_PREFIX
from app.auth.session import current_acting_user, sign_in, sign_out
from app.schemas.auth import SignUpRequest, SignInRequest
from app.services import accounts
from app.services.errors import ServiceError
from app.utils import auth_required, error, internal_error_response, transactional
from app.utils.validation import validate_schema

user_bp = Blueprint("user", __name__, url_prefix=f"{API_PREFIX}/user")


@user_bp.route("/signup", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["SIGNUP_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many sign up attempts, rate limit exceeded",
)
@validate_schema(SignUpRequest)
def signup():
    data: SignUpRequest = request.validated_data
    try:
        with transactional("Sign up failed"):
            user = accounts.register(data.name, data.email, data.password)
    except ServiceError as e:
        return error(str(e), status=e.status)
    except Exception:
        return internal_error_response()
    sign_in(user)
    return jsonify({"status": "success", "message": "SignUp Success", "user": user.to_dict()}), 201


@user_bp.route("/signin", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["LOGIN_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many sign in attempts, rate limit exceeded",
)
@validate_schema(SignInRequest)
def signin():
    if current_acting_user() is not None:
        return error("User already signed in", status=400)
    data: SignInRequest = request.validated_data
    try:
        user = accounts.authenticate(data.email, data.password)
    except ServiceError as e:
        logging.info({"event": "signin_failed", "email": data.email, "reason": str(e)})
        return error(str(e), status=e.status)
    sign_in(user)
    logging.info({"event": "signin", "user_id": user.id, "email": user.email})
    return jsonify({"status": "success", "message": "SignIn Success", "user": user.to_dict()}), 200


@user_bp.route("/signout", methods=["GET", "POST"])
@auth_required
def signout():
    logging.info({"event": "signout", "user_id": g.acting_user.id})
    sign_out()
    return jsonify({"status": "success", "message": "SignOut Success"}), 200
