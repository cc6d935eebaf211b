from flask import jsonify
from app.services import accounts
from app.services.errors import ServiceError
from app.utils import transactional, error, internal_error_response
from . import admin_bp


@admin_bp.route("/customers", methods=["GET"])
def list_customers():
    users = accounts.list_customers()
    return jsonify({"status": "success", "customers": [u.to_dict() for u in users]}), 200


@admin_bp.route("/customers/<int:user_id>", methods=["GET"])
def get_customer(user_id):
    try:
        user = accounts.get_customer(user_id)
    except ServiceError as e:
        return error(str(e), status=e.status)
    data = user.to_dict()
    data["orders"] = [o.to_dict() for o in user.orders]
    return jsonify({"status": "success", "customer": data}), 200


@admin_bp.route("/customers/<int:user_id>", methods=["DELETE"])
def delete_customer(user_id):
    try:
        with transactional("Failed to delete customer"):
            accounts.delete_customer(user_id)
    except ServiceError as e:
        return error(str(e), status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Customer profile deleted successfully"}), 200
