from flask import request, jsonify, current_app, g
from flask_limiter.util import get_remote_address
from extensions import limiter
from app.metrics import ORDERS_PLACED
from app.schemas.cart import CheckoutRequest
from app.services import checkout as checkout_service
from app.services.errors import ServiceError
from app.utils import transactional, error, internal_error_response
from app.utils.validation import validate_schema
from . import customer_bp


@customer_bp.route("/checkout", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["ORDER_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many orders from this IP",
)
@validate_schema(CheckoutRequest)
def checkout():
    data: CheckoutRequest = request.validated_data
    shipping = data.shipping_address
    try:
        with transactional("Checkout failed"):
            order = checkout_service.checkout(g.acting_user, shipping.address, shipping.city)
    except ServiceError as e:
        return error(str(e), status=e.status)
    except Exception:
        return internal_error_response()
    ORDERS_PLACED.inc()
    return jsonify({
        "status": "success",
        "message": "Order placed successfully",
        "order": order.to_dict(),
    }), 200


@customer_bp.route("/orders", methods=["GET"])
def get_order_history():
    try:
        orders = checkout_service.list_orders(g.acting_user)
    except ServiceError as e:
        return error(str(e), status=e.status)
    return jsonify({"status": "success", "orders": [o.to_dict() for o in orders]}), 200
