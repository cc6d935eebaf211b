from flask import request, jsonify, g
from app.metrics import CART_OPERATIONS
from app.schemas.cart import CartLineRequest, CartItemRequest
from app.services import cart as cart_service
from app.services.errors import ServiceError
from app.utils import transactional, error, internal_error_response
from app.utils.validation import validate_schema
from . import customer_bp


def _run_cart_operation(operation, message, fn, *args):
    try:
        with transactional(f"Cart {operation} failed"):
            fn(g.acting_user, *args)
    except ServiceError as e:
        CART_OPERATIONS.labels(operation, e.code).inc()
        return error(str(e), status=e.status)
    except Exception:
        CART_OPERATIONS.labels(operation, "error").inc()
        return internal_error_response()
    CART_OPERATIONS.labels(operation, "success").inc()
    return jsonify({"status": "success", "message": message}), 200


@customer_bp.route("/cart", methods=["GET"])
def view_cart():
    try:
        lines = cart_service.list_lines(g.acting_user)
    except ServiceError as e:
        return error(str(e), status=e.status)
    return jsonify({
        "status": "success",
        "cart": lines,
        "cartTotal": cart_service.cart_total(lines),
    }), 200


@customer_bp.route("/cart", methods=["POST"])
@validate_schema(CartLineRequest)
def add_to_cart():
    data: CartLineRequest = request.validated_data
    return _run_cart_operation(
        "add", "Item added to cart", cart_service.add_line, data.item_id, data.quantity
    )


@customer_bp.route("/cart", methods=["PUT"])
@validate_schema(CartLineRequest)
def update_cart_quantity():
    data: CartLineRequest = request.validated_data
    if request.args.get("addToCart") == "add":
        return _run_cart_operation(
            "increase",
            "Item in cart quantity added successfully",
            cart_service.increase_line,
            data.item_id,
            data.quantity,
        )
    if request.args.get("removeFromCart") == "remove":
        return _run_cart_operation(
            "decrease",
            "Item in cart quantity removed successfully",
            cart_service.decrease_line,
            data.item_id,
            data.quantity,
        )
    return error("Please provide cart params either addToCart=add or removeFromCart=remove", status=400)


@customer_bp.route("/cart", methods=["DELETE"])
@validate_schema(CartItemRequest)
def remove_from_cart():
    data: CartItemRequest = request.validated_data
    return _run_cart_operation(
        "remove", "Item removed from cart", cart_service.remove_line, data.item_id
    )
