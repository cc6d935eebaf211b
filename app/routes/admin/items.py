from flask import request, jsonify
from app.schemas.catalog import ItemCreateRequest, ItemUpdateRequest
from app.services import catalog
from app.services.errors import ServiceError
from app.utils import transactional, error, internal_error_response
from app.utils.validation import validate_schema
from . import admin_bp


@admin_bp.route("/items", methods=["POST"])
@validate_schema(ItemCreateRequest)
def add_item():
    data: ItemCreateRequest = request.validated_data
    try:
        with transactional("Failed to add item"):
            item = catalog.create_item(data.model_dump())
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Item added", "item": item.to_dict()}), 201


@admin_bp.route("/items", methods=["GET"])
def list_items():
    items = catalog.search_items()
    return jsonify({"status": "success", "items": [i.to_dict() for i in items]}), 200


@admin_bp.route("/items/search", methods=["GET"])
def search_items():
    args = request.args
    items = catalog.search_items(
        title=args.get("title") or args.get("name"),
        description=args.get("description"),
        category=args.get("category") or args.get("genre"),
        category_exact=False,
    )
    return jsonify({"status": "success", "items": [i.to_dict() for i in items]}), 200


@admin_bp.route("/items/<int:item_id>", methods=["GET"])
def get_item(item_id):
    try:
        item = catalog.get_item(item_id)
    except ServiceError as e:
        return error(str(e), status=e.status)
    return jsonify({"status": "success", "item": item.to_dict()}), 200


@admin_bp.route("/items/<int:item_id>", methods=["PUT"])
@validate_schema(ItemUpdateRequest)
def update_item(item_id):
    data: ItemUpdateRequest = request.validated_data
    try:
        with transactional("Failed to update item"):
            item = catalog.update_item(item_id, data.model_dump(exclude_unset=True))
    except ServiceError as e:
        return error(str(e), status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Item updated", "item": item.to_dict()}), 200


@admin_bp.route("/items/<int:item_id>", methods=["DELETE"])
def delete_item(item_id):
    try:
        with transactional("Failed to delete item"):
            catalog.delete_item(item_id)
    except ServiceError as e:
        return error(str(e), status=e.status)
    except Exception:
        return internal_error_response()
    return jsonify({"status": "success", "message": "Item deleted successfully"}), 200
