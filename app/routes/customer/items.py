from flask import request, jsonify
from app.services import catalog
from app.services.errors import ServiceError
from app.utils import error
from . import customer_bp


@customer_bp.route("/items", methods=["GET"])
def list_items():
    args = request.args
    items = catalog.search_items(
        title=args.get("title"),
        description=args.get("description"),
        category=args.get("category") or args.get("genreOrCategory"),
        min_price=args.get("minPrice"),
        max_price=args.get("maxPrice"),
    )
    return jsonify({"status": "success", "items": [i.to_dict() for i in items]}), 200


@customer_bp.route("/items/<int:item_id>", methods=["GET"])
def get_item(item_id):
    try:
        item = catalog.get_item(item_id)
    except ServiceError as e:
        return error(str(e), status=e.status)
    return jsonify({"status": "success", "item": item.to_dict()}), 200
