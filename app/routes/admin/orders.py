from flask import jsonify
from app.services.checkout import list_all_orders
from . import admin_bp


@admin_bp.route("/orders", methods=["GET"])
def list_orders():
    return jsonify({"status": "success", "orders": list_all_orders()}), 200
