"""Category CRUD routes."""

from flask import Blueprint, jsonify
from flask_login import current_user, login_required

from expensetrack.api.gate import get_db
from expensetrack.api.payload import json_body, optional_str
from expensetrack.api.serializers import category_to_json
from expensetrack.domain.category import CategoryService

categories_bp = Blueprint("categories", __name__, url_prefix="/categories")


@categories_bp.route("", methods=["GET"])
@login_required
def list_categories():
    categories = CategoryService(get_db()).list_categories(current_user.id)
    return jsonify([category_to_json(cat) for cat in categories])


@categories_bp.route("", methods=["POST"])
@login_required
def create_category():
    data = json_body()
    category = CategoryService(get_db()).create_category(
        current_user.id,
        name=optional_str(data, "name"),
        color=optional_str(data, "color"),
    )
    return jsonify(category_to_json(category)), 201


@categories_bp.route("/<int:category_id>", methods=["GET"])
@login_required
def get_category(category_id: int):
    category = CategoryService(get_db()).get_category(current_user.id, category_id)
    return jsonify(category_to_json(category))


@categories_bp.route("/<int:category_id>", methods=["PUT"])
@login_required
def update_category(category_id: int):
    data = json_body()
    category = CategoryService(get_db()).update_category(
        current_user.id,
        category_id,
        name=optional_str(data, "name"),
        color=optional_str(data, "color"),
    )
    return jsonify(category_to_json(category))


@categories_bp.route("/<int:category_id>", methods=["DELETE"])
@login_required
def delete_category(category_id: int):
    CategoryService(get_db()).delete_category(current_user.id, category_id)
    return jsonify({"message": "Category deleted successfully"})
