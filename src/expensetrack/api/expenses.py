"""Expense CRUD routes."""

from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required

from expensetrack.api.gate import get_db
from expensetrack.api.payload import expense_fields, json_body, parse_id
from expensetrack.api.serializers import expense_to_json
from expensetrack.domain.expense import ExpenseService

expenses_bp = Blueprint("expenses", __name__, url_prefix="/expenses")


@expenses_bp.route("", methods=["GET"])
@login_required
def list_expenses():
    service = ExpenseService(get_db())
    owner_id = current_user.id

    query = request.args.get("q", "")
    category_id = request.args.get("categoryId")
    if category_id:
        category_id = parse_id(category_id, "categoryId")
    else:
        category_id = None

    expenses = service.search_expenses(owner_id, query, category_id=category_id)
    return jsonify([expense_to_json(exp) for exp in expenses])


@expenses_bp.route("", methods=["POST"])
@login_required
def create_expense():
    fields = expense_fields(json_body(), partial=False)
    expense = ExpenseService(get_db()).create_expense(current_user.id, **fields)
    return jsonify(expense_to_json(expense)), 201


@expenses_bp.route("/<int:expense_id>", methods=["GET"])
@login_required
def get_expense(expense_id: int):
    expense = ExpenseService(get_db()).get_expense(current_user.id, expense_id)
    return jsonify(expense_to_json(expense))


@expenses_bp.route("/<int:expense_id>", methods=["PUT"])
@login_required
def update_expense(expense_id: int):
    fields = expense_fields(json_body(), partial=True)
    expense = ExpenseService(get_db()).update_expense(current_user.id, expense_id, **fields)
    return jsonify(expense_to_json(expense))


@expenses_bp.route("/<int:expense_id>", methods=["DELETE"])
@login_required
def delete_expense(expense_id: int):
    ExpenseService(get_db()).delete_expense(current_user.id, expense_id)
    return jsonify({"message": "Expense deleted successfully"})
