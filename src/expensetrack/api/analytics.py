"""Derived spending views."""

from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required

from expensetrack.api.gate import get_db
from expensetrack.api.serializers import (
    category_total_to_json,
    dashboard_to_json,
    monthly_total_to_json,
)
from expensetrack.domain.analytics import AnalyticsService
from expensetrack.domain.category import CategoryService
from expensetrack.domain.errors import ValidationError
from expensetrack.utils.date_parser import parse_date

analytics_bp = Blueprint("analytics", __name__, url_prefix="/analytics")


def _category_index(owner_id: int) -> dict:
    return {cat.id: cat for cat in CategoryService(get_db()).list_categories(owner_id)}


@analytics_bp.route("/monthly")
@login_required
def monthly():
    totals = AnalyticsService(get_db()).monthly_totals(current_user.id)
    return jsonify([monthly_total_to_json(total) for total in totals])


@analytics_bp.route("/monthly/<int:category_id>")
@login_required
def monthly_by_category(category_id: int):
    totals = AnalyticsService(get_db()).monthly_totals_by_category(
        current_user.id, category_id
    )
    return jsonify([monthly_total_to_json(total) for total in totals])


@analytics_bp.route("/categories")
@login_required
def categories():
    owner_id = current_user.id
    index = _category_index(owner_id)
    totals = AnalyticsService(get_db()).category_totals(owner_id)
    return jsonify([category_total_to_json(total, index.get(total.category_id)) for total in totals])


@analytics_bp.route("/summary")
@login_required
def summary():
    owner_id = current_user.id
    today = None
    month = request.args.get("month")
    if month:
        try:
            today = parse_date(f"{month}-01")
        except ValueError as e:
            raise ValidationError(str(e))

    dashboard = AnalyticsService(get_db()).dashboard(owner_id, today=today)
    return jsonify(dashboard_to_json(dashboard, _category_index(owner_id)))
