"""Registration, login and current-user routes."""

from flask import Blueprint, jsonify
from flask_login import current_user, login_required

from expensetrack.api.gate import get_auth_service
from expensetrack.api.payload import json_body
from expensetrack.api.serializers import user_to_json

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()
    token, user = get_auth_service().register(
        username=data.get("username"),
        email=data.get("email"),
        password=data.get("password"),
    )
    return jsonify({"token": token, "user": user_to_json(user)}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    token, user = get_auth_service().login(
        email=data.get("email"), password=data.get("password")
    )
    return jsonify({"token": token, "user": user_to_json(user)})


@auth_bp.route("/me")
@login_required
def me():
    return jsonify(user_to_json(current_user.user))
