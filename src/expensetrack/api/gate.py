"""Request-scoped access to the database and the bearer-token login manager."""

from typing import Optional

from flask import Request, current_app
from flask_login import LoginManager, UserMixin

from expensetrack.database.base import Database
from expensetrack.domain.auth import AuthService
from expensetrack.domain.entities import User
from expensetrack.domain.errors import AUTH_REQUIRED, UnauthenticatedError

login_manager = LoginManager()


class SessionUser(UserMixin):
    """Authenticated user as seen by flask_login."""

    def __init__(self, user: User):
        self.user = user
        self.id = user.id


def get_db() -> Database:
    """Return the application's database."""
    return current_app.extensions["expensetrack"]["db"]


def get_auth_service() -> AuthService:
    """Build an AuthService from the application's configuration."""
    return AuthService(
        get_db(),
        secret_key=current_app.config["SECRET_KEY"],
        token_max_age=current_app.config["TOKEN_MAX_AGE"],
    )


def bearer_token(request: Request) -> Optional[str]:
    """Extract the token from ``Authorization: Bearer <token>``.

    Returns None when the header is missing or not a bearer credential.
    """
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        return None
    return token


@login_manager.request_loader
def load_user_from_request(request: Request) -> Optional[SessionUser]:
    # A present but invalid token raises InvalidTokenError (403)
    token = bearer_token(request)
    if token is None:
        return None
    return SessionUser(get_auth_service().resolve(token))


@login_manager.unauthorized_handler
def unauthorized():
    raise UnauthenticatedError(AUTH_REQUIRED)
