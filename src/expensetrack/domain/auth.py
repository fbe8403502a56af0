"""Authentication domain service.

Passwords are stored as werkzeug hashes. Session tokens are signed,
timestamped payloads carrying the user ID; they are not persisted, so a
token stays valid until it expires or the signing key changes.
"""

import logging
from typing import Optional

from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from expensetrack.database.base import Database
from expensetrack.domain.category import CategoryService
from expensetrack.domain.entities import User
from expensetrack.domain.errors import (
    AUTH_REQUIRED,
    INVALID_CREDENTIALS,
    INVALID_TOKEN,
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthenticatedError,
    ValidationError,
    field_taken,
)

logger = logging.getLogger(__name__)

TOKEN_SALT = "expensetrack-auth"
DEFAULT_TOKEN_MAX_AGE = 7 * 24 * 3600


class AuthService:
    """Service for registering users, logging in and resolving tokens."""

    def __init__(
        self,
        db: Database,
        secret_key: str,
        token_max_age: int = DEFAULT_TOKEN_MAX_AGE,
    ):
        """Initialize auth service.

        Args:
            db: Database instance
            secret_key: Key used to sign session tokens
            token_max_age: Token lifetime in seconds
        """
        self.db = db
        self.token_max_age = token_max_age
        self.serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)

    def issue_token(self, user: User) -> str:
        """Sign a session token for a user."""
        return self.serializer.dumps({"uid": user.id})

    def _check_available(self, username: str, email: str) -> None:
        # Email is checked before username
        if self.db.get_user_by_email(email) is not None:
            raise ConflictError(field_taken("email"), field="email")
        if self.db.get_user_by_username(username) is not None:
            raise ConflictError(field_taken("username"), field="username")

    def register(self, username: str, email: str, password: str) -> tuple[str, User]:
        """Register a user and seed their default categories.

        Returns:
            Tuple of (session token, user)

        Raises:
            ValidationError: If a field is empty
            ConflictError: If the email or username is already taken
        """
        username = (username or "").strip()
        email = (email or "").strip()
        if not username or not email or not password:
            raise ValidationError("Username, email and password are required")

        self._check_available(username, email)

        try:
            user = self.db.create_user(
                username=username,
                email=email,
                password_hash=generate_password_hash(password),
            )
        except IntegrityError:
            # Lost a race with a concurrent registration
            self.db.rollback()
            self._check_available(username, email)
            raise

        CategoryService(self.db).seed_default_categories(user.id)
        logger.info("Registered user %s", user.id)
        return self.issue_token(user), user

    def login(self, email: str, password: str) -> tuple[str, User]:
        """Log in with email and password.

        Returns:
            Tuple of (session token, user)

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = self.db.get_user_by_email((email or "").strip())
        if user is None or not check_password_hash(user.password_hash, password or ""):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError(INVALID_CREDENTIALS)
        return self.issue_token(user), user

    def resolve(self, token: Optional[str]) -> User:
        """Resolve a session token to its user.

        Raises:
            UnauthenticatedError: If no token was given
            InvalidTokenError: If the token is garbled, expired or its user is gone
        """
        if not token:
            raise UnauthenticatedError(AUTH_REQUIRED)

        try:
            payload = self.serializer.loads(token, max_age=self.token_max_age)
        except SignatureExpired:
            raise InvalidTokenError(INVALID_TOKEN)
        except BadData:
            raise InvalidTokenError(INVALID_TOKEN)

        user_id = payload.get("uid") if isinstance(payload, dict) else None
        if not isinstance(user_id, int):
            raise InvalidTokenError(INVALID_TOKEN)

        user = self.db.get_user(user_id)
        if user is None:
            raise InvalidTokenError(INVALID_TOKEN)
        return user
