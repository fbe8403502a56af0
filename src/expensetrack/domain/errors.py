"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested entity does not exist within the caller's scope."""


class ForbiddenError(DomainError):
    """Entity exists but belongs to another user."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class UnauthenticatedError(DomainError):
    """No credential was supplied."""


class InvalidTokenError(DomainError):
    """Credential was supplied but is garbled, tampered or expired."""


class InvalidCredentialsError(DomainError):
    """Login failed. Unknown email and wrong password share one message."""


INVALID_CREDENTIALS = "Invalid email or password"
AUTH_REQUIRED = "Authentication required"
INVALID_TOKEN = "Invalid or expired token"


def expense_not_found(expense_id: int) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def expense_forbidden(expense_id: int) -> str:
    """Return message when an expense belongs to another user."""
    return f"Not authorized to modify expense {expense_id}"


def category_forbidden(category_id: int) -> str:
    """Return message when a category belongs to another user."""
    return f"Not authorized to modify category {category_id}"


def field_taken(field: str) -> str:
    """Return message for a duplicate email or username."""
    label = "Email" if field == "email" else "Username"
    return f"{label} already taken"


def category_in_use(category_id: int, expense_count: int) -> str:
    """Return message when a category still has expenses."""
    return (
        f"Category {category_id} is in use by {expense_count} "
        f"expense{'s' if expense_count != 1 else ''}"
    )
