"""Map domain errors onto HTTP status codes and ``{"error": ...}`` bodies."""

import logging

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from expensetrack.domain.errors import (
    ConflictError,
    DependencyError,
    DomainError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from expensetrack.api.gate import get_db

logger = logging.getLogger(__name__)

# Checked in order, so subclasses must come before their bases
STATUS_BY_ERROR = [
    (UnauthenticatedError, 401),
    (InvalidCredentialsError, 401),
    (InvalidTokenError, 403),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (ConflictError, 400),
    (DependencyError, 400),
    (ValidationError, 400),
    (DomainError, 400),
]


def status_for(error: DomainError) -> int:
    """Return the HTTP status for a domain error."""
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask) -> None:
    """Install the JSON error handlers on an application."""

    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        return error_response(str(error), status_for(error))

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return error_response(error.description or error.name, error.code or 500)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error: SQLAlchemyError):
        logger.exception("Database error")
        get_db().rollback()
        return error_response("Server error", 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception("Unhandled error")
        return error_response("Server error", 500)
