"""Shared pytest fixtures for expensetrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from expensetrack.database.factories import create_sqlite_database
from expensetrack.domain.auth import AuthService
from expensetrack.domain.category import CategoryService
from expensetrack.domain.expense import ExpenseService
from expensetrack.domain.analytics import AnalyticsService


SECRET = "test-secret"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def auth_service(temp_db):
    """Create an AuthService with a temporary database."""
    return AuthService(temp_db, secret_key=SECRET)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def analytics_service(temp_db):
    """Create an AnalyticsService with a temporary database."""
    return AnalyticsService(temp_db)


@pytest.fixture
def alice(auth_service):
    """Register a user with the default categories."""
    _, user = auth_service.register("alice", "alice@example.com", "secret-a")
    return user


@pytest.fixture
def bob(auth_service):
    """Register a second user."""
    _, user = auth_service.register("bob", "bob@example.com", "secret-b")
    return user


@pytest.fixture
def alice_categories(category_service, alice):
    """Alice's seeded categories keyed by name."""
    return {cat.name: cat for cat in category_service.list_categories(alice.id)}


@pytest.fixture
def sample_expenses(expense_service, alice, alice_categories):
    """Create a handful of expenses for alice across two months."""
    food = alice_categories["Food"].id
    transport = alice_categories["Transportation"].id
    shopping = alice_categories["Shopping"].id
    rows = [
        (Decimal("25.50"), "Groceries", date(2023, 11, 15), food),
        (Decimal("40"), "Gas", date(2023, 11, 10), transport),
        (Decimal("30"), "Book", date(2023, 10, 25), shopping),
    ]
    return [
        expense_service.create_expense(
            alice.id, amount=amount, description=description, date=day, category_id=category_id
        )
        for amount, description, day, category_id in rows
    ]


@pytest.fixture
def app(temp_db):
    """Create the Flask app bound to the temporary database."""
    from expensetrack.api import create_app

    return create_app(
        {"TESTING": True, "SECRET_KEY": SECRET, "API_PREFIX": "/api"}, db=temp_db
    )


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    """Register a user over HTTP and return bearer headers."""
    response = client.post(
        "/auth/register",
        json={"username": "carol", "email": "carol@example.com", "password": "pw"},
    )
    token = response.get_json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
