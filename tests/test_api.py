"""Tests for the REST API."""

import pytest


def _register(client, username, email, password="pw"):
    return client.post(
        "/auth/register",
        json={"username": username, "email": email, "password": password},
    )


def _headers(response):
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


def _category_id(client, headers, name):
    categories = client.get("/categories", headers=headers).get_json()
    return next(cat["id"] for cat in categories if cat["name"] == name)


class TestAuthRoutes:
    def test_register(self, client):
        response = _register(client, "dave", "dave@example.com")

        assert response.status_code == 201
        body = response.get_json()
        assert body["token"]
        assert body["user"]["username"] == "dave"
        assert "password_hash" not in body["user"]

    def test_register_duplicate_email(self, client):
        _register(client, "dave", "dave@example.com")
        response = _register(client, "dave2", "dave@example.com")

        assert response.status_code == 400
        assert response.get_json() == {"error": "Email already taken"}

    def test_login(self, client):
        _register(client, "dave", "dave@example.com", "hunter2")
        response = client.post("/auth/login", json={"email": "dave@example.com", "password": "hunter2"})

        assert response.status_code == 200
        assert response.get_json()["user"]["email"] == "dave@example.com"

    def test_login_invalid(self, client):
        _register(client, "dave", "dave@example.com", "hunter2")
        wrong = client.post("/auth/login", json={"email": "dave@example.com", "password": "x"})
        unknown = client.post("/auth/login", json={"email": "who@example.com", "password": "x"})

        assert wrong.status_code == 401
        assert unknown.status_code == 401
        assert wrong.get_json() == unknown.get_json()

    def test_me(self, client, auth_headers):
        response = client.get("/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json()["username"] == "carol"

    def test_me_without_token(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 401
        assert "error" in response.get_json()

    def test_me_with_bad_token(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 403
        assert "error" in response.get_json()

    def test_me_with_other_scheme(self, client, auth_headers):
        token = auth_headers["Authorization"].split(" ", 1)[1]
        response = client.get("/auth/me", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

    def test_login_manager_installed(self, app):
        from expensetrack.api.gate import login_manager

        assert app.login_manager is login_manager

    def test_api_prefix(self, client, auth_headers):
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200


class TestExpenseRoutes:
    def test_crud(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")

        created = client.post(
            "/expenses",
            headers=auth_headers,
            json={"amount": 25.5, "description": "Groceries", "date": "2023-11-15", "categoryId": food},
        )
        assert created.status_code == 201
        expense = created.get_json()
        assert expense["amount"] == 25.5
        assert expense["date"] == "2023-11-15"
        assert expense["categoryId"] == food

        updated = client.put(
            f"/expenses/{expense['id']}", headers=auth_headers, json={"description": "Market"}
        )
        assert updated.status_code == 200
        assert updated.get_json()["description"] == "Market"
        assert updated.get_json()["amount"] == 25.5

        fetched = client.get(f"/expenses/{expense['id']}", headers=auth_headers)
        assert fetched.get_json()["description"] == "Market"

        deleted = client.delete(f"/expenses/{expense['id']}", headers=auth_headers)
        assert deleted.status_code == 200
        assert "message" in deleted.get_json()

        assert client.get("/expenses", headers=auth_headers).get_json() == []

    def test_list_sorted_by_date_desc(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        for day in ("2023-10-25", "2023-11-15", "2023-11-10"):
            client.post("/expenses", headers=auth_headers, json={"amount": 1, "date": day, "categoryId": food})

        dates = [exp["date"] for exp in client.get("/expenses", headers=auth_headers).get_json()]
        assert dates == ["2023-11-15", "2023-11-10", "2023-10-25"]

    def test_search(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        client.post("/expenses", headers=auth_headers, json={"amount": 3, "description": "groceries", "date": "2024-01-01", "categoryId": food})
        client.post("/expenses", headers=auth_headers, json={"amount": 4, "description": "cinema", "date": "2024-01-02", "categoryId": food})

        found = client.get("/expenses?q=GROCERIES", headers=auth_headers).get_json()
        assert [exp["description"] for exp in found] == ["groceries"]

    def test_create_missing_fields(self, client, auth_headers):
        response = client.post("/expenses", headers=auth_headers, json={"description": "x"})
        assert response.status_code == 400
        assert "Missing required fields" in response.get_json()["error"]

    def test_create_invalid_amount(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        response = client.post(
            "/expenses", headers=auth_headers, json={"amount": "abc", "date": "2024-01-01", "categoryId": food}
        )
        assert response.status_code == 400

    def test_stored_amount_matches_response(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        created = client.post(
            "/expenses", headers=auth_headers, json={"amount": 12.345, "date": "2024-01-01", "categoryId": food}
        ).get_json()

        listed = client.get("/expenses", headers=auth_headers).get_json()
        assert created["amount"] == 12.35
        assert listed[0]["amount"] == created["amount"]

        updated = client.put(f"/expenses/{created['id']}", headers=auth_headers, json={"amount": "7.005"}).get_json()
        fetched = client.get(f"/expenses/{created['id']}", headers=auth_headers).get_json()
        assert updated["amount"] == fetched["amount"] == 7.01

    def test_fractional_category_id_rejected(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        response = client.post(
            "/expenses", headers=auth_headers, json={"amount": 1, "date": "2024-01-01", "categoryId": food + 0.9}
        )

        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid categoryId"}
        assert client.get("/expenses", headers=auth_headers).get_json() == []

    def test_category_id_as_digit_string(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        response = client.post(
            "/expenses", headers=auth_headers, json={"amount": 1, "date": "2024-01-01", "categoryId": str(food)}
        )

        assert response.status_code == 201
        assert response.get_json()["categoryId"] == food

    def test_category_filter_rejects_non_digits(self, client, auth_headers):
        response = client.get("/expenses?categoryId=1.5", headers=auth_headers)
        assert response.status_code == 400

    def test_requires_token(self, client):
        assert client.get("/expenses").status_code == 401

    def test_other_user_gets_forbidden(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        expense = client.post(
            "/expenses", headers=auth_headers, json={"amount": 10, "date": "2024-01-01", "categoryId": food}
        ).get_json()
        intruder = _headers(_register(client, "eve", "eve@example.com"))

        assert client.put(f"/expenses/{expense['id']}", headers=intruder, json={"amount": 1}).status_code == 403
        assert client.delete(f"/expenses/{expense['id']}", headers=intruder).status_code == 403
        assert client.get(f"/expenses/{expense['id']}", headers=intruder).status_code == 404
        assert client.get("/expenses", headers=intruder).get_json() == []

    def test_missing_expense(self, client, auth_headers):
        assert client.put("/expenses/9999", headers=auth_headers, json={"amount": 1}).status_code == 404


class TestCategoryRoutes:
    def test_list_sorted_by_name(self, client, auth_headers):
        names = [cat["name"] for cat in client.get("/categories", headers=auth_headers).get_json()]
        assert names == sorted(names)
        assert "Food" in names

    def test_create_update_delete(self, client, auth_headers):
        created = client.post("/categories", headers=auth_headers, json={"name": "Travel", "color": "#abcdef"})
        assert created.status_code == 201
        category = created.get_json()

        updated = client.put(f"/categories/{category['id']}", headers=auth_headers, json={"color": "#000000"})
        assert updated.get_json() == {**category, "color": "#000000"}

        deleted = client.delete(f"/categories/{category['id']}", headers=auth_headers)
        assert deleted.status_code == 200
        assert client.get(f"/categories/{category['id']}", headers=auth_headers).status_code == 404

    def test_delete_in_use(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        client.post("/expenses", headers=auth_headers, json={"amount": 1, "date": "2024-01-01", "categoryId": food})

        response = client.delete(f"/categories/{food}", headers=auth_headers)
        assert response.status_code == 400
        assert "in use" in response.get_json()["error"]
        assert client.get(f"/categories/{food}", headers=auth_headers).status_code == 200

    def test_other_user_gets_forbidden(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        intruder = _headers(_register(client, "eve", "eve@example.com"))

        assert client.put(f"/categories/{food}", headers=intruder, json={"name": "Mine"}).status_code == 403
        assert client.delete(f"/categories/{food}", headers=intruder).status_code == 403


class TestAnalyticsRoutes:
    @pytest.fixture
    def populated(self, client, auth_headers):
        food = _category_id(client, auth_headers, "Food")
        transport = _category_id(client, auth_headers, "Transportation")
        for amount, day, category in ((25.5, "2023-11-15", food), (40, "2023-11-10", transport), (30, "2023-10-25", food)):
            client.post(
                "/expenses",
                headers=auth_headers,
                json={"amount": amount, "date": day, "categoryId": category},
            )
        return {"food": food, "transport": transport}

    def test_monthly(self, client, auth_headers, populated):
        response = client.get("/analytics/monthly", headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json() == [
            {"month": "2023-10", "amount": 30.0},
            {"month": "2023-11", "amount": 65.5},
        ]

    def test_monthly_by_category(self, client, auth_headers, populated):
        response = client.get(f"/analytics/monthly/{populated['food']}", headers=auth_headers)
        assert response.get_json() == [
            {"month": "2023-10", "amount": 30.0},
            {"month": "2023-11", "amount": 25.5},
        ]

    def test_categories(self, client, auth_headers, populated):
        totals = client.get("/analytics/categories", headers=auth_headers).get_json()
        assert totals[0]["name"] == "Food"
        assert totals[0]["amount"] == 55.5

    def test_summary(self, client, auth_headers, populated):
        summary = client.get("/analytics/summary?month=2023-11", headers=auth_headers).get_json()
        assert summary["total"] == 95.5
        assert summary["currentMonthTotal"] == 65.5
        assert summary["previousMonthTotal"] == 30.0
        assert summary["largestCategory"]["name"] == "Food"

    def test_summary_previous_month_zero(self, client, auth_headers, populated):
        summary = client.get("/analytics/summary?month=2023-10", headers=auth_headers).get_json()
        assert summary["monthOverMonthChange"] == 0


class TestSecretKeyWarning:
    def test_default_key_warns(self, temp_db, caplog):
        from expensetrack.api import create_app
        from expensetrack.config import DEFAULT_SECRET_KEY

        with caplog.at_level("WARNING", logger="expensetrack"):
            create_app({"SECRET_KEY": DEFAULT_SECRET_KEY}, db=temp_db)

        assert "SECRET_KEY is not set" in caplog.text

    def test_configured_key_is_quiet(self, temp_db, caplog):
        from expensetrack.api import create_app

        with caplog.at_level("WARNING", logger="expensetrack"):
            create_app({"SECRET_KEY": "real-secret"}, db=temp_db)

        assert "SECRET_KEY" not in caplog.text

    def test_testing_mode_is_quiet(self, temp_db, caplog):
        from expensetrack.api import create_app
        from expensetrack.config import DEFAULT_SECRET_KEY

        with caplog.at_level("WARNING", logger="expensetrack"):
            create_app({"TESTING": True, "SECRET_KEY": DEFAULT_SECRET_KEY}, db=temp_db)

        assert "SECRET_KEY" not in caplog.text
