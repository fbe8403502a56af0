"""Domain layer for expensetrack application."""

# Services import the database layer, which imports domain entities; resolve
# them lazily so importing expensetrack.domain.entities stays cycle-free.
_SERVICES = {
    "ExpenseService": "expensetrack.domain.expense",
    "CategoryService": "expensetrack.domain.category",
    "AuthService": "expensetrack.domain.auth",
    "AnalyticsService": "expensetrack.domain.analytics",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
