"""Client-side cache over a user's expenses and categories."""

from expensetrack.client.cache import ExpenseCache, LocalSource

__all__ = ["ExpenseCache", "LocalSource"]
