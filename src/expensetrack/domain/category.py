"""Category domain service."""

import logging
from typing import Optional

from expensetrack.database.base import Database
from expensetrack.domain.entities import Category as CategoryEntity
from expensetrack.domain.errors import (
    DependencyError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
    category_forbidden,
    category_in_use,
    category_not_found,
)

logger = logging.getLogger(__name__)


# Template copied into every new user's account at registration
DEFAULT_CATEGORIES = [
    ("Food", "#FF5733"),
    ("Transportation", "#33FF57"),
    ("Shopping", "#3357FF"),
    ("Entertainment", "#F033FF"),
    ("Bills", "#FF9933"),
    ("Other", "#33FFF9"),
]


class CategoryService:
    """Service for managing a user's categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def _clean_name(self, name: Optional[str]) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name is required")
        return name

    def _require_owned(self, owner_id: int, category_id: int) -> None:
        """Raise NotFoundError or ForbiddenError unless the owner holds the category."""
        actual_owner = self.db.get_category_owner_id(category_id)
        if actual_owner is None:
            raise NotFoundError(category_not_found(category_id))
        if actual_owner != owner_id:
            raise ForbiddenError(category_forbidden(category_id))

    def create_category(self, owner_id: int, name: str, color: Optional[str] = None) -> CategoryEntity:
        """Create a category.

        Args:
            owner_id: Owning user ID
            name: Category name
            color: Display color, stored as given

        Returns:
            Created category

        Raises:
            ValidationError: If name is empty
        """
        return self.db.create_category(
            owner_id=owner_id, name=self._clean_name(name), color=color or ""
        )

    def seed_default_categories(self, owner_id: int) -> list[CategoryEntity]:
        """Copy the default category template into a user's account."""
        return self.db.create_categories(owner_id, DEFAULT_CATEGORIES)

    def get_category(self, owner_id: int, category_id: int) -> CategoryEntity:
        """Get one of the owner's categories.

        Raises:
            NotFoundError: If the category is missing or belongs to someone else
        """
        category = self.db.get_category(owner_id, category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def list_categories(self, owner_id: int) -> list[CategoryEntity]:
        """List the owner's categories by name."""
        return self.db.list_categories(owner_id)

    def update_category(
        self,
        owner_id: int,
        category_id: int,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CategoryEntity:
        """Update name and/or color in place.

        Raises:
            NotFoundError: If category does not exist
            ForbiddenError: If category belongs to another user
            ValidationError: If a new name is empty
        """
        self._require_owned(owner_id, category_id)
        if name is not None:
            name = self._clean_name(name)

        category = self.db.update_category(owner_id, category_id, name=name, color=color)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def delete_category(self, owner_id: int, category_id: int) -> None:
        """Delete a category that no expense references.

        The reference count and the delete are separate statements, so an
        expense created between them is not detected.

        Raises:
            NotFoundError: If category does not exist
            ForbiddenError: If category belongs to another user
            DependencyError: If any expense still references the category
        """
        self._require_owned(owner_id, category_id)

        expense_count = self.db.count_category_expenses(owner_id, category_id)
        if expense_count > 0:
            logger.info(
                "Refusing to delete category %s for user %s: %s expenses",
                category_id,
                owner_id,
                expense_count,
            )
            raise DependencyError(category_in_use(category_id, expense_count))

        if not self.db.delete_category(owner_id, category_id):
            raise NotFoundError(category_not_found(category_id))
