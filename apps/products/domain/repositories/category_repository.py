"""
Category repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..entities.category import Category


class CategoryRepository(ABC):
    """Read access to the category tree."""

    @abstractmethod
    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find a category by ID."""
        pass
