"""
Django ORM implementation of CategoryRepository.
"""
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError

from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..models.category_model import CategoryModel


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM based category repository implementation."""

    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find a category by ID."""
        try:
            model = CategoryModel.objects.get(id=category_id)
            return self._to_entity(model)
        except (CategoryModel.DoesNotExist, DjangoValidationError):
            return None

    def _to_entity(self, model: CategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            parent_id=model.parent_id,
            level=model.level,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
