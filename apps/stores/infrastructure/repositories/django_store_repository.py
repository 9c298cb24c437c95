"""
Django ORM implementation of StoreRepository.
"""
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError

from ...domain.entities.store import Store
from ...domain.repositories.store_repository import StoreRepository
from ...domain.value_objects.store_status import StoreStatus
from ..models.store_model import StoreModel


class DjangoStoreRepository(StoreRepository):
    """Django ORM based store repository implementation."""

    def find_by_id(self, store_id: UUID) -> Optional[Store]:
        """Find a store by ID."""
        try:
            model = StoreModel.objects.get(id=store_id)
            return self._to_entity(model)
        except (StoreModel.DoesNotExist, DjangoValidationError):
            return None

    def _to_entity(self, model: StoreModel) -> Store:
        """Convert Django model to domain entity."""
        return Store(
            id=model.id,
            user_id=model.user_id,
            store_name=model.store_name,
            description=model.description,
            logo=model.logo,
            status=StoreStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
