"""
Store repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..entities.store import Store


class StoreRepository(ABC):
    """Read access to seller stores."""

    @abstractmethod
    def find_by_id(self, store_id: UUID) -> Optional[Store]:
        """Find a store by ID."""
        pass
