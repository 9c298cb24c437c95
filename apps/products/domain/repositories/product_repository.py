"""
Product repository interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from uuid import UUID

from shared.domain import Page
from ..entities.product import Product
from ..value_objects.product_patch import ProductPatch


class ProductRepository(ABC):
    """Abstract repository for Product aggregate."""

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Persist a new product."""
        pass

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        pass

    @abstractmethod
    def find_all(
        self,
        filters: Dict[str, Any],
        page: int = 1,
        limit: int = 10,
        sort: Optional[Dict[str, int]] = None,
    ) -> Page[Product]:
        """
        Find products matching exact-value filters.

        sort maps field names to 1 (ascending) or -1 (descending);
        newest first when empty.
        """
        pass

    @abstractmethod
    def find_by_store_id(
        self,
        store_id: UUID,
        page: int = 1,
        limit: int = 10,
        sort: Optional[Dict[str, int]] = None,
    ) -> Page[Product]:
        """Find the active products of a store."""
        pass

    @abstractmethod
    def update_by_id(self, product_id: UUID, patch: ProductPatch) -> Optional[Product]:
        """Write only the fields set in the patch. Returns the updated product."""
        pass

    @abstractmethod
    def delete_by_id(self, product_id: UUID) -> Optional[Product]:
        """Delete a product. Returns the deleted product."""
        pass
