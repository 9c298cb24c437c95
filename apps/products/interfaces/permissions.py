"""
Product permissions.
"""
import logging

from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.permissions import BasePermission

from apps.stores.infrastructure.repositories import DjangoStoreRepository
from ..infrastructure.repositories import DjangoProductRepository

logger = logging.getLogger(__name__)


class CanModifyProduct(BasePermission):
    """
    Allow changes to a product only to the owner of its store.

    Staff users may modify any product. The store must be approved.
    """

    def has_permission(self, request, view):
        if request.user and request.user.is_staff:
            return True

        product_id = view.kwargs.get('product_id')
        product = DjangoProductRepository().find_by_id(product_id)
        if product is None:
            raise NotFound("Product not found")

        store = DjangoStoreRepository().find_by_id(product.store_id)
        if store is None:
            raise NotFound("Associated store not found")

        if not store.is_owned_by(request.user.pk):
            logger.warning(f"User {request.user.pk} denied changes to product {product_id}")
            raise PermissionDenied(
                "You do not have permission to modify this product. "
                "Only the store owner can modify products."
            )

        if not store.is_approved:
            raise PermissionDenied(
                f"Cannot modify products for a store with status: {store.status.value}. "
                "Store must be Approved."
            )

        return True
