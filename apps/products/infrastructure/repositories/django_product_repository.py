"""
Django ORM implementation of ProductRepository.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone

from shared.domain import Page
from ...domain.entities.product import Product
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.price import Price
from ...domain.value_objects.product_images import ProductImages
from ...domain.value_objects.product_patch import ProductPatch
from ...domain.value_objects.product_status import ProductStatus
from ...domain.value_objects.stock import Stock
from ..models.product_model import ProductModel

logger = logging.getLogger(__name__)

FILTERABLE_FIELDS = ('store_id', 'category_id', 'sub_category_id', 'status', 'seller_id')
SORTABLE_FIELDS = ('name', 'price', 'stock', 'status', 'created_at', 'updated_at')
DEFAULT_ORDERING = ['-created_at']


class DjangoProductRepository(ProductRepository):
    """Django ORM based product repository implementation."""

    def create(self, product: Product) -> Product:
        """Persist a new product."""
        with transaction.atomic():
            model = ProductModel.objects.create(
                id=product.id,
                name=product.name,
                description=product.description,
                price=product.price.amount,
                stock=product.stock.quantity,
                category_id=product.category_id,
                category_name=product.category_name,
                sub_category_id=product.sub_category_id,
                sub_category_name=product.sub_category_name,
                seller_id=product.seller_id,
                store_id=product.store_id,
                main_image_url=product.main_image_url,
                image_urls=product.image_urls,
                status=product.status.value,
            )
            return self._to_entity(model)

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        try:
            model = ProductModel.objects.get(id=product_id)
            return self._to_entity(model)
        except (ProductModel.DoesNotExist, DjangoValidationError):
            return None

    def find_all(
        self,
        filters: Dict[str, Any],
        page: int = 1,
        limit: int = 10,
        sort: Optional[Dict[str, int]] = None,
    ) -> Page[Product]:
        """Find products matching exact-value filters."""
        lookups = {
            key: value.value if isinstance(value, ProductStatus) else value
            for key, value in (filters or {}).items()
            if key in FILTERABLE_FIELDS
        }
        queryset = ProductModel.objects.filter(**lookups)
        return self._paginate(queryset, page, limit, sort)

    def find_by_store_id(
        self,
        store_id: UUID,
        page: int = 1,
        limit: int = 10,
        sort: Optional[Dict[str, int]] = None,
    ) -> Page[Product]:
        """Find the active products of a store."""
        queryset = ProductModel.objects.filter(
            store_id=store_id,
            status=ProductStatus.ACTIVE.value,
        )
        return self._paginate(queryset, page, limit, sort)

    def update_by_id(self, product_id: UUID, patch: ProductPatch) -> Optional[Product]:
        """Write only the fields set in the patch."""
        fields = patch.changes()
        if isinstance(fields.get('status'), ProductStatus):
            fields['status'] = fields['status'].value

        with transaction.atomic():
            # update() skips auto_now, so the timestamp is written explicitly
            updated = ProductModel.objects.filter(id=product_id).update(
                **fields,
                updated_at=timezone.now(),
            )
            if not updated:
                return None
            return self._to_entity(ProductModel.objects.get(id=product_id))

    def delete_by_id(self, product_id: UUID) -> Optional[Product]:
        """Delete a product and return it as it was."""
        with transaction.atomic():
            model = ProductModel.objects.select_for_update().filter(id=product_id).first()
            if model is None:
                return None
            product = self._to_entity(model)
            model.delete()
            return product

    def _paginate(self, queryset, page: int, limit: int, sort: Optional[Dict[str, int]]) -> Page[Product]:
        """Apply ordering and slice one page out of the queryset."""
        offset = (page - 1) * limit
        total_items = queryset.count()
        models = queryset.order_by(*self._ordering(sort))[offset:offset + limit]
        return Page(
            items=[self._to_entity(model) for model in models],
            total_items=total_items,
            current_page=page,
            page_size=limit,
        )

    def _ordering(self, sort: Optional[Dict[str, int]]) -> List[str]:
        """Translate {field: 1 | -1} into order_by arguments."""
        ordering = []
        for field, direction in (sort or {}).items():
            if field not in SORTABLE_FIELDS:
                logger.warning(f"Ignoring unsupported product sort field: {field}")
                continue
            ordering.append(f"-{field}" if direction < 0 else field)
        return ordering or DEFAULT_ORDERING

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert Django model to domain entity."""
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=Price(amount=Decimal(str(model.price))),
            stock=Stock(quantity=model.stock),
            category_id=model.category_id,
            category_name=model.category_name,
            sub_category_id=model.sub_category_id,
            sub_category_name=model.sub_category_name,
            seller_id=model.seller_id,
            store_id=model.store_id,
            main_image_url=model.main_image_url,
            images=ProductImages.of(model.image_urls or []),
            status=ProductStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
