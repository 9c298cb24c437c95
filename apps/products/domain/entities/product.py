"""
Product entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..value_objects.price import Price
from ..value_objects.stock import Stock
from ..value_objects.product_images import ProductImages
from ..value_objects.product_status import ProductStatus
from ..events.product_created import ProductCreated
from ..exceptions import InvalidProductError


@dataclass(eq=False)
class Product(AggregateRoot):
    """Product listed by a seller under one of their stores."""
    name: str
    description: str
    price: Price
    stock: Stock
    category_id: UUID
    category_name: str
    store_id: UUID
    seller_id: str
    main_image_url: str
    sub_category_id: Optional[UUID] = None
    sub_category_name: Optional[str] = None
    images: ProductImages = field(default_factory=ProductImages)
    status: ProductStatus = ProductStatus.ACTIVE

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Validate product data."""
        if not self.name or not self.name.strip():
            raise InvalidProductError("Product name is required")
        if not self.category_id or not self.category_name:
            raise InvalidProductError("Product must be associated with a category")
        if not self.store_id:
            raise InvalidProductError("Product must be associated with a store")
        if not self.seller_id:
            raise InvalidProductError("Product must have a seller")
        if not self.main_image_url:
            raise InvalidProductError("Main product image is required")

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: Decimal,
        stock_quantity: int,
        category_id: UUID,
        category_name: str,
        store_id: UUID,
        seller_id: str,
        main_image_url: str,
        sub_category_id: Optional[UUID] = None,
        sub_category_name: Optional[str] = None,
        image_urls: Optional[List[str]] = None,
    ) -> 'Product':
        """Factory method to create a new product."""
        product = cls(
            name=name,
            description=description or "",
            price=Price(amount=price),
            stock=Stock(quantity=stock_quantity),
            category_id=category_id,
            category_name=category_name,
            store_id=store_id,
            seller_id=str(seller_id),
            main_image_url=main_image_url,
            sub_category_id=sub_category_id or None,
            sub_category_name=sub_category_name or None,
            images=ProductImages.of(image_urls or []),
        )
        product.add_domain_event(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                store_id=product.store_id,
                seller_id=product.seller_id,
            )
        )
        return product

    @property
    def image_urls(self) -> List[str]:
        return list(self.images.urls)
