"""
Product DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.product import Product


class ImageAction(str, Enum):
    """What an update does with the additional image gallery."""
    KEEP = 'keep'
    ADD = 'add'
    REPLACE = 'replace'


@dataclass
class ProductCreateDTO:
    """DTO for creating a product."""
    name: str
    description: str
    price: Decimal
    stock: int
    category_id: Optional[UUID]
    store_id: Optional[UUID]
    seller_id: str
    sub_category_id: Optional[UUID] = None
    main_image: Any = None
    additional_images: List[Any] = field(default_factory=list)


@dataclass
class ProductUpdateDTO:
    """DTO for updating a product. None means the field is not being changed."""
    product_id: UUID
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    stock: Optional[int] = None
    status: Optional[str] = None
    category_id: Optional[UUID] = None
    sub_category_id: Optional[UUID] = None
    main_image: Any = None
    additional_images: List[Any] = field(default_factory=list)
    image_action: ImageAction = ImageAction.KEEP


@dataclass(frozen=True)
class ProductDTO:
    """DTO for product output."""
    id: UUID
    name: str
    description: str
    price: Decimal
    stock: int
    category_id: UUID
    category_name: str
    sub_category_id: Optional[UUID]
    sub_category_name: Optional[str]
    seller_id: str
    store_id: UUID
    main_image_url: str
    image_urls: List[str]
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Optional[Product]) -> Optional['ProductDTO']:
        """Create DTO from entity. Returns None when there is no product."""
        if product is None:
            return None
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price.amount,
            stock=product.stock.quantity,
            category_id=product.category_id,
            category_name=product.category_name,
            sub_category_id=product.sub_category_id or None,
            sub_category_name=product.sub_category_name or None,
            seller_id=product.seller_id,
            store_id=product.store_id,
            main_image_url=product.main_image_url,
            image_urls=product.image_urls or [],
            status=product.status.value,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


@dataclass
class ProductListQueryDTO:
    """DTO for listing products."""
    filters: Dict[str, Any] = field(default_factory=dict)
    page: int = 1
    limit: int = 10
    sort: Optional[Dict[str, int]] = None


@dataclass
class StoreProductsQueryDTO:
    """DTO for listing the products of one store."""
    store_id: UUID
    page: int = 1
    limit: int = 10
    sort: Optional[Dict[str, int]] = None


@dataclass
class PaginationMetaDTO:
    """Pagination details of a product listing."""
    total_items: int
    total_pages: int
    current_page: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool


@dataclass
class ProductListDTO:
    """DTO for a page of products."""
    products: List[ProductDTO]
    pagination: PaginationMetaDTO
