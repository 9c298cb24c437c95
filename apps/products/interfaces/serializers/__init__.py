# Serializers
from .product_serializer import (
    ProductSerializer,
    ProductListSerializer,
    PaginatedProductSerializer,
    ProductCreateSerializer,
    ProductUpdateSerializer,
    ImageActionSerializer,
    ProductListQuerySerializer,
    StoreProductsQuerySerializer,
)

__all__ = [
    'ProductSerializer',
    'ProductListSerializer',
    'PaginatedProductSerializer',
    'ProductCreateSerializer',
    'ProductUpdateSerializer',
    'ImageActionSerializer',
    'ProductListQuerySerializer',
    'StoreProductsQuerySerializer',
]
