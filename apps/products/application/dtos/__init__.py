# Product DTOs
from .product_dto import (
    ImageAction,
    ProductCreateDTO,
    ProductUpdateDTO,
    ProductDTO,
    ProductListQueryDTO,
    StoreProductsQueryDTO,
    PaginationMetaDTO,
    ProductListDTO,
)

__all__ = [
    'ImageAction',
    'ProductCreateDTO',
    'ProductUpdateDTO',
    'ProductDTO',
    'ProductListQueryDTO',
    'StoreProductsQueryDTO',
    'PaginationMetaDTO',
    'ProductListDTO',
]
