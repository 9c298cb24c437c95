# Value objects
from .price import Price
from .stock import Stock
from .product_status import ProductStatus
from .product_images import ProductImages, MAX_PRODUCT_IMAGES
from .product_patch import ProductPatch, UNSET

__all__ = [
    'Price',
    'Stock',
    'ProductStatus',
    'ProductImages',
    'MAX_PRODUCT_IMAGES',
    'ProductPatch',
    'UNSET',
]
