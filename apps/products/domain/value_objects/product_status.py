"""
Product status value object.
"""
from enum import Enum


class ProductStatus(str, Enum):
    """Listing state of a product."""
    ACTIVE = 'Active'
    INACTIVE = 'Inactive'
    OUT_OF_STOCK = 'OutOfStock'
    DELETED = 'Deleted'

    @classmethod
    def choices(cls):
        return [(status.value, status.value) for status in cls]
