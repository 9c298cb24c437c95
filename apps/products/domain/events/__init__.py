# Domain events
from .product_created import ProductCreated

__all__ = ['ProductCreated']
