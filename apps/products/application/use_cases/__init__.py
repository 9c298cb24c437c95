# Product use cases
from .create_product import CreateProductUseCase
from .update_product import UpdateProductUseCase
from .delete_product import DeleteProductUseCase
from .get_product import GetProductByIdUseCase
from .list_products import GetAllProductsUseCase
from .get_store_products import GetStoreProductsUseCase

__all__ = [
    'CreateProductUseCase',
    'UpdateProductUseCase',
    'DeleteProductUseCase',
    'GetProductByIdUseCase',
    'GetAllProductsUseCase',
    'GetStoreProductsUseCase',
]
