"""
Delete product use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import OperationFailedError, error_message
from shared.infrastructure.storage import ImageStorage
from ...domain.entities.product import Product
from ...domain.repositories.product_repository import ProductRepository
from ..dtos.product_dto import ProductDTO

logger = logging.getLogger(__name__)


@dataclass
class DeleteProductUseCase(UseCase[UUID, Optional[ProductDTO]]):
    """
    Use case for deleting a product and its images.

    A missing product is not an error: the result data is None.
    Image cleanup is best effort, the record is removed even when
    the storage refuses to delete an image.
    """

    product_repository: ProductRepository
    image_storage: ImageStorage

    def execute(self, input_dto: UUID) -> UseCaseResult[Optional[ProductDTO]]:
        try:
            product = self.product_repository.find_by_id(input_dto)
            if product is None:
                logger.info(f"Product {input_dto} not found, nothing to delete")
                return UseCaseResult.ok(None)

            self._delete_images(product)
            deleted = self.product_repository.delete_by_id(product.id)
        except Exception as e:
            logger.error(f"Failed to delete product {input_dto}: {e}", exc_info=True)
            raise OperationFailedError("delete", "product", e) from e

        logger.info(f"Product {product.id} deleted")
        return UseCaseResult.ok(ProductDTO.from_entity(deleted or product))

    def _delete_images(self, product: Product) -> None:
        if product.main_image_url:
            try:
                self.image_storage.delete(product.main_image_url)
            except Exception as e:
                logger.warning(
                    f"Could not delete main image of product {product.id}: {error_message(e)}"
                )

        if product.image_urls:
            try:
                self.image_storage.delete_many(product.image_urls)
            except Exception as e:
                logger.warning(
                    f"Could not delete additional images of product {product.id}: {error_message(e)}"
                )
