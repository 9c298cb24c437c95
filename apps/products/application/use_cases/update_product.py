"""
Update product use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import OperationFailedError
from shared.infrastructure.storage import ImageStorage
from ...domain.entities.product import Product
from ...domain.exceptions import ProductNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.product_images import MAX_PRODUCT_IMAGES
from ...domain.value_objects.product_patch import ProductPatch
from ...domain.value_objects.product_status import ProductStatus
from ..dtos.product_dto import ImageAction, ProductDTO, ProductUpdateDTO
from .category_labels import CategoryLabelResolver
from .create_product import GALLERY_IMAGE_PREFIX, MAIN_IMAGE_PREFIX, PRODUCT_IMAGE_FOLDER

logger = logging.getLogger(__name__)


@dataclass
class UpdateProductUseCase(UseCase[ProductUpdateDTO, ProductDTO]):
    """
    Use case for updating a product.

    Only the fields present in the input are written. Category and
    subcategory are validated again whenever they change, and the image
    gallery is rewritten according to the requested image action.
    """

    product_repository: ProductRepository
    category_repository: CategoryRepository
    image_storage: ImageStorage

    def execute(self, input_dto: ProductUpdateDTO) -> UseCaseResult[ProductDTO]:
        try:
            product = self._update(input_dto)
        except Exception as e:
            logger.error(f"Failed to update product {input_dto.product_id}: {e}", exc_info=True)
            raise OperationFailedError("update", "product", e) from e

        logger.info(f"Product {product.id} updated")
        return UseCaseResult.ok(ProductDTO.from_entity(product))

    def _update(self, input_dto: ProductUpdateDTO) -> Product:
        product = self.product_repository.find_by_id(input_dto.product_id)
        if product is None:
            raise ProductNotFoundError(str(input_dto.product_id))

        patch = self._field_changes(input_dto)
        patch = self._category_changes(input_dto, product, patch)

        if input_dto.main_image:
            main_image_url = self.image_storage.replace(
                product.main_image_url,
                input_dto.main_image,
                folder=PRODUCT_IMAGE_FOLDER,
                prefix=MAIN_IMAGE_PREFIX,
            )
            patch = patch.with_changes(main_image_url=main_image_url)

        patch = self._gallery_changes(input_dto, product, patch)

        updated = self.product_repository.update_by_id(product.id, patch)
        if updated is None:
            raise ProductNotFoundError(str(input_dto.product_id))
        return updated

    def _field_changes(self, input_dto: ProductUpdateDTO) -> ProductPatch:
        changes = {
            'name': input_dto.name,
            'description': input_dto.description,
            'price': input_dto.price,
            'stock': input_dto.stock,
        }
        if input_dto.status is not None:
            changes['status'] = ProductStatus(input_dto.status)
        return ProductPatch().with_changes(
            **{key: value for key, value in changes.items() if value is not None}
        )

    def _category_changes(
        self,
        input_dto: ProductUpdateDTO,
        product: Product,
        patch: ProductPatch,
    ) -> ProductPatch:
        labels = CategoryLabelResolver(self.category_repository)

        if input_dto.category_id is not None:
            category = labels.require_category(input_dto.category_id)
            patch = patch.with_changes(
                category_id=input_dto.category_id,
                category_name=category.name,
            )
            if input_dto.sub_category_id is None:
                # The old subcategory belongs to the previous category
                patch = patch.with_changes(sub_category_id=None, sub_category_name=None)

        if input_dto.sub_category_id is not None:
            effective_category_id = input_dto.category_id or product.category_id
            sub_category = labels.require_sub_category(
                input_dto.sub_category_id, effective_category_id
            )
            patch = patch.with_changes(
                sub_category_id=input_dto.sub_category_id,
                sub_category_name=sub_category.name,
            )

        return patch

    def _gallery_changes(
        self,
        input_dto: ProductUpdateDTO,
        product: Product,
        patch: ProductPatch,
    ) -> ProductPatch:
        new_files = list(input_dto.additional_images or [])
        action = ImageAction(input_dto.image_action)

        if action == ImageAction.REPLACE:
            if product.image_urls:
                result = self.image_storage.delete_many(product.image_urls)
                logger.info(
                    f"Removed {result['success']} of {len(product.image_urls)} images "
                    f"from product {product.id}"
                )
            image_urls = []
            if new_files:
                image_urls = self.image_storage.upload_many(
                    new_files[:MAX_PRODUCT_IMAGES],
                    folder=PRODUCT_IMAGE_FOLDER,
                    prefix=GALLERY_IMAGE_PREFIX,
                )
            return patch.with_changes(image_urls=image_urls)

        if action == ImageAction.ADD:
            remaining = product.images.remaining_slots
            if remaining <= 0 or not new_files:
                logger.debug(f"No images added to product {product.id} ({remaining} free slots)")
                return patch
            uploaded = self.image_storage.upload_many(
                new_files[:remaining],
                folder=PRODUCT_IMAGE_FOLDER,
                prefix=GALLERY_IMAGE_PREFIX,
            )
            return patch.with_changes(image_urls=list(product.images.add(uploaded).urls))

        return patch
