"""
Create product use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import OperationFailedError, ValidationError
from shared.infrastructure.storage import ImageStorage
from apps.stores.domain.exceptions import (
    StoreNotApprovedError,
    StoreNotFoundError,
    StoreOwnershipError,
)
from apps.stores.domain.repositories.store_repository import StoreRepository
from ...domain.entities.product import Product
from ...domain.exceptions import MainImageRequiredError
from ...domain.repositories.category_repository import CategoryRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.product_images import MAX_PRODUCT_IMAGES
from ..dtos.product_dto import ProductCreateDTO, ProductDTO
from .category_labels import CategoryLabelResolver

logger = logging.getLogger(__name__)

PRODUCT_IMAGE_FOLDER = 'products'
MAIN_IMAGE_PREFIX = 'main'
GALLERY_IMAGE_PREFIX = 'gallery'


@dataclass
class CreateProductUseCase(UseCase[ProductCreateDTO, ProductDTO]):
    """Use case for listing a new product under a seller's store."""

    product_repository: ProductRepository
    store_repository: StoreRepository
    category_repository: CategoryRepository
    image_storage: ImageStorage

    def execute(self, input_dto: ProductCreateDTO) -> UseCaseResult[ProductDTO]:
        # Missing inputs are raised unwrapped
        if not input_dto.main_image:
            logger.warning(f"Product creation rejected for seller {input_dto.seller_id}: no main image")
            raise MainImageRequiredError()
        if not input_dto.store_id:
            raise ValidationError(
                "Store ID is required. Products must be associated with a store.",
                field="store_id",
            )
        if not input_dto.category_id:
            raise ValidationError(
                "Category ID is required. Products must be associated with a category.",
                field="category_id",
            )

        try:
            product = self._create(input_dto)
        except Exception as e:
            logger.error(f"Failed to create product '{input_dto.name}': {e}", exc_info=True)
            raise OperationFailedError("create", "product", e) from e

        return UseCaseResult.ok(ProductDTO.from_entity(product))

    def _create(self, input_dto: ProductCreateDTO) -> Product:
        store = self.store_repository.find_by_id(input_dto.store_id)
        if store is None:
            raise StoreNotFoundError(str(input_dto.store_id))
        if not store.is_owned_by(input_dto.seller_id):
            logger.warning(
                f"Seller {input_dto.seller_id} tried to list a product in store {store.id}"
            )
            raise StoreOwnershipError(str(store.id), str(input_dto.seller_id))
        if not store.is_approved:
            raise StoreNotApprovedError(store.status.value)

        labels = CategoryLabelResolver(self.category_repository)
        category = labels.require_category(input_dto.category_id)
        sub_category = None
        if input_dto.sub_category_id:
            sub_category = labels.require_sub_category(
                input_dto.sub_category_id, input_dto.category_id
            )

        main_image_url = self.image_storage.upload(
            input_dto.main_image,
            folder=PRODUCT_IMAGE_FOLDER,
            prefix=MAIN_IMAGE_PREFIX,
        )

        image_urls = []
        if input_dto.additional_images:
            image_urls = self.image_storage.upload_many(
                list(input_dto.additional_images)[:MAX_PRODUCT_IMAGES],
                folder=PRODUCT_IMAGE_FOLDER,
                prefix=GALLERY_IMAGE_PREFIX,
            )

        product = Product.create(
            name=input_dto.name,
            description=input_dto.description,
            price=input_dto.price,
            stock_quantity=input_dto.stock,
            category_id=input_dto.category_id,
            category_name=category.name,
            store_id=input_dto.store_id,
            seller_id=input_dto.seller_id,
            main_image_url=main_image_url,
            sub_category_id=input_dto.sub_category_id if sub_category else None,
            sub_category_name=sub_category.name if sub_category else None,
            image_urls=image_urls,
        )
        saved = self.product_repository.create(product)

        for event in product.pull_domain_events():
            logger.info(f"{event.event_type}: {event.payload()}")
        return saved
