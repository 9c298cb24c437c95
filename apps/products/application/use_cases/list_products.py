"""
List products use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.product_status import ProductStatus
from ..dtos.product_dto import (
    PaginationMetaDTO,
    ProductDTO,
    ProductListDTO,
    ProductListQueryDTO,
)

logger = logging.getLogger(__name__)

ALLOWED_FILTERS = ('store_id', 'category_id', 'sub_category_id', 'status')


@dataclass
class GetAllProductsUseCase(UseCase[ProductListQueryDTO, ProductListDTO]):
    """Use case for browsing products. Lists active products unless a status is given."""

    product_repository: ProductRepository

    def execute(self, input_dto: ProductListQueryDTO) -> UseCaseResult[ProductListDTO]:
        filters = {
            key: value
            for key, value in (input_dto.filters or {}).items()
            if key in ALLOWED_FILTERS and value
        }
        filters.setdefault('status', ProductStatus.ACTIVE.value)

        try:
            page = self.product_repository.find_all(
                filters,
                page=input_dto.page,
                limit=input_dto.limit,
                sort=input_dto.sort,
            )
        except Exception as e:
            logger.error(f"Error listing products with filters {filters}: {e}", exc_info=True)
            raise

        logger.debug(f"Listed {len(page.items)} of {page.total_items} products")
        return UseCaseResult.ok(
            ProductListDTO(
                products=[ProductDTO.from_entity(p) for p in page.items],
                pagination=PaginationMetaDTO(
                    total_items=page.total_items,
                    total_pages=page.total_pages,
                    current_page=page.current_page,
                    items_per_page=page.page_size,
                    has_next_page=page.has_next_page,
                    has_prev_page=page.has_prev_page,
                ),
            )
        )
