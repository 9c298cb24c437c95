"""
Get store products use case.
"""
import logging
import math
from dataclasses import dataclass

from shared.application import PaginatedResponseDTO, UseCase, UseCaseResult
from apps.stores.domain.exceptions import StoreNotFoundError
from apps.stores.domain.repositories.store_repository import StoreRepository
from ...domain.repositories.product_repository import ProductRepository
from ..dtos.product_dto import ProductDTO, StoreProductsQueryDTO

logger = logging.getLogger(__name__)


@dataclass
class GetStoreProductsUseCase(UseCase[StoreProductsQueryDTO, PaginatedResponseDTO[ProductDTO]]):
    """Use case for listing the active products of one store."""

    product_repository: ProductRepository
    store_repository: StoreRepository

    def execute(
        self, input_dto: StoreProductsQueryDTO
    ) -> UseCaseResult[PaginatedResponseDTO[ProductDTO]]:
        if self.store_repository.find_by_id(input_dto.store_id) is None:
            logger.warning(f"Products requested for unknown store {input_dto.store_id}")
            raise StoreNotFoundError(str(input_dto.store_id))

        page = self.product_repository.find_by_store_id(
            input_dto.store_id,
            page=input_dto.page,
            limit=input_dto.limit,
            sort=input_dto.sort,
        )

        return UseCaseResult.ok(
            PaginatedResponseDTO(
                data=[ProductDTO.from_entity(p) for p in page.items],
                total_items=page.total_items,
                total_pages=math.ceil(page.total_items / input_dto.limit),
                current_page=input_dto.page,
            )
        )
