"""
Get product use case.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.product_repository import ProductRepository
from ..dtos.product_dto import ProductDTO


@dataclass
class GetProductByIdUseCase(UseCase[UUID, Optional[ProductDTO]]):
    """Use case for fetching a single product. Data is None when it does not exist."""

    product_repository: ProductRepository

    def execute(self, input_dto: UUID) -> UseCaseResult[Optional[ProductDTO]]:
        product = self.product_repository.find_by_id(input_dto)
        return UseCaseResult.ok(ProductDTO.from_entity(product))
