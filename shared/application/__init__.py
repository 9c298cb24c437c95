# Shared application module
from .base_use_case import UseCase, UseCaseResult
from .dtos import PaginatedResponseDTO

__all__ = ['UseCase', 'UseCaseResult', 'PaginatedResponseDTO']
