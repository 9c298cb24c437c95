"""
Shared DTOs.
"""
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar('T')


@dataclass
class PaginatedResponseDTO(Generic[T]):
    """Generic paginated envelope."""
    data: List[T] = field(default_factory=list)
    total_items: int = 0
    total_pages: int = 0
    current_page: int = 1
