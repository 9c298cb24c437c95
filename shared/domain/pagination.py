"""
Page of repository results.
"""
import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar('T')


@dataclass
class Page(Generic[T]):
    """A single page of items plus the totals needed to navigate the rest."""
    items: List[T] = field(default_factory=list)
    total_items: int = 0
    current_page: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1
