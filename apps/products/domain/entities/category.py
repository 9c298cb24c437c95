"""
Category entity.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import AggregateRoot


@dataclass(eq=False)
class Category(AggregateRoot):
    """Category entity for organizing products."""
    name: str
    slug: str = ""
    description: str = ""
    parent_id: Optional[UUID] = None
    level: int = 0
    is_active: bool = True

    def is_child_of(self, category_id) -> bool:
        """Check whether this category sits directly under the given one."""
        if self.parent_id is None or category_id is None:
            return False
        return str(self.parent_id) == str(category_id)
