"""
Product image gallery value object.
"""
from dataclasses import dataclass
from typing import Iterable, Tuple

from shared.domain import ValueObject
from ..exceptions import InvalidProductError

MAX_PRODUCT_IMAGES = 5


@dataclass(frozen=True)
class ProductImages(ValueObject):
    """
    Ordered gallery of additional product image URLs.

    Holds at most MAX_PRODUCT_IMAGES entries. Batches that would overflow
    the gallery are truncated to the free slots, keeping input order.
    """
    urls: Tuple[str, ...] = ()

    def validate(self) -> None:
        self._normalize('urls', tuple(self.urls))
        if len(self.urls) > MAX_PRODUCT_IMAGES:
            raise InvalidProductError(
                f"A product can have at most {MAX_PRODUCT_IMAGES} additional images"
            )

    @classmethod
    def of(cls, urls: Iterable[str]) -> 'ProductImages':
        """Build a gallery from the first images that fit."""
        return cls(urls=tuple(urls or ())[:MAX_PRODUCT_IMAGES])

    @property
    def remaining_slots(self) -> int:
        return MAX_PRODUCT_IMAGES - len(self.urls)

    def add(self, urls: Iterable[str]) -> 'ProductImages':
        """Append images up to the remaining capacity."""
        return ProductImages(urls=self.urls + tuple(urls)[:self.remaining_slots])

    def __len__(self) -> int:
        return len(self.urls)
