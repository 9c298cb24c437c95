"""
Sparse product update value object.
"""
from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from shared.domain import ValueObject
from ..exceptions import EmptyProductPatchError, InvalidProductError


class _Unset:
    """Marker for a field the update does not touch."""

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class ProductPatch(ValueObject):
    """
    Set of product fields to write.

    Every field defaults to UNSET, which is different from None:
    UNSET leaves the stored value alone, None clears it.
    """
    name: Any = UNSET
    description: Any = UNSET
    price: Any = UNSET
    stock: Any = UNSET
    status: Any = UNSET
    category_id: Any = UNSET
    category_name: Any = UNSET
    sub_category_id: Any = UNSET
    sub_category_name: Any = UNSET
    main_image_url: Any = UNSET
    image_urls: Any = UNSET

    def validate(self) -> None:
        if self.price is not UNSET and self.price is not None and self.price < 0:
            raise InvalidProductError("Price must be non-negative")
        if self.stock is not UNSET and self.stock is not None and self.stock < 0:
            raise InvalidProductError("Stock quantity cannot be negative")
        if self.name is not UNSET and not self.name:
            raise InvalidProductError("Product name cannot be empty")
        if self.main_image_url is not UNSET and not self.main_image_url:
            raise InvalidProductError("Main product image is required")

    def with_changes(self, **changes) -> 'ProductPatch':
        """Return a copy with more fields set."""
        return replace(self, **changes)

    def changes(self) -> Dict[str, Any]:
        """Get the fields that are set. At least one is required."""
        data = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
        if not data:
            raise EmptyProductPatchError()
        return data
