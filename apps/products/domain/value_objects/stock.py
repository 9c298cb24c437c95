"""
Stock value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidProductError


@dataclass(frozen=True)
class Stock(ValueObject):
    """Units of a product available for sale."""
    quantity: int

    def validate(self) -> None:
        if self.quantity < 0:
            raise InvalidProductError("Stock quantity cannot be negative")
