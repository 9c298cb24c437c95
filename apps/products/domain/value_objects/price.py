"""
Price value object.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shared.domain import ValueObject
from ..exceptions import InvalidProductError


@dataclass(frozen=True)
class Price(ValueObject):
    """Non-negative product price."""
    amount: Decimal

    def validate(self) -> None:
        if not isinstance(self.amount, Decimal):
            try:
                self._normalize('amount', Decimal(str(self.amount)))
            except InvalidOperation:
                raise InvalidProductError(f"Invalid price: '{self.amount}'")
        if not self.amount.is_finite() or self.amount < 0:
            raise InvalidProductError("Price must be non-negative")
