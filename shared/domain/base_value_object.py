"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.

    Value objects are immutable and compared by their attributes.
    They check their own attributes once, right after construction,
    so an instance that exists is always valid.
    """

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise a domain error when the attributes are not acceptable."""

    def _normalize(self, name: str, value: Any) -> None:
        """Rewrite an attribute of the frozen instance while validating."""
        object.__setattr__(self, name, value)
