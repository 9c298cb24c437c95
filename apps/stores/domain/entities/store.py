"""
Store entity.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import AggregateRoot
from ..value_objects.store_status import StoreStatus


@dataclass(eq=False)
class Store(AggregateRoot):
    """Seller store that products are listed under."""
    user_id: str
    store_name: str
    description: str = ""
    logo: Optional[str] = None
    status: StoreStatus = StoreStatus.PENDING

    def is_owned_by(self, user_id) -> bool:
        """Check whether the given user owns this store."""
        return str(self.user_id) == str(user_id)

    @property
    def is_approved(self) -> bool:
        return self.status == StoreStatus.APPROVED
