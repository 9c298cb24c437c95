"""
Store domain exceptions.
"""
from shared.domain.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    InvalidOperationError,
)


class StoreNotFoundError(EntityNotFoundError):
    """Raised when a store is not found."""

    def __init__(self, store_id: str):
        super().__init__(entity_name="Store", entity_id=store_id, message="Store not found.")


class StoreOwnershipError(BusinessRuleViolationError):
    """Raised when a seller acts on a store owned by someone else."""

    def __init__(self, store_id: str, user_id: str):
        super().__init__(
            message="You can only create products for your own stores.",
            rule="store_ownership",
        )
        self.store_id = store_id
        self.user_id = user_id


class StoreNotApprovedError(InvalidOperationError):
    """Raised when a store that is not approved is used to list products."""

    def __init__(self, status: str):
        super().__init__(
            message=f"Cannot create products for a store with status: {status}. Store must be Approved.",
            operation="create_product",
            state=status,
        )
