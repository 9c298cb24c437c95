"""
Store status value object.
"""
from enum import Enum


class StoreStatus(str, Enum):
    """Review state of a seller store."""
    PENDING = 'Pending'
    APPROVED = 'Approved'
    REJECTED = 'Rejected'
    SUSPENDED = 'Suspended'

    @classmethod
    def choices(cls):
        return [(status.value, status.value) for status in cls]
