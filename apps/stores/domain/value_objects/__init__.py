# Value objects
from .store_status import StoreStatus

__all__ = ['StoreStatus']
