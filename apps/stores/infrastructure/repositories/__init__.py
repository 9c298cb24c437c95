# Repository implementations
from .django_store_repository import DjangoStoreRepository

__all__ = ['DjangoStoreRepository']
