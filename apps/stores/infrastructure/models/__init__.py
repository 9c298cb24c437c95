from .store_model import StoreModel

__all__ = ['StoreModel']
