# Django discovers models through this module.
from .infrastructure.models import StoreModel  # noqa: F401
