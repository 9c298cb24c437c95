# Django discovers models through this module.
from .infrastructure.models import CategoryModel, ProductModel  # noqa: F401
