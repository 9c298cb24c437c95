"""
Category label resolution shared by product create and update.
"""
import logging
from dataclasses import dataclass

from ...domain.entities.category import Category
from ...domain.exceptions import (
    CategoryNotFoundError,
    SubcategoryMismatchError,
    SubcategoryNotFoundError,
)
from ...domain.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


@dataclass
class CategoryLabelResolver:
    """
    Look up the categories a product points to.

    Product category names are denormalized copies. They are only ever
    taken from the records returned here, never from request input.
    """

    category_repository: CategoryRepository

    def require_category(self, category_id) -> Category:
        category = self.category_repository.find_by_id(category_id)
        if category is None or not category.is_active:
            logger.warning(f"Category {category_id} not found or inactive")
            raise CategoryNotFoundError(str(category_id))
        logger.debug(f"Category {category_id} resolved to '{category.name}'")
        return category

    def require_sub_category(self, sub_category_id, category_id) -> Category:
        sub_category = self.category_repository.find_by_id(sub_category_id)
        if sub_category is None or not sub_category.is_active:
            logger.warning(f"Subcategory {sub_category_id} not found or inactive")
            raise SubcategoryNotFoundError(str(sub_category_id))
        if not sub_category.is_child_of(category_id):
            logger.warning(
                f"Subcategory {sub_category_id} does not belong to category {category_id}"
            )
            raise SubcategoryMismatchError(str(sub_category_id), str(category_id))
        logger.debug(f"Subcategory {sub_category_id} resolved to '{sub_category.name}'")
        return sub_category
