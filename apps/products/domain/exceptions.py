"""
Product domain exceptions.
"""
from shared.domain.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


class InvalidProductError(ValidationError):
    """Raised when product data is invalid."""

    def __init__(self, message: str):
        super().__init__(message=message, field="product")


class MainImageRequiredError(ValidationError):
    """Raised when a product is created without a main image."""

    def __init__(self):
        super().__init__(message="Main product image is required", field="main_image")


class EmptyProductPatchError(ValidationError):
    """Raised when an update would not change any field."""

    def __init__(self):
        super().__init__(message="At least one field must be provided for update.")


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Product", entity_id=identifier, message="Product not found")
        self.identifier = identifier


class CategoryNotFoundError(ValidationError):
    """Raised when a category is missing or inactive."""

    def __init__(self, identifier: str):
        super().__init__(message="Category not found or inactive.", field="category_id")
        self.identifier = identifier


class SubcategoryNotFoundError(ValidationError):
    """Raised when a subcategory is missing or inactive."""

    def __init__(self, identifier: str):
        super().__init__(message="Subcategory not found or inactive.", field="sub_category_id")
        self.identifier = identifier


class SubcategoryMismatchError(BusinessRuleViolationError):
    """Raised when a subcategory's parent is not the product's category."""

    def __init__(self, sub_category_id: str, category_id: str):
        super().__init__(
            message="Subcategory does not belong to the selected category.",
            rule="subcategory_parent",
        )
        self.sub_category_id = sub_category_id
        self.category_id = category_id
