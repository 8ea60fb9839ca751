"""Domain exceptions.

All catalog-level errors. Each error carries a machine-readable
``error_code`` that the API layer forwards in its error envelope.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions."""

    error_code = "CATALOG_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Bad Input
# ============================================================================


class InvalidProductNameError(CatalogError, ValueError):
    """Raised when a product code is requested for an empty name."""

    error_code = "INVALID_PRODUCT_NAME"

    def __init__(self, name: str) -> None:
        super().__init__(
            "Product name must be a non-empty string",
            details={"name": name},
        )


class InvalidIdentifierError(CatalogError, ValueError):
    """Raised when an identifier is not a well-formed UUID."""

    error_code = "INVALID_ID"

    def __init__(self, entity_type: str, value: str) -> None:
        """Initialize invalid identifier error.

        Args:
            entity_type: Kind of entity the identifier refers to.
            value: The malformed identifier.
        """
        super().__init__(
            f"Invalid {entity_type} ID format",
            details={"entity_type": entity_type, "value": value},
        )


class InvalidCategoryError(CatalogError, ValueError):
    """Raised when a product references a category that does not exist."""

    error_code = "INVALID_CATEGORY"

    def __init__(self, category_id: str) -> None:
        super().__init__(
            "Invalid category",
            details={"category_id": category_id},
        )


class EmptyUpdateError(CatalogError, ValueError):
    """Raised when an update carries no updatable field."""

    error_code = "NO_FIELDS_TO_UPDATE"

    def __init__(self) -> None:
        super().__init__("No valid fields to update")


# ============================================================================
# Not Found
# ============================================================================


class ProductNotFoundError(CatalogError):
    """Raised when a product does not exist."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        super().__init__(
            "Product not found",
            details={"product_id": product_id},
        )


class CategoryNotFoundError(CatalogError):
    """Raised when a category does not exist."""

    error_code = "CATEGORY_NOT_FOUND"

    def __init__(self, category_id: str) -> None:
        super().__init__(
            "Category not found",
            details={"category_id": category_id},
        )


# ============================================================================
# Conflict
# ============================================================================


class DuplicateProductCodeError(CatalogError):
    """Raised when the generated product code is already taken."""

    error_code = "DUPLICATE_PRODUCT_CODE"

    def __init__(self, product_code: str) -> None:
        """Initialize duplicate product code error.

        Args:
            product_code: The colliding product code.
        """
        super().__init__(
            "Duplicate product code",
            details={"product_code": product_code},
        )
