"""Domain layer.

Catalog error hierarchy shared by the service and API layers.
"""

from catalog_api.domain.exceptions import (
    CatalogError,
    CategoryNotFoundError,
    DuplicateProductCodeError,
    EmptyUpdateError,
    InvalidCategoryError,
    InvalidIdentifierError,
    InvalidProductNameError,
    ProductNotFoundError,
)

__all__ = [
    "CatalogError",
    "CategoryNotFoundError",
    "DuplicateProductCodeError",
    "EmptyUpdateError",
    "InvalidCategoryError",
    "InvalidIdentifierError",
    "InvalidProductNameError",
    "ProductNotFoundError",
]
