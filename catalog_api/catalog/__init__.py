"""Product Catalog.

Product code generation, persistence models, repositories and the
catalog service.
"""

from catalog_api.catalog.codegen import generate_product_code
from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.repository import CategoryRepository, ProductFilter, ProductRepository
from catalog_api.catalog.service import CatalogService, ProductListFilters

__all__ = [
    # Code generation
    "generate_product_code",
    # Models
    "Category",
    "Product",
    # Repositories
    "CategoryRepository",
    "ProductFilter",
    "ProductRepository",
    # Service
    "CatalogService",
    "ProductListFilters",
]
