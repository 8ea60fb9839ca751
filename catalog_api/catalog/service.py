"""Catalog service for product operations.

High-level service that combines repository operations with
business logic: identifier validation, category resolution,
product code generation and sample-data population.
"""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.codegen import generate_product_code
from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.repository import CategoryRepository, ProductFilter, ProductRepository
from catalog_api.catalog.sample_data import SAMPLE_CATEGORIES, SAMPLE_PRODUCTS
from catalog_api.domain.exceptions import (
    CategoryNotFoundError,
    DuplicateProductCodeError,
    EmptyUpdateError,
    InvalidCategoryError,
    InvalidIdentifierError,
    ProductNotFoundError,
)

logger = structlog.get_logger()

UPDATABLE_FIELDS = ("name", "description", "price", "discount", "image", "status", "category")


def is_valid_id(value: str) -> bool:
    """Check whether a value is a well-formed record identifier (UUID)."""
    try:
        UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


def parse_id(value: str, entity_type: str) -> str:
    """Validate an identifier and return it in canonical form.

    Args:
        value: Raw identifier from the request.
        entity_type: Entity name used in the error message.

    Returns:
        Lowercase hyphenated UUID string.

    Raises:
        InvalidIdentifierError: If the value is not a UUID.
    """
    if not is_valid_id(value):
        raise InvalidIdentifierError(entity_type, value)
    return str(UUID(value))


@dataclass
class ProductListFilters:
    """Raw list filters as received from the query string.

    Attributes:
        category: Category ID or (partial) category name.
        search: Product name search text.
        status: Product status.
        min_price: Minimum price.
        max_price: Maximum price.
        discount: Minimum discount percentage.
    """

    category: str | None = None
    search: str | None = None
    status: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    discount: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Echo of the filters for list responses."""
        return {
            "category": self.category,
            "search": self.search,
            "status": self.status,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "discount": self.discount,
        }


@dataclass
class CategoryProducts:
    """A category together with its products."""

    category: Category
    products: list[Product] = field(default_factory=list)


@dataclass
class PopulateResult:
    """Result of inserting the sample data set."""

    category_ids: list[str]
    product_ids: list[str]

    @property
    def categories_added(self) -> int:
        """Number of categories inserted."""
        return len(self.category_ids)

    @property
    def products_added(self) -> int:
        """Number of products inserted."""
        return len(self.product_ids)


class CatalogService:
    """Service for catalog operations.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            product = await service.create_product(
                name="Clean Code",
                description="A handbook of agile software craftsmanship",
                price=49.99,
                category_id=category.id,
            )
            await session.commit()
    """

    def __init__(self, session: AsyncSession, request_id: str | None = None) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            request_id: Request ID for log correlation.
        """
        self.session = session
        self.request_id = request_id
        self.products = ProductRepository(session)
        self.categories = CategoryRepository(session)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_products(self, filters: ProductListFilters) -> list[Product]:
        """List products matching query-string filters.

        A ``category`` that is a valid ID filters by that ID. Anything else is
        matched case-insensitively against category names; when no category
        matches, the category filter is dropped.

        Args:
            filters: Raw list filters.

        Returns:
            Matching products with categories loaded.
        """
        category_id: str | None = None
        if filters.category:
            if is_valid_id(filters.category):
                category_id = str(UUID(filters.category))
            else:
                category = await self.categories.find_by_name(filters.category)
                if category is not None:
                    category_id = category.id

        products = await self.products.find_all(
            ProductFilter(
                category_id=category_id,
                search=filters.search,
                status=filters.status,
                min_price=filters.min_price,
                max_price=filters.max_price,
                discount=filters.discount,
            )
        )
        return list(products)

    async def list_categories(self) -> list[Category]:
        """List all categories."""
        return list(await self.categories.find_all())

    async def get_category_products(
        self,
        category_id: str,
        filters: ProductListFilters | None = None,
    ) -> CategoryProducts:
        """Get a category and the products that belong to it.

        Args:
            category_id: Category ID.
            filters: Optional extra filters; ``filters.category`` is ignored.

        Returns:
            The category and its matching products.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            CategoryNotFoundError: If the category does not exist.
        """
        category_id = parse_id(category_id, "category")
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        filters = filters or ProductListFilters()
        products = await self.products.find_all(
            ProductFilter(
                category_id=category.id,
                search=filters.search,
                status=filters.status,
                min_price=filters.min_price,
                max_price=filters.max_price,
                discount=filters.discount,
            )
        )
        return CategoryProducts(category=category, products=list(products))

    async def get_product(self, product_id: str) -> Product:
        """Get product by ID.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            ProductNotFoundError: If the product does not exist.
        """
        product_id = parse_id(product_id, "product")
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create_product(
        self,
        name: str,
        description: str,
        price: float,
        category_id: str,
        discount: float = 0,
        image: str = "",
        status: str = "active",
    ) -> Product:
        """Create a product with a generated product code.

        Args:
            name: Product name.
            description: Product description.
            price: Original price.
            category_id: Owning category ID.
            discount: Discount percentage.
            image: Image reference.
            status: Product status.

        Returns:
            Created product.

        Raises:
            InvalidCategoryError: If the category ID is malformed or unknown.
            DuplicateProductCodeError: If the generated code is already taken.
        """
        category = await self._resolve_category(category_id)
        product_code = generate_product_code(name)

        product = Product(
            name=name,
            description=description,
            price=float(price),
            discount=float(discount),
            image=image,
            status=status,
            category=category,
            product_code=product_code,
        )
        await self.products.save(product)

        logger.info(
            "Product created",
            product_id=product.id,
            product_code=product_code,
            category_id=category.id,
            request_id=self.request_id,
        )
        return product

    async def update_product(self, product_id: str, changes: dict[str, Any]) -> Product:
        """Apply a partial update to a product.

        Only ``UPDATABLE_FIELDS`` are considered and keys whose value is None
        are ignored. The product code never changes, even when the name does.

        Args:
            product_id: Product ID.
            changes: Field values to apply.

        Returns:
            Updated product.

        Raises:
            InvalidIdentifierError: If the product ID is malformed.
            InvalidCategoryError: If a new category is malformed or unknown.
            EmptyUpdateError: If no updatable field was given.
            ProductNotFoundError: If the product does not exist.
        """
        product_id = parse_id(product_id, "product")
        updates = {
            key: value
            for key, value in changes.items()
            if key in UPDATABLE_FIELDS and value is not None
        }
        if not updates:
            raise EmptyUpdateError()
        updated_fields = sorted(updates)

        category = None
        if "category" in updates:
            category = await self._resolve_category(updates.pop("category"))

        product = await self.products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        for key, value in updates.items():
            if key in ("price", "discount"):
                value = float(value)
            setattr(product, key, value)
        if category is not None:
            product.category = category

        await self.session.flush()

        logger.info(
            "Product updated",
            product_id=product.id,
            fields=updated_fields,
            request_id=self.request_id,
        )
        return product

    async def delete_product(self, product_id: str) -> str:
        """Delete a product.

        Returns:
            ID of the deleted product.

        Raises:
            InvalidIdentifierError: If the ID is malformed.
            ProductNotFoundError: If the product does not exist.
        """
        product = await self.get_product(product_id)
        await self.products.delete(product)

        logger.info(
            "Product deleted",
            product_id=product.id,
            request_id=self.request_id,
        )
        return product.id

    # ------------------------------------------------------------------
    # Development helpers
    # ------------------------------------------------------------------

    async def check(self) -> dict[str, Any]:
        """Summarize database contents.

        Returns:
            Product and category counts with one sample of each.
        """
        sample_product = await self.products.first()
        sample_category = await self.categories.first()
        return {
            "products_count": await self.products.count(),
            "categories_count": await self.categories.count(),
            "sample_product": sample_product.to_dict() if sample_product else None,
            "sample_category": sample_category.to_dict() if sample_category else None,
        }

    async def populate_sample_data(self) -> PopulateResult:
        """Insert the sample categories and products.

        Sample product codes are fixed, so populating twice is a conflict.

        Returns:
            IDs of the inserted categories and products.

        Raises:
            DuplicateProductCodeError: If a sample product code already exists.
        """
        existing = await self.products.find_existing_codes(
            [item["product_code"] for item in SAMPLE_PRODUCTS]
        )
        if existing:
            raise DuplicateProductCodeError(existing[0])

        categories = await self.categories.save_all(
            [Category(**item) for item in SAMPLE_CATEGORIES]
        )

        products = []
        for item in SAMPLE_PRODUCTS:
            data = dict(item)
            category = categories[data.pop("category_index")]
            products.append(Product(category=category, status="active", **data))
        await self.products.save_all(products)

        logger.info(
            "Sample data populated",
            categories_added=len(categories),
            products_added=len(products),
            request_id=self.request_id,
        )
        return PopulateResult(
            category_ids=[c.id for c in categories],
            product_ids=[p.id for p in products],
        )

    async def _resolve_category(self, category_id: str) -> Category:
        """Load a category referenced by a product.

        Raises:
            InvalidCategoryError: If the ID is malformed or unknown.
        """
        if not is_valid_id(category_id):
            raise InvalidCategoryError(category_id)
        category = await self.categories.get_by_id(str(UUID(category_id)))
        if category is None:
            raise InvalidCategoryError(category_id)
        return category
