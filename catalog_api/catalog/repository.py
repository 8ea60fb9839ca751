"""Catalog repositories for database operations.

Provides CRUD operations for products and categories with filtering.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy import and_, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_api.catalog.models import Category, Product
from catalog_api.domain.exceptions import DuplicateProductCodeError


@dataclass
class ProductFilter:
    """Filter parameters for product listing.

    Attributes:
        category_id: Filter by exact category ID.
        search: Case-insensitive substring of the product name.
        status: Filter by exact status.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        discount: Minimum discount percentage.
    """

    category_id: str | None = None
    search: str | None = None
    status: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    discount: float | None = None


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save_all(self, categories: list[Category]) -> list[Category]:
        """Save multiple categories to database.

        Args:
            categories: Categories to save.

        Returns:
            Saved categories with generated IDs.
        """
        self.session.add_all(categories)
        await self.session.flush()
        return categories

    async def get_by_id(self, category_id: str) -> Category | None:
        """Get category by ID.

        Args:
            category_id: Category ID.

        Returns:
            Category if found, None otherwise.
        """
        return await self.session.get(Category, category_id)

    async def find_by_name(self, name: str) -> Category | None:
        """Find the first category whose name contains the given text.

        Matching is case-insensitive.

        Args:
            name: Text to look for in category names.

        Returns:
            First matching category, None if nothing matches.
        """
        query = (
            select(Category)
            .where(Category.name.icontains(name, autoescape=True))
            .order_by(Category.created_at, Category.name)
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_all(self) -> Sequence[Category]:
        """List all categories.

        Returns:
            Categories ordered by creation time.
        """
        result = await self.session.execute(
            select(Category).order_by(Category.created_at, Category.name)
        )
        return result.scalars().all()

    async def count(self) -> int:
        """Count categories."""
        result = await self.session.execute(select(func.count(Category.id)))
        return result.scalar_one()

    async def first(self) -> Category | None:
        """Get any one category, or None when the table is empty."""
        result = await self.session.execute(select(Category).limit(1))
        return result.scalar_one_or_none()


class ProductRepository:
    """Repository for Product database operations.

    Every product returned has its category eagerly loaded so that
    ``Product.to_dict()`` can be called outside of an awaiting context.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_all(
                ProductFilter(search="phone", max_price=1000),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product.

        Raises:
            DuplicateProductCodeError: If the product code is already taken.
        """
        self.session.add(product)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateProductCodeError(product.product_code) from e
        return product

    async def save_all(self, products: list[Product]) -> list[Product]:
        """Save multiple products to database.

        Args:
            products: Products to save.

        Returns:
            Saved products.
        """
        self.session.add_all(products)
        await self.session.flush()
        return products

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        query = (
            select(Product)
            .where(Product.id == product_id)
            .options(selectinload(Product.category))
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_all(self, filters: ProductFilter | None = None) -> Sequence[Product]:
        """Find products matching filters.

        Args:
            filters: Optional filter parameters.

        Returns:
            Sequence of matching products, oldest first.
        """
        query = select(Product).options(selectinload(Product.category))

        conditions = self._build_conditions(filters or ProductFilter())
        if conditions:
            query = query.where(and_(*conditions))

        query = query.order_by(Product.created_at, Product.name)

        result = await self.session.execute(query)
        return result.scalars().all()

    async def find_existing_codes(self, product_codes: list[str]) -> list[str]:
        """Return which of the given product codes are already stored.

        Args:
            product_codes: Codes to check.

        Returns:
            Subset of codes present in the database.
        """
        if not product_codes:
            return []
        query = select(Product.product_code).where(Product.product_code.in_(product_codes))
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self) -> int:
        """Count products."""
        result = await self.session.execute(select(func.count(Product.id)))
        return result.scalar_one()

    async def first(self) -> Product | None:
        """Get any one product, or None when the table is empty."""
        query = select(Product).options(selectinload(Product.category)).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def delete(self, product: Product) -> None:
        """Delete a product.

        Args:
            product: Product to delete.
        """
        await self.session.delete(product)
        await self.session.flush()

    def _build_conditions(self, filters: ProductFilter) -> list:
        """Translate a filter into SQLAlchemy conditions."""
        conditions = []

        if filters.category_id is not None:
            conditions.append(Product.category_id == filters.category_id)

        if filters.search:
            conditions.append(Product.name.icontains(filters.search, autoescape=True))

        if filters.status:
            conditions.append(Product.status == filters.status)

        if filters.min_price is not None:
            conditions.append(Product.price >= filters.min_price)

        if filters.max_price is not None:
            conditions.append(Product.price <= filters.max_price)

        if filters.discount is not None:
            conditions.append(Product.discount >= filters.discount)

        return conditions
