"""Tests for the catalog service."""

from collections.abc import AsyncGenerator
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.catalog.codegen import generate_product_code
from catalog_api.catalog.models import Category
from catalog_api.catalog.sample_data import SAMPLE_CATEGORIES, SAMPLE_PRODUCTS
from catalog_api.catalog.service import (
    CatalogService,
    ProductListFilters,
    is_valid_id,
    parse_id,
)
from catalog_api.domain.exceptions import (
    CategoryNotFoundError,
    DuplicateProductCodeError,
    EmptyUpdateError,
    InvalidCategoryError,
    InvalidIdentifierError,
    ProductNotFoundError,
)
from catalog_api.infrastructure.database import Base


@pytest_asyncio.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """Session on a private in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db_session:
        yield db_session

    await engine.dispose()


@pytest_asyncio.fixture
async def service(session: AsyncSession) -> CatalogService:
    return CatalogService(session)


@pytest_asyncio.fixture
async def category(session: AsyncSession) -> Category:
    category = Category(name="Books", description="Books and educational materials")
    session.add(category)
    await session.flush()
    return category


class TestIdentifiers:
    """Tests for identifier helpers."""

    def test_valid_uuid(self) -> None:
        assert is_valid_id(str(uuid4()))

    @pytest.mark.parametrize("value", ["", "123", "not-an-id", "Electronics"])
    def test_invalid_values(self, value: str) -> None:
        assert not is_valid_id(value)

    def test_parse_id_canonicalizes(self) -> None:
        value = uuid4()
        assert parse_id(str(value).upper(), "product") == str(value)

    def test_parse_id_rejects_malformed(self) -> None:
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_id("abc", "product")
        assert exc_info.value.message == "Invalid product ID format"


class TestCreateProduct:
    """Tests for product creation."""

    async def test_generates_product_code(
        self, service: CatalogService, category: Category
    ) -> None:
        product = await service.create_product(
            name="Clean Code",
            description="A handbook of agile software craftsmanship",
            price=49.99,
            category_id=category.id,
            discount=10,
        )

        assert product.id is not None
        assert product.product_code == generate_product_code("Clean Code")
        assert product.final_price == 44.99
        assert product.category_name == "Books"
        assert product.status == "active"
        assert product.image == ""

    async def test_same_name_conflicts(
        self, service: CatalogService, category: Category
    ) -> None:
        await service.create_product(
            name="Clean Code", description="First", price=10, category_id=category.id
        )

        with pytest.raises(DuplicateProductCodeError) as exc_info:
            await service.create_product(
                name="Clean Code", description="Second", price=12, category_id=category.id
            )
        assert exc_info.value.details["product_code"] == generate_product_code("Clean Code")

    async def test_unknown_category_rejected(self, service: CatalogService) -> None:
        with pytest.raises(InvalidCategoryError):
            await service.create_product(
                name="Orphan", description="No category", price=1, category_id=str(uuid4())
            )

    async def test_malformed_category_rejected(self, service: CatalogService) -> None:
        with pytest.raises(InvalidCategoryError):
            await service.create_product(
                name="Orphan", description="No category", price=1, category_id="books"
            )


class TestUpdateProduct:
    """Tests for partial product updates."""

    async def test_product_code_survives_rename(
        self, service: CatalogService, category: Category
    ) -> None:
        product = await service.create_product(
            name="Clean Code", description="Handbook", price=49.99, category_id=category.id
        )
        original_code = product.product_code

        updated = await service.update_product(product.id, {"name": "Cleaner Code", "price": 39})

        assert updated.name == "Cleaner Code"
        assert updated.price == 39.0
        assert updated.product_code == original_code

    async def test_none_and_unknown_fields_are_ignored(
        self, service: CatalogService, category: Category
    ) -> None:
        product = await service.create_product(
            name="Clean Code", description="Handbook", price=49.99, category_id=category.id
        )

        with pytest.raises(EmptyUpdateError):
            await service.update_product(
                product.id, {"product_code": "X-1", "description": None}
            )

    async def test_category_change(
        self, service: CatalogService, session: AsyncSession, category: Category
    ) -> None:
        other = Category(name="Sports")
        session.add(other)
        await session.flush()
        product = await service.create_product(
            name="Yoga Mat", description="Mat", price=20, category_id=category.id
        )

        updated = await service.update_product(product.id, {"category": other.id})

        assert updated.category_id == other.id
        assert updated.category_name == "Sports"

    async def test_missing_product(self, service: CatalogService) -> None:
        with pytest.raises(ProductNotFoundError):
            await service.update_product(str(uuid4()), {"status": "inactive"})


class TestQueries:
    """Tests for listing and lookups."""

    async def test_list_by_category_name(self, service: CatalogService) -> None:
        await service.populate_sample_data()

        products = await service.list_products(ProductListFilters(category="electr"))

        assert {p.name for p in products} == {
            "iPhone 15 Pro",
            "Samsung Galaxy S24 Ultra",
            "MacBook Pro 14-inch",
        }

    async def test_unmatched_category_name_is_ignored(self, service: CatalogService) -> None:
        await service.populate_sample_data()

        products = await service.list_products(ProductListFilters(category="Groceries"))

        assert len(products) == len(SAMPLE_PRODUCTS)

    async def test_category_name_wildcard_is_literal(self, service: CatalogService) -> None:
        await service.populate_sample_data()

        products = await service.list_products(ProductListFilters(category="%"))

        assert len(products) == len(SAMPLE_PRODUCTS)

    async def test_category_products_missing_category(self, service: CatalogService) -> None:
        with pytest.raises(CategoryNotFoundError):
            await service.get_category_products(str(uuid4()))

    async def test_delete_product(self, service: CatalogService, category: Category) -> None:
        product = await service.create_product(
            name="Dumbbell Set", description="Weights", price=199, category_id=category.id
        )

        deleted_id = await service.delete_product(product.id)

        assert deleted_id == product.id
        with pytest.raises(ProductNotFoundError):
            await service.get_product(product.id)


class TestSampleData:
    """Tests for sample data population."""

    async def test_populate(self, service: CatalogService) -> None:
        result = await service.populate_sample_data()

        assert result.categories_added == len(SAMPLE_CATEGORIES)
        assert result.products_added == len(SAMPLE_PRODUCTS)

        summary = await service.check()
        assert summary["products_count"] == len(SAMPLE_PRODUCTS)
        assert summary["categories_count"] == len(SAMPLE_CATEGORIES)
        assert summary["sample_product"] is not None

    async def test_populate_twice_conflicts(self, service: CatalogService) -> None:
        await service.populate_sample_data()

        with pytest.raises(DuplicateProductCodeError):
            await service.populate_sample_data()

    async def test_check_on_empty_database(self, service: CatalogService) -> None:
        summary = await service.check()

        assert summary == {
            "products_count": 0,
            "categories_count": 0,
            "sample_product": None,
            "sample_category": None,
        }
