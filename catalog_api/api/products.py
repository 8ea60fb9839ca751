"""Product and category API endpoints.

Provides filtered listing, category browsing and product CRUD.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.errors import to_http_exception
from catalog_api.api.middleware import request_id_for
from catalog_api.api.schemas import (
    CategoryProductsResponse,
    CategoryResponse,
    ErrorResponse,
    ProductCreateRequest,
    ProductDeletedResponse,
    ProductFiltersSchema,
    ProductResponse,
    ProductsListResponse,
    ProductUpdateRequest,
)
from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.service import CatalogService, ProductListFilters
from catalog_api.domain.exceptions import CatalogError
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Get catalog service bound to the request session."""
    return CatalogService(session, request_id=request_id_for(request))


def get_filters(
    search: Annotated[str | None, Query(description="Name contains (case-insensitive)")] = None,
    status: Annotated[str | None, Query(description="Exact product status")] = None,
    min_price: Annotated[float | None, Query(ge=0)] = None,
    max_price: Annotated[float | None, Query(ge=0)] = None,
    discount: Annotated[float | None, Query(ge=0, le=100, description="Minimum discount")] = None,
) -> ProductListFilters:
    """Collect product filters from the query string."""
    return ProductListFilters(
        search=search,
        status=status,
        min_price=min_price,
        max_price=max_price,
        discount=discount,
    )


# ============================================================================
# Converters
# ============================================================================


def product_to_response(product: Product) -> ProductResponse:
    """Convert Product model to response schema."""
    return ProductResponse(**product.to_dict())


def category_to_response(category: Category) -> CategoryResponse:
    """Convert Category model to response schema."""
    return CategoryResponse(**category.to_dict())


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductsListResponse,
    summary="List products",
    description="List products, optionally filtered by category (ID or name), "
    "name search, status, price range and minimum discount.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_service)],
    filters: Annotated[ProductListFilters, Depends(get_filters)],
    category: Annotated[str | None, Query(description="Category ID or name")] = None,
) -> ProductsListResponse:
    """List products with filtering.

    Args:
        service: Catalog service.
        filters: Query-string filters.
        category: Category ID or (partial) name.

    Returns:
        Matching products and the filters that were applied.
    """
    filters.category = category
    products = await service.list_products(filters)

    return ProductsListResponse(
        products=[product_to_response(p) for p in products],
        count=len(products),
        filters=ProductFiltersSchema(**filters.to_dict()),
    )


@router.get(
    "/categories",
    response_model=list[CategoryResponse],
    summary="List categories",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_service)],
) -> list[CategoryResponse]:
    """List all categories."""
    categories = await service.list_categories()
    return [category_to_response(c) for c in categories]


@router.get(
    "/categories/{category_id}/products",
    response_model=CategoryProductsResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="List products of a category",
)
async def list_category_products(
    category_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
    filters: Annotated[ProductListFilters, Depends(get_filters)],
) -> CategoryProductsResponse:
    """List the products of one category.

    Args:
        category_id: Category identifier.
        service: Catalog service.
        filters: Query-string filters applied within the category.

    Returns:
        The category and its products.

    Raises:
        HTTPException: If the ID is malformed or the category is not found.
    """
    try:
        result = await service.get_category_products(category_id, filters)
    except CatalogError as e:
        raise to_http_exception(e) from e

    return CategoryProductsResponse(
        category=category_to_response(result.category),
        products=[product_to_response(p) for p in result.products],
        count=len(result.products),
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Get product",
)
async def get_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Get a product by ID.

    Raises:
        HTTPException: If the ID is malformed or the product is not found.
    """
    try:
        product = await service.get_product(product_id)
    except CatalogError as e:
        raise to_http_exception(e) from e

    return product_to_response(product)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Create product",
    description="Create a product. Its product code is generated from the name.",
)
async def create_product(
    request: ProductCreateRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Create a new product.

    Args:
        request: Product creation request.
        service: Catalog service.

    Returns:
        Created product.

    Raises:
        HTTPException: On invalid category or duplicate product code.
    """
    try:
        product = await service.create_product(
            name=request.name,
            description=request.description,
            price=request.price,
            category_id=request.category,
            discount=request.discount,
            image=request.image,
            status=request.status,
        )
    except CatalogError as e:
        raise to_http_exception(e) from e

    return product_to_response(product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update product",
    description="Partially update a product. The product code never changes.",
)
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponse:
    """Update a product.

    Raises:
        HTTPException: On malformed IDs, empty updates or unknown product.
    """
    try:
        product = await service.update_product(
            product_id,
            request.model_dump(exclude_unset=True),
        )
    except CatalogError as e:
        raise to_http_exception(e) from e

    return product_to_response(product)


@router.delete(
    "/{product_id}",
    response_model=ProductDeletedResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete product",
)
async def delete_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductDeletedResponse:
    """Delete a product.

    Raises:
        HTTPException: If the ID is malformed or the product is not found.
    """
    try:
        deleted_id = await service.delete_product(product_id)
    except CatalogError as e:
        raise to_http_exception(e) from e

    return ProductDeletedResponse(
        message="Product deleted successfully",
        deleted_id=deleted_id,
    )
