"""Development endpoints for inspecting and seeding the catalog.

Mounted only when ``settings.enable_debug_routes`` is set.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from catalog_api.api.errors import to_http_exception
from catalog_api.api.products import get_service
from catalog_api.api.schemas import DebugCheckResponse, ErrorResponse, PopulateResponse
from catalog_api.catalog.service import CatalogService
from catalog_api.domain.exceptions import CatalogError

router = APIRouter(prefix="/products/debug", tags=["Debug"])


@router.get("/check", response_model=DebugCheckResponse, summary="Summarize database")
async def check(
    service: Annotated[CatalogService, Depends(get_service)],
) -> DebugCheckResponse:
    """Return product/category counts and one sample of each."""
    return DebugCheckResponse(**await service.check())


@router.post(
    "/populate",
    response_model=PopulateResponse,
    responses={409: {"model": ErrorResponse}},
    summary="Insert sample data",
)
async def populate(
    service: Annotated[CatalogService, Depends(get_service)],
) -> PopulateResponse:
    """Insert the sample categories and products.

    Raises:
        HTTPException: 409 if the sample products are already present.
    """
    try:
        result = await service.populate_sample_data()
    except CatalogError as e:
        raise to_http_exception(e) from e

    return PopulateResponse(
        message="Sample data populated successfully!",
        categories_added=result.categories_added,
        products_added=result.products_added,
        category_ids=result.category_ids,
        product_ids=result.product_ids,
    )
