"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[Any] | dict[str, Any] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryResponse(BaseModel):
    """A product category."""

    id: str = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")
    description: str | None = Field(default=None, description="Category description")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(BaseModel):
    """Request to create a product."""

    name: str = Field(..., min_length=1, max_length=500, description="Product name")
    description: str = Field(..., min_length=1, description="Product description")
    price: float = Field(..., gt=0, description="Original price")
    category: str = Field(..., min_length=1, description="Category identifier")
    discount: float = Field(default=0, ge=0, le=100, description="Discount percentage")
    image: str = Field(default="", max_length=1000, description="Image file name or URL")
    status: str = Field(default="active", min_length=1, max_length=50, description="Product status")


class ProductUpdateRequest(BaseModel):
    """Partial product update. The product code is not updatable."""

    name: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, gt=0)
    discount: float | None = Field(default=None, ge=0, le=100)
    image: str | None = Field(default=None, max_length=1000)
    status: str | None = Field(default=None, min_length=1, max_length=50)
    category: str | None = Field(default=None, description="New category identifier")


class ProductResponse(BaseModel):
    """Public product view."""

    id: str = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    original_price: float = Field(..., description="Price before discount")
    final_price: float = Field(..., description="Price after discount, rounded to cents")
    discount: float = Field(..., description="Discount percentage")
    image: str = Field(..., description="Image file name or URL")
    status: str = Field(..., description="Product status")
    category: str = Field(..., description="Category identifier")
    category_name: str = Field(..., description="Category name or 'Unknown'")
    product_code: str = Field(..., description="Code generated from the product name")


class ProductFiltersSchema(BaseModel):
    """Echo of the filters applied to a product listing."""

    category: str | None = None
    search: str | None = None
    status: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    discount: float | None = None


class ProductsListResponse(BaseModel):
    """Filtered list of products."""

    products: list[ProductResponse] = Field(..., description="Matching products")
    count: int = Field(..., description="Number of products returned")
    filters: ProductFiltersSchema = Field(..., description="Applied filters")


class CategoryProductsResponse(BaseModel):
    """Products of a single category."""

    category: CategoryResponse
    products: list[ProductResponse]
    count: int


class ProductDeletedResponse(BaseModel):
    """Confirmation of a deleted product."""

    message: str
    deleted_id: str


# ============================================================================
# Debug Schemas
# ============================================================================


class DebugCheckResponse(BaseModel):
    """Database summary for development."""

    products_count: int
    categories_count: int
    sample_product: ProductResponse | None = None
    sample_category: CategoryResponse | None = None


class PopulateResponse(BaseModel):
    """Result of inserting sample data."""

    message: str
    categories_added: int
    products_added: int
    category_ids: list[str]
    product_ids: list[str]
