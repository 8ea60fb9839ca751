"""Mapping of catalog errors to HTTP errors."""

from fastapi import HTTPException, status

from catalog_api.domain.exceptions import (
    CatalogError,
    CategoryNotFoundError,
    DuplicateProductCodeError,
    ProductNotFoundError,
)

_STATUS_BY_ERROR: dict[type[CatalogError], int] = {
    ProductNotFoundError: status.HTTP_404_NOT_FOUND,
    CategoryNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateProductCodeError: status.HTTP_409_CONFLICT,
}


def to_http_exception(error: CatalogError) -> HTTPException:
    """Convert a catalog error into an HTTPException.

    Errors not listed as not-found or conflict are bad input (400).
    """
    status_code = _STATUS_BY_ERROR.get(type(error), status.HTTP_400_BAD_REQUEST)
    return HTTPException(
        status_code=status_code,
        detail={
            "error_code": error.error_code,
            "message": error.message,
            "details": error.details,
        },
    )
