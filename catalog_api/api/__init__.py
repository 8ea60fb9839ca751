"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from catalog_api.api.debug import router as debug_router
from catalog_api.api.health import router as health_router
from catalog_api.api.products import router as products_router

__all__ = [
    "debug_router",
    "health_router",
    "products_router",
]
