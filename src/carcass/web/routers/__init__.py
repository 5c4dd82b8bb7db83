"""API routers for the REST API."""

from carcass.web.routers.designs import router as designs_router
from carcass.web.routers.layout import router as layout_router
from carcass.web.routers.templates import router as templates_router
from carcass.web.routers.validate import router as validate_router

__all__ = [
    "designs_router",
    "layout_router",
    "templates_router",
    "validate_router",
]
