"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carcass import __version__
from carcass.web.exceptions import register_exception_handlers
from carcass.web.routers import (
    designs_router,
    layout_router,
    templates_router,
    validate_router,
)

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build the API: stateless layout/validate/templates plus designer sessions."""
    app = FastAPI(
        title="Carcass Designer API",
        description="REST API for partitioning cabinet carcasses into spaces and panels",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (layout_router, validate_router, templates_router, designs_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": __version__}

    return app


# ASGI entry point, e.g. `uvicorn carcass.web.app:app`
app = create_app()
