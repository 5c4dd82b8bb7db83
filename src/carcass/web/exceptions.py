"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from carcass.application.config import ConfigError
from carcass.application.templates import TemplateNotFoundError


class DesignNotFoundError(Exception):
    """Raised when a designer session id is unknown."""

    def __init__(self, design_id: str) -> None:
        self.design_id = design_id
        super().__init__(f"Design not found: {design_id}")


class PieceNotFoundError(Exception):
    """Raised when removing a panel the design does not hold."""

    def __init__(self, design_id: str, piece_id: str) -> None:
        self.design_id = design_id
        self.piece_id = piece_id
        super().__init__(f"Piece not found in design {design_id}: {piece_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(DesignNotFoundError)
    async def design_not_found_handler(
        request: Request, exc: DesignNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"design_id": exc.design_id},
            },
        )

    @app.exception_handler(PieceNotFoundError)
    async def piece_not_found_handler(
        request: Request, exc: PieceNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"design_id": exc.design_id, "piece_id": exc.piece_id},
            },
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )
