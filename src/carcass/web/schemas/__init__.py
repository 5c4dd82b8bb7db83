"""Pydantic schemas for the REST API."""

from carcass.web.schemas.common import (
    DimensionsSchema,
    LayoutSchema,
    PanelSchema,
    PositionSchema,
    SizeSchema,
    SpaceSchema,
)
from carcass.web.schemas.requests import (
    AddPieceRequest,
    ConfigValidateRequest,
    CreateDesignRequest,
    LayoutRequest,
    SelectSpaceRequest,
    SplitSpaceRequest,
    UpdateThicknessRequest,
)
from carcass.web.schemas.responses import (
    DesignSessionSchema,
    ErrorResponseSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "DimensionsSchema",
    "LayoutSchema",
    "PanelSchema",
    "PositionSchema",
    "SizeSchema",
    "SpaceSchema",
    # Requests
    "AddPieceRequest",
    "ConfigValidateRequest",
    "CreateDesignRequest",
    "LayoutRequest",
    "SelectSpaceRequest",
    "SplitSpaceRequest",
    "UpdateThicknessRequest",
    # Responses
    "DesignSessionSchema",
    "ErrorResponseSchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
