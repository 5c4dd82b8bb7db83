"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from carcass.application.config.schemas import MAX_DIMENSION_MM, MAX_THICKNESS_MM
from carcass.domain import DivisionAxis, PanelType
from carcass.web.schemas.common import DimensionsSchema


class LayoutRequest(BaseModel):
    """Request for resolving a complete design."""

    config: dict[str, Any] = Field(..., description="Full design file JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a design."""

    config: dict[str, Any] = Field(..., description="Design file JSON")


class CreateDesignRequest(BaseModel):
    """Request for opening a designer session.

    At most one of ``config`` and ``template`` may be given. Without
    either the session starts from the default empty carcass, optionally
    resized by ``dimensions``.
    """

    config: dict[str, Any] | None = Field(default=None, description="Design file JSON")
    template: str | None = Field(default=None, description="Bundled template name")
    dimensions: DimensionsSchema | None = Field(default=None, description="Root size")
    default_thickness: float | None = Field(
        default=None, gt=0, le=MAX_THICKNESS_MM, description="Panel thickness in mm"
    )

    @model_validator(mode="after")
    def check_single_source(self) -> "CreateDesignRequest":
        if self.config is not None and self.template is not None:
            raise ValueError("Provide either config or template, not both")
        return self


class AddPieceRequest(BaseModel):
    """Request for adding a panel to a session."""

    type: PanelType = Field(..., description="Panel type")
    space_id: str | None = Field(
        default=None,
        description="Select this space before adding; defaults to the current selection",
    )


class SplitSpaceRequest(BaseModel):
    """Request for a measured division of a space."""

    space_id: str = Field(..., min_length=1, description="Space to split")
    axis: DivisionAxis = Field(..., description="x splits the width, y the height")
    value: float = Field(
        ..., allow_inf_nan=False, le=MAX_DIMENSION_MM, description="Offset in mm"
    )
    from_end: bool = Field(default=False, description="Measure from the far edge")


class UpdateThicknessRequest(BaseModel):
    thickness: float = Field(..., gt=0, le=MAX_THICKNESS_MM, description="Thickness in mm")


class SelectSpaceRequest(BaseModel):
    space_id: str | None = Field(..., description="Space to select, or null to clear")
