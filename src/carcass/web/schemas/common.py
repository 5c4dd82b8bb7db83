"""Common Pydantic schemas shared across requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from carcass.application.config.schemas import MAX_DIMENSION_MM
from carcass.domain import PanelType


class DimensionsSchema(BaseModel):
    """Box dimensions in millimetres."""

    width: float = Field(..., gt=0, le=MAX_DIMENSION_MM, description="Width in mm")
    height: float = Field(..., gt=0, le=MAX_DIMENSION_MM, description="Height in mm")
    depth: float = Field(..., gt=0, le=MAX_DIMENSION_MM, description="Depth in mm")


class SizeSchema(BaseModel):
    """Resolved size in millimetres; may be zero for consumed spaces."""

    width: float
    height: float
    depth: float


class PositionSchema(BaseModel):
    """Centre point relative to the root centre, in millimetres."""

    x: float
    y: float
    z: float


class PanelSchema(BaseModel):
    """A panel with its resolved geometry."""

    id: str
    type: PanelType
    name: str
    color: str
    thickness: float
    parent_space_id: str
    position: PositionSchema
    dimensions: SizeSchema
    is_visible: bool


class SpaceSchema(BaseModel):
    """A space of the resolved tree."""

    id: str
    name: str
    current_dimensions: SizeSchema
    original_dimensions: SizeSchema | None = None
    position: PositionSchema
    is_active: bool
    origin_id: str | None = None
    pieces: list[PanelSchema] = Field(default_factory=list)
    sub_spaces: list[SpaceSchema] = Field(default_factory=list)


class LayoutSchema(BaseModel):
    """Resolved layout as consumed by renderers."""

    space: SpaceSchema = Field(..., description="Root space with its leaf frontier")
    panels: list[PanelSchema] = Field(..., description="Every positioned panel")
    active_space_ids: list[str] = Field(..., description="Selectable leaf spaces")
    unresolved_panel_ids: list[str] = Field(default_factory=list)
    pending_division_ids: list[str] = Field(default_factory=list)
    selected_space_id: str | None = None
