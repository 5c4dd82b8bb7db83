"""Pydantic models for carcass design files.

A design file stores the durable requests of a design: root dimensions,
default thickness, and the ordered panel and division requests. Nothing
derived (spaces, placements) is ever stored.

Example:
    {
        "schema_version": "1.0",
        "design": {
            "name": "Bookcase",
            "dimensions": {"width": 800, "height": 2100, "depth": 350},
            "default_thickness": 18,
            "panels": [
                {"id": "bottom", "type": "bottom"},
                {"id": "shelf1", "type": "shelf", "parent_space_id": "main"}
            ],
            "divisions": [
                {"parent_space_id": "shelf1:above", "axis": "x", "value": 400}
            ]
        }
    }
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from carcass.domain.value_objects import (
    DEFAULT_ROOT_DEPTH,
    DEFAULT_ROOT_HEIGHT,
    DEFAULT_ROOT_WIDTH,
    DEFAULT_THICKNESS,
    ROOT_SPACE_ID,
    ROOT_SPACE_NAME,
    DivisionAxis,
    PanelType,
)

# Supported schema versions for design files
# Version 1.0: Panels, manual divisions, root dimensions and default thickness
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

MAX_DIMENSION_MM = 10000.0
MAX_THICKNESS_MM = 100.0


class DimensionsConfig(BaseModel):
    """Root carcass dimensions in millimetres."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=MAX_DIMENSION_MM)
    height: float = Field(..., gt=0, le=MAX_DIMENSION_MM)
    depth: float = Field(..., gt=0, le=MAX_DIMENSION_MM)


class PanelConfig(BaseModel):
    """A panel request.

    Attributes:
        id: Panel id. Generated when omitted; give one explicitly whenever
            another request targets a space this panel creates.
        type: Panel type.
        parent_space_id: Space the panel is placed in (root by default).
        thickness: Thickness in mm; the design default when omitted.
        name: Display name; the catalogue name for the type when omitted.
        color: Display colour; the catalogue colour when omitted.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    type: PanelType
    parent_space_id: str = Field(default=ROOT_SPACE_ID, min_length=1)
    thickness: float | None = Field(default=None, gt=0, le=MAX_THICKNESS_MM)
    name: str | None = None
    color: str | None = None


class DivisionConfig(BaseModel):
    """A manual division request.

    ``value`` is not range-checked here: a cut that does not fit its space
    is a legal request that simply never applies.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    parent_space_id: str = Field(default=ROOT_SPACE_ID, min_length=1)
    axis: DivisionAxis
    value: float = Field(..., allow_inf_nan=False)
    from_end: bool = False


class DesignConfig(BaseModel):
    """Requests making up one carcass design."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default=ROOT_SPACE_NAME, min_length=1, max_length=200)
    dimensions: DimensionsConfig = Field(
        default_factory=lambda: DimensionsConfig(
            width=DEFAULT_ROOT_WIDTH,
            height=DEFAULT_ROOT_HEIGHT,
            depth=DEFAULT_ROOT_DEPTH,
        )
    )
    default_thickness: float = Field(
        default=DEFAULT_THICKNESS, gt=0, le=MAX_THICKNESS_MM
    )
    panels: list[PanelConfig] = Field(default_factory=list, max_length=500)
    divisions: list[DivisionConfig] = Field(default_factory=list, max_length=500)


class DesignConfiguration(BaseModel):
    """Root model of a design file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., description="Design file schema version")
    design: DesignConfig

    @field_validator("schema_version")
    @classmethod
    def check_schema_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{value}'. Supported: {supported}"
            )
        return value

    @model_validator(mode="after")
    def check_request_ids(self) -> "DesignConfiguration":
        """Reject explicit ids that would clash with other requests or spaces."""
        seen: set[str] = set()
        ids = [p.id for p in self.design.panels] + [
            d.id for d in self.design.divisions
        ]
        for request_id in ids:
            if request_id is None:
                continue
            if request_id == ROOT_SPACE_ID:
                raise ValueError(f"Request id '{request_id}' is reserved for the root")
            # ':' separates a request id from the side of the cut it created
            if ":" in request_id:
                raise ValueError(f"Request id '{request_id}' must not contain ':'")
            if request_id in seen:
                raise ValueError(f"Duplicate request id '{request_id}'")
            seen.add(request_id)
        return self
