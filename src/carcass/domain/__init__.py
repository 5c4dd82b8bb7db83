"""Domain layer - space partitioning and layout resolution."""

from .entities import PIECE_CATALOGUE, DesignRequests, ManualDivision, Panel, Space
from .services import (
    LayoutResolver,
    ResolvedLayout,
    apply_cut_to_space,
    compute_dimensions,
    compute_position,
    divide_space,
    divide_space_by_measurement,
    resolve_layout,
)
from .value_objects import (
    DEFAULT_THICKNESS,
    ROOT_SPACE_ID,
    Axis,
    Boundary,
    Box,
    CutPolicy,
    Dimensions,
    DivisionAxis,
    PanelType,
    Position3D,
)

__all__ = [
    "Axis",
    "Boundary",
    "Box",
    "CutPolicy",
    "DEFAULT_THICKNESS",
    "DesignRequests",
    "Dimensions",
    "DivisionAxis",
    "LayoutResolver",
    "ManualDivision",
    "PIECE_CATALOGUE",
    "Panel",
    "PanelType",
    "Position3D",
    "ROOT_SPACE_ID",
    "ResolvedLayout",
    "Space",
    "apply_cut_to_space",
    "compute_dimensions",
    "compute_position",
    "divide_space",
    "divide_space_by_measurement",
    "resolve_layout",
]
