"""Domain entities for carcass design."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .value_objects import (
    ROOT_SPACE_ID,
    ROOT_SPACE_NAME,
    Axis,
    Box,
    CutPolicy,
    Dimensions,
    DivisionAxis,
    PanelType,
    Position3D,
)

# Display defaults per panel type: (name, color)
PIECE_CATALOGUE: dict[PanelType, tuple[str, str]] = {
    PanelType.LEFT_SIDE: ("Left Side", "#8b5cf6"),
    PanelType.RIGHT_SIDE: ("Right Side", "#8b5cf6"),
    PanelType.BOTTOM: ("Bottom", "#ef4444"),
    PanelType.TOP: ("Top", "#ef4444"),
    PanelType.BACK: ("Back", "#facc15"),
    PanelType.FRONT: ("Front", "#f59e0b"),
    PanelType.SHELF: ("Shelf", "#10b981"),
    PanelType.VERTICAL_DIVIDER: ("Vertical Divider", "#3b82f6"),
}

# Suffixes naming the two halves of a fork, lower side first
_FORK_SUFFIXES: dict[Axis, tuple[str, str]] = {
    Axis.HEIGHT: ("below", "above"),
    Axis.WIDTH: ("left", "right"),
}
_DIVISION_SUFFIXES = ("start", "end")


@dataclass(frozen=True)
class Panel:
    """A flat, typed component placed against a space.

    Attributes:
        id: Unique panel identifier.
        panel_type: Role of the panel; fixes its thin axis and cut policy.
        parent_space_id: Space the panel was requested against. Fixed at
            creation; the only hierarchy pointer a panel carries.
        thickness: Material thickness in millimetres.
        name: Display name.
        color: Display colour (hex string).
        position: Centre of the placed panel. Origin until resolved.
        dimensions: Size of the placed panel. Zero until resolved.
    """

    id: str
    panel_type: PanelType
    parent_space_id: str
    thickness: float
    name: str = ""
    color: str = ""
    position: Position3D = field(default_factory=Position3D.origin)
    dimensions: Dimensions = field(default_factory=Dimensions.zero)

    def __post_init__(self) -> None:
        if not self.thickness > 0:
            raise ValueError("Panel thickness must be positive")
        default_name, default_color = PIECE_CATALOGUE[self.panel_type]
        if not self.name:
            object.__setattr__(self, "name", default_name)
        if not self.color:
            object.__setattr__(self, "color", default_color)

    @property
    def derived_space_ids(self) -> tuple[str, ...]:
        """Ids of the spaces this panel creates when it forks its parent."""
        if self.panel_type.cut_policy is CutPolicy.SHRINK:
            return ()
        lower, upper = _FORK_SUFFIXES[self.panel_type.thin_axis]
        return (f"{self.id}:{lower}", f"{self.id}:{upper}")

    @property
    def box(self) -> Box:
        return Box(self.position, self.dimensions)

    @property
    def is_visible(self) -> bool:
        """False for panels whose computed box is degenerate."""
        return not self.dimensions.is_degenerate

    def positioned(self, position: Position3D, dimensions: Dimensions) -> Panel:
        """Return a copy carrying the computed placement."""
        return replace(self, position=position, dimensions=dimensions)

    def reparented(self, parent_space_id: str) -> Panel:
        return replace(self, parent_space_id=parent_space_id)


@dataclass(frozen=True)
class ManualDivision:
    """A measured planning cut with no material width.

    Attributes:
        id: Unique division identifier.
        parent_space_id: Space to divide.
        axis: In-plane axis the cut runs across.
        value: Distance of the cut in millimetres.
        from_end: Measure from the far boundary instead of the origin one.
    """

    id: str
    parent_space_id: str
    axis: DivisionAxis
    value: float
    from_end: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise ValueError("Division value must be a finite number")

    @property
    def derived_space_ids(self) -> tuple[str, str]:
        start, end = _DIVISION_SUFFIXES
        return (f"{self.id}:{start}", f"{self.id}:{end}")

    def reparented(self, parent_space_id: str) -> ManualDivision:
        return replace(self, parent_space_id=parent_space_id)


@dataclass(frozen=True)
class Space:
    """A rectangular volume that can receive panels or divisions.

    Only the root carries ``original_dimensions`` and ``sub_spaces``; the
    latter is the flat frontier of leaf spaces, not a recursive tree.
    ``origin_id`` names the panel or division whose fork created the space
    (None for the root and for spaces only ever shrunk from it).
    """

    id: str
    name: str
    current_dimensions: Dimensions
    position: Position3D
    original_dimensions: Dimensions | None = None
    pieces: tuple[Panel, ...] = ()
    sub_spaces: tuple[Space, ...] = ()
    is_active: bool = True
    origin_id: str | None = None

    @classmethod
    def root(cls, dimensions: Dimensions, name: str = ROOT_SPACE_NAME) -> Space:
        """Build the root space, centred on the origin."""
        return cls(
            id=ROOT_SPACE_ID,
            name=name,
            current_dimensions=dimensions,
            position=Position3D.origin(),
            original_dimensions=dimensions,
        )

    @property
    def box(self) -> Box:
        return Box(self.position, self.current_dimensions)

    @property
    def is_void(self) -> bool:
        return self.current_dimensions.is_void


@dataclass(frozen=True)
class DesignRequests:
    """Durable request state of a design; the resolver's only input.

    Everything else about a design (spaces, placements) is derived from
    this snapshot on demand.
    """

    root_dimensions: Dimensions
    default_thickness: float
    panels: tuple[Panel, ...] = ()
    divisions: tuple[ManualDivision, ...] = ()
    name: str = ROOT_SPACE_NAME

    @property
    def is_empty(self) -> bool:
        return not self.panels and not self.divisions
