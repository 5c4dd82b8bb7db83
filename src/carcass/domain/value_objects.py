"""Value objects for the carcass domain.

All lengths are millimetres. Positions are box centres in a single world
frame: the root space is centred on the origin, +x points right, +y up and
+z towards the front of the carcass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ROOT_SPACE_ID = "main"
ROOT_SPACE_NAME = "Main Carcass"

# Spaces with any side at or below this size are void: they keep their id
# but are never offered for selection or drawn.
VOID_THRESHOLD = 1.0

DEFAULT_ROOT_WIDTH = 800.0
DEFAULT_ROOT_HEIGHT = 2100.0
DEFAULT_ROOT_DEPTH = 600.0
DEFAULT_THICKNESS = 18.0


class Axis(str, Enum):
    """Box axes, named after the dimension they measure."""

    WIDTH = "width"
    HEIGHT = "height"
    DEPTH = "depth"

    @property
    def coordinate(self) -> str:
        """Name of the position coordinate running along this axis."""
        return _COORDINATES[self]


_COORDINATES = {Axis.WIDTH: "x", Axis.HEIGHT: "y", Axis.DEPTH: "z"}


class DivisionAxis(str, Enum):
    """In-plane axes a manual division can cut along."""

    X = "x"
    Y = "y"

    @property
    def axis(self) -> Axis:
        return Axis.WIDTH if self is DivisionAxis.X else Axis.HEIGHT


class Boundary(str, Enum):
    """Side of a space a boundary panel sits against."""

    MIN = "min"
    MAX = "max"


class CutPolicy(str, Enum):
    """How a panel consumes the space it is placed in.

    SHRINK panels eat into one boundary and leave a single smaller space.
    FORK panels split the space into two siblings.
    """

    SHRINK = "shrink"
    FORK = "fork"


class PanelType(str, Enum):
    """Types of panels in a carcass."""

    LEFT_SIDE = "left_side"
    RIGHT_SIDE = "right_side"
    BOTTOM = "bottom"
    TOP = "top"
    BACK = "back"
    FRONT = "front"
    SHELF = "shelf"
    VERTICAL_DIVIDER = "vertical_divider"

    @property
    def thin_axis(self) -> Axis:
        """Axis along which the panel measures its thickness."""
        return _PANEL_RULES[self][0]

    @property
    def hug(self) -> Boundary | None:
        """Boundary the panel is pushed against, None for splitting panels."""
        return _PANEL_RULES[self][1]

    @property
    def cut_policy(self) -> CutPolicy:
        return CutPolicy.SHRINK if self.hug is not None else CutPolicy.FORK


_PANEL_RULES: dict[PanelType, tuple[Axis, Boundary | None]] = {
    PanelType.LEFT_SIDE: (Axis.WIDTH, Boundary.MIN),
    PanelType.RIGHT_SIDE: (Axis.WIDTH, Boundary.MAX),
    PanelType.BOTTOM: (Axis.HEIGHT, Boundary.MIN),
    PanelType.TOP: (Axis.HEIGHT, Boundary.MAX),
    PanelType.BACK: (Axis.DEPTH, Boundary.MIN),
    PanelType.FRONT: (Axis.DEPTH, Boundary.MAX),
    PanelType.SHELF: (Axis.HEIGHT, None),
    PanelType.VERTICAL_DIVIDER: (Axis.WIDTH, None),
}


@dataclass(frozen=True)
class Dimensions:
    """Immutable box dimensions in millimetres.

    Non-positive components are allowed: a cut can legitimately leave a
    degenerate box behind, and such boxes are flagged rather than refused.
    """

    width: float
    height: float
    depth: float

    @classmethod
    def zero(cls) -> Dimensions:
        return cls(0.0, 0.0, 0.0)

    def along(self, axis: Axis) -> float:
        """Return the size along ``axis``."""
        return getattr(self, axis.value)

    def with_axis(self, axis: Axis, value: float) -> Dimensions:
        """Return a copy with the size along ``axis`` replaced."""
        sizes = {"width": self.width, "height": self.height, "depth": self.depth}
        sizes[axis.value] = value
        return Dimensions(**sizes)

    @property
    def is_degenerate(self) -> bool:
        """True when any component is zero or negative."""
        return self.width <= 0 or self.height <= 0 or self.depth <= 0

    @property
    def is_void(self) -> bool:
        """True when the box is too small to select or display."""
        return (
            self.width <= VOID_THRESHOLD
            or self.height <= VOID_THRESHOLD
            or self.depth <= VOID_THRESHOLD
        )

    @property
    def volume(self) -> float:
        """Volume in cubic millimetres (zero for degenerate boxes)."""
        if self.is_degenerate:
            return 0.0
        return self.width * self.height * self.depth


@dataclass(frozen=True)
class Position3D:
    """Centre of a box in world coordinates (millimetres, may be negative)."""

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> Position3D:
        return cls(0.0, 0.0, 0.0)

    def along(self, axis: Axis) -> float:
        """Return the coordinate along ``axis``."""
        return getattr(self, axis.coordinate)

    def shifted(self, axis: Axis, delta: float) -> Position3D:
        """Return a copy moved by ``delta`` along ``axis``."""
        coords = {"x": self.x, "y": self.y, "z": self.z}
        coords[axis.coordinate] += delta
        return Position3D(**coords)

    def with_axis(self, axis: Axis, value: float) -> Position3D:
        """Return a copy with the coordinate along ``axis`` replaced."""
        coords = {"x": self.x, "y": self.y, "z": self.z}
        coords[axis.coordinate] = value
        return Position3D(**coords)


@dataclass(frozen=True)
class Box:
    """Axis-aligned box given by its centre and dimensions."""

    position: Position3D
    dimensions: Dimensions

    def min_along(self, axis: Axis) -> float:
        return self.position.along(axis) - self.dimensions.along(axis) / 2

    def max_along(self, axis: Axis) -> float:
        return self.position.along(axis) + self.dimensions.along(axis) / 2

    def contains(self, other: Box, tolerance: float = 1e-6) -> bool:
        """Check whether ``other`` lies entirely inside this box."""
        return all(
            other.min_along(axis) >= self.min_along(axis) - tolerance
            and other.max_along(axis) <= self.max_along(axis) + tolerance
            for axis in Axis
        )
