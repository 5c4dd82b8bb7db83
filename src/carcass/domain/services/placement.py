"""Panel placement rules.

Each panel type has a thin axis and, for boundary panels, a side of the
parent space it sits against. Splitting panels (shelves, vertical dividers)
are centred in the parent along their thin axis.
"""

from __future__ import annotations

from ..entities import Panel, Space
from ..value_objects import Boundary, Dimensions, PanelType, Position3D

__all__ = [
    "compute_dimensions",
    "compute_position",
    "place_panel",
]


def compute_dimensions(
    parent: Space, panel_type: PanelType, thickness: float
) -> Dimensions:
    """Size of a panel of ``panel_type`` spanning ``parent``.

    The panel takes the parent's current size on its two long axes and
    ``thickness`` on its thin axis.
    """
    return parent.current_dimensions.with_axis(panel_type.thin_axis, thickness)


def compute_position(parent: Space, panel: Panel) -> Position3D:
    """Centre of ``panel`` inside ``parent``."""
    axis = panel.panel_type.thin_axis
    half = panel.thickness / 2
    match panel.panel_type.hug:
        case Boundary.MIN:
            coordinate = parent.box.min_along(axis) + half
        case Boundary.MAX:
            coordinate = parent.box.max_along(axis) - half
        case _:
            coordinate = parent.position.along(axis)
    return parent.position.with_axis(axis, coordinate)


def place_panel(parent: Space, panel: Panel) -> Panel:
    """Return ``panel`` positioned and sized against ``parent``."""
    return panel.positioned(
        compute_position(parent, panel),
        compute_dimensions(parent, panel.panel_type, panel.thickness),
    )
