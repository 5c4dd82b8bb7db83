"""Space cutting operators.

Two policies remove material from a space:

1. **Shrink** (sides, top, bottom, back, front): the panel eats into one
   boundary. The space keeps its id and loses the panel thickness along
   the panel's thin axis.
2. **Fork** (shelf, vertical divider, manual division): the space is
   replaced by two siblings either side of the cut plane.

Manual divisions have no material width, so their two halves meet
exactly at the cut plane.
"""

from __future__ import annotations

from dataclasses import replace

from ..entities import Panel, Space
from ..value_objects import Axis, Boundary, CutPolicy, DivisionAxis

__all__ = [
    "apply_cut_to_space",
    "cut_space",
    "divide_space",
    "divide_space_by_measurement",
]


def apply_cut_to_space(parent: Space, panel: Panel) -> Space:
    """Shrink ``parent`` by a boundary panel.

    Args:
        parent: Space the panel was placed in.
        panel: Positioned boundary panel.

    Returns:
        The reduced space. It keeps the parent's id; the centre moves half
        the thickness away from the panel so the two never overlap.
    """
    axis = panel.panel_type.thin_axis
    thickness = panel.thickness
    size = parent.current_dimensions.along(axis) - thickness
    shift = thickness / 2 if panel.panel_type.hug is Boundary.MIN else -thickness / 2
    return replace(
        parent,
        current_dimensions=parent.current_dimensions.with_axis(axis, size),
        position=parent.position.shifted(axis, shift),
    )


def divide_space(parent: Space, panel: Panel) -> list[Space]:
    """Split ``parent`` in two around a shelf or vertical divider.

    The split plane is the panel's centre on its thin axis. Each half stops
    half a thickness short of the plane, so neither overlaps the panel.

    Returns:
        ``[lower, upper]`` (below/above for shelves, left/right for dividers).
    """
    axis = panel.panel_type.thin_axis
    plane = panel.position.along(axis)
    half = panel.thickness / 2
    lower_id, upper_id = panel.derived_space_ids
    lower_label, upper_label = (
        ("below", "above") if axis is Axis.HEIGHT else ("left of", "right of")
    )
    box = parent.box
    return [
        _slab(
            parent,
            axis,
            box.min_along(axis),
            plane - half,
            space_id=lower_id,
            name=f"{parent.name} / {lower_label} {panel.name.lower()}",
            origin_id=panel.id,
        ),
        _slab(
            parent,
            axis,
            plane + half,
            box.max_along(axis),
            space_id=upper_id,
            name=f"{parent.name} / {upper_label} {panel.name.lower()}",
            origin_id=panel.id,
        ),
    ]


def divide_space_by_measurement(
    parent: Space,
    axis: DivisionAxis,
    value: float,
    from_end: bool,
    division_id: str,
) -> list[Space]:
    """Split ``parent`` with a measured cut of zero width.

    Args:
        parent: Space to divide.
        axis: In-plane axis the measurement runs along.
        value: Distance of the cut plane in millimetres.
        from_end: Measure from the far boundary instead of the origin one.
        division_id: Id of the division request; the halves are named
            ``<division_id>:start`` and ``<division_id>:end``.

    Returns:
        ``[start, end]``, or an empty list when ``value`` does not fall
        strictly inside the parent's extent (the cut is then a no-op).
    """
    box_axis = axis.axis
    extent = parent.current_dimensions.along(box_axis)
    if not 0 < value < extent:
        return []

    box = parent.box
    lo, hi = box.min_along(box_axis), box.max_along(box_axis)
    plane = hi - value if from_end else lo + value
    return [
        _slab(
            parent,
            box_axis,
            lo,
            plane,
            space_id=f"{division_id}:start",
            name=f"{parent.name} / part 1",
            origin_id=division_id,
        ),
        _slab(
            parent,
            box_axis,
            plane,
            hi,
            space_id=f"{division_id}:end",
            name=f"{parent.name} / part 2",
            origin_id=division_id,
        ),
    ]


def cut_space(parent: Space, panel: Panel) -> list[Space]:
    """Apply whichever cut policy ``panel`` uses."""
    if panel.panel_type.cut_policy is CutPolicy.FORK:
        return divide_space(parent, panel)
    return [apply_cut_to_space(parent, panel)]


def _slab(
    parent: Space,
    axis: Axis,
    lo: float,
    hi: float,
    *,
    space_id: str,
    name: str,
    origin_id: str,
) -> Space:
    """Part of ``parent`` between ``lo`` and ``hi`` along ``axis``."""
    return Space(
        id=space_id,
        name=name,
        current_dimensions=parent.current_dimensions.with_axis(axis, hi - lo),
        position=parent.position.with_axis(axis, (lo + hi) / 2),
        origin_id=origin_id,
    )
