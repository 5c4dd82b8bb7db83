"""Domain services for carcass layout.

Placement rules, the two cut policies, and the resolver that drives them.
"""

from .cutting import (
    apply_cut_to_space,
    cut_space,
    divide_space,
    divide_space_by_measurement,
)
from .placement import compute_dimensions, compute_position, place_panel
from .resolver import LayoutResolver, ResolvedLayout, resolve_layout

__all__ = [
    "LayoutResolver",
    "ResolvedLayout",
    "apply_cut_to_space",
    "compute_dimensions",
    "compute_position",
    "cut_space",
    "divide_space",
    "divide_space_by_measurement",
    "place_panel",
    "resolve_layout",
]
