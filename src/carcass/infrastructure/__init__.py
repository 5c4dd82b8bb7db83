"""Infrastructure layer - id generation, formatters and exporters."""

from .formatters import (
    JsonExporter,
    PanelListFormatter,
    SpaceTreeFormatter,
    layout_to_dict,
    panel_to_dict,
    space_to_dict,
)
from .ids import SequentialIdGenerator, UuidIdGenerator, unused_id

__all__ = [
    "JsonExporter",
    "PanelListFormatter",
    "SequentialIdGenerator",
    "SpaceTreeFormatter",
    "UuidIdGenerator",
    "layout_to_dict",
    "panel_to_dict",
    "space_to_dict",
    "unused_id",
]
