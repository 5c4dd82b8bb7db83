"""Output formatters and exporters for resolved layouts."""

from __future__ import annotations

import json
from typing import Any

from carcass.domain import Dimensions, Panel, Position3D, ResolvedLayout, Space


def _dims(d: Dimensions) -> str:
    return f"{d.width:g} x {d.height:g} x {d.depth:g}"


def _pos(p: Position3D) -> str:
    return f"({p.x:g}, {p.y:g}, {p.z:g})"


class SpaceTreeFormatter:
    """Formats the space frontier as an indented text tree.

    The root is printed first, then every leaf with the panels placed in
    it. Void leaves are listed but marked, since they cannot be selected.
    """

    def __init__(self, selected_space_id: str | None = None) -> None:
        self.selected_space_id = selected_space_id

    def format(self, layout: ResolvedLayout) -> str:
        root = layout.root
        assert root.original_dimensions is not None
        lines = [
            f"LAYOUT: {root.name}",
            "=" * 70,
            f"Root '{root.id}': {_dims(root.original_dimensions)} mm"
            + ("  [empty design]" if root.is_active else ""),
            f"Panels placed: {len(layout.panels)}    "
            f"Leaves: {len(layout.leaves)}    "
            f"Selectable: {len(layout.active_spaces)}",
            "-" * 70,
        ]

        for leaf in layout.leaves:
            lines.extend(self._format_leaf(leaf))

        if layout.unresolved_panel_ids:
            lines.append("-" * 70)
            lines.append("Unresolved panels (parent space missing):")
            lines.extend(f"  - {pid}" for pid in layout.unresolved_panel_ids)

        if layout.pending_division_ids:
            lines.append("-" * 70)
            lines.append("Pending divisions (not applied):")
            lines.extend(f"  - {did}" for did in layout.pending_division_ids)

        return "\n".join(lines)

    def _format_leaf(self, leaf: Space) -> list[str]:
        marker = "*" if leaf.id == self.selected_space_id else " "
        status = "" if leaf.is_active else "  [void]"
        lines = [
            f"{marker} {leaf.id}  \"{leaf.name}\"",
            f"    {_dims(leaf.current_dimensions)} mm at {_pos(leaf.position)}{status}",
        ]
        for piece in leaf.pieces:
            lines.append(
                f"    - {piece.name} [{piece.panel_type.value}] "
                f"{_dims(piece.dimensions)} at {_pos(piece.position)}"
            )
        return lines


class PanelListFormatter:
    """Formats every positioned panel as a table."""

    def format(self, layout: ResolvedLayout) -> str:
        if not layout.panels:
            return "No panels placed."

        header = (
            f"{'Panel':<20} {'Type':<17} {'Width':>8} {'Height':>8} {'Depth':>8} "
            f"{'X':>8} {'Y':>8} {'Z':>8}  Space"
        )
        lines = ["PANELS", "=" * len(header), header, "-" * len(header)]
        for panel in layout.panels:
            d, p = panel.dimensions, panel.position
            lines.append(
                f"{panel.name[:20]:<20} {panel.panel_type.value:<17} "
                f"{d.width:>8.1f} {d.height:>8.1f} {d.depth:>8.1f} "
                f"{p.x:>8.1f} {p.y:>8.1f} {p.z:>8.1f}  {panel.parent_space_id}"
            )
        lines.append("-" * len(header))
        lines.append(f"Total panels: {len(layout.panels)}")
        return "\n".join(lines)


def panel_to_dict(panel: Panel) -> dict[str, Any]:
    return {
        "id": panel.id,
        "type": panel.panel_type.value,
        "name": panel.name,
        "color": panel.color,
        "thickness": panel.thickness,
        "parent_space_id": panel.parent_space_id,
        "position": {"x": panel.position.x, "y": panel.position.y, "z": panel.position.z},
        "dimensions": {
            "width": panel.dimensions.width,
            "height": panel.dimensions.height,
            "depth": panel.dimensions.depth,
        },
        "is_visible": panel.is_visible,
    }


def space_to_dict(space: Space) -> dict[str, Any]:
    dims, pos = space.current_dimensions, space.position
    data: dict[str, Any] = {
        "id": space.id,
        "name": space.name,
        "current_dimensions": {
            "width": dims.width,
            "height": dims.height,
            "depth": dims.depth,
        },
        "position": {"x": pos.x, "y": pos.y, "z": pos.z},
        "is_active": space.is_active,
        "origin_id": space.origin_id,
        "pieces": [panel_to_dict(p) for p in space.pieces],
    }
    if space.original_dimensions is not None:
        original = space.original_dimensions
        data["original_dimensions"] = {
            "width": original.width,
            "height": original.height,
            "depth": original.depth,
        }
    if space.sub_spaces:
        data["sub_spaces"] = [space_to_dict(s) for s in space.sub_spaces]
    return data


def layout_to_dict(
    layout: ResolvedLayout, selected_space_id: str | None = None
) -> dict[str, Any]:
    """Describe ``layout`` as plain JSON-compatible data.

    Mirrors what a renderer consumes: the root with its leaf frontier, the
    flat panel list and the current selection.
    """
    return {
        "space": space_to_dict(layout.root),
        "panels": [panel_to_dict(p) for p in layout.panels],
        "active_space_ids": [s.id for s in layout.active_spaces],
        "unresolved_panel_ids": list(layout.unresolved_panel_ids),
        "pending_division_ids": list(layout.pending_division_ids),
        "selected_space_id": selected_space_id,
    }


class JsonExporter:
    """Exports resolved layouts as JSON."""

    def export(
        self, layout: ResolvedLayout, selected_space_id: str | None = None
    ) -> str:
        return json.dumps(layout_to_dict(layout, selected_space_id), indent=2)
