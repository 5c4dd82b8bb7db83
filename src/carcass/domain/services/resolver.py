"""Layout resolution for carcass designs.

The resolver turns a :class:`DesignRequests` snapshot into the full space
frontier and panel placements. It never patches a previous result: every
call starts again from the root, so the same requests always give the same
layout (space ids included, see ``Panel.derived_space_ids``).

Resolution runs in three passes over a shared frontier of leaf spaces:

1. Panels. Take the first panel, in request order, whose parent space is
   in the frontier; place it and replace the parent with the cut result.
   Repeat until no remaining panel is ready. Request order and dependency
   order need not agree: a panel listed before the panel that creates its
   parent simply waits for a later round.
2. Manual divisions, the same way. A division whose cut falls outside its
   parent is not ready and stays pending.
3. Late panels. Panels still waiting whose parent was created in pass 2
   are placed in that leaf without cutting it further.

Each pass re-scans the queue and the frontier on every round, which is
quadratic in the number of requests. Designs hold tens of requests, not
thousands.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import TypeVar

from ..entities import DesignRequests, ManualDivision, Panel, Space
from .cutting import cut_space, divide_space_by_measurement
from .placement import place_panel

logger = logging.getLogger(__name__)

__all__ = [
    "LayoutResolver",
    "ResolvedLayout",
    "resolve_layout",
]

_Request = TypeVar("_Request", Panel, ManualDivision)


@dataclass(frozen=True)
class ResolvedLayout:
    """Derived layout of a design.

    Attributes:
        root: Root space. ``root.sub_spaces`` is the leaf frontier and
            ``root.pieces`` the panels resolved in the first pass.
        leaves: The leaf frontier, each leaf carrying its own pieces.
        panels: Every positioned panel, first-pass panels then late ones.
        unresolved_panel_ids: Panels whose parent space never appeared.
        pending_division_ids: Divisions that were never applied, either
            because their parent never appeared or their cut was invalid.
    """

    root: Space
    leaves: tuple[Space, ...]
    panels: tuple[Panel, ...]
    unresolved_panel_ids: tuple[str, ...] = ()
    pending_division_ids: tuple[str, ...] = ()

    @property
    def active_spaces(self) -> tuple[Space, ...]:
        """Leaves that can be selected and drawn."""
        return tuple(space for space in self.leaves if space.is_active)

    @property
    def visible_panels(self) -> tuple[Panel, ...]:
        return tuple(panel for panel in self.panels if panel.is_visible)

    def find_space(self, space_id: str) -> Space | None:
        """Look up a leaf by id, falling back to the root."""
        for space in self.leaves:
            if space.id == space_id:
                return space
        if space_id == self.root.id:
            return self.root
        return None

    def find_panel(self, panel_id: str) -> Panel | None:
        for panel in self.panels:
            if panel.id == panel_id:
                return panel
        return None


class LayoutResolver:
    """Derives spaces and panel placements from design requests."""

    def resolve(self, requests: DesignRequests) -> ResolvedLayout:
        """Compute the layout for ``requests`` from scratch."""
        root = Space.root(requests.root_dimensions, name=requests.name)
        frontier: list[Space] = [root]

        first_pass, waiting_panels = _run_to_fixed_point(
            list(requests.panels), frontier, _cut_with_panel
        )
        applied, pending_divisions = _run_to_fixed_point(
            list(requests.divisions), frontier, _cut_with_division
        )

        division_space_ids = {
            space_id
            for division in applied
            for space_id in division.derived_space_ids
        }
        leaves_by_id = {space.id: space for space in frontier}
        late: list[Panel] = []
        unresolved: list[Panel] = []
        for panel in waiting_panels:
            if panel.parent_space_id in division_space_ids and (
                panel.parent_space_id in leaves_by_id
            ):
                late.append(place_panel(leaves_by_id[panel.parent_space_id], panel))
            else:
                unresolved.append(panel)

        placed = first_pass + late
        leaves = tuple(
            replace(
                space,
                original_dimensions=None,
                pieces=tuple(p for p in placed if p.parent_space_id == space.id),
                sub_spaces=(),
                is_active=not space.is_void,
            )
            for space in frontier
        )
        resolved_root = replace(
            root,
            pieces=tuple(first_pass),
            sub_spaces=leaves,
            is_active=requests.is_empty,
        )

        logger.debug(
            f"Resolved {len(placed)} of {len(requests.panels)} panels, "
            f"{len(applied)} of {len(requests.divisions)} divisions, "
            f"{len(leaves)} leaves"
        )
        if unresolved:
            logger.debug(f"Unresolved panels: {[p.id for p in unresolved]}")
        if pending_divisions:
            logger.debug(f"Pending divisions: {[d.id for d in pending_divisions]}")

        return ResolvedLayout(
            root=resolved_root,
            leaves=leaves,
            panels=tuple(placed),
            unresolved_panel_ids=tuple(p.id for p in unresolved),
            pending_division_ids=tuple(d.id for d in pending_divisions),
        )


def resolve_layout(requests: DesignRequests) -> ResolvedLayout:
    """Compute the layout for ``requests`` with the default resolver."""
    return LayoutResolver().resolve(requests)


def _cut_with_panel(
    parent: Space, panel: Panel
) -> tuple[Panel, list[Space]] | None:
    placed = place_panel(parent, panel)
    return placed, cut_space(parent, placed)


def _cut_with_division(
    parent: Space, division: ManualDivision
) -> tuple[ManualDivision, list[Space]] | None:
    halves = divide_space_by_measurement(
        parent,
        division.axis,
        division.value,
        division.from_end,
        division_id=division.id,
    )
    if not halves:
        return None
    return division, halves


def _index_of(frontier: Sequence[Space], space_id: str) -> int | None:
    for index, space in enumerate(frontier):
        if space.id == space_id:
            return index
    return None


def _run_to_fixed_point(
    queue: list[_Request],
    frontier: list[Space],
    cut: Callable[[Space, _Request], tuple[_Request, list[Space]] | None],
) -> tuple[list[_Request], list[_Request]]:
    """Apply ready requests one at a time until none is ready.

    A request is ready when its parent space is in ``frontier`` and ``cut``
    accepts it. The earliest ready request in queue order goes first; its
    parent is replaced in place by the cut result, so ``frontier`` keeps a
    stable order across runs.

    Returns:
        ``(applied, remaining)``. ``applied`` holds what ``cut`` returned
        for each request (placed panels for the panel pass).
    """
    applied: list[_Request] = []
    while True:
        for position, request in enumerate(queue):
            index = _index_of(frontier, request.parent_space_id)
            if index is None:
                continue
            outcome = cut(frontier[index], request)
            if outcome is None:
                continue
            result, replacement = outcome
            frontier[index : index + 1] = replacement
            applied.append(result)
            del queue[position]
            break
        else:
            return applied, queue
