"""Designer session: the mutable request state behind a carcass design.

The session only ever stores requests (root dimensions, default thickness,
panels, manual divisions) plus the current selection. Spaces and panel
placements are recomputed from a snapshot of those requests every time
``layout`` is read.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from carcass.domain import (
    DEFAULT_THICKNESS,
    ROOT_SPACE_ID,
    DesignRequests,
    Dimensions,
    DivisionAxis,
    LayoutResolver,
    ManualDivision,
    Panel,
    PanelType,
    ResolvedLayout,
)
from carcass.domain.value_objects import (
    DEFAULT_ROOT_DEPTH,
    DEFAULT_ROOT_HEIGHT,
    DEFAULT_ROOT_WIDTH,
    ROOT_SPACE_NAME,
)
from carcass.infrastructure.ids import unused_id

if TYPE_CHECKING:
    from carcass.contracts import IdGeneratorProtocol, LayoutResolverProtocol

logger = logging.getLogger(__name__)


class FurnitureDesigner:
    """Holds the requests of one design and exposes its derived layout.

    Mutations are plain appends or rewrites of the request lists; none of
    them computes geometry. Reading ``layout`` resolves the current
    snapshot from scratch.

    Example:
        >>> designer = FurnitureDesigner()
        >>> _ = designer.add_piece(PanelType.BOTTOM)
        >>> designer.layout.root.sub_spaces[0].current_dimensions.height
        2082.0
    """

    def __init__(
        self,
        id_generator: "IdGeneratorProtocol | None" = None,
        root_dimensions: Dimensions | None = None,
        default_thickness: float = DEFAULT_THICKNESS,
        name: str = ROOT_SPACE_NAME,
        resolver: "LayoutResolverProtocol | None" = None,
    ) -> None:
        if id_generator is None:
            from carcass.infrastructure.ids import UuidIdGenerator

            id_generator = UuidIdGenerator()
        self._ids = id_generator
        self._resolver = resolver or LayoutResolver()
        self._name = name
        self._root_dimensions = root_dimensions or Dimensions(
            DEFAULT_ROOT_WIDTH, DEFAULT_ROOT_HEIGHT, DEFAULT_ROOT_DEPTH
        )
        self._default_thickness = _checked_thickness(default_thickness)
        self._panels: list[Panel] = []
        self._divisions: list[ManualDivision] = []
        self._selected_space_id: str | None = ROOT_SPACE_ID

    @classmethod
    def from_requests(
        cls,
        requests: DesignRequests,
        id_generator: "IdGeneratorProtocol | None" = None,
    ) -> FurnitureDesigner:
        """Create a session pre-loaded with ``requests``."""
        designer = cls(
            id_generator=id_generator,
            root_dimensions=requests.root_dimensions,
            default_thickness=requests.default_thickness,
            name=requests.name,
        )
        designer._panels = list(requests.panels)
        designer._divisions = list(requests.divisions)
        return designer

    @property
    def name(self) -> str:
        return self._name

    @property
    def root_dimensions(self) -> Dimensions:
        return self._root_dimensions

    @property
    def default_thickness(self) -> float:
        return self._default_thickness

    @property
    def panels(self) -> tuple[Panel, ...]:
        """Panel requests in creation order (unplaced)."""
        return tuple(self._panels)

    @property
    def divisions(self) -> tuple[ManualDivision, ...]:
        return tuple(self._divisions)

    @property
    def selected_space_id(self) -> str | None:
        return self._selected_space_id

    def snapshot(self) -> DesignRequests:
        """Return an immutable copy of the current requests."""
        return DesignRequests(
            root_dimensions=self._root_dimensions,
            default_thickness=self._default_thickness,
            panels=tuple(self._panels),
            divisions=tuple(self._divisions),
            name=self._name,
        )

    @property
    def layout(self) -> ResolvedLayout:
        """Layout derived from the current requests."""
        return self._resolver.resolve(self.snapshot())

    def select_space(self, space_id: str | None) -> None:
        """Change the selection. Has no effect on geometry."""
        self._selected_space_id = space_id

    def add_piece(self, panel_type: PanelType | str) -> Panel:
        """Request a new panel in the selected space.

        The panel targets the selected leaf space, or the root when nothing
        is selected or the selection is not an active (non-void) leaf.
        It is stored unplaced with the current default thickness.

        Returns:
            The stored panel request.
        """
        panel_type = PanelType(panel_type)
        target = self._target_space_id()
        panel = Panel(
            id=self._new_id(),
            panel_type=panel_type,
            parent_space_id=target,
            thickness=self._default_thickness,
        )
        self._panels.append(panel)
        logger.debug(f"Added {panel_type.value} {panel.id} to space {target}")
        return panel

    def remove_piece(self, panel_id: str) -> bool:
        """Remove a panel and hand its dependants to its own parent.

        Panels and divisions that targeted the removed panel, or one of the
        spaces it forked, are reparented to the removed panel's parent
        space. A selection pointing at one of those ids falls back to the
        root.

        Returns:
            True if a panel was removed, False if the id was unknown.
        """
        removed = next((p for p in self._panels if p.id == panel_id), None)
        if removed is None:
            logger.debug(f"Ignoring removal of unknown panel {panel_id}")
            return False

        orphaned_ids = {removed.id, *removed.derived_space_ids}
        new_parent = removed.parent_space_id
        self._panels = [
            p.reparented(new_parent) if p.parent_space_id in orphaned_ids else p
            for p in self._panels
            if p.id != panel_id
        ]
        self._divisions = [
            d.reparented(new_parent) if d.parent_space_id in orphaned_ids else d
            for d in self._divisions
        ]
        if self._selected_space_id in orphaned_ids:
            self._selected_space_id = ROOT_SPACE_ID
        logger.debug(f"Removed panel {panel_id}, dependants moved to {new_parent}")
        return True

    def split_space(
        self,
        space_id: str,
        axis: DivisionAxis | str,
        value: float,
        from_end: bool = False,
    ) -> ManualDivision:
        """Request a measured division of ``space_id``.

        The request is stored even if the cut will not fit; it then stays
        pending in the resolved layout.
        """
        division = ManualDivision(
            id=self._new_id(),
            parent_space_id=space_id,
            axis=DivisionAxis(axis),
            value=float(value),
            from_end=from_end,
        )
        self._divisions.append(division)
        logger.debug(
            f"Added division {division.id} on {space_id}: "
            f"{division.axis.value}={value} from_end={from_end}"
        )
        return division

    def clear_all(self) -> None:
        """Drop every panel and division request."""
        self._panels = []
        self._divisions = []
        logger.debug("Cleared all panels and divisions")

    def update_root_dimensions(self, dimensions: Dimensions) -> None:
        """Replace the root size. Existing requests are not re-checked."""
        self._root_dimensions = dimensions
        logger.debug(
            f"Root resized to {dimensions.width}x{dimensions.height}x{dimensions.depth}"
        )

    def set_default_thickness(self, thickness: float) -> None:
        """Change the thickness given to panels added from now on."""
        self._default_thickness = _checked_thickness(thickness)

    def _new_id(self) -> str:
        """Fresh request id, never one a loaded request already uses."""
        taken = {ROOT_SPACE_ID}
        taken.update(p.id for p in self._panels)
        taken.update(d.id for d in self._divisions)
        return unused_id(self._ids, taken)

    def _target_space_id(self) -> str:
        # void leaves are not selectable
        selected = self._selected_space_id
        if selected is not None:
            if any(space.id == selected for space in self.layout.active_spaces):
                return selected
        return ROOT_SPACE_ID


def _checked_thickness(thickness: float) -> float:
    if not thickness > 0:
        raise ValueError("Default thickness must be positive")
    return float(thickness)
