"""Unit tests for the layout resolver.

These tests verify:
- The reference scenarios (bottom, shelf, manual cuts, nested targets)
- Idempotence and order independence of resolution
- Orphaned panels and pending divisions
- Late panels inside manual-division leaves
- Void spaces after oversized cuts
"""

from dataclasses import replace

import pytest

from carcass.domain import (
    Axis,
    DesignRequests,
    Dimensions,
    DivisionAxis,
    LayoutResolver,
    ManualDivision,
    Panel,
    PanelType,
    Space,
    resolve_layout,
)
from carcass.domain.services import resolver as resolver_module
from carcass.domain.services.placement import place_panel


def _panel(
    panel_id: str,
    panel_type: PanelType,
    parent: str = "main",
    thickness: float = 18.0,
) -> Panel:
    return Panel(id=panel_id, panel_type=panel_type, parent_space_id=parent, thickness=thickness)


def _division(
    division_id: str,
    value: float,
    axis: DivisionAxis = DivisionAxis.X,
    parent: str = "main",
    from_end: bool = False,
) -> ManualDivision:
    return ManualDivision(
        id=division_id, parent_space_id=parent, axis=axis, value=value, from_end=from_end
    )


def _requests(
    root_dimensions: Dimensions,
    panels: tuple[Panel, ...] = (),
    divisions: tuple[ManualDivision, ...] = (),
) -> DesignRequests:
    return DesignRequests(
        root_dimensions=root_dimensions,
        default_thickness=18.0,
        panels=panels,
        divisions=divisions,
    )


class TestEmptyDesign:
    """Tests for a design with no requests."""

    def test_root_is_only_leaf(self, empty_requests: DesignRequests) -> None:
        """An empty design resolves to the root as its single active leaf."""
        layout = resolve_layout(empty_requests)

        assert layout.root.is_active
        assert [s.id for s in layout.leaves] == ["main"]
        assert layout.leaves[0].current_dimensions == Dimensions(800.0, 2100.0, 600.0)
        assert layout.panels == ()

    def test_root_inactive_once_requests_exist(self, root_dimensions: Dimensions) -> None:
        """Any request, even one that never applies, deactivates the root."""
        layout = resolve_layout(_requests(root_dimensions, divisions=(_division("d1", 5000.0),)))
        assert not layout.root.is_active


class TestScenarios:
    """Reference scenarios for the resolver."""

    def test_bottom_panel_at_root(self, root_dimensions: Dimensions) -> None:
        """The root shrinks to 2082 mm and moves up 9 mm; the panel sits on the floor."""
        layout = resolve_layout(_requests(root_dimensions, (_panel("b", PanelType.BOTTOM),)))

        (leaf,) = layout.leaves
        assert leaf.id == "main"
        assert leaf.current_dimensions.height == pytest.approx(2082.0)
        assert leaf.position.y == pytest.approx(9.0)

        (panel,) = layout.panels
        assert panel.dimensions == Dimensions(800.0, 18.0, 600.0)
        assert panel.box.min_along(Axis.HEIGHT) == pytest.approx(-1050.0)
        assert panel.position.y == pytest.approx(-1041.0)

    def test_shelf_at_root(self, root_dimensions: Dimensions) -> None:
        """A shelf forks the root into two full-width, full-depth spaces."""
        layout = resolve_layout(_requests(root_dimensions, (_panel("s", PanelType.SHELF),)))

        below, above = layout.leaves
        assert (below.id, above.id) == ("s:below", "s:above")
        assert below.current_dimensions.height + above.current_dimensions.height == (
            pytest.approx(2100.0 - 18.0)
        )
        for space in (below, above):
            assert space.current_dimensions.width == 800.0
            assert space.current_dimensions.depth == 600.0

    def test_shelf_inside_boundary_panels(self, root_dimensions: Dimensions) -> None:
        """With bottom and top in place the halves share 2100 - 3 * 18 mm."""
        panels = (
            _panel("b", PanelType.BOTTOM),
            _panel("t", PanelType.TOP),
            _panel("s", PanelType.SHELF),
        )
        layout = resolve_layout(_requests(root_dimensions, panels))

        below, above = layout.leaves
        assert below.current_dimensions.height + above.current_dimensions.height == (
            pytest.approx(2100.0 - 3 * 18.0)
        )

    def test_manual_division_at_midpoint(self, root_dimensions: Dimensions) -> None:
        """400 mm on the 800 mm root gives two 400 mm spaces with zero gap."""
        layout = resolve_layout(_requests(root_dimensions, divisions=(_division("d", 400.0),)))

        start, end = layout.leaves
        assert start.current_dimensions == Dimensions(400.0, 2100.0, 600.0)
        assert end.current_dimensions == Dimensions(400.0, 2100.0, 600.0)
        assert start.box.max_along(Axis.WIDTH) == pytest.approx(end.box.min_along(Axis.WIDTH))
        assert layout.pending_division_ids == ()

    def test_manual_division_outside_extent(self, root_dimensions: Dimensions) -> None:
        """900 mm on an 800 mm space is a no-op and stays pending."""
        layout = resolve_layout(_requests(root_dimensions, divisions=(_division("d", 900.0),)))

        (leaf,) = layout.leaves
        assert leaf.id == "main"
        assert leaf.current_dimensions == root_dimensions
        assert layout.pending_division_ids == ("d",)

    def test_bottom_in_one_half_of_shelf(self, root_dimensions: Dimensions) -> None:
        """Targeting one fork half shrinks it and leaves the sibling alone."""
        panels = (
            _panel("s", PanelType.SHELF),
            _panel("b", PanelType.BOTTOM, parent="s:above"),
        )
        layout = resolve_layout(_requests(root_dimensions, panels))

        below = layout.find_space("s:below")
        above = layout.find_space("s:above")
        assert below is not None and above is not None
        assert below.current_dimensions.height == pytest.approx(1041.0)
        assert above.current_dimensions.height == pytest.approx(1023.0)
        assert above.position.y == pytest.approx(538.5)
        assert [p.id for p in above.pieces] == ["b"]
        assert below.pieces == ()


class TestResolutionProperties:
    """General properties of the resolver."""

    @pytest.fixture
    def bookcase(self, root_dimensions: Dimensions) -> DesignRequests:
        panels = (
            _panel("l", PanelType.LEFT_SIDE),
            _panel("r", PanelType.RIGHT_SIDE),
            _panel("b", PanelType.BOTTOM),
            _panel("t", PanelType.TOP),
            _panel("k", PanelType.BACK, thickness=6.0),
            _panel("s1", PanelType.SHELF),
            _panel("v1", PanelType.VERTICAL_DIVIDER, parent="s1:above"),
            _panel("s2", PanelType.SHELF, parent="v1:left"),
        )
        divisions = (_division("d1", 300.0, axis=DivisionAxis.Y, parent="s1:below"),)
        return _requests(root_dimensions, panels, divisions)

    def test_idempotent(self, bookcase: DesignRequests) -> None:
        """Resolving the same requests twice gives identical layouts."""
        resolver = LayoutResolver()
        assert resolver.resolve(bookcase) == resolver.resolve(bookcase)

    def test_every_panel_placed_inside_root(self, bookcase: DesignRequests) -> None:
        """Every request is placed and every panel box lies inside the root."""
        layout = resolve_layout(bookcase)

        assert len(layout.panels) == len(bookcase.panels)
        for panel in layout.panels:
            assert layout.root.box.contains(panel.box)

    def test_every_panel_inside_its_parent_space(
        self, bookcase: DesignRequests, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Each panel lies inside the space it was placed in, forks and late leaves included."""
        requests = replace(
            bookcase,
            panels=bookcase.panels + (_panel("late", PanelType.SHELF, parent="d1:start"),),
        )
        parents: dict[str, Space] = {}

        def recording_place_panel(parent: Space, panel: Panel) -> Panel:
            parents[panel.id] = parent
            return place_panel(parent, panel)

        monkeypatch.setattr(resolver_module, "place_panel", recording_place_panel)
        layout = resolve_layout(requests)

        assert {p.id for p in layout.panels} == {p.id for p in requests.panels}
        assert parents["s2"].id == "v1:left"
        assert parents["late"].id == "d1:start"
        for panel in layout.panels:
            parent = parents[panel.id]
            assert parent.id == panel.parent_space_id
            assert parent.box.contains(panel.box), (panel.id, parent.id)

    def test_leaves_do_not_overlap_each_other(self, bookcase: DesignRequests) -> None:
        """Final leaves are disjoint (touching faces allowed)."""
        leaves = resolve_layout(bookcase).leaves

        def overlaps(a, b) -> bool:
            return all(
                a.box.min_along(axis) < b.box.max_along(axis) - 1e-6
                and b.box.min_along(axis) < a.box.max_along(axis) - 1e-6
                for axis in Axis
            )

        for i, first in enumerate(leaves):
            for second in leaves[i + 1 :]:
                assert not overlaps(first, second), (first.id, second.id)

    def test_order_independence(self, root_dimensions: Dimensions) -> None:
        """A panel listed before the panel creating its parent still resolves."""
        shelf = _panel("s", PanelType.SHELF)
        bottom = _panel("b", PanelType.BOTTOM, parent="s:above")

        forward = resolve_layout(_requests(root_dimensions, (shelf, bottom)))
        backward = resolve_layout(_requests(root_dimensions, (bottom, shelf)))

        assert forward.leaves == backward.leaves
        assert {p.id for p in backward.panels} == {"s", "b"}
        assert backward.unresolved_panel_ids == ()

    def test_leaf_order_follows_frontier(self, bookcase: DesignRequests) -> None:
        """Fork results replace their parent in place."""
        ids = [leaf.id for leaf in resolve_layout(bookcase).leaves]
        assert ids == ["d1:start", "d1:end", "s2:below", "s2:above", "v1:right"]

    def test_root_pieces_are_first_pass_panels(self, root_dimensions: Dimensions) -> None:
        """The root lists panels of the panel pass; late panels are not included."""
        requests = _requests(
            root_dimensions,
            panels=(_panel("b", PanelType.BOTTOM), _panel("late", PanelType.SHELF, parent="d:start")),
            divisions=(_division("d", 400.0),),
        )
        layout = resolve_layout(requests)

        assert [p.id for p in layout.root.pieces] == ["b"]
        assert [p.id for p in layout.panels] == ["b", "late"]
        assert layout.root.sub_spaces == layout.leaves


class TestOrphansAndPending:
    """Requests whose target never appears."""

    def test_orphaned_panel_is_unresolved(self, root_dimensions: Dimensions) -> None:
        """A panel pointing at an unknown space is kept out of the layout."""
        layout = resolve_layout(
            _requests(root_dimensions, (_panel("x", PanelType.SHELF, parent="nowhere"),))
        )

        assert layout.panels == ()
        assert layout.unresolved_panel_ids == ("x",)
        assert [s.id for s in layout.leaves] == ["main"]

    def test_panel_targeting_consumed_space(self, root_dimensions: Dimensions) -> None:
        """After a fork the parent id is gone; later panels there are orphans."""
        panels = (_panel("s", PanelType.SHELF), _panel("b", PanelType.BOTTOM))
        layout = resolve_layout(_requests(root_dimensions, panels))

        assert [p.id for p in layout.panels] == ["s"]
        assert layout.unresolved_panel_ids == ("b",)

    def test_division_of_unknown_space_is_pending(self, root_dimensions: Dimensions) -> None:
        layout = resolve_layout(
            _requests(root_dimensions, divisions=(_division("d", 100.0, parent="ghost"),))
        )
        assert layout.pending_division_ids == ("d",)

    def test_invalid_cut_does_not_block_later_divisions(self, root_dimensions: Dimensions) -> None:
        """A cut that does not fit leaves the rest of the division pass running."""
        divisions = (
            _division("bad", 5000.0),
            _division("good", 200.0, axis=DivisionAxis.Y),
        )
        layout = resolve_layout(_requests(root_dimensions, divisions=divisions))

        assert layout.pending_division_ids == ("bad",)
        assert [s.id for s in layout.leaves] == ["good:start", "good:end"]

    def test_nested_divisions_resolve_in_any_order(self, root_dimensions: Dimensions) -> None:
        """A division of a division half waits for its parent."""
        divisions = (
            _division("inner", 100.0, axis=DivisionAxis.Y, parent="outer:end"),
            _division("outer", 400.0),
        )
        layout = resolve_layout(_requests(root_dimensions, divisions=divisions))

        assert [s.id for s in layout.leaves] == ["outer:start", "inner:start", "inner:end"]
        assert layout.pending_division_ids == ()


class TestLatePanels:
    """Panels placed inside manual-division leaves."""

    def test_late_panel_placed_without_cutting(self, root_dimensions: Dimensions) -> None:
        """A shelf in a division half is positioned but does not fork it."""
        layout = resolve_layout(
            _requests(
                root_dimensions,
                panels=(_panel("s", PanelType.SHELF, parent="d:start"),),
                divisions=(_division("d", 400.0),),
            )
        )

        assert [s.id for s in layout.leaves] == ["d:start", "d:end"]
        start = layout.leaves[0]
        assert start.current_dimensions == Dimensions(400.0, 2100.0, 600.0)
        (shelf,) = start.pieces
        assert shelf.dimensions == Dimensions(400.0, 18.0, 600.0)
        assert shelf.position.x == pytest.approx(-200.0)
        assert shelf.position.y == pytest.approx(0.0)
        assert layout.unresolved_panel_ids == ()

    def test_late_boundary_panel_hugs_leaf(self, root_dimensions: Dimensions) -> None:
        """A bottom in the upper division half sits on the cut plane."""
        layout = resolve_layout(
            _requests(
                root_dimensions,
                panels=(_panel("b", PanelType.BOTTOM, parent="d:end"),),
                divisions=(_division("d", 1000.0, axis=DivisionAxis.Y),),
            )
        )

        panel = layout.find_panel("b")
        end = layout.find_space("d:end")
        assert panel is not None and end is not None
        assert panel.box.min_along(Axis.HEIGHT) == pytest.approx(-50.0)
        # placed without shrinking the leaf
        assert end.current_dimensions.height == pytest.approx(1100.0)


class TestVoidSpaces:
    """Spaces consumed down to nothing."""

    def test_oversized_side_leaves_void_leaf(self, root_dimensions: Dimensions) -> None:
        """The leaf keeps its id but is not selectable."""
        layout = resolve_layout(
            _requests(root_dimensions, (_panel("l", PanelType.LEFT_SIDE, thickness=800.0),))
        )

        (leaf,) = layout.leaves
        assert leaf.id == "main"
        assert leaf.current_dimensions.width == pytest.approx(0.0)
        assert not leaf.is_active
        assert layout.active_spaces == ()

    def test_sub_millimetre_leaf_is_void(self, root_dimensions: Dimensions) -> None:
        layout = resolve_layout(
            _requests(root_dimensions, (_panel("l", PanelType.LEFT_SIDE, thickness=799.5),))
        )
        assert layout.active_spaces == ()

    def test_panels_after_void_have_no_material(self, root_dimensions: Dimensions) -> None:
        """A panel placed into a void leaf is listed but not visible."""
        panels = (
            _panel("l", PanelType.LEFT_SIDE, thickness=800.0),
            _panel("b", PanelType.BOTTOM),
        )
        layout = resolve_layout(_requests(root_dimensions, panels))

        bottom = layout.find_panel("b")
        assert bottom is not None
        assert not bottom.is_visible
        assert [p.id for p in layout.visible_panels] == ["l"]


class TestFindHelpers:
    def test_find_space_falls_back_to_root(self, root_dimensions: Dimensions) -> None:
        layout = resolve_layout(_requests(root_dimensions, (_panel("s", PanelType.SHELF),)))

        root = layout.find_space("main")
        assert root is not None
        assert root.original_dimensions == root_dimensions
        assert layout.find_space("missing") is None
        assert layout.find_panel("missing") is None
