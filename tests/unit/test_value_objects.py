"""Unit tests for domain value objects.

These tests verify:
- Axis and DivisionAxis mappings
- PanelType placement rules (thin axis, hug side, cut policy)
- Dimensions void/degenerate classification
- Position3D and Box helpers
"""

import pytest

from carcass.domain.value_objects import (
    VOID_THRESHOLD,
    Axis,
    Boundary,
    Box,
    CutPolicy,
    Dimensions,
    DivisionAxis,
    PanelType,
    Position3D,
)


class TestAxis:
    """Tests for axis enums."""

    @pytest.mark.parametrize(
        ("axis", "coordinate"),
        [(Axis.WIDTH, "x"), (Axis.HEIGHT, "y"), (Axis.DEPTH, "z")],
    )
    def test_coordinate_names(self, axis: Axis, coordinate: str) -> None:
        """Each box axis maps to its position coordinate."""
        assert axis.coordinate == coordinate

    def test_division_axes_are_in_plane(self) -> None:
        """Manual divisions cut across width or height only."""
        assert DivisionAxis("x").axis is Axis.WIDTH
        assert DivisionAxis("y").axis is Axis.HEIGHT
        assert len(DivisionAxis) == 2


class TestPanelTypeRules:
    """Tests for the per-type placement table."""

    def test_sides_hug_width_boundaries(self) -> None:
        """Left/right sides are thin in width and sit on min/max x."""
        assert PanelType.LEFT_SIDE.thin_axis is Axis.WIDTH
        assert PanelType.LEFT_SIDE.hug is Boundary.MIN
        assert PanelType.RIGHT_SIDE.hug is Boundary.MAX

    def test_bottom_and_top_hug_height_boundaries(self) -> None:
        """Bottom/top are thin in height and sit on min/max y."""
        assert PanelType.BOTTOM.thin_axis is Axis.HEIGHT
        assert PanelType.BOTTOM.hug is Boundary.MIN
        assert PanelType.TOP.hug is Boundary.MAX

    def test_back_and_front_hug_depth_boundaries(self) -> None:
        """Back sits on min z, front on max z."""
        assert PanelType.BACK.thin_axis is Axis.DEPTH
        assert PanelType.BACK.hug is Boundary.MIN
        assert PanelType.FRONT.hug is Boundary.MAX

    def test_splitting_panels_do_not_hug(self) -> None:
        """Shelves and dividers split their space instead of hugging."""
        assert PanelType.SHELF.thin_axis is Axis.HEIGHT
        assert PanelType.SHELF.hug is None
        assert PanelType.VERTICAL_DIVIDER.thin_axis is Axis.WIDTH
        assert PanelType.VERTICAL_DIVIDER.hug is None

    def test_cut_policies(self) -> None:
        """Only shelves and dividers fork; every other type shrinks."""
        forking = {t for t in PanelType if t.cut_policy is CutPolicy.FORK}
        assert forking == {PanelType.SHELF, PanelType.VERTICAL_DIVIDER}

    def test_values_are_snake_case(self) -> None:
        """Panel types serialize to their snake_case names."""
        assert PanelType("vertical_divider") is PanelType.VERTICAL_DIVIDER
        assert PanelType.LEFT_SIDE.value == "left_side"


class TestDimensions:
    """Tests for the Dimensions value object."""

    def test_along_and_with_axis(self) -> None:
        """Sizes can be read and replaced per axis."""
        dims = Dimensions(800.0, 2100.0, 600.0)
        assert dims.along(Axis.HEIGHT) == 2100.0
        changed = dims.with_axis(Axis.DEPTH, 582.0)
        assert changed == Dimensions(800.0, 2100.0, 582.0)
        assert dims.depth == 600.0

    def test_is_frozen(self) -> None:
        """Dimensions should be immutable."""
        dims = Dimensions(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            dims.width = 5.0  # type: ignore

    def test_non_positive_components_are_allowed(self) -> None:
        """A degenerate box is a legal value, flagged rather than refused."""
        dims = Dimensions(0.0, -18.0, 600.0)
        assert dims.is_degenerate
        assert dims.is_void
        assert dims.volume == 0.0

    def test_void_threshold_is_inclusive(self) -> None:
        """A side of exactly the threshold is void; anything larger is not."""
        assert Dimensions(VOID_THRESHOLD, 100.0, 100.0).is_void
        assert not Dimensions(VOID_THRESHOLD + 0.5, 100.0, 100.0).is_void

    def test_thin_but_positive_box_is_void_not_degenerate(self) -> None:
        """Half a millimetre is too small to select but still a real box."""
        dims = Dimensions(0.5, 100.0, 100.0)
        assert dims.is_void
        assert not dims.is_degenerate

    def test_volume(self) -> None:
        assert Dimensions(10.0, 20.0, 30.0).volume == 6000.0


class TestPosition3D:
    """Tests for Position3D."""

    def test_shifted_moves_one_coordinate(self) -> None:
        """Shifting along height changes y only."""
        pos = Position3D(1.0, 2.0, 3.0).shifted(Axis.HEIGHT, 9.0)
        assert pos == Position3D(1.0, 11.0, 3.0)

    def test_with_axis_replaces_coordinate(self) -> None:
        pos = Position3D.origin().with_axis(Axis.DEPTH, -297.0)
        assert pos == Position3D(0.0, 0.0, -297.0)

    def test_negative_coordinates_allowed(self) -> None:
        """Positions are relative to the root centre and may be negative."""
        assert Position3D(-400.0, -1050.0, -300.0).along(Axis.WIDTH) == -400.0


class TestBox:
    """Tests for the Box helper."""

    def test_bounds_from_centre(self) -> None:
        """Bounds are centre plus or minus half the size."""
        box = Box(Position3D(0.0, 0.0, 0.0), Dimensions(800.0, 2100.0, 600.0))
        assert box.min_along(Axis.WIDTH) == -400.0
        assert box.max_along(Axis.HEIGHT) == 1050.0

    def test_contains(self) -> None:
        """A box touching the outer faces is still contained."""
        outer = Box(Position3D.origin(), Dimensions(800.0, 2100.0, 600.0))
        inner = Box(Position3D(0.0, -1041.0, 0.0), Dimensions(800.0, 18.0, 600.0))
        outside = Box(Position3D(0.0, -1050.0, 0.0), Dimensions(800.0, 18.0, 600.0))
        assert outer.contains(inner)
        assert not outer.contains(outside)
