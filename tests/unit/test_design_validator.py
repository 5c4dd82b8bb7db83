"""Unit tests for design validation.

These tests verify:
- ValidationResult exit codes and chaining
- Reference errors for parents that can never exist
- Advisory warnings for requests that never take effect and void spaces
"""

from typing import Any

from carcass.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)


def _validate(
    panels: list[dict[str, Any]],
    divisions: list[dict[str, Any]] | None = None,
    dimensions: dict[str, float] | None = None,
) -> ValidationResult:
    design: dict[str, Any] = {"panels": panels, "divisions": divisions or []}
    if dimensions is not None:
        design["dimensions"] = dimensions
    return validate_config(load_config_from_dict({"schema_version": "1.0", "design": design}))


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_result_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("design", "careful")
        assert result.is_valid
        assert result.exit_code == 2

    def test_error_exit_code_wins(self) -> None:
        result = ValidationResult().add_warning("design", "careful").add_error("design", "bad")
        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self) -> None:
        first = ValidationResult().add_error("a", "x")
        second = ValidationResult().add_warning("b", "y")
        merged = first.merge(second)
        assert len(merged.errors) == 1
        assert len(merged.warnings) == 1


class TestReferenceChecks:
    """Parents that no request can ever create."""

    def test_clean_design(self) -> None:
        """Boundary panels and a shelf with a nested panel validate cleanly."""
        result = _validate(
            [
                {"type": "left_side"},
                {"type": "right_side"},
                {"id": "s", "type": "shelf"},
                {"type": "bottom", "parent_space_id": "s:above"},
            ]
        )
        assert result.errors == []
        assert result.warnings == []
        assert result.exit_code == 0

    def test_unknown_parent(self) -> None:
        result = _validate([{"type": "shelf", "parent_space_id": "nowhere"}])

        assert not result.is_valid
        error = result.errors[0]
        assert error.path == "design.panels[0].parent_space_id"
        assert error.message == "Unknown space id"
        assert error.value == "nowhere"

    def test_self_reference(self) -> None:
        """A shelf cannot sit in one of its own halves."""
        result = _validate([{"id": "s", "type": "shelf", "parent_space_id": "s:above"}])

        assert not result.is_valid
        assert "creates" in result.errors[0].message

    def test_division_unknown_parent(self) -> None:
        result = _validate([], [{"parent_space_id": "x:start", "axis": "x", "value": 10}])

        assert result.errors[0].path == "design.divisions[0].parent_space_id"

    def test_parent_from_division(self) -> None:
        """Panels may target the halves of a manual division."""
        result = _validate(
            [{"type": "shelf", "parent_space_id": "d:start"}],
            [{"id": "d", "axis": "y", "value": 500}],
        )
        assert result.is_valid
        assert result.exit_code == 0


class TestLayoutAdvisories:
    """Requests that validate but do not take effect."""

    def test_panel_in_consumed_space(self) -> None:
        """A panel aimed at the root after a shelf forked it is never placed."""
        result = _validate([{"type": "shelf"}, {"type": "bottom"}])

        assert result.is_valid
        assert result.exit_code == 2
        assert result.warnings[0].path == "design.panels[1]"
        assert "never placed" in result.warnings[0].message

    def test_warning_names_only_the_unplaced_panel(self) -> None:
        """An explicit id that looks generated does not pull in another panel."""
        result = _validate([{"id": "request-1", "type": "shelf"}, {"type": "shelf"}])

        assert [w.path for w in result.warnings] == ["design.panels[1]"]

    def test_pending_division(self) -> None:
        result = _validate([], [{"axis": "x", "value": 900}])

        assert result.exit_code == 2
        warning = result.warnings[0]
        assert warning.path == "design.divisions[0].value"
        assert "never applied" in warning.message
        assert warning.suggestion is not None

    def test_void_space_and_empty_panel(self) -> None:
        """Consuming a whole width voids the space and starves later panels."""
        result = _validate(
            [{"type": "left_side", "thickness": 100}, {"type": "bottom"}],
            dimensions={"width": 100, "height": 500, "depth": 300},
        )

        messages = [w.message for w in result.warnings]
        assert any("no material left" in m for m in messages)
        assert any("is void" in m for m in messages)
        assert result.exit_code == 2
