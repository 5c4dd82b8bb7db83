"""Validation structures and design advisory checks.

Schema validation is handled by pydantic when a design is loaded. The
checks here resolve the design and report what the resolver silently
tolerates: requests pointing at spaces that can never exist (errors) and
requests that exist but never apply, or leave void spaces (warnings).
"""

from dataclasses import dataclass, field
from typing import Any

from carcass.application.config.adapter import config_to_requests
from carcass.application.config.schemas import DesignConfiguration
from carcass.domain import ROOT_SPACE_ID, DesignRequests, resolve_layout


@dataclass
class ValidationError:
    """A finding that makes the design unusable.

    ``path`` is the JSON path of the offending field, for example
    ``design.panels[2].parent_space_id``.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A request that is legal but has no effect, with an optional fix."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected over one design."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI status: 1 with errors, 2 with warnings only, else 0."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path, message, value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationWarning(path, message, suggestion))
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Append ``other``'s findings to this result."""
        self.errors += other.errors
        self.warnings += other.warnings
        return self


def _possible_space_ids(requests: DesignRequests) -> set[str]:
    """Every space id any request of the design could ever create."""
    ids = {ROOT_SPACE_ID}
    for panel in requests.panels:
        ids.update(panel.derived_space_ids)
    for division in requests.divisions:
        ids.update(division.derived_space_ids)
    return ids


def check_references(requests: DesignRequests) -> ValidationResult:
    """Report requests whose parent space can never exist.

    A parent id is acceptable when it is the root or one of the spaces a
    fork in the same design produces, and that fork is not the request
    itself.
    """
    result = ValidationResult()
    possible = _possible_space_ids(requests)

    for i, panel in enumerate(requests.panels):
        path = f"design.panels[{i}].parent_space_id"
        if panel.parent_space_id in panel.derived_space_ids:
            result.add_error(path, "Panel cannot be placed in a space it creates", panel.parent_space_id)
        elif panel.parent_space_id not in possible:
            result.add_error(path, "Unknown space id", panel.parent_space_id)

    for i, division in enumerate(requests.divisions):
        path = f"design.divisions[{i}].parent_space_id"
        if division.parent_space_id in division.derived_space_ids:
            result.add_error(path, "Division cannot split a space it creates", division.parent_space_id)
        elif division.parent_space_id not in possible:
            result.add_error(path, "Unknown space id", division.parent_space_id)

    return result


def check_layout_advisories(requests: DesignRequests) -> ValidationResult:
    """Resolve the design and warn about requests that do not take effect."""
    result = ValidationResult()
    layout = resolve_layout(requests)

    unresolved = set(layout.unresolved_panel_ids)
    for i, panel in enumerate(requests.panels):
        if panel.id in unresolved:
            result.add_warning(
                f"design.panels[{i}]",
                f"Panel '{panel.name}' is never placed: space "
                f"'{panel.parent_space_id}' does not exist after resolution",
                "Target a leaf space, or a space created by a manual division",
            )
            continue
        placed = layout.find_panel(panel.id)
        if placed is not None and not placed.is_visible:
            result.add_warning(
                f"design.panels[{i}]",
                f"Panel '{panel.name}' has no material left to span",
            )

    pending = set(layout.pending_division_ids)
    for i, division in enumerate(requests.divisions):
        if division.id in pending:
            result.add_warning(
                f"design.divisions[{i}].value",
                f"Division of '{division.parent_space_id}' at {division.value} mm "
                f"along {division.axis.value} is never applied",
                "The cut must fall strictly inside an existing leaf space",
            )

    for leaf in layout.leaves:
        if leaf.is_void:
            dims = leaf.current_dimensions
            result.add_warning(
                "design",
                f"Space '{leaf.id}' is void "
                f"({dims.width:g} x {dims.height:g} x {dims.depth:g} mm)",
                "Check panel thicknesses against the space they consume",
            )

    return result


def validate_config(config: DesignConfiguration) -> ValidationResult:
    """Check references and resolve ``config`` to find requests with no effect.

    Ids missing from the file are filled with ``request-<n>`` placeholders.
    """
    from carcass.infrastructure.ids import SequentialIdGenerator

    requests = config_to_requests(config, SequentialIdGenerator(prefix="request-"))
    result = ValidationResult()
    result.merge(check_references(requests))
    result.merge(check_layout_advisories(requests))
    return result
