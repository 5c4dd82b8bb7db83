"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from carcass.application.designer import FurnitureDesigner
    from carcass.contracts.protocols import (
        IdGeneratorProtocol,
        LayoutFormatterProtocol,
        LayoutResolverProtocol,
    )
    from carcass.domain import Dimensions
    from carcass.infrastructure.formatters import JsonExporter


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so the CLI, the web app and tests can
    swap in their own resolver or id generator.

    Example:
        ```python
        factory = ServiceFactory()
        designer = factory.create_designer()
        designer.add_piece("bottom")
        print(factory.get_tree_formatter().format(designer.layout))
        ```
    """

    _layout_resolver: "LayoutResolverProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _id_generator: "IdGeneratorProtocol | None" = field(
        default=None, init=False, repr=False
    )

    def get_layout_resolver(self) -> "LayoutResolverProtocol":
        """Get or create the layout resolver (stateless, shared)."""
        if self._layout_resolver is None:
            from carcass.domain.services import LayoutResolver

            self._layout_resolver = cast("LayoutResolverProtocol", LayoutResolver())
        assert self._layout_resolver is not None
        return self._layout_resolver

    def get_id_generator(self) -> "IdGeneratorProtocol":
        """Get or create the shared id generator."""
        if self._id_generator is None:
            from carcass.infrastructure.ids import UuidIdGenerator

            self._id_generator = UuidIdGenerator()
        return self._id_generator

    def set_id_generator(self, id_generator: "IdGeneratorProtocol") -> None:
        """Override the id generator (for deterministic output)."""
        self._id_generator = id_generator

    def get_tree_formatter(self) -> "LayoutFormatterProtocol":
        from carcass.infrastructure.formatters import SpaceTreeFormatter

        return SpaceTreeFormatter()

    def get_panel_list_formatter(self) -> "LayoutFormatterProtocol":
        from carcass.infrastructure.formatters import PanelListFormatter

        return PanelListFormatter()

    def get_json_exporter(self) -> "JsonExporter":
        from carcass.infrastructure.formatters import JsonExporter

        return JsonExporter()

    def create_designer(
        self,
        root_dimensions: "Dimensions | None" = None,
        default_thickness: float | None = None,
    ) -> "FurnitureDesigner":
        """Create a designer session wired to this factory's services."""
        from carcass.application.designer import FurnitureDesigner
        from carcass.domain import DEFAULT_THICKNESS

        return FurnitureDesigner(
            id_generator=self.get_id_generator(),
            root_dimensions=root_dimensions,
            default_thickness=(
                DEFAULT_THICKNESS if default_thickness is None else default_thickness
            ),
            resolver=self.get_layout_resolver(),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
