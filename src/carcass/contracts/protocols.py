"""Service protocols for dependency injection.

This module defines protocol classes that establish contracts between layers.
Infrastructure implementations depend on these protocols, enabling loose coupling
and testability through dependency injection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from carcass.domain.entities import DesignRequests
    from carcass.domain.services.resolver import ResolvedLayout


@runtime_checkable
class IdGeneratorProtocol(Protocol):
    """Protocol for the opaque unique-id service.

    Ids must not collide for the lifetime of a session. Nothing else is
    assumed about their shape.

    Example:
        ```python
        class CounterIds:
            def __init__(self) -> None:
                self._next = 0

            def new_id(self) -> str:
                self._next += 1
                return f"id{self._next}"
        ```
    """

    def new_id(self) -> str:
        """Return a fresh identifier."""
        ...


class LayoutResolverProtocol(Protocol):
    """Protocol for deriving a layout from design requests.

    Implementations must be pure: the same requests always produce a
    structurally identical layout.
    """

    def resolve(self, requests: DesignRequests) -> ResolvedLayout:
        """Compute the full layout for ``requests``."""
        ...


class LayoutFormatterProtocol(Protocol):
    """Protocol for rendering a resolved layout as text."""

    def format(self, layout: ResolvedLayout) -> str:
        """Render ``layout``."""
        ...
