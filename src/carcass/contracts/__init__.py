"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, layers remain
loosely coupled and testable.

Example:
    ```python
    from carcass.contracts import IdGeneratorProtocol

    def make_designer(ids: IdGeneratorProtocol) -> FurnitureDesigner:
        return FurnitureDesigner(id_generator=ids)
    ```
"""

from .protocols import (
    IdGeneratorProtocol as IdGeneratorProtocol,
    LayoutFormatterProtocol as LayoutFormatterProtocol,
    LayoutResolverProtocol as LayoutResolverProtocol,
)

__all__ = [
    "IdGeneratorProtocol",
    "LayoutFormatterProtocol",
    "LayoutResolverProtocol",
]
