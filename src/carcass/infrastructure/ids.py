"""Identifier generators for panels and divisions."""

from __future__ import annotations

import uuid
from collections.abc import Container
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from carcass.contracts import IdGeneratorProtocol


class UuidIdGenerator:
    """Random UUID4 identifiers, the default for interactive sessions."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator:
    """Predictable ``<prefix><n>`` identifiers.

    Useful for templates, tests and any output that should read the same
    from run to run.
    """

    def __init__(self, prefix: str = "p", start: int = 1) -> None:
        self.prefix = prefix
        self._next = start

    def new_id(self) -> str:
        value = f"{self.prefix}{self._next}"
        self._next += 1
        return value


def unused_id(id_generator: IdGeneratorProtocol, taken: Container[str]) -> str:
    """Draw from ``id_generator`` until it yields an id not in ``taken``.

    Generated ids share one namespace with ids written by hand in design
    files, so a sequential generator can hit one of those.
    """
    new_id = id_generator.new_id()
    while new_id in taken:
        new_id = id_generator.new_id()
    return new_id
