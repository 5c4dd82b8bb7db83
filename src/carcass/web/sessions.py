"""In-memory store of designer sessions."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TypeVar

from carcass.application import FurnitureDesigner
from carcass.domain import ResolvedLayout
from carcass.web.exceptions import DesignNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SessionStore:
    """Keeps designer sessions by id.

    Every access runs under one lock, and a mutation is followed by its
    layout resolution before the lock is released, so concurrent readers
    never observe a half-applied request list.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None) -> None:
        if id_factory is None:
            from carcass.infrastructure.ids import UuidIdGenerator

            id_factory = UuidIdGenerator().new_id
        self._new_id = id_factory
        self._designs: dict[str, FurnitureDesigner] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._designs)

    def create(self, designer: FurnitureDesigner) -> tuple[str, ResolvedLayout]:
        """Store ``designer`` under a fresh id."""
        with self._lock:
            design_id = self._new_id()
            self._designs[design_id] = designer
            logger.debug(f"Created design session {design_id}")
            return design_id, designer.layout

    def read(self, design_id: str) -> tuple[FurnitureDesigner, ResolvedLayout]:
        with self._lock:
            designer = self._get(design_id)
            return designer, designer.layout

    def apply(
        self, design_id: str, mutation: Callable[[FurnitureDesigner], T]
    ) -> tuple[T, FurnitureDesigner, ResolvedLayout]:
        """Run ``mutation`` on a session and resolve the result.

        Raises:
            DesignNotFoundError: If ``design_id`` is unknown.
        """
        with self._lock:
            designer = self._get(design_id)
            outcome = mutation(designer)
            return outcome, designer, designer.layout

    def delete(self, design_id: str) -> None:
        with self._lock:
            self._get(design_id)
            del self._designs[design_id]
            logger.debug(f"Deleted design session {design_id}")

    def _get(self, design_id: str) -> FurnitureDesigner:
        try:
            return self._designs[design_id]
        except KeyError:
            raise DesignNotFoundError(design_id) from None
