"""Pytest configuration and shared fixtures for carcass tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from carcass.application import FurnitureDesigner
from carcass.application.factory import reset_factory
from carcass.domain import DesignRequests, Dimensions
from carcass.infrastructure import SequentialIdGenerator


# =============================================================================
# Shared design fixtures
# =============================================================================


@pytest.fixture
def root_dimensions() -> Dimensions:
    """Default 800 x 2100 x 600 mm carcass."""
    return Dimensions(800.0, 2100.0, 600.0)


@pytest.fixture
def empty_requests(root_dimensions: Dimensions) -> DesignRequests:
    return DesignRequests(root_dimensions=root_dimensions, default_thickness=18.0)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    """Generator yielding p1, p2, ... so ids can be asserted on."""
    return SequentialIdGenerator(prefix="p")


@pytest.fixture
def designer(id_generator: SequentialIdGenerator) -> FurnitureDesigner:
    """A fresh designer session with predictable ids."""
    return FurnitureDesigner(id_generator=id_generator)


@pytest.fixture(autouse=True)
def _clean_factory() -> Iterator[None]:
    """Drop any default factory a test installed."""
    yield
    reset_factory()
