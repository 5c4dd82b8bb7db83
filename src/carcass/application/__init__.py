"""Application layer - designer sessions, design files and templates."""

from .designer import FurnitureDesigner
from .factory import ServiceFactory, get_factory

__all__ = [
    "FurnitureDesigner",
    "ServiceFactory",
    "get_factory",
]
