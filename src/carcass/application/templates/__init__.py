"""Bundled design templates."""

from .manager import TEMPLATE_METADATA, TemplateManager, TemplateNotFoundError

__all__ = ["TEMPLATE_METADATA", "TemplateManager", "TemplateNotFoundError"]
