"""Bundled carcass designs.

Each template is a design file under ``templates/data`` read through
``importlib.resources``, so they work from a wheel as well as a checkout.
"""

import json
from importlib import resources
from pathlib import Path

from carcass.application.config import DesignConfiguration, load_config_from_dict

DATA_PACKAGE = "carcass.application.templates.data"

TEMPLATE_METADATA: dict[str, str] = {
    "empty-carcass": "Sides, top, bottom and back around one open space",
    "bookcase": "Open carcass with three shelves",
    "wardrobe": "Hanging side with hat shelf, drawer stack on the right",
}


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


class TemplateManager:
    """Read-only access to the bundled designs.

    Example:
        manager = TemplateManager()
        config = manager.load_design("wardrobe")
        manager.init_template("bookcase", Path("hallway.json"))
    """

    def list_templates(self) -> list[tuple[str, str]]:
        """``(name, description)`` pairs in display order."""
        return list(TEMPLATE_METADATA.items())

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA

    def describe(self, name: str) -> str:
        if not self.template_exists(name):
            raise TemplateNotFoundError(name)
        return TEMPLATE_METADATA[name]

    def get_template(self, name: str) -> str:
        """Raw JSON text of a template.

        Raises:
            TemplateNotFoundError: If ``name`` is not a bundled template.
        """
        if not self.template_exists(name):
            raise TemplateNotFoundError(name)
        try:
            return (
                resources.files(DATA_PACKAGE)
                .joinpath(f"{name}.json")
                .read_text(encoding="utf-8")
            )
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def load_design(self, name: str) -> DesignConfiguration:
        """Parse and validate a template.

        Raises:
            TemplateNotFoundError: If ``name`` is not a bundled template.
            ConfigError: If the bundled file fails validation.
        """
        return load_config_from_dict(json.loads(self.get_template(name)))

    def init_template(self, name: str, output_path: Path) -> None:
        """Write a copy of template ``name`` to ``output_path``.

        An existing file is overwritten; callers decide whether that is
        allowed.
        """
        output_path.write_text(self.get_template(name), encoding="utf-8")
