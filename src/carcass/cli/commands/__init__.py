"""CLI command implementations for the carcass application.

This package contains subcommands for the carcass CLI, including:
- validate: Validate a design file
- templates: Manage bundled design templates
"""

from carcass.cli.commands.templates import templates_app
from carcass.cli.commands.validate import validate_command

__all__ = ["validate_command", "templates_app"]
