"""Templates commands for listing and initializing bundled designs."""

from pathlib import Path
from typing import Annotated

import typer

from carcass.application.config import config_to_requests
from carcass.application.templates import TemplateManager, TemplateNotFoundError
from carcass.domain import resolve_layout
from carcass.infrastructure import SequentialIdGenerator

templates_app = typer.Typer(
    name="templates",
    help="Manage bundled design templates.",
)


def _footprint(manager: TemplateManager, name: str) -> str:
    """Size and resolved space count of a template, for listings."""
    config = manager.load_design(name)
    dims = config.design.dimensions
    layout = resolve_layout(config_to_requests(config, SequentialIdGenerator()))
    return (
        f"{dims.width:g}x{dims.height:g}x{dims.depth:g} mm, "
        f"{len(layout.active_spaces)} space(s)"
    )


@templates_app.command(name="list")
def list_templates() -> None:
    """List all available design templates.

    Example:
        carcass templates list
    """
    manager = TemplateManager()
    templates = manager.list_templates()
    width = max((len(name) for name, _ in templates), default=0)

    typer.echo("Available templates:")
    typer.echo()
    for name, description in templates:
        typer.echo(f"  {name:<{width}}  - {description} ({_footprint(manager, name)})")
    typer.echo()
    typer.echo("Use 'carcass templates init <name>' to create a design file from a template.")


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to copy"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Create a design file from a bundled template.

    Examples:
        carcass templates init bookcase
        carcass templates init wardrobe --output hallway.json
    """
    manager = TemplateManager()
    target = output if output is not None else Path(f"{name}.json")

    if not manager.template_exists(name):
        names = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Error: Template not found: {name}", err=True)
        typer.echo(f"Available templates: {names}", err=True)
        raise typer.Exit(code=1)

    if target.exists() and not force:
        typer.echo(f"Error: File already exists: {target}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(name, target)
    except (TemplateNotFoundError, OSError) as e:
        typer.echo(f"Error: Could not create {target}: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Created: {target}")
