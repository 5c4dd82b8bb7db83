"""Typer CLI for carcass layout resolution."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from carcass.application import FurnitureDesigner
from carcass.application.config import (
    ConfigError,
    DesignConfiguration,
    config_to_designer,
    load_config,
)
from carcass.application.config.schemas import MAX_DIMENSION_MM, MAX_THICKNESS_MM
from carcass.application.templates import TemplateManager, TemplateNotFoundError
from carcass.cli.commands import templates_app, validate_command
from carcass.domain import PanelType
from carcass.infrastructure import (
    JsonExporter,
    PanelListFormatter,
    SequentialIdGenerator,
    SpaceTreeFormatter,
)

OUTPUT_FORMATS = ("tree", "panels", "json")

app = typer.Typer(
    name="carcass",
    help="Resolve cabinet carcass designs into spaces and positioned panels.",
)

app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log resolution steps to stderr"),
    ] = False,
) -> None:
    """Resolve cabinet carcass designs into spaces and positioned panels."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_design(
    config_file: Path | None, template: str | None
) -> DesignConfiguration | None:
    if config_file is not None and template is not None:
        typer.echo("Error: --config and --template are mutually exclusive", err=True)
        raise typer.Exit(code=1)

    try:
        if config_file is not None:
            return load_config(config_file)
        if template is not None:
            return TemplateManager().load_design(template)
    except (TemplateNotFoundError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    return None


def _add_pieces(designer: FurnitureDesigner, pieces: list[str]) -> None:
    """Add ``TYPE`` or ``TYPE@SPACE_ID`` pieces in order."""
    for entry in pieces:
        type_name, _, space_id = entry.partition("@")
        try:
            panel_type = PanelType(type_name.strip())
        except ValueError:
            valid = ", ".join(t.value for t in PanelType)
            typer.echo(f"Error: Unknown piece type '{type_name}'", err=True)
            typer.echo(f"Valid types: {valid}", err=True)
            raise typer.Exit(code=1)
        if space_id:
            designer.select_space(space_id.strip())
        designer.add_piece(panel_type)


@app.command()
def resolve(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON design file"),
    ] = None,
    template: Annotated[
        str | None,
        typer.Option("--template", help="Start from a bundled template"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", min=1, max=MAX_DIMENSION_MM, help="Carcass width in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", min=1, max=MAX_DIMENSION_MM, help="Carcass height in mm"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-d", min=1, max=MAX_DIMENSION_MM, help="Carcass depth in mm"),
    ] = None,
    thickness: Annotated[
        float | None,
        typer.Option(
            "--thickness", "-t", min=1, max=MAX_THICKNESS_MM,
            help="Thickness in mm for pieces added with --piece",
        ),
    ] = None,
    pieces: Annotated[
        list[str] | None,
        typer.Option(
            "--piece", "-p",
            help="Add a piece: TYPE or TYPE@SPACE_ID (repeatable, applied in order)",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: tree, panels, json"),
    ] = "tree",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
) -> None:
    """Resolve a design and print its spaces and panels.

    Examples:
        carcass resolve --template bookcase
        carcass resolve --config my-design.json --format json
        carcass resolve -w 600 -h 900 -d 400 -p left_side -p right_side -p shelf
        carcass resolve --template bookcase -p shelf@shelf-mid:above
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: Unknown format '{output_format}'", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    config = _load_design(config_file, template)
    id_generator = SequentialIdGenerator(prefix="piece-")
    if config is not None:
        designer = config_to_designer(config, id_generator)
    else:
        designer = FurnitureDesigner(id_generator=id_generator)

    if width is not None or height is not None or depth is not None:
        dims = designer.root_dimensions
        designer.update_root_dimensions(
            replace(
                dims,
                width=dims.width if width is None else width,
                height=dims.height if height is None else height,
                depth=dims.depth if depth is None else depth,
            )
        )
    if thickness is not None:
        designer.set_default_thickness(thickness)

    _add_pieces(designer, pieces or [])

    layout = designer.layout
    if output_format == "json":
        text = JsonExporter().export(layout, designer.selected_space_id)
    elif output_format == "panels":
        text = PanelListFormatter().format(layout)
    else:
        text = SpaceTreeFormatter(designer.selected_space_id).format(layout)

    if output_file is not None:
        try:
            output_file.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error: Could not write file: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Wrote {output_format} output to {output_file}")
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
