"""Validate command for checking design files.

Checks a JSON design file for syntax and schema errors, then resolves it
and reports requests that never take effect.
"""

from pathlib import Path
from typing import Annotated

import typer

from carcass.application.config import (
    ConfigError,
    DesignConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON design file to validate"),
    ],
) -> None:
    """Validate a carcass design file.

    Checks the design file for:
    - JSON syntax errors
    - Schema validation errors (unknown panel types, duplicate ids, etc.)
    - Requests targeting spaces that can never exist
    - Panels never placed, divisions never applied, void spaces

    Exit codes:
        0 - Design is valid with no warnings
        1 - Design has errors (cannot be used)
        2 - Design is valid but has warnings

    Example:
        carcass validate my-bookcase.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _echo_block("Errors:", _load_error_lines(e), err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(_design_summary(config))
    typer.echo()

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _design_summary(config: DesignConfiguration) -> str:
    design = config.design
    dims = design.dimensions
    return (
        f"Design '{design.name}': {dims.width:g} x {dims.height:g} x {dims.depth:g} mm, "
        f"{len(design.panels)} panel(s), {len(design.divisions)} division(s)"
    )


def _echo_block(title: str, lines: list[str], err: bool = False) -> None:
    if not lines:
        return
    typer.echo(title, err=err)
    for line in lines:
        typer.echo(line, err=err)
    typer.echo()


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"  File not found: {error.path}"]
    if error.error_type == "json_parse":
        lines = ["  Invalid JSON syntax"]
        lines.extend(
            f"    Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
            f"{d.get('message', 'Unknown error')}"
            for d in error.details
        )
        return lines
    if error.error_type == "validation":
        lines = []
        for detail in error.details:
            lines.append(f"  {detail.get('path') or '(root)'}: {detail.get('message')}")
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                lines.append(f"    Value: {value!r}")
        return lines
    return [f"  {error.message}"]


def _display_validation_result(result: ValidationResult) -> None:
    """Print errors, warnings and a one-line verdict."""
    error_lines: list[str] = []
    for error in result.errors:
        error_lines.append(f"  {error.path}: {error.message}")
        if error.value is not None:
            error_lines.append(f"    Value: {error.value!r}")
    _echo_block("Errors:", error_lines, err=True)

    warning_lines: list[str] = []
    for warning in result.warnings:
        warning_lines.append(f"  {warning.path}: {warning.message}")
        if warning.suggestion:
            warning_lines.append(f"    Suggestion: {warning.suggestion}")
    _echo_block("Warnings:", warning_lines)

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Design is valid.")
