"""Design file loader with error reporting.

Loads JSON design files and validates them against the pydantic schema.
File system errors, JSON syntax errors and schema violations are all
reported as :class:`ConfigError` with a category and per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from carcass.application.config.schemas import DesignConfiguration


class ConfigError(Exception):
    """A design file that cannot be used.

    Attributes:
        message: Human-readable summary, also the ``str()`` of the error.
        error_type: One of ``file_not_found``, ``permission_denied``,
            ``file_read_error``, ``json_parse`` or ``validation``.
        path: Design file the error refers to, if it came from a file.
        details: ``line``/``column``/``message`` for JSON errors, or one
            ``path``/``message``/``value``/``error_type`` entry per field
            for schema errors.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = list(details) if details else []

    def __str__(self) -> str:
        return self.message


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it reads in the file.

    Examples:
        >>> _json_path(("design", "panels", 0, "type"))
        'design.panels[0].type'
        >>> _json_path(())
        ''
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _field_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _json_path(item["loc"]),
            "message": item["msg"],
            "value": item.get("input"),
            "error_type": item["type"],
        }
        for item in error.errors()
    ]


def _summary(details: list[dict[str, Any]]) -> str:
    lines = ["Design validation failed:"]
    for detail in details:
        entry = f"  - {detail['path'] or '(root)'}: {detail['message']}"
        value = detail.get("value")
        # whole objects are too noisy to echo back
        if value is not None and not isinstance(value, dict):
            entry += f" (got: {value!r})"
        lines.append(entry)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> DesignConfiguration:
    try:
        return DesignConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _field_errors(e)
        raise ConfigError(_summary(details), "validation", path, details) from e


def _read(path: Path) -> str:
    if not path.exists():
        raise ConfigError(f"Design file not found: {path}", "file_not_found", path)
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading design file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading design file: {path}: {e}", "file_read_error", path
        ) from e


def load_config(path: Path) -> DesignConfiguration:
    """Load and validate a design from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            ``error_type`` attribute tells which.

    Example:
        >>> try:
        ...     config = load_config(Path("bookcase.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    content = _read(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in design file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> DesignConfiguration:
    """Validate a design already parsed from JSON.

    Raises:
        ConfigError: With ``error_type`` ``validation``.
    """
    return _validate(data)
