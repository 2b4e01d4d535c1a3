"""Configuration file loader with readable error reporting.

Loads JSON box configuration files and turns file system errors, JSON
syntax errors and Pydantic validation errors into a single ConfigError type
whose message can be shown to the user as-is.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fingerbox.application.config.schema import BoxConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message.
        error_type: Category of error: file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: Path to the configuration file (if applicable).
        details: Per-problem details (line/column for JSON errors, field
            path and message for validation errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a dotted JSON path.

    Examples:
        >>> _format_json_path(("box", "width"))
        'box.width'
        >>> _format_json_path(("output", "formats", 0))
        'output.formats[0]'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def validation_details(errors: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Flatten Pydantic error entries into path/message/value/error_type dicts.

    Shared by configuration loading and the REST API so that both report
    field problems with the same dotted paths.
    """
    return [
        {
            "path": _format_json_path(tuple(err["loc"])),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in errors
    ]


def config_error_from_validation(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    details = validation_details(error.errors())
    lines = ["Configuration validation failed:"]
    for detail in details:
        if detail["value"] is not None:
            lines.append(
                f"  - {detail['path']}: {detail['message']} (got: {detail['value']!r})"
            )
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config(path: Path) -> BoxConfiguration:
    """Load and validate a box configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A validated BoxConfiguration instance.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     config = load_config(Path("my-box.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    try:
        config = BoxConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise config_error_from_validation(e, path)

    logger.debug("Loaded box configuration from %s", path)
    return config


def load_config_from_dict(data: dict[str, Any]) -> BoxConfiguration:
    """Load and validate a box configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return BoxConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise config_error_from_validation(e)
