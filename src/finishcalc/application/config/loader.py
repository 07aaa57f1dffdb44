"""Settings file loader with error reporting.

Loads calculator settings from JSON files. File system errors, JSON syntax
errors and Pydantic validation errors are all reported as ConfigError with a
clear message and, for validation failures, per-field details.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from finishcalc.application.config.settings import CalculatorSettings

M = TypeVar("M", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for settings-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the settings file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
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


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> format_json_path(("limits", "max_count"))
        'limits.max_count'
        >>> format_json_path(("rooms", 0, "openings", 1, "width"))
        'rooms[0].openings[1].width'
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


def extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value dicts."""
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]], title: str) -> str:
    lines = [f"{title} validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def read_json_file(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        ConfigError: With error_type "file_not_found", "permission_denied",
            "file_read_error" or "json_parse".
    """
    if not path.exists():
        raise ConfigError(
            message=f"File not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def validate_model(
    model: type[M], data: Any, path: Path | None = None, title: str = "Configuration"
) -> M:
    """Validate data against a Pydantic model, raising ConfigError on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details, title),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_settings(path: Path) -> CalculatorSettings:
    """Load and validate calculator settings from a JSON file.

    Args:
        path: Path to the JSON settings file

    Returns:
        A validated CalculatorSettings instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> try:
        ...     settings = load_settings(Path("finishcalc.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    data = read_json_file(path)
    return validate_model(CalculatorSettings, data, path=path, title="Settings")


def load_settings_from_dict(data: dict[str, Any]) -> CalculatorSettings:
    """Load and validate calculator settings from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return validate_model(CalculatorSettings, data, title="Settings")
