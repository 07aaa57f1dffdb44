"""Exception hierarchy for the estimation engine.

Every error carries a machine-readable ``kind`` alongside its message so it
can travel over the event bus (``error:occurred``) and be shown to the user.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error categories."""

    UNKNOWN_CATEGORY = "unknown_category"
    CALCULATION = "calculation"
    SAVE = "save"
    LOAD = "load"
    DELETE = "delete"
    EXPORT = "export"


class CalculatorError(Exception):
    """Base class for all estimation engine errors.

    Attributes:
        message: Human-readable description of the failure.
        kind: Category of the failure.
    """

    default_kind: ErrorKind = ErrorKind.CALCULATION

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        self.message = message
        self.kind = kind or self.default_kind
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnknownCategoryError(CalculatorError, KeyError):
    """Raised when dispatching to a category with no registered plugin."""

    default_kind = ErrorKind.UNKNOWN_CATEGORY

    def __init__(self, category: str, available: list[str] | None = None) -> None:
        self.category = category
        self.available = available or []
        super().__init__(
            f"No material calculator registered for category '{category}'. "
            f"Available categories: {', '.join(self.available) or 'none'}"
        )


class CalculationError(CalculatorError):
    """Raised when a plugin cannot compute a result from its inputs."""

    default_kind = ErrorKind.CALCULATION


class SaveError(CalculatorError):
    """Raised when the storage collaborator fails to save."""

    default_kind = ErrorKind.SAVE


class LoadError(CalculatorError):
    """Raised when the storage collaborator fails to load."""

    default_kind = ErrorKind.LOAD


class DeleteError(CalculatorError):
    """Raised when the storage collaborator fails to delete."""

    default_kind = ErrorKind.DELETE


class ExportError(CalculatorError):
    """Raised when an export cannot be produced."""

    default_kind = ErrorKind.EXPORT

    def __init__(self, message: str, format_name: str = "") -> None:
        self.format_name = format_name
        super().__init__(message)
