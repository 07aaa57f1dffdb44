"""Core validation result structure.

Every validator in the engine returns a ValidationResult. Errors are keyed
by field path (``"width"``, ``"room[3].opening[7].count"``) and a field only
appears once at least one of its rules failed.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    """Container for field-scoped validation errors.

    Attributes:
        errors: Field path -> ordered list of error messages.
    """

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        """True when no field has an error."""
        return not self.errors

    @property
    def is_valid(self) -> bool:
        """Alias of ``valid``."""
        return self.valid

    @property
    def error_count(self) -> int:
        """Total number of error messages across all fields."""
        return sum(len(messages) for messages in self.errors.values())

    def add_error(self, path: str, message: str) -> ValidationResult:
        """Add an error for a field and return self for chaining."""
        self.errors.setdefault(path, []).append(message)
        return self

    def merge(self, other: ValidationResult, prefix: str = "") -> ValidationResult:
        """Merge another result into this one.

        Args:
            other: Result to merge.
            prefix: Path prepended to each of ``other``'s field names,
                joined with a dot.
        """
        for path, messages in other.errors.items():
            key = f"{prefix}.{path}" if prefix else path
            self.errors.setdefault(key, []).extend(messages)
        return self

    def first_error(self, path: str) -> str | None:
        """First error message for a field, if any."""
        messages = self.errors.get(path)
        return messages[0] if messages else None
