"""Validation engine: rules, schemas and validators."""

from .base import ValidationResult
from .rules import (
    Rule,
    ValidationContext,
    custom,
    dimension,
    integer,
    max_length,
    number,
    one_of,
    required,
)
from .schemas import (
    Schema,
    element_schema,
    exclusion_schema,
    material_schema,
    opening_schema,
    room_schema,
)
from .validator import (
    validate,
    validate_element,
    validate_exclusion,
    validate_material,
    validate_opening,
    validate_project,
    validate_room,
)

__all__ = [
    "Rule",
    "Schema",
    "ValidationContext",
    "ValidationResult",
    "custom",
    "dimension",
    "element_schema",
    "exclusion_schema",
    "integer",
    "material_schema",
    "max_length",
    "number",
    "one_of",
    "opening_schema",
    "required",
    "room_schema",
    "validate",
    "validate_element",
    "validate_exclusion",
    "validate_material",
    "validate_opening",
    "validate_project",
    "validate_room",
]
