"""Schema-driven validation of rooms, their children and saved materials.

Validation never raises: every failure, including a rule that itself blows
up, ends up as a field-scoped message in the returned ValidationResult.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from finishcalc.application.config.settings import CalculatorSettings, LimitsConfig
from finishcalc.domain.entities import (
    ExclusionZone,
    GeometricElement,
    Opening,
    RoomData,
    SavedMaterial,
)
from finishcalc.domain.materials import create_default_registry
from finishcalc.domain.materials.registry import MaterialCalculatorRegistry

from .base import ValidationResult
from .rules import ValidationContext
from .schemas import (
    Schema,
    element_schema,
    exclusion_schema,
    material_param_rules,
    material_schema,
    opening_schema,
    room_schema,
)

logger = logging.getLogger(__name__)


def _field_value(entity: Any, name: str) -> Any:
    if isinstance(entity, Mapping):
        return entity.get(name)
    return getattr(entity, name, None)


def validate(
    schema: Schema, entity: Any, context: ValidationContext | None = None
) -> ValidationResult:
    """Run every rule of every field in ``schema`` against ``entity``.

    Args:
        schema: Field name -> ordered rules.
        entity: Dataclass, object or mapping holding the field values.
        context: Extra information for the rules. Defaults to a context
            holding only the entity.

    Returns:
        Result whose errors contain only the fields that failed.
    """
    if context is None:
        context = ValidationContext(entity=entity)
    result = ValidationResult()
    for field_name, rules in schema.items():
        value = _field_value(entity, field_name)
        for rule in rules:
            try:
                message = rule(value, context)
            except Exception as e:
                logger.exception(f"Validation rule for '{field_name}' raised")
                message = f"Could not validate value: {e}"
            if message:
                result.add_error(field_name, message)
    return result


def validate_room(
    room: RoomData,
    limits: LimitsConfig | None = None,
    include_children: bool = False,
) -> ValidationResult:
    """Validate a room's own fields, and optionally its children.

    Child errors are prefixed ``opening[<id>]``, ``exclusion[<id>]`` and
    ``element[<id>]``.
    """
    limits = limits or LimitsConfig()
    context = ValidationContext(entity=room, room=room, limits=limits)
    result = validate(room_schema(limits), room, context)
    if not include_children:
        return result

    for opening in room.openings:
        result.merge(validate_opening(opening, room, limits), f"opening[{opening.id}]")
    for exclusion in room.exclusions:
        result.merge(validate_exclusion(exclusion, room, limits), f"exclusion[{exclusion.id}]")
    for element in room.elements:
        result.merge(validate_element(element, room, limits), f"element[{element.id}]")
    return result


def validate_opening(
    opening: Opening, room: RoomData | None = None, limits: LimitsConfig | None = None
) -> ValidationResult:
    """Validate a door or window, checking its area against the room walls."""
    limits = limits or LimitsConfig()
    context = ValidationContext(entity=opening, room=room, limits=limits)
    return validate(opening_schema(limits), opening, context)


def validate_exclusion(
    exclusion: ExclusionZone,
    room: RoomData | None = None,
    limits: LimitsConfig | None = None,
) -> ValidationResult:
    """Validate an exclusion zone."""
    limits = limits or LimitsConfig()
    context = ValidationContext(entity=exclusion, room=room, limits=limits)
    return validate(exclusion_schema(limits), exclusion, context)


def validate_element(
    element: GeometricElement,
    room: RoomData | None = None,
    limits: LimitsConfig | None = None,
) -> ValidationResult:
    """Validate a geometric element against its variant's schema."""
    limits = limits or LimitsConfig()
    context = ValidationContext(entity=element, room=room, limits=limits)
    return validate(element_schema(element.kind, limits), element, context)


def validate_material(
    material: SavedMaterial,
    registry: MaterialCalculatorRegistry | None = None,
    limits: LimitsConfig | None = None,
) -> ValidationResult:
    """Validate a saved material; parameter errors are keyed ``params.<name>``.

    Without a registry the category is checked against the built-in
    calculators.
    """
    limits = limits or LimitsConfig()
    if registry is None:
        registry = create_default_registry()
    context = ValidationContext(entity=material, registry=registry, limits=limits)
    result = validate(material_schema(limits), material, context)
    params_result = validate(material_param_rules(material, context), material.params, context)
    return result.merge(params_result, "params")


def validate_project(
    rooms: Iterable[RoomData],
    materials: Iterable[SavedMaterial] = (),
    registry: MaterialCalculatorRegistry | None = None,
    settings: CalculatorSettings | None = None,
) -> ValidationResult:
    """Validate every room (with children) and every saved material.

    Field names are prefixed with the entity identifier, e.g.
    ``room[3].width``, ``room[3].opening[7].count`` or
    ``material[12].category``.
    """
    limits = settings.limits if settings is not None else LimitsConfig()
    result = ValidationResult()
    for room in rooms:
        result.merge(validate_room(room, limits, include_children=True), f"room[{room.id}]")
    for material in materials:
        result.merge(validate_material(material, registry, limits), f"material[{material.id}]")
    if not result.valid:
        logger.debug(f"Project validation found {result.error_count} error(s)")
    return result
