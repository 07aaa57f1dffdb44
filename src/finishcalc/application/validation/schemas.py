"""Validation schemas for rooms, openings, exclusions, elements and materials.

A schema maps a field name to its ordered rules. Schemas are built from
``LimitsConfig`` so the bounds follow the configured settings. Keys that are
not attributes of the entity (such as ``"area"``) hold cross-field rules;
their value is None and the rule reads the entity from the context.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from finishcalc.application.config.settings import LimitsConfig
from finishcalc.domain.entities import Opening, SavedMaterial
from finishcalc.domain.parsing import try_parse_decimal
from finishcalc.domain.value_objects import ElementKind, OpeningType, SurfaceTarget, Unit

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

Schema = Mapping[str, Sequence[Rule]]


def room_schema(limits: LimitsConfig) -> Schema:
    """Room: name required, dimensions positive and bounded."""
    return {
        "name": [
            required("Room name is required"),
            max_length(limits.max_name_length, "Room name is too long"),
        ],
        "length": [required("Length is required"), dimension(limits.max_room_length)],
        "width": [required("Width is required"), dimension(limits.max_room_length)],
        "height": [required("Height is required"), dimension(limits.max_room_height)],
        "unit": [one_of(Unit, "Unit must be m, cm or mm")],
    }


def _opening_fits_wall(value: Any, context: ValidationContext) -> bool:
    opening = context.entity
    room = context.room
    if room is None or not isinstance(opening, Opening):
        return True
    width = try_parse_decimal(opening.width)
    height = try_parse_decimal(opening.height)
    count = try_parse_decimal(opening.count)
    length = try_parse_decimal(room.length)
    room_width = try_parse_decimal(room.width)
    room_height = try_parse_decimal(room.height)
    if None in (width, height, count, length, room_width, room_height):
        # malformed numbers are reported by the field rules
        return True
    gross_wall = 2 * (length + room_width) * room_height
    return width * height * count < gross_wall


def opening_schema(limits: LimitsConfig) -> Schema:
    """Door or window: positive size, whole count, must fit in the walls."""
    return {
        "type": [one_of(OpeningType, "Type must be door or window")],
        "width": [required("Width is required"), dimension(limits.max_opening_width)],
        "height": [required("Height is required"), dimension(limits.max_opening_height)],
        "count": [
            required("Count is required"),
            integer(1, limits.max_count, f"Count must be from 1 to {limits.max_count}"),
        ],
        "sill_height": [number(0, allow_blank=True, message="Sill height must be 0 or more")],
        "area": [
            custom(
                _opening_fits_wall,
                "Opening area must be smaller than the room's wall area",
            )
        ],
    }


def exclusion_schema(limits: LimitsConfig) -> Schema:
    """Exclusion zone: positive size, known surface, whole count."""
    return {
        "name": [max_length(limits.max_name_length, "Name is too long")],
        "width": [required("Width is required"), dimension(limits.max_room_length)],
        "height": [required("Height is required"), dimension(limits.max_room_length)],
        "surface": [one_of(SurfaceTarget, "Surface must be wall, floor or ceiling")],
        "count": [
            required("Count is required"),
            integer(1, limits.max_count, f"Count must be from 1 to {limits.max_count}"),
        ],
    }


def element_schema(kind: ElementKind, limits: LimitsConfig) -> Schema:
    """Geometric element schema for one variant.

    Columns need a diameter; niches and protrusions need width and depth.
    """
    count_rules = [
        required("Count is required"),
        integer(1, limits.max_count, f"Count must be from 1 to {limits.max_count}"),
    ]
    height_rules = [required("Height is required"), dimension(limits.max_room_height)]

    if kind is ElementKind.COLUMN:
        return {
            "diameter": [
                required("Diameter is required"),
                dimension(limits.max_column_diameter),
            ],
            "height": height_rules,
            "count": count_rules,
        }
    return {
        "width": [required("Width is required"), dimension(limits.max_element_size)],
        "depth": [required("Depth is required"), dimension(limits.max_element_size)],
        "height": height_rules,
        "count": count_rules,
    }


def _category_registered(value: Any, context: ValidationContext) -> bool:
    if context.registry is None:
        return False
    return isinstance(value, str) and context.registry.is_registered(value)


def material_schema(limits: LimitsConfig) -> Schema:
    """Saved material: name and a registered category.

    Parameter values are checked per key by ``material_param_rules``.
    """
    return {
        "name": [
            required("Material name is required"),
            max_length(limits.max_name_length, "Material name is too long"),
        ],
        "category": [
            required("Category is required"),
            custom(_category_registered, "Unknown material category"),
        ],
    }


def material_param_rules(
    material: SavedMaterial, context: ValidationContext
) -> dict[str, list[Rule]]:
    """Rules for each parameter of a saved material.

    Parameters the category's calculator declares as choices must hold an
    allowed value; every other parameter must be a number >= 0. Blank values
    are left to the calculator defaults.
    """
    choices: Mapping[str, Sequence[str]] = {}
    if context.registry is not None and context.registry.is_registered(material.category):
        plugin = context.registry.get(material.category)
        choices = getattr(plugin, "choice_params", {})

    rules: dict[str, list[Rule]] = {}
    for key in material.params:
        if key in choices:
            allowed = choices[key]
            rules[key] = [
                custom(
                    lambda v, _c, allowed=allowed: not str(v).strip()
                    or str(v).strip().lower() in allowed,
                    f"Value must be one of: {', '.join(allowed)}",
                )
            ]
        else:
            rules[key] = [number(0, allow_blank=True)]
    return rules
