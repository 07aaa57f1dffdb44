"""Validation rules and the context they run in.

A rule is a callable ``(value, context) -> str | None`` returning an error
message or None. Rule factories below build the common rules; ``custom``
wraps any predicate, which is how cross-field rules read sibling values
through the context.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from finishcalc.application.config.settings import LimitsConfig
from finishcalc.domain.entities import RoomData
from finishcalc.domain.materials.registry import MaterialCalculatorRegistry
from finishcalc.domain.parsing import try_parse_decimal
from finishcalc.domain.value_objects import Unit


@dataclass(frozen=True)
class ValidationContext:
    """Everything a rule may consult beyond the value it checks.

    Attributes:
        entity: The entity being validated.
        room: Owning room, for rules that compare against room geometry.
        registry: Material registry, for category checks.
        limits: Upper bounds for dimensions and counts.
    """

    entity: Any = None
    room: RoomData | None = None
    registry: MaterialCalculatorRegistry | None = None
    limits: LimitsConfig = field(default_factory=LimitsConfig)


Rule = Callable[[Any, ValidationContext], str | None]


def _format_bound(value: float) -> str:
    return f"{value:g}"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def required(message: str = "This field is required") -> Rule:
    """Value must be present and not blank."""

    def rule(value: Any, context: ValidationContext) -> str | None:
        return message if _is_blank(value) else None

    return rule


def number(
    min: float | None = None,
    max: float | None = None,
    exclusive_min: bool = False,
    message: str | None = None,
    allow_blank: bool = False,
) -> Rule:
    """Value must parse as a decimal (comma or dot) within bounds.

    Args:
        min: Lower bound.
        max: Upper bound, inclusive.
        exclusive_min: When True the value must be strictly greater than min.
        message: Error message overriding the generated ones.
        allow_blank: Skip the check for blank values.
    """

    def rule(value: Any, context: ValidationContext) -> str | None:
        if allow_blank and _is_blank(value):
            return None
        parsed = try_parse_decimal(value)
        if parsed is None:
            return message or "Enter a valid number"
        if min is not None:
            if exclusive_min and parsed <= min:
                return message or f"Value must be greater than {_format_bound(min)}"
            if not exclusive_min and parsed < min:
                return message or f"Value must be at least {_format_bound(min)}"
        if max is not None and parsed > max:
            return message or f"Value must be at most {_format_bound(max)}"
        return None

    return rule


def dimension(max_meters: float | None = None, message: str | None = None) -> Rule:
    """Length typed in the room's unit; must be > 0 and at most ``max_meters``.

    The unit comes from ``context.room`` (or the entity itself when it is a
    room); meters are assumed when neither is available.
    """

    def rule(value: Any, context: ValidationContext) -> str | None:
        parsed = try_parse_decimal(value)
        if parsed is None:
            return message or "Enter a valid number"
        if parsed <= 0:
            return message or "Value must be greater than 0"
        room = context.room or (
            context.entity if isinstance(context.entity, RoomData) else None
        )
        unit = room.unit if room is not None else Unit.M
        if max_meters is not None and parsed / unit.per_meter > max_meters:
            limit = max_meters * unit.per_meter
            return message or f"Value must be at most {_format_bound(limit)} {unit.value}"
        return None

    return rule


def integer(
    min: int | None = None, max: int | None = None, message: str | None = None
) -> Rule:
    """Value must be a whole number within bounds."""

    def rule(value: Any, context: ValidationContext) -> str | None:
        parsed = try_parse_decimal(value)
        if parsed is None or not parsed.is_integer():
            return message or "Enter a whole number"
        if min is not None and parsed < min:
            return message or f"Value must be at least {min}"
        if max is not None and parsed > max:
            return message or f"Value must be at most {max}"
        return None

    return rule


def one_of(values: Iterable[Any], message: str | None = None) -> Rule:
    """Value must be one of the allowed values.

    Enum members are compared by their value, so ``OpeningType.DOOR`` and
    ``"door"`` both match an allowed ``"door"``.
    """
    allowed = tuple(getattr(v, "value", v) for v in values)

    def rule(value: Any, context: ValidationContext) -> str | None:
        if getattr(value, "value", value) in allowed:
            return None
        return message or f"Value must be one of: {', '.join(map(str, allowed))}"

    return rule


def max_length(limit: int, message: str | None = None) -> Rule:
    """Text value must not exceed ``limit`` characters."""

    def rule(value: Any, context: ValidationContext) -> str | None:
        if value is not None and len(str(value)) > limit:
            return message or f"Must be at most {limit} characters"
        return None

    return rule


def custom(
    predicate: Callable[[Any, ValidationContext], bool], message: str
) -> Rule:
    """Wrap a predicate; the rule fails with ``message`` when it returns False."""

    def rule(value: Any, context: ValidationContext) -> str | None:
        return None if predicate(value, context) else message

    return rule
