"""Value objects for the material estimation domain.

Enumerations for the closed vocabularies (units, opening types, surfaces,
geometric element kinds) and the immutable derived types produced by the
metrics calculator and the material plugins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Unit(str, Enum):
    """Length units accepted for room input."""

    M = "m"
    CM = "cm"
    MM = "mm"

    @property
    def per_meter(self) -> int:
        """Number of this unit in one meter."""
        return CONVERSION_FACTORS[self]


CONVERSION_FACTORS: dict[Unit, int] = {Unit.M: 1, Unit.CM: 100, Unit.MM: 1000}


class OpeningType(str, Enum):
    """Types of wall openings."""

    DOOR = "door"
    WINDOW = "window"


class SurfaceTarget(str, Enum):
    """Room surface an exclusion zone is subtracted from."""

    WALL = "wall"
    FLOOR = "floor"
    CEILING = "ceiling"


class ElementKind(str, Enum):
    """Variant tag of a geometric element.

    Attributes:
        NICHE: Recess in a wall; adds its inner faces to the wall area.
        PROTRUSION: Bump-out from a wall; adds its side faces and consumes floor.
        COLUMN: Free-standing cylinder; adds lateral area and consumes floor.
    """

    NICHE = "niche"
    PROTRUSION = "protrusion"
    COLUMN = "column"


class Theme(str, Enum):
    """Display theme carried by ``theme:changed`` events."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class RoomMetrics:
    """Derived measurements of one room. All values in meters / square meters.

    Attributes:
        floor_area: Floor area minus element footprints and floor exclusions.
        ceiling_area: Ceiling area minus element footprints and ceiling exclusions.
        perimeter: Room perimeter, ``2 * (length + width)``.
        adjusted_perimeter: Perimeter along the floor line: element outlines
            added, floor-line exclusions taken off, clamped at zero.
        gross_wall_area: ``perimeter * height``.
        net_wall_area: Gross wall area adjusted for openings, wall exclusions
            and geometric elements, clamped at zero.
        height: Room height.
        total_door_width: Combined width of all doors (for skirting).
    """

    floor_area: float = 0.0
    ceiling_area: float = 0.0
    perimeter: float = 0.0
    adjusted_perimeter: float = 0.0
    gross_wall_area: float = 0.0
    net_wall_area: float = 0.0
    height: float = 0.0
    total_door_width: float = 0.0


@dataclass(frozen=True)
class TotalCalculations:
    """Aggregate of :class:`RoomMetrics` across a project.

    Carries the same area and perimeter fields as ``RoomMetrics`` so material
    plugins accept either. ``height`` is the average room height.
    """

    floor_area: float = 0.0
    ceiling_area: float = 0.0
    perimeter: float = 0.0
    adjusted_perimeter: float = 0.0
    gross_wall_area: float = 0.0
    net_wall_area: float = 0.0
    height: float = 0.0
    total_door_width: float = 0.0
    room_count: int = 0


@dataclass(frozen=True)
class MaterialResult:
    """Computed quantity and cost for one material.

    Attributes:
        category: Category of the plugin that produced the result.
        quantity: Human-readable quantity text (e.g. "61 tiles / 7 packs").
        cost: Total cost in the project currency.
        details: Ordered label -> value detail lines.
        show_note: Whether the caller should show the purchase note.
    """

    category: str
    quantity: str
    cost: float
    details: Mapping[str, str] = field(default_factory=dict)
    show_note: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    @property
    def text(self) -> str:
        """Quantity text followed by the cost when there is one."""
        if self.cost > 0:
            return f"{self.quantity}\nTotal cost: {self.cost:.2f}"
        return self.quantity
