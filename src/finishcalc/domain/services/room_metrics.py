"""Room metrics calculation.

Derives floor, ceiling, perimeter and wall areas from a room's raw input.
The calculation is pure: metrics are recomputed from the room every time and
never cached, so an edited room is always reflected in the next aggregate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..entities import Column, ExclusionZone, Niche, Opening, Protrusion, RoomData
from ..parsing import parse_count, to_meters
from ..value_objects import (
    OpeningType,
    RoomMetrics,
    SurfaceTarget,
    TotalCalculations,
    Unit,
)

__all__ = [
    "ElementContribution",
    "RoomMetricsCalculator",
    "compute_metrics",
    "compute_total_metrics",
]


@dataclass(frozen=True)
class ElementContribution:
    """Effect of one geometric element entry on the room surfaces.

    Attributes:
        wall_area: Surface added to the finished wall area.
        footprint: Floor (and ceiling) area the element occupies.
        perimeter: Length added to the run along the floor line.
    """

    wall_area: float = 0.0
    footprint: float = 0.0
    perimeter: float = 0.0


def _length(value: str, unit: Unit) -> float:
    """A dimension in meters. Negative input counts as zero."""
    return max(0.0, to_meters(value, unit))


def _count(value: str) -> int:
    return max(0, parse_count(value))


class RoomMetricsCalculator:
    """Computes :class:`RoomMetrics` for rooms and aggregates across rooms."""

    def compute(self, room: RoomData) -> RoomMetrics:
        """Compute metrics for a single room.

        Never raises: unparseable or negative values count as zero and every
        area is clamped at zero, so over-sized openings or exclusions cannot
        produce a negative quantity downstream.
        """
        unit = room.unit
        length = _length(room.length, unit)
        width = _length(room.width, unit)
        height = _length(room.height, unit)

        perimeter = 2 * (length + width)
        gross_wall_area = perimeter * height

        openings_area = sum(self._opening_area(op, unit) for op in room.openings)
        wall_exclusions = self._exclusion_area(room.exclusions, SurfaceTarget.WALL, unit)
        floor_exclusions = self._exclusion_area(room.exclusions, SurfaceTarget.FLOOR, unit)
        ceiling_exclusions = self._exclusion_area(
            room.exclusions, SurfaceTarget.CEILING, unit
        )
        exclusion_outline = sum(
            2 * (_length(ex.width, unit) + _length(ex.height, unit)) * _count(ex.count)
            for ex in room.exclusions
            if ex.affects_perimeter
        )

        contributions = [self.element_contribution(el, unit) for el in room.elements]
        element_wall_area = sum(c.wall_area for c in contributions)
        element_footprint = sum(c.footprint for c in contributions)
        element_perimeter = sum(c.perimeter for c in contributions)

        base_floor = length * width - element_footprint
        net_wall_area = gross_wall_area - openings_area - wall_exclusions + element_wall_area

        total_door_width = sum(
            _length(op.width, unit) * _count(op.count)
            for op in room.openings
            if op.type == OpeningType.DOOR
        )

        return RoomMetrics(
            floor_area=max(0.0, base_floor - floor_exclusions),
            ceiling_area=max(0.0, base_floor - ceiling_exclusions),
            perimeter=perimeter,
            adjusted_perimeter=max(0.0, perimeter + element_perimeter - exclusion_outline),
            gross_wall_area=gross_wall_area,
            net_wall_area=max(0.0, net_wall_area),
            height=height,
            total_door_width=total_door_width,
        )

    def compute_total(self, rooms: Iterable[RoomData]) -> TotalCalculations:
        """Sum the metrics of all rooms.

        An empty project yields all-zero totals. ``height`` is the average
        height across rooms.
        """
        floor_area = ceiling_area = perimeter = adjusted_perimeter = 0.0
        gross_wall_area = net_wall_area = door_width = height_sum = 0.0
        count = 0

        for room in rooms:
            metrics = self.compute(room)
            floor_area += metrics.floor_area
            ceiling_area += metrics.ceiling_area
            perimeter += metrics.perimeter
            adjusted_perimeter += metrics.adjusted_perimeter
            gross_wall_area += metrics.gross_wall_area
            net_wall_area += metrics.net_wall_area
            door_width += metrics.total_door_width
            height_sum += metrics.height
            count += 1

        return TotalCalculations(
            floor_area=floor_area,
            ceiling_area=ceiling_area,
            perimeter=perimeter,
            adjusted_perimeter=adjusted_perimeter,
            gross_wall_area=gross_wall_area,
            net_wall_area=net_wall_area,
            height=height_sum / count if count else 0.0,
            total_door_width=door_width,
            room_count=count,
        )

    @staticmethod
    def element_contribution(
        element: Niche | Protrusion | Column, unit: Unit
    ) -> ElementContribution:
        """Surface added and floor consumed by a geometric element entry.

        Entries with a non-positive count, height or size contribute nothing.
        """
        count = _count(element.count)
        height = _length(element.height, unit)
        if count <= 0 or height <= 0:
            return ElementContribution()

        if isinstance(element, Column):
            diameter = _length(element.diameter, unit)
            if diameter <= 0:
                return ElementContribution()
            return ElementContribution(
                wall_area=math.pi * diameter * height * count,
                footprint=math.pi * (diameter / 2) ** 2 * count,
                perimeter=math.pi * diameter * count,
            )

        width = _length(element.width, unit)
        depth = _length(element.depth, unit)
        if width <= 0 or depth <= 0:
            return ElementContribution()

        if isinstance(element, Niche):
            # back face plus two side faces
            return ElementContribution(
                wall_area=(width * height + 2 * depth * height) * count,
                perimeter=2 * depth * count,
            )
        return ElementContribution(
            wall_area=2 * depth * height * count,
            footprint=width * depth * count,
            perimeter=2 * depth * count,
        )

    @staticmethod
    def _opening_area(opening: Opening, unit: Unit) -> float:
        width = _length(opening.width, unit)
        height = _length(opening.height, unit)
        count = _count(opening.count)
        if (
            opening.type == OpeningType.WINDOW
            and opening.include_sill_area
            and opening.sill_height
        ):
            sill = _length(opening.sill_height, unit)
            return width * max(0.0, height - sill) * count
        return width * height * count

    @staticmethod
    def _exclusion_area(
        exclusions: Iterable[ExclusionZone], surface: SurfaceTarget, unit: Unit
    ) -> float:
        return sum(
            _length(ex.width, unit) * _length(ex.height, unit) * _count(ex.count)
            for ex in exclusions
            if ex.surface == surface
        )


_calculator = RoomMetricsCalculator()


def compute_metrics(room: RoomData) -> RoomMetrics:
    """Compute metrics for one room. See :meth:`RoomMetricsCalculator.compute`."""
    return _calculator.compute(room)


def compute_total_metrics(rooms: Iterable[RoomData]) -> TotalCalculations:
    """Aggregate metrics across rooms. See :meth:`RoomMetricsCalculator.compute_total`."""
    return _calculator.compute_total(rooms)
