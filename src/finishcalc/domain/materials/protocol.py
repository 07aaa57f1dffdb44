"""Protocols for material calculator plugins."""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from ..value_objects import MaterialResult


@runtime_checkable
class SurfaceMetrics(Protocol):
    """Measurements a plugin may read.

    Satisfied by both ``RoomMetrics`` (one room) and ``TotalCalculations``
    (whole project).
    """

    floor_area: float
    ceiling_area: float
    perimeter: float
    adjusted_perimeter: float
    net_wall_area: float
    height: float
    total_door_width: float


@runtime_checkable
class MaterialCalculator(Protocol):
    """Protocol for material calculator plugins.

    A plugin turns surface metrics and a free-form parameter mapping into a
    :class:`MaterialResult`. It returns None when a required input (area,
    tile size, coverage rate...) is zero or missing, meaning "not yet
    computable" rather than an error.

    Example:
        class GroutCalculator:
            category = "grout"

            def compute_result(self, metrics, params):
                area = metrics.floor_area
                if area <= 0:
                    return None
                return MaterialResult(category="grout", quantity=..., cost=...)

        registry.register("grout", GroutCalculator())
    """

    category: str

    def compute_result(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        """Compute the material needed for the given metrics."""
        ...
