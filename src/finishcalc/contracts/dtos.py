"""Shared Data Transfer Objects for cross-layer communication.

These DTOs are produced by the application layer and consumed by the
infrastructure exporters, so they live here to keep the layers decoupled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from finishcalc.domain.entities import RoomData
from finishcalc.domain.value_objects import MaterialResult, RoomMetrics, TotalCalculations


@dataclass(frozen=True)
class RoomEstimate:
    """A room together with the metrics computed for it."""

    room: RoomData
    metrics: RoomMetrics


@dataclass(frozen=True)
class EstimateReport:
    """Everything an exporter needs to render an estimate.

    Attributes:
        name: Estimate name shown in exports.
        rooms: Per-room input and metrics, in project order.
        totals: Aggregate metrics across all rooms.
        results: Material name -> result; None when a material could not
            be computed.
        total_cost: Sum of the costs of all computed results.
        currency: Currency label for costs.
        created_at: ISO-8601 timestamp of the report.
    """

    name: str
    rooms: tuple[RoomEstimate, ...]
    totals: TotalCalculations
    results: Mapping[str, MaterialResult | None] = field(default_factory=dict)
    total_cost: float = 0.0
    currency: str = "RUB"
    created_at: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", MappingProxyType(dict(self.results)))

    @property
    def computed_results(self) -> dict[str, MaterialResult]:
        """Results that were computed, skipping failed materials."""
        return {name: r for name, r in self.results.items() if r is not None}
