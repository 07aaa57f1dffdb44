"""Domain services for geometry-derived measurements."""

from .room_metrics import (
    ElementContribution,
    RoomMetricsCalculator,
    compute_metrics,
    compute_total_metrics,
)

__all__ = [
    "ElementContribution",
    "RoomMetricsCalculator",
    "compute_metrics",
    "compute_total_metrics",
]
