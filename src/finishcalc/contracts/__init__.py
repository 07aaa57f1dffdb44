"""Contracts module - protocols and shared DTOs for cross-layer communication.

By depending on protocols rather than concrete implementations, the
application services stay independent of how estimates are stored and
exported.

Example:
    ```python
    from finishcalc.contracts import EstimateReport, EstimateStore

    def archive(store: EstimateStore, report: EstimateReport) -> None:
        ...
    ```
"""

from .dtos import (
    EstimateReport as EstimateReport,
    RoomEstimate as RoomEstimate,
)
from .exporters import ExporterProtocol as ExporterProtocol
from .storage import (
    EstimateStore as EstimateStore,
    MaterialStore as MaterialStore,
)
