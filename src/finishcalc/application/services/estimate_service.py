"""Estimate service: the validated geometry -> metrics -> materials pipeline.

Rooms are passed in by value and never cached; every call recomputes
metrics from the current room data and publishes the outcome on the bus.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime, timezone

from finishcalc.application.config.settings import CalculatorSettings
from finishcalc.application.dtos import MaterialSelection
from finishcalc.application.events.bus import EventBus
from finishcalc.application.events.events import (
    CalculationCompleted,
    CalculationUpdated,
    ErrorOccurred,
    EventType,
    RoomAdded,
    RoomDeleted,
    RoomSelected,
    RoomUpdated,
    ValidationFailed,
    ValidationPassed,
)
from finishcalc.application.validation.base import ValidationResult
from finishcalc.application.validation.validator import validate_project
from finishcalc.contracts.dtos import EstimateReport, RoomEstimate
from finishcalc.domain.entities import RoomData, SavedMaterial
from finishcalc.domain.exceptions import CalculationError
from finishcalc.domain.materials.protocol import SurfaceMetrics
from finishcalc.domain.materials.registry import MaterialCalculatorRegistry
from finishcalc.domain.services.room_metrics import (
    compute_metrics,
    compute_total_metrics,
)
from finishcalc.domain.value_objects import MaterialResult

logger = logging.getLogger(__name__)


class EstimateService:
    """Computes material results for a set of rooms and publishes them.

    Args:
        registry: Material calculators to dispatch to.
        bus: Event bus receiving room, calculation and validation events.
        settings: Material defaults and validation limits.
    """

    def __init__(
        self,
        registry: MaterialCalculatorRegistry,
        bus: EventBus,
        settings: CalculatorSettings | None = None,
    ) -> None:
        self.registry = registry
        self.bus = bus
        self.settings = settings or CalculatorSettings()

    def resolve_params(self, selection: MaterialSelection) -> dict[str, str]:
        """Merge calculator defaults, configured defaults and user params.

        Later sources win: user params override configured defaults, which
        override the calculator's own defaults.

        Raises:
            UnknownCategoryError: If the category is not registered.
        """
        plugin = self.registry.get(selection.category)
        params: dict[str, str] = dict(getattr(plugin, "default_params", {}))
        params.update(self.settings.defaults_for(selection.category))
        params.update(selection.params)
        return params

    def calculate(
        self, selection: MaterialSelection, rooms: Sequence[RoomData]
    ) -> MaterialResult | None:
        """Calculate one material over the given rooms.

        A CalculationError is published on ``error:occurred`` and the result
        reads as None.

        Raises:
            UnknownCategoryError: If the category is not registered.
        """
        totals = compute_total_metrics(rooms)
        return self._calculate(selection, totals)

    def _calculate(
        self, selection: MaterialSelection, totals: SurfaceMetrics
    ) -> MaterialResult | None:
        params = self.resolve_params(selection)
        try:
            return self.registry.calculate(selection.category, totals, params)
        except CalculationError as e:
            logger.warning(f"Material '{selection.name}' could not be calculated: {e}")
            self.bus.emit(EventType.ERROR_OCCURRED, ErrorOccurred(error=e))
            return None

    def recalculate(
        self,
        rooms: Sequence[RoomData],
        selections: Iterable[MaterialSelection],
    ) -> dict[str, MaterialResult | None]:
        """Recalculate every selected material over the project totals.

        Publishes ``calculation:updated`` for each material and one
        ``calculation:completed`` with all results.

        Returns:
            Material name -> result, None for materials that failed.

        Raises:
            UnknownCategoryError: If a selection names an unregistered category.
        """
        totals = compute_total_metrics(rooms)
        results: dict[str, MaterialResult | None] = {}
        for selection in selections:
            result = self._calculate(selection, totals)
            results[selection.name] = result
            self.bus.emit(
                EventType.CALCULATION_UPDATED,
                CalculationUpdated(name=selection.name, result=result),
            )
        self.bus.emit(
            EventType.CALCULATION_COMPLETED, CalculationCompleted(results=dict(results))
        )
        logger.debug(f"Recalculated {len(results)} material(s) for {len(rooms)} room(s)")
        return results

    def build_report(
        self,
        name: str,
        rooms: Sequence[RoomData],
        selections: Iterable[MaterialSelection],
    ) -> EstimateReport:
        """Recalculate and bundle everything an exporter needs."""
        results = self.recalculate(rooms, selections)
        return EstimateReport(
            name=name,
            rooms=tuple(RoomEstimate(room=r, metrics=compute_metrics(r)) for r in rooms),
            totals=compute_total_metrics(rooms),
            results=results,
            total_cost=self.total_cost(results),
            currency=self.settings.currency,
            created_at=datetime.now(timezone.utc).isoformat(),
        )

    @staticmethod
    def total_cost(results: Mapping[str, MaterialResult | None]) -> float:
        """Sum of costs over computed results, rounded to cents."""
        return round(sum(r.cost for r in results.values() if r is not None), 2)

    def validate(
        self,
        rooms: Iterable[RoomData],
        materials: Iterable[SavedMaterial] = (),
    ) -> ValidationResult:
        """Validate the project and publish ``validation:passed``/``failed``."""
        rooms = list(rooms)
        result = validate_project(rooms, materials, self.registry, self.settings)
        if result.valid:
            self.bus.emit(EventType.VALIDATION_PASSED, ValidationPassed(data=tuple(rooms)))
        else:
            self.bus.emit(
                EventType.VALIDATION_FAILED, ValidationFailed(errors=dict(result.errors))
            )
        return result

    # --- Room collection edits ---

    def add_room(
        self, rooms: Sequence[RoomData], room: RoomData
    ) -> tuple[RoomData, ...]:
        """Append a room and publish ``room:added``.

        Raises:
            ValueError: If a room with the same id already exists.
        """
        if any(r.id == room.id for r in rooms):
            raise ValueError(f"Room {room.id} already exists")
        self.bus.emit(EventType.ROOM_ADDED, RoomAdded(room=room))
        return (*rooms, room)

    def update_room(
        self, rooms: Sequence[RoomData], room: RoomData
    ) -> tuple[RoomData, ...]:
        """Replace the room with the same id and publish ``room:updated``.

        Raises:
            KeyError: If no room has that id.
        """
        for index, existing in enumerate(rooms):
            if existing.id == room.id:
                updated = (*rooms[:index], room, *rooms[index + 1 :])
                self.bus.emit(
                    EventType.ROOM_UPDATED, RoomUpdated(room=room, previous_room=existing)
                )
                return updated
        raise KeyError(f"Room {room.id} not found")

    def delete_room(
        self, rooms: Sequence[RoomData], room_id: int
    ) -> tuple[RoomData, ...]:
        """Remove a room and publish ``room:deleted``.

        Raises:
            KeyError: If no room has that id.
        """
        remaining = tuple(r for r in rooms if r.id != room_id)
        if len(remaining) == len(rooms):
            raise KeyError(f"Room {room_id} not found")
        self.bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=room_id))
        return remaining

    def select_room(self, room: RoomData) -> None:
        """Publish ``room:selected``."""
        self.bus.emit(EventType.ROOM_SELECTED, RoomSelected(room=room))
