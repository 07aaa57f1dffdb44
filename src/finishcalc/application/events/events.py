"""Event channels and their payloads.

The channel set is closed: every ``EventType`` has exactly one payload
dataclass, listed in ``EVENT_PAYLOADS``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from finishcalc.domain.entities import RoomData, SavedMaterial
from finishcalc.domain.exceptions import CalculatorError
from finishcalc.domain.value_objects import MaterialResult, Theme


class EventType(str, Enum):
    """Event channels published on the bus."""

    ROOM_ADDED = "room:added"
    ROOM_UPDATED = "room:updated"
    ROOM_DELETED = "room:deleted"
    ROOM_SELECTED = "room:selected"
    MATERIAL_ADDED = "material:added"
    MATERIAL_UPDATED = "material:updated"
    MATERIAL_DELETED = "material:deleted"
    MATERIAL_SELECTED = "material:selected"
    CALCULATION_UPDATED = "calculation:updated"
    CALCULATION_COMPLETED = "calculation:completed"
    EXPORT_STARTED = "export:started"
    EXPORT_COMPLETED = "export:completed"
    EXPORT_FAILED = "export:failed"
    SAVE_STARTED = "save:started"
    SAVE_COMPLETED = "save:completed"
    SAVE_FAILED = "save:failed"
    LOAD_STARTED = "load:started"
    LOAD_COMPLETED = "load:completed"
    LOAD_FAILED = "load:failed"
    THEME_CHANGED = "theme:changed"
    ERROR_OCCURRED = "error:occurred"
    VALIDATION_FAILED = "validation:failed"
    VALIDATION_PASSED = "validation:passed"


@dataclass(frozen=True)
class RoomAdded:
    room: RoomData


@dataclass(frozen=True)
class RoomUpdated:
    room: RoomData
    previous_room: RoomData


@dataclass(frozen=True)
class RoomDeleted:
    room_id: int


@dataclass(frozen=True)
class RoomSelected:
    room: RoomData


@dataclass(frozen=True)
class MaterialAdded:
    material: SavedMaterial


@dataclass(frozen=True)
class MaterialUpdated:
    material: SavedMaterial
    previous_material: SavedMaterial


@dataclass(frozen=True)
class MaterialDeleted:
    material_id: int


@dataclass(frozen=True)
class MaterialSelected:
    material: SavedMaterial


@dataclass(frozen=True)
class CalculationUpdated:
    """One material's result; None when it could not be computed."""

    name: str
    result: MaterialResult | None


@dataclass(frozen=True)
class CalculationCompleted:
    results: Mapping[str, MaterialResult | None]


@dataclass(frozen=True)
class ExportStarted:
    format: str


@dataclass(frozen=True)
class ExportCompleted:
    format: str
    data: Any = None


@dataclass(frozen=True)
class ExportFailed:
    format: str
    error: CalculatorError


@dataclass(frozen=True)
class SaveStarted:
    name: str


@dataclass(frozen=True)
class SaveCompleted:
    name: str
    data: Any = None


@dataclass(frozen=True)
class SaveFailed:
    name: str
    error: CalculatorError


@dataclass(frozen=True)
class LoadStarted:
    name: str


@dataclass(frozen=True)
class LoadCompleted:
    name: str
    data: Any = None


@dataclass(frozen=True)
class LoadFailed:
    name: str
    error: CalculatorError


@dataclass(frozen=True)
class ThemeChanged:
    theme: Theme


@dataclass(frozen=True)
class ErrorOccurred:
    error: CalculatorError


@dataclass(frozen=True)
class ValidationFailed:
    """Field path -> messages, as produced by the validation engine."""

    errors: Mapping[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class ValidationPassed:
    data: Any = None


EVENT_PAYLOADS: dict[EventType, type] = {
    EventType.ROOM_ADDED: RoomAdded,
    EventType.ROOM_UPDATED: RoomUpdated,
    EventType.ROOM_DELETED: RoomDeleted,
    EventType.ROOM_SELECTED: RoomSelected,
    EventType.MATERIAL_ADDED: MaterialAdded,
    EventType.MATERIAL_UPDATED: MaterialUpdated,
    EventType.MATERIAL_DELETED: MaterialDeleted,
    EventType.MATERIAL_SELECTED: MaterialSelected,
    EventType.CALCULATION_UPDATED: CalculationUpdated,
    EventType.CALCULATION_COMPLETED: CalculationCompleted,
    EventType.EXPORT_STARTED: ExportStarted,
    EventType.EXPORT_COMPLETED: ExportCompleted,
    EventType.EXPORT_FAILED: ExportFailed,
    EventType.SAVE_STARTED: SaveStarted,
    EventType.SAVE_COMPLETED: SaveCompleted,
    EventType.SAVE_FAILED: SaveFailed,
    EventType.LOAD_STARTED: LoadStarted,
    EventType.LOAD_COMPLETED: LoadCompleted,
    EventType.LOAD_FAILED: LoadFailed,
    EventType.THEME_CHANGED: ThemeChanged,
    EventType.ERROR_OCCURRED: ErrorOccurred,
    EventType.VALIDATION_FAILED: ValidationFailed,
    EventType.VALIDATION_PASSED: ValidationPassed,
}
