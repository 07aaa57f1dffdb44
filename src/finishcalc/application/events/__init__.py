"""Event bus, event channels and stock listeners."""

from .bus import Debounced, EventBus, Handler, Throttled, Unsubscribe
from .events import (
    EVENT_PAYLOADS,
    CalculationCompleted,
    CalculationUpdated,
    ErrorOccurred,
    EventType,
    ExportCompleted,
    ExportFailed,
    ExportStarted,
    LoadCompleted,
    LoadFailed,
    LoadStarted,
    MaterialAdded,
    MaterialDeleted,
    MaterialSelected,
    MaterialUpdated,
    RoomAdded,
    RoomDeleted,
    RoomSelected,
    RoomUpdated,
    SaveCompleted,
    SaveFailed,
    SaveStarted,
    ThemeChanged,
    ValidationFailed,
    ValidationPassed,
)
from .handlers import attach_error_logger, attach_event_logger

__all__ = [
    "EVENT_PAYLOADS",
    "CalculationCompleted",
    "CalculationUpdated",
    "Debounced",
    "ErrorOccurred",
    "EventBus",
    "EventType",
    "ExportCompleted",
    "ExportFailed",
    "ExportStarted",
    "Handler",
    "LoadCompleted",
    "LoadFailed",
    "LoadStarted",
    "MaterialAdded",
    "MaterialDeleted",
    "MaterialSelected",
    "MaterialUpdated",
    "RoomAdded",
    "RoomDeleted",
    "RoomSelected",
    "RoomUpdated",
    "SaveCompleted",
    "SaveFailed",
    "SaveStarted",
    "ThemeChanged",
    "Throttled",
    "Unsubscribe",
    "ValidationFailed",
    "ValidationPassed",
    "attach_error_logger",
    "attach_event_logger",
]
