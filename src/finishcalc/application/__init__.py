"""Application layer - validation, events, settings and services."""

from .config import CalculatorSettings, ConfigError, LimitsConfig, load_settings
from .dtos import MaterialSelection
from .events import EventBus, EventType
from .services import EstimateService, ExportService, PersistenceService
from .validation import ValidationResult, validate_project

__all__ = [
    "CalculatorSettings",
    "ConfigError",
    "EstimateService",
    "EventBus",
    "EventType",
    "ExportService",
    "LimitsConfig",
    "MaterialSelection",
    "PersistenceService",
    "ValidationResult",
    "load_settings",
    "validate_project",
]
