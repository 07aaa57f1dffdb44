"""Settings, settings loading and interchange schemas."""

from .adapters import (
    estimate_to_schema,
    material_to_schema,
    room_to_schema,
    schema_to_estimate,
    schema_to_material,
    schema_to_room,
)
from .loader import ConfigError, load_settings, load_settings_from_dict, validate_model
from .schemas import (
    RoomSchema,
    SavedEstimateSchema,
    SavedMaterialSchema,
    StoreSchema,
)
from .settings import CalculatorSettings, LimitsConfig

__all__ = [
    "CalculatorSettings",
    "ConfigError",
    "LimitsConfig",
    "RoomSchema",
    "SavedEstimateSchema",
    "SavedMaterialSchema",
    "StoreSchema",
    "estimate_to_schema",
    "load_settings",
    "load_settings_from_dict",
    "material_to_schema",
    "room_to_schema",
    "schema_to_estimate",
    "schema_to_material",
    "schema_to_room",
    "validate_model",
]
