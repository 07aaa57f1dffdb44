"""Domain layer - geometry, metrics and material calculations."""

from .entities import (
    Column,
    ExclusionZone,
    GeometricElement,
    Niche,
    Opening,
    Protrusion,
    RoomData,
    RoomImage,
    SavedEstimate,
    SavedMaterial,
)
from .exceptions import (
    CalculationError,
    CalculatorError,
    DeleteError,
    ErrorKind,
    ExportError,
    LoadError,
    SaveError,
    UnknownCategoryError,
)
from .materials import (
    MaterialCalculator,
    MaterialCalculatorRegistry,
    create_default_registry,
)
from .services import RoomMetricsCalculator, compute_metrics, compute_total_metrics
from .value_objects import (
    ElementKind,
    MaterialResult,
    OpeningType,
    RoomMetrics,
    SurfaceTarget,
    Theme,
    TotalCalculations,
    Unit,
)

__all__ = [
    "CalculationError",
    "CalculatorError",
    "Column",
    "DeleteError",
    "ElementKind",
    "ErrorKind",
    "ExclusionZone",
    "ExportError",
    "GeometricElement",
    "LoadError",
    "MaterialCalculator",
    "MaterialCalculatorRegistry",
    "MaterialResult",
    "Niche",
    "Opening",
    "OpeningType",
    "Protrusion",
    "RoomData",
    "RoomImage",
    "RoomMetrics",
    "RoomMetricsCalculator",
    "SaveError",
    "SavedEstimate",
    "SavedMaterial",
    "SurfaceTarget",
    "Theme",
    "TotalCalculations",
    "UnknownCategoryError",
    "Unit",
    "compute_metrics",
    "compute_total_metrics",
    "create_default_registry",
]
