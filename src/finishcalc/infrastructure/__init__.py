"""Infrastructure layer - file storage and exporters."""

from finishcalc.infrastructure.exporters import (
    EstimateCsvExporter,
    EstimateJsonExporter,
    ExporterRegistry,
    ExportManager,
)
from finishcalc.infrastructure.storage import JsonFileStore

__all__ = [
    "EstimateCsvExporter",
    "EstimateJsonExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonFileStore",
]
