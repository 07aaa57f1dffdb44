"""Exporter framework for estimate reports.

Registered exporters:
- json: Full report with rooms, metrics, totals and material results
- csv: Room table and material table for spreadsheets

Usage:
    from finishcalc.infrastructure.exporters import ExporterRegistry, ExportManager

    formats = ExporterRegistry.available_formats()
    exporter = ExporterRegistry.get("csv")()
    text = exporter.export_string(report)

    manager = ExportManager(output_dir=Path("./output"))
    paths = manager.export_all(["json", "csv"], report)
"""

from finishcalc.infrastructure.exporters.base import ExporterRegistry, ExportManager

# Import exporters to trigger registration
from finishcalc.infrastructure.exporters.csv_exporter import EstimateCsvExporter
from finishcalc.infrastructure.exporters.json_exporter import EstimateJsonExporter

__all__ = [
    "EstimateCsvExporter",
    "EstimateJsonExporter",
    "ExportManager",
    "ExporterRegistry",
]
