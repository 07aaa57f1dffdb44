"""JSON exporter for estimate reports."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from finishcalc.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from finishcalc.contracts.dtos import EstimateReport, RoomEstimate
    from finishcalc.domain.value_objects import MaterialResult


logger = logging.getLogger(__name__)

# Bumped whenever the exported structure changes incompatibly
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class EstimateJsonExporter:
    """Exports the full report: rooms with metrics, totals and materials.

    Materials that could not be computed are exported with a null result so
    consumers can tell them apart from materials that were never selected.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, precision: int = 2, indent: int = 2) -> None:
        self.precision = precision
        self.indent = indent

    def export(self, report: EstimateReport, path: Path) -> None:
        """Export the report as JSON to ``path``."""
        path.write_text(self.export_string(report), encoding="utf-8")
        logger.info(f"Exported estimate JSON to {path}")

    def export_string(self, report: EstimateReport) -> str:
        """Render the report as a JSON document."""
        return json.dumps(
            self._build_output(report), indent=self.indent, ensure_ascii=False, default=str
        )

    def _round(self, values: dict[str, Any]) -> dict[str, Any]:
        return {
            key: round(value, self.precision) if isinstance(value, float) else value
            for key, value in values.items()
        }

    def _build_output(self, report: EstimateReport) -> dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "name": report.name,
            "created_at": report.created_at,
            "currency": report.currency,
            "rooms": [self._extract_room(entry) for entry in report.rooms],
            "totals": self._round(asdict(report.totals)),
            "materials": [
                self._extract_material(name, result)
                for name, result in report.results.items()
            ],
            "total_cost": round(report.total_cost, self.precision),
        }

    def _extract_room(self, entry: RoomEstimate) -> dict[str, Any]:
        room = entry.room
        return {
            "id": room.id,
            "name": room.name,
            "unit": room.unit.value,
            "length": room.length,
            "width": room.width,
            "height": room.height,
            "openings": len(room.openings),
            "exclusions": len(room.exclusions),
            "elements": len(room.elements),
            "notes": room.notes,
            "metrics": self._round(asdict(entry.metrics)),
        }

    def _extract_material(
        self, name: str, result: MaterialResult | None
    ) -> dict[str, Any]:
        if result is None:
            return {"name": name, "result": None}
        return {
            "name": name,
            "result": {
                "category": result.category,
                "quantity": result.quantity,
                "cost": round(result.cost, self.precision),
                "details": dict(result.details),
            },
        }
