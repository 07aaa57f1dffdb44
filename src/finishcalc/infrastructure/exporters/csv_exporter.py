"""CSV exporter for estimate reports.

Produces two tables separated by a blank line: one row per room with its
metrics, then one row per computed material followed by the total.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from finishcalc.domain.value_objects import OpeningType
from finishcalc.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from finishcalc.contracts.dtos import EstimateReport


logger = logging.getLogger(__name__)


@ExporterRegistry.register("csv")
class EstimateCsvExporter:
    """Spreadsheet-friendly export of rooms and materials."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def __init__(self, precision: int = 2) -> None:
        self.precision = precision

    def export(self, report: EstimateReport, path: Path) -> None:
        """Export the report as CSV to ``path``."""
        path.write_text(self.export_string(report), encoding="utf-8", newline="")
        logger.info(f"Exported estimate CSV to {path}")

    def _fmt(self, value: float) -> str:
        return f"{value:.{self.precision}f}"

    def export_string(self, report: EstimateReport) -> str:
        """Render the report as CSV text."""
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(
            [
                "#",
                "Room",
                "Floor area (m²)",
                "Ceiling area (m²)",
                "Perimeter (m)",
                "Wall area (m²)",
                "Net wall area (m²)",
                "Height (m)",
                "Windows",
                "Doors",
            ]
        )
        for index, entry in enumerate(report.rooms, start=1):
            m = entry.metrics
            openings = entry.room.openings
            writer.writerow(
                [
                    index,
                    entry.room.name,
                    self._fmt(m.floor_area),
                    self._fmt(m.ceiling_area),
                    self._fmt(m.perimeter),
                    self._fmt(m.gross_wall_area),
                    self._fmt(m.net_wall_area),
                    self._fmt(m.height),
                    sum(1 for o in openings if o.type == OpeningType.WINDOW),
                    sum(1 for o in openings if o.type == OpeningType.DOOR),
                ]
            )

        writer.writerow([])
        writer.writerow(["Material", "Quantity", f"Cost ({report.currency})"])
        for name, result in report.computed_results.items():
            writer.writerow([name, result.quantity, self._fmt(result.cost)])
        writer.writerow(["Total", "", self._fmt(report.total_cost)])

        return output.getvalue()
