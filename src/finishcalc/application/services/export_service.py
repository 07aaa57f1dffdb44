"""Export service: renders estimate reports through registered exporters."""

from __future__ import annotations

import logging
from pathlib import Path

from finishcalc.application.events.bus import EventBus
from finishcalc.application.events.events import (
    ErrorOccurred,
    EventType,
    ExportCompleted,
    ExportFailed,
    ExportStarted,
)
from finishcalc.contracts.dtos import EstimateReport
from finishcalc.domain.exceptions import ExportError
from finishcalc.infrastructure.exporters import ExporterRegistry

logger = logging.getLogger(__name__)


class ExportService:
    """Exports reports to any format in the ExporterRegistry.

    Args:
        bus: Event bus receiving export events.
        precision: Decimal places for numbers in exported files.
    """

    def __init__(self, bus: EventBus, precision: int = 2) -> None:
        self.bus = bus
        self.precision = precision

    @staticmethod
    def available_formats() -> list[str]:
        """Registered export format names."""
        return ExporterRegistry.available_formats()

    def export(self, format_name: str, report: EstimateReport) -> str:
        """Render a report in the given format.

        Raises:
            ExportError: If the format is unknown or the exporter fails.
        """
        return self._run(format_name, report, path=None)

    def export_to_file(self, format_name: str, report: EstimateReport, path: Path) -> Path:
        """Render a report and write it to ``path``.

        Raises:
            ExportError: If the format is unknown, the exporter fails or the
                file cannot be written.
        """
        self._run(format_name, report, path=Path(path))
        return Path(path)

    def _run(self, format_name: str, report: EstimateReport, path: Path | None) -> str:
        self.bus.emit(EventType.EXPORT_STARTED, ExportStarted(format=format_name))
        try:
            exporter = ExporterRegistry.get(format_name)(precision=self.precision)
            content = exporter.export_string(report)
            if path is not None:
                exporter.export(report, path)
        except (KeyError, ValueError, TypeError, OSError) as e:
            error = ExportError(
                f"Export to '{format_name}' failed: {e}", format_name=format_name
            )
            logger.error(str(error))
            self.bus.emit(
                EventType.EXPORT_FAILED, ExportFailed(format=format_name, error=error)
            )
            self.bus.emit(EventType.ERROR_OCCURRED, ErrorOccurred(error=error))
            raise error from e

        data = str(path) if path is not None else content
        self.bus.emit(EventType.EXPORT_COMPLETED, ExportCompleted(format=format_name, data=data))
        logger.info(f"Exported estimate '{report.name}' as {format_name}")
        return content
