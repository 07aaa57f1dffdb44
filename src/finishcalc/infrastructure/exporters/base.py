"""Exporter registry and multi-format export manager."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ClassVar

from finishcalc.contracts.exporters import ExporterProtocol

if TYPE_CHECKING:
    from finishcalc.contracts.dtos import EstimateReport


logger = logging.getLogger(__name__)


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("json")
        class EstimateJsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[ExporterProtocol]]] = {}

    @classmethod
    def register(
        cls, format_name: str
    ) -> Callable[[type[ExporterProtocol]], type[ExporterProtocol]]:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[ExporterProtocol]) -> type[ExporterProtocol]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[ExporterProtocol]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        """Check if a format is registered."""
        return format_name in cls._exporters

    @classmethod
    def unregister(cls, format_name: str) -> None:
        """Remove a format. Unknown formats are ignored.

        This is primarily useful for testing.
        """
        cls._exporters.pop(format_name, None)


def _safe_filename(name: str) -> str:
    slug = re.sub(r"[^\w\-]+", "_", name.strip(), flags=re.UNICODE).strip("_")
    return slug or "estimate"


class ExportManager:
    """Writes a report to one file per requested format.

    Attributes:
        output_dir: Directory where exported files are saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self, formats: list[str], report: EstimateReport
    ) -> dict[str, Path]:
        """Export a report to several formats.

        Files are named ``{report name}_{format}.{extension}``.

        Returns:
            Format name -> written file path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        stem = _safe_filename(report.name)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{stem}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(report, filepath)
            results[format_name] = filepath
        return results
