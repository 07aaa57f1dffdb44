"""Exporter protocol for estimate reports.

Exporters convert an EstimateReport to a text format. The concrete
exporters register themselves with
``finishcalc.infrastructure.exporters.ExporterRegistry``.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from finishcalc.contracts.dtos import EstimateReport


@runtime_checkable
class ExporterProtocol(Protocol):
    """Protocol for all estimate exporters.

    Attributes:
        format_name: Name the format is registered under (e.g. "json", "csv").
        file_extension: File extension without leading dot.

    Example:
        ```python
        class MarkdownExporter:
            format_name: ClassVar[str] = "md"
            file_extension: ClassVar[str] = "md"

            def export_string(self, report: EstimateReport) -> str:
                ...

            def export(self, report: EstimateReport, path: Path) -> None:
                path.write_text(self.export_string(report), encoding="utf-8")
        ```
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, report: EstimateReport) -> str:
        """Render the report as a string."""
        ...

    @abstractmethod
    def export(self, report: EstimateReport, path: Path) -> None:
        """Render the report and write it to ``path``."""
        ...
