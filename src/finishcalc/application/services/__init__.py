"""Application services for material estimation.

- EstimateService: Metrics, material dispatch, validation and room edits
- PersistenceService: Saving/loading estimates and the material library
- ExportService: Rendering estimate reports to JSON/CSV
"""

from .estimate_service import EstimateService
from .export_service import ExportService
from .persistence_service import PersistenceService

__all__ = [
    "EstimateService",
    "ExportService",
    "PersistenceService",
]
