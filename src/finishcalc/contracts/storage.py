"""Storage protocols for saved estimates and materials.

The engine never touches storage directly; persistence services depend on
these protocols and the host supplies an implementation (the bundled one is
``finishcalc.infrastructure.storage.JsonFileStore``).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from finishcalc.domain.entities import SavedEstimate, SavedMaterial


@runtime_checkable
class EstimateStore(Protocol):
    """Protocol for saving and loading estimates.

    Implementations assign a new identifier when an estimate with ``id`` <= 0
    is saved and raise ``KeyError`` for unknown identifiers.
    """

    def save_estimate(self, estimate: SavedEstimate) -> SavedEstimate:
        """Insert or replace an estimate, returning it with its identifier."""
        ...

    def load_estimate(self, estimate_id: int) -> SavedEstimate:
        """Load an estimate by identifier."""
        ...

    def delete_estimate(self, estimate_id: int) -> None:
        """Delete an estimate by identifier."""
        ...

    def list_estimates(self) -> list[SavedEstimate]:
        """All saved estimates, oldest first."""
        ...


@runtime_checkable
class MaterialStore(Protocol):
    """Protocol for the saved-material library."""

    def save_material(self, material: SavedMaterial) -> SavedMaterial:
        """Insert or replace a material, returning it with its identifier."""
        ...

    def load_material(self, material_id: int) -> SavedMaterial:
        """Load a material by identifier."""
        ...

    def delete_material(self, material_id: int) -> None:
        """Delete a material by identifier."""
        ...

    def list_materials(self) -> list[SavedMaterial]:
        """All saved materials in insertion order."""
        ...
