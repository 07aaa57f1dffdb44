"""Persistence service wrapping an external estimate/material store.

Store failures are published (``save:failed``, ``load:failed`` and
``error:occurred``) and re-raised as the typed SaveError, LoadError or
DeleteError. A failed operation never changes what the caller holds.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from finishcalc.application.config.loader import ConfigError
from finishcalc.application.events.bus import EventBus
from finishcalc.application.events.events import (
    ErrorOccurred,
    EventType,
    LoadCompleted,
    LoadFailed,
    LoadStarted,
    MaterialAdded,
    MaterialDeleted,
    MaterialSelected,
    MaterialUpdated,
    SaveCompleted,
    SaveFailed,
    SaveStarted,
)
from finishcalc.contracts.storage import EstimateStore, MaterialStore
from finishcalc.domain.entities import RoomData, SavedEstimate, SavedMaterial
from finishcalc.domain.exceptions import DeleteError, LoadError, SaveError

logger = logging.getLogger(__name__)

# Errors a store may raise for I/O, missing ids or corrupt content
STORE_ERRORS: tuple[type[Exception], ...] = (OSError, KeyError, ValueError, ConfigError)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class PersistenceService:
    """Saves and loads estimates and the material library through a store.

    Args:
        store: Object implementing both EstimateStore and MaterialStore.
        bus: Event bus receiving save/load/material events.
        clock: Returns the ISO-8601 timestamp stamped on saved estimates.
    """

    def __init__(
        self,
        store: EstimateStore | MaterialStore,
        bus: EventBus,
        clock: Callable[[], str] = _utc_now,
    ) -> None:
        self.store = store
        self.bus = bus
        self.clock = clock

    def _fail(self, error: SaveError | LoadError | DeleteError) -> None:
        self.bus.emit(EventType.ERROR_OCCURRED, ErrorOccurred(error=error))

    # --- Estimates ---

    def save_estimate(
        self, name: str, rooms: Sequence[RoomData], estimate_id: int = 0
    ) -> SavedEstimate:
        """Save rooms as a named estimate.

        Args:
            name: Estimate name.
            rooms: Rooms to save, in project order.
            estimate_id: Existing identifier to overwrite; 0 saves a new one.

        Raises:
            SaveError: If the store fails.
        """
        self.bus.emit(EventType.SAVE_STARTED, SaveStarted(name=name))
        estimate = SavedEstimate(
            id=estimate_id, name=name, date=self.clock(), rooms=tuple(rooms)
        )
        try:
            saved = self.store.save_estimate(estimate)
        except STORE_ERRORS as e:
            error = SaveError(f"Failed to save estimate '{name}': {e}")
            logger.error(str(error))
            self.bus.emit(EventType.SAVE_FAILED, SaveFailed(name=name, error=error))
            self._fail(error)
            raise error from e
        self.bus.emit(EventType.SAVE_COMPLETED, SaveCompleted(name=name, data=saved))
        logger.info(f"Saved estimate {saved.id} '{name}'")
        return saved

    def load_estimate(self, estimate_id: int) -> SavedEstimate:
        """Load an estimate by identifier.

        Raises:
            LoadError: If the estimate is missing or the store fails.
        """
        label = f"estimate {estimate_id}"
        self.bus.emit(EventType.LOAD_STARTED, LoadStarted(name=label))
        try:
            estimate = self.store.load_estimate(estimate_id)
        except STORE_ERRORS as e:
            error = LoadError(f"Failed to load {label}: {e}")
            logger.error(str(error))
            self.bus.emit(EventType.LOAD_FAILED, LoadFailed(name=label, error=error))
            self._fail(error)
            raise error from e
        self.bus.emit(
            EventType.LOAD_COMPLETED, LoadCompleted(name=estimate.name, data=estimate)
        )
        return estimate

    def delete_estimate(self, estimate_id: int) -> None:
        """Delete an estimate.

        Raises:
            DeleteError: If the estimate is missing or the store fails.
        """
        try:
            self.store.delete_estimate(estimate_id)
        except STORE_ERRORS as e:
            error = DeleteError(f"Failed to delete estimate {estimate_id}: {e}")
            logger.error(str(error))
            self._fail(error)
            raise error from e
        logger.info(f"Deleted estimate {estimate_id}")

    def list_estimates(self) -> list[SavedEstimate]:
        """All saved estimates.

        Raises:
            LoadError: If the store fails.
        """
        try:
            return self.store.list_estimates()
        except STORE_ERRORS as e:
            error = LoadError(f"Failed to list estimates: {e}")
            self._fail(error)
            raise error from e

    # --- Material library ---

    def save_material(self, material: SavedMaterial) -> SavedMaterial:
        """Add a material (``id`` <= 0) or update an existing one.

        Publishes ``material:added`` or ``material:updated``.

        Raises:
            SaveError: If the store fails.
        """
        previous: SavedMaterial | None = None
        try:
            if material.id > 0:
                previous = next(
                    (m for m in self.store.list_materials() if m.id == material.id), None
                )
            saved = self.store.save_material(material)
        except STORE_ERRORS as e:
            error = SaveError(f"Failed to save material '{material.name}': {e}")
            logger.error(str(error))
            self._fail(error)
            raise error from e

        if previous is None:
            self.bus.emit(EventType.MATERIAL_ADDED, MaterialAdded(material=saved))
        else:
            self.bus.emit(
                EventType.MATERIAL_UPDATED,
                MaterialUpdated(material=saved, previous_material=previous),
            )
        return saved

    def delete_material(self, material_id: int) -> None:
        """Delete a material and publish ``material:deleted``.

        Raises:
            DeleteError: If the material is missing or the store fails.
        """
        try:
            self.store.delete_material(material_id)
        except STORE_ERRORS as e:
            error = DeleteError(f"Failed to delete material {material_id}: {e}")
            logger.error(str(error))
            self._fail(error)
            raise error from e
        self.bus.emit(EventType.MATERIAL_DELETED, MaterialDeleted(material_id=material_id))

    def list_materials(self) -> list[SavedMaterial]:
        """All saved materials.

        Raises:
            LoadError: If the store fails.
        """
        try:
            return self.store.list_materials()
        except STORE_ERRORS as e:
            error = LoadError(f"Failed to list materials: {e}")
            self._fail(error)
            raise error from e

    def select_material(self, material: SavedMaterial) -> None:
        """Publish ``material:selected``."""
        self.bus.emit(EventType.MATERIAL_SELECTED, MaterialSelected(material=material))
