"""JSON file store for saved estimates and the material library.

The whole store lives in one JSON file validated against ``StoreSchema``.
Every write goes to a temporary file that then replaces the original, so a
failed save leaves the previous contents untouched.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import replace
from pathlib import Path

from finishcalc.application.config.adapters import (
    estimate_to_schema,
    material_to_schema,
    schema_to_estimate,
    schema_to_material,
)
from finishcalc.application.config.loader import read_json_file, validate_model
from finishcalc.application.config.schemas import StoreSchema
from finishcalc.domain.entities import SavedEstimate, SavedMaterial
from finishcalc.domain.value_objects import Unit

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Estimate and material store backed by a single JSON file.

    A missing file reads as an empty store. Invalid content raises
    ``ConfigError`` from the settings loader so callers see the same
    field-level details as for a broken settings file.

    Example:
        store = JsonFileStore(Path("estimates.json"))
        saved = store.save_estimate(SavedEstimate(id=0, name="Flat", date=now))
        store.load_estimate(saved.id)
    """

    def __init__(self, path: Path, default_unit: Unit = Unit.M) -> None:
        self.path = Path(path)
        self.default_unit = default_unit

    def _read(self) -> StoreSchema:
        if not self.path.exists():
            return StoreSchema()
        data = read_json_file(self.path)
        return validate_model(StoreSchema, data, path=self.path, title="Store")

    def _write(self, store: StoreSchema) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(store.model_dump(mode="json"), indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    # --- Estimates ---

    def save_estimate(self, estimate: SavedEstimate) -> SavedEstimate:
        store = self._read()
        if estimate.id <= 0:
            next_id = max((e.id for e in store.estimates), default=0) + 1
            estimate = replace(estimate, id=next_id)

        schema = estimate_to_schema(estimate)
        estimates = [e for e in store.estimates if e.id != estimate.id]
        estimates.append(schema)
        estimates.sort(key=lambda e: e.id)
        self._write(store.model_copy(update={"estimates": estimates}))
        logger.debug(f"Saved estimate {estimate.id} '{estimate.name}' to {self.path}")
        return estimate

    def load_estimate(self, estimate_id: int) -> SavedEstimate:
        for schema in self._read().estimates:
            if schema.id == estimate_id:
                return schema_to_estimate(schema, self.default_unit)
        raise KeyError(f"Estimate {estimate_id} not found")

    def delete_estimate(self, estimate_id: int) -> None:
        store = self._read()
        remaining = [e for e in store.estimates if e.id != estimate_id]
        if len(remaining) == len(store.estimates):
            raise KeyError(f"Estimate {estimate_id} not found")
        self._write(store.model_copy(update={"estimates": remaining}))
        logger.debug(f"Deleted estimate {estimate_id} from {self.path}")

    def list_estimates(self) -> list[SavedEstimate]:
        return [schema_to_estimate(e, self.default_unit) for e in self._read().estimates]

    # --- Materials ---

    def save_material(self, material: SavedMaterial) -> SavedMaterial:
        store = self._read()
        if material.id <= 0:
            next_id = max((m.id for m in store.materials), default=0) + 1
            material = replace(material, id=next_id)

        schema = material_to_schema(material)
        materials = list(store.materials)
        for index, existing in enumerate(materials):
            if existing.id == material.id:
                materials[index] = schema
                break
        else:
            materials.append(schema)
        self._write(store.model_copy(update={"materials": materials}))
        logger.debug(f"Saved material {material.id} '{material.name}' to {self.path}")
        return material

    def load_material(self, material_id: int) -> SavedMaterial:
        for schema in self._read().materials:
            if schema.id == material_id:
                return schema_to_material(schema)
        raise KeyError(f"Material {material_id} not found")

    def delete_material(self, material_id: int) -> None:
        store = self._read()
        remaining = [m for m in store.materials if m.id != material_id]
        if len(remaining) == len(store.materials):
            raise KeyError(f"Material {material_id} not found")
        self._write(store.model_copy(update={"materials": remaining}))
        logger.debug(f"Deleted material {material_id} from {self.path}")

    def list_materials(self) -> list[SavedMaterial]:
        return [schema_to_material(m) for m in self._read().materials]
