"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from finishcalc.domain.entities import SavedMaterial


@dataclass(frozen=True)
class MaterialSelection:
    """A material the estimator wants calculated.

    Attributes:
        category: Registered calculator category (e.g. "tile").
        params: User-entered parameters; merged over configured defaults.
        name: Key of the result in the results mapping. Defaults to the
            category, so give distinct names when one category is selected
            twice (e.g. floor tile and wall tile).
    """

    category: str
    params: Mapping[str, str] = field(default_factory=dict)
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        if not self.name:
            object.__setattr__(self, "name", self.category)

    @classmethod
    def from_saved(cls, material: SavedMaterial) -> MaterialSelection:
        """Select a saved material from the library under its own name."""
        return cls(category=material.category, params=material.params, name=material.name)
