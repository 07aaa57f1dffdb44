"""Interchange schemas for rooms, materials and saved estimates.

These Pydantic models describe the JSON shape exchanged with storage and
export collaborators. Dimension fields stay text (what the user typed);
numbers are accepted and stored as their string form.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
)

from finishcalc.domain.value_objects import OpeningType, SurfaceTarget, Unit


def _to_text(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


NumericText = Annotated[str, BeforeValidator(_to_text)]


class OpeningSchema(BaseModel):
    """A door or window opening."""

    model_config = ConfigDict(extra="forbid")

    id: int
    type: OpeningType
    width: NumericText
    height: NumericText
    count: NumericText = "1"
    sill_height: NumericText = ""
    include_sill_area: bool = False


class ExclusionSchema(BaseModel):
    """An excluded patch of wall, floor or ceiling."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str = ""
    width: NumericText
    height: NumericText
    surface: SurfaceTarget = SurfaceTarget.WALL
    count: NumericText = "1"
    affects_perimeter: bool = False


class NicheSchema(BaseModel):
    """A wall niche."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["niche"]
    id: int
    width: NumericText
    depth: NumericText
    height: NumericText
    count: NumericText = "1"


class ProtrusionSchema(BaseModel):
    """A wall protrusion."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["protrusion"]
    id: int
    width: NumericText
    depth: NumericText
    height: NumericText
    count: NumericText = "1"


class ColumnSchema(BaseModel):
    """A round column."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["column"]
    id: int
    diameter: NumericText
    height: NumericText
    count: NumericText = "1"


ElementSchema = Annotated[
    Union[NicheSchema, ProtrusionSchema, ColumnSchema],
    Field(discriminator="type"),
]


class RoomImageSchema(BaseModel):
    """Reference image metadata."""

    model_config = ConfigDict(extra="forbid")

    id: str
    url: str
    name: str = ""
    size: int = Field(default=0, ge=0)
    uploaded_at: str = ""


class RoomSchema(BaseModel):
    """A room with its openings, exclusions and geometric elements."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    length: NumericText
    width: NumericText
    height: NumericText
    openings: list[OpeningSchema] = Field(default_factory=list)
    exclusions: list[ExclusionSchema] = Field(default_factory=list)
    elements: list[ElementSchema] = Field(default_factory=list)
    unit: Unit | None = None
    notes: str = ""
    image: RoomImageSchema | None = None


class SavedMaterialSchema(BaseModel):
    """A saved material preset."""

    model_config = ConfigDict(extra="forbid")

    id: int
    category: str = Field(min_length=1)
    name: str
    params: dict[str, NumericText] = Field(default_factory=dict)


class SavedEstimateSchema(BaseModel):
    """A saved estimate: ``{id, name, date, rooms}``."""

    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    date: str
    rooms: list[RoomSchema] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Require an ISO-8601 timestamp."""
        try:
            datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"date must be an ISO-8601 timestamp, got {v!r}") from e
        return v


class StoreSchema(BaseModel):
    """On-disk layout of the JSON file store."""

    model_config = ConfigDict(extra="forbid")

    estimates: list[SavedEstimateSchema] = Field(default_factory=list)
    materials: list[SavedMaterialSchema] = Field(default_factory=list)
