"""Domain entities for room finishing estimates.

Dimension fields hold the raw text the estimator typed (``"3,5"``, ``"350"``)
and are interpreted in the owning room's unit when metrics are computed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Mapping, Union

from .value_objects import ElementKind, OpeningType, SurfaceTarget, Unit


@dataclass(frozen=True)
class Opening:
    """A door or window cut out of the wall area.

    Attributes:
        id: Identifier unique within the room.
        type: Door or window.
        width: Opening width.
        height: Opening height.
        count: Number of identical openings.
        sill_height: Window sill height, used with ``include_sill_area``.
        include_sill_area: When True, the wall below the sill stays in the
            finished area and only the part above the sill is subtracted.
    """

    id: int
    type: OpeningType
    width: str
    height: str
    count: str = "1"
    sill_height: str = ""
    include_sill_area: bool = False


@dataclass(frozen=True)
class ExclusionZone:
    """A user-declared patch of a surface excluded from coverage.

    Attributes:
        affects_perimeter: When True the zone runs along the floor line
            (a built-in wardrobe, a bath) and its outline is taken off the
            skirting run.
    """

    id: int
    width: str
    height: str
    surface: SurfaceTarget = SurfaceTarget.WALL
    count: str = "1"
    name: str = ""
    affects_perimeter: bool = False


@dataclass(frozen=True)
class Niche:
    """Recess in a wall. Its back and side faces are finished too."""

    kind: ClassVar[ElementKind] = ElementKind.NICHE

    id: int
    width: str
    depth: str
    height: str
    count: str = "1"


@dataclass(frozen=True)
class Protrusion:
    """Bump-out from a wall (boxed riser, chimney breast)."""

    kind: ClassVar[ElementKind] = ElementKind.PROTRUSION

    id: int
    width: str
    depth: str
    height: str
    count: str = "1"


@dataclass(frozen=True)
class Column:
    """Free-standing round column."""

    kind: ClassVar[ElementKind] = ElementKind.COLUMN

    id: int
    diameter: str
    height: str
    count: str = "1"


GeometricElement = Union[Niche, Protrusion, Column]

ELEMENT_TYPES: dict[ElementKind, type] = {
    ElementKind.NICHE: Niche,
    ElementKind.PROTRUSION: Protrusion,
    ElementKind.COLUMN: Column,
}


@dataclass(frozen=True)
class RoomImage:
    """Reference image metadata attached to a room."""

    id: str
    url: str
    name: str = ""
    size: int = 0
    uploaded_at: str = ""


@dataclass(frozen=True)
class RoomData:
    """A room as entered by the estimator.

    Rooms are owned by the calling application and passed by value; the
    engine never keeps a room beyond one recomputation.
    """

    id: int
    name: str
    length: str
    width: str
    height: str
    openings: tuple[Opening, ...] = ()
    exclusions: tuple[ExclusionZone, ...] = ()
    elements: tuple[GeometricElement, ...] = ()
    unit: Unit = Unit.M
    notes: str = ""
    image: RoomImage | None = None


@dataclass(frozen=True)
class SavedMaterial:
    """A named parameter preset for one material category."""

    id: int
    category: str
    name: str
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


@dataclass(frozen=True)
class SavedEstimate:
    """A named snapshot of a project's rooms."""

    id: int
    name: str
    date: str
    rooms: tuple[RoomData, ...] = ()
