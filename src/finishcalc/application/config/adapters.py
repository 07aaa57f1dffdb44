"""Conversion between interchange schemas and domain entities.

These functions transform the Pydantic interchange models into the frozen
domain dataclasses used by the engine, and back again for storage and export.
"""

from __future__ import annotations

from typing import Any

from finishcalc.domain.entities import (
    Column,
    ExclusionZone,
    GeometricElement,
    Niche,
    Opening,
    Protrusion,
    RoomData,
    RoomImage,
    SavedEstimate,
    SavedMaterial,
)
from finishcalc.domain.value_objects import Unit

from .schemas import (
    ColumnSchema,
    ExclusionSchema,
    NicheSchema,
    OpeningSchema,
    ProtrusionSchema,
    RoomImageSchema,
    RoomSchema,
    SavedEstimateSchema,
    SavedMaterialSchema,
)


def schema_to_room(schema: RoomSchema, default_unit: Unit = Unit.M) -> RoomData:
    """Convert a RoomSchema to a RoomData entity.

    Args:
        schema: Validated room schema.
        default_unit: Unit applied when the room does not specify one.
    """
    return RoomData(
        id=schema.id,
        name=schema.name,
        length=schema.length,
        width=schema.width,
        height=schema.height,
        openings=tuple(
            Opening(
                id=op.id,
                type=op.type,
                width=op.width,
                height=op.height,
                count=op.count,
                sill_height=op.sill_height,
                include_sill_area=op.include_sill_area,
            )
            for op in schema.openings
        ),
        exclusions=tuple(
            ExclusionZone(
                id=ex.id,
                name=ex.name,
                width=ex.width,
                height=ex.height,
                surface=ex.surface,
                count=ex.count,
                affects_perimeter=ex.affects_perimeter,
            )
            for ex in schema.exclusions
        ),
        elements=tuple(_schema_to_element(el) for el in schema.elements),
        unit=schema.unit or default_unit,
        notes=schema.notes,
        image=RoomImage(**schema.image.model_dump()) if schema.image else None,
    )


def _schema_to_element(
    schema: NicheSchema | ProtrusionSchema | ColumnSchema,
) -> GeometricElement:
    if isinstance(schema, ColumnSchema):
        return Column(
            id=schema.id, diameter=schema.diameter, height=schema.height, count=schema.count
        )
    element_cls = Niche if isinstance(schema, NicheSchema) else Protrusion
    return element_cls(
        id=schema.id,
        width=schema.width,
        depth=schema.depth,
        height=schema.height,
        count=schema.count,
    )


def room_to_schema(room: RoomData) -> RoomSchema:
    """Convert a RoomData entity to its interchange schema."""
    elements: list[Any] = []
    for el in room.elements:
        if isinstance(el, Column):
            elements.append(
                ColumnSchema(
                    type="column",
                    id=el.id,
                    diameter=el.diameter,
                    height=el.height,
                    count=el.count,
                )
            )
        else:
            schema_cls = NicheSchema if isinstance(el, Niche) else ProtrusionSchema
            elements.append(
                schema_cls(
                    type=el.kind.value,
                    id=el.id,
                    width=el.width,
                    depth=el.depth,
                    height=el.height,
                    count=el.count,
                )
            )

    return RoomSchema(
        id=room.id,
        name=room.name,
        length=room.length,
        width=room.width,
        height=room.height,
        openings=[
            OpeningSchema(
                id=op.id,
                type=op.type,
                width=op.width,
                height=op.height,
                count=op.count,
                sill_height=op.sill_height,
                include_sill_area=op.include_sill_area,
            )
            for op in room.openings
        ],
        exclusions=[
            ExclusionSchema(
                id=ex.id,
                name=ex.name,
                width=ex.width,
                height=ex.height,
                surface=ex.surface,
                count=ex.count,
                affects_perimeter=ex.affects_perimeter,
            )
            for ex in room.exclusions
        ],
        elements=elements,
        unit=room.unit,
        notes=room.notes,
        image=RoomImageSchema(**vars(room.image)) if room.image else None,
    )


def schema_to_material(schema: SavedMaterialSchema) -> SavedMaterial:
    """Convert a SavedMaterialSchema to a SavedMaterial entity."""
    return SavedMaterial(
        id=schema.id, category=schema.category, name=schema.name, params=schema.params
    )


def material_to_schema(material: SavedMaterial) -> SavedMaterialSchema:
    """Convert a SavedMaterial entity to its interchange schema."""
    return SavedMaterialSchema(
        id=material.id,
        category=material.category,
        name=material.name,
        params=dict(material.params),
    )


def schema_to_estimate(
    schema: SavedEstimateSchema, default_unit: Unit = Unit.M
) -> SavedEstimate:
    """Convert a SavedEstimateSchema to a SavedEstimate entity."""
    return SavedEstimate(
        id=schema.id,
        name=schema.name,
        date=schema.date,
        rooms=tuple(schema_to_room(r, default_unit) for r in schema.rooms),
    )


def estimate_to_schema(estimate: SavedEstimate) -> SavedEstimateSchema:
    """Convert a SavedEstimate entity to its interchange schema."""
    return SavedEstimateSchema(
        id=estimate.id,
        name=estimate.name,
        date=estimate.date,
        rooms=[room_to_schema(r) for r in estimate.rooms],
    )
