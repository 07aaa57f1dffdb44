"""Bagged dry-mix calculators: plaster, putty and floor screed."""

from __future__ import annotations

from typing import ClassVar, Mapping

from ..value_objects import MaterialResult
from .base import SURFACES, BaseMaterialCalculator
from .protocol import SurfaceMetrics


class PlasterCalculator(BaseMaterialCalculator):
    """Bags of dry mix for a plastered surface.

    ``consumption`` is kg per m² for one unit of ``thickness`` (mm). Leaving
    thickness empty treats consumption as kg per m² for the whole layer.

    bags = ceil(area * consumption * thickness * (1 + margin/100) / bag_weight)
    """

    category = "plaster"
    name = "Plaster"
    description = "Bags of plaster for walls or ceilings"
    default_params = {
        "surface": "walls",
        "consumption": "8.5",
        "thickness": "1",
        "bag_weight": "25",
        "margin": "0",
        "price": "0",
    }
    choice_params = {"surface": SURFACES}
    # Surface used when the params name none
    default_surface: ClassVar[str] = "walls"

    def _compute(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        area = self.surface_area(metrics, params, self.default_surface)
        consumption = self.number(params, "consumption")
        bag_weight = self.number(params, "bag_weight")
        if area <= 0 or consumption <= 0 or bag_weight <= 0:
            return None

        thickness = self.positive(params, "thickness", 1.0)
        margin = self.number(params, "margin")
        price = self.number(params, "price")

        total_weight = area * consumption * thickness * self.margin_factor(margin)
        bags = self.round_up(total_weight / bag_weight)
        cost = bags * price

        quantity = f"{total_weight:.2f} kg (≈ {bags} bags)"
        return self.make_result(
            quantity=quantity,
            cost=cost,
            details={
                "Quantity": quantity,
                "Area": f"{area:.2f} m²",
                "Bags": f"{bags} pcs",
                "Price per bag": self.money(price),
                "Cost": self.money(cost),
            },
            show_note=bags > 0,
        )


class PuttyCalculator(PlasterCalculator):
    """Bags of finishing putty. Same formula as plaster, thinner layer."""

    category = "putty"
    name = "Putty"
    description = "Bags of finishing putty for walls or ceilings"
    default_params = {
        "surface": "walls",
        "consumption": "1.5",
        "thickness": "1",
        "bag_weight": "20",
        "margin": "15",
        "price": "0",
    }


class ScreedCalculator(PlasterCalculator):
    """Bags of floor screed mix for the floor area.

    ``consumption`` is kg per m² per mm of screed depth.
    """

    category = "screed"
    name = "Screed"
    description = "Bags of screed mix for the floor"
    default_params = {
        "surface": "floor",
        "consumption": "2",
        "thickness": "50",
        "bag_weight": "25",
        "margin": "10",
        "price": "0",
    }
    choice_params = {"surface": ("floor",)}
    default_surface = "floor"
