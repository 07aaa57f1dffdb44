"""Laminate / plank flooring calculator."""

from __future__ import annotations

from typing import Mapping

from ..value_objects import MaterialResult
from .base import BaseMaterialCalculator
from .protocol import SurfaceMetrics

# Cutting waste by laying direction relative to the light, in percent
DIRECTION_MARGINS: dict[str, float] = {"along": 5.0, "across": 10.0}


class FlooringCalculator(BaseMaterialCalculator):
    """Packs of flooring for the floor area.

    packs = ceil(floor_area * (1 + margin/100) / pack_area)

    A laying ``direction`` forces the margin (5% along, 10% across).
    Without one the ``margin`` parameter applies.
    """

    category = "flooring"
    name = "Flooring"
    description = "Laminate or plank flooring packs"
    default_params = {
        "pack_area": "2.13",
        "margin": "5",
        "price": "0",
    }
    choice_params = {"direction": tuple(DIRECTION_MARGINS)}

    def _compute(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        area = metrics.floor_area
        pack_area = self.number(params, "pack_area")
        if area <= 0 or pack_area <= 0:
            return None

        direction = self.choice(params, "direction")
        if direction is not None:
            margin = DIRECTION_MARGINS[direction]
        else:
            margin = self.number(params, "margin")
        price = self.number(params, "price")

        area_needed = area * self.margin_factor(margin)
        packs = self.round_up(area_needed / pack_area)
        cost = packs * price

        quantity = f"{packs} packs ({area_needed:.2f} m²)"
        return self.make_result(
            quantity=quantity,
            cost=cost,
            details={
                "Packs": f"{packs} pcs",
                "Area": f"{area_needed:.2f} m²",
                "Price per pack": self.money(price),
                "Cost": self.money(cost),
            },
            show_note=packs > 0,
        )
