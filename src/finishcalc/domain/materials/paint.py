"""Paint / primer calculator."""

from __future__ import annotations

from typing import Mapping

from ..value_objects import MaterialResult
from .base import SURFACES, BaseMaterialCalculator
from .protocol import SurfaceMetrics


class PaintCalculator(BaseMaterialCalculator):
    """Liters of paint, rounded up to the next 0.1 L.

    liters = ceil(area * coats * (1 + margin/100) / coverage * 10) / 10
    cost = liters * price (price per liter)
    """

    category = "paint"
    name = "Paint"
    description = "Paint or primer for walls and ceilings"
    default_params = {
        "surface": "walls",
        "coats": "2",
        "coverage": "10",
        "margin": "0",
        "can_volume": "",
        "price": "0",
    }
    choice_params = {"surface": SURFACES}

    def _compute(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        area = self.surface_area(metrics, params)
        coats = self.number(params, "coats")
        coverage = self.number(params, "coverage")
        if area <= 0 or coats <= 0 or coverage <= 0:
            return None

        margin = self.number(params, "margin")
        price = self.number(params, "price")
        can_volume = self.number(params, "can_volume")

        raw_liters = area * coats * self.margin_factor(margin) / coverage
        liters = self.round_up(raw_liters * 10) / 10
        cost = liters * price

        details = {
            "Area": f"{area:.2f} m²",
            "Coats": f"{coats:g}",
            "Liters": f"{liters:.1f} L",
        }
        quantity = f"{liters:.1f} L"
        if can_volume > 0:
            cans = self.round_up(liters / can_volume)
            details["Cans"] = f"{cans} x {can_volume:g} L"
            quantity = f"{liters:.1f} L (≈ {cans} cans)"
        details["Price per liter"] = self.money(price)
        details["Cost"] = self.money(cost)

        return self.make_result(
            quantity=quantity, cost=cost, details=details, show_note=liters > 0
        )
