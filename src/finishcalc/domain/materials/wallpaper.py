"""Wallpaper roll calculator."""

from __future__ import annotations

from typing import Mapping

from ..exceptions import CalculationError
from ..value_objects import MaterialResult
from .base import BaseMaterialCalculator
from .protocol import SurfaceMetrics


class WallpaperCalculator(BaseMaterialCalculator):
    """Rolls of wallpaper for the net wall area.

    Each roll loses one pattern repeat (rapport, in cm) when strips are
    matched, so the usable coverage of a roll is
    ``roll_width * (roll_length - rapport)``.

    rolls = ceil(area * (1 + margin/100) / roll_coverage)
    """

    category = "wallpaper"
    name = "Wallpaper"
    description = "Wallpaper rolls for the walls"
    default_params = {
        "roll_width": "1.06",
        "roll_length": "10.05",
        "rapport": "0",
        "margin": "5",
        "price": "0",
    }

    def _compute(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        area = metrics.net_wall_area
        roll_width = self.number(params, "roll_width")
        roll_length = self.number(params, "roll_length")
        if area <= 0 or roll_width <= 0 or roll_length <= 0:
            return None

        rapport = max(0.0, self.number(params, "rapport")) / 100
        margin = self.number(params, "margin")
        price = self.number(params, "price")

        usable_length = roll_length - rapport
        if usable_length <= 0:
            raise CalculationError("Pattern repeat is longer than the roll")

        roll_coverage = roll_width * usable_length
        area_needed = area * self.margin_factor(margin)
        rolls = self.round_up(area_needed / roll_coverage)
        cost = rolls * price

        quantity = f"{rolls} rolls ({area_needed:.2f} m²)"
        return self.make_result(
            quantity=quantity,
            cost=cost,
            details={
                "Rolls": f"{rolls} pcs",
                "Roll coverage": f"{roll_coverage:.2f} m²",
                "Area": f"{area_needed:.2f} m²",
                "Price per roll": self.money(price),
                "Cost": self.money(cost),
            },
            show_note=rolls > 0,
        )
