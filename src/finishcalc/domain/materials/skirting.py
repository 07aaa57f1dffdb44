"""Skirting board calculator."""

from __future__ import annotations

from typing import Mapping

from ..value_objects import MaterialResult
from .base import BaseMaterialCalculator
from .protocol import SurfaceMetrics


class SkirtingCalculator(BaseMaterialCalculator):
    """Skirting pieces along the floor line, minus door openings.

    The run follows the adjusted perimeter, so columns and wall elements add
    to it and floor-line exclusions take their outline off.

    pieces = ceil((adjusted_perimeter - door_width) * (1 + margin/100) / piece_length)
    """

    category = "skirting"
    name = "Skirting"
    description = "Skirting boards along the room perimeter"
    default_params = {"piece_length": "2.5", "margin": "5", "price": "0"}

    def _compute(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        run_length = max(0.0, metrics.adjusted_perimeter - metrics.total_door_width)
        piece_length = self.number(params, "piece_length")
        if run_length <= 0 or piece_length <= 0:
            return None

        margin = self.number(params, "margin")
        price = self.number(params, "price")

        length_needed = run_length * self.margin_factor(margin)
        pieces = self.round_up(length_needed / piece_length)
        cost = pieces * price

        quantity = f"{pieces} pcs ({length_needed:.2f} m)"
        return self.make_result(
            quantity=quantity,
            cost=cost,
            details={
                "Pieces": f"{pieces} pcs",
                "Length": f"{length_needed:.2f} m",
                "Price per piece": self.money(price),
                "Cost": self.money(cost),
            },
            show_note=pieces > 0,
        )
