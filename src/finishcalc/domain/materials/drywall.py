"""Drywall (plasterboard) calculator."""

from __future__ import annotations

from typing import Mapping

from ..value_objects import MaterialResult
from .base import BaseMaterialCalculator
from .protocol import SurfaceMetrics


class DrywallCalculator(BaseMaterialCalculator):
    """Metal profiles and plasterboard sheets for a wall or ceiling lining.

    ``profile_type`` picks the lined surface: ``wall`` uses the net wall area,
    ``ceiling`` the ceiling area. Profiles are spaced along the adjusted
    perimeter. Sheet sizes are in meters.

    profiles = ceil(adjusted_perimeter / profile_spacing * (1 + margin/100))
    sheets = ceil(area / (sheet_width * sheet_height) * (1 + margin/100))
    """

    category = "drywall"
    name = "Drywall"
    description = "Profiles and plasterboard sheets for walls or ceilings"
    default_params = {
        "profile_type": "wall",
        "profile_spacing": "0.6",
        "sheet_width": "1.2",
        "sheet_height": "2.5",
        "margin": "10",
        "profile_price": "0",
        "sheet_price": "0",
    }
    choice_params = {"profile_type": ("wall", "ceiling")}

    def _compute(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        if self.choice(params, "profile_type") == "ceiling":
            area = metrics.ceiling_area
        else:
            area = metrics.net_wall_area
        if area <= 0:
            return None

        spacing = self.positive(params, "profile_spacing", 0.6)
        sheet_width = self.positive(params, "sheet_width", 1.2)
        sheet_height = self.positive(params, "sheet_height", 2.5)
        factor = self.margin_factor(self.number(params, "margin"))
        profile_price = self.number(params, "profile_price")
        sheet_price = self.number(params, "sheet_price")

        profiles = self.round_up(metrics.adjusted_perimeter / spacing * factor)
        sheets = self.round_up(area / (sheet_width * sheet_height) * factor)
        profiles_cost = profiles * profile_price
        sheets_cost = sheets * sheet_price
        cost = profiles_cost + sheets_cost

        quantity = f"{profiles} profiles + {sheets} sheets"
        return self.make_result(
            quantity=quantity,
            cost=cost,
            details={
                "Profiles": f"{profiles} pcs",
                "Sheets": f"{sheets} pcs",
                "Profiles cost": self.money(profiles_cost),
                "Sheets cost": self.money(sheets_cost),
                "Cost": self.money(cost),
            },
            show_note=profiles > 0 or sheets > 0,
        )
