"""Ceramic tile calculator."""

from __future__ import annotations

from typing import Mapping

from ..value_objects import MaterialResult
from .base import BaseMaterialCalculator
from .protocol import SurfaceMetrics

# Cutting waste by layout pattern, in percent
PATTERN_MARGINS: dict[str, float] = {"straight": 10.0, "diagonal": 15.0}


class TileCalculator(BaseMaterialCalculator):
    """Tiles and packs for walls or floor.

    Tile sizes are in cm, grout width in mm. Choosing a layout ``pattern``
    sets the margin to the pattern's cutting waste (10% straight, 15%
    diagonal). Without a pattern the ``margin`` parameter applies.

    footprint = (tile_width + grout) * (tile_height + grout)
    tiles = ceil(area * (1 + margin/100) / footprint)
    packs = ceil(tiles / pack_size)
    """

    category = "tile"
    name = "Tile"
    description = "Tiles for walls or floor"
    default_params = {
        "surface": "walls",
        "tile_width": "30",
        "tile_height": "60",
        "grout_width": "2",
        "margin": "10",
        "pack_size": "10",
        "price": "0",
    }
    choice_params = {"surface": ("walls", "floor"), "pattern": tuple(PATTERN_MARGINS)}

    def effective_margin(self, params: Mapping[str, str]) -> float:
        """Margin in percent: the pattern's waste when one is chosen, else ``margin``."""
        pattern = self.choice(params, "pattern")
        if pattern is not None:
            return PATTERN_MARGINS[pattern]
        return self.number(params, "margin")

    def _compute(
        self, metrics: SurfaceMetrics, params: Mapping[str, str]
    ) -> MaterialResult | None:
        area = self.surface_area(metrics, params)
        tile_width = self.number(params, "tile_width") / 100
        tile_height = self.number(params, "tile_height") / 100
        if area <= 0 or tile_width <= 0 or tile_height <= 0:
            return None

        grout = max(0.0, self.number(params, "grout_width")) / 1000
        margin = self.effective_margin(params)
        pack_size = self.positive(params, "pack_size", 1.0)
        price = self.number(params, "price")

        footprint = (tile_width + grout) * (tile_height + grout)
        area_needed = area * self.margin_factor(margin)
        tiles = self.round_up(area_needed / footprint)
        packs = self.round_up(tiles / pack_size)
        cost = packs * price

        quantity = f"≈ {tiles} tiles / {packs} packs ({area_needed:.2f} m²)"
        return self.make_result(
            quantity=quantity,
            cost=cost,
            details={
                "Tiles": f"{tiles} pcs",
                "Packs": f"{packs} pcs",
                "Area": f"{area_needed:.2f} m²",
                "Margin": f"{margin:g}%",
                "Cost": self.money(cost),
            },
            show_note=tiles > 0,
        )
