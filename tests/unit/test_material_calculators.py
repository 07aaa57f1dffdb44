"""Tests for the built-in material calculators."""

from __future__ import annotations

import pytest

from finishcalc.domain.exceptions import CalculationError
from finishcalc.domain.materials import (
    DrywallCalculator,
    FlooringCalculator,
    MaterialCalculator,
    PaintCalculator,
    PlasterCalculator,
    PuttyCalculator,
    ScreedCalculator,
    SkirtingCalculator,
    TileCalculator,
    WallpaperCalculator,
)
from finishcalc.domain.value_objects import TotalCalculations


def walls(area: float) -> TotalCalculations:
    return TotalCalculations(net_wall_area=area)


class TestTileCalculator:
    """Tests for TileCalculator."""

    PARAMS = {
        "tile_width": "30",
        "tile_height": "60",
        "grout_width": "2",
        "margin": "10",
        "pack_size": "10",
        "price": "500",
    }

    def test_reference_calculation(self) -> None:
        """10 m² of 30x60 tile with 2 mm grout and 10% margin: 61 tiles, 7 packs."""
        result = TileCalculator().compute_result(walls(10), self.PARAMS)

        assert result is not None
        assert result.category == "tile"
        assert result.details["Tiles"] == "61 pcs"
        assert result.details["Packs"] == "7 pcs"
        assert result.cost == 3500
        assert result.quantity.startswith("≈ 61 tiles / 7 packs")

    def test_diagonal_pattern_overrides_margin(self) -> None:
        """Diagonal layout forces a 15% margin."""
        params = {**self.PARAMS, "pattern": "diagonal"}
        calculator = TileCalculator()

        assert calculator.effective_margin(params) == 15
        result = calculator.compute_result(walls(10), params)
        assert result is not None
        assert result.details["Tiles"] == "64 pcs"
        assert result.details["Margin"] == "15%"

    def test_unknown_pattern_keeps_user_margin(self) -> None:
        """A pattern outside the known set leaves the entered margin."""
        assert TileCalculator().effective_margin({**self.PARAMS, "pattern": "zigzag"}) == 10

    def test_floor_surface(self) -> None:
        """surface=floor tiles the floor area."""
        metrics = TotalCalculations(floor_area=10, net_wall_area=0)
        result = TileCalculator().compute_result(metrics, {**self.PARAMS, "surface": "floor"})
        assert result is not None
        assert result.details["Tiles"] == "61 pcs"

    def test_missing_pack_size_defaults_to_one(self) -> None:
        """Without a pack size each tile is its own pack."""
        params = {**self.PARAMS, "pack_size": ""}
        result = TileCalculator().compute_result(walls(10), params)
        assert result is not None
        assert result.details["Packs"] == "61 pcs"

    @pytest.mark.parametrize("key", ["tile_width", "tile_height"])
    def test_zero_tile_size_returns_none(self, key: str) -> None:
        """No result without a tile size."""
        assert TileCalculator().compute_result(walls(10), {**self.PARAMS, key: "0"}) is None

    def test_zero_area_returns_none(self) -> None:
        """No result for an empty surface."""
        assert TileCalculator().compute_result(walls(0), self.PARAMS) is None


class TestPaintCalculator:
    """Tests for PaintCalculator."""

    def test_reference_calculation(self) -> None:
        """20 m², 2 coats, 10 m²/L -> 4.0 L."""
        result = PaintCalculator().compute_result(
            walls(20), {"coats": "2", "coverage": "10", "price": "500"}
        )
        assert result is not None
        assert result.quantity == "4.0 L"
        assert result.cost == 2000
        assert result.show_note

    def test_rounds_up_to_tenth_of_liter(self) -> None:
        """Liters round up to the next 0.1 L."""
        result = PaintCalculator().compute_result(walls(10.1), {"coats": "1", "coverage": "10"})
        assert result is not None
        assert result.quantity == "1.1 L"

    def test_can_count(self) -> None:
        """can_volume adds the number of cans."""
        result = PaintCalculator().compute_result(
            walls(20), {"coats": "2", "coverage": "10", "can_volume": "2,5"}
        )
        assert result is not None
        assert result.details["Cans"] == "2 x 2.5 L"

    def test_ceiling_surface(self) -> None:
        """surface=ceiling paints the ceiling area."""
        metrics = TotalCalculations(ceiling_area=10, net_wall_area=50)
        result = PaintCalculator().compute_result(
            metrics, {"surface": "ceiling", "coats": "1", "coverage": "10"}
        )
        assert result is not None
        assert result.quantity == "1.0 L"

    def test_zero_coverage_returns_none(self) -> None:
        """No result without a coverage rate."""
        assert PaintCalculator().compute_result(walls(20), {"coats": "2", "coverage": "0"}) is None


class TestPlasterCalculator:
    """Tests for PlasterCalculator."""

    def test_bags(self) -> None:
        """10 m² at 8.5 kg/m² in 25 kg bags -> 85 kg, 4 bags."""
        result = PlasterCalculator().compute_result(
            walls(10), {"consumption": "8.5", "bag_weight": "25", "price": "300"}
        )
        assert result is not None
        assert result.details["Bags"] == "4 pcs"
        assert result.quantity == "85.00 kg (≈ 4 bags)"
        assert result.cost == 1200

    def test_thickness_multiplies_consumption(self) -> None:
        """Consumption is per mm of thickness."""
        result = PlasterCalculator().compute_result(
            walls(10), {"consumption": "1", "thickness": "10", "bag_weight": "30"}
        )
        assert result is not None
        assert result.details["Bags"] == "4 pcs"

    def test_zero_bag_weight_returns_none(self) -> None:
        """No result without a bag weight."""
        result = PlasterCalculator().compute_result(
            walls(10), {"consumption": "8.5", "bag_weight": "0"}
        )
        assert result is None


class TestWallpaperCalculator:
    """Tests for WallpaperCalculator."""

    PARAMS = {"roll_width": "1.06", "roll_length": "10.05", "margin": "0"}

    def test_rolls(self) -> None:
        """30 m² of 1.06 x 10.05 rolls -> 3 rolls."""
        result = WallpaperCalculator().compute_result(walls(30), self.PARAMS)
        assert result is not None
        assert result.details["Rolls"] == "3 pcs"

    def test_rapport_reduces_coverage(self) -> None:
        """A 64 cm pattern repeat costs a fourth roll."""
        result = WallpaperCalculator().compute_result(
            walls(30), {**self.PARAMS, "rapport": "64"}
        )
        assert result is not None
        assert result.details["Rolls"] == "4 pcs"

    def test_rapport_longer_than_roll_raises(self) -> None:
        """A pattern repeat longer than the roll is a calculation error."""
        with pytest.raises(CalculationError, match="Pattern repeat"):
            WallpaperCalculator().compute_result(walls(30), {**self.PARAMS, "rapport": "1100"})


class TestFlooringCalculator:
    """Tests for FlooringCalculator."""

    @pytest.mark.parametrize("direction,packs", [("along", 10), ("across", 11)])
    def test_direction_sets_margin(self, direction: str, packs: int) -> None:
        """Laying along the light wastes 5%, across wastes 10%."""
        metrics = TotalCalculations(floor_area=20)
        result = FlooringCalculator().compute_result(
            metrics, {"pack_area": "2.13", "direction": direction}
        )
        assert result is not None
        assert result.details["Packs"] == f"{packs} pcs"

    def test_margin_without_direction(self) -> None:
        """Without a direction the entered margin applies."""
        metrics = TotalCalculations(floor_area=20)
        result = FlooringCalculator().compute_result(
            metrics, {"pack_area": "2.13", "direction": "", "margin": "0"}
        )
        assert result is not None
        assert result.details["Packs"] == "10 pcs"


class TestSkirtingCalculator:
    """Tests for SkirtingCalculator."""

    def test_door_width_is_excluded(self) -> None:
        """Perimeter 14 m minus a 0.9 m door in 2.5 m pieces -> 6 pieces."""
        metrics = TotalCalculations(perimeter=14, adjusted_perimeter=14, total_door_width=0.9)
        result = SkirtingCalculator().compute_result(
            metrics, {"piece_length": "2.5", "margin": "0", "price": "150"}
        )
        assert result is not None
        assert result.details["Pieces"] == "6 pcs"
        assert result.cost == 900

    def test_follows_adjusted_perimeter(self) -> None:
        """Column and niche outlines lengthen the run: 16.4 - 0.9 m -> 7 pieces."""
        metrics = TotalCalculations(perimeter=14, adjusted_perimeter=16.4, total_door_width=0.9)
        result = SkirtingCalculator().compute_result(
            metrics, {"piece_length": "2.5", "margin": "0"}
        )
        assert result is not None
        assert result.details["Pieces"] == "7 pcs"

    def test_no_perimeter_returns_none(self) -> None:
        """No result for an empty project."""
        assert SkirtingCalculator().compute_result(TotalCalculations(), {}) is None


class TestPuttyCalculator:
    """Tests for PuttyCalculator."""

    def test_defaults(self) -> None:
        """40 m² at 1.5 kg/m² with 15% margin -> 69 kg in four 20 kg bags."""
        result = PuttyCalculator().compute_result(
            walls(40), {**PuttyCalculator.default_params, "price": "500"}
        )
        assert result is not None
        assert result.quantity == "69.00 kg (≈ 4 bags)"
        assert result.category == "putty"
        assert result.cost == 2000


class TestScreedCalculator:
    """Tests for ScreedCalculator."""

    def test_defaults(self) -> None:
        """12 m² at 50 mm and 2 kg/m²/mm plus 10% -> 1320 kg, 53 bags."""
        metrics = TotalCalculations(floor_area=12, net_wall_area=100)
        result = ScreedCalculator().compute_result(metrics, ScreedCalculator.default_params)
        assert result is not None
        assert result.quantity == "1320.00 kg (≈ 53 bags)"

    def test_always_uses_floor(self) -> None:
        """Screed ignores a walls surface and falls back to the floor."""
        metrics = TotalCalculations(floor_area=12, net_wall_area=100)
        params = {**ScreedCalculator.default_params, "surface": "walls"}
        result = ScreedCalculator().compute_result(metrics, params)
        assert result is not None
        assert result.details["Area"] == "12.00 m²"

    def test_missing_surface_uses_floor(self) -> None:
        """Without params the floor is still the screeded surface."""
        metrics = TotalCalculations(floor_area=10)
        result = ScreedCalculator().compute_result(
            metrics, {"consumption": "2", "thickness": "50", "bag_weight": "25"}
        )
        assert result is not None
        assert result.details["Bags"] == "40 pcs"


class TestDrywallCalculator:
    """Tests for DrywallCalculator."""

    METRICS = TotalCalculations(net_wall_area=30, ceiling_area=12, adjusted_perimeter=14)
    PARAMS = {**DrywallCalculator.default_params, "profile_price": "200", "sheet_price": "400"}

    def test_wall_lining(self) -> None:
        """14 m at 0.6 m spacing and 30 m² of 1.2 x 2.5 sheets, both plus 10%."""
        result = DrywallCalculator().compute_result(self.METRICS, self.PARAMS)
        assert result is not None
        assert result.quantity == "26 profiles + 11 sheets"
        assert result.details["Profiles cost"] == "5200.00"
        assert result.details["Sheets cost"] == "4400.00"
        assert result.cost == 9600

    def test_ceiling_lining(self) -> None:
        """The ceiling profile type sheets the ceiling area."""
        params = {**self.PARAMS, "profile_type": "ceiling"}
        result = DrywallCalculator().compute_result(self.METRICS, params)
        assert result is not None
        assert result.details["Sheets"] == "5 pcs"

    def test_no_area_returns_none(self) -> None:
        """Nothing to line yields no result."""
        metrics = TotalCalculations(adjusted_perimeter=14)
        assert DrywallCalculator().compute_result(metrics, self.PARAMS) is None


class TestProtocolConformance:
    """All built-ins satisfy the MaterialCalculator protocol."""

    @pytest.mark.parametrize(
        "calculator_cls",
        [
            PlasterCalculator,
            PaintCalculator,
            WallpaperCalculator,
            TileCalculator,
            FlooringCalculator,
            SkirtingCalculator,
            PuttyCalculator,
            ScreedCalculator,
            DrywallCalculator,
        ],
    )
    def test_is_material_calculator(self, calculator_cls: type) -> None:
        """Each calculator has a category and compute_result."""
        calculator = calculator_cls()
        assert isinstance(calculator, MaterialCalculator)
        assert calculator.category

    def test_arithmetic_failure_becomes_calculation_error(self) -> None:
        """Errors inside a calculation surface as CalculationError."""

        class Broken(PaintCalculator):
            def _compute(self, metrics, params):
                raise ZeroDivisionError("division by zero")

        with pytest.raises(CalculationError) as exc_info:
            Broken().compute_result(walls(1), {})
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)
