"""Integration tests for the rooms -> metrics -> materials pipeline."""

from __future__ import annotations

from typing import Callable

import pytest

from finishcalc.application import EstimateService, MaterialSelection
from finishcalc.application.config.settings import CalculatorSettings
from finishcalc.application.events import EventBus, EventType
from finishcalc.domain.entities import Opening, RoomData, SavedMaterial
from finishcalc.domain.exceptions import CalculationError, UnknownCategoryError
from finishcalc.domain.materials import MaterialCalculatorRegistry
from finishcalc.domain.value_objects import OpeningType

pytestmark = pytest.mark.integration

RoomFactory = Callable[..., RoomData]

TILE = MaterialSelection(
    category="tile",
    params={"tile_width": "30", "tile_height": "60", "pack_size": "10", "price": "500"},
)
PAINT = MaterialSelection(
    category="paint", params={"coats": "2", "coverage": "10", "price": "100"}
)
BROKEN_WALLPAPER = MaterialSelection(category="wallpaper", params={"rapport": "1100"})


@pytest.fixture
def service(registry: MaterialCalculatorRegistry, bus: EventBus) -> EstimateService:
    return EstimateService(registry, bus)


class TestRecalculate:
    """Tests for EstimateService.recalculate()."""

    def test_results_per_material(
        self, service: EstimateService, furnished_room: RoomData
    ) -> None:
        """Each selection yields a result; a failing one yields None."""
        results = service.recalculate([furnished_room], [TILE, PAINT, BROKEN_WALLPAPER])

        assert list(results) == ["tile", "paint", "wallpaper"]
        assert results["paint"] is not None
        assert results["paint"].quantity == "6.3 L"
        assert results["paint"].cost == 630
        assert results["tile"] is not None
        assert results["tile"].details["Packs"] == "19 pcs"
        assert results["wallpaper"] is None

    def test_events(
        self, service: EstimateService, recorder, furnished_room: RoomData
    ) -> None:
        """calculation:updated per material, error:occurred for the failure, one completed."""
        results = service.recalculate([furnished_room], [TILE, PAINT, BROKEN_WALLPAPER])

        assert recorder.types == [
            EventType.CALCULATION_UPDATED,
            EventType.CALCULATION_UPDATED,
            EventType.ERROR_OCCURRED,
            EventType.CALCULATION_UPDATED,
            EventType.CALCULATION_COMPLETED,
        ]
        (error_event,) = recorder.payloads(EventType.ERROR_OCCURRED)
        assert isinstance(error_event.error, CalculationError)

        (completed,) = recorder.payloads(EventType.CALCULATION_COMPLETED)
        assert completed.results == results

    def test_unknown_category(self, service: EstimateService, furnished_room: RoomData) -> None:
        """Selecting an unregistered category raises."""
        with pytest.raises(UnknownCategoryError):
            service.recalculate([furnished_room], [MaterialSelection(category="marble")])

    def test_empty_project(self, service: EstimateService) -> None:
        """Without rooms nothing is computable."""
        assert service.recalculate([], [TILE, PAINT]) == {"tile": None, "paint": None}

    def test_rooms_are_not_cached(
        self, service: EstimateService, make_room: RoomFactory
    ) -> None:
        """Editing a room and recalculating uses the new dimensions."""
        before = service.calculate(PAINT, [make_room()])
        after = service.calculate(PAINT, [make_room(height="3")])
        assert before is not None and after is not None
        assert after.cost > before.cost

    def test_same_category_twice(
        self, service: EstimateService, furnished_room: RoomData
    ) -> None:
        """Distinct names keep two selections of one category apart."""
        walls = MaterialSelection(category="tile", params={"surface": "walls"}, name="Wall tile")
        floor = MaterialSelection(category="tile", params={"surface": "floor"}, name="Floor tile")

        results = service.recalculate([furnished_room], [walls, floor])

        assert set(results) == {"Wall tile", "Floor tile"}
        assert results["Wall tile"] != results["Floor tile"]


class TestParameters:
    """Tests for parameter resolution."""

    def test_user_params_override_configured_defaults(
        self, registry: MaterialCalculatorRegistry, bus: EventBus
    ) -> None:
        """Plugin defaults < configured defaults < user params."""
        settings = CalculatorSettings(
            material_defaults={"paint": {"coats": "3", "coverage": "8"}}
        )
        service = EstimateService(registry, bus, settings)

        params = service.resolve_params(
            MaterialSelection(category="paint", params={"coats": "1"})
        )

        assert params["coats"] == "1"
        assert params["coverage"] == "8"
        assert params["surface"] == "walls"

    @pytest.mark.parametrize("category", ["tile", "flooring"])
    def test_user_margin_survives_defaults(
        self, service: EstimateService, make_room: RoomFactory, category: str
    ) -> None:
        """A margin entered without a pattern or direction is the one applied."""
        selection = MaterialSelection(category=category, params={"margin": "30"})
        result = service.calculate(selection, [make_room()])

        assert result is not None
        if category == "tile":
            assert result.details["Margin"] == "30%"
        else:
            assert result.details["Area"] == "15.60 m²"

    def test_pattern_still_sets_the_margin(
        self, service: EstimateService, make_room: RoomFactory
    ) -> None:
        """Choosing a pattern replaces the entered margin."""
        selection = MaterialSelection(
            category="tile", params={"margin": "30", "pattern": "diagonal"}
        )
        result = service.calculate(selection, [make_room()])
        assert result is not None
        assert result.details["Margin"] == "15%"

    def test_selection_from_saved_material(self) -> None:
        """Saved materials select under their own name."""
        material = SavedMaterial(id=4, category="paint", name="Dulux white", params={"coats": "2"})
        selection = MaterialSelection.from_saved(material)
        assert selection.name == "Dulux white"
        assert selection.category == "paint"
        assert dict(selection.params) == {"coats": "2"}


class TestReport:
    """Tests for build_report() and total_cost()."""

    def test_report(self, service: EstimateService, furnished_room: RoomData) -> None:
        """The report bundles rooms, totals and results with their total cost."""
        report = service.build_report("Flat", [furnished_room], [TILE, PAINT, BROKEN_WALLPAPER])

        assert report.name == "Flat"
        assert report.rooms[0].room == furnished_room
        assert report.rooms[0].metrics.net_wall_area == pytest.approx(31.1)
        assert report.totals.room_count == 1
        assert set(report.computed_results) == {"tile", "paint"}
        assert report.total_cost == pytest.approx(
            report.results["tile"].cost + report.results["paint"].cost
        )
        assert report.currency == "RUB"
        assert report.created_at

    def test_total_cost_skips_failures(self) -> None:
        """None results contribute nothing."""
        assert EstimateService.total_cost({"a": None}) == 0


class TestValidationAndRoomEdits:
    """Tests for validate() and the room collection helpers."""

    def test_validate_publishes_outcome(
        self, service: EstimateService, recorder, make_room: RoomFactory
    ) -> None:
        """validation:failed carries the field errors; validation:passed the rooms."""
        result = service.validate([make_room(id=3, width="0")])
        assert not result.valid
        (failed,) = recorder.payloads(EventType.VALIDATION_FAILED)
        assert set(failed.errors) == {"room[3].width"}

        room = make_room()
        assert service.validate([room]).valid
        (passed,) = recorder.payloads(EventType.VALIDATION_PASSED)
        assert passed.data == (room,)

    def test_add_update_delete(
        self, service: EstimateService, recorder, make_room: RoomFactory
    ) -> None:
        """Room edits return new tuples and publish their events."""
        first = make_room(id=1)
        rooms = service.add_room((), first)
        rooms = service.add_room(rooms, make_room(id=2, name="Bedroom"))

        widened = make_room(
            id=1,
            width="3.5",
            openings=(Opening(id=1, type=OpeningType.DOOR, width="0.8", height="2"),),
        )
        rooms = service.update_room(rooms, widened)
        rooms = service.delete_room(rooms, 2)
        service.select_room(widened)

        assert rooms == (widened,)
        assert recorder.types == [
            EventType.ROOM_ADDED,
            EventType.ROOM_ADDED,
            EventType.ROOM_UPDATED,
            EventType.ROOM_DELETED,
            EventType.ROOM_SELECTED,
        ]
        (updated,) = recorder.payloads(EventType.ROOM_UPDATED)
        assert updated.previous_room == first

    def test_edit_errors(self, service: EstimateService, make_room: RoomFactory) -> None:
        """Duplicate ids and unknown ids are rejected."""
        rooms = (make_room(id=1),)
        with pytest.raises(ValueError):
            service.add_room(rooms, make_room(id=1))
        with pytest.raises(KeyError):
            service.update_room(rooms, make_room(id=9))
        with pytest.raises(KeyError):
            service.delete_room(rooms, 9)
