"""Pytest configuration and shared fixtures for estimation engine tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from finishcalc.application.config.settings import CalculatorSettings
from finishcalc.application.events import EventBus, EventType
from finishcalc.domain.entities import Opening, RoomData
from finishcalc.domain.materials import MaterialCalculatorRegistry, create_default_registry
from finishcalc.domain.value_objects import OpeningType, Unit


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests spanning several layers or the filesystem"
    )
    config.addinivalue_line("markers", "slow: tests that wait on real timers")


# =============================================================================
# Event recording
# =============================================================================


class EventRecorder:
    """Subscribes to every channel of a bus and records what was published."""

    def __init__(self, bus: EventBus) -> None:
        self.events: list[tuple[EventType, Any]] = []
        for event in EventType:
            bus.on(event, lambda payload, event=event: self.events.append((event, payload)))

    @property
    def types(self) -> list[EventType]:
        return [event for event, _ in self.events]

    def payloads(self, event: EventType) -> list[Any]:
        return [payload for e, payload in self.events if e == event]


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def bus() -> EventBus:
    """A fresh event bus per test."""
    return EventBus()


@pytest.fixture
def recorder(bus: EventBus) -> EventRecorder:
    """Records every event published on the ``bus`` fixture."""
    return EventRecorder(bus)


@pytest.fixture
def registry() -> MaterialCalculatorRegistry:
    """Registry with all built-in calculators."""
    return create_default_registry()


@pytest.fixture
def settings() -> CalculatorSettings:
    """Default settings."""
    return CalculatorSettings()


@pytest.fixture
def make_room() -> Callable[..., RoomData]:
    """Factory for rooms; defaults to an empty 4 x 3 x 2.5 m room."""

    def _make(
        id: int = 1,
        name: str = "Living room",
        length: str = "4",
        width: str = "3",
        height: str = "2.5",
        unit: Unit = Unit.M,
        **kwargs: Any,
    ) -> RoomData:
        return RoomData(
            id=id,
            name=name,
            length=length,
            width=width,
            height=height,
            unit=unit,
            **kwargs,
        )

    return _make


@pytest.fixture
def furnished_room(make_room: Callable[..., RoomData]) -> RoomData:
    """4 x 3 x 2.5 m room with one door (0.9 x 2.0) and one window (1.5 x 1.4)."""
    return make_room(
        openings=(
            Opening(id=1, type=OpeningType.DOOR, width="0.9", height="2.0"),
            Opening(id=2, type=OpeningType.WINDOW, width="1.5", height="1.4"),
        ),
    )
