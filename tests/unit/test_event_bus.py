"""Tests for the event bus and its stock listeners."""

from __future__ import annotations

import logging
import threading
from typing import Any

import pytest

from finishcalc.application.events import (
    Debounced,
    ErrorOccurred,
    EventBus,
    EventType,
    RoomDeleted,
    ThemeChanged,
    Throttled,
    attach_error_logger,
    attach_event_logger,
)
from finishcalc.domain.exceptions import SaveError
from finishcalc.domain.value_objects import Theme


class FakeClock:
    """Manually advanced clock for throttling tests."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestSubscriptions:
    """Tests for on, once and off."""

    def test_handler_receives_payload(self) -> None:
        """Every subscribed handler gets the payload."""
        bus = EventBus()
        received: list[Any] = []
        bus.on(EventType.ROOM_DELETED, received.append)

        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=3))

        assert received == [RoomDeleted(room_id=3)]

    def test_other_channels_not_delivered(self) -> None:
        """Handlers only see their own channel."""
        bus = EventBus()
        received: list[Any] = []
        bus.on(EventType.ROOM_ADDED, received.append)
        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=3))
        assert received == []

    def test_once_fires_exactly_once(self) -> None:
        """A once handler is removed after its first delivery."""
        bus = EventBus()
        received: list[Any] = []
        bus.once(EventType.ROOM_DELETED, received.append)

        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=1))
        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=2))

        assert received == [RoomDeleted(room_id=1)]
        assert not bus.has_listeners(EventType.ROOM_DELETED)

    def test_regular_handlers_run_before_once_handlers(self) -> None:
        """Regular subscriptions are delivered first."""
        bus = EventBus()
        order: list[str] = []
        bus.once(EventType.ROOM_DELETED, lambda e: order.append("once"))
        bus.on(EventType.ROOM_DELETED, lambda e: order.append("regular"))

        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=1))

        assert order == ["regular", "once"]

    def test_off_and_unsubscribe(self) -> None:
        """Both off() and the returned callable remove the handler."""
        bus = EventBus()
        received: list[Any] = []
        unsubscribe = bus.on(EventType.ROOM_DELETED, received.append)
        unsubscribe()
        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=1))

        bus.on(EventType.ROOM_DELETED, received.append)
        bus.off(EventType.ROOM_DELETED, received.append)
        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=2))

        assert received == []

    def test_duplicate_subscription_is_ignored(self) -> None:
        """The same handler subscribed twice runs once."""
        bus = EventBus()
        received: list[Any] = []
        bus.on(EventType.ROOM_DELETED, received.append)
        bus.on(EventType.ROOM_DELETED, received.append)

        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=1))

        assert len(received) == 1
        assert bus.listener_count() == 1

    def test_string_event_names(self) -> None:
        """Channels may be given by their string value."""
        bus = EventBus()
        received: list[Any] = []
        bus.on("theme:changed", received.append)
        bus.emit("theme:changed", ThemeChanged(theme=Theme.DARK))
        assert received == [ThemeChanged(theme=Theme.DARK)]

    def test_unknown_event_name_rejected(self) -> None:
        """Names outside the channel set raise ValueError."""
        with pytest.raises(ValueError):
            EventBus().on("room:renamed", print)


class TestEmit:
    """Tests for payload checking and error isolation."""

    def test_wrong_payload_type_raises(self) -> None:
        """Payloads must be the channel's declared dataclass."""
        bus = EventBus()
        with pytest.raises(TypeError, match="expects RoomDeleted, got dict"):
            bus.emit(EventType.ROOM_DELETED, {"room_id": 1})

    def test_failing_handler_does_not_block_others(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A raising handler is logged and the next handler still runs."""
        bus = EventBus()
        received: list[Any] = []

        def broken(payload: Any) -> None:
            raise RuntimeError("handler failed")

        bus.on(EventType.ROOM_DELETED, broken)
        bus.on(EventType.ROOM_DELETED, received.append)

        with caplog.at_level(logging.ERROR):
            bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=1))

        assert received == [RoomDeleted(room_id=1)]
        assert "Error in event handler for 'room:deleted'" in caplog.text

    def test_handler_may_subscribe_during_emit(self) -> None:
        """Handlers run outside the lock and may change subscriptions."""
        bus = EventBus()
        late: list[Any] = []

        def subscribe_more(payload: Any) -> None:
            bus.on(EventType.ROOM_DELETED, late.append)

        bus.on(EventType.ROOM_DELETED, subscribe_more)
        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=1))
        assert late == []

        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=2))
        assert late == [RoomDeleted(room_id=2)]


class TestIntrospection:
    """Tests for listeners, has_listeners, listener_count and clear."""

    def test_counts_and_clear(self) -> None:
        """Regular and once subscriptions are counted; clear removes all."""
        bus = EventBus()
        bus.on(EventType.ROOM_ADDED, print)
        bus.on(EventType.ROOM_DELETED, repr)
        bus.once(EventType.ROOM_DELETED, str)

        assert bus.listener_count() == 3
        assert bus.listeners(EventType.ROOM_DELETED) == [repr]
        assert bus.has_listeners(EventType.ROOM_ADDED)
        assert not bus.has_listeners(EventType.SAVE_FAILED)

        bus.clear()

        assert bus.listener_count() == 0
        assert not bus.has_listeners(EventType.ROOM_ADDED)


class TestDebounced:
    """Tests for Debounced without waiting on real time."""

    def test_flush_runs_latest_payload_once(self) -> None:
        """Rapid calls collapse into one call with the last payload."""
        received: list[int] = []
        debounced = Debounced(received.append, delay=60)

        debounced(1)
        debounced(2)
        debounced(3)
        assert debounced.pending
        assert received == []

        debounced.flush()

        assert received == [3]
        assert not debounced.pending

    def test_cancel_drops_pending_call(self) -> None:
        """Cancelled calls never run."""
        received: list[int] = []
        debounced = Debounced(received.append, delay=60)
        debounced(1)
        debounced.cancel()
        debounced.flush()
        assert received == []

    def test_flush_without_pending_is_noop(self) -> None:
        """Nothing runs when nothing is pending."""
        received: list[int] = []
        Debounced(received.append, delay=60).flush()
        assert received == []

    def test_failing_handler_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """A raising handler is logged, not raised, and the wrapper stays usable."""
        calls: list[Any] = []

        def broken(payload: Any) -> None:
            calls.append(payload)
            raise RuntimeError("handler failed")

        debounced = Debounced(broken, delay=60)
        debounced("first")
        with caplog.at_level(logging.ERROR):
            debounced.flush()

        assert "Error in debounced handler" in caplog.text
        assert "handler failed" in caplog.text
        assert not debounced.pending

        debounced("second")
        debounced.flush()
        assert calls == ["first", "second"]

    @pytest.mark.slow
    def test_fires_after_delay(self) -> None:
        """The real timer delivers the payload."""
        fired = threading.Event()
        debounced = Debounced(lambda payload: fired.set(), delay=0.01)
        debounced("x")
        assert fired.wait(timeout=2)

    def test_on_debounced_unsubscribe_cancels(self) -> None:
        """Unsubscribing drops both the subscription and the pending timer."""
        bus = EventBus()
        received: list[Any] = []
        unsubscribe = bus.on_debounced(EventType.ROOM_DELETED, received.append, delay=60)

        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=1))
        (wrapper,) = bus.listeners(EventType.ROOM_DELETED)
        assert wrapper.pending

        unsubscribe()

        assert not wrapper.pending
        assert not bus.has_listeners(EventType.ROOM_DELETED)
        assert received == []


class TestThrottled:
    """Tests for Throttled with a fake clock."""

    def test_drops_calls_within_interval(self) -> None:
        """Only the first call of each interval runs."""
        clock = FakeClock()
        received: list[int] = []
        throttled = Throttled(received.append, interval=1.0, clock=clock)

        throttled(1)
        clock.now = 0.5
        throttled(2)
        clock.now = 1.0
        throttled(3)

        assert received == [1, 3]

    def test_cancel_resets_interval(self) -> None:
        """After cancel the next call runs immediately."""
        clock = FakeClock()
        received: list[int] = []
        throttled = Throttled(received.append, interval=1.0, clock=clock)
        throttled(1)
        throttled.cancel()
        throttled(2)
        assert received == [1, 2]

    def test_on_throttled(self) -> None:
        """Throttled subscriptions deliver the first event."""
        bus = EventBus()
        received: list[Any] = []
        unsubscribe = bus.on_throttled(EventType.ROOM_DELETED, received.append, interval=60)

        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=1))
        bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=2))
        unsubscribe()

        assert received == [RoomDeleted(room_id=1)]
        assert bus.listener_count() == 0


class TestStockListeners:
    """Tests for the logging listeners."""

    def test_event_logger_logs_every_channel(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each published event is logged; detach removes the listeners."""
        bus = EventBus()
        detach = attach_event_logger(bus, level=logging.INFO)
        assert bus.listener_count() == len(EventType)

        with caplog.at_level(logging.INFO):
            bus.emit(EventType.ROOM_DELETED, RoomDeleted(room_id=5))

        assert "Event room:deleted" in caplog.text
        detach()
        assert bus.listener_count() == 0

    def test_error_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        """error:occurred payloads are logged with their kind."""
        bus = EventBus()
        attach_error_logger(bus)

        with caplog.at_level(logging.ERROR):
            bus.emit(EventType.ERROR_OCCURRED, ErrorOccurred(error=SaveError("disk full")))

        assert "Calculator error (save): disk full" in caplog.text
