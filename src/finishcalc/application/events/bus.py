"""In-process publish/subscribe event bus.

Handlers run synchronously on the publishing thread: ``emit`` returns only
after every matching handler has run. A handler that raises is logged and
does not stop the remaining handlers. One lock guards the listener
collections so subscribing from other threads is safe; handlers themselves
are called outside the lock so they may subscribe or emit again.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from .events import EVENT_PAYLOADS, EventType

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]
Unsubscribe = Callable[[], None]


class Debounced:
    """Wraps a handler so it runs once after calls stop for ``delay`` seconds.

    Each call restarts the timer with the latest payload. The wrapper owns
    the pending timer; ``cancel`` drops it without running the handler.
    """

    def __init__(self, handler: Handler, delay: float) -> None:
        self.handler = handler
        self.delay = delay
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._payload: Any = None

    def __call__(self, payload: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._payload = payload
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        """True while a call is waiting for its delay to pass."""
        with self._lock:
            return self._timer is not None

    def _take_pending(self) -> tuple[bool, Any]:
        with self._lock:
            if self._timer is None:
                return False, None
            self._timer.cancel()
            self._timer = None
            payload, self._payload = self._payload, None
            return True, payload

    def _fire(self) -> None:
        has_payload, payload = self._take_pending()
        if not has_payload:
            return
        # Runs on the timer thread, where nothing would report the error
        try:
            self.handler(payload)
        except Exception:
            logger.exception(f"Error in debounced handler {self.handler!r}")

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        self._fire()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        self._take_pending()


class Throttled:
    """Wraps a handler so it runs at most once per ``interval`` seconds.

    Calls arriving before the interval has passed are dropped.
    """

    def __init__(
        self,
        handler: Handler,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.handler = handler
        self.interval = interval
        self._clock = clock
        self._lock = threading.Lock()
        self._last_call: float | None = None

    def __call__(self, payload: Any) -> None:
        with self._lock:
            now = self._clock()
            if self._last_call is not None and now - self._last_call < self.interval:
                return
            self._last_call = now
        self.handler(payload)

    def cancel(self) -> None:
        """Forget the last call so the next one runs immediately."""
        with self._lock:
            self._last_call = None


class EventBus:
    """Typed event bus with regular and one-shot subscriptions.

    Build one bus at application start and pass it to the services that
    publish or listen; ``clear`` resets it between tests.

    Example:
        bus = EventBus()
        unsubscribe = bus.on(EventType.ROOM_ADDED, lambda e: print(e.room.name))
        bus.emit(EventType.ROOM_ADDED, RoomAdded(room=room))
        unsubscribe()
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._listeners: dict[EventType, list[Handler]] = {}
        self._once_listeners: dict[EventType, list[Handler]] = {}

    def on(self, event: EventType | str, handler: Handler) -> Unsubscribe:
        """Subscribe a handler. Subscribing the same handler twice is a no-op.

        Returns:
            A callable that removes this subscription.
        """
        event = EventType(event)
        with self._lock:
            handlers = self._listeners.setdefault(event, [])
            if handler not in handlers:
                handlers.append(handler)
        return lambda: self.off(event, handler)

    def once(self, event: EventType | str, handler: Handler) -> Unsubscribe:
        """Subscribe a handler that is removed after its first delivery."""
        event = EventType(event)
        with self._lock:
            handlers = self._once_listeners.setdefault(event, [])
            if handler not in handlers:
                handlers.append(handler)
        return lambda: self.off(event, handler)

    def off(self, event: EventType | str, handler: Handler) -> None:
        """Remove a handler from both regular and one-shot subscriptions."""
        event = EventType(event)
        with self._lock:
            for registry in (self._listeners, self._once_listeners):
                handlers = registry.get(event)
                if handlers and handler in handlers:
                    handlers.remove(handler)
                    if not handlers:
                        del registry[event]

    def emit(self, event: EventType | str, payload: Any) -> None:
        """Deliver a payload to regular handlers, then one-shot handlers.

        Raises:
            TypeError: If the payload is not the dataclass declared for the
                channel in ``EVENT_PAYLOADS``.
        """
        event = EventType(event)
        expected = EVENT_PAYLOADS[event]
        if not isinstance(payload, expected):
            raise TypeError(
                f"Event '{event.value}' expects {expected.__name__}, "
                f"got {type(payload).__name__}"
            )

        with self._lock:
            handlers = list(self._listeners.get(event, ()))
            once_handlers = self._once_listeners.pop(event, [])

        for handler in handlers:
            self._dispatch(event, handler, payload)
        for handler in once_handlers:
            self._dispatch(event, handler, payload)

    def _dispatch(self, event: EventType, handler: Handler, payload: Any) -> None:
        try:
            handler(payload)
        except Exception:
            logger.exception(f"Error in event handler for '{event.value}'")

    def on_debounced(
        self, event: EventType | str, handler: Handler, delay: float
    ) -> Unsubscribe:
        """Subscribe a debounced handler; unsubscribing cancels its timer."""
        wrapper = Debounced(handler, delay)
        unsubscribe = self.on(event, wrapper)

        def unsubscribe_and_cancel() -> None:
            unsubscribe()
            wrapper.cancel()

        return unsubscribe_and_cancel

    def on_throttled(
        self, event: EventType | str, handler: Handler, interval: float
    ) -> Unsubscribe:
        """Subscribe a throttled handler."""
        wrapper = Throttled(handler, interval)
        unsubscribe = self.on(event, wrapper)

        def unsubscribe_and_cancel() -> None:
            unsubscribe()
            wrapper.cancel()

        return unsubscribe_and_cancel

    def clear(self) -> None:
        """Remove all subscriptions."""
        with self._lock:
            self._listeners.clear()
            self._once_listeners.clear()

    def listeners(self, event: EventType | str) -> list[Handler]:
        """Regular handlers for an event, in subscription order."""
        with self._lock:
            return list(self._listeners.get(EventType(event), ()))

    def has_listeners(self, event: EventType | str) -> bool:
        """True if any regular or one-shot handler is subscribed to the event."""
        event = EventType(event)
        with self._lock:
            return bool(self._listeners.get(event) or self._once_listeners.get(event))

    def listener_count(self) -> int:
        """Total regular and one-shot subscriptions across all events."""
        with self._lock:
            return sum(len(h) for h in self._listeners.values()) + sum(
                len(h) for h in self._once_listeners.values()
            )
