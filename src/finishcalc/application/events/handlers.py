"""Stock listeners that route bus traffic to the logging system."""

from __future__ import annotations

import logging
from typing import Any

from .bus import EventBus, Unsubscribe
from .events import ErrorOccurred, EventType

logger = logging.getLogger(__name__)


def attach_event_logger(bus: EventBus, level: int = logging.DEBUG) -> Unsubscribe:
    """Log every event published on the bus.

    Returns:
        A callable that detaches the logger from all channels.
    """
    unsubscribes: list[Unsubscribe] = []
    for event in EventType:

        def log_event(payload: Any, event: EventType = event) -> None:
            logger.log(level, f"Event {event.value}: {payload!r}")

        unsubscribes.append(bus.on(event, log_event))

    def detach() -> None:
        for unsubscribe in unsubscribes:
            unsubscribe()

    return detach


def attach_error_logger(bus: EventBus) -> Unsubscribe:
    """Log ``error:occurred`` events at ERROR level."""

    def log_error(payload: ErrorOccurred) -> None:
        error = payload.error
        kind = error.kind.value if error.kind else "unknown"
        logger.error(f"Calculator error ({kind}): {error.message}")

    return bus.on(EventType.ERROR_OCCURRED, log_error)
