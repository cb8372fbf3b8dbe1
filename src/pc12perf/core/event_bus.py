"""Event bus for handing polling results to the display layer.

Events are dispatched synchronously, on the publisher's thread, to every
subscriber in priority order. The polling loop publishes from its own
thread, so subscription changes are guarded by a lock.

Typical usage example:
    from pc12perf.core.event_bus import EventBus, EventPriority
    from pc12perf.core.polling_loop import FlightDataEvent

    bus = EventBus()
    bus.subscribe(FlightDataEvent, show_perf, EventPriority.HIGH)
"""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventPriority(Enum):
    """Priority levels for event handlers.

    Handlers are executed in order from CRITICAL to LOW.
    """

    CRITICAL = auto()
    HIGH = auto()
    NORMAL = auto()
    LOW = auto()


@dataclass
class Event:
    """Base class for all events.

    Attributes:
        timestamp: Unix timestamp when the event was created.
    """

    timestamp: float = field(default_factory=time.time)


class EventBus:
    """Synchronous publish/subscribe dispatch keyed by event class.

    Examples:
        >>> bus = EventBus()
        >>> bus.subscribe(FlightDataStaleEvent, lambda e: print(e.age_s))
        >>> bus.publish(FlightDataStaleEvent(age_s=12.0))
        12.0
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Event], list[tuple[Callable[[Any], None], EventPriority]]] = {}
        self._lock = threading.Lock()

    def subscribe(
        self,
        event_type: type[Event],
        handler: Callable[[Any], None],
        priority: EventPriority = EventPriority.NORMAL,
    ) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: The class of event to subscribe to.
            handler: Callable that accepts the event as its only parameter.
            priority: Priority level for this handler. Defaults to NORMAL.
        """
        with self._lock:
            handlers = self._handlers.setdefault(event_type, [])
            handlers.append((handler, priority))
            handlers.sort(key=lambda x: x[1].value)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Any], None]) -> None:
        """Unsubscribe a handler; a no-op if it is not subscribed."""
        with self._lock:
            if event_type not in self._handlers:
                return
            remaining = [(h, p) for h, p in self._handlers[event_type] if h != handler]
            if remaining:
                self._handlers[event_type] = remaining
            else:
                del self._handlers[event_type]

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribers of its exact type.

        Handler exceptions propagate to the publisher.

        Args:
            event: The event to publish.
        """
        with self._lock:
            handlers = list(self._handlers.get(type(event), []))

        for handler, _ in handlers:
            handler(event)

    def clear(self) -> None:
        """Remove all event handlers."""
        with self._lock:
            self._handlers.clear()

    def get_subscriber_count(self, event_type: type[Event]) -> int:
        with self._lock:
            return len(self._handlers.get(event_type, []))
