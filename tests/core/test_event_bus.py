"""Tests for the event bus."""

import threading

import pytest

from pc12perf.core.event_bus import EventBus, EventPriority
from pc12perf.core.polling_loop import FlightDataEvent, FlightDataStaleEvent


class TestEventBus:
    """Test suite for EventBus."""

    def test_subscribe_and_publish(self) -> None:
        """Test that subscribed handlers receive published events."""
        bus = EventBus()
        received = []

        bus.subscribe(FlightDataStaleEvent, received.append)
        event = FlightDataStaleEvent(age_s=7.0)
        bus.publish(event)

        assert received == [event]

    def test_priority_order(self) -> None:
        """Test that handlers are called in priority order."""
        bus = EventBus()
        call_order = []

        bus.subscribe(FlightDataEvent, lambda e: call_order.append("normal"))
        bus.subscribe(
            FlightDataEvent, lambda e: call_order.append("critical"), EventPriority.CRITICAL
        )
        bus.subscribe(FlightDataEvent, lambda e: call_order.append("low"), EventPriority.LOW)
        bus.subscribe(FlightDataEvent, lambda e: call_order.append("high"), EventPriority.HIGH)

        bus.publish(FlightDataEvent())

        assert call_order == ["critical", "high", "normal", "low"]

    def test_event_types_isolated(self) -> None:
        """Test that handlers only see their own event type."""
        bus = EventBus()
        fresh = []
        stale = []

        bus.subscribe(FlightDataEvent, fresh.append)
        bus.subscribe(FlightDataStaleEvent, stale.append)

        bus.publish(FlightDataStaleEvent(age_s=1.0))
        bus.publish(FlightDataStaleEvent(age_s=2.0))

        assert fresh == []
        assert len(stale) == 2

    def test_unsubscribe(self) -> None:
        """Test that unsubscribing removes a handler and empty lists."""
        bus = EventBus()
        received = []

        bus.subscribe(FlightDataStaleEvent, received.append)
        bus.unsubscribe(FlightDataStaleEvent, received.append)
        bus.publish(FlightDataStaleEvent())

        assert received == []
        assert bus.get_subscriber_count(FlightDataStaleEvent) == 0

    def test_unsubscribe_unknown_handler(self) -> None:
        """Test that unsubscribing a handler that never subscribed is safe."""
        EventBus().unsubscribe(FlightDataEvent, print)

    def test_clear(self) -> None:
        """Test that clear removes all handlers."""
        bus = EventBus()
        bus.subscribe(FlightDataEvent, print)
        bus.subscribe(FlightDataStaleEvent, print)

        bus.clear()

        assert bus.get_subscriber_count(FlightDataEvent) == 0
        assert bus.get_subscriber_count(FlightDataStaleEvent) == 0

    def test_handler_exception_propagates(self) -> None:
        """Test that exceptions in handlers propagate to the publisher."""
        bus = EventBus()

        def failing_handler(event: FlightDataEvent) -> None:
            raise RuntimeError("display gone")

        bus.subscribe(FlightDataEvent, failing_handler)

        with pytest.raises(RuntimeError, match="display gone"):
            bus.publish(FlightDataEvent())

    def test_handler_may_unsubscribe_during_publish(self) -> None:
        """Test a handler can unsubscribe itself while being dispatched."""
        bus = EventBus()
        calls = []

        def once(event: FlightDataEvent) -> None:
            calls.append(event)
            bus.unsubscribe(FlightDataEvent, once)

        bus.subscribe(FlightDataEvent, once)
        bus.publish(FlightDataEvent())
        bus.publish(FlightDataEvent())

        assert len(calls) == 1

    def test_publish_from_another_thread(self) -> None:
        """Test events published on a worker thread reach the handlers."""
        bus = EventBus()
        received = []
        bus.subscribe(FlightDataStaleEvent, received.append)

        worker = threading.Thread(target=bus.publish, args=(FlightDataStaleEvent(age_s=3.0),))
        worker.start()
        worker.join()

        assert received[0].age_s == 3.0
