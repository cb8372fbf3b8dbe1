"""Tests for the polling loop."""

from unittest.mock import MagicMock

import pytest

from pc12perf.avionics.base import AvionicsReading, GatewayClient, GatewayKind
from pc12perf.avionics.selector import GatewaySelector
from pc12perf.core.event_bus import EventBus
from pc12perf.core.polling_loop import (
    FlightDataEvent,
    FlightDataStaleEvent,
    PollingLoop,
    poll_once,
)
from pc12perf.core.settings import SettingsStore
from pc12perf.performance.aircraft import WeightClass

CRUISE = AvionicsReading(altitude_ft=21000, outside_temp_c=-22)


@pytest.fixture
def clients() -> dict[GatewayKind, MagicMock]:
    return {kind: MagicMock(spec=GatewayClient, kind=kind) for kind in GatewayKind.concrete()}


@pytest.fixture
def selector(clients) -> GatewaySelector:
    return GatewaySelector(clients)


@pytest.fixture
def settings() -> SettingsStore:
    return SettingsStore({"gateway_kind": "ASPEN"})


@pytest.fixture
def bus_events():
    """Event bus recording every flight data event."""
    bus = EventBus()
    events = []
    bus.subscribe(FlightDataEvent, events.append)
    bus.subscribe(FlightDataStaleEvent, events.append)
    return bus, events


class TestPollOnce:
    """Test a single acquisition cycle."""

    def test_success(self, selector, clients, settings, network) -> None:
        """Test a reading is turned into performance figures."""
        clients[GatewayKind.ASPEN].fetch.return_value = CRUISE
        clients[GatewayKind.ASPEN].label = "Aspen"

        result = poll_once(selector, settings, network)

        assert result.reading == CRUISE
        assert result.gateway_label == "Aspen"
        assert result.perf.fuel_flow_lb_per_h == 389
        assert result.perf.airspeed_kt == 277
        clients[GatewayKind.ASPEN].fetch.assert_called_once_with(network)

    def test_uses_selected_weight(self, selector, clients, settings, network) -> None:
        """Test the weight class is read from settings every cycle."""
        clients[GatewayKind.ASPEN].fetch.return_value = CRUISE
        light = poll_once(selector, settings, network)

        settings.set("weight_class", WeightClass.LBS_10400)
        heavy = poll_once(selector, settings, network)

        assert heavy.perf.airspeed_kt < light.perf.airspeed_kt

    def test_no_reading(self, selector, clients, settings, network) -> None:
        """Test a failed fetch gives no result and records the failure."""
        settings.set("gateway_kind", GatewayKind.AUTO_DETECT)
        clients[GatewayKind.ASPEN].fetch.return_value = None

        assert poll_once(selector, settings, network) is None
        assert selector.state.last_attempt_successful is False

    def test_auto_detect_fails_over(self, selector, clients, settings, network) -> None:
        """Test auto-detect tries the next gateway after a failure."""
        settings.set("gateway_kind", GatewayKind.AUTO_DETECT)
        clients[GatewayKind.ASPEN].fetch.return_value = None
        clients[GatewayKind.ECONNECT].fetch.return_value = CRUISE

        assert poll_once(selector, settings, network) is None
        assert poll_once(selector, settings, network) is not None
        assert poll_once(selector, settings, network) is not None

        assert clients[GatewayKind.ASPEN].fetch.call_count == 1
        assert clients[GatewayKind.ECONNECT].fetch.call_count == 2
        clients[GatewayKind.GOGO].fetch.assert_not_called()


class TestPollingLoop:
    """Test PollingLoop cycles and publishing."""

    def make_loop(self, selector, settings, network, bus, clock) -> PollingLoop:
        return PollingLoop(
            selector,
            settings,
            lambda: network,
            bus,
            success_interval_s=5.0,
            retry_interval_s=1.0,
            clock=clock,
        )

    def test_success_publishes_data(
        self, selector, clients, settings, network, bus_events, clock
    ) -> None:
        """Test a successful cycle publishes fresh data and waits 5 s."""
        bus, events = bus_events
        clients[GatewayKind.ASPEN].fetch.return_value = CRUISE
        loop = self.make_loop(selector, settings, network, bus, clock)

        assert loop._cycle() == 5.0
        assert isinstance(events[0], FlightDataEvent)
        assert events[0].result.reading == CRUISE
        assert events[0].age_s == 0.0
        assert loop.last_success_time == clock.now

    def test_failure_publishes_stale(
        self, selector, clients, settings, network, bus_events, clock
    ) -> None:
        """Test failures publish the age of the last good data and retry after 1 s."""
        bus, events = bus_events
        clients[GatewayKind.ASPEN].fetch.return_value = None
        loop = self.make_loop(selector, settings, network, bus, clock)

        assert loop._cycle() == 1.0
        assert isinstance(events[-1], FlightDataStaleEvent)
        assert events[-1].age_s is None

        clients[GatewayKind.ASPEN].fetch.return_value = CRUISE
        loop._cycle()
        clients[GatewayKind.ASPEN].fetch.return_value = None
        clock.advance(12.0)
        loop._cycle()

        assert events[-1].age_s == pytest.approx(12.0)
        assert loop.data_age() == pytest.approx(12.0)

    def test_no_network(self, selector, clients, settings, bus_events, clock) -> None:
        """Test a missing network skips the fetch."""
        bus, events = bus_events
        loop = PollingLoop(selector, settings, lambda: None, bus, clock=clock)

        assert loop._cycle() == loop.retry_interval_s
        assert isinstance(events[0], FlightDataStaleEvent)
        clients[GatewayKind.ASPEN].fetch.assert_not_called()

    def test_cycle_error_is_a_failed_attempt(
        self, selector, clients, settings, network, bus_events, clock
    ) -> None:
        """Test an unexpected client error still counts as a failure."""
        bus, events = bus_events
        settings.set("gateway_kind", GatewayKind.AUTO_DETECT)
        clients[GatewayKind.ASPEN].fetch.side_effect = RuntimeError("boom")
        loop = self.make_loop(selector, settings, network, bus, clock)

        with pytest.raises(RuntimeError):
            loop._cycle()

        assert selector.state.last_attempt_successful is False
        assert isinstance(events[-1], FlightDataStaleEvent)

    def test_uncharted_reading_keeps_gateway(
        self, selector, clients, settings, network, bus_events, clock
    ) -> None:
        """Test a reading in an uncharted table corner is still a successful cycle."""
        bus, events = bus_events
        settings.set("gateway_kind", GatewayKind.AUTO_DETECT)
        settings.set("aircraft_type", "MSN_1451_1942_4_BLADE")
        clients[GatewayKind.ASPEN].fetch.return_value = AvionicsReading(
            altitude_ft=11000, outside_temp_c=23
        )
        loop = self.make_loop(selector, settings, network, bus, clock)

        assert loop._cycle() == 5.0
        assert loop._cycle() == 5.0

        assert isinstance(events[-1], FlightDataEvent)
        assert events[-1].result.perf.torque_psi is None
        assert selector.select(GatewayKind.AUTO_DETECT) is GatewayKind.ASPEN
        clients[GatewayKind.ECONNECT].fetch.assert_not_called()

    def test_pinned_failures_do_not_rotate(
        self, selector, clients, settings, network, bus_events, clock
    ) -> None:
        """Test failed pinned cycles leave auto-detect starting on Aspen."""
        bus, events = bus_events
        settings.set("gateway_kind", GatewayKind.ECONNECT)
        clients[GatewayKind.ECONNECT].fetch.return_value = None
        loop = self.make_loop(selector, settings, network, bus, clock)
        loop._cycle()

        settings.set("gateway_kind", GatewayKind.AUTO_DETECT)
        clients[GatewayKind.ASPEN].fetch.return_value = CRUISE

        assert loop._cycle() == 5.0
        assert events[-1].result.reading == CRUISE
        clients[GatewayKind.ASPEN].fetch.assert_called_once_with(network)

    def test_run_continues_after_error(
        self, selector, clients, settings, network, bus_events, clock
    ) -> None:
        """Test run() logs a failing cycle and keeps going until stopped."""
        bus, events = bus_events
        loop = self.make_loop(selector, settings, network, bus, clock)
        loop.retry_interval_s = 0.0
        loop.success_interval_s = 0.0

        def fetch(net):
            if clients[GatewayKind.ASPEN].fetch.call_count == 1:
                raise RuntimeError("boom")
            loop.stop()
            return CRUISE

        clients[GatewayKind.ASPEN].fetch.side_effect = fetch

        loop.run()

        assert loop.cycle_count == 2
        assert isinstance(events[-1], FlightDataEvent)

    def test_background_thread(
        self, selector, clients, settings, network, bus_events, clock
    ) -> None:
        """Test start() runs cycles on a thread that stop() ends promptly."""
        bus, events = bus_events
        clients[GatewayKind.ASPEN].fetch.return_value = CRUISE
        loop = self.make_loop(selector, settings, network, bus, clock)

        loop.start()
        loop.start()
        loop.stop()
        loop.join(timeout=2.0)

        assert not loop.is_running()
        assert loop.cycle_count <= 1
