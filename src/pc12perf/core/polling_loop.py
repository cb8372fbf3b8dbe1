"""Polling loop acquiring flight data and publishing cruise performance.

Each cycle resolves the gateway to use, fetches one reading, computes
performance, and publishes the result on the event bus. Cycles run back to
back with a pause of 5 s after a success and 1 s after a failure.

Typical usage example:
    from pc12perf.core.polling_loop import PollingLoop

    loop = PollingLoop(selector, settings, lambda: network, event_bus)
    loop.start()
    ...
    loop.stop()
"""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from pc12perf.avionics.base import AvionicsReading
from pc12perf.avionics.network import NetworkBinding
from pc12perf.avionics.selector import GatewaySelector
from pc12perf.core.event_bus import Event, EventBus
from pc12perf.core.settings import SettingsProvider
from pc12perf.performance.calculator import PerfData, PerformanceEngine

logger = logging.getLogger(__name__)

SUCCESS_INTERVAL_S = 5.0
RETRY_INTERVAL_S = 1.0


@dataclass(frozen=True)
class PollResult:
    """Outcome of one successful poll cycle.

    Attributes:
        reading: Altitude and temperature as received
        perf: Performance figures computed from the reading
        gateway_label: Display name of the gateway that answered
    """

    reading: AvionicsReading
    perf: PerfData
    gateway_label: str


@dataclass
class FlightDataEvent(Event):
    """Published after every successful poll cycle.

    Attributes:
        result: The poll result.
        age_s: Seconds since the data was acquired (always 0 when published).
    """

    result: PollResult | None = None
    age_s: float = 0.0


@dataclass
class FlightDataStaleEvent(Event):
    """Published after every failed poll cycle.

    Attributes:
        age_s: Seconds since the last successful cycle, None if there has
            not been one yet.
    """

    age_s: float | None = None


def poll_once(
    selector: GatewaySelector,
    settings: SettingsProvider,
    network: NetworkBinding,
    engine: PerformanceEngine | None = None,
) -> PollResult | None:
    """Run one acquisition cycle.

    Args:
        selector: Gateway selector; its auto-detect state is updated.
        settings: Pilot selections (gateway, aircraft, weight).
        network: Bound network for the gateway connections.
        engine: Performance engine, a default one if None.

    Returns:
        The result, or None if the gateway gave no complete reading.
    """
    engine = engine or PerformanceEngine()

    kind = selector.select(settings.gateway_kind)
    client = selector.client(kind)

    reading = client.fetch(network)
    selector.record_result(reading is not None)
    if reading is None:
        logger.info("No reading from %s", client.label)
        return None

    perf = engine.compute(reading, settings.aircraft_type, settings.weight_class)
    return PollResult(reading=reading, perf=perf, gateway_label=client.label)


class PollingLoop:
    """Cooperative polling loop.

    Only one fetch is ever outstanding: cycles run sequentially on a single
    thread, which is also the only writer of the selector and client state.

    Examples:
        >>> loop = PollingLoop(selector, settings, network_provider, event_bus)
        >>> loop.run()  # blocks until stop() is called from another thread
    """

    def __init__(
        self,
        selector: GatewaySelector,
        settings: SettingsProvider,
        network_provider: Callable[[], NetworkBinding | None],
        event_bus: EventBus,
        engine: PerformanceEngine | None = None,
        success_interval_s: float = SUCCESS_INTERVAL_S,
        retry_interval_s: float = RETRY_INTERVAL_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the polling loop.

        Args:
            selector: Gateway selector.
            settings: Pilot selections, read at the start of every cycle.
            network_provider: Returns the bound network, or None while the
                aircraft Wi-Fi is not connected.
            event_bus: Bus the results are published on.
            engine: Performance engine.
            success_interval_s: Pause after a successful cycle (s).
            retry_interval_s: Pause after a failed cycle (s).
            clock: Monotonic clock used for data age.
        """
        self.selector = selector
        self.settings = settings
        self.network_provider = network_provider
        self.event_bus = event_bus
        self.engine = engine or PerformanceEngine()
        self.success_interval_s = success_interval_s
        self.retry_interval_s = retry_interval_s
        self._clock = clock

        self.last_success_time: float | None = None
        self.cycle_count = 0

        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def run(self) -> None:
        """Run cycles until stop() is called."""
        logger.info("Polling loop started")

        try:
            while not self._stop_event.is_set():
                try:
                    interval = self._cycle()
                except Exception as e:
                    logger.error("Poll cycle error: %s", e, exc_info=True)
                    interval = self.retry_interval_s

                self.cycle_count += 1
                self._stop_event.wait(interval)

        except KeyboardInterrupt:
            logger.info("Polling loop interrupted by user")

        finally:
            logger.info("Polling loop stopped")

    def _cycle(self) -> float:
        """Execute one cycle and return the pause before the next one."""
        network = self.network_provider()
        if network is None:
            logger.warning("Aircraft network not connected")
            self._publish_stale()
            return self.retry_interval_s

        try:
            result = poll_once(self.selector, self.settings, network, self.engine)
        except Exception:
            self.selector.record_result(False)
            self._publish_stale()
            raise

        if result is None:
            self._publish_stale()
            return self.retry_interval_s

        self.last_success_time = self._clock()
        self.event_bus.publish(FlightDataEvent(result=result, age_s=0.0))
        return self.success_interval_s

    def _publish_stale(self) -> None:
        self.event_bus.publish(FlightDataStaleEvent(age_s=self.data_age()))

    def data_age(self) -> float | None:
        """Seconds since the last successful cycle, None before the first."""
        if self.last_success_time is None:
            return None
        return self._clock() - self.last_success_time

    def start(self) -> None:
        """Run the loop on a background daemon thread."""
        if self.is_running():
            logger.warning("Polling loop already running")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self.run, name="pc12perf-polling", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the loop.

        The current cycle finishes; a pending pause is cut short.
        """
        self._stop_event.set()
        logger.info("Polling loop stop requested")

    def join(self, timeout: float | None = None) -> None:
        """Wait for the background thread started by start() to exit."""
        if self._thread is not None:
            self._thread.join(timeout)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
