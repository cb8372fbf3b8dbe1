"""PC-12 cruise performance monitor.

Main entry point for the command line. Loads configuration and pilot
settings, then polls the cabin avionics gateway and prints maximum cruise
torque, fuel flow, and true airspeed for the current flight conditions.

Typical usage:
    pc12perf
    pc12perf --gateway auto_detect --weight lbs_9000
    pc12perf --once --bind-address 10.22.44.23
    pc12perf --altitude 21000 --temp -22
"""

import argparse
import logging
import sys
from pathlib import Path

from pc12perf.avionics.base import AvionicsReading, GatewayKind
from pc12perf.avionics.network import NetworkBinding
from pc12perf.avionics.selector import GatewaySelector, build_clients
from pc12perf.core.config import ConfigLoader
from pc12perf.core.event_bus import EventBus, EventPriority
from pc12perf.core.logging_system import initialize_logging, shutdown_logging
from pc12perf.core.polling_loop import (
    FlightDataEvent,
    FlightDataStaleEvent,
    PollingLoop,
    PollResult,
    poll_once,
)
from pc12perf.core.resource_path import get_config_path, get_user_settings_path
from pc12perf.core.settings import SettingsStore
from pc12perf.performance.aircraft import AircraftType, WeightClass
from pc12perf.performance.calculator import PerfData, PerformanceEngine

logger = logging.getLogger(__name__)

UNAVAILABLE = "---"


def format_perf(perf: PerfData) -> str:
    """Render performance figures the way the cockpit display shows them.

    Undefined torque and zero fuel flow or airspeed read as unavailable.
    """
    torque = UNAVAILABLE if perf.torque_psi is None else f"{perf.torque_psi:g}"
    fuel_flow = perf.fuel_flow_lb_per_h or UNAVAILABLE
    airspeed = perf.airspeed_kt or UNAVAILABLE
    return f"TRQ: {torque} psi\nFF: {fuel_flow} lb/h\nTAS: {airspeed} kts"


def format_result(result: PollResult) -> str:
    reading = result.reading
    header = f"{result.gateway_label}: {reading.altitude_ft} ft, SAT {reading.outside_temp_c} °C"
    return f"{header}\n{format_perf(result.perf)}"


class PC12Perf:
    """Command line application.

    Wires configuration, settings, gateway clients, and the polling loop
    together and prints every result.
    """

    def __init__(self, args: argparse.Namespace) -> None:
        """Initialize the application.

        Args:
            args: Parsed command line arguments.

        Raises:
            LoggingError: If the logging configuration cannot be loaded.
            ConfigError: If the configuration file cannot be loaded.
            SettingsError: If the settings are invalid.
        """
        self.args = args

        logging_config = get_config_path("logging.yaml")
        if args.logging_config:
            logging_config = Path(args.logging_config)
        if logging_config.exists():
            initialize_logging(logging_config, use_platform_dir=True)
        else:
            initialize_logging(use_platform_dir=True)
        logger.info("PC-12 performance monitor starting up...")

        self.config = self._load_config()
        self.settings = self._load_settings()

        self.engine = PerformanceEngine()
        self.event_bus = EventBus()
        self.event_bus.subscribe(FlightDataEvent, self._on_flight_data, EventPriority.HIGH)
        self.event_bus.subscribe(FlightDataStaleEvent, self._on_stale_data)

        self.network = NetworkBinding(args.bind_address or self.config.get("network.bind_address"))
        self.selector = GatewaySelector(build_clients(self.config))
        self.polling_loop = PollingLoop(
            self.selector,
            self.settings,
            lambda: self.network,
            self.event_bus,
            engine=self.engine,
            success_interval_s=self.config.get_float("polling.success_interval_s", 5.0),
            retry_interval_s=self.config.get_float("polling.retry_interval_s", 1.0),
        )

    def _load_config(self) -> ConfigLoader:
        """Load the shipped configuration with the --config file layered on top."""
        default_config = get_config_path("pc12perf.yaml")
        if not default_config.exists():
            logger.warning("No shipped configuration found, using built-in defaults")
            default_config = None

        return ConfigLoader.load_layers(default_config, self.args.config)

    def _load_settings(self) -> SettingsStore:
        path = self.args.settings or self.config.get("settings.path") or get_user_settings_path()
        settings = SettingsStore.load(path)

        # Command line selections apply to this run only
        if self.args.gateway:
            settings.set("gateway_kind", self.args.gateway.upper())
        if self.args.aircraft:
            settings.set("aircraft_type", self.args.aircraft.upper())
        if self.args.weight:
            settings.set("weight_class", self.args.weight.upper())

        logger.info(
            "Settings: %s, %s, gateway %s",
            settings.aircraft_type.label,
            settings.weight_class.label,
            settings.gateway_kind.label,
        )
        return settings

    def _on_flight_data(self, event: FlightDataEvent) -> None:
        if event.result is not None:
            print(format_result(event.result), flush=True)

    def _on_stale_data(self, event: FlightDataStaleEvent) -> None:
        if event.age_s is None:
            print("Waiting for avionics data...", flush=True)
        else:
            print(f"No avionics data for {event.age_s:.0f} s", flush=True)

    def run(self) -> int:
        """Run the selected mode.

        Returns:
            Exit code (0 for success).
        """
        if self.args.altitude is not None:
            reading = AvionicsReading(altitude_ft=self.args.altitude, outside_temp_c=self.args.temp)
            perf = self.engine.compute(
                reading, self.settings.aircraft_type, self.settings.weight_class
            )
            print(format_perf(perf))
            return 0

        if self.args.once:
            result = poll_once(self.selector, self.settings, self.network, self.engine)
            if result is None:
                print("No avionics data", file=sys.stderr)
                return 1
            print(format_result(result))
            return 0

        self.polling_loop.run()
        return 0

    def shutdown(self) -> None:
        self.polling_loop.stop()
        logger.info("Shutdown complete")
        shutdown_logging()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments, sys.argv[1:] if None.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="PC-12/47E cruise performance monitor")

    parser.add_argument("--config", type=str, help="Configuration YAML file")
    parser.add_argument("--settings", type=str, help="Pilot settings YAML file")
    parser.add_argument("--logging-config", type=str, help="Logging configuration YAML file")

    parser.add_argument(
        "--gateway",
        choices=[kind.name.lower() for kind in GatewayKind],
        help="Avionics gateway (overrides settings)",
    )
    parser.add_argument(
        "--aircraft",
        choices=[aircraft.name.lower() for aircraft in AircraftType],
        help="Airframe (overrides settings)",
    )
    parser.add_argument(
        "--weight",
        choices=[weight.name.lower() for weight in WeightClass],
        help="Gross weight class (overrides settings)",
    )
    parser.add_argument(
        "--bind-address",
        type=str,
        help="Local address of the aircraft Wi-Fi interface",
    )
    parser.add_argument("--once", action="store_true", help="Poll once and exit")

    parser.add_argument("--altitude", type=int, help="Pressure altitude (ft), offline lookup")
    parser.add_argument("--temp", type=int, help="Static air temperature (°C), offline lookup")

    args = parser.parse_args(argv)
    if (args.altitude is None) != (args.temp is None):
        parser.error("--altitude and --temp must be given together")
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)
    app = None
    try:
        app = PC12Perf(args)
        return app.run()
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if app is not None:
            app.shutdown()


if __name__ == "__main__":
    sys.exit(main())
