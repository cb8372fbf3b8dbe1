"""Gateway selection and auto-detect failover.

When the configured gateway is AUTO_DETECT the selector keeps probing the
current variant while it succeeds and moves on to the next one after a
failed attempt, cycling Aspen -> eConnect -> Gogo -> Aspen.

Typical usage:
    from pc12perf.avionics.selector import GatewaySelector, build_clients

    selector = GatewaySelector(build_clients(config))
    kind = selector.select(GatewayKind.AUTO_DETECT)
    reading = selector.client(kind).fetch(network)
    selector.record_result(reading is not None)
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from pc12perf.avionics import aspen, econnect, gogo
from pc12perf.avionics.arinc429 import (
    BARO_ALTITUDE_LABEL,
    DEFAULT_FULL_SCALE_RANGES,
    SAT_LABEL,
    ArincDecoder,
)
from pc12perf.avionics.aspen import AspenClient
from pc12perf.avionics.base import GatewayClient, GatewayKind
from pc12perf.avionics.econnect import EConnectClient
from pc12perf.avionics.gogo import GogoClient
from pc12perf.core.config import ConfigLoader

logger = logging.getLogger(__name__)


@dataclass
class SelectorState:
    """Auto-detect rotation state.

    Attributes:
        index: Position in the probing order of the variant to try
        last_attempt_successful: Outcome of the most recent fetch
    """

    index: int = 0
    last_attempt_successful: bool = True


class GatewaySelector:
    """Resolve the configured gateway kind to a concrete client.

    Examples:
        >>> selector = GatewaySelector(clients)
        >>> selector.select(GatewayKind.AUTO_DETECT)
        <GatewayKind.ASPEN: 'aspen'>
        >>> selector.record_result(False)
        >>> selector.select(GatewayKind.AUTO_DETECT)
        <GatewayKind.ECONNECT: 'econnect'>
    """

    def __init__(self, clients: Mapping[GatewayKind, GatewayClient]) -> None:
        """Initialize the selector.

        Args:
            clients: One long-lived client per concrete gateway kind.

        Raises:
            ValueError: If a concrete kind has no client.
        """
        missing = [kind.name for kind in GatewayKind.concrete() if kind not in clients]
        if missing:
            raise ValueError(f"No client for gateway kinds: {', '.join(missing)}")

        self.order = GatewayKind.concrete()
        self._clients = dict(clients)
        self.state = SelectorState()
        self._auto_detecting = False

    def select(self, configured: GatewayKind) -> GatewayKind:
        """Pick the gateway kind to use for this poll cycle.

        Call once per cycle: with AUTO_DETECT every call after a failed
        attempt advances the rotation.

        Args:
            configured: Gateway kind from settings.

        Returns:
            A concrete gateway kind.
        """
        self._auto_detecting = configured is GatewayKind.AUTO_DETECT
        if not self._auto_detecting:
            return configured

        if not self.state.last_attempt_successful:
            self.state.index = (self.state.index + 1) % len(self.order)

        kind = self.order[self.state.index]
        logger.debug("Auto-detect selected %s", kind.label)
        return kind

    def record_result(self, success: bool) -> None:
        """Record the outcome of the fetch made with the selected kind.

        Only auto-detect cycles count: a pinned gateway never moves the
        rotation.
        """
        if self._auto_detecting:
            self.state.last_attempt_successful = success

    def client(self, kind: GatewayKind) -> GatewayClient:
        """Get the client for a concrete gateway kind.

        Raises:
            ValueError: If kind is AUTO_DETECT.
        """
        if kind is GatewayKind.AUTO_DETECT:
            raise ValueError("AUTO_DETECT has no client; resolve it with select() first")
        return self._clients[kind]


def build_clients(config: ConfigLoader) -> dict[GatewayKind, GatewayClient]:
    """Construct one client per gateway kind from the gateways section.

    Missing keys fall back to the factory defaults of each client.

    Args:
        config: Application configuration.

    Returns:
        Clients keyed by gateway kind.
    """
    aspen_cfg = config.get_section("gateways.aspen", {})
    ranges = dict(DEFAULT_FULL_SCALE_RANGES)
    for label, full_scale in (aspen_cfg.get("full_scale_ranges") or {}).items():
        ranges[int(label)] = float(full_scale)
    decoder = ArincDecoder(full_scale_ranges=ranges, sign_bit=aspen_cfg.get("sign_bit", 4))

    econnect_cfg = config.get_section("gateways.econnect", {})
    gogo_cfg = config.get_section("gateways.gogo", {})

    clients: dict[GatewayKind, GatewayClient] = {
        GatewayKind.ASPEN: AspenClient(
            host=aspen_cfg.get("host", aspen.ASPEN_IP),
            ping_port=aspen_cfg.get("ping_port", aspen.ASPEN_PING_PORT),
            socket_port=aspen_cfg.get("socket_port", aspen.ASPEN_SOCKET_PORT),
            probe_timeout_s=aspen_cfg.get("probe_timeout_s", aspen.PROBE_TIMEOUT_S),
            socket_timeout_s=aspen_cfg.get("socket_timeout_s", aspen.SOCKET_TIMEOUT_S),
            altitude_label=aspen_cfg.get("altitude_label", BARO_ALTITUDE_LABEL),
            temperature_label=aspen_cfg.get("temperature_label", SAT_LABEL),
            decoder=decoder,
        ),
        GatewayKind.ECONNECT: EConnectClient(
            host=econnect_cfg.get("host", econnect.ECONNECT_IP),
            port=econnect_cfg.get("port", econnect.ECONNECT_PORT),
            network_timeout_s=econnect_cfg.get("network_timeout_s", econnect.NETWORK_TIMEOUT_S),
            websocket_timeout_s=econnect_cfg.get(
                "websocket_timeout_s", econnect.WEBSOCKET_TIMEOUT_S
            ),
        ),
        GatewayKind.GOGO: GogoClient(
            url=gogo_cfg.get("url", gogo.GOGO_URL),
            network_timeout_s=gogo_cfg.get("network_timeout_s", gogo.NETWORK_TIMEOUT_S),
            position_timeout_s=gogo_cfg.get("position_timeout_s", gogo.POSITION_TIMEOUT_S),
        ),
    }

    logger.info("Gateway clients: %s", ", ".join(repr(c) for c in clients.values()))
    return clients
