"""Emteq eConnect gateway client.

HTTP session negotiation, then a legacy socket.io v0.9 exchange over a
WebSocket. All frames carry the socket.io event envelope "5:::{json}".

Sample altitude response:
    5:::{"name":"fms_data:code:2","args":[{"id":2,"gui_code":2,"label":"Altitude","units":"Feet","value":"24999"}]}
"""

import json
import logging
import time
from collections.abc import Callable

import requests
from websockets.exceptions import ConnectionClosed, WebSocketException
from websockets.sync.client import ClientConnection, connect

from pc12perf.avionics.base import AvionicsReading, GatewayClient, GatewayKind, PartialReading
from pc12perf.avionics.network import NetworkBinding

logger = logging.getLogger(__name__)

ECONNECT_IP = "10.0.9.1"
ECONNECT_PORT = 80
NETWORK_TIMEOUT_S = 1.0
WEBSOCKET_TIMEOUT_S = 3.0
NORMAL_CLOSURE_STATUS = 1000

EVENT_PREFIX = "5:::"
HEARTBEAT = "2::"
CONNECTED_MESSAGE = '5:::{"name":"connected"}'
ALTITUDE_CODE = 2
TEMPERATURE_CODE = 13


def request_frame(code: int) -> str:
    """Build the frame that subscribes to one FMS data code."""
    event = {"name": "fms_data:code", "args": [str(code)]}
    return EVENT_PREFIX + json.dumps(event, separators=(",", ":"))


def parse_value(text: str) -> int | None:
    """Extract the integer value from an fms_data event frame.

    Args:
        text: Complete frame, including the "5:::" prefix.

    Returns:
        The value, or None if the frame is malformed or the value is not an
        integer.
    """
    try:
        payload = json.loads(text[len(EVENT_PREFIX):])
        return int(payload["args"][0]["value"])
    except (ValueError, KeyError, IndexError, TypeError):
        logger.error("Could not parse: %s", text)
        return None


class EConnectClient(GatewayClient):
    """Client for the Emteq eConnect Wi-Fi gateway.

    The exchange is one bounded loop: receive with the remaining deadline,
    answer the handshake with the two data requests, and close once the
    temperature has arrived.
    """

    kind = GatewayKind.ECONNECT

    def __init__(
        self,
        host: str = ECONNECT_IP,
        port: int = ECONNECT_PORT,
        network_timeout_s: float = NETWORK_TIMEOUT_S,
        websocket_timeout_s: float = WEBSOCKET_TIMEOUT_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the eConnect client.

        Args:
            host: Gateway IP address.
            port: HTTP/WebSocket port.
            network_timeout_s: Timeout of session negotiation and connect (s).
            websocket_timeout_s: Budget for the whole WebSocket exchange (s).
            clock: Monotonic clock, replaceable for tests.
        """
        self.host = host
        self.port = port
        self.network_timeout_s = network_timeout_s
        self.websocket_timeout_s = websocket_timeout_s
        self._clock = clock

    @property
    def authority(self) -> str:
        return self.host if self.port == ECONNECT_PORT else f"{self.host}:{self.port}"

    @property
    def session_url(self) -> str:
        return f"http://{self.authority}/socket.io/1/?t=0"

    def websocket_url(self, session_id: str) -> str:
        return f"ws://{self.authority}/socket.io/1/websocket/{session_id}"

    def fetch(self, network: NetworkBinding) -> AvionicsReading | None:
        session_id = self.negotiate_session(network)
        if session_id is None:
            return None

        try:
            sock = network.create_connection((self.host, self.port), self.network_timeout_s)
        except OSError as e:
            logger.error("Connection error: %s", e)
            return None

        partial = PartialReading()
        deadline = self._clock() + self.websocket_timeout_s
        try:
            with connect(
                self.websocket_url(session_id),
                sock=sock,
                open_timeout=self.network_timeout_s,
                close_timeout=self.network_timeout_s,
            ) as websocket:
                self.exchange(websocket, partial, deadline)
        except (OSError, WebSocketException) as e:
            logger.error("Websocket error: %s", e)
        finally:
            sock.close()

        return partial.to_reading()

    def negotiate_session(self, network: NetworkBinding) -> str | None:
        """Ask the gateway for a socket.io session id.

        Args:
            network: Bound network.

        Returns:
            The session id (response body up to the first ':'), or None.
        """
        try:
            with network.session() as session:
                response = session.get(self.session_url, timeout=self.network_timeout_s)
                response.raise_for_status()
                body = response.text
        except requests.RequestException as e:
            logger.warning("eConnect gateway not reachable: %s", e)
            return None

        session_id = body.split(":", 1)[0].strip()
        if not session_id:
            logger.error("Empty socket.io session id in: %s", body)
            return None
        return session_id

    def exchange(self, websocket: ClientConnection, partial: PartialReading, deadline: float) -> None:
        """Run the request/response exchange until done or out of time.

        Args:
            websocket: Open WebSocket.
            partial: Receives the values as they arrive.
            deadline: Clock value at which to give up.
        """
        while True:
            remaining = deadline - self._clock()
            if remaining <= 0:
                logger.warning("eConnect exchange timed out")
                return

            try:
                text = websocket.recv(timeout=remaining)
            except TimeoutError:
                logger.warning("eConnect exchange timed out")
                return
            except ConnectionClosed as e:
                logger.debug("Websocket closed %s", e)
                return

            if not isinstance(text, str):
                continue

            logger.debug("Websocket received: %s", text)
            if self._handle(websocket, text, partial):
                websocket.close(NORMAL_CLOSURE_STATUS)
                return

    def _handle(self, websocket: ClientConnection, text: str, partial: PartialReading) -> bool:
        """Handle one frame; returns True once the exchange is finished."""
        if text == CONNECTED_MESSAGE:
            websocket.send(request_frame(ALTITUDE_CODE))
            websocket.send(request_frame(TEMPERATURE_CODE))
        elif text.startswith(HEARTBEAT):
            websocket.send(HEARTBEAT)
        elif f"fms_data:code:{ALTITUDE_CODE}" in text:
            partial.altitude_ft = parse_value(text)
        elif f"fms_data:code:{TEMPERATURE_CODE}" in text:
            partial.outside_temp_c = parse_value(text)
            return True
        return False
