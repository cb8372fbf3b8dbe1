"""Aspen CG100 gateway client.

HTTP ping to confirm the gateway, then ARINC-429 words over a raw TCP stream.

Stream framing:
    2-byte length (big-endian) | 0x00 0x02 | length bytes of 4-byte ARINC-429 words

Typical usage:
    from pc12perf.avionics.aspen import AspenClient
    from pc12perf.avionics.network import NetworkBinding

    client = AspenClient()
    reading = client.fetch(NetworkBinding())
"""

import logging
import socket
import struct
import time
from collections.abc import Callable

import requests

from pc12perf.avionics.arinc429 import (
    BARO_ALTITUDE_LABEL,
    SAT_LABEL,
    WORD_SIZE,
    ArincDecoder,
)
from pc12perf.avionics.base import AvionicsReading, GatewayClient, GatewayKind, PartialReading
from pc12perf.avionics.network import NetworkBinding

logger = logging.getLogger(__name__)

ASPEN_IP = "10.22.44.1"
ASPEN_PING_PORT = 8188
ASPEN_SOCKET_PORT = 9399
PROBE_TIMEOUT_S = 1.0
SOCKET_TIMEOUT_S = 3.0
# Credit Chad Brubaker for the protocol analysis behind these values
CREDENTIALS = "SG9uZXl3ZWxsUDpYUmZ0UFprUXkyZVpiSmphNjVuc0pVMis="

FRAME_HEADER = struct.Struct(">H2s")
FRAME_PAD = b"\x00\x02"


class FrameError(Exception):
    """Raised when the stream does not follow the gateway framing."""


def _recv_exactly(sock: socket.socket, size: int) -> bytes:
    """Read exactly size bytes.

    Raises:
        ConnectionError: If the peer closes the stream first.
        TimeoutError: If the socket read timeout expires.
    """
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise ConnectionError(f"Stream closed after {len(chunks)} of {size} bytes")
        chunks.extend(chunk)
    return bytes(chunks)


def read_frame(sock: socket.socket) -> list[bytes]:
    """Read one frame and split it into ARINC-429 words.

    Args:
        sock: Connected gateway socket.

    Returns:
        The words carried by the frame.

    Raises:
        FrameError: If the padding is not 0x0002 or the length is not a
            multiple of 4.
        ConnectionError: If the stream ends mid-frame.
        TimeoutError: If the socket read timeout expires.
    """
    length, pad = FRAME_HEADER.unpack(_recv_exactly(sock, FRAME_HEADER.size))
    if pad != FRAME_PAD or length % WORD_SIZE != 0:
        raise FrameError(f"Invalid length/padding: length={length} pad={pad.hex()}")

    return [_recv_exactly(sock, WORD_SIZE) for _ in range(length // WORD_SIZE)]


class AspenClient(GatewayClient):
    """Client for the Aspen CG100 gateway.

    Examples:
        >>> client = AspenClient(altitude_label=203)
        >>> reading = client.fetch(network)
        >>> if reading:
        ...     print(reading.altitude_ft, reading.outside_temp_c)
    """

    kind = GatewayKind.ASPEN

    def __init__(
        self,
        host: str = ASPEN_IP,
        ping_port: int = ASPEN_PING_PORT,
        socket_port: int = ASPEN_SOCKET_PORT,
        credentials: str = CREDENTIALS,
        probe_timeout_s: float = PROBE_TIMEOUT_S,
        socket_timeout_s: float = SOCKET_TIMEOUT_S,
        altitude_label: int = BARO_ALTITUDE_LABEL,
        temperature_label: int = SAT_LABEL,
        decoder: ArincDecoder | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the Aspen client.

        Args:
            host: Gateway IP address.
            ping_port: HTTP port of the ping service.
            socket_port: TCP port of the ARINC-429 stream.
            credentials: Basic auth token for the ping service.
            probe_timeout_s: Timeout of the HTTP probe (s).
            socket_timeout_s: Connect/read timeout and total read budget (s).
            altitude_label: Label carrying altitude (203 or 204 depending on
                gateway firmware).
            temperature_label: Label carrying static air temperature.
            decoder: ARINC-429 decoder; must have ranges for both labels.
            clock: Monotonic clock, replaceable for tests.
        """
        self.host = host
        self.ping_port = ping_port
        self.socket_port = socket_port
        self.credentials = credentials
        self.probe_timeout_s = probe_timeout_s
        self.socket_timeout_s = socket_timeout_s
        self.altitude_label = altitude_label
        self.temperature_label = temperature_label
        self.decoder = decoder or ArincDecoder()
        self._clock = clock

    @property
    def ping_url(self) -> str:
        return f"http://{self.host}:{self.ping_port}/wdls/ping"

    def fetch(self, network: NetworkBinding) -> AvionicsReading | None:
        if not self.probe(network):
            return None

        try:
            sock = network.create_connection((self.host, self.socket_port), self.socket_timeout_s)
        except OSError as e:
            logger.error("Socket connection error: %s", e)
            return None

        partial = PartialReading()
        try:
            sock.settimeout(self.socket_timeout_s)
            partial = self.read_stream(sock)
        except OSError as e:
            logger.error("Aspen socket error: %s", e)
        finally:
            self._close(sock)

        return partial.to_reading()

    def probe(self, network: NetworkBinding) -> bool:
        """Check that the gateway answers its ping service.

        Args:
            network: Bound network.

        Returns:
            True if the ping returned a successful status.
        """
        headers = {
            "Authorization": f"basic {self.credentials}",
            "Accept": "application/json",
        }
        try:
            with network.session() as session:
                response = session.get(self.ping_url, headers=headers, timeout=self.probe_timeout_s)
                response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Aspen gateway not reachable: %s", e)
            return False

        logger.info("Found Aspen gateway at %s", self.host)
        return True

    def read_stream(self, sock: socket.socket) -> PartialReading:
        """Read frames until both values are resolved or the budget expires.

        Framing violations, timeouts, and a closed stream end the read;
        whatever was decoded up to that point is kept.

        Args:
            sock: Connected gateway socket.

        Returns:
            Values resolved so far.
        """
        partial = PartialReading()
        start = self._clock()

        try:
            while True:
                for word in read_frame(sock):
                    self._apply_word(word, partial)

                if partial.complete or self._clock() - start >= self.socket_timeout_s:
                    break

        except FrameError as e:
            logger.error("Aspen protocol violation: %s", e)
        except OSError as e:
            logger.error("Aspen socket error: %s", e)

        return partial

    def _apply_word(self, word: bytes, partial: PartialReading) -> None:
        decoded = self.decoder.decode(word)

        if decoded.label == self.temperature_label:
            partial.outside_temp_c = decoded.as_int()
            logger.info("ARINC-429 SAT: %s", partial.outside_temp_c)
        elif decoded.label == self.altitude_label:
            partial.altitude_ft = decoded.as_int()
            logger.info("ARINC-429 altitude: %s", partial.altitude_ft)

    def _close(self, sock: socket.socket) -> None:
        logger.debug("Closing Aspen socket")
        try:
            sock.shutdown(socket.SHUT_WR)
        except OSError as e:
            logger.debug("Socket shutdown failed: %s", e)
        finally:
            sock.close()
