"""Tests for the eConnect gateway client."""

from unittest.mock import MagicMock, patch

import pytest
import requests
from websockets.exceptions import ConnectionClosedError, InvalidHandshake

from pc12perf.avionics.base import AvionicsReading
from pc12perf.avionics.econnect import (
    CONNECTED_MESSAGE,
    EConnectClient,
    parse_value,
    request_frame,
)

ALTITUDE_FRAME = (
    '5:::{"name":"fms_data:code:2","args":[{"id":2,"gui_code":2,'
    '"label":"Altitude","units":"Feet","value":"24999"}]}'
)
TEMPERATURE_FRAME = (
    '5:::{"name":"fms_data:code:13","args":[{"id":13,"gui_code":13,'
    '"label":"Outside Air Temp","units":"Celsius","value":"-31"}]}'
)


class FakeWebSocket:
    """Scripted websocket connection.

    Items are returned by recv() in order; exceptions are raised instead.
    An exhausted script behaves like a silent peer.
    """

    def __init__(self, script: list, on_recv=None) -> None:
        self.script = list(script)
        self.on_recv = on_recv
        self.sent: list[str] = []
        self.close_code: int | None = None
        self.recv_timeouts: list[float] = []

    def __enter__(self) -> "FakeWebSocket":
        return self

    def __exit__(self, *exc_info) -> bool:
        return False

    def recv(self, timeout: float | None = None):
        self.recv_timeouts.append(timeout)
        if self.on_recv is not None:
            self.on_recv()
        if not self.script:
            raise TimeoutError("timed out")
        item = self.script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def send(self, message: str) -> None:
        self.sent.append(message)

    def close(self, code: int = 1000) -> None:
        self.close_code = code


class TestFrames:
    """Test frame building and parsing."""

    def test_request_frame(self) -> None:
        """Test the data request frame matches the gateway's format."""
        assert request_frame(2) == '5:::{"name":"fms_data:code","args":["2"]}'
        assert request_frame(13) == '5:::{"name":"fms_data:code","args":["13"]}'

    def test_parse_value(self) -> None:
        """Test the value is read from the first argument."""
        assert parse_value(ALTITUDE_FRAME) == 24999
        assert parse_value(TEMPERATURE_FRAME) == -31

    @pytest.mark.parametrize(
        "text",
        [
            '5:::{"name":"fms_data:code:2","args":[{"value":"N/A"}]}',
            '5:::{"name":"fms_data:code:2","args":[]}',
            '5:::{"name":"fms_data:code:2"}',
            "5:::not json",
        ],
    )
    def test_parse_failures(self, text: str) -> None:
        """Test malformed frames yield None instead of raising."""
        assert parse_value(text) is None


class TestEConnectClient:
    """Test EConnectClient.fetch."""

    @pytest.fixture
    def client(self, clock) -> EConnectClient:
        return EConnectClient(clock=clock)

    @pytest.fixture
    def session_ok(self, http_session: MagicMock, response_factory) -> None:
        http_session.get.return_value = response_factory(
            200, text="4f2a9c:60:60:websocket,flashsocket"
        )

    @pytest.fixture
    def sock(self, network: MagicMock, fake_socket_factory):
        sock = fake_socket_factory()
        network.create_connection.return_value = sock
        return sock

    def fetch_with(self, client: EConnectClient, network: MagicMock, websocket: FakeWebSocket):
        with patch("pc12perf.avionics.econnect.connect", return_value=websocket) as connect:
            return client.fetch(network), connect

    def test_urls(self, client: EConnectClient) -> None:
        """Test session and websocket URLs on the default port."""
        assert client.session_url == "http://10.0.9.1/socket.io/1/?t=0"
        assert client.websocket_url("abc") == "ws://10.0.9.1/socket.io/1/websocket/abc"

    def test_urls_non_default_port(self, clock) -> None:
        """Test a non-default port appears in the URLs."""
        client = EConnectClient(host="127.0.0.1", port=8080, clock=clock)

        assert client.session_url == "http://127.0.0.1:8080/socket.io/1/?t=0"

    def test_fetch_success(
        self, client: EConnectClient, network: MagicMock, session_ok, sock
    ) -> None:
        """Test the full handshake, request, and response exchange."""
        websocket = FakeWebSocket(["1::", CONNECTED_MESSAGE, ALTITUDE_FRAME, TEMPERATURE_FRAME])

        reading, connect = self.fetch_with(client, network, websocket)

        assert reading == AvionicsReading(altitude_ft=24999, outside_temp_c=-31)
        assert websocket.sent == [request_frame(2), request_frame(13)]
        assert websocket.close_code == 1000
        assert sock.closed

        args, kwargs = connect.call_args
        assert args[0] == "ws://10.0.9.1/socket.io/1/websocket/4f2a9c"
        assert kwargs["sock"] is sock
        network.create_connection.assert_called_once_with(("10.0.9.1", 80), 1.0)

    def test_heartbeat_echo(
        self, client: EConnectClient, network: MagicMock, session_ok, sock
    ) -> None:
        """Test heartbeats are answered to keep the session open."""
        websocket = FakeWebSocket([CONNECTED_MESSAGE, "2::", ALTITUDE_FRAME, TEMPERATURE_FRAME])

        reading, _ = self.fetch_with(client, network, websocket)

        assert reading is not None
        assert websocket.sent == [request_frame(2), request_frame(13), "2::"]

    def test_unparseable_altitude(
        self, client: EConnectClient, network: MagicMock, session_ok, sock
    ) -> None:
        """Test a bad altitude value leaves the reading incomplete."""
        bad_altitude = '5:::{"name":"fms_data:code:2","args":[{"value":"----"}]}'
        websocket = FakeWebSocket([CONNECTED_MESSAGE, bad_altitude, TEMPERATURE_FRAME])

        reading, _ = self.fetch_with(client, network, websocket)

        assert reading is None
        assert websocket.close_code == 1000

    def test_silent_gateway(
        self, client: EConnectClient, network: MagicMock, session_ok, sock
    ) -> None:
        """Test a gateway that stops sending yields no reading."""
        websocket = FakeWebSocket([CONNECTED_MESSAGE, ALTITUDE_FRAME])

        reading, _ = self.fetch_with(client, network, websocket)

        assert reading is None
        assert sock.closed

    def test_deadline(self, network: MagicMock, session_ok, sock, clock) -> None:
        """Test the exchange stops once the 3 s budget is used up."""
        client = EConnectClient(clock=clock)
        websocket = FakeWebSocket(
            [CONNECTED_MESSAGE, ALTITUDE_FRAME, TEMPERATURE_FRAME],
            on_recv=lambda: clock.advance(1.5),
        )

        reading, _ = self.fetch_with(client, network, websocket)

        assert reading is None
        assert websocket.script == [TEMPERATURE_FRAME]
        # Each receive only waits for what is left of the budget
        assert websocket.recv_timeouts == [pytest.approx(3.0), pytest.approx(1.5)]

    def test_connection_closed(
        self, client: EConnectClient, network: MagicMock, session_ok, sock
    ) -> None:
        """Test the gateway closing the connection mid-exchange."""
        websocket = FakeWebSocket(
            [CONNECTED_MESSAGE, ALTITUDE_FRAME, ConnectionClosedError(None, None)]
        )

        reading, _ = self.fetch_with(client, network, websocket)

        assert reading is None
        assert sock.closed

    def test_handshake_failure(
        self, client: EConnectClient, network: MagicMock, session_ok, sock
    ) -> None:
        """Test a failed websocket handshake yields no reading."""
        with patch(
            "pc12perf.avionics.econnect.connect", side_effect=InvalidHandshake("bad upgrade")
        ):
            assert client.fetch(network) is None
        assert sock.closed

    def test_session_negotiation_failure(
        self, client: EConnectClient, network: MagicMock, http_session: MagicMock
    ) -> None:
        """Test an unreachable gateway ends the fetch before any websocket."""
        http_session.get.side_effect = requests.Timeout("timed out")

        with patch("pc12perf.avionics.econnect.connect") as connect:
            assert client.fetch(network) is None
            connect.assert_not_called()
        network.create_connection.assert_not_called()

    def test_empty_session_id(
        self, client: EConnectClient, network: MagicMock, http_session: MagicMock,
        response_factory,
    ) -> None:
        """Test an empty session id is rejected."""
        http_session.get.return_value = response_factory(200, text=":60:60:websocket")

        assert client.negotiate_session(network) is None
