"""Pytest configuration and fixtures for all tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from pc12perf.avionics.network import NetworkBinding
from pc12perf.core import logging_system


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSocket:
    """Socket double that serves a fixed byte stream.

    recv() returns at most chunk_size bytes at a time, then b"" (peer closed)
    once the stream is exhausted, or raises the configured error instead.
    """

    def __init__(self, data: bytes = b"", chunk_size: int = 3, eof_error: Exception | None = None):
        self.data = bytearray(data)
        self.chunk_size = chunk_size
        self.eof_error = eof_error
        self.timeout: float | None = None
        self.shutdown_called = False
        self.closed = False

    def settimeout(self, timeout: float) -> None:
        self.timeout = timeout

    def recv(self, size: int) -> bytes:
        if not self.data:
            if self.eof_error is not None:
                raise self.eof_error
            return b""
        n = min(size, self.chunk_size, len(self.data))
        chunk = bytes(self.data[:n])
        del self.data[:n]
        return chunk

    def shutdown(self, how: int) -> None:
        self.shutdown_called = True

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path: Path):
    """Keep log files out of the user's home directory."""
    log_dir = tmp_path / "logs"
    with patch.object(logging_system, "get_platform_log_dir", return_value=log_dir):
        yield log_dir
    logging_system.shutdown_logging()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_socket_factory():
    """Build FakeSocket instances."""
    return FakeSocket


@pytest.fixture
def http_session() -> MagicMock:
    """requests.Session double, usable as a context manager."""
    session = MagicMock()
    session.__enter__.return_value = session
    session.__exit__.return_value = False
    return session


@pytest.fixture
def network(http_session: MagicMock) -> MagicMock:
    """NetworkBinding double handing out http_session."""
    binding = MagicMock(spec=NetworkBinding)
    binding.session.return_value = http_session
    return binding


def make_response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    """Build a requests.Response double."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = requests.JSONDecodeError("Expecting value", text, 0)
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def response_factory():
    """Build requests.Response doubles."""
    return make_response
