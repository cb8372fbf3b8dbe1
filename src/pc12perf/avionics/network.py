"""Network binding for gateway connections.

The gateways live on the aircraft Wi-Fi, which is usually not the default
route of the host (cellular or wired links may also be up). A NetworkBinding
pins every socket a client opens to the Wi-Fi interface by binding it to the
interface's local address.

How that address is obtained (joining the SSID, waiting for DHCP) is the
caller's business; clients only ever see the binding.
"""

import logging
import socket

import requests
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)


class SourceAddressAdapter(HTTPAdapter):
    """HTTP adapter whose connections originate from a fixed local address."""

    def __init__(self, source_address: tuple[str, int], **kwargs) -> None:
        self._source_address = source_address
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **kwargs):
        kwargs["source_address"] = self._source_address
        return super().init_poolmanager(*args, **kwargs)


class NetworkBinding:
    """Opaque handle for the network the gateways are reachable on.

    Examples:
        >>> network = NetworkBinding("10.22.44.23")
        >>> sock = network.create_connection(("10.22.44.1", 9399), timeout=3.0)
        >>> with network.session() as session:
        ...     session.get("http://10.22.44.1:8188/wdls/ping", timeout=1.0)
    """

    def __init__(self, local_address: str | None = None) -> None:
        """Initialize the binding.

        Args:
            local_address: IP address of the Wi-Fi interface. None leaves
                route selection to the operating system.
        """
        self.local_address = local_address

    @property
    def source_address(self) -> tuple[str, int] | None:
        if self.local_address is None:
            return None
        return (self.local_address, 0)

    def create_connection(self, address: tuple[str, int], timeout: float) -> socket.socket:
        """Open a TCP connection through this network.

        Args:
            address: (host, port) to connect to.
            timeout: Connect timeout (s); also left as the socket timeout.

        Returns:
            Connected socket. The caller owns it and must close it.

        Raises:
            OSError: If the connection cannot be established.
        """
        logger.debug("Connecting to %s:%d via %s", address[0], address[1], self)
        return socket.create_connection(address, timeout=timeout, source_address=self.source_address)

    def session(self) -> requests.Session:
        """Create an HTTP session whose connections go through this network."""
        session = requests.Session()
        if self.source_address is not None:
            adapter = SourceAddressAdapter(self.source_address)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        return session

    def __repr__(self) -> str:
        return f"NetworkBinding({self.local_address or 'default route'})"
