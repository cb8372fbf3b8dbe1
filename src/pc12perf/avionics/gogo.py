"""Gogo in-flight portal client.

Validated with L3 Avance 4.3. A single HTTP GET returns flight data as JSON.

Sample response (outsideTemp is absent while on the ground):
    {"altitudeFeet":23005,"departureId":"KBFI","destinationId":"KPAO",
     "groundSpeedKnots":272,"outsideTemp":-28,"positionValid":true,
     "presentLat":38.54950,"presentLon":-122.91160,"presentPhase":"Cruise",
     "time":1645309110,"trueHeading":175,"weightOnWheels":0}
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import requests

from pc12perf.avionics.base import AvionicsReading, GatewayClient, GatewayKind
from pc12perf.avionics.network import NetworkBinding

logger = logging.getLogger(__name__)

GOGO_URL = "https://fp3d.gogo.aero/fp3d_fcgi-php/portal/public/index.php?_url=/index/getFile&path=last"
NETWORK_TIMEOUT_S = 1.0
POSITION_TIMEOUT_S = 60.0


@dataclass
class PositionWatch:
    """Last reported position and when it last changed.

    The portal feed has been seen to freeze while still answering with
    HTTP 200; a position that stops moving is how that shows up.

    Attributes:
        latitude: Last reported latitude, None before the first fetch
        longitude: Last reported longitude, None before the first fetch
        last_change: Clock value of the last position change
    """

    latitude: Any = None
    longitude: Any = None
    last_change: float = 0.0

    def update(self, latitude: Any, longitude: Any, now: float, timeout_s: float) -> bool:
        """Record a reported position.

        Args:
            latitude: Reported latitude.
            longitude: Reported longitude.
            now: Current clock value (s).
            timeout_s: How long an unchanged position stays acceptable (s).

        Returns:
            False if the position has not changed for longer than timeout_s.
        """
        changed = False
        if latitude != self.latitude:
            self.latitude = latitude
            changed = True
        if longitude != self.longitude:
            self.longitude = longitude
            changed = True

        if changed:
            self.last_change = now
            return True

        return now - self.last_change <= timeout_s


class GogoClient(GatewayClient):
    """Client for the Gogo in-flight portal.

    Examples:
        >>> client = GogoClient()
        >>> reading = client.fetch(network)
    """

    kind = GatewayKind.GOGO

    def __init__(
        self,
        url: str = GOGO_URL,
        network_timeout_s: float = NETWORK_TIMEOUT_S,
        position_timeout_s: float = POSITION_TIMEOUT_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the Gogo client.

        Args:
            url: Portal flight data URL.
            network_timeout_s: Connect/read timeout (s).
            position_timeout_s: Longest acceptable unchanged position (s).
            clock: Monotonic clock, replaceable for tests.
        """
        self.url = url
        self.network_timeout_s = network_timeout_s
        self.position_timeout_s = position_timeout_s
        self.position_watch = PositionWatch()
        self._clock = clock

    def fetch(self, network: NetworkBinding) -> AvionicsReading | None:
        try:
            with network.session() as session:
                response = session.get(self.url, timeout=self.network_timeout_s)
                response.raise_for_status()
                body = response.json()
        except requests.JSONDecodeError:
            logger.error("Could not parse: %s", response.text)
            return None
        except requests.RequestException as e:
            logger.error("Connection error: %s", e)
            return None

        try:
            altitude = int(body["altitudeFeet"])
            outside_temp = int(body["outsideTemp"])
            latitude = body["presentLat"]
            longitude = body["presentLon"]
        except (KeyError, TypeError, ValueError):
            logger.error("Could not parse: %s", body)
            return None

        now = self._clock()
        if not self.position_watch.update(latitude, longitude, now, self.position_timeout_s):
            logger.warning("Liveness check failed: position frozen at %s, %s", latitude, longitude)
            return None

        return AvionicsReading(altitude_ft=altitude, outside_temp_c=outside_temp)
