"""Common types for avionics gateway clients.

Every gateway variant (Aspen, eConnect, Gogo) implements GatewayClient and
returns an AvionicsReading, or None when no complete reading could be
acquired in this poll cycle.

Typical usage:
    from pc12perf.avionics.base import GatewayClient, AvionicsReading

    class MyGateway(GatewayClient):
        kind = GatewayKind.GOGO

        def fetch(self, network: NetworkBinding) -> AvionicsReading | None:
            return AvionicsReading(altitude_ft=24000, outside_temp_c=-31)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pc12perf.avionics.network import NetworkBinding


class GatewayKind(Enum):
    """Avionics gateway variants.

    AUTO_DETECT is only a configuration value: it asks the selector to
    rotate among the concrete variants. It never identifies a client.
    """

    ASPEN = "aspen"
    ECONNECT = "econnect"
    GOGO = "gogo"
    AUTO_DETECT = "auto_detect"

    @property
    def label(self) -> str:
        """Display name shown to the pilot."""
        return _GATEWAY_LABELS[self]

    @classmethod
    def concrete(cls) -> tuple["GatewayKind", ...]:
        """Variants that have a client, in auto-detect probing order."""
        return (cls.ASPEN, cls.ECONNECT, cls.GOGO)


_GATEWAY_LABELS = {
    GatewayKind.ASPEN: "Aspen",
    GatewayKind.ECONNECT: "eConnect",
    GatewayKind.GOGO: "Gogo",
    GatewayKind.AUTO_DETECT: "Auto-detect",
}


@dataclass(frozen=True)
class AvionicsReading:
    """One complete set of flight parameters from a gateway.

    Attributes:
        altitude_ft: Pressure altitude (ft)
        outside_temp_c: Static air temperature (°C)
    """

    altitude_ft: int
    outside_temp_c: int


@dataclass
class PartialReading:
    """Values resolved so far while a fetch is in progress.

    Never handed out as a reading: to_reading() only builds an
    AvionicsReading once both fields are known.
    """

    altitude_ft: int | None = None
    outside_temp_c: int | None = None

    @property
    def complete(self) -> bool:
        return self.altitude_ft is not None and self.outside_temp_c is not None

    def to_reading(self) -> AvionicsReading | None:
        if self.altitude_ft is None or self.outside_temp_c is None:
            return None
        return AvionicsReading(altitude_ft=self.altitude_ft, outside_temp_c=self.outside_temp_c)


class GatewayClient(ABC):
    """Abstract interface for avionics gateway clients.

    Clients encapsulate their own probe, transport, and decoding. fetch()
    never raises for transport or protocol problems: those are logged and
    reported as None so the polling loop simply retries.

    Clients are long-lived; any state they keep across calls (for example
    the Gogo position watch) belongs to the instance.
    """

    kind: GatewayKind

    @property
    def label(self) -> str:
        """Display name of this gateway."""
        return self.kind.label

    @abstractmethod
    def fetch(self, network: "NetworkBinding") -> AvionicsReading | None:
        """Acquire altitude and outside air temperature.

        Args:
            network: Bound network used for every connection this call opens.

        Returns:
            A complete reading, or None if the gateway is absent, silent,
            or sent unusable data within the time budget.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label})"
