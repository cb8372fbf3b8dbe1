"""Avionics gateway clients.

This package acquires pressure altitude and static air temperature from
the cabin gateways reachable over the aircraft Wi-Fi:
- Aspen CG100 (HTTP ping + ARINC-429 over TCP)
- Emteq eConnect (socket.io over WebSocket)
- Gogo in-flight portal (HTTP JSON)
"""

from pc12perf.avionics.arinc429 import ArincDecoder, ArincWord
from pc12perf.avionics.aspen import AspenClient
from pc12perf.avionics.base import AvionicsReading, GatewayClient, GatewayKind, PartialReading
from pc12perf.avionics.econnect import EConnectClient
from pc12perf.avionics.gogo import GogoClient
from pc12perf.avionics.network import NetworkBinding
from pc12perf.avionics.selector import GatewaySelector, SelectorState, build_clients

__all__ = [
    "ArincDecoder",
    "ArincWord",
    "AspenClient",
    "AvionicsReading",
    "EConnectClient",
    "GatewayClient",
    "GatewayKind",
    "GatewaySelector",
    "GogoClient",
    "NetworkBinding",
    "PartialReading",
    "SelectorState",
    "build_clients",
]
