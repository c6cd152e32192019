from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Schema enum `Direction`; members are sent by name."""

    INBOUND = "INBOUND"
    OUTBOUND = "OUTBOUND"


class RelayDirection(StrEnum):
    INBOUND = "INBOUND"
    OUTBOUND = "OUTBOUND"
    # Wire value this client does not know; the library may need updating.
    UNKNOWN = "UNKNOWN"


class ConnectionState(StrEnum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
