from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from relay_client.domain.value_objects.enums import RelayDirection
from relay_client.domain.value_objects.ids import ConnectionId, MessageId


@dataclass(frozen=True, slots=True)
class RelayMessage:
    message_id: MessageId
    connection_id: ConnectionId
    cipher_text: str
    direction: RelayDirection
    timestamp: datetime
