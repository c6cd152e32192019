from __future__ import annotations

from dataclasses import dataclass

from relay_client.domain.value_objects.ids import ConnectionId, MessageId


@dataclass(frozen=True, slots=True)
class PostboxDeletionResult:
    connection_id: ConnectionId
    # Messages that failed to delete along with the postbox.
    remaining_message_ids: tuple[MessageId, ...]
