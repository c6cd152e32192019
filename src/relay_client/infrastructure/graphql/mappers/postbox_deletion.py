from __future__ import annotations

from relay_client.domain.entities.postbox_deletion_result import PostboxDeletionResult
from relay_client.domain.value_objects.ids import ConnectionId, MessageId
from relay_client.infrastructure.graphql.operations.on_postbox_deleted import OnPostBoxDeleted


def event_to_entity(event: OnPostBoxDeleted) -> PostboxDeletionResult:
    return PostboxDeletionResult(
        connection_id=ConnectionId(event.connection_id),
        remaining_message_ids=tuple(MessageId(m.message_id) for m in event.remaining_messages),
    )


def entity_to_payload(result: PostboxDeletionResult) -> dict[str, object]:
    return {
        "connection_id": result.connection_id,
        "remaining_message_ids": list(result.remaining_message_ids),
    }
