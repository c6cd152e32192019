from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from relay_client.application.exceptions import MalformedResponseError
from relay_client.domain.entities.relay_message import RelayMessage
from relay_client.domain.value_objects.enums import Direction, RelayDirection
from relay_client.domain.value_objects.ids import ConnectionId, MessageId
from relay_client.infrastructure.graphql.operations.on_message_created import OnMessageCreated


def to_entity_direction(direction: Direction | str) -> RelayDirection:
    name = getattr(direction, "name", direction)
    try:
        return RelayDirection[name]
    except KeyError:
        return RelayDirection.UNKNOWN


def parse_utc_timestamp(value: str) -> datetime:
    """Accept ISO 8601 (`2024-01-01T00:00:00Z`) or RFC 1123 (`Mon, 01 Jan 2024 00:00:00 GMT`)."""
    try:
        ts = datetime.fromisoformat(value)
    except ValueError:
        try:
            ts = parsedate_to_datetime(value)
        except (TypeError, ValueError):
            raise MalformedResponseError(f"invalid utcTimestamp: {value!r}") from None
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def event_to_entity(event: OnMessageCreated) -> RelayMessage:
    return RelayMessage(
        message_id=MessageId(event.message_id),
        connection_id=ConnectionId(event.connection_id),
        cipher_text=event.cipher_text,
        direction=to_entity_direction(event.direction),
        timestamp=parse_utc_timestamp(event.utc_timestamp),
    )


def entity_to_payload(message: RelayMessage) -> dict[str, str]:
    return {
        "message_id": message.message_id,
        "connection_id": message.connection_id,
        "cipher_text": message.cipher_text,
        "direction": message.direction.value,
        "timestamp": message.timestamp.isoformat(),
    }
