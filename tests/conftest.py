"""Shared test fixtures."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pytest

from relay_client.domain.entities.postbox_deletion_result import PostboxDeletionResult
from relay_client.domain.entities.relay_message import RelayMessage
from relay_client.domain.value_objects.enums import ConnectionState, Direction, RelayDirection
from relay_client.domain.value_objects.ids import ConnectionId, MessageId
from relay_client.infrastructure.graphql.operations.on_message_created import OnMessageCreated


def make_event(
    *,
    message_id: str = "m1",
    connection_id: str = "c1",
    cipher_text: str = "abcd",
    direction: Direction = Direction.INBOUND,
    utc_timestamp: str = "2024-01-01T00:00:00Z",
    next_token: str | None = None,
) -> OnMessageCreated:
    return OnMessageCreated(
        typename="Message",
        message_id=message_id,
        connection_id=connection_id,
        cipher_text=cipher_text,
        direction=direction,
        utc_timestamp=utc_timestamp,
        next_token=next_token,
    )


def make_event_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "__typename": "Message",
        "messageId": "m1",
        "connectionId": "c1",
        "cipherText": "abcd",
        "direction": "INBOUND",
        "utcTimestamp": "2024-01-01T00:00:00Z",
        "nextToken": None,
    }
    payload.update(overrides)
    return payload


def make_postbox_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "__typename": "PostBoxDeleted",
        "connectionId": "c1",
        "remainingMessages": [
            {"__typename": "RemainingMessage", "messageId": "m1"},
            {"__typename": "RemainingMessage", "messageId": "m2"},
        ],
    }
    payload.update(overrides)
    return payload


def make_relay_message(*, connection_id: str = "c1", message_id: str = "m1") -> RelayMessage:
    return RelayMessage(
        message_id=MessageId(message_id),
        connection_id=ConnectionId(connection_id),
        cipher_text="abcd",
        direction=RelayDirection.INBOUND,
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@dataclass
class FakeSubscriber:
    messages: list[RelayMessage] = field(default_factory=list)
    deletions: list[PostboxDeletionResult] = field(default_factory=list)
    states: list[ConnectionState] = field(default_factory=list)
    fail: bool = False

    async def message_incoming(self, message: RelayMessage) -> None:
        if self.fail:
            raise RuntimeError("subscriber blew up")
        self.messages.append(message)

    async def postbox_deleted(self, update: PostboxDeletionResult) -> None:
        if self.fail:
            raise RuntimeError("subscriber blew up")
        self.deletions.append(update)

    async def connection_status_changed(self, state: ConnectionState) -> None:
        if self.fail:
            raise RuntimeError("subscriber blew up")
        self.states.append(state)


@dataclass
class FakePublisher:
    published: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    async def publish(self, channel: str, payload: dict[str, Any]) -> None:
        self.published.append((channel, payload))


@dataclass
class FakeRedis:
    published: list[tuple[str, str]] = field(default_factory=list)
    closed: bool = False

    async def publish(self, channel: str, message: str) -> int:
        self.published.append((channel, message))
        return 1

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def subscriber() -> FakeSubscriber:
    return FakeSubscriber()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()
