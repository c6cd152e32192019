from __future__ import annotations

import pytest

from relay_client.domain.value_objects.enums import ConnectionState
from relay_client.services.subscription_manager import SubscriptionManager
from relay_client.domain.entities.postbox_deletion_result import PostboxDeletionResult
from relay_client.domain.value_objects.ids import ConnectionId, MessageId
from tests.conftest import FakeSubscriber, make_relay_message


@pytest.mark.asyncio
async def test_message_goes_only_to_its_connection():
    manager = SubscriptionManager()
    first, second = FakeSubscriber(), FakeSubscriber()
    manager.replace_subscriber("c1", first)
    manager.replace_subscriber("c2", second)

    await manager.relay_message_incoming("c1", make_relay_message())

    assert len(first.messages) == 1
    assert second.messages == []


@pytest.mark.asyncio
async def test_replace_subscriber():
    manager = SubscriptionManager()
    old, new = FakeSubscriber(), FakeSubscriber()
    manager.replace_subscriber("c1", old)
    manager.replace_subscriber("c1", new)

    await manager.relay_message_incoming("c1", make_relay_message())

    assert old.messages == []
    assert len(new.messages) == 1


@pytest.mark.asyncio
async def test_failing_subscriber_does_not_raise():
    manager = SubscriptionManager()
    manager.replace_subscriber("c1", FakeSubscriber(fail=True))

    await manager.relay_message_incoming("c1", make_relay_message())
    await manager.connection_status_changed("c1", ConnectionState.CONNECTED, expected_change=True)


@pytest.mark.asyncio
async def test_unexpected_disconnect_drops_subscriber(subscriber):
    manager = SubscriptionManager()
    manager.replace_subscriber("c1", subscriber)

    await manager.connection_status_changed("c1", ConnectionState.DISCONNECTED, expected_change=False)

    assert subscriber.states == [ConnectionState.DISCONNECTED]
    assert not manager.has_subscriber("c1")


@pytest.mark.asyncio
async def test_expected_disconnect_keeps_subscriber(subscriber):
    manager = SubscriptionManager()
    manager.replace_subscriber("c1", subscriber)

    await manager.connection_status_changed("c1", ConnectionState.DISCONNECTED, expected_change=True)

    assert subscriber.states == [ConnectionState.DISCONNECTED]
    assert manager.has_subscriber("c1")


def test_remove_subscribers(subscriber):
    manager = SubscriptionManager()
    manager.replace_subscriber("c1", subscriber)
    manager.replace_subscriber("c2", subscriber)

    manager.remove_subscriber("c1")
    manager.remove_subscriber("missing")
    assert not manager.has_subscriber("c1")
    assert manager.has_subscriber("c2")

    manager.remove_all_subscribers()
    assert not manager.has_subscriber("c2")


@pytest.mark.asyncio
async def test_postbox_deleted_goes_only_to_its_connection():
    manager = SubscriptionManager()
    first, second = FakeSubscriber(), FakeSubscriber()
    manager.replace_subscriber("c1", first)
    manager.replace_subscriber("c2", second)
    update = PostboxDeletionResult(ConnectionId("c1"), (MessageId("m1"),))

    await manager.postbox_deleted("c1", update)
    await manager.postbox_deleted("missing", update)

    assert first.deletions == [update]
    assert second.deletions == []


@pytest.mark.asyncio
async def test_failing_subscriber_on_postbox_deleted_does_not_raise():
    manager = SubscriptionManager()
    manager.replace_subscriber("c1", FakeSubscriber(fail=True))

    await manager.postbox_deleted("c1", PostboxDeletionResult(ConnectionId("c1"), ()))
