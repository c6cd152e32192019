from __future__ import annotations

from typing import Protocol

from relay_client.domain.entities.postbox_deletion_result import PostboxDeletionResult
from relay_client.domain.entities.relay_message import RelayMessage
from relay_client.domain.value_objects.enums import ConnectionState


class RelayEventSubscriber(Protocol):
    """Receives relay events for one connection.

    Nothing is delivered before the connection state becomes CONNECTED and
    nothing after it becomes DISCONNECTED; a disconnected consumer must
    subscribe again.
    """

    async def message_incoming(self, message: RelayMessage) -> None: ...

    async def postbox_deleted(self, update: PostboxDeletionResult) -> None: ...

    async def connection_status_changed(self, state: ConnectionState) -> None: ...
