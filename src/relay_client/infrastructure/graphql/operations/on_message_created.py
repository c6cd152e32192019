"""`OnMessageCreated` subscription: query text, variables and response mapping.

The query document is sent verbatim and hashed for the operation id, so its
bytes must not change.
"""
from __future__ import annotations

import hashlib
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from relay_client.application.exceptions import InvalidArgumentError, MalformedResponseError
from relay_client.application.ports.graphql import (
    InputFieldWriter,
    ResponseReader,
    ResponseWriter,
)
from relay_client.domain.value_objects.enums import Direction
from relay_client.infrastructure.graphql.fields import (
    CustomType,
    ResponseField,
    variable_argument,
)
from relay_client.infrastructure.graphql.map_io import MapResponseReader
from relay_client.infrastructure.graphql.operations._validation import (
    check_connection_id,
    check_not_null,
)

OPERATION_DEFINITION = (
    "subscription OnMessageCreated($connectionId: ID!, $direction: Direction!) {\n"
    "  onMessageCreated(connectionId: $connectionId, direction: $direction) {\n"
    "    __typename\n"
    "    messageId\n"
    "    connectionId\n"
    "    cipherText\n"
    "    direction\n"
    "    utcTimestamp\n"
    "    nextToken\n"
    "  }\n"
    "}"
)

QUERY_DOCUMENT = OPERATION_DEFINITION

OPERATION_NAME = "OnMessageCreated"

OPERATION_ID = hashlib.sha256(QUERY_DOCUMENT.encode("utf-8")).hexdigest()


def _to_direction(value: Direction | str) -> Direction:
    try:
        return Direction(value)
    except ValueError:
        raise InvalidArgumentError(f"unknown direction: {value!r}") from None


@dataclass(frozen=True, slots=True)
class Variables:
    connection_id: str
    direction: Direction

    def value_map(self) -> Mapping[str, Any]:
        # Direction goes on the wire by symbolic name.
        return MappingProxyType({
            "connectionId": self.connection_id,
            "direction": self.direction.name,
        })

    def marshal(self, writer: InputFieldWriter) -> None:
        writer.write_string("connectionId", self.connection_id)
        writer.write_string("direction", self.direction.name)


@dataclass(frozen=True, slots=True)
class OnMessageCreated:
    """One relay message delivered on the subscription stream."""

    typename: str
    message_id: str
    connection_id: str
    cipher_text: str
    direction: Direction
    utc_timestamp: str
    next_token: str | None = None

    RESPONSE_FIELDS = (
        ResponseField.for_string("__typename"),
        ResponseField.for_custom_type("messageId", CustomType.ID),
        ResponseField.for_custom_type("connectionId", CustomType.ID),
        ResponseField.for_string("cipherText"),
        ResponseField.for_string("direction"),
        ResponseField.for_string("utcTimestamp"),
        ResponseField.for_string("nextToken", optional=True),
    )

    def __post_init__(self) -> None:
        check_not_null(self.typename, "typename")
        check_not_null(self.message_id, "message_id")
        check_not_null(self.connection_id, "connection_id")
        check_not_null(self.cipher_text, "cipher_text")
        check_not_null(self.direction, "direction")
        check_not_null(self.utc_timestamp, "utc_timestamp")
        object.__setattr__(self, "direction", _to_direction(self.direction))

    @classmethod
    def read(cls, reader: ResponseReader) -> OnMessageCreated:
        f = cls.RESPONSE_FIELDS
        typename = reader.read_string(f[0])
        message_id = reader.read_custom_type(f[1])
        connection_id = reader.read_custom_type(f[2])
        cipher_text = reader.read_string(f[3])
        direction_str = reader.read_string(f[4])
        utc_timestamp = reader.read_string(f[5])
        next_token = reader.read_string(f[6])

        try:
            direction = Direction(direction_str)
        except ValueError:
            raise MalformedResponseError(f"unknown direction: {direction_str!r}") from None

        try:
            return cls(
                typename=typename,
                message_id=message_id,
                connection_id=connection_id,
                cipher_text=cipher_text,
                direction=direction,
                utc_timestamp=utc_timestamp,
                next_token=next_token,
            )
        except InvalidArgumentError as exc:
            raise MalformedResponseError(exc.detail) from exc

    def marshal(self, writer: ResponseWriter) -> None:
        f = self.RESPONSE_FIELDS
        writer.write_string(f[0], self.typename)
        writer.write_custom(f[1], self.message_id)
        writer.write_custom(f[2], self.connection_id)
        writer.write_string(f[3], self.cipher_text)
        writer.write_string(f[4], self.direction.name)
        writer.write_string(f[5], self.utc_timestamp)
        writer.write_string(f[6], self.next_token)


@dataclass(frozen=True, slots=True)
class Data:
    """Response envelope; `on_message_created` is None for an empty message."""

    on_message_created: OnMessageCreated | None = None

    RESPONSE_FIELDS = (
        ResponseField.for_object(
            "onMessageCreated",
            arguments={
                "connectionId": variable_argument("connectionId"),
                "direction": variable_argument("direction"),
            },
            optional=True,
        ),
    )

    @classmethod
    def read(cls, reader: ResponseReader) -> Data:
        return cls(reader.read_object(cls.RESPONSE_FIELDS[0], OnMessageCreated.read))

    def marshal(self, writer: ResponseWriter) -> None:
        event = self.on_message_created
        writer.write_object(self.RESPONSE_FIELDS[0], event.marshal if event is not None else None)


class OnMessageCreatedSubscription:
    """Binds `subscription OnMessageCreated` to typed variables and response."""

    def __init__(self, connection_id: str, direction: Direction | str) -> None:
        check_connection_id(connection_id)
        check_not_null(direction, "direction")
        self._variables = Variables(connection_id, _to_direction(direction))

    @property
    def name(self) -> str:
        return OPERATION_NAME

    @property
    def operation_id(self) -> str:
        return OPERATION_ID

    @property
    def query_document(self) -> str:
        return QUERY_DOCUMENT

    @property
    def variables(self) -> Variables:
        return self._variables

    def read_response(self, reader: ResponseReader) -> Data:
        return Data.read(reader)

    def parse(self, data: Mapping[str, Any]) -> Data:
        """Decode the `data` member of a subscription response."""
        return self.read_response(MapResponseReader(data))

    def __repr__(self) -> str:
        v = self._variables
        return (
            f"OnMessageCreatedSubscription(connection_id={v.connection_id!r}, "
            f"direction={v.direction.name})"
        )
