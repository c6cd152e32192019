"""`OnPostBoxDeleted` subscription: reports the outcome of a postbox deletion."""
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
    "subscription OnPostBoxDeleted($connectionId: ID!) {\n"
    "  onPostBoxDeleted(connectionId: $connectionId) {\n"
    "    __typename\n"
    "    connectionId\n"
    "    remainingMessages {\n"
    "      __typename\n"
    "      messageId\n"
    "    }\n"
    "  }\n"
    "}"
)

QUERY_DOCUMENT = OPERATION_DEFINITION

OPERATION_NAME = "OnPostBoxDeleted"

OPERATION_ID = hashlib.sha256(QUERY_DOCUMENT.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class Variables:
    connection_id: str

    def value_map(self) -> Mapping[str, Any]:
        return MappingProxyType({"connectionId": self.connection_id})

    def marshal(self, writer: InputFieldWriter) -> None:
        writer.write_string("connectionId", self.connection_id)


@dataclass(frozen=True, slots=True)
class RemainingMessage:
    """A message that could not be deleted with its postbox."""

    typename: str
    message_id: str

    RESPONSE_FIELDS = (
        ResponseField.for_string("__typename"),
        ResponseField.for_custom_type("messageId", CustomType.ID),
    )

    def __post_init__(self) -> None:
        check_not_null(self.typename, "typename")
        check_not_null(self.message_id, "message_id")

    @classmethod
    def read(cls, reader: ResponseReader) -> RemainingMessage:
        f = cls.RESPONSE_FIELDS
        return cls(typename=reader.read_string(f[0]), message_id=reader.read_custom_type(f[1]))

    def marshal(self, writer: ResponseWriter) -> None:
        writer.write_string(self.RESPONSE_FIELDS[0], self.typename)
        writer.write_custom(self.RESPONSE_FIELDS[1], self.message_id)


@dataclass(frozen=True, slots=True)
class OnPostBoxDeleted:
    typename: str
    connection_id: str
    remaining_messages: tuple[RemainingMessage, ...] = ()

    RESPONSE_FIELDS = (
        ResponseField.for_string("__typename"),
        ResponseField.for_custom_type("connectionId", CustomType.ID),
        ResponseField.for_list("remainingMessages"),
    )

    def __post_init__(self) -> None:
        check_not_null(self.typename, "typename")
        check_not_null(self.connection_id, "connection_id")
        check_not_null(self.remaining_messages, "remaining_messages")
        object.__setattr__(self, "remaining_messages", tuple(self.remaining_messages))

    @classmethod
    def read(cls, reader: ResponseReader) -> OnPostBoxDeleted:
        f = cls.RESPONSE_FIELDS
        typename = reader.read_string(f[0])
        connection_id = reader.read_custom_type(f[1])
        remaining = reader.read_list(f[2], RemainingMessage.read)
        try:
            return cls(typename=typename, connection_id=connection_id, remaining_messages=remaining)
        except InvalidArgumentError as exc:
            raise MalformedResponseError(exc.detail) from exc

    def marshal(self, writer: ResponseWriter) -> None:
        f = self.RESPONSE_FIELDS
        writer.write_string(f[0], self.typename)
        writer.write_custom(f[1], self.connection_id)
        writer.write_list(f[2], [m.marshal for m in self.remaining_messages])


@dataclass(frozen=True, slots=True)
class Data:
    on_postbox_deleted: OnPostBoxDeleted | None = None

    RESPONSE_FIELDS = (
        ResponseField.for_object(
            "onPostBoxDeleted",
            arguments={"connectionId": variable_argument("connectionId")},
            optional=True,
        ),
    )

    @classmethod
    def read(cls, reader: ResponseReader) -> Data:
        return cls(reader.read_object(cls.RESPONSE_FIELDS[0], OnPostBoxDeleted.read))

    def marshal(self, writer: ResponseWriter) -> None:
        event = self.on_postbox_deleted
        writer.write_object(self.RESPONSE_FIELDS[0], event.marshal if event is not None else None)


class OnPostBoxDeletedSubscription:
    """Binds `subscription OnPostBoxDeleted` to typed variables and response."""

    def __init__(self, connection_id: str) -> None:
        self._variables = Variables(check_connection_id(connection_id))

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
        return self.read_response(MapResponseReader(data))

    def __repr__(self) -> str:
        return f"OnPostBoxDeletedSubscription(connection_id={self._variables.connection_id!r})"
