"""graphql-ws (Apollo subscriptions-transport-ws) message envelope models."""
from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from relay_client.application.exceptions import GraphQLResponseError, MalformedResponseError
from relay_client.application.ports.graphql import Subscription

T = TypeVar("T")

GRAPHQL_WS = "graphql-ws"

GQL_START = "start"  # client -> server
GQL_STOP = "stop"  # client -> server
GQL_DATA = "data"  # server -> client
GQL_ERROR = "error"  # server -> client


class StartPayload(BaseModel):
    query: str
    variables: dict[str, Any] = {}
    operation_name: str = Field(alias="operationName")

    model_config = ConfigDict(populate_by_name=True)


class DataPayload(BaseModel):
    data: dict[str, Any] | None = None
    errors: list[dict[str, Any]] | None = None


class GqlMessage(BaseModel):
    type: str
    id: str | None = None
    payload: dict[str, Any] | None = None


def start_message(subscription_id: str, operation: Subscription[Any]) -> GqlMessage:
    payload = StartPayload(
        query=operation.query_document,
        variables=dict(operation.variables.value_map()),
        operation_name=operation.name,
    )
    return GqlMessage(
        type=GQL_START,
        id=subscription_id,
        payload=payload.model_dump(by_alias=True),
    )


def stop_message(subscription_id: str) -> GqlMessage:
    return GqlMessage(type=GQL_STOP, id=subscription_id)


def _error_message(error: dict[str, Any]) -> str:
    return str(error.get("message", error))


def decode_data_message(raw: str | bytes, operation: Subscription[T]) -> T:
    """Parse an inbound `data` frame into the operation's response type.

    An `error` frame carries the server's error in its payload and raises
    GraphQLResponseError.
    """
    try:
        message = GqlMessage.model_validate_json(raw)
        if message.type == GQL_ERROR:
            raise GraphQLResponseError([_error_message(message.payload or {})])
        if message.type != GQL_DATA:
            raise MalformedResponseError(f"expected '{GQL_DATA}' message, got '{message.type}'")
        payload = DataPayload.model_validate(message.payload or {})
    except ValidationError as exc:
        raise MalformedResponseError(f"invalid {GRAPHQL_WS} frame: {exc}") from exc

    if payload.errors:
        raise GraphQLResponseError([_error_message(e) for e in payload.errors])
    return operation.parse(payload.data or {})
