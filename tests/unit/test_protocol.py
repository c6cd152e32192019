from __future__ import annotations

import json

import pytest

from relay_client.application.exceptions import GraphQLResponseError, MalformedResponseError
from relay_client.domain.value_objects.enums import Direction
from relay_client.infrastructure.graphql.operations.on_message_created import (
    QUERY_DOCUMENT,
    OnMessageCreatedSubscription,
)
from relay_client.infrastructure.graphql.protocol import (
    decode_data_message,
    start_message,
    stop_message,
)
from tests.conftest import make_event, make_event_payload


@pytest.fixture
def operation() -> OnMessageCreatedSubscription:
    return OnMessageCreatedSubscription("c1", Direction.INBOUND)


def _frame(payload: dict | None, type_: str = "data") -> str:
    return json.dumps({"id": "1", "type": type_, "payload": payload})


def test_start_message_wire_format(operation):
    raw = start_message("1", operation).model_dump_json(exclude_none=True)

    assert json.loads(raw) == {
        "type": "start",
        "id": "1",
        "payload": {
            "query": QUERY_DOCUMENT,
            "variables": {"connectionId": "c1", "direction": "INBOUND"},
            "operationName": "OnMessageCreated",
        },
    }


def test_stop_message():
    assert stop_message("1").model_dump(exclude_none=True) == {"type": "stop", "id": "1"}


def test_decode_data_message(operation):
    data = decode_data_message(_frame({"data": {"onMessageCreated": make_event_payload()}}), operation)
    assert data.on_message_created == make_event()


def test_decode_keepalive_payload_without_data(operation):
    data = decode_data_message(_frame({"data": None}), operation)
    assert data.on_message_created is None


def test_decode_graphql_errors(operation):
    raw = _frame({"data": None, "errors": [{"message": "Unauthorized"}]})

    with pytest.raises(GraphQLResponseError) as exc_info:
        decode_data_message(raw, operation)

    assert exc_info.value.messages == ["Unauthorized"]


@pytest.mark.parametrize(
    "raw",
    ["not json", json.dumps({"id": "1"}), _frame(None, type_="complete")],
)
def test_decode_rejects_bad_frames(operation, raw):
    with pytest.raises(MalformedResponseError):
        decode_data_message(raw, operation)


def test_decode_error_frame_keeps_server_message(operation):
    with pytest.raises(GraphQLResponseError) as exc_info:
        decode_data_message(_frame({"message": "Unauthorized"}, type_="error"), operation)

    assert exc_info.value.messages == ["Unauthorized"]
