from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any

from relay_client.application.exceptions import MalformedResponseError


class _Encoder(json.JSONEncoder):
    def default(self, o: object) -> Any:
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Enum):
            return o.value
        return super().default(o)


def serialize_event(event_type: str, payload: dict[str, Any]) -> str:
    return json.dumps({"event": event_type, "data": payload}, cls=_Encoder)


def deserialize_event(raw: str | bytes) -> tuple[str, dict[str, Any]]:
    try:
        envelope = json.loads(raw)
        return envelope["event"], envelope["data"]
    except (ValueError, KeyError, TypeError) as exc:
        raise MalformedResponseError(f"invalid event envelope: {exc}") from exc
