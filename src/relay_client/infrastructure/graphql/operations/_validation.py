from __future__ import annotations

from typing import Any, TypeVar

from relay_client.application.exceptions import InvalidArgumentError

T = TypeVar("T")


def check_not_null(value: T | None, name: str) -> T:
    if value is None:
        raise InvalidArgumentError(f"{name} == None")
    return value


def check_connection_id(value: Any) -> str:
    check_not_null(value, "connection_id")
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError("connection_id must be a non-empty string")
    return value
