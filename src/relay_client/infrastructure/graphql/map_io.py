"""ResponseReader / ResponseWriter over decoded JSON mappings."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from relay_client.application.exceptions import MalformedResponseError
from relay_client.application.ports.graphql import ResponseReader, ResponseWriter
from relay_client.infrastructure.graphql.fields import CustomType, FieldType, ResponseField

T = TypeVar("T")


class MapResponseReader:
    """Implements application.ports.graphql.ResponseReader."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def _value(self, field: ResponseField, expected: FieldType) -> Any:
        if field.type is not expected:
            raise TypeError(f"field '{field.response_name}' is {field.type}, not {expected}")
        value = self._data.get(field.response_name)
        if value is None and not field.optional:
            raise MalformedResponseError(f"required field '{field.response_name}' is null")
        return value

    def read_string(self, field: ResponseField) -> str | None:
        value = self._value(field, FieldType.STRING)
        if value is not None and not isinstance(value, str):
            raise MalformedResponseError(
                f"field '{field.response_name}' expected string, got {type(value).__name__}"
            )
        return value

    def read_custom_type(self, field: ResponseField) -> Any:
        value = self._value(field, FieldType.CUSTOM)
        if value is None:
            return None
        if field.custom_type is CustomType.ID:
            # ID serializes as a string but servers may send integers
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise MalformedResponseError(
                    f"field '{field.response_name}' expected ID, got {type(value).__name__}"
                )
            return str(value)
        return value

    def read_object(
        self,
        field: ResponseField,
        object_reader: Callable[[ResponseReader], T],
    ) -> T | None:
        value = self._value(field, FieldType.OBJECT)
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise MalformedResponseError(
                f"field '{field.response_name}' expected object, got {type(value).__name__}"
            )
        return object_reader(MapResponseReader(value))

    def read_list(
        self,
        field: ResponseField,
        item_reader: Callable[[ResponseReader], T],
    ) -> list[T] | None:
        """Read a list of objects; null items are a format violation."""
        value = self._value(field, FieldType.LIST)
        if value is None:
            return None
        if not isinstance(value, list):
            raise MalformedResponseError(
                f"field '{field.response_name}' expected list, got {type(value).__name__}"
            )
        items = []
        for index, item in enumerate(value):
            if not isinstance(item, Mapping):
                raise MalformedResponseError(
                    f"field '{field.response_name}' item {index} expected object"
                )
            items.append(item_reader(MapResponseReader(item)))
        return items


class MapResponseWriter:
    """Implements application.ports.graphql.ResponseWriter; collects into a dict."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}

    def write_string(self, field: ResponseField, value: str | None) -> None:
        self.data[field.response_name] = value

    def write_custom(self, field: ResponseField, value: Any) -> None:
        self.data[field.response_name] = value

    def write_object(
        self,
        field: ResponseField,
        marshaller: Callable[[ResponseWriter], None] | None,
    ) -> None:
        if marshaller is None:
            self.data[field.response_name] = None
            return
        nested = MapResponseWriter()
        marshaller(nested)
        self.data[field.response_name] = nested.data

    def write_list(
        self,
        field: ResponseField,
        marshallers: list[Callable[[ResponseWriter], None]] | None,
    ) -> None:
        if marshallers is None:
            self.data[field.response_name] = None
            return
        items = []
        for marshaller in marshallers:
            nested = MapResponseWriter()
            marshaller(nested)
            items.append(nested.data)
        self.data[field.response_name] = items


class MapInputFieldWriter:
    """Implements application.ports.graphql.InputFieldWriter."""

    def __init__(self) -> None:
        self.values: dict[str, Any] = {}

    def write_string(self, name: str, value: str | None) -> None:
        self.values[name] = value
