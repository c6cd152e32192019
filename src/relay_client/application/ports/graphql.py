"""Keyed-field reader/writer contract between operations and the transport."""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar

if TYPE_CHECKING:
    from relay_client.infrastructure.graphql.fields import ResponseField

T = TypeVar("T")


class ResponseReader(Protocol):
    def read_string(self, field: ResponseField) -> str | None: ...

    def read_custom_type(self, field: ResponseField) -> Any: ...

    def read_object(
        self,
        field: ResponseField,
        object_reader: Callable[[ResponseReader], T],
    ) -> T | None: ...

    def read_list(
        self,
        field: ResponseField,
        item_reader: Callable[[ResponseReader], T],
    ) -> list[T] | None: ...


class ResponseWriter(Protocol):
    def write_string(self, field: ResponseField, value: str | None) -> None: ...

    def write_custom(self, field: ResponseField, value: Any) -> None: ...

    def write_object(
        self,
        field: ResponseField,
        marshaller: Callable[[ResponseWriter], None] | None,
    ) -> None: ...

    def write_list(
        self,
        field: ResponseField,
        marshallers: list[Callable[[ResponseWriter], None]] | None,
    ) -> None: ...


class InputFieldWriter(Protocol):
    def write_string(self, name: str, value: str | None) -> None: ...


class OperationVariables(Protocol):
    def value_map(self) -> Mapping[str, Any]: ...

    def marshal(self, writer: InputFieldWriter) -> None: ...


class Subscription(Protocol[T]):
    @property
    def name(self) -> str: ...

    @property
    def operation_id(self) -> str: ...

    @property
    def query_document(self) -> str: ...

    @property
    def variables(self) -> OperationVariables: ...

    def parse(self, data: Mapping[str, Any]) -> T: ...
