"""Schema-derived response field descriptors."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any


class FieldType(StrEnum):
    STRING = "string"
    CUSTOM = "custom"
    OBJECT = "object"
    LIST = "list"


class CustomType(StrEnum):
    ID = "ID"


@dataclass(frozen=True, slots=True)
class ResponseField:
    type: FieldType
    response_name: str
    field_name: str
    arguments: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    optional: bool = False
    custom_type: CustomType | None = None

    @classmethod
    def for_string(
        cls,
        response_name: str,
        field_name: str | None = None,
        *,
        optional: bool = False,
    ) -> ResponseField:
        return cls(FieldType.STRING, response_name, field_name or response_name, optional=optional)

    @classmethod
    def for_custom_type(
        cls,
        response_name: str,
        custom_type: CustomType,
        field_name: str | None = None,
        *,
        optional: bool = False,
    ) -> ResponseField:
        return cls(
            FieldType.CUSTOM,
            response_name,
            field_name or response_name,
            optional=optional,
            custom_type=custom_type,
        )

    @classmethod
    def for_object(
        cls,
        response_name: str,
        field_name: str | None = None,
        arguments: Mapping[str, Any] | None = None,
        *,
        optional: bool = False,
    ) -> ResponseField:
        return cls(
            FieldType.OBJECT,
            response_name,
            field_name or response_name,
            arguments=MappingProxyType(dict(arguments or {})),
            optional=optional,
        )


    @classmethod
    def for_list(
        cls,
        response_name: str,
        field_name: str | None = None,
        *,
        optional: bool = False,
    ) -> ResponseField:
        return cls(FieldType.LIST, response_name, field_name or response_name, optional=optional)


def variable_argument(name: str) -> dict[str, str]:
    """Argument value bound to the operation variable `name`."""
    return {"kind": "Variable", "variableName": name}
