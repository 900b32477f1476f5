"""A tagged JSON value that holds any scalar or container."""

from __future__ import annotations

import copy
import enum
from typing import Any

from .scalars import JsonBoolean, JsonNull, JsonNumber, JsonString

__all__ = ["JsonType", "JsonTypeError", "JsonValue"]


class JsonType(enum.Enum):
    """The kinds of JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class JsonTypeError(TypeError):
    """Raised when a value is accessed as a kind it does not hold."""


_SCALAR_TYPES = {
    JsonNull: JsonType.NULL,
    JsonBoolean: JsonType.BOOLEAN,
    JsonNumber: JsonType.NUMBER,
    JsonString: JsonType.STRING,
}


def _wrap(value: Any) -> tuple[Any, JsonType]:
    if value is None:
        return JsonNull(), JsonType.NULL
    if isinstance(value, bool):
        return JsonBoolean(value), JsonType.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonNumber(float(value)), JsonType.NUMBER
    if isinstance(value, str):
        return JsonString(value), JsonType.STRING
    kind = _SCALAR_TYPES.get(type(value))
    if kind is not None:
        return value, kind

    from .containers import JsonArray, JsonObject

    if isinstance(value, JsonArray):
        return value, JsonType.ARRAY
    if isinstance(value, JsonObject):
        return value, JsonType.OBJECT
    raise JsonTypeError(f"Cannot hold a value of type {type(value).__name__}")


class JsonValue:
    """One JSON value of any kind."""

    __slots__ = ("_data", "_type")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None) -> None:
        if isinstance(value, JsonValue):
            self._data = copy.deepcopy(value._data)
            self._type = value._type
        else:
            self._data, self._type = _wrap(value)

    def type(self) -> JsonType:
        """Return the kind of value held."""
        return self._type

    def dump(self, indent: int = -1, current_indent: int = 0) -> str:
        """Serialise to JSON text; a negative indent gives compact output."""
        return self._data.dump(indent, current_indent)

    def clone(self) -> JsonValue:
        """Return a deep copy."""
        return JsonValue(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._type is other._type and self._data == other._data

    def __repr__(self) -> str:
        return f"JsonValue({self.dump()})"

    def is_null(self) -> bool:
        return self._type is JsonType.NULL

    def is_boolean(self) -> bool:
        return self._type is JsonType.BOOLEAN

    def is_number(self) -> bool:
        return self._type is JsonType.NUMBER

    def is_string(self) -> bool:
        return self._type is JsonType.STRING

    def is_array(self) -> bool:
        return self._type is JsonType.ARRAY

    def is_object(self) -> bool:
        return self._type is JsonType.OBJECT

    def _expect(self, kind: JsonType) -> Any:
        if self._type is not kind:
            raise JsonTypeError(f"Value is not {kind.value}")
        return self._data

    def as_null(self) -> JsonNull:
        return self._expect(JsonType.NULL)

    def as_boolean(self) -> JsonBoolean:
        return self._expect(JsonType.BOOLEAN)

    def as_number(self) -> JsonNumber:
        return self._expect(JsonType.NUMBER)

    def as_string(self) -> JsonString:
        return self._expect(JsonType.STRING)

    def as_array(self):
        return self._expect(JsonType.ARRAY)

    def as_object(self):
        return self._expect(JsonType.OBJECT)

    @classmethod
    def make_array(cls) -> JsonValue:
        """Return a value holding a new empty array."""
        from .containers import JsonArray

        return cls(JsonArray())

    @classmethod
    def make_object(cls) -> JsonValue:
        """Return a value holding a new empty object."""
        from .containers import JsonObject

        return cls(JsonObject())