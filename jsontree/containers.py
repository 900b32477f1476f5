"""JSON arrays and objects, and a proxy for writing into objects by key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .value import JsonValue

__all__ = ["JsonArray", "JsonObject", "JsonObjectProxy"]


def _check_index(index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Array index must be an integer, not {type(index).__name__}")
    if index < 0:
        raise IndexError(f"Index out of range: {index}")
    return index


def _wrap_lines(
    open_char: str,
    close_char: str,
    items: list[str],
    indent: int,
    current_indent: int,
) -> str:
    if indent < 0:
        return open_char + ",".join(items) + close_char
    if not items:
        return open_char + close_char
    pad = " " * (current_indent + indent)
    body = ",\n".join(pad + item for item in items)
    return f"{open_char}\n{body}\n{' ' * current_indent}{close_char}"


class JsonArray:
    """An ordered sequence of JSON values."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._values: list[JsonValue] = [JsonValue(v) for v in values or ()]

    def dump(self, indent: int = -1, current_indent: int = 0) -> str:
        """Serialise to JSON text; a negative indent gives compact output."""
        items = [v.dump(indent, current_indent + indent) for v in self._values]
        return _wrap_lines("[", "]", items, indent, current_indent)

    def values(self) -> tuple[JsonValue, ...]:
        """Return the elements in order."""
        return tuple(self._values)

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        self._values.append(JsonValue(value))

    def __getitem__(self, index: int) -> JsonValue:
        index = _check_index(index)
        if index >= len(self._values):
            raise IndexError(f"Index out of range: {index}")
        return self._values[index]

    def __setitem__(self, index: int, value: Any) -> None:
        """Set an element, padding the array with nulls if it is too short."""
        index = _check_index(index)
        missing = index + 1 - len(self._values)
        if missing > 0:
            self._values.extend(JsonValue() for _ in range(missing))
        self._values[index] = JsonValue(value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._values)

    def clear(self) -> None:
        """Remove every element."""
        self._values.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"JsonArray({self.dump()})"


class JsonObject:
    """A mapping from string keys to JSON values."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None) -> None:
        self._values: dict[str, JsonValue] = {}
        if values is None:
            return
        pairs = values.items() if isinstance(values, Mapping) else values
        for key, value in pairs:
            self._values[key] = JsonValue(value)

    def dump(self, indent: int = -1, current_indent: int = 0) -> str:
        """Serialise to JSON text; a negative indent gives compact output."""
        separator = ": " if indent >= 0 else ":"
        items = [
            f'"{key}"{separator}{value.dump(indent, current_indent + indent)}'
            for key, value in self._values.items()
        ]
        return _wrap_lines("{", "}", items, indent, current_indent)

    def values(self) -> Mapping[str, JsonValue]:
        """Return a read-only view of the members."""
        return MappingProxyType(self._values)

    def get(self, key: str) -> JsonValue:
        """Return the value stored under ``key``; raise KeyError if absent."""
        try:
            return self._values[key]
        except KeyError:
            raise KeyError(f"Key not found: {key}") from None

    def __getitem__(self, key: str) -> JsonObjectProxy:
        return JsonObjectProxy(self, key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = JsonValue(value)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def remove(self, key: str) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        self._values.pop(key, None)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def items(self) -> Iterator[tuple[str, JsonValue]]:
        """Yield key and value pairs."""
        return iter(self._values.items())

    def clear(self) -> None:
        """Remove every member."""
        self._values.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"JsonObject({self.dump()})"


class JsonObjectProxy:
    """A handle on one key of an object, for reading, writing and nesting."""

    __slots__ = ("_obj", "_key")

    def __init__(self, obj: JsonObject, key: str) -> None:
        self._obj = obj
        self._key = key

    def assign(self, value: Any) -> JsonObjectProxy:
        """Store ``value`` under this key."""
        self._obj._values[self._key] = JsonValue(value)
        return self

    def value(self) -> JsonValue:
        """Return the stored value, inserting null if the key is absent."""
        return self._obj._values.setdefault(self._key, JsonValue())

    def _existing(self) -> JsonValue:
        return self._obj.get(self._key)

    def as_str(self) -> str:
        return self._existing().as_string().value

    def as_float(self) -> float:
        return self._existing().as_number().value

    def as_int(self) -> int:
        return int(self._existing().as_number().value)

    def as_bool(self) -> bool:
        return self._existing().as_boolean().value

    def __getitem__(self, key: str | int) -> JsonObjectProxy:
        """Descend into this key, turning its value into an object (or array
        for an integer index) if it is not one already."""
        current = self.value()
        if isinstance(key, int) and not isinstance(key, bool):
            if not current.is_array():
                self._obj._values[self._key] = JsonValue.make_array()
            return JsonObjectProxy(self._obj, self._key)
        if not current.is_object():
            current = JsonValue.make_object()
            self._obj._values[self._key] = current
        return JsonObjectProxy(current.as_object(), key)

    def __setitem__(self, key: str, value: Any) -> None:
        self[key].assign(value)

    def __repr__(self) -> str:
        return f"JsonObjectProxy(key={self._key!r})"