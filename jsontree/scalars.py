"""Scalar JSON values: null, booleans, numbers and strings."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["JsonNull", "JsonBoolean", "JsonNumber", "JsonString"]

_STRING_ESCAPES = str.maketrans(
    {
        '"': '\\"',
        "\\": "\\\\",
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)


@dataclass(frozen=True)
class JsonNull:
    """The JSON ``null`` value; all instances are equal."""

    def dump(self, indent: int = -1, current_indent: int = 0) -> str:
        """Serialise to text; indentation has no effect on scalars."""
        return "null"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonNull):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(JsonNull)


@dataclass(frozen=True)
class JsonBoolean:
    """A JSON boolean."""

    value: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bool(self.value))

    def dump(self, indent: int = -1, current_indent: int = 0) -> str:
        """Serialise to ``true`` or ``false``."""
        return "true" if self.value else "false"


@dataclass(frozen=True)
class JsonNumber:
    """A JSON number, held as a double-precision float."""

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def dump(self, indent: int = -1, current_indent: int = 0) -> str:
        """Serialise integral values below 1e15 as integers, others in %g form."""
        value = self.value
        if math.isfinite(value) and math.floor(value) == value and abs(value) < 1e15:
            return str(int(value))
        return f"{value:g}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonNumber):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


@dataclass(frozen=True)
class JsonString:
    """A JSON string."""

    value: str = ""

    def dump(self, indent: int = -1, current_indent: int = 0) -> str:
        """Serialise as a quoted string with control characters escaped."""
        return '"' + self.value.translate(_STRING_ESCAPES) + '"'