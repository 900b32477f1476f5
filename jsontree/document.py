"""A JSON document: parse from text or file, serialise, and write back."""

from __future__ import annotations

import os
from typing import Any

from .lexer import JsonParseError
from .parser import parse
from .value import JsonValue

__all__ = ["Json"]


class Json:
    """A whole JSON document wrapping one root value."""

    __slots__ = ("_root",)

    def __init__(self, value: Any = None) -> None:
        self._root = JsonValue(value)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Json:
        """Read and parse the JSON file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
        try:
            root = parse(content)
        except JsonParseError as exc:
            raise JsonParseError(f"Failed to parse JSON file: {exc}") from exc
        document = cls()
        document._root = root
        return document

    @classmethod
    def parse(cls, text: str) -> Json:
        """Parse JSON text into a document."""
        document = cls()
        document._root = parse(text)
        return document

    @classmethod
    def object(cls) -> Json:
        """Return a document whose root is an empty object."""
        document = cls()
        document._root = JsonValue.make_object()
        return document

    @classmethod
    def array(cls) -> Json:
        """Return a document whose root is an empty array."""
        document = cls()
        document._root = JsonValue.make_array()
        return document

    def value(self) -> JsonValue:
        """Return the root value; changes to it change the document."""
        return self._root

    def dumps(self, indent: int = -1) -> str:
        """Serialise the document; a negative indent gives compact output."""
        return self._root.dump(indent)

    def write_file(self, path: str | os.PathLike[str], indent: int = 2) -> None:
        """Write the serialised document to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self._root.dump(indent))

    def __repr__(self) -> str:
        return f"Json({self.dumps()})"