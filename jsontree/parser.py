"""Recursive-descent parser that builds JsonValue trees."""

from __future__ import annotations

import math
import re
from typing import Any

from .containers import JsonArray, JsonObject
from .lexer import JsonParseError, Lexer, Token, TokenType
from .value import JsonValue

__all__ = ["Parser", "parse"]

_FLOAT_PREFIX = re.compile(
    r"(?P<mantissa>-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))(?:[eE][+-]?[0-9]+)?"
)


def _to_float(text: str) -> float:
    """Convert the longest numeric prefix of ``text``, rejecting overflow and underflow."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise JsonParseError(f"Invalid number format: {text}")
    number = float(match.group())
    out_of_range = math.isinf(number) or (
        number == 0.0 and any(c in "123456789" for c in match.group("mantissa"))
    )
    if out_of_range:
        raise JsonParseError(f"Invalid number format: {text}")
    return number


class Parser:
    """Parses one JSON document from text."""

    def __init__(self, text: str) -> None:
        self._lexer = Lexer(text)
        self._token: Token = self._lexer.next_token()

    def parse(self) -> JsonValue:
        """Parse the whole text as a single JSON value."""
        result = self._parse_value()
        if self._token.type is not TokenType.END:
            raise JsonParseError("Unexpected token after JSON value")
        return JsonValue(result)

    def _advance(self) -> None:
        self._token = self._lexer.next_token()

    def _parse_value(self) -> Any:
        kind = self._token.type
        if kind is TokenType.L_BRACE:
            return self._parse_object()
        if kind is TokenType.L_BRACKET:
            return self._parse_array()
        if kind is TokenType.STRING:
            text = self._token.value
            self._advance()
            return text
        if kind is TokenType.NUMBER:
            number = _to_float(self._token.value)
            self._advance()
            return number
        if kind is TokenType.TRUE or kind is TokenType.FALSE:
            self._advance()
            return kind is TokenType.TRUE
        if kind is TokenType.NULL:
            self._advance()
            return None
        raise JsonParseError("Invalid JSON value")

    def _parse_object(self) -> JsonObject:
        self._advance()
        result = JsonObject()
        if self._token.type is TokenType.R_BRACE:
            self._advance()
            return result
        while True:
            if self._token.type is not TokenType.STRING:
                raise JsonParseError("Expected string key")
            key = self._token.value
            self._advance()
            if self._token.type is not TokenType.COLON:
                raise JsonParseError("Expected ':'")
            self._advance()
            result[key] = self._parse_value()
            if self._token.type is TokenType.R_BRACE:
                self._advance()
                return result
            if self._token.type is not TokenType.COMMA:
                raise JsonParseError("Expected ',' or '}'")
            self._advance()

    def _parse_array(self) -> JsonArray:
        self._advance()
        result = JsonArray()
        if self._token.type is TokenType.R_BRACKET:
            self._advance()
            return result
        while True:
            result.append(self._parse_value())
            if self._token.type is TokenType.R_BRACKET:
                self._advance()
                return result
            if self._token.type is not TokenType.COMMA:
                raise JsonParseError("Expected ',' or ']'")
            self._advance()


def parse(text: str) -> JsonValue:
    """Parse JSON text into a value."""
    return Parser(text).parse()