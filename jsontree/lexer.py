"""Tokeniser for JSON text."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["JsonParseError", "TokenType", "Token", "Lexer"]


class JsonParseError(ValueError):
    """Raised when JSON text cannot be tokenised or parsed."""


class TokenType(enum.Enum):
    """The kinds of token found in JSON text."""

    L_BRACE = "{"
    R_BRACE = "}"
    L_BRACKET = "["
    R_BRACKET = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    END = "end"


@dataclass(frozen=True)
class Token:
    """One token: its kind and the text or decoded value it carries."""

    type: TokenType
    value: str


_PUNCTUATION = {
    "{": TokenType.L_BRACE,
    "}": TokenType.R_BRACE,
    "[": TokenType.L_BRACKET,
    "]": TokenType.R_BRACKET,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

_KEYWORDS = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,
}

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]*")
_NUMBER = re.compile(r"-?[0-9]*(?:\.[0-9]*)?(?:[eE][+-]?[0-9]*)?")
_KEYWORD = re.compile(r"[A-Za-z]+")
_STRING_RUN = re.compile(r'[^"\\]+')
_NUMBER_START = frozenset("-0123456789")


class Lexer:
    """Splits JSON text into tokens, one call to :meth:`next_token` at a time."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next_token(self) -> Token:
        """Return the next token, or an END token once the text is exhausted."""
        text = self._text
        self._pos = _WHITESPACE.match(text, self._pos).end()
        if self._pos >= len(text):
            return Token(TokenType.END, "")

        char = text[self._pos]
        punctuation = _PUNCTUATION.get(char)
        if punctuation is not None:
            self._pos += 1
            return Token(punctuation, char)
        if char == '"':
            self._pos += 1
            return self._lex_string()
        if char in _NUMBER_START:
            return self._lex_number()
        if char.isascii() and char.isalpha():
            return self._lex_keyword()
        self._pos += 1
        raise JsonParseError(f"Invalid character '{char}' at position {self._pos}")

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the END token."""
        while (token := self.next_token()).type is not TokenType.END:
            yield token

    def _lex_string(self) -> Token:
        text = self._text
        pos = self._pos
        parts: list[str] = []
        while pos < len(text) and text[pos] != '"':
            run = _STRING_RUN.match(text, pos)
            if run is not None:
                parts.append(run.group())
                pos = run.end()
                continue
            # text[pos] is a backslash
            pos += 1
            if pos >= len(text):
                raise JsonParseError(f"Incomplete escape sequence at position {pos}")
            escape = text[pos]
            pos += 1
            try:
                parts.append(_ESCAPES[escape])
            except KeyError:
                raise JsonParseError(
                    f"Invalid escape sequence '\\{escape}' at position {pos - 1}"
                ) from None
        if pos >= len(text):
            raise JsonParseError(f"Unterminated string at position {pos}")
        self._pos = pos + 1
        return Token(TokenType.STRING, "".join(parts))

    def _lex_number(self) -> Token:
        match = _NUMBER.match(self._text, self._pos)
        self._pos = match.end()
        return Token(TokenType.NUMBER, match.group())

    def _lex_keyword(self) -> Token:
        match = _KEYWORD.match(self._text, self._pos)
        keyword = match.group()
        self._pos = match.end()
        kind = _KEYWORDS.get(keyword)
        if kind is None:
            raise JsonParseError(
                f"Invalid keyword: {keyword} at position {self._pos - len(keyword)}"
            )
        return Token(kind, keyword)