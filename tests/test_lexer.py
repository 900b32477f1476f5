import pytest

from jsontree.lexer import JsonParseError, Lexer, Token, TokenType


def test_structural_tokens_in_order():
    kinds = [token.type for token in Lexer('{"a": [1, true, false, null]}')]
    assert kinds == [
        TokenType.L_BRACE,
        TokenType.STRING,
        TokenType.COLON,
        TokenType.L_BRACKET,
        TokenType.NUMBER,
        TokenType.COMMA,
        TokenType.TRUE,
        TokenType.COMMA,
        TokenType.FALSE,
        TokenType.COMMA,
        TokenType.NULL,
        TokenType.R_BRACKET,
        TokenType.R_BRACE,
    ]


def test_keyword_values_are_their_text():
    values = [token.value for token in Lexer("true false null")]
    assert values == ["true", "false", "null"]


def test_end_token_repeats():
    lexer = Lexer("   ")
    assert lexer.next_token() == Token(TokenType.END, "")
    assert lexer.next_token() == Token(TokenType.END, "")


def test_whitespace_is_skipped():
    assert list(Lexer("\t\n 1 \r")) == [Token(TokenType.NUMBER, "1")]


def test_string_value_is_unquoted():
    assert Lexer('"hello world"').next_token() == Token(TokenType.STRING, "hello world")


def test_string_escapes_are_decoded():
    token = Lexer(r'"a\nb\t\"c\\d\/e"').next_token()
    assert token.value == 'a\nb\t"c\\d/e'


@pytest.mark.parametrize("text", ["-12.5e+3", "0", "42", "3.25", "1E-7"])
def test_number_token_keeps_text(text):
    assert Lexer(text).next_token() == Token(TokenType.NUMBER, text)


def test_number_stops_at_non_digit():
    lexer = Lexer("12]")
    assert lexer.next_token() == Token(TokenType.NUMBER, "12")
    assert lexer.next_token().type is TokenType.R_BRACKET


def test_invalid_escape_raises():
    with pytest.raises(JsonParseError, match="Invalid escape sequence"):
        Lexer(r'"\u0041"').next_token()


def test_incomplete_escape_raises():
    with pytest.raises(JsonParseError, match="Incomplete escape sequence"):
        Lexer('"abc\\').next_token()


def test_unterminated_string_raises():
    with pytest.raises(JsonParseError, match="Unterminated string"):
        Lexer('"abc').next_token()


def test_invalid_character_raises():
    with pytest.raises(JsonParseError, match="Invalid character '@'"):
        Lexer("@").next_token()


def test_invalid_keyword_raises():
    with pytest.raises(JsonParseError, match="Invalid keyword: nul"):
        Lexer("nul").next_token()


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        list(Lexer("[1, yes]"))