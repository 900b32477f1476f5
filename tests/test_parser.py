import pytest

from jsontree.lexer import JsonParseError
from jsontree.parser import Parser, parse
from jsontree.value import JsonType, JsonValue


def test_parse_null():
    assert parse("null").is_null()


@pytest.mark.parametrize("text,expected", [("true", True), ("false", False)])
def test_parse_booleans(text, expected):
    assert parse(text).as_boolean().value is expected


def test_parse_number():
    assert parse("3.5").as_number().value == 3.5
    assert parse("-12").as_number().value == -12.0


def test_parse_string_with_escapes():
    assert parse(r'"line\nnext"').as_string().value == "line\nnext"


def test_nested_structure_types():
    value = parse('{"a": [1, 2, {"b": null}]}')
    items = value.as_object().get("a").as_array()
    assert len(items) == 3
    assert items[0].type() is JsonType.NUMBER
    assert items[2].as_object().get("b").is_null()


@pytest.mark.parametrize(
    "text",
    ["[1,2,3]", '{"a":true,"b":[null,"x"]}', "[]", "{}", '"q\\"uote"', "[[[]]]", "-7"],
)
def test_compact_round_trip(text):
    assert parse(text).dump() == text


def test_pretty_output_parses_back_equal():
    original = parse('{"k": [1, [2, {"z": "w"}], {}], "e": []}')
    assert parse(original.dump(2)) == original


def test_duplicate_key_keeps_last_value():
    assert parse('{"a":1,"a":2}').as_object().get("a") == JsonValue(2)


def test_number_prefix_is_used():
    assert parse("1.").as_number().value == 1.0
    assert parse("2e").as_number().value == 2.0


def test_parser_class_matches_function():
    assert Parser("[1, {\"x\": false}]").parse() == parse("[1, {\"x\": false}]")


def test_parser_reports_lexer_error_on_construction():
    with pytest.raises(JsonParseError, match="Invalid character"):
        Parser("@")


@pytest.mark.parametrize(
    "text,message",
    [
        ("[1,]", "Invalid JSON value"),
        ("", "Invalid JSON value"),
        ("]", "Invalid JSON value"),
        ("[1 2]", "Expected ',' or ']'"),
        ('{"a" 1}', "Expected ':'"),
        ("{1:2}", "Expected string key"),
        ('{"a":1 "b":2}', "Expected ',' or '}'"),
        ("1 2", "Unexpected token after JSON value"),
        ("-", "Invalid number format: -"),
        ("1e999", "Invalid number format: 1e999"),
        ("1e-999", "Invalid number format: 1e-999"),
    ],
)
def test_malformed_input_raises(text, message):
    with pytest.raises(JsonParseError, match=message.replace("[", r"\[").replace("]", r"\]")):
        parse(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError, match="Invalid keyword"):
        parse("[nope]")