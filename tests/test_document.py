import pytest

from jsontree.document import Json
from jsontree.lexer import JsonParseError
from jsontree.value import JsonValue


def test_default_document_is_null():
    document = Json()
    assert document.value().is_null()
    assert document.dumps() == "null"


def test_empty_object_and_array():
    assert Json.object().dumps() == "{}"
    assert Json.array().dumps() == "[]"


def test_parse_and_dump_round_trip():
    text = '{"name":"widget","tags":["a","b"],"count":3}'
    assert Json.parse(text).dumps() == text


def test_wrapping_a_scalar():
    assert Json(5).value() == JsonValue(5)


def test_constructor_copies_value():
    source = JsonValue.make_array()
    document = Json(source)
    source.as_array().append(1)
    assert len(document.value().as_array()) == 0
    assert len(source.as_array()) == 1


def test_value_is_live_reference():
    document = Json.object()
    document.value().as_object()["name"].assign("x")
    assert document.value().as_object().get("name") == JsonValue("x")


def test_write_then_read_file(tmp_path):
    path = tmp_path / "doc.json"
    document = Json.parse('{"list": [1, 2, {"deep": true}], "empty": {}}')
    document.write_file(path)
    assert path.read_text(encoding="utf-8") == document.dumps(2)
    assert Json.from_file(path).value() == document.value()


def test_write_file_with_compact_indent(tmp_path):
    path = tmp_path / "compact.json"
    document = Json.parse("[true,false,null]")
    document.write_file(path, -1)
    assert path.read_text(encoding="utf-8") == "[true,false,null]"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Json.from_file(tmp_path / "absent.json")


def test_invalid_file_raises_parse_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, 2", encoding="utf-8")
    with pytest.raises(JsonParseError, match="Failed to parse JSON file"):
        Json.from_file(path)


def test_parse_invalid_text_raises():
    with pytest.raises(JsonParseError, match="Expected ':'"):
        Json.parse('{"a" 1}')