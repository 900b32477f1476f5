# jsontree

`jsontree` reads, builds, edits and writes JSON documents as a tree of typed
values. It has its own lexer and recursive-descent parser, and a serializer
that writes compact or indented output.

## Installation

```
pip install jsontree
```

## Parsing

```python
from jsontree.document import Json

doc = Json.parse('{"name": "widget", "sizes": [1, 2.5, -3e2], "active": true}')
root = doc.value()

root.is_object()                                    # True
root.as_object()["name"].as_str()                   # "widget"
root.as_object()["active"].as_bool()                # True
sizes = root.as_object().get("sizes").as_array()
sizes[1].as_number().value                          # 2.5
```

Every number is stored as a float. Malformed input raises
`jsontree.lexer.JsonParseError` (a `ValueError`). The message names the
problem. For lexical errors, such as a bad character, an unknown keyword, an
invalid escape or an unterminated string, it also gives the position.

`Json.from_file(path)` reads a UTF-8 file and parses it. A parse failure is
raised as `JsonParseError` with the message prefixed by
`Failed to parse JSON file:`. A missing file raises the usual `OSError`.

The lower-level pieces can be used directly:

```python
from jsontree.parser import parse, Parser
from jsontree.lexer import Lexer

value = parse("[1, 2, 3]")                  # a JsonValue
value = Parser("[1, 2, 3]").parse()         # the same
tokens = list(Lexer('{"a": null}'))         # Token(type=TokenType..., value=...)
```

`Lexer.next_token()` returns one `Token` at a time and ends with a
`TokenType.END` token. Iterating a `Lexer` yields every token before `END`.

## Values

`jsontree.value.JsonValue` holds one value of any kind. It can be built from
`None`, `bool`, `int`, `float`, `str`, a scalar from `jsontree.scalars`
(`JsonNull`, `JsonBoolean`, `JsonNumber`, `JsonString`), a
`jsontree.containers.JsonArray`, a `JsonObject`, or another `JsonValue`. A
`JsonValue` is always deep-copied when it is used to build another one. Any
other type raises `JsonTypeError`.

- `type()` returns a `JsonType` member: `NULL`, `BOOLEAN`, `NUMBER`, `STRING`,
  `ARRAY` or `OBJECT`.
- `is_null()`, `is_boolean()`, `is_number()`, `is_string()`, `is_array()` and
  `is_object()` test the kind.
- `as_null()`, `as_boolean()`, `as_number()`, `as_string()`, `as_array()` and
  `as_object()` return the contents. If the value holds another kind, they
  raise `JsonTypeError` (a `TypeError`).
- `clone()` returns a deep copy. `==` compares kind and contents.
- `JsonValue.make_array()` and `JsonValue.make_object()` return empty
  containers.

## Building documents

```python
from jsontree.document import Json

doc = Json.object()
obj = doc.value().as_object()
obj["title"] = "Report"
obj["count"] = 3
obj["meta"]["author"] = "someone"        # nested objects are created on demand

arr = Json.array()
items = arr.value().as_array()
items.append(1)
items[3] = "fourth"                      # indexes 1 and 2 are filled with null
```

`JsonArray` can be built from any iterable of values. It supports `len()`,
iteration, `append()`, `clear()` and `values()` (a tuple). Reading an index
past the end, or any negative index, raises `IndexError`.

`JsonObject` can be built from a mapping or from key/value pairs. Keys keep
their insertion order. It supports `in`, `len()`, iteration over keys,
`items()`, `values()` (a read-only mapping), `remove(key)` (a missing key is
ignored) and `clear()`. `get(key)` returns the stored `JsonValue` or raises
`KeyError`.

`obj[key]` returns a `JsonObjectProxy` for that key:

- `assign(value)` stores a value.
- `value()` returns the stored value, and inserts `null` if the key is absent.
- `as_str()`, `as_float()`, `as_int()` (truncating) and `as_bool()` read a
  stored value. They raise `KeyError` if the key is absent.
- `proxy[other_key]` replaces a non-object value with an empty object and
  descends into it. `proxy[other_key] = value` writes there.

## Writing

```python
doc.dumps()                  # compact: {"title":"Report","count":3,...}
doc.dumps(indent=2)          # pretty-printed
doc.write_file("out.json")   # indented by two spaces by default
Json.from_file("out.json")   # read it back
```

Every value also has `dump(indent=-1, current_indent=0)`. A negative indent
gives compact output. Whole numbers below 1e15 in magnitude are written
without a fractional part, so `3.0` is written as `3`. Other numbers are
written in `%g` form, which keeps six significant digits. String values escape
quotes, backslashes and `\b \f \n \r \t`. Object keys are written as they are,
without escaping.

## Limits

- The string lexer does not accept `\u` escapes.
- Leading zeros and other loose number forms are read as the longest valid
  numeric prefix rather than rejected.
- There is no command-line tool. The package is a library only.

## Development

```
pip install -e .[test]
pytest
```