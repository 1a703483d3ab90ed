"""JSON encoding and decoding of plugin values, with table-like rules."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, Mapping

_NESTED = "cannot encode recursively nested tables to JSON"
_SPARSE_ARRAY = "cannot encode sparse array"
_INVALID_KEYS = "cannot encode mixed or invalid key types"

_STRING_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_UNICODE_ESCAPED = frozenset("<>&\u2028\u2029")


class JsonEncodeError(ValueError):
    """Raised when a value has no JSON form."""


def encode(value: Any) -> str:
    """Return the compact JSON text of ``value``.

    Lists and tuples become arrays. A mapping becomes an array when its keys
    are the integers 1..n, an object when all its keys are strings, and the
    empty array when it is empty. Any container reached twice is rejected.
    """
    return _encode(value, set())


def decode(data: str | bytes | bytearray) -> Any:
    """Parse JSON text; every number is returned as a float."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    return json.loads(data, parse_int=float, parse_constant=_reject_constant)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid character {name!r} looking for beginning of value")


def _encode(value: Any, visited: set[int]) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _number(value)
    if isinstance(value, str):
        return _string(value)
    if isinstance(value, (list, tuple)):
        _visit(value, visited)
        return "[" + ",".join(_encode(item, visited) for item in value) + "]"
    if isinstance(value, Mapping):
        _visit(value, visited)
        return _table(value, visited)
    raise JsonEncodeError(f"cannot encode {type(value).__name__} to JSON")


def _visit(container: Any, visited: set[int]) -> None:
    key = id(container)
    if key in visited:
        raise JsonEncodeError(_NESTED)
    visited.add(key)


def _is_number_key(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, float) and key.is_integer()


def _table(table: Mapping[Any, Any], visited: set[int]) -> str:
    if not table:
        return "[]"
    keys = list(table)
    if all(_is_number_key(key) for key in keys):
        ordered = sorted(keys, key=float)
        if [int(key) for key in ordered] != list(range(1, len(ordered) + 1)):
            raise JsonEncodeError(_SPARSE_ARRAY)
        return "[" + ",".join(_encode(table[key], visited) for key in ordered) + "]"
    if all(isinstance(key, str) for key in keys):
        members = (
            _string(key) + ":" + _encode(table[key], visited) for key in sorted(keys)
        )
        return "{" + ",".join(members) + "}"
    raise JsonEncodeError(_INVALID_KEYS)


def _number(number: int | float) -> str:
    try:
        f = float(number)
    except OverflowError as exc:
        raise JsonEncodeError(f"json: unsupported value: {number}") from exc
    if math.isnan(f) or math.isinf(f):
        raise JsonEncodeError(f"json: unsupported value: {f!r}")
    if f == 0:
        return "-0" if math.copysign(1.0, f) < 0 else "0"
    magnitude = abs(f)
    if magnitude < 1e-6 or magnitude >= 1e21:
        mantissa, _, exponent = repr(f).partition("e")
        if exponent.startswith("-0"):
            exponent = "-" + exponent[2:]
        return f"{mantissa}e{exponent}"
    if f.is_integer():
        return str(int(f))
    return format(Decimal(repr(f)), "f")


def _string(text: str) -> str:
    out = []
    for ch in text:
        code = ord(ch)
        if ch in _STRING_ESCAPES:
            out.append(_STRING_ESCAPES[ch])
        elif code < 0x20 or ch in _UNICODE_ESCAPED:
            out.append(f"\\u{code:04x}")
        elif 0xD800 <= code <= 0xDFFF:
            out.append("\ufffd")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'