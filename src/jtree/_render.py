"""
Serializes a value tree back to JSON text.

Output only uses escapes the default parser understands, so
``parse(render(v))`` reproduces ``v``.
"""

import math

from ._value import Member
from ._value import Value
from ._value import ValueType

_STRING_ESCAPES = {
    ord('"'): b'\\"',
    ord("\\"): b"\\\\",
    ord("\b"): b"\\b",
    ord("\f"): b"\\f",
    ord("\n"): b"\\n",
    ord("\r"): b"\\r",
    ord("\t"): b"\\t",
}
_NEEDS_ESCAPE = bytes(_STRING_ESCAPES)


def _render_string(s: bytes) -> bytes:
    """Quotes ``s``, escaping quote, backslash and named control bytes."""
    if not any(c in _NEEDS_ESCAPE for c in s):
        return b'"' + s + b'"'
    out = bytearray(b'"')
    for c in s:
        escaped = _STRING_ESCAPES.get(c)
        if escaped is None:
            out.append(c)
        else:
            out += escaped
    out += b'"'
    return bytes(out)


def _render_number(n: float) -> bytes:
    if math.isnan(n) or math.isinf(n):
        raise ValueError("Out of range float values are not JSON compliant")
    return repr(n).encode("ascii")


def _indent_string(indent: str | int | None, level: int) -> bytes:
    if indent is None:
        return b""
    elif isinstance(indent, int):
        return b" " * (indent * level)
    else:
        return indent.encode("utf-8") * level


def _render_array(
    items: list[Value], indent: str | int | None, level: int
) -> bytes:
    if not items:
        return b"[]"

    encoded = [_render_value(item, indent, level + 1) for item in items]
    if indent is None:
        return b"[" + b",".join(encoded) + b"]"

    inner = _indent_string(indent, level + 1)
    lines = [b"["]
    lines.append(b",\n".join(inner + item for item in encoded))
    lines.append(_indent_string(indent, level) + b"]")
    return b"\n".join(lines)


def _render_object(
    members: list[Member], indent: str | int | None, level: int
) -> bytes:
    if not members:
        return b"{}"

    encoded = [
        _render_string(member.key)
        + (b": " if indent is not None else b":")
        + _render_value(member.value, indent, level + 1)
        for member in members
    ]
    if indent is None:
        return b"{" + b",".join(encoded) + b"}"

    inner = _indent_string(indent, level + 1)
    lines = [b"{"]
    lines.append(b",\n".join(inner + item for item in encoded))
    lines.append(_indent_string(indent, level) + b"}")
    return b"\n".join(lines)


def _render_value(  # noqa: PLR0911
    value: Value, indent: str | int | None, level: int
) -> bytes:
    value_type = value.get_type()
    if value_type is ValueType.NULL:
        return b"null"
    elif value_type is ValueType.TRUE:
        return b"true"
    elif value_type is ValueType.FALSE:
        return b"false"
    elif value_type is ValueType.NUMBER:
        return _render_number(value.get_number())
    elif value_type is ValueType.STRING:
        return _render_string(value.get_string())
    elif value_type is ValueType.ARRAY:
        return _render_array(value.get_array(), indent, level)
    elif value_type is ValueType.OBJECT:
        return _render_object(value.get_object(), indent, level)
    else:
        raise TypeError("cannot render an unset value")


def render(value: Value, indent: str | int | None = None) -> bytes:
    """
    Serializes ``value`` to JSON text.

    Compact by default; with ``indent`` each member goes on its own line,
    indented by that many spaces (or by the given string) per level.
    """
    return _render_value(value, indent, 0)
