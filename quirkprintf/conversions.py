"""Conversion of argument values to their raw, unflagged text."""

from __future__ import annotations

from operator import index
from typing import Any

from quirkprintf.spec import DataType, FormatSpec
from quirkprintf.textutils import itoa

NIL = "(nil)"
NULL = "(null)"

_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _to_int(value: Any) -> int:
    try:
        return index(value)
    except TypeError:
        raise TypeError(
            f"expected an integer, got {type(value).__name__}"
        ) from None


def _as_int32(value: Any) -> int:
    """Reduce *value* to a 32-bit signed int, wrapping like a C cast."""
    return (_to_int(value) + (1 << 31)) % _UINT32 - (1 << 31)


def _as_uint32(value: Any) -> int:
    return _to_int(value) % _UINT32


def char_to_text(value: Any) -> str:
    """Render a character; an integer is taken modulo 256, as a C char."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_to_int(value) % 256)


def string_to_text(value: str | None) -> str:
    """Render a string argument; None renders as '(null)'."""
    if value is None:
        return NULL
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def pointer_to_text(address: Any) -> str:
    """Render an address as '0x' and lowercase hex; a null one as '(nil)'."""
    if address is None:
        return NIL
    number = _to_int(address) % _UINT64
    if number == 0:
        return NIL
    return f"0x{number:x}"


def int_to_text(value: Any) -> str:
    """Render a signed 32-bit integer in decimal."""
    return itoa(_as_int32(value))


def unsigned_to_text(value: Any) -> str:
    """Render an unsigned 32-bit integer in decimal."""
    return str(_as_uint32(value))


def hex_to_text(value: Any, upper: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    number = _as_uint32(value)
    return f"{number:X}" if upper else f"{number:x}"


def render_raw(spec: FormatSpec, value: Any = None) -> str:
    """Store the unflagged text of *value* in *spec* and return it.

    A percent-sign specifier takes no value and renders as '%'.
    """
    kind = spec.data_type
    if kind is DataType.CHAR:
        content = char_to_text(value)
    elif kind is DataType.STRING:
        content = string_to_text(value)
    elif kind is DataType.POINTER:
        content = pointer_to_text(value)
    elif kind in (DataType.INT, DataType.EXPANDED_BASE_INT):
        content = int_to_text(value)
    elif kind is DataType.UNSIGNED_INT:
        content = unsigned_to_text(value)
    elif kind is DataType.LOWER_HEX:
        content = hex_to_text(value, False)
    elif kind is DataType.UPPER_HEX:
        content = hex_to_text(value, True)
    else:
        content = "%"
    spec.content = content
    spec.content_len = len(content)
    return content