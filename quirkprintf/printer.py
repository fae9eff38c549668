"""Assembly of formatted output from a format string and its arguments."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from quirkprintf.conversions import render_raw
from quirkprintf.flags import (
    apply_fill_zero,
    apply_plus_sign,
    apply_precision,
    apply_prefix,
)
from quirkprintf.padding import apply_alignment, apply_insert_space, apply_width
from quirkprintf.spec import (
    DataType,
    FormatSpec,
    check_width_flags,
    parse_specifiers,
)

_NO_ZERO_FILL = frozenset(
    {DataType.STRING, DataType.CHAR, DataType.PERCENT_SIGN, DataType.POINTER}
)
_NO_PRECISION = frozenset({DataType.CHAR, DataType.PERCENT_SIGN})
_HEX_TYPES = frozenset({DataType.LOWER_HEX, DataType.UPPER_HEX})
_SIGNED_TYPES = frozenset(
    {DataType.INT, DataType.EXPANDED_BASE_INT, DataType.POINTER}
)


def _has_flags(spec: FormatSpec) -> bool:
    flags = spec.flags
    return any((
        flags.alignment,
        flags.fill_zero,
        flags.precision,
        flags.prefix,
        flags.plus_sign,
        flags.insert_space,
    ))


def resolve_conflicts(spec: FormatSpec) -> None:
    """Switch off flags overridden by others or unfit for the data type.

    A flag counts as present whenever it is non-zero, switched off or not.
    """
    flags = spec.flags
    kind = spec.data_type
    if flags.alignment and flags.fill_zero:
        flags.fill_zero = -1
    if flags.precision and flags.fill_zero:
        flags.fill_zero = -1
        flags.field_width = 1
    if flags.plus_sign and flags.insert_space:
        flags.insert_space = -1
    if flags.fill_zero and kind in _NO_ZERO_FILL:
        flags.fill_zero = -1
        check_width_flags(spec)
    if flags.precision and kind in _NO_PRECISION:
        flags.precision = -1
    if flags.prefix and kind not in _HEX_TYPES:
        flags.prefix = -1
    if flags.plus_sign and kind not in _SIGNED_TYPES:
        flags.plus_sign = -1
    if flags.insert_space and kind not in _SIGNED_TYPES:
        flags.insert_space = -1


def apply_flags(spec: FormatSpec) -> str:
    """Run every active flag over the rendered content, in fixed order."""
    flags = spec.flags
    if flags.precision == 1:
        apply_precision(spec)
    if flags.fill_zero == 1:
        apply_fill_zero(spec)
    if flags.plus_sign == 1:
        apply_plus_sign(spec)
    if flags.prefix == 1:
        apply_prefix(spec)
    if flags.alignment == 1:
        apply_alignment(spec)
    if flags.insert_space == 1:
        apply_insert_space(spec)
    if flags.field_width == 1:
        apply_width(spec)
    content = spec.content
    if content is None:
        raise ValueError("specifier has no rendered content yet")
    if content[:1] not in ("", "\0") and flags.field_width != 1:
        spec.content_len = len(content.split("\0", 1)[0])
    return content


def _assemble(text: str, specs: list[FormatSpec]) -> str:
    pieces = []
    pos = 0
    for spec in specs:
        pieces.append(text[pos:spec.start])
        pieces.append((spec.content or "")[:spec.content_len])
        pos = spec.end + 1
    pieces.append(text[pos:])
    return "".join(pieces)


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with each specifier replaced by its formatted argument.

    Raises FormatError for a specifier with no conversion character and
    TypeError when there are fewer arguments than specifiers need.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    text = fmt.split("\0", 1)[0]
    specs = parse_specifiers(text)
    values = iter(args)
    for position, spec in enumerate(specs):
        if _has_flags(spec):
            for later in specs[position:]:
                resolve_conflicts(later)
        if spec.data_type is DataType.PERCENT_SIGN:
            value = None
        else:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for specifier {spec.text!r}"
                ) from None
        render_raw(spec, value)
        apply_flags(spec)
    return _assemble(text, specs)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to *file* (standard output by default).

    Returns the number of characters written.
    """
    output = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(output)
    return len(output)