"""Space padding: left alignment, field width and the space flag.

Each applier works on a specifier whose raw content has already been
rendered, replaces that content in place and returns the new text.
"""

from __future__ import annotations

from quirkprintf.conversions import NIL
from quirkprintf.flags import contains_nil
from quirkprintf.spec import DataType, FormatSpec, find_char
from quirkprintf.textutils import atoi, is_digit

_SPACE_TYPES = frozenset(
    {DataType.INT, DataType.EXPANDED_BASE_INT, DataType.POINTER}
)


def _content(spec: FormatSpec) -> str:
    if spec.content is None:
        raise ValueError("specifier has no rendered content yet")
    return spec.content


def _c_len(text: str) -> int:
    """Length of *text* up to its first NUL character."""
    return len(text.split("\0", 1)[0])


def _alignment_start(text: str) -> int:
    """Index just before the width that follows the last '-' of *text*."""
    index = max(text.rfind("-", 1), 0)
    while (
        index + 1 < len(text)
        and not is_digit(text[index + 1])
        and text[index + 1] != "."
    ):
        index += 1
    return index


def _alignment_width(spec: FormatSpec) -> int:
    if spec.data_type is DataType.CHAR and spec.flags.plus_sign == -1:
        plus = find_char(spec.text, "+", 1)
        start = 0 if plus is None else plus + 1
        return atoi(spec.text[start:])
    return atoi(spec.text[_alignment_start(spec.text) + 1:])


def apply_alignment(spec: FormatSpec) -> str:
    """Pad the content on the right with spaces up to the '-' width.

    One column is kept back when an active space flag will later put a
    space in front of a non-negative value.
    """
    content = _content(spec)
    width = _alignment_width(spec)
    modifier = int(
        spec.flags.insert_space == 1
        and atoi(content) >= 0
        and content != NIL
    )
    pad = width - spec.content_len - modifier
    if pad <= 0:
        return content
    padded = content[:spec.content_len] + " " * pad
    spec.content = padded
    if padded.startswith("\0") and spec.data_type is DataType.CHAR:
        spec.content_len += pad
    else:
        spec.content_len = _c_len(padded)
    return padded


def apply_width(spec: FormatSpec) -> str:
    """Pad the content on the left with spaces up to the first number given."""
    content = _content(spec)
    first = next(
        (pos for pos, char in enumerate(spec.text[1:], 1) if is_digit(char)),
        None,
    )
    if first is None:
        return content
    width = atoi(spec.text[first:])
    if width <= 0 or width < spec.content_len:
        return content
    padded = " " * (width - spec.content_len) + content[:spec.content_len]
    spec.content = padded
    spec.content_len = width
    return padded


def apply_insert_space(spec: FormatSpec) -> str:
    """Put a space before content that carries no minus sign.

    The flag is switched off for '(nil)' content and, under a precision,
    for every kind but signed integers and pointers.
    """
    content = _content(spec)
    if contains_nil(content) or (
        spec.flags.precision == 1 and spec.data_type not in _SPACE_TYPES
    ):
        spec.flags.insert_space = -1
        return content
    if (
        find_char(content, "-", 0) is not None
        and spec.data_type is not DataType.STRING
    ):
        return content
    spec.flags.field_width = 1
    spaced = " " + content
    spec.content = spaced
    spec.content_len = _c_len(spaced)
    return spaced