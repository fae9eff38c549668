"""Flag appliers that reshape the rendered text of a specifier.

Each applier works on a specifier whose raw content has already been
rendered, replaces that content in place and returns the new text.
"""

from __future__ import annotations

from quirkprintf.conversions import NIL, NULL
from quirkprintf.spec import DataType, FormatSpec, find_char
from quirkprintf.textutils import atoi

_HEX_PREFIXES = {DataType.LOWER_HEX: "0x", DataType.UPPER_HEX: "0X"}


def _content(spec: FormatSpec) -> str:
    if spec.content is None:
        raise ValueError("specifier has no rendered content yet")
    return spec.content


def _store(spec: FormatSpec, text: str) -> str:
    spec.content = text
    spec.content_len = len(text)
    return text


def contains_nil(text: str) -> bool:
    """Return True if the characters of '(nil)' appear in order in *text*.

    The characters need not be adjacent; the text ends at a NUL character.
    """
    text = text.split("\0", 1)[0]
    if len(text) < len(NIL):
        return False
    chars = iter(text)
    return all(char in chars for char in NIL)


def _precision_limit(spec: FormatSpec) -> int:
    dot = find_char(spec.text, ".", 0)
    start = 0 if dot is None else dot + 1
    return atoi(spec.text[start:])


def _truncate_string(spec: FormatSpec, content: str, limit: int) -> str:
    if limit >= len(content) or not content:
        return content
    if limit == 0:
        return _store(spec, "")
    if limit < 0:
        # A negative limit reads as an enormous length: nothing is cut.
        return _store(spec, content)
    return _store(spec, content[:limit])


def _pad_pointer(spec: FormatSpec, content: str, limit: int) -> str:
    if contains_nil(content):
        return content
    x_index = find_char(content, "x", 0)
    digits = content[0 if x_index is None else x_index + 1:]
    if limit <= len(digits):
        return content
    return _store(spec, "0x" + "0" * (limit - len(digits)) + digits)


def _pad_digits(spec: FormatSpec, content: str, limit: int) -> str:
    if limit == 0:
        return _store(spec, "") if content.startswith("0") else content
    negative = "-" in content
    significant = len(content) - int(negative)
    if limit <= significant:
        return content
    zeros = "0" * (limit - significant)
    if negative:
        return _store(spec, "-" + zeros + content[1:])
    return _store(spec, zeros + content)


def apply_precision(spec: FormatSpec) -> str:
    """Apply the '.N' precision to the rendered content of *spec*.

    Strings are cut to N characters, numbers padded with leading zeros to
    N digits, and a zero rendered with precision 0 becomes empty.
    """
    content = _content(spec)
    limit = _precision_limit(spec)
    if content == NULL:
        return content if limit >= len(NULL) else _store(spec, "")
    if spec.data_type is DataType.STRING:
        return _truncate_string(spec, content, limit)
    if spec.data_type is DataType.POINTER:
        return _pad_pointer(spec, content, limit)
    return _pad_digits(spec, content, limit)


def apply_fill_zero(spec: FormatSpec) -> str:
    """Pad the content with zeros up to the width given after the '%'.

    A '(nil)' content or an active precision hands the work over to the
    plain field width instead.
    """
    content = _content(spec)
    if content == NIL or spec.flags.precision == 1:
        spec.flags.field_width = 1
        return content
    zeros = atoi(spec.text[1:]) - len(content)
    if zeros < 1:
        return content
    is_pointer = spec.data_type is DataType.POINTER
    sign = "-" if content.startswith("-") else ""
    body = content[len(sign) + (2 if is_pointer else 0):]
    padded = sign + "0" * zeros + body
    return _store(spec, "0x" + padded if is_pointer else padded)


def apply_plus_sign(spec: FormatSpec) -> str:
    """Prefix '+' to content that holds no minus sign and is not '(nil)'."""
    content = _content(spec)
    if content == NIL or "-" in content:
        return content
    return _store(spec, "+" + content)


def apply_prefix(spec: FormatSpec) -> str:
    """Prefix '0x' or '0X' to non-zero hexadecimal content."""
    content = _content(spec)
    prefix = _HEX_PREFIXES.get(spec.data_type)
    if prefix is None:
        return content
    if not content.strip("0") or contains_nil(content):
        return content
    return _store(spec, prefix + content)