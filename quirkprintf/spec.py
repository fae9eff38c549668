"""Format specifier model and the parser that finds specifiers in a format."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from quirkprintf.textutils import is_digit


class FormatError(ValueError):
    """Raised when a format string holds a specifier with no conversion."""


class DataType(Enum):
    """Conversion kinds, keyed by their conversion character."""

    CHAR = "c"
    STRING = "s"
    POINTER = "p"
    INT = "d"
    EXPANDED_BASE_INT = "i"
    UNSIGNED_INT = "u"
    LOWER_HEX = "x"
    UPPER_HEX = "X"
    PERCENT_SIGN = "%"


@dataclass
class Flags:
    """Flag states: 0 means absent, 1 active and -1 switched off."""

    alignment: int = 0
    fill_zero: int = 0
    precision: int = 0
    prefix: int = 0
    plus_sign: int = 0
    insert_space: int = 0
    field_width: int = 0


@dataclass
class FormatSpec:
    """One specifier of a format string and the text it renders to."""

    data_type: DataType
    start: int
    end: int
    text: str
    flags: Flags = field(default_factory=Flags)
    content: str | None = None
    content_len: int = -1


_FLAG_NAMES = {
    "-": "alignment",
    ".": "precision",
    "#": "prefix",
    "+": "plus_sign",
    " ": "insert_space",
}


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def find_char(text: str, char: str, start: int) -> int | None:
    """Index of the first *char* at or after *start*, or None.

    The search stops at a NUL character, as in a C string.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if start < 0:
        return None
    index = _terminated(text).find(char, start)
    return None if index == -1 else index


def classify(char: str) -> DataType | None:
    """Return the conversion kind named by *char*, or None."""
    try:
        return DataType(char)
    except ValueError:
        return None


def check_width_flags(spec: FormatSpec) -> None:
    """Set the zero-fill and field-width flags from the digits before any '.'."""
    zero_before_digit = True
    for char in spec.text[1:]:
        if char == ".":
            break
        if is_digit(char) and char != "0":
            zero_before_digit = False
        if (
            char == "0"
            and zero_before_digit
            and spec.data_type not in (DataType.CHAR, DataType.STRING)
        ):
            spec.flags.fill_zero = 1
        if (
            is_digit(char)
            and spec.flags.fill_zero != 1
            and spec.flags.alignment != 1
            and spec.data_type is not DataType.PERCENT_SIGN
        ):
            spec.flags.field_width = 1


def _parse_one(text: str, start: int) -> FormatSpec:
    end = next(
        (pos for pos, char in enumerate(text[start + 1:], start + 1)
         if classify(char) is not None),
        None,
    )
    if end is None:
        raise FormatError(
            f"specifier at index {start} has no conversion character"
        )
    data_type = classify(text[end])
    spec = FormatSpec(data_type=data_type, start=start, end=end,
                      text=text[start:end + 1])
    if data_type is not DataType.PERCENT_SIGN:
        for char in spec.text[1:]:
            name = _FLAG_NAMES.get(char)
            if name is not None:
                setattr(spec.flags, name, 1)
    check_width_flags(spec)
    return spec


def parse_specifiers(fmt: str) -> list[FormatSpec]:
    """Find every specifier in *fmt*, in order of appearance.

    Raises FormatError when a '%' is not followed by a conversion character.
    """
    text = _terminated(fmt)
    specs: list[FormatSpec] = []
    index = find_char(text, "%", 0)
    while index is not None:
        spec = _parse_one(text, index)
        specs.append(spec)
        if spec.data_type is DataType.PERCENT_SIGN:
            resume = spec.end + 1
        else:
            resume = index + 1
        index = find_char(text, "%", resume)
    return specs