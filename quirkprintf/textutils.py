"""Small string helpers with C-library semantics used by the formatter."""

from __future__ import annotations

from itertools import zip_longest

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _terminated(text: str) -> str:
    """Return *text* cut at its first NUL character, as a C string would be."""
    return text.split("\0", 1)[0]


def is_digit(char: str) -> bool:
    """Return True if *char* is a single ASCII decimal digit."""
    return isinstance(char, str) and len(char) == 1 and "0" <= char <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; no digits at all yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(number: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed int")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split *text* on *separator*, dropping empty pieces."""
    _check_char(separator)
    text = _terminated(text)
    if separator == "\0":
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    if not text or not charset:
        return text
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of *needle* within the first *length* characters of *haystack*.

    An empty needle matches at 0; a missing one gives None.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = _terminated(haystack)[:length].find(needle)
    return None if index == -1 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most *count* characters; return the code-point difference."""
    if count < 0:
        raise ValueError("count must not be negative")
    left = _terminated(first)[:count]
    right = _terminated(second)[:count]
    for a, b in zip_longest(left, right, fillvalue=""):
        if a != b:
            return (ord(a) if a else 0) - (ord(b) if b else 0)
    return 0


def substr(text: str, start: int, length: int) -> str:
    """Return up to *length* characters of *text* beginning at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strchr(text: str, char: str) -> int | None:
    """Index of the first *char* in *text*; NUL matches the end."""
    _check_char(char)
    text = _terminated(text)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index == -1 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last *char* in *text*; NUL matches the end."""
    _check_char(char)
    text = _terminated(text)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index