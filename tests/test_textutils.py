import pytest

from quirkprintf.textutils import (
    atoi,
    is_digit,
    itoa,
    split,
    strchr,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("char", list("0123456789"))
def test_is_digit_accepts_digits(char):
    assert is_digit(char) is True


@pytest.mark.parametrize("char", ["a", " ", "-", ".", "", "12", "/", ":"])
def test_is_digit_rejects_others(char):
    assert is_digit(char) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-42abc", -42),
        ("+17", 17),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("- 5", 0),
        ("007", 7),
    ],
)
def test_atoi_values(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("number", [0, 1, -1, 123, -987, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("number", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(number):
    with pytest.raises(OverflowError):
        itoa(number)


@pytest.mark.parametrize(
    "text, sep",
    [("  hello  world ", " "), ("a,,b,c,", ","), ("none", "x"), (",,,", ",")],
)
def test_split_invariants(text, sep):
    pieces = split(text, sep)
    assert all(pieces)
    assert all(sep not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(sep, "")


def test_split_values():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []


def test_split_nul_separator_keeps_whole():
    assert split("abc", "\0") == ["abc"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_all_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_unchanged():
    assert strtrim("  keep  ", "") == "  keep  "


def test_strnstr_found_and_limited():
    haystack = "Foo Bar Baz"
    idx = strnstr(haystack, "Bar", len(haystack))
    assert haystack[idx:idx + 3] == "Bar"
    assert strnstr(haystack, "Bar", 6) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strncmp_equal_and_sign():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_prefix():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strncmp_zero_count():
    assert strncmp("x", "y", 0) == 0


def test_substr_cases():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 10, 2) == ""
    assert substr("hello", 2, 100) == "llo"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strchr_and_strrchr():
    text = "banana"
    first = strchr(text, "a")
    last = strrchr(text, "a")
    assert text[first] == "a" and "a" not in text[:first]
    assert text[last] == "a" and "a" not in text[last + 1:]
    assert first < last


def test_strchr_missing_and_nul():
    assert strchr("abc", "z") is None
    assert strrchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")