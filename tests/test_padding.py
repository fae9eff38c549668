import pytest

from quirkprintf.conversions import NIL, render_raw
from quirkprintf.padding import apply_alignment, apply_insert_space, apply_width
from quirkprintf.spec import parse_specifiers


def _rendered(fmt, value=None):
    spec = parse_specifiers(fmt)[0]
    render_raw(spec, value)
    return spec


def test_width_pads_on_the_left():
    spec = _rendered("%6d", 42)
    assert apply_width(spec) == "42".rjust(6)
    assert spec.content == "42".rjust(6)
    assert spec.content_len == 6


def test_width_narrower_than_content_leaves_it():
    spec = _rendered("%2d", 12345)
    assert apply_width(spec) == "12345"
    assert spec.content_len == 5


def test_width_without_digits_leaves_content():
    spec = _rendered("%d", 7)
    assert apply_width(spec) == "7"
    assert spec.content_len == 1


def test_width_keeps_nul_char():
    spec = _rendered("%3c", 0)
    assert apply_width(spec) == "\0".rjust(3)
    assert spec.content_len == 3


def test_width_requires_rendered_content():
    spec = parse_specifiers("%5d")[0]
    with pytest.raises(ValueError):
        apply_width(spec)


def test_alignment_pads_on_the_right():
    spec = _rendered("%-6s", "ab")
    assert apply_alignment(spec) == "ab".ljust(6)
    assert spec.content_len == 6


def test_alignment_reads_width_after_last_minus():
    spec = _rendered("%--4d", 7)
    assert apply_alignment(spec) == "7".ljust(4)
    assert spec.content_len == 4


def test_alignment_without_width_leaves_content():
    spec = _rendered("%-d", 5)
    assert apply_alignment(spec) == "5"
    assert spec.content_len == 1


def test_alignment_counts_nul_char():
    spec = _rendered("%-3c", 0)
    assert apply_alignment(spec) == "\0".ljust(3)
    assert spec.content_len == 3


def test_alignment_reserves_column_for_space_flag():
    spec = _rendered("%- 5d", 42)
    assert apply_alignment(spec) == "42".ljust(4)
    assert spec.content_len == 4
    assert apply_insert_space(spec) == " " + "42".ljust(4)
    assert spec.content_len == 5


def test_alignment_char_with_disabled_plus_reads_after_plus():
    spec = _rendered("%-+5c", "a")
    spec.flags.plus_sign = -1
    assert apply_alignment(spec) == "a".ljust(5)


def test_alignment_char_with_plus_before_minus_is_negative_width():
    spec = _rendered("%+-5c", "a")
    spec.flags.plus_sign = -1
    assert apply_alignment(spec) == "a"
    assert spec.content_len == 1


def test_insert_space_prefixes_positive():
    spec = _rendered("% d", 42)
    assert apply_insert_space(spec) == " 42"
    assert spec.flags.field_width == 1
    assert spec.content_len == 3


def test_insert_space_skips_negative():
    spec = _rendered("% d", -3)
    assert apply_insert_space(spec) == "-3"
    assert spec.flags.field_width == 0


def test_insert_space_disabled_for_nil():
    spec = _rendered("% p", None)
    assert apply_insert_space(spec) == NIL
    assert spec.flags.insert_space == -1


def test_insert_space_disabled_by_precision_on_unsigned():
    spec = _rendered("% .2u", 5)
    assert apply_insert_space(spec) == "5"
    assert spec.flags.insert_space == -1


def test_insert_space_on_string_ignores_minus():
    spec = _rendered("% s", "-x")
    assert apply_insert_space(spec) == " -x"
    assert spec.content_len == 3