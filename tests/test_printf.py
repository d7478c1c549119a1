import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.printf import printf, sprintf


def test_plain_text_passes_through():
    assert sprintf("no conversions here") == "no conversions here"


def test_percent_escape():
    assert sprintf("%%") == "%"


def test_lone_trailing_percent_raises():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_unknown_conversion_is_dropped_without_consuming():
    assert sprintf("ab%zcd%s", "tail") == "abcdtail"


def test_char_from_string_and_code():
    assert sprintf("%c%c", "A", ord("b")) == "Ab"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_string_inserted():
    assert sprintf("[%s]", "word") == "[word]"


def test_null_pointer():
    assert sprintf("%p", 0) == "(nil)"
    assert sprintf("%p", None) == "(nil)"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_is_prefixed_hex(address):
    text = sprintf("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text[2:] == text[2:].lower()


def test_int_min_wraps_from_overflow():
    assert sprintf("%d", 2**31) == "-2147483648"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_decimal_round_trips(n):
    assert int(sprintf("%d", n)) == n
    assert sprintf("%i", n) == sprintf("%d", n)


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_unsigned_is_value_modulo_two_to_32(n):
    assert int(sprintf("%u", n)) == n % 2**32


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_round_trips_and_case(n):
    lower = sprintf("%x", n)
    upper = sprintf("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()


def test_not_enough_arguments_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "7")


def test_embedded_nul_ends_format():
    assert sprintf("ab\0cd") == "ab"


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s=%d%%", "n", 5, stream=buf)
    assert buf.getvalue() == sprintf("%s=%d%%", "n", 5)
    assert count == len(buf.getvalue())


def test_printf_error_writes_nothing():
    buf = io.StringIO()
    with pytest.raises(ValueError):
        printf("x%", stream=buf)
    assert buf.getvalue() == ""