import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha(ch):
    assert is_alpha(ch)
    assert is_alpha(ord(ch))
    assert not is_digit(ch)


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch)
    assert is_digit(ord(ch))
    assert not is_alpha(ch)


@pytest.mark.parametrize("ch", list(string.punctuation + " \t\n"))
def test_punctuation_is_neither_letter_nor_digit(ch):
    assert not is_alnum(ch)


@given(st.integers(min_value=-1000, max_value=1000))
def test_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@given(st.integers(min_value=-1000, max_value=1000))
def test_printable_implies_ascii(code):
    if is_print(code):
        assert is_ascii(code)


@given(st.integers(min_value=-1000, max_value=1000))
def test_alnum_implies_printable(code):
    if is_alnum(code):
        assert is_print(code)


def test_ascii_boundaries():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_print_boundaries():
    assert is_print(32)
    assert is_print(126)
    assert not is_print(31)
    assert not is_print(127)


def test_non_ascii_letter_is_not_alpha():
    assert not is_alpha("é")
    assert not is_ascii("é")


def test_to_lower_maps_uppercase_alphabet():
    assert "".join(to_lower(ch) for ch in string.ascii_uppercase) == string.ascii_lowercase


def test_to_upper_maps_lowercase_alphabet():
    assert "".join(to_upper(ch) for ch in string.ascii_lowercase) == string.ascii_uppercase


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


@given(st.integers(min_value=-1000, max_value=1000))
def test_non_letters_unchanged(code):
    if not is_alpha(code):
        assert to_lower(code) == code
        assert to_upper(code) == code


@given(st.sampled_from(list(string.ascii_letters)))
def test_case_round_trip(ch):
    assert to_upper(to_lower(ch)) == to_upper(ch)
    assert to_lower(to_upper(ch)) == to_lower(ch)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)