import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)
    assert is_alpha(chr(code)) == is_alpha(code)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_printable_ascii(code):
    assert is_print(code) == chr(code).isprintable()


def test_is_ascii_range_bounds():
    assert all(is_ascii(code) for code in ASCII_CODES)
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


@given(st.integers(min_value=128, max_value=0x10FFFF))
def test_non_ascii_codes_are_not_classified(code):
    assert not any(
        predicate(code)
        for predicate in (is_alpha, is_digit, is_alnum, is_ascii, is_print)
    )


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_to_upper_on_lowercase_letters(letter):
    assert to_upper(letter) == letter.upper()
    assert to_upper(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_to_lower_on_uppercase_letters(letter):
    assert to_lower(letter) == letter.lower()
    assert to_lower(ord(letter)) == ord(letter.lower())


@pytest.mark.parametrize("letter", string.ascii_letters)
def test_case_round_trip(letter):
    assert to_lower(to_upper(letter)) == letter.lower()
    assert to_upper(to_lower(letter)) == letter.upper()


@given(st.integers(min_value=-1000, max_value=0x10FFFF))
def test_case_conversion_leaves_non_letters(code):
    if not is_alpha(code):
        assert to_upper(code) == code
        assert to_lower(code) == code
    else:
        assert is_alpha(to_upper(code))
        assert is_alpha(to_lower(code))


def test_case_conversion_keeps_input_kind():
    assert isinstance(to_upper("q"), str)
    assert to_upper("q") == "Q"


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_non_integer_is_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)