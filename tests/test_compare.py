import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.compare import compare, compare_n, equal, equal_n

_text = st.text(alphabet="abcxyz", max_size=12)


def _sign(value):
    return (value > 0) - (value < 0)


@given(_text, _text)
def test_compare_sign_matches_ordering(a, b):
    assert _sign(compare(a, b)) == (a > b) - (a < b)


@given(_text, _text)
def test_compare_antisymmetric(a, b):
    assert compare(a, b) == -compare(b, a)


def test_compare_reports_code_difference():
    assert compare("abc", "abd") == ord("c") - ord("d")


def test_compare_prefix_against_longer():
    assert compare("abc", "ab") == ord("c")
    assert compare("ab", "abc") == -ord("c")


def test_compare_stops_at_nul():
    assert compare("ab\0x", "ab\0y") == 0


@given(_text)
def test_compare_self_is_zero(s):
    assert compare(s, s) == 0


@given(_text, _text, st.integers(0, 15))
def test_compare_n_looks_at_prefix(a, b, n):
    expected = (a[:n] > b[:n]) - (a[:n] < b[:n])
    assert _sign(compare_n(a, b, n)) == expected


def test_compare_n_zero_is_equal():
    assert compare_n("abc", "xyz", 0) == 0


def test_compare_n_negative_raises():
    with pytest.raises(ValueError):
        compare_n("a", "b", -1)


@given(_text, _text)
def test_equal_matches_python_equality(a, b):
    assert equal(a, b) == (a == b)


def test_equal_with_missing_string():
    assert equal(None, "abc") is False
    assert equal("abc", None) is False


def test_equal_n_prefix_cases():
    assert equal_n("abcdef", "abcxyz", 3) is True
    assert equal_n("abcdef", "abcxyz", 4) is False
    assert equal_n("ab", "abc", 3) is False
    assert equal_n("ab", "ab", 10) is True


def test_equal_n_zero_is_true():
    assert equal_n("abc", "xyz", 0) is True


def test_equal_n_with_missing_string():
    assert equal_n(None, "abc", 0) is False


@given(_text, _text, st.integers(0, 15))
def test_equal_n_matches_prefix_equality(a, b, n):
    assert equal_n(a, b, n) == (a[:n] == b[:n])