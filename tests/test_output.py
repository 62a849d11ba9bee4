import contextlib
import os
import tempfile

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ftkit.output import put_char, put_endl, put_nbr, put_str


class _Sink:
    """A temporary file exposed by descriptor; its contents are read on close."""

    def __init__(self, handle):
        self._handle = handle
        self.fd = handle.fileno()
        self.data = b""


@contextlib.contextmanager
def _sink():
    with tempfile.TemporaryFile() as handle:
        sink = _Sink(handle)
        yield sink
        os.lseek(sink.fd, 0, os.SEEK_SET)
        sink.data = handle.read()


def test_put_char_writes_one_character():
    with _sink() as out:
        count = put_char("x", out.fd)
    assert out.data == b"x"
    assert count == 1


def test_put_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        put_char("xy", 1)


def test_put_str_writes_text():
    with _sink() as out:
        count = put_str("hello world", out.fd)
    assert out.data == b"hello world"
    assert count == len(out.data)


def test_put_str_none_writes_nothing():
    with _sink() as out:
        count = put_str(None, out.fd)
    assert out.data == b""
    assert count == 0


def test_put_endl_appends_newline():
    with _sink() as out:
        count = put_endl("Error", out.fd)
    assert out.data == b"Error\n"
    assert count == len(out.data)


def test_put_endl_none_writes_nothing():
    with _sink() as out:
        count = put_endl(None, out.fd)
    assert (count, out.data) == (0, b"")


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483648])
def test_put_nbr_writes_decimal(n):
    with _sink() as out:
        count = put_nbr(n, out.fd)
    assert int(out.data) == n
    assert count == len(out.data)


def test_put_nbr_negative_has_sign():
    with _sink() as out:
        put_nbr(-305, out.fd)
    assert out.data == b"-305"


@pytest.mark.parametrize(
    "func, arg",
    [(put_char, "a"), (put_str, "abc"), (put_endl, "abc"), (put_nbr, 12)],
)
def test_negative_descriptor_writes_nothing(func, arg):
    assert func(arg, -1) == 0


def test_put_nbr_rejects_non_integers():
    with pytest.raises(TypeError):
        put_nbr(1.5, 1)


def test_large_text_is_written_completely():
    text = "abcdef" * 5000
    with _sink() as out:
        count = put_str(text, out.fd)
    assert out.data == text.encode()
    assert count == len(text)


@settings(max_examples=50, deadline=None)
@given(st.integers(min_value=-(2**63), max_value=2**63))
def test_put_nbr_round_trip(n):
    with _sink() as out:
        put_nbr(n, out.fd)
    assert int(out.data.decode("ascii")) == n


@settings(max_examples=50, deadline=None)
@given(st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=100))
def test_put_endl_round_trip(s):
    with _sink() as out:
        put_endl(s, out.fd)
    assert out.data.decode("utf-8") == s + "\n"