"""Fixed-size string copying, concatenation and per-character mapping.

Strings are treated as NUL-terminated: an embedded NUL character ends
the text it appears in.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

_NUL = "\0"


class ConcatResult(NamedTuple):
    """Outcome of :func:`bounded_concat`.

    ``text`` is the string left in the buffer; ``length`` is the length
    of the string the concatenation tried to build.
    """

    text: str
    length: int


def _c_str(s: str) -> str:
    """Return ``s`` up to, but not including, its first NUL character."""
    return s.partition(_NUL)[0]


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def bounded_concat(dst: str, src: str, size: int) -> ConcatResult:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    The buffer keeps room for a terminating NUL, so at most
    ``size - len(dst) - 1`` characters of ``src`` are appended. When
    ``dst`` already fills the buffer nothing is appended and the reported
    length is ``size + len(src)``; otherwise it is ``len(dst) + len(src)``.
    """
    _non_negative(size, "size")
    dst = _c_str(dst)
    src = _c_str(src)
    dst_len = min(len(dst), size)
    room = size - dst_len
    if room == 0:
        return ConcatResult(dst, size + len(src))
    return ConcatResult(dst + src[: room - 1], dst_len + len(src))


def concat_n(s1: str, s2: str, n: int) -> str:
    """Return ``s1`` followed by at most ``n`` characters of ``s2``."""
    _non_negative(n, "n")
    return _c_str(s1) + _c_str(s2)[:n]


def copy_n(src: str, n: int) -> str:
    """Copy exactly ``n`` characters from ``src``.

    A shorter source is padded with NUL characters; a longer one is cut
    without adding a terminator.
    """
    _non_negative(n, "n")
    return _c_str(src)[:n].ljust(n, _NUL)


def map_chars(s: str, f: Callable[[str], str]) -> str:
    """Return a new string made of ``f`` applied to each character of ``s``."""
    return "".join(f(ch) for ch in _c_str(s))


def map_chars_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Like :func:`map_chars`, passing each character's index to ``f`` first."""
    return "".join(f(i, ch) for i, ch in enumerate(_c_str(s)))


def iter_chars(s: str, f: Callable[[str], object]) -> None:
    """Call ``f`` on each character of ``s`` in order."""
    for ch in _c_str(s):
        f(ch)


def iter_chars_indexed(s: str, f: Callable[[int, str], object]) -> None:
    """Call ``f`` with the index and value of each character of ``s``."""
    for i, ch in enumerate(_c_str(s)):
        f(i, ch)