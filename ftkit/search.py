"""Substring and character search.

Search functions return the index of the match, or ``None`` when there
is none.
"""

from __future__ import annotations

from typing import Optional

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _index_or_none(index: int) -> Optional[int]:
    return index if index >= 0 else None


def find(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle is at 0."""
    return _index_or_none(haystack.find(needle))


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`find`, but the match must lie within the first ``length`` characters.

    An empty needle is always found at 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    return _index_or_none(haystack.find(needle, 0, length))


def prefix_function(s: str) -> list[int]:
    """Border table of ``s`` used by :func:`find_kmp`.

    ``result[i]`` is the length of a border of ``s[:i + 1]``. After a
    mismatch only a single fallback step is taken per character, and the
    current border length is not reset when that step also fails.
    """
    table = [0] * len(s)
    j = 0
    for i, ch in enumerate(s[1:], start=1):
        if ch != s[j] and j != 0:
            j = table[j - 1]
        if ch == s[j]:
            j += 1
            table[i] = j
    return table


def find_kmp(haystack: str, needle: str) -> Optional[int]:
    """Search for ``needle`` using the table from :func:`prefix_function`."""
    if not needle:
        return 0
    table = prefix_function(needle)
    n, m = len(haystack), len(needle)
    i = j = 0
    while i < n:
        start = i - j
        while i < n and j < m and haystack[i] == needle[j]:
            i += 1
            j += 1
        if j == m:
            return start
        if j == 0:
            i += 1
        else:
            j = table[j - 1]
    return None


def find_char(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    c = _single_char(c)
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == _NUL else None


def rfind_char(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    c = _single_char(c)
    if c == _NUL:
        return len(s)
    return _index_or_none(s.rfind(c))