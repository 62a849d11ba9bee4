"""Building, cutting and splitting strings."""

from __future__ import annotations

_TRIM_CHARS = " \t\n"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on the delimiter character ``c``.

    Runs of delimiters count as one, and empty words are never produced,
    so leading and trailing delimiters are ignored.
    """
    delimiter = _single_char(c)
    return [word for word in s.split(delimiter) if word]


def trim(s: str) -> str:
    """Remove leading and trailing spaces, tabs and newlines."""
    return s.strip(_TRIM_CHARS)


def substring(s: str, start: int, length: int) -> str:
    """Return ``length`` characters of ``s`` beginning at ``start``.

    Raises ValueError for a negative start or length and IndexError when
    the requested range runs past the end of ``s``.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    end = start + length
    if end > len(s):
        raise IndexError(
            f"range {start}:{end} runs past the end of a string of length {len(s)}"
        )
    return s[start:end]


def join(s1: str, s2: str) -> str:
    """Return a new string holding ``s1`` followed by ``s2``."""
    return s1 + s2