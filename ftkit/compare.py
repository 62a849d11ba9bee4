"""String comparison in the manner of NUL-terminated strings.

Comparison stops at the end of either string or at an embedded NUL.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterable, Optional, Tuple

_NUL = "\0"


def _pairs(s1: str, s2: str) -> Iterable[Tuple[str, str]]:
    return zip_longest(s1, s2, fillvalue=_NUL)


def _difference(pairs: Iterable[Tuple[str, str]]) -> int:
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def compare(s1: str, s2: str) -> int:
    """Difference of the first differing characters' codes, or 0 if equal.

    A shorter string compares as if followed by a NUL character.
    """
    return _difference(_pairs(s1, s2))


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _difference(islice(_pairs(s1, s2), n))


def equal(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are present and compare equal."""
    if s1 is None or s2 is None:
        return False
    return compare(s1, s2) == 0


def equal_n(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are present and agree in their first ``n`` characters."""
    if s1 is None or s2 is None:
        return False
    return compare_n(s1, s2, n) == 0