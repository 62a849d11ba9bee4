"""Writing characters, strings and numbers to file descriptors.

A negative descriptor is ignored and nothing is written. Every function
returns the number of bytes written.
"""

from __future__ import annotations

import operator
import os
from typing import Optional

STDOUT = 1


def _write_all(fd: int, data: bytes) -> int:
    if fd < 0:
        return 0
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char(c: str, fd: int = STDOUT) -> int:
    """Write the single character ``c`` to ``fd``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _write_all(fd, c.encode("utf-8"))


def put_str(s: Optional[str], fd: int = STDOUT) -> int:
    """Write ``s`` to ``fd``; ``None`` writes nothing."""
    if s is None:
        return 0
    return _write_all(fd, s.encode("utf-8"))


def put_endl(s: Optional[str], fd: int = STDOUT) -> int:
    """Write ``s`` followed by a newline to ``fd``; ``None`` writes nothing."""
    if s is None:
        return 0
    return _write_all(fd, (s + "\n").encode("utf-8"))


def put_nbr(n: int, fd: int = STDOUT) -> int:
    """Write the decimal form of the integer ``n`` to ``fd``."""
    return _write_all(fd, str(operator.index(n)).encode("ascii"))