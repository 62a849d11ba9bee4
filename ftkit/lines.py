"""Line-by-line reading from file descriptors.

Each descriptor keeps its own pending data, so reads from several
descriptors may be interleaved freely.
"""

from __future__ import annotations

import operator
import os
from typing import Dict, Iterator, Optional

BUFF_SIZE = 2
MAX_FD = 1025
_NEWLINE = b"\n"


class LineReader:
    """Reads newline-terminated lines from file descriptors.

    Data is read ``buffer_size`` bytes at a time. Lines are returned
    without their newline; a final line without a newline is returned
    as it is.
    """

    def __init__(self, buffer_size: int = BUFF_SIZE, encoding: str = "utf-8") -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._pending: Dict[int, bytes] = {}

    def _decode(self, data: bytes) -> str:
        return data.decode(self.encoding, errors="replace")

    def _take_line(self, fd: int) -> Optional[str]:
        """Remove and return one complete line from the pending data, if any."""
        pending = self._pending.get(fd, b"")
        line, newline, rest = pending.partition(_NEWLINE)
        if not newline:
            return None
        self._pending[fd] = rest
        return self._decode(line)

    def read_line(self, fd: int) -> Optional[str]:
        """Return the next line from ``fd``, or ``None`` at end of input.

        Raises ValueError for a descriptor outside 0 to MAX_FD - 1 and
        OSError when the descriptor cannot be read.
        """
        fd = operator.index(fd)
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor {fd} is out of range")
        line = self._take_line(fd)
        if line is not None:
            return line
        os.read(fd, 0)
        while True:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            self._pending[fd] = self._pending.get(fd, b"") + chunk
            line = self._take_line(fd)
            if line is not None:
                return line
        rest = self._pending.pop(fd, b"")
        return self._decode(rest) if rest else None

    def lines(self, fd: int) -> Iterator[str]:
        """Yield the remaining lines of ``fd`` until end of input."""
        while True:
            line = self.read_line(fd)
            if line is None:
                return
            yield line