"""Operations on raw byte buffers.

Buffers are bytes-like objects; functions that write need a mutable one
such as ``bytearray``. Fill and search values are taken modulo 256, as
for unsigned char. A range that runs past the end of a buffer raises
IndexError, and a negative count or offset raises ValueError.
"""

from __future__ import annotations

from itertools import islice
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
Writable = Union[bytearray, memoryview]

_BYTE_MASK = 0xFF


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def _fits(data: BytesLike, start: int, n: int, name: str) -> None:
    if start + n > len(data):
        raise IndexError(
            f"range {start}:{start + n} runs past the end of {name} "
            f"of length {len(data)}"
        )


def mem_set(buf: Writable, c: int, n: int) -> Writable:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _non_negative(n, "n")
    _fits(buf, 0, n, "buf")
    buf[:n] = bytes([c & _BYTE_MASK]) * n
    return buf


def mem_copy(dst: Writable, src: BytesLike, n: int) -> Writable:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``; return ``dst``."""
    _non_negative(n, "n")
    _fits(src, 0, n, "src")
    _fits(dst, 0, n, "dst")
    dst[:n] = bytes(src[:n])
    return dst


def mem_ccopy(dst: Writable, src: BytesLike, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past
    the copied ``c``, or ``None`` when ``c`` is not among the first ``n``
    bytes of ``src``.
    """
    _non_negative(n, "n")
    target = c & _BYTE_MASK
    copied = 0
    for index, byte in enumerate(islice(bytes(src), n)):
        if index >= len(dst):
            raise IndexError(f"dst of length {len(dst)} is too short")
        dst[index] = byte
        copied = index + 1
        if byte == target:
            return copied
    if copied < n:
        raise IndexError(f"src of length {len(src)} is too short for {n} bytes")
    return None


def mem_move(buf: Writable, dst_offset: int, src_offset: int, n: int) -> Writable:
    """Copy ``n`` bytes within ``buf`` from ``src_offset`` to ``dst_offset``.

    The two ranges may overlap; the result is as if the source bytes were
    first copied aside. Returns ``buf``.
    """
    _non_negative(n, "n")
    _non_negative(dst_offset, "dst_offset")
    _non_negative(src_offset, "src_offset")
    _fits(buf, src_offset, n, "buf")
    _fits(buf, dst_offset, n, "buf")
    buf[dst_offset : dst_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf


def mem_chr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or ``None``."""
    _non_negative(n, "n")
    _fits(data, 0, n, "data")
    index = bytes(data[:n]).find(c & _BYTE_MASK)
    return index if index >= 0 else None


def mem_compare(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first differing pair of bytes, or 0.
    """
    _non_negative(n, "n")
    _fits(a, 0, n, "a")
    _fits(b, 0, n, "b")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0