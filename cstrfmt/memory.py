"""Byte-buffer primitives: search, compare, copy and fill."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _view(data: BytesLike) -> memoryview:
    return memoryview(data).cast("B")


def _check_count(n: int, *views: memoryview) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for view in views:
        if n > len(view):
            raise ValueError(f"byte count {n} exceeds buffer length {len(view)}")


def memchr(data: BytesLike, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c & 0xFF`` within the
    first ``n`` bytes of ``data``, or ``None`` when there is none."""
    view = _view(data)
    _check_count(n, view)
    index = bytes(view[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    left, right = _view(first), _view(second)
    _check_count(n, left, right)
    for a, b in zip(bytes(left[:n]), bytes(right[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray | memoryview, src: BytesLike, n: int):
    """Copy ``n`` bytes from ``src`` into the start of ``dest``; return ``dest``."""
    target, source = _view(dest), _view(src)
    _check_count(n, target, source)
    if target.readonly:
        raise TypeError("destination buffer is read-only")
    target[:n] = bytes(source[:n])
    return dest


def memset(buf: bytearray | memoryview, c: int, n: int):
    """Set the first ``n`` bytes of ``buf`` to ``c & 0xFF``; return ``buf``."""
    target = _view(buf)
    _check_count(n, target)
    if target.readonly:
        raise TypeError("buffer is read-only")
    target[:n] = bytes([c & 0xFF]) * n
    return buf