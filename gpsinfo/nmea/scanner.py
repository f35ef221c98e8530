"""Byte scanning primitives.

Both functions work on any bytes-like stream (``bytes``, ``bytearray``,
``memoryview``) and never look at positions at or beyond ``size``.
"""

from gpsinfo.nmea.types import NOT_FOUND


def _as_byte(value: int | bytes) -> int:
    if isinstance(value, int):
        return value
    if len(value) != 1:
        raise ValueError(f"expected a single byte, got {value!r}")
    return value[0]


def find_index(stream: bytes, size: int, start_index: int, value: int | bytes) -> int:
    """Find the first index of a byte value at or after ``start_index``.

    Args:
        stream: Bytes to scan.
        size: Number of bytes of ``stream`` to consider; also the end index.
        start_index: First position to look at.
        value: Byte to search for, as an int or a one-byte ``bytes``.

    Returns:
        The smallest ``i`` with ``start_index <= i < size`` and
        ``stream[i] == value``, or NOT_FOUND.

    Example:
        >>> find_index(b"$GPRMC,1", 8, 0, b",")
        6
    """
    target = _as_byte(value)
    end = min(size, len(stream))
    if start_index < 0 or start_index >= end:
        return NOT_FOUND

    index = bytes(stream[start_index:end]).find(target)
    if index < 0:
        return NOT_FOUND
    return start_index + index


def find_xth_index(
    stream: bytes,
    size: int,
    start_index: int,
    value: int | bytes,
    xth: int,
) -> int:
    """Find the index of the ``xth`` occurrence of a byte value.

    Occurrences are counted from 1, at or after ``start_index``. Each search
    resumes one position past the previous match.

    Example:
        >>> find_xth_index(b"abvdasdaf", 9, 0, b"a", 3)
        7
    """
    if xth < 1:
        return NOT_FOUND

    index = start_index - 1
    for _ in range(xth):
        index = find_index(stream, size, index + 1, value)
        if index == NOT_FOUND:
            return NOT_FOUND
    return index
