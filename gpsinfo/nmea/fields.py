"""NMEA field value converters.

These converters turn an inclusive byte range of a sentence into a number or
a character. They do not validate their input: a numeric range holding
anything other than ASCII digits (and, for floats, '.') produces an
unspecified number. An empty range (``end_index < start_index``) converts
to zero.

Digits are accumulated from the least significant end, so a range such as
"4807.038" is walked right to left:

    8 * 10**0, 3 * 10**1, 0 * 10**2     -> 38, then '.' at position 3
    38 * 10**-3                          -> 0.038
    7 * 10**(4-1-3), 0 * 10**1, ...      -> 4807.038
"""

from gpsinfo.nmea.types import FLOAT_SEPARATOR

_ZERO = ord("0")


def ascii_to_unsigned(stream: bytes, start_index: int, end_index: int) -> int:
    """Convert the digits in ``stream[start_index:end_index + 1]`` to an int.

    Example:
        >>> ascii_to_unsigned(b"230394", 0, 5)
        230394
    """
    total = 0
    for position in range(end_index - start_index + 1):
        total += (stream[end_index - position] - _ZERO) * 10**position
    return total


def ascii_to_float(stream: bytes, start_index: int, end_index: int) -> float:
    """Convert the decimal in ``stream[start_index:end_index + 1]`` to a float.

    Digits right of the '.' are accumulated as an integer and scaled down by
    ``10**-k`` once the separator is met at position ``k`` from the right.
    Each digit left of it at position ``i`` then adds ``digit * 10**(i-1-k)``.
    There is no sign handling.

    The sum is kept as an exact integer fraction and divided once at the
    end, so arbitrarily long fields cannot overflow while digits are added.

    Raises:
        OverflowError: if the value is too large for a float.

    Example:
        >>> ascii_to_float(b"1234.56", 0, 6)
        1234.56
    """
    numerator = 0
    denominator = 1
    separator_position = -1
    for position in range(end_index - start_index + 1):
        byte = stream[end_index - position]
        if byte == FLOAT_SEPARATOR:
            denominator *= 10**position
            separator_position = position
        else:
            weight = 10 ** (position - 1 - separator_position)
            numerator += (byte - _ZERO) * weight * denominator
    return numerator / denominator


def get_single_char(stream: bytes, index: int) -> str:
    """Return the byte at ``index`` as a one-character string."""
    return chr(stream[index])
