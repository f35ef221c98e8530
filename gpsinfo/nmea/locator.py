"""Sentence locator.

Finds where a sentence of a given kind starts inside a byte stream:

    $GPGGA,...*hh\\r\\n$GPRMC,...*hh\\r\\n
                     ^
                     index returned for AddressIdentifier.RMC

The sentence code sits at offsets +3..+5 from the '$' (after the two-letter
talker ID), so any talker is accepted.

Two matching strategies are available:
    exact (default): compare the three code bytes with the kind's code.
    by sum: compare the sum of the three bytes with the kind's
        ``identifier_sum``. Cheaper on constrained targets, but distinct
        codes can share a sum (e.g. "GSA" and "GAS"), so a sentence of an
        unsupported kind may be taken for a supported one.
"""

from gpsinfo.nmea.scanner import find_index
from gpsinfo.nmea.types import ADDRESS_INDICATOR, NOT_FOUND, AddressIdentifier

# '$' + two-letter talker ID + three-letter sentence code
_ADDRESS_LENGTH = 6
_CODE_OFFSET = 3


def _matches(
    stream: bytes, index: int, address: AddressIdentifier, match_by_sum: bool
) -> bool:
    code = bytes(stream[index + _CODE_OFFSET : index + _ADDRESS_LENGTH])
    if match_by_sum:
        return sum(code) == address.identifier_sum
    return code == address.code


def find_address(
    stream: bytes,
    size: int,
    start_index: int,
    address: AddressIdentifier,
    *,
    match_by_sum: bool = False,
) -> int:
    """Find the start of the first sentence of kind ``address``.

    Args:
        stream: Bytes holding one or more sentences.
        size: Number of bytes of ``stream`` to consider.
        start_index: Position to start searching from.
        address: Requested sentence kind.
        match_by_sum: Identify the kind by the sum of its code bytes instead
            of an exact comparison.

    Returns:
        Index of the '$' starting the matching sentence, or NOT_FOUND if no
        such sentence exists or the stream ends less than six bytes after a
        '$'.
    """
    end = min(size, len(stream))
    index = start_index
    while True:
        index = find_index(stream, end, index, ADDRESS_INDICATOR)
        if index == NOT_FOUND or index + _ADDRESS_LENGTH > end:
            return NOT_FOUND
        if _matches(stream, index, address, match_by_sum):
            return index
        index += 1
