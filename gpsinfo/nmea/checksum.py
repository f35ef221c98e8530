"""Checksum control for sentences inside a byte stream.

A sentence carries the XOR of every byte between its '$' and its '*',
written after the '*' as two hexadecimal digits:

    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
     |<------------------------ XORed bytes ------------------------>| ^^

Sentences are located by index in a larger stream, so the search for '*'
is confined to the sentence that starts at the given '$': a line terminator
or the next '$' ends it.
"""

from gpsinfo.nmea.scanner import find_index
from gpsinfo.nmea.types import (
    ADDRESS_INDICATOR,
    CHECKSUM_INDICATOR,
    LINE_TERMINATORS,
    NOT_FOUND,
    ChecksumStatus,
)

_SENTENCE_TERMINATORS = (ADDRESS_INDICATOR, *LINE_TERMINATORS)


def _hex_digit(byte: int) -> int | None:
    """Decode one ASCII hexadecimal digit, accepting both letter cases."""
    character = chr(byte)
    if character in "0123456789abcdefABCDEF":
        return int(character, 16)
    return None


def _decode_provided_checksum(stream: bytes, size: int, index: int) -> int | None:
    """Decode the two hex digits starting at ``index``, or None if malformed."""
    if index + 2 > size:
        return None
    high = _hex_digit(stream[index])
    low = _hex_digit(stream[index + 1])
    if high is None or low is None:
        return None
    return high * 16 + low


def _find_checksum_indicator(stream: bytes, size: int, start_index: int) -> int:
    """Index of the '*' ending the sentence at ``start_index``, or NOT_FOUND."""
    for index in range(start_index + 1, size):
        byte = stream[index]
        if byte == CHECKSUM_INDICATOR:
            return index
        if byte in _SENTENCE_TERMINATORS:
            break
    return NOT_FOUND


def calculate_xor_checksum(stream: bytes, start: int, end: int) -> int:
    """Calculate the XOR checksum of ``stream[start:end]``.

    Example:
        For content "AB", the calculation is:
        ord('A') ^ ord('B') = 0x41 ^ 0x42 = 0x03
    """
    result = 0
    for byte in stream[start:end]:
        result ^= byte
    return result & 0xFF


def control_checksum(stream: bytes, size: int, start_index: int) -> ChecksumStatus:
    """Check the checksum of the sentence whose '$' is at ``start_index``.

    Args:
        stream: Bytes holding one or more sentences.
        size: Number of bytes of ``stream`` to consider.
        start_index: Index of the '$' starting the sentence.

    Returns:
        VALID if the XOR of the content matches the two hex digits after
        '*', INVALID if it does not or the digits are truncated or not
        hexadecimal, NOT_PRESENT if the sentence ends without a '*'.
    """
    end = min(size, len(stream))
    indicator = _find_checksum_indicator(stream, end, start_index)
    if indicator == NOT_FOUND:
        return ChecksumStatus.NOT_PRESENT

    provided = _decode_provided_checksum(stream, end, indicator + 1)
    if provided != calculate_xor_checksum(stream, start_index + 1, indicator):
        return ChecksumStatus.INVALID
    return ChecksumStatus.VALID


def validate_checksum(sentence: str | bytes) -> ChecksumStatus:
    """Check the checksum of the first sentence in ``sentence``.

    Anything before the first '$' is skipped. Text must be ASCII; text that
    cannot be encoded is reported INVALID.

    Example:
        >>> validate_checksum("$AB,1,2*00\\r\\n")
        <ChecksumStatus.VALID: 'valid'>
        >>> validate_checksum(b"$AB,1,2")
        <ChecksumStatus.NOT_PRESENT: 'not_present'>
    """
    if isinstance(sentence, str):
        try:
            sentence = sentence.encode("ascii")
        except UnicodeEncodeError:
            return ChecksumStatus.INVALID

    start = find_index(sentence, len(sentence), 0, ADDRESS_INDICATOR)
    if start == NOT_FOUND:
        return ChecksumStatus.NOT_PRESENT
    return control_checksum(sentence, len(sentence), start)
