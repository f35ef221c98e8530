"""Field decoder: turns one delimited field into typed InfoData."""

from collections.abc import Sequence

from gpsinfo.nmea.fields import ascii_to_float, ascii_to_unsigned, get_single_char
from gpsinfo.nmea.types import InfoData, InfoError, InfoType


def get_data(
    stream: bytes,
    start_index: int,
    end_index: int,
    table: Sequence[InfoType],
    index: int,
) -> InfoData:
    """Decode the field between two delimiters according to ``table``.

    Args:
        stream: Bytes holding the sentence.
        start_index: Index of the delimiter before the field (',').
        end_index: Index of the delimiter after the field (',' or '*').
        table: Field types of the sentence kind.
        index: 1-based position of the field in ``table``.

    Returns:
        FLOAT, INTEGER or CHARACTER data as listed in the table, or ERROR
        if ``index`` is outside the table, the field is empty, a float field
        is too large to represent, or the table entry has no converter.
    """
    if not 1 <= index <= len(table):
        return InfoData.error(InfoError.FIELD_OUT_OF_RANGE)

    first = start_index + 1
    last = end_index - 1
    if last < first:
        return InfoData.error(InfoError.EMPTY_FIELD)

    info_type = table[index - 1]
    if info_type is InfoType.FLOAT:
        try:
            return InfoData.float_(ascii_to_float(stream, first, last))
        except OverflowError:
            return InfoData.error(InfoError.VALUE_OUT_OF_RANGE)
    if info_type is InfoType.INTEGER:
        return InfoData.integer(ascii_to_unsigned(stream, first, last))
    if info_type is InfoType.CHARACTER:
        return InfoData.character(get_single_char(stream, first))
    return InfoData.error(InfoError.UNSUPPORTED_FIELD_TYPE)
