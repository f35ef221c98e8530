"""Query API: fetch one typed field of one sentence kind from a byte stream.

Each query performs, in order, and stops at the first failure:
    1. Locate the first sentence of the requested kind.
    2. Check its checksum (only when checksum control is enabled).
    3. Locate the requested field between its delimiters.
    4. Look up the kind's type table.
    5. Decode the field.

There is no caching: every query rescans the stream from its start, so a
query costs O(len(stream)). Queries never raise; failures come back as
ERROR data carrying an InfoError reason.

Example:
    >>> stream = b"$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A\\r\\n"
    >>> get_info(stream, AddressIdentifier.RMC, 1)
    InfoData(type_of_data=<InfoType.FLOAT: 'float'>, value=123519.0, reason=None)
    >>> get_info(stream, AddressIdentifier.RMC, 2).as_char()
    'A'
"""

import logging

from gpsinfo.config import DEFAULT_CONFIG, DecoderConfig
from gpsinfo.nmea.checksum import control_checksum
from gpsinfo.nmea.decoder import get_data
from gpsinfo.nmea.locator import find_address
from gpsinfo.nmea.scanner import find_index, find_xth_index
from gpsinfo.nmea.schema import SchemaRegistry
from gpsinfo.nmea.types import (
    ADDRESS_INDICATOR,
    CHECKSUM_INDICATOR,
    LINE_TERMINATORS,
    NOT_FOUND,
    VALUE_SEPARATOR,
    AddressIdentifier,
    ChecksumStatus,
    InfoData,
    InfoError,
)

__all__ = ["InfoQuery", "get_info"]

logger = logging.getLogger(__name__)

_FIELD_TERMINATORS = (CHECKSUM_INDICATOR, ADDRESS_INDICATOR, *LINE_TERMINATORS)

_CHECKSUM_ERRORS = {
    ChecksumStatus.INVALID: InfoError.CHECKSUM_INVALID,
    ChecksumStatus.NOT_PRESENT: InfoError.CHECKSUM_MISSING,
}


def _find_sentence_end(stream: bytes, size: int, start_index: int) -> int:
    """Index just past the last field of the sentence starting at ``start_index``.

    That is the '*' of the checksum, a line terminator, the next '$', or
    ``size`` when the stream ends first.
    """
    for index in range(start_index + 1, size):
        if stream[index] in _FIELD_TERMINATORS:
            return index
    return size


def _fail(address: AddressIdentifier, index: int, reason: InfoError) -> InfoData:
    logger.debug("No %s field %d: %s", address.value, index, reason.value)
    return InfoData.error(reason)


class InfoQuery:
    """Field queries bound to one decoder configuration.

    The schema registry is built once from the configuration and shared by
    every query; neither is modified afterwards, so one instance can serve
    any number of threads.

    Args:
        config: Enabled sentence kinds and checksum policy.

    Example:
        >>> query = InfoQuery(DecoderConfig(checksum_control=True))
        >>> query.get_info(stream, AddressIdentifier.GGA, 6)
    """

    def __init__(self, config: DecoderConfig = DEFAULT_CONFIG) -> None:
        self._config = config
        self._registry = SchemaRegistry(config.enabled_kinds)

    @property
    def config(self) -> DecoderConfig:
        return self._config

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    def get_info(
        self,
        stream: bytes,
        address: AddressIdentifier,
        index: int,
        size: int | None = None,
    ) -> InfoData:
        """Decode field ``index`` (1-based) of the first ``address`` sentence.

        Args:
            stream: Bytes holding one or more sentences.
            address: Sentence kind to look for.
            index: Position of the field after the address, counting from 1.
            size: Number of bytes of ``stream`` to consider. Defaults to
                the whole stream.

        Returns:
            The decoded field, or ERROR data whose ``reason`` names the
            stage that failed.
        """
        end = len(stream) if size is None else min(size, len(stream))

        start = find_address(
            stream, end, 0, address, match_by_sum=self._config.match_by_sum
        )
        if start == NOT_FOUND:
            return _fail(address, index, InfoError.NOT_FOUND)

        if self._config.checksum_control:
            status = control_checksum(stream, end, start)
            if status is not ChecksumStatus.VALID:
                return _fail(address, index, _CHECKSUM_ERRORS[status])

        sentence_end = _find_sentence_end(stream, end, start)
        first = find_xth_index(stream, sentence_end, start, VALUE_SEPARATOR, index)
        if first == NOT_FOUND:
            return _fail(address, index, InfoError.NOT_FOUND)

        last = find_index(stream, sentence_end, first + 1, VALUE_SEPARATOR)
        if last == NOT_FOUND:
            last = sentence_end

        table = self._registry.get_table(address)
        if table is None:
            return _fail(address, index, InfoError.UNSUPPORTED_KIND)

        info = get_data(stream, first, last, table, index)
        if not info.ok:
            logger.debug(
                "No %s field %d: %s", address.value, index, info.reason.value
            )
        return info


_DEFAULT_QUERY = InfoQuery()


def get_info(
    stream: bytes,
    address: AddressIdentifier,
    index: int,
    size: int | None = None,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> InfoData:
    """Decode field ``index`` of the first ``address`` sentence in ``stream``.

    Convenience wrapper around ``InfoQuery``; see ``InfoQuery.get_info``.
    """
    query = _DEFAULT_QUERY if config is DEFAULT_CONFIG else InfoQuery(config)
    return query.get_info(stream, address, index, size)
