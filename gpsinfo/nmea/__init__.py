"""NMEA 0183 sentence scanning and field decoding."""

from gpsinfo.nmea.checksum import control_checksum, validate_checksum
from gpsinfo.nmea.decoder import get_data
from gpsinfo.nmea.fields import ascii_to_float, ascii_to_unsigned, get_single_char
from gpsinfo.nmea.locator import find_address
from gpsinfo.nmea.scanner import find_index, find_xth_index
from gpsinfo.nmea.schema import SchemaRegistry, get_table
from gpsinfo.nmea.types import (
    NOT_FOUND,
    AddressIdentifier,
    ChecksumStatus,
    InfoData,
    InfoError,
    InfoType,
)

__all__ = [
    "NOT_FOUND",
    "AddressIdentifier",
    "ChecksumStatus",
    "InfoData",
    "InfoError",
    "InfoType",
    "SchemaRegistry",
    "ascii_to_float",
    "ascii_to_unsigned",
    "control_checksum",
    "find_address",
    "find_index",
    "find_xth_index",
    "get_data",
    "get_single_char",
    "get_table",
    "validate_checksum",
]
