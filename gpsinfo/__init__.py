"""Typed field lookup for NMEA 0183 GNSS receiver output."""

from gpsinfo.config import DEFAULT_CONFIG, DecoderConfig
from gpsinfo.nmea import (
    AddressIdentifier,
    ChecksumStatus,
    InfoData,
    InfoError,
    InfoType,
    validate_checksum,
)
from gpsinfo.query import InfoQuery, get_info

__all__ = [
    "DEFAULT_CONFIG",
    "AddressIdentifier",
    "ChecksumStatus",
    "DecoderConfig",
    "InfoData",
    "InfoError",
    "InfoQuery",
    "InfoType",
    "get_info",
    "validate_checksum",
]
