"""Per-sentence field type tables.

Each table lists the type of every comma-delimited field of a sentence kind,
in order. Field 1 is the first field after the address (``$GPRMC``).

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W,A*hh
           1      2 3        4 5         6 7     8     9      10    11 12

GSV tables describe the header and the first satellite block only; later
satellite blocks repeat fields 4-7.
"""

from collections.abc import Iterable

from gpsinfo.nmea.types import AddressIdentifier, InfoType

_F = InfoType.FLOAT
_I = InfoType.INTEGER
_C = InfoType.CHARACTER

TYPE_TABLE_RMC: tuple[InfoType, ...] = (
    _F,  # UTC time (HHMMSS)
    _C,  # Status (A=active, V=void)
    _F,  # Latitude (DDMM.MMMM)
    _C,  # N/S
    _F,  # Longitude (DDDMM.MMMM)
    _C,  # E/W
    _F,  # Speed over ground (knots)
    _F,  # Track angle (degrees true)
    _I,  # Date (DDMMYY)
    _F,  # Magnetic variation (degrees)
    _C,  # Magnetic variation direction (E/W)
    _C,  # Mode indicator
)

TYPE_TABLE_VTG: tuple[InfoType, ...] = (
    _F,  # Track (degrees true)
    _C,  # T
    _F,  # Track (degrees magnetic)
    _C,  # M
    _F,  # Speed (knots)
    _C,  # N
    _F,  # Speed (km/h)
    _C,  # K
    _C,  # Mode indicator
)

TYPE_TABLE_GGA: tuple[InfoType, ...] = (
    _F,  # UTC time (HHMMSS.ss)
    _F,  # Latitude
    _C,  # N/S
    _F,  # Longitude
    _C,  # E/W
    _I,  # Fix quality
    _I,  # Number of satellites
    _F,  # HDOP
    _F,  # Altitude above MSL
    _C,  # M
    _F,  # Geoid height
    _C,  # M
    _F,  # Age of differential data (seconds)
    _I,  # Differential reference station ID
)

TYPE_TABLE_GSA: tuple[InfoType, ...] = (
    _C,  # Selection mode (M=manual, A=automatic)
    _I,  # Fix type (1=none, 2=2D, 3=3D)
    *(_I,) * 12,  # PRNs of satellites used
    _F,  # PDOP
    _F,  # HDOP
    _F,  # VDOP
)

TYPE_TABLE_GSV: tuple[InfoType, ...] = (
    _I,  # Total number of messages
    _I,  # Message number
    _I,  # Satellites in view
    _I,  # PRN
    _I,  # Elevation (degrees)
    _I,  # Azimuth (degrees)
    _I,  # SNR (dB)
)

TYPE_TABLE_GLL: tuple[InfoType, ...] = (
    _F,  # Latitude
    _C,  # N/S
    _F,  # Longitude
    _C,  # E/W
    _F,  # UTC time
    _C,  # Status
    _C,  # Mode indicator
)

_TYPE_TABLES: dict[AddressIdentifier, tuple[InfoType, ...]] = {
    AddressIdentifier.RMC: TYPE_TABLE_RMC,
    AddressIdentifier.VTG: TYPE_TABLE_VTG,
    AddressIdentifier.GGA: TYPE_TABLE_GGA,
    AddressIdentifier.GSA: TYPE_TABLE_GSA,
    AddressIdentifier.GSV: TYPE_TABLE_GSV,
    AddressIdentifier.GLL: TYPE_TABLE_GLL,
}

ALL_KINDS = frozenset(AddressIdentifier)


def get_table(
    address: AddressIdentifier,
    enabled_kinds: Iterable[AddressIdentifier] = ALL_KINDS,
) -> tuple[InfoType, ...] | None:
    """Return the field types of ``address``, or None if it is not enabled."""
    if address not in frozenset(enabled_kinds):
        return None
    return _TYPE_TABLES.get(address)


class SchemaRegistry:
    """The type tables of the sentence kinds enabled by a configuration.

    Tables of disabled kinds are not reachable through the registry, so a
    query for such a kind fails the same way as for an unknown one.

    Example:
        >>> registry = SchemaRegistry({AddressIdentifier.RMC})
        >>> len(registry.get_table(AddressIdentifier.RMC))
        12
        >>> registry.get_table(AddressIdentifier.GGA) is None
        True
    """

    def __init__(self, enabled_kinds: Iterable[AddressIdentifier] = ALL_KINDS) -> None:
        enabled = frozenset(enabled_kinds)
        self._tables = {
            kind: _TYPE_TABLES[kind] for kind in AddressIdentifier if kind in enabled
        }

    @property
    def enabled_kinds(self) -> frozenset[AddressIdentifier]:
        return frozenset(self._tables)

    def is_enabled(self, address: AddressIdentifier) -> bool:
        return address in self._tables

    def get_table(self, address: AddressIdentifier) -> tuple[InfoType, ...] | None:
        return self._tables.get(address)
