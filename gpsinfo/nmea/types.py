"""NMEA data types for sentence lookup and decoded field values.

This module defines the enumerations and the decoded-value container shared
by every stage of the query pipeline.

Design Decisions:
    1. Tagged union (InfoData): every decoded field carries its discriminant
       next to its payload. The payload is None exactly when the discriminant
       is ERROR, so an error result can never be mistaken for a measured zero.

    2. Error reasons: ERROR results carry an InfoError describing which stage
       rejected the query. The reason is diagnostic only; callers that just
       need "did it work" check ``InfoData.ok``.

    3. No exceptions on the decode path: failures are values, mirroring the
       parsers that return None for malformed sentences.
"""

from dataclasses import dataclass
from enum import Enum

# Returned by every scanning primitive when the searched byte or sentence
# is not present in the scanned range.
NOT_FOUND = -1

ADDRESS_INDICATOR = ord("$")
CHECKSUM_INDICATOR = ord("*")
VALUE_SEPARATOR = ord(",")
FLOAT_SEPARATOR = ord(".")
LINE_TERMINATORS = (ord("\r"), ord("\n"))


class AddressIdentifier(Enum):
    """Supported sentence kinds, keyed by their 3-letter sentence code.

    The talker ID (the two characters after '$') is not part of the kind:
    ``$GPRMC`` and ``$GNRMC`` both identify RMC.
    """

    RMC = "RMC"  # Recommended minimum specific GNSS data
    VTG = "VTG"  # Track made good and ground speed
    GGA = "GGA"  # Global positioning system fix data
    GSA = "GSA"  # DOP and active satellites
    GSV = "GSV"  # Satellites in view
    GLL = "GLL"  # Geographic position, latitude/longitude

    @property
    def code(self) -> bytes:
        return self.value.encode("ascii")

    @property
    def identifier_sum(self) -> int:
        """Sum of the three ASCII codes of the sentence code.

        Example:
            >>> AddressIdentifier.RMC.identifier_sum  # ord('R') + ord('M') + ord('C')
            226
        """
        return sum(self.code)

    @classmethod
    def from_code(cls, code: str) -> "AddressIdentifier":
        """Look up a kind by its code, accepting a talker prefix ("GPRMC").

        Raises:
            ValueError: if the code does not name a supported kind.
        """
        normalized = code.strip().upper()
        if len(normalized) == 5:
            normalized = normalized[2:]
        return cls(normalized)


class InfoType(Enum):
    FLOAT = "float"
    INTEGER = "integer"
    CHARACTER = "character"
    ERROR = "error"


class ChecksumStatus(Enum):
    VALID = "valid"
    INVALID = "invalid"
    NOT_PRESENT = "not_present"


class InfoError(Enum):
    """Why a query produced an ERROR result."""

    NOT_FOUND = "not_found"
    CHECKSUM_INVALID = "checksum_invalid"
    CHECKSUM_MISSING = "checksum_missing"
    UNSUPPORTED_KIND = "unsupported_kind"
    FIELD_OUT_OF_RANGE = "field_out_of_range"
    EMPTY_FIELD = "empty_field"
    UNSUPPORTED_FIELD_TYPE = "unsupported_field_type"
    VALUE_OUT_OF_RANGE = "value_out_of_range"


@dataclass(frozen=True)
class InfoData:
    """A decoded field value together with its type.

    Use the classmethod constructors rather than the dataclass constructor
    so that the payload always matches the discriminant.

    Attributes:
        type_of_data: Discriminant of the payload.

        value: ``float`` for FLOAT, ``int`` for INTEGER, a one-character
            ``str`` for CHARACTER, and None for ERROR.

        reason: Why an ERROR result failed, None otherwise.

    Example:
        >>> info = InfoData.float_(123519.0)
        >>> info.as_float()
        123519.0
        >>> InfoData.error(InfoError.NOT_FOUND).ok
        False
    """

    type_of_data: InfoType
    value: float | int | str | None = None
    reason: InfoError | None = None

    @classmethod
    def float_(cls, value: float) -> "InfoData":
        return cls(InfoType.FLOAT, float(value))

    @classmethod
    def integer(cls, value: int) -> "InfoData":
        return cls(InfoType.INTEGER, int(value))

    @classmethod
    def character(cls, value: str) -> "InfoData":
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return cls(InfoType.CHARACTER, value)

    @classmethod
    def error(cls, reason: InfoError) -> "InfoData":
        return cls(InfoType.ERROR, None, reason)

    @property
    def ok(self) -> bool:
        return self.type_of_data is not InfoType.ERROR

    def _expect(self, expected: InfoType) -> None:
        if self.type_of_data is not expected:
            raise TypeError(
                f"{expected.value} requested from {self.type_of_data.value} data"
            )

    def as_float(self) -> float:
        self._expect(InfoType.FLOAT)
        return self.value  # type: ignore[return-value]

    def as_int(self) -> int:
        self._expect(InfoType.INTEGER)
        return self.value  # type: ignore[return-value]

    def as_char(self) -> str:
        self._expect(InfoType.CHARACTER)
        return self.value  # type: ignore[return-value]
