"""Decoder configuration.

Selects which sentence kinds can be decoded and whether checksums are
enforced. A configuration is fixed once built; it is read at query time but
never changed there.

Defaults match a receiver library shipped with every sentence kind enabled
and checksum control disabled.

Environment variables read by ``DecoderConfig.from_env``:
    GPSINFO_SENTENCES        comma-separated kinds, e.g. "RMC,GGA" (default: all)
    GPSINFO_CHECKSUM_CONTROL 1/true/yes/on to reject bad checksums
    GPSINFO_MATCH_BY_SUM     1/true/yes/on to identify kinds by code sum
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from gpsinfo.nmea.schema import ALL_KINDS
from gpsinfo.nmea.types import AddressIdentifier

__all__ = ["DEFAULT_CONFIG", "DecoderConfig"]

_ENV_SENTENCES = "GPSINFO_SENTENCES"
_ENV_CHECKSUM_CONTROL = "GPSINFO_CHECKSUM_CONTROL"
_ENV_MATCH_BY_SUM = "GPSINFO_MATCH_BY_SUM"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _parse_flag(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


def _parse_kinds(value: str | None) -> frozenset[AddressIdentifier]:
    if value is None or not value.strip():
        return ALL_KINDS
    try:
        return frozenset(
            AddressIdentifier.from_code(code) for code in value.split(",") if code.strip()
        )
    except ValueError as exc:
        raise ValueError(f"{_ENV_SENTENCES} has an unknown sentence kind: {value!r}") from exc


@dataclass(frozen=True)
class DecoderConfig:
    """Which sentence kinds are decodable and how sentences are checked.

    Attributes:
        enabled_kinds: Sentence kinds whose type tables are available.
            Queries for any other kind fail with UNSUPPORTED_KIND.

        checksum_control: Reject sentences whose checksum is wrong or
            missing. Disabled by default.

        match_by_sum: Identify sentence kinds by the sum of their three
            code bytes rather than an exact comparison.

    Example:
        >>> config = DecoderConfig(enabled_kinds=frozenset({AddressIdentifier.RMC}))
        >>> config.is_enabled(AddressIdentifier.GGA)
        False
    """

    enabled_kinds: frozenset[AddressIdentifier] = field(default=ALL_KINDS)
    checksum_control: bool = False
    match_by_sum: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "enabled_kinds", frozenset(self.enabled_kinds))

    def is_enabled(self, address: AddressIdentifier) -> bool:
        return address in self.enabled_kinds

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DecoderConfig":
        """Build a configuration from ``GPSINFO_*`` environment variables.

        Raises:
            ValueError: if a variable holds an unknown kind or a bad flag.
        """
        if environ is None:
            environ = os.environ
        return cls(
            enabled_kinds=_parse_kinds(environ.get(_ENV_SENTENCES)),
            checksum_control=_parse_flag(
                _ENV_CHECKSUM_CONTROL, environ.get(_ENV_CHECKSUM_CONTROL), False
            ),
            match_by_sum=_parse_flag(
                _ENV_MATCH_BY_SUM, environ.get(_ENV_MATCH_BY_SUM), False
            ),
        )


DEFAULT_CONFIG = DecoderConfig()
