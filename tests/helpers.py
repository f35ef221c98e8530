"""Sentences and builders shared by the test suites."""

import functools
import operator

GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
VTG_VALID = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
RMC_VALID = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


def with_checksum(content: str) -> str:
    """Wrap ``content`` as ``$content*hh`` with a correct checksum."""
    checksum = functools.reduce(operator.xor, content.encode("ascii"), 0)
    return f"${content}*{checksum:02X}"


def stream_of(*sentences: str) -> bytes:
    """Concatenate sentences the way a receiver emits them."""
    return "".join(f"{sentence}\r\n" for sentence in sentences).encode("ascii")


GSA_VALID = with_checksum("GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1")
GSV_VALID = with_checksum(
    "GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45"
)
GLL_VALID = with_checksum("GPGLL,4916.45,N,12311.12,W,225444,A,A")
