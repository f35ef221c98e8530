"""JSON formatting utilities for decoded NMEA fields."""

import json

from gpsinfo import AddressIdentifier, ChecksumStatus, InfoData
from gpsinfo.nmea.types import InfoType

__all__ = ["format_checksum_message", "format_info_message", "format_schema_message"]


def format_info_message(address: AddressIdentifier, index: int, info: InfoData) -> str:
    """Serialize one decoded field into a JSON string."""
    return json.dumps({
        "type": "info",
        "kind": address.value,
        "index": index,
        "data_type": info.type_of_data.value,
        "value": info.value,
        "error": info.reason.value if info.reason is not None else None,
    })


def format_checksum_message(status: ChecksumStatus) -> str:
    """Serialize a checksum verdict into a JSON string."""
    return json.dumps({
        "type": "checksum",
        "status": status.value,
    })


def format_schema_message(
    address: AddressIdentifier, table: tuple[InfoType, ...]
) -> str:
    """Serialize the field types of a sentence kind into a JSON string."""
    return json.dumps({
        "type": "schema",
        "kind": address.value,
        "fields": [info_type.value for info_type in table],
    })
