"""JSON payload conversion for system-storage records.

This module maps P2PUB ``SystemStorageList`` entries onto StorageRecord
values. Field values are taken verbatim from the API response.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.types import StorageRecord

_PAYLOAD_FIELDS = {
    "service_code": "ServiceCode",
    "os_type": "OSType",
    "label": "Label",
    "type": "Type",
    "storage_size": "StorageSize",
    "storage_group": "StorageGroup",
    "start_date": "StartDate",
}


def storage_record_from_payload(payload: Mapping[str, Any]) -> StorageRecord:
    """Deserialize one API list entry into a StorageRecord.

    Args:
        payload: One element of ``SystemStorageList``.

    Returns:
        Parsed storage record. Missing fields become empty strings.

    Raises:
        ValueError: If ``ServiceCode`` is missing.
    """
    if not payload.get("ServiceCode"):
        raise ValueError("System storage entry is missing 'ServiceCode'")
    values = {
        field_name: _string_value(payload.get(payload_key))
        for field_name, payload_key in _PAYLOAD_FIELDS.items()
    }
    return StorageRecord(**values)


def storage_records_from_response(body: object) -> list[StorageRecord]:
    """Parse a ``SystemStorageListGet`` response body.

    Args:
        body: Decoded JSON response.

    Returns:
        Records in API order.

    Raises:
        ValueError: If the body does not carry a storage list.
    """
    if not isinstance(body, Mapping):
        raise ValueError(f"Expected JSON object response, got {type(body).__name__}")
    entries = body.get("SystemStorageList")
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError("Field 'SystemStorageList' must be a list")
    records: list[StorageRecord] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ValueError(f"System storage entry #{index + 1} must be an object")
        records.append(storage_record_from_payload(entry))
    return records


def _string_value(value: object) -> str:
    if value is None:
        return ""
    return str(value)
