"""System-storage data source.

This module describes the read-only data-source schema, parses the
host's loosely-typed configuration map once, and populates state from
the record chosen by the storage selector.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Mapping

from core.constants import DEFAULT_TIMEOUT_SECONDS
from core.errors import StorageLookupError
from core.logging_config import get_logger
from core.request_fields import build_selection_request
from core.types import SelectionRequest, StorageRecord, SystemStorageState
from selection.storage_selector import StorageListClient, StorageSelector

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SchemaField:
    """One declarative data-source field.

    Attributes:
        name: Configuration or state key.
        type: Value type name: ``string``, ``bool`` or ``list``.
        optional: Whether the field may be omitted from configuration.
        computed: Whether the field is populated by a read.
        default: Default value applied when omitted.
        elem: Nested fields for ``list`` types.
    """

    name: str
    type: str
    optional: bool = True
    computed: bool = False
    default: object = None
    elem: tuple["SchemaField", ...] = ()


@dataclass(frozen=True)
class DataSourceSchema:
    """Field table and read timeout of a data source."""

    fields: tuple[SchemaField, ...]
    read_timeout_seconds: float


SYSTEM_STORAGE_SCHEMA = DataSourceSchema(
    fields=(
        SchemaField(
            name="filter",
            type="list",
            elem=(
                SchemaField(name="name", type="string", optional=False),
                SchemaField(name="value", type="string", optional=False),
            ),
        ),
        SchemaField(name="most_recent", type="bool", default=False),
        SchemaField(name="service_code", type="string", computed=True),
        SchemaField(name="type", type="string", computed=True),
        SchemaField(name="storage_group", type="string", computed=True),
        SchemaField(name="os_type", type="string", computed=True),
        SchemaField(name="storage_size", type="string", computed=True),
        SchemaField(name="label", type="string", computed=True),
        SchemaField(name="created_at", type="string", computed=True),
    ),
    read_timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
)


def parse_selection_request(config_map: Mapping[str, object]) -> SelectionRequest:
    """Parse a host configuration map into a typed selection request.

    Computed-only keys that the host echoes back are ignored.

    Args:
        config_map: Raw configuration from the host.

    Returns:
        Typed selection request.

    Raises:
        ValidationError: If any input field has the wrong shape.
    """
    input_names = {"filter", "most_recent", "service_code"}
    inputs = {key: value for key, value in config_map.items() if key in input_names}
    return build_selection_request(inputs)


def state_from_record(record: StorageRecord) -> SystemStorageState:
    """Map a selected record onto data-source state."""
    return SystemStorageState(
        id=record.service_code,
        service_code=record.service_code,
        os_type=record.os_type,
        created_at=record.start_date,
        label=record.label,
        type=record.type,
        storage_size=record.storage_size,
        storage_group=record.storage_group,
    )


def state_to_mapping(state: SystemStorageState) -> dict[str, str]:
    """Render state as the flat key/value map the host stores."""
    return asdict(state)


def read_system_storage(
    client: StorageListClient,
    gis_service_code: str,
    config_map: Mapping[str, object],
) -> SystemStorageState:
    """Run one data-source read.

    Args:
        client: API client used to list storages.
        gis_service_code: Tenant service code.
        config_map: Raw configuration from the host.

    Returns:
        Populated data-source state.

    Raises:
        StorageLookupError: Any validation, upstream, or selection failure.
    """
    try:
        request = parse_selection_request(config_map)
        record = StorageSelector(client, gis_service_code).select(request)
    except StorageLookupError as error:
        _LOGGER.error(
            "system_storage_read_failed",
            gis_service_code=gis_service_code,
            error_type=type(error).__name__,
            error=str(error),
        )
        raise
    return state_from_record(record)
