"""Shared typed models.

This module defines immutable data models used by the API client,
the selector, and the data-source adapter to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StorageRecord:
    """One entry in the remote system-storage inventory.

    Attributes:
        service_code: Unique storage service code.
        os_type: Operating system type of the storage image.
        label: Free-form label assigned by the tenant.
        type: Storage type identifier.
        storage_size: Storage size as reported by the API.
        storage_group: Storage group the record belongs to.
        start_date: Contract start timestamp, lexicographically sortable.
    """

    service_code: str
    os_type: str
    label: str
    type: str
    storage_size: str
    storage_group: str
    start_date: str


@dataclass(frozen=True)
class FilterCriterion:
    """One ``(name, value)`` matching rule applied to a storage record.

    Attributes:
        name: Field to match: ``os_type``, ``label`` or ``type``.
        value: Exact value, or a regular expression for ``label``.
    """

    name: str
    value: str


@dataclass(frozen=True)
class SelectionRequest:
    """Typed selection request parsed once at the boundary.

    Attributes:
        service_code: Optional exact service code; short-circuits filters.
        filters: Ordered criteria that must all pass.
        most_recent: Break ties by ``start_date`` instead of failing.
    """

    service_code: str | None = None
    filters: tuple[FilterCriterion, ...] = ()
    most_recent: bool = False


@dataclass(frozen=True)
class SystemStorageState:
    """Data-source state populated after a successful read.

    Attributes:
        id: Resource identifier, equal to the service code.
        service_code: Selected storage service code.
        os_type: Operating system type.
        created_at: Storage start date.
        label: Storage label.
        type: Storage type identifier.
        storage_size: Storage size.
        storage_group: Storage group.
    """

    id: str
    service_code: str
    os_type: str
    created_at: str
    label: str
    type: str
    storage_size: str
    storage_group: str
