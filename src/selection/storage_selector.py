"""Single-record selection over the system-storage inventory.

This module fetches the storage list through an injected client, applies
the request's service code or filters, and resolves multiple matches
with the optional start-date tie-break. Every failure is terminal.
"""

from __future__ import annotations

from typing import Protocol

from core.errors import (
    AmbiguousMatchError,
    NoMatchError,
    StorageLookupError,
    UpstreamError,
    ValidationError,
)
from core.logging_config import get_logger
from core.types import SelectionRequest, StorageRecord
from selection.storage_filtering import matching_indices, validate_filter_criteria

_LOGGER = get_logger(__name__)


class StorageListClient(Protocol):
    """API client contract required by the selector."""

    def list_system_storages(self, gis_service_code: str) -> list[StorageRecord]: ...


class StorageSelector:
    """Select exactly one system storage for a request."""

    def __init__(self, client: StorageListClient, gis_service_code: str) -> None:
        """Create selector bound to one tenant.

        Args:
            client: API client used to fetch the storage list.
            gis_service_code: Tenant service code sent with the list request.
        """
        self._client = client
        self._gis_service_code = gis_service_code

    def select(self, request: SelectionRequest) -> StorageRecord:
        """Fetch the storage list and pick one record.

        Args:
            request: Typed selection request.

        Returns:
            The single selected storage record.

        Raises:
            ValidationError: If the request names neither service code nor filters.
            UnsupportedFilterError: If any filter name is not recognized.
            UpstreamError: If the storage list cannot be fetched.
            NoMatchError: If no record matches.
            AmbiguousMatchError: If several records match without most_recent.
        """
        validate_selection_request(request)
        records = self.fetch_records()
        return _pick_record(records, request)

    def fetch_records(self) -> list[StorageRecord]:
        """Fetch the full storage list, wrapping client failures.

        Raises:
            UpstreamError: If the client raises anything outside the lookup hierarchy.
        """
        try:
            return list(self._client.list_system_storages(self._gis_service_code))
        except StorageLookupError:
            raise
        except Exception as error:
            raise UpstreamError(
                f"Failed to list system storages for {self._gis_service_code}: {error}"
            ) from error


def validate_selection_request(request: SelectionRequest) -> None:
    """Check request invariants before any record is inspected.

    Raises:
        ValidationError: If neither service code nor filters are given.
        UnsupportedFilterError: If any filter name is not recognized.
    """
    if not request.service_code and not request.filters:
        raise ValidationError("filter or service_code is required")
    validate_filter_criteria(request.filters)


def select_storage(records: list[StorageRecord], request: SelectionRequest) -> StorageRecord:
    """Pick one record from an already fetched storage list.

    Args:
        records: Storage records in API order.
        request: Typed selection request.

    Returns:
        The single selected storage record.
    """
    validate_selection_request(request)
    return _pick_record(records, request)


def pick_earliest_start_date(records: list[StorageRecord], indices: list[int]) -> int:
    """Return the index whose ``start_date`` sorts lowest.

    Ties keep the first index in list order.

    Args:
        records: Storage records.
        indices: Non-empty candidate indices in list order.

    Returns:
        Chosen index.
    """
    picked = indices[0]
    for index in indices[1:]:
        if records[index].start_date < records[picked].start_date:
            picked = index
    return picked


def _pick_record(records: list[StorageRecord], request: SelectionRequest) -> StorageRecord:
    if request.service_code:
        for record in records:
            if record.service_code == request.service_code:
                _log_selected(record, request, match_count=1)
                return record
        _LOGGER.warning("service_code_not_found", service_code=request.service_code)
        # an unknown code alone must not match the whole inventory
        if not request.filters:
            raise NoMatchError(f"No system storage has service code '{request.service_code}'.")
    matches = matching_indices(records, request.filters)
    if not matches:
        raise NoMatchError("No system storages matched the given filters.")
    if len(matches) >= 2 and not request.most_recent:
        raise AmbiguousMatchError(len(matches))
    # smallest start_date wins; ties keep list order
    picked = pick_earliest_start_date(records, matches)
    record = records[picked]
    _log_selected(record, request, match_count=len(matches))
    return record


def _log_selected(record: StorageRecord, request: SelectionRequest, match_count: int) -> None:
    _LOGGER.info(
        "system_storage_selected",
        service_code=record.service_code,
        match_count=match_count,
        filter_count=len(request.filters),
        most_recent=request.most_recent,
    )
