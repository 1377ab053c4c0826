"""Storage lookup exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure mode of a lookup raises its own type so callers can
report a distinguishing message without parsing strings.
"""

from __future__ import annotations


class StorageLookupError(Exception):
    """Base exception for all storage lookup failures."""


class LookupConfigError(StorageLookupError):
    """Raised for invalid runtime configuration."""


class LookupDependencyError(StorageLookupError):
    """Raised when an optional runtime dependency is missing."""


class ValidationError(StorageLookupError):
    """Raised when a selection request is malformed or incomplete."""


class QuerySpecError(ValidationError):
    """Raised for invalid or unreadable query-spec files."""


class UnsupportedFilterError(ValidationError):
    """Raised when a filter names a field that cannot be filtered on."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Filter by '{name}' is not supported. Use one of: os_type, label, type."
        )
        self.name = name


class UpstreamError(StorageLookupError):
    """Raised when the remote storage list cannot be fetched."""


class NoMatchError(StorageLookupError):
    """Raised when no storage record satisfies the request."""


class AmbiguousMatchError(StorageLookupError):
    """Raised when several records match and no tie-break was requested."""

    def __init__(self, match_count: int) -> None:
        super().__init__(
            f"{match_count} system storages matched. "
            "Narrow down the filters or set most_recent."
        )
        self.match_count = match_count
