"""Public SDK surface for storage lookups.

This module provides a stable import path for SDK users.
It re-exports the primary client, typed models, and error types.
"""

from __future__ import annotations

from core.config import LookupConfig
from core.errors import (
    AmbiguousMatchError,
    NoMatchError,
    StorageLookupError,
    UnsupportedFilterError,
    UpstreamError,
    ValidationError,
)
from core.types import FilterCriterion, SelectionRequest, StorageRecord, SystemStorageState
from datasource.lookup_sdk import LookupClient
from datasource.system_storage import SYSTEM_STORAGE_SCHEMA, read_system_storage
from selection.storage_selector import StorageSelector, select_storage

__all__ = [
    "AmbiguousMatchError",
    "FilterCriterion",
    "LookupClient",
    "LookupConfig",
    "NoMatchError",
    "SYSTEM_STORAGE_SCHEMA",
    "SelectionRequest",
    "StorageLookupError",
    "StorageRecord",
    "StorageSelector",
    "SystemStorageState",
    "UnsupportedFilterError",
    "UpstreamError",
    "ValidationError",
    "read_system_storage",
    "select_storage",
]
