"""Python SDK for system-storage lookups.

This module exposes high-level APIs for listing storages, selecting one
by request, and running data-source reads or query-spec files against
the configured P2PUB tenant.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping

from api.p2pub_client import P2PubClient
from core.config import LookupConfig
from core.errors import LookupConfigError
from core.query_spec import load_query_spec
from core.types import SelectionRequest, StorageRecord, SystemStorageState
from datasource.system_storage import read_system_storage, state_from_record
from selection.storage_selector import StorageListClient, StorageSelector


class LookupClient:
    """Primary SDK entry point for storage lookups."""

    def __init__(
        self,
        config: LookupConfig | None = None,
        api_client: StorageListClient | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            api_client: Optional storage list client; defaults to P2PubClient.
        """
        self._config = config or LookupConfig.from_env()
        self._api_client = api_client or P2PubClient(self._config)

    @property
    def gis_service_code(self) -> str:
        """Configured tenant service code.

        Raises:
            LookupConfigError: If no tenant is configured.
        """
        if not self._config.gis_service_code:
            raise LookupConfigError(
                "GIS service code is not configured. "
                "Set P2PUB_GIS_SERVICE_CODE or pass --gis-service-code."
            )
        return self._config.gis_service_code

    def with_gis_service_code(self, gis_service_code: str) -> "LookupClient":
        """Clone the client for a different tenant.

        Args:
            gis_service_code: New tenant service code.

        Returns:
            New SDK client sharing the API client.
        """
        updated_config = replace(self._config, gis_service_code=gis_service_code)
        return LookupClient(updated_config, api_client=self._api_client)

    def list_storages(self) -> list[StorageRecord]:
        """Fetch every system storage of the tenant."""
        return StorageSelector(self._api_client, self.gis_service_code).fetch_records()

    def select(self, request: SelectionRequest) -> SystemStorageState:
        """Select one storage for a typed request.

        Args:
            request: Typed selection request.

        Returns:
            Data-source state of the selected storage.
        """
        record = StorageSelector(self._api_client, self.gis_service_code).select(request)
        return state_from_record(record)

    def read(self, config_map: Mapping[str, object]) -> SystemStorageState:
        """Run a data-source read from a raw configuration map."""
        return read_system_storage(self._api_client, self.gis_service_code, config_map)

    def query(self, spec_file: str) -> SystemStorageState:
        """Select one storage using a YAML query-spec file.

        Args:
            spec_file: Path to YAML query spec.

        Returns:
            Data-source state of the selected storage.
        """
        return self.select(load_query_spec(spec_file))
