"""Core constants used across storage lookup modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_ENDPOINT = "https://p2.api.iij.jp"
DEFAULT_API_VERSION = "20140601"
DEFAULT_TIMEOUT_SECONDS = 300.0
DEFAULT_SIGNATURE_EXPIRE_SECONDS = 300
SIGNATURE_METHOD = "HmacSHA256"
SIGNATURE_VERSION = "2"
AUTHORIZATION_SCHEME = "IIJGIO"
SYSTEM_STORAGE_LIST_PATH = "/r/{api_version}/{gis_service_code}/system-storages.json"
FILTER_NAME_OS_TYPE = "os_type"
FILTER_NAME_LABEL = "label"
FILTER_NAME_TYPE = "type"
SUPPORTED_FILTER_NAMES = (FILTER_NAME_OS_TYPE, FILTER_NAME_LABEL, FILTER_NAME_TYPE)
QUERY_SPEC_VERSION = 1
