"""Signed HTTP client for the P2PUB system-storage API.

This module encapsulates requests session handling, IIJ signature
version 2 headers, and error mapping for the ``SystemStorageListGet``
call. Every failure surfaces as UpstreamError with the original cause.
"""

from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone
import hashlib
import hmac
from typing import Any, Callable, Mapping

import requests

from api.storage_payload import storage_records_from_response
from core.config import LookupConfig
from core.constants import (
    AUTHORIZATION_SCHEME,
    SIGNATURE_METHOD,
    SIGNATURE_VERSION,
    SYSTEM_STORAGE_LIST_PATH,
)
from core.errors import LookupConfigError, UpstreamError
from core.logging_config import get_logger
from core.types import StorageRecord

_LOGGER = get_logger(__name__)
_IIJ_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class P2PubClient:
    """Minimal P2PUB API client for system-storage inventory reads."""

    def __init__(
        self,
        config: LookupConfig,
        session: requests.Session | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Create API client.

        Args:
            config: Runtime configuration with credentials and endpoint.
            session: Optional requests session, mainly for tests.
            clock: Optional UTC clock used for signature timestamps.
        """
        self._config = config
        self._session = session or requests.Session()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def list_system_storages(self, gis_service_code: str) -> list[StorageRecord]:
        """Fetch the full system-storage list for one tenant.

        Args:
            gis_service_code: Tenant service code.

        Returns:
            Storage records in API order.

        Raises:
            LookupConfigError: If credentials are not configured.
            UpstreamError: If the request or response handling fails.
        """
        path = SYSTEM_STORAGE_LIST_PATH.format(
            api_version=self._config.api_version,
            gis_service_code=gis_service_code,
        )
        body = self._get_json(path)
        try:
            records = storage_records_from_response(body)
        except ValueError as error:
            raise UpstreamError(
                f"Malformed system storage list for {gis_service_code}: {error}"
            ) from error
        _LOGGER.info(
            "system_storage_list_fetched",
            gis_service_code=gis_service_code,
            record_count=len(records),
        )
        return records

    def _get_json(self, path: str) -> object:
        headers = self._signed_headers("GET", path)
        url = f"{self._config.endpoint}{path}"
        try:
            response = self._session.get(
                url,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )
        except requests.RequestException as error:
            raise UpstreamError(f"Request to {url} failed: {error}") from error
        if response.status_code >= 400:
            raise UpstreamError(_describe_error_response(response))
        try:
            return response.json()
        except ValueError as error:
            raise UpstreamError(f"Response from {url} is not valid JSON: {error}") from error

    def _signed_headers(self, method: str, path: str) -> dict[str, str]:
        access_key = self._config.access_key
        secret_key = self._config.secret_key
        if not access_key or not secret_key:
            raise LookupConfigError(
                "P2PUB credentials are not configured. "
                "Set P2PUB_ACCESS_KEY and P2PUB_SECRET_KEY."
            )
        now = self._clock()
        expire = now + timedelta(seconds=self._config.signature_expire_seconds)
        iij_headers = {
            "X-IIJ-Date": now.strftime(_IIJ_TIME_FORMAT),
            "X-IIJ-Expire": expire.strftime(_IIJ_TIME_FORMAT),
            "X-IIJ-SignatureMethod": SIGNATURE_METHOD,
            "X-IIJ-SignatureVersion": SIGNATURE_VERSION,
        }
        signature = sign_request(secret_key, method, path, iij_headers)
        return {
            **iij_headers,
            "Authorization": f"{AUTHORIZATION_SCHEME} {access_key}:{signature}",
        }


def sign_request(
    secret_key: str,
    method: str,
    path: str,
    iij_headers: Mapping[str, str],
    content_md5: str = "",
    content_type: str = "",
) -> str:
    """Compute an IIJ signature version 2 for one request.

    The string to sign is the HTTP method, content MD5, content type,
    the lower-cased ``x-iij-*`` headers sorted by name, and the resource path.

    Args:
        secret_key: API secret key.
        method: HTTP method.
        path: Resource path including the API version prefix.
        iij_headers: ``X-IIJ-*`` headers sent with the request.
        content_md5: Body MD5, empty for GET requests.
        content_type: Body content type, empty for GET requests.

    Returns:
        Base64-encoded HMAC-SHA256 signature.
    """
    canonical_headers = "".join(
        f"{name.lower()}:{value}\n"
        for name, value in sorted(iij_headers.items(), key=lambda item: item[0].lower())
    )
    string_to_sign = f"{method}\n{content_md5}\n{content_type}\n{canonical_headers}{path}"
    digest = hmac.new(
        secret_key.encode("utf-8"),
        string_to_sign.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def _describe_error_response(response: Any) -> str:
    """Render an API error response into an UpstreamError message."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, Mapping) and isinstance(body.get("ErrorResponse"), Mapping):
        error_body = body["ErrorResponse"]
        error_type = error_body.get("ErrorType", "UnknownError")
        error_message = error_body.get("ErrorMessage", "")
        return f"P2PUB API error {response.status_code} {error_type}: {error_message}"
    return f"P2PUB API returned HTTP {response.status_code}: {response.text}"
