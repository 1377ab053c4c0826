"""Runtime configuration model for storage lookups.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_ENDPOINT,
    DEFAULT_SIGNATURE_EXPIRE_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
)
from core.errors import LookupConfigError


@dataclass(frozen=True)
class LookupConfig:
    """Validated runtime configuration.

    Attributes:
        access_key: API access key used to sign requests.
        secret_key: API secret key used to sign requests.
        gis_service_code: Tenant service code whose storages are listed.
        endpoint: Base URL of the P2PUB API.
        api_version: API version path segment.
        timeout_seconds: Network timeout for one read.
        signature_expire_seconds: Lifetime of a request signature.
    """

    access_key: str | None
    secret_key: str | None
    gis_service_code: str | None
    endpoint: str = DEFAULT_ENDPOINT
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    signature_expire_seconds: int = DEFAULT_SIGNATURE_EXPIRE_SECONDS

    @classmethod
    def from_env(cls) -> "LookupConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LookupConfigError: If environment values are invalid.
        """
        timeout_value = os.getenv("P2PUB_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        expire_value = os.getenv(
            "P2PUB_SIGNATURE_EXPIRE_SECONDS", str(DEFAULT_SIGNATURE_EXPIRE_SECONDS)
        )
        return cls(
            access_key=_optional_env("P2PUB_ACCESS_KEY"),
            secret_key=_optional_env("P2PUB_SECRET_KEY"),
            gis_service_code=_optional_env("P2PUB_GIS_SERVICE_CODE"),
            endpoint=os.getenv("P2PUB_ENDPOINT", DEFAULT_ENDPOINT).rstrip("/"),
            api_version=os.getenv("P2PUB_API_VERSION", DEFAULT_API_VERSION),
            timeout_seconds=_parse_timeout(timeout_value),
            signature_expire_seconds=_parse_expire_seconds(expire_value),
        )


def _optional_env(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value if value else None


def _parse_timeout(raw_value: str) -> float:
    """Parse the request timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        LookupConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise LookupConfigError(
            "Invalid P2PUB_TIMEOUT_SECONDS value: "
            f"expected number, got '{raw_value}'. "
            "Set P2PUB_TIMEOUT_SECONDS to a positive number of seconds."
        ) from error
    if timeout <= 0:
        raise LookupConfigError(
            f"Invalid P2PUB_TIMEOUT_SECONDS value: {raw_value} must be greater than zero."
        )
    return timeout


def _parse_expire_seconds(raw_value: str) -> int:
    try:
        expire_seconds = int(raw_value)
    except ValueError as error:
        raise LookupConfigError(
            "Invalid P2PUB_SIGNATURE_EXPIRE_SECONDS value: "
            f"expected integer, got '{raw_value}'."
        ) from error
    if expire_seconds <= 0:
        raise LookupConfigError(
            f"Invalid P2PUB_SIGNATURE_EXPIRE_SECONDS value: {raw_value} must be greater than zero."
        )
    return expire_seconds
