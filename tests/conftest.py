"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_P2PUB_ENV_NAMES = (
    "P2PUB_ACCESS_KEY",
    "P2PUB_SECRET_KEY",
    "P2PUB_GIS_SERVICE_CODE",
    "P2PUB_ENDPOINT",
    "P2PUB_API_VERSION",
    "P2PUB_TIMEOUT_SECONDS",
    "P2PUB_SIGNATURE_EXPIRE_SECONDS",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    src_path = Path(__file__).resolve().parent.parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolate_p2pub_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials and endpoints out of test runs."""
    for name in _P2PUB_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
