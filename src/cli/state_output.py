"""Shared output helpers for lookup commands."""

from __future__ import annotations

from core.types import SystemStorageState
from datasource.system_storage import state_to_mapping


def print_state(state: SystemStorageState) -> None:
    """Print data-source state as ``key=value`` lines."""
    for key, value in state_to_mapping(state).items():
        print(f"{key}={value}")
