"""Schema CLI command wiring."""

from __future__ import annotations

import argparse
from typing import Any

from datasource.system_storage import SYSTEM_STORAGE_SCHEMA, SchemaField


def add_schema_command(subparsers: Any) -> None:
    """Register schema subcommand."""
    subparsers.add_parser(
        "schema",
        help="Print the system-storage data-source schema",
    )


def run_schema_command(args: argparse.Namespace) -> int:
    """Print one row per schema field and the read timeout."""
    for field in SYSTEM_STORAGE_SCHEMA.fields:
        print(_render_field(field))
        for nested_field in field.elem:
            print(_render_field(nested_field, prefix=f"{field.name}."))
    print(f"read_timeout_seconds={SYSTEM_STORAGE_SCHEMA.read_timeout_seconds:g}")
    return 0


def _render_field(field: SchemaField, prefix: str = "") -> str:
    flags = []
    flags.append("optional" if field.optional else "required")
    if field.computed:
        flags.append("computed")
    if field.default is not None:
        flags.append(f"default={str(field.default).lower()}")
    return f"{prefix}{field.name}\t{field.type}\t{','.join(flags)}"
