"""Storage lookup CLI entry points.
This module exposes commands for listing and selecting system storages.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from typing import Any, Sequence

from cli.query_command import add_query_command, run_query_command
from cli.schema_command import add_schema_command, run_schema_command
from cli.state_output import print_state
from core.config import LookupConfig
from core.errors import StorageLookupError
from datasource.lookup_sdk import LookupClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="storage-lookup",
        description="Look up P2PUB system storages",
    )
    parser.add_argument(
        "--gis-service-code",
        help="Override P2PUB_GIS_SERVICE_CODE for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_select_command(subparsers)
    _add_list_command(subparsers)
    add_query_command(subparsers)
    add_schema_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the storage lookup CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "schema":
        return run_schema_command(args)
    try:
        client = _build_client(args.gis_service_code)
        if args.command == "select":
            return _run_select_command(client, args)
        if args.command == "list":
            return _run_list_command(client, args)
        if args.command == "query":
            return run_query_command(client, args)
    except StorageLookupError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(gis_service_code: str | None) -> LookupClient:
    """Build SDK client with optional tenant override.

    Args:
        gis_service_code: Optional override service code.

    Returns:
        Configured SDK client.
    """
    client = LookupClient(LookupConfig.from_env())
    if gis_service_code:
        client = client.with_gis_service_code(gis_service_code)
    return client


def _run_select_command(client: LookupClient, args: argparse.Namespace) -> int:
    """Handle select command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    config_map: dict[str, object] = {
        "filter": [{"name": name, "value": value} for name, value in args.filter],
        "most_recent": args.most_recent,
    }
    if args.service_code:
        config_map["service_code"] = args.service_code
    state = client.read(config_map)
    print_state(state)
    return 0


def _run_list_command(client: LookupClient, args: argparse.Namespace) -> int:
    """Handle list command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    for record in client.list_storages():
        print(
            f"{record.service_code}\t"
            f"{record.type}\t"
            f"{record.os_type or '-'}\t"
            f"{record.storage_size}\t"
            f"{record.start_date}\t"
            f"{record.label or '-'}"
        )
    return 0


def _parse_filter_argument(raw_value: str) -> tuple[str, str]:
    name, separator, value = raw_value.partition("=")
    if not separator or not name:
        raise argparse.ArgumentTypeError(
            f"Invalid filter '{raw_value}': expected NAME=VALUE, e.g. os_type=CentOS"
        )
    return name, value


def _add_select_command(subparsers: Any) -> None:
    """Register select subcommand."""
    parser = subparsers.add_parser("select", help="Select exactly one system storage")
    parser.add_argument("--service-code", help="Exact storage service code")
    parser.add_argument(
        "--filter",
        action="append",
        default=[],
        type=_parse_filter_argument,
        metavar="NAME=VALUE",
        help="Filter by os_type, label (regular expression) or type; repeatable",
    )
    parser.add_argument(
        "--most-recent",
        action="store_true",
        help="Pick one record by start date when several match",
    )


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    subparsers.add_parser("list", help="List all system storages of the tenant")
