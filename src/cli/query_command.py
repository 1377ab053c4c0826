"""Query-spec CLI command wiring.

This module registers the query subcommand and delegates execution to the
SDK so YAML query specs and data-source reads share one selection path.
"""

from __future__ import annotations

import argparse
from typing import Any

from cli.state_output import print_state
from datasource.lookup_sdk import LookupClient


def add_query_command(subparsers: Any) -> None:
    """Register query subcommand."""
    parser = subparsers.add_parser(
        "query",
        help="Select one system storage using a YAML query spec",
    )
    parser.add_argument("spec_file", help="Path to YAML query-spec file")


def run_query_command(client: LookupClient, args: argparse.Namespace) -> int:
    """Handle query command invocation."""
    state = client.query(args.spec_file)
    print_state(state)
    return 0
