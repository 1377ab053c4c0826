"""Unit tests for schema CLI output."""

from __future__ import annotations

from cli.main import main


def test_cli_schema_prints_fields_and_timeout(capsys) -> None:
    """Schema command should list nested filter fields and the timeout."""
    exit_code = main(["schema"])
    rows = capsys.readouterr().out.strip().splitlines()

    assert (
        exit_code == 0
        and "filter.name\tstring\trequired" in rows
        and "most_recent\tbool\toptional,default=false" in rows
        and "created_at\tstring\toptional,computed" in rows
        and rows[-1] == "read_timeout_seconds=300"
    )
