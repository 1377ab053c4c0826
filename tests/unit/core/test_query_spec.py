"""Unit tests for query-spec parsing."""

from __future__ import annotations

import pytest

from core.errors import QuerySpecError, ValidationError
from core.query_spec import load_query_spec
from tests.fixture_paths import fixture_path


def test_load_query_spec_parses_filters_and_flag() -> None:
    """Valid query spec should parse filters in order with the tie-break flag."""
    request = load_query_spec(str(fixture_path("query_spec/web_most_recent.yaml")))

    assert (
        tuple((criterion.name, criterion.value) for criterion in request.filters)
        == (("os_type", "CentOS"), ("label", "^web-"))
        and request.most_recent
        and request.service_code is None
    )


def test_load_query_spec_parses_service_code() -> None:
    """Service-code-only spec should parse without filters."""
    request = load_query_spec(str(fixture_path("query_spec/by_service_code.yaml")))

    assert request.service_code == "iba00000003" and request.filters == ()


@pytest.mark.parametrize(
    "fixture_name",
    [
        "query_spec/unknown_root_key.yaml",
        "query_spec/invalid_version.yaml",
        "query_spec/filter_not_list.yaml",
        "query_spec/does_not_exist.yaml",
    ],
)
def test_load_query_spec_invalid_files_raise_query_spec_error(fixture_name: str) -> None:
    """Invalid query specs should raise QuerySpecError, a ValidationError."""
    with pytest.raises(QuerySpecError) as error_info:
        load_query_spec(str(fixture_path(fixture_name)))

    assert isinstance(error_info.value, ValidationError)


def test_load_query_spec_rejects_empty_file(tmp_path) -> None:
    """Empty YAML documents should be rejected with guidance."""
    spec_file = tmp_path / "empty.yaml"
    spec_file.write_text("", encoding="utf-8")

    with pytest.raises(QuerySpecError):
        load_query_spec(str(spec_file))

    assert True


def test_load_query_spec_rejects_invalid_yaml(tmp_path) -> None:
    """YAML syntax errors should be wrapped."""
    spec_file = tmp_path / "broken.yaml"
    spec_file.write_text("version: 1\nfilter: [\n", encoding="utf-8")

    with pytest.raises(QuerySpecError):
        load_query_spec(str(spec_file))

    assert True
