"""Unit tests for selection request field parsing."""

from __future__ import annotations

import pytest

from core.errors import UnsupportedFilterError, ValidationError
from core.request_fields import build_selection_request, parse_filter_criteria
from core.types import FilterCriterion, SelectionRequest
from selection.storage_selector import validate_selection_request


def test_build_selection_request_parses_all_fields() -> None:
    """A complete mapping should produce a fully typed request."""
    request = build_selection_request(
        {
            "service_code": "iba00000001",
            "filter": [{"name": "os_type", "value": "CentOS"}],
            "most_recent": True,
        }
    )

    assert request == SelectionRequest(
        service_code="iba00000001",
        filters=(FilterCriterion(name="os_type", value="CentOS"),),
        most_recent=True,
    )


def test_build_selection_request_defaults_for_empty_mapping() -> None:
    """Omitted fields should use their defaults."""
    assert build_selection_request({}) == SelectionRequest()


def test_build_selection_request_treats_blank_service_code_as_absent() -> None:
    """Hosts often send empty strings for unset optional fields."""
    assert build_selection_request({"service_code": "  "}).service_code is None


def test_build_selection_request_keeps_service_code_verbatim() -> None:
    """Surrounding whitespace is part of the service code."""
    assert build_selection_request({"service_code": " B "}).service_code == " B "


def test_build_selection_request_keeps_filter_name_verbatim() -> None:
    """Padded filter names should reach the selector unchanged."""
    request = build_selection_request({"filter": [{"name": " os_type", "value": "CentOS"}]})

    with pytest.raises(UnsupportedFilterError) as error_info:
        validate_selection_request(request)

    assert error_info.value.name == " os_type"


def test_build_selection_request_rejects_non_bool_most_recent() -> None:
    """String booleans should not be coerced."""
    with pytest.raises(ValidationError):
        build_selection_request({"most_recent": "true"})
    assert True


def test_parse_filter_criteria_keeps_declaration_order() -> None:
    """Criteria should be evaluated in the order they were declared."""
    criteria = parse_filter_criteria(
        [{"name": "type", "value": "S30GB_CENTOS7_64"}, {"name": "label", "value": "web"}]
    )

    assert tuple(criterion.name for criterion in criteria) == ("type", "label")


def test_parse_filter_criteria_keeps_unknown_names_for_selector() -> None:
    """Unknown names are a selection failure, not a parse failure."""
    criteria = parse_filter_criteria([{"name": "storage_group", "value": "Y"}])

    assert criteria == (FilterCriterion(name="storage_group", value="Y"),)


@pytest.mark.parametrize(
    "raw_filter",
    [
        {"name": "os_type", "value": "CentOS"},
        "os_type=CentOS",
        [{"name": "os_type"}],
        [{"value": "CentOS"}],
        [{"name": "os_type", "value": 7}],
        [{"name": "os_type", "value": "CentOS", "regex": True}],
        ["os_type"],
    ],
)
def test_parse_filter_criteria_rejects_malformed_blocks(raw_filter: object) -> None:
    """Malformed filter blocks should raise ValidationError instead of TypeError."""
    with pytest.raises(ValidationError):
        parse_filter_criteria(raw_filter)
    assert True
