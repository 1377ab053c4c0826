"""Unit tests for storage filter evaluation."""

from __future__ import annotations

import pytest

from core.errors import UnsupportedFilterError
from core.types import FilterCriterion
from selection.storage_filtering import (
    criterion_matches,
    matching_indices,
    validate_filter_criteria,
)
from tests.storage_fixtures import load_fixture_records, make_record


def test_criterion_matches_os_type_requires_exact_equality() -> None:
    """os_type should not match on prefixes or case variants."""
    record = make_record(os_type="CentOS")

    assert criterion_matches(record, FilterCriterion("os_type", "CentOS")) and not (
        criterion_matches(record, FilterCriterion("os_type", "centos"))
        or criterion_matches(record, FilterCriterion("os_type", "Cent"))
    )


def test_criterion_matches_type_requires_exact_equality() -> None:
    """type should compare the full storage type identifier."""
    record = make_record(storage_type="S30GB_CENTOS7_64")

    assert not criterion_matches(record, FilterCriterion("type", "S30GB"))


def test_criterion_matches_label_searches_within_label() -> None:
    """Unanchored label patterns should match substrings."""
    record = make_record(label="prod-web-01")

    assert criterion_matches(record, FilterCriterion("label", "web-\\d+")) and not (
        criterion_matches(record, FilterCriterion("label", "^web-"))
    )


def test_criterion_matches_unknown_name_raises() -> None:
    """Evaluating an unknown criterion should never silently pass."""
    with pytest.raises(UnsupportedFilterError):
        criterion_matches(make_record(), FilterCriterion("storage_group", "Y"))
    assert True


def test_matching_indices_combines_criteria_with_and() -> None:
    """Records must satisfy every criterion and keep list order."""
    criteria = (
        FilterCriterion("os_type", "CentOS"),
        FilterCriterion("type", "S30GB_CENTOS7_64"),
    )

    assert matching_indices(load_fixture_records(), criteria) == [0, 1, 4]


def test_criterion_matches_invalid_label_pattern_matches_nothing() -> None:
    """A label pattern that does not compile should never match."""
    criterion = FilterCriterion("label", "web-(")

    validate_filter_criteria((criterion,))

    assert not criterion_matches(make_record(label="web-(01"), criterion)


def test_validate_filter_criteria_reports_first_unsupported_name() -> None:
    """The first unknown name in declaration order should be reported."""
    criteria = (
        FilterCriterion("os_type", "CentOS"),
        FilterCriterion("zone", "a"),
        FilterCriterion("size", "30"),
    )

    with pytest.raises(UnsupportedFilterError) as error_info:
        validate_filter_criteria(criteria)

    assert error_info.value.name == "zone"
