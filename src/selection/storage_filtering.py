"""Storage record filtering helpers.

This module evaluates filter criteria against storage records.
It keeps criterion semantics reusable across the selector and the CLI.
"""

from __future__ import annotations

import re

from core.constants import (
    FILTER_NAME_LABEL,
    FILTER_NAME_OS_TYPE,
    FILTER_NAME_TYPE,
    SUPPORTED_FILTER_NAMES,
)
from core.errors import UnsupportedFilterError
from core.logging_config import get_logger
from core.types import FilterCriterion, StorageRecord

_LOGGER = get_logger(__name__)


def validate_filter_criteria(criteria: tuple[FilterCriterion, ...]) -> None:
    """Reject criteria that can never be evaluated.

    Args:
        criteria: Criteria to check, in order.

    Raises:
        UnsupportedFilterError: On the first unrecognized criterion name.
    """
    for criterion in criteria:
        if criterion.name not in SUPPORTED_FILTER_NAMES:
            _LOGGER.error("filter_not_supported", filter_name=criterion.name)
            raise UnsupportedFilterError(criterion.name)


def criterion_matches(record: StorageRecord, criterion: FilterCriterion) -> bool:
    """Evaluate one criterion against one record.

    Args:
        record: Storage record under test.
        criterion: Criterion to evaluate.

    Returns:
        True when the record satisfies the criterion.

    Raises:
        UnsupportedFilterError: If the criterion name is not recognized.
    """
    if criterion.name == FILTER_NAME_OS_TYPE:
        return record.os_type == criterion.value
    if criterion.name == FILTER_NAME_LABEL:
        return _label_matches(criterion.value, record.label)
    if criterion.name == FILTER_NAME_TYPE:
        return record.type == criterion.value
    raise UnsupportedFilterError(criterion.name)


def record_matches(record: StorageRecord, criteria: tuple[FilterCriterion, ...]) -> bool:
    """Return True when every criterion passes for the record."""
    return all(criterion_matches(record, criterion) for criterion in criteria)


def matching_indices(
    records: list[StorageRecord],
    criteria: tuple[FilterCriterion, ...],
) -> list[int]:
    """Collect indices of records satisfying all criteria.

    Args:
        records: Fetched storage records.
        criteria: Criteria combined with logical AND.

    Returns:
        Matching indices in original list order.
    """
    return [index for index, record in enumerate(records) if record_matches(record, criteria)]


def _label_matches(pattern: str, label: str) -> bool:
    # an invalid pattern matches nothing
    try:
        return re.search(pattern, label) is not None
    except re.error as error:
        _LOGGER.warning("label_pattern_invalid", pattern=pattern, reason=str(error))
        return False
