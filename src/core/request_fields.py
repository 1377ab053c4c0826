"""Type-safe field parsing helpers for selection requests.

This module turns loosely-typed configuration mappings into a typed
SelectionRequest so data-source reads, query-spec files, and the CLI
produce consistent validation errors for the same malformed input.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from core.errors import ValidationError
from core.types import FilterCriterion, SelectionRequest


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field, treating blank values as absent."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    raise ValidationError(f"Field '{field_name}' must be a string when provided.")


def optional_bool(
    args: Mapping[str, object],
    field_name: str,
    default_value: bool,
) -> bool:
    """Read an optional boolean field."""
    value = args.get(field_name)
    if value is None:
        return default_value
    if isinstance(value, bool):
        return value
    raise ValidationError(f"Field '{field_name}' must be true/false.")


def parse_filter_criteria(value: object) -> tuple[FilterCriterion, ...]:
    """Parse the ``filter`` block into ordered criteria.

    Args:
        value: Raw ``filter`` value, a list of ``{name, value}`` mappings.

    Returns:
        Parsed criteria in declaration order.

    Raises:
        ValidationError: If the block or any entry is malformed.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise ValidationError(
            f"Field 'filter' must be a list of name/value pairs, got {type(value).__name__}."
        )
    criteria = []
    for index, entry in enumerate(value):
        criteria.append(_parse_filter_entry(entry, index))
    return tuple(criteria)


def build_selection_request(args: Mapping[str, object]) -> SelectionRequest:
    """Build a typed selection request from a configuration mapping.

    Args:
        args: Mapping with optional ``service_code``, ``filter`` and
            ``most_recent`` keys.

    Returns:
        Parsed selection request.

    Raises:
        ValidationError: If any field has the wrong type.
    """
    return SelectionRequest(
        service_code=optional_string(args, "service_code"),
        filters=parse_filter_criteria(args.get("filter")),
        most_recent=optional_bool(args, "most_recent", False),
    )


def _parse_filter_entry(entry: object, index: int) -> FilterCriterion:
    context = f"filter #{index + 1}"
    if not isinstance(entry, Mapping):
        raise ValidationError(
            f"Invalid {context}: expected a name/value mapping, got {type(entry).__name__}."
        )
    unknown_keys = sorted(str(key) for key in entry if key not in {"name", "value"})
    if unknown_keys:
        raise ValidationError(f"Invalid {context}: unknown fields {', '.join(unknown_keys)}.")
    name = entry.get("name")
    raw_value = entry.get("value")
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"Invalid {context}: field 'name' is required.")
    if not isinstance(raw_value, str):
        raise ValidationError(f"Invalid {context}: field 'value' must be a string.")
    return FilterCriterion(name=name, value=raw_value)
