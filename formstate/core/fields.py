"""
Single-field accessors over a values mapping.

set_field and update_field return a new dict; the input mapping is
never modified.
"""

from typing import Any, Callable, Mapping


def get_field(values: Mapping[str, Any], field: str, default: Any = None) -> Any:
    """Return the value stored under field, or default when absent."""
    return values.get(field, default)


def set_field(values: Mapping[str, Any], field: str, value: Any) -> dict[str, Any]:
    """Return a copy of values with field set to value."""
    updated = dict(values)
    updated[field] = value
    return updated


def update_field(
    values: Mapping[str, Any],
    field: str,
    transform: Callable[[Any], Any],
) -> dict[str, Any]:
    """Return a copy of values with field replaced by transform(current)."""
    return set_field(values, field, transform(get_field(values, field)))
