"""
Checkbox value resolution.

A checkbox either drives a boolean field (BOOLEAN) or toggles one
member of a list-valued field (MULTI). The kind is an explicit choice;
checkbox_kind_for() derives it from the nominal value for callers that
still use the "true"/"false" string markers.
"""

from enum import Enum
from typing import Any

from formstate.core.touched import deep_equal


class CheckboxKind(str, Enum):
    """How a checkbox maps onto its field value."""

    BOOLEAN = "boolean"
    MULTI = "multi"


_BOOLEAN_MARKERS = {"true", "false"}


def checkbox_kind_for(nominal_value: Any) -> CheckboxKind:
    """Infer the checkbox kind from its nominal value.

    Only the exact strings "true"/"false" mark a boolean checkbox.
    Everything else, including real booleans, is treated as a multi-value
    member; pass kind=CheckboxKind.BOOLEAN to force a boolean checkbox.
    """
    if isinstance(nominal_value, str) and nominal_value in _BOOLEAN_MARKERS:
        return CheckboxKind.BOOLEAN
    return CheckboxKind.MULTI


def resolve_checkbox_value(
    current_value: Any,
    checked: bool,
    nominal_value: Any,
    kind: CheckboxKind | None = None,
) -> Any:
    """Return the next field value after a checkbox is toggled.

    Args:
        current_value: The field's value before the toggle.
        checked: Whether the checkbox is now checked.
        nominal_value: The value the checkbox represents.
        kind: Explicit checkbox kind; inferred from nominal_value if None.

    Returns:
        A bool for boolean checkboxes, otherwise the updated list (or the
        negated scalar when the field does not hold a list).
    """
    if kind is None:
        kind = checkbox_kind_for(nominal_value)

    if kind is CheckboxKind.BOOLEAN:
        return bool(checked)

    is_list = isinstance(current_value, (list, tuple))

    if checked and nominal_value:
        # A scalar field is widened to a single-member list here
        if is_list:
            return [*current_value, nominal_value]
        return [nominal_value]

    if not is_list:
        return not current_value

    # Strict match, so 1 never removes True
    index = next(
        (i for i, item in enumerate(current_value) if deep_equal(item, nominal_value)),
        None,
    )
    if index is None:
        return current_value
    return [*current_value[:index], *current_value[index + 1:]]
