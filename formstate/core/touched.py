"""
Touched-flag computation.

A field is touched when its current value differs structurally from
the same field in the baseline (initial) values. Touched maps only
ever hold True entries; an absent key means "not touched".
"""

import math
from typing import Any, Mapping

from formstate.core.state import FormState


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality for JSON-like values.

    - Mappings are equal when they have the same keys (in any order)
      and pairwise deep-equal values.
    - Lists and tuples are equal to each other when they have the same
      length and pairwise deep-equal items.
    - Booleans only equal booleans, so True != 1.
    - NaN equals NaN.
    """
    if a is b:
        return True

    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[key], b[key]) for key in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, (Mapping, list, tuple)) or isinstance(b, (Mapping, list, tuple)):
        return False

    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True

    return a == b


def compute_touched(
    values: Mapping[str, Any],
    initial_values: Mapping[str, Any],
) -> dict[str, bool]:
    """Mark every top-level field of values that differs from initial_values.

    For instance:
        initial_values: {"a": 1, "b": 2}
        values:         {"a": 10, "b": 2}
    gives {"a": True}.
    """
    return {
        field: True
        for field, value in values.items()
        if not deep_equal(value, initial_values.get(field))
    }


def set_values_and_touched(
    state: FormState,
    next_values: dict[str, Any],
    reset_initial_values: bool,
) -> FormState:
    """Return state with next_values and recomputed touched flags.

    With reset_initial_values, next_values becomes the new baseline and
    touched is cleared. errors and errors_set are carried over unchanged.
    """
    if reset_initial_values:
        initial_values = next_values
        touched: dict[str, bool] = {}
    else:
        initial_values = state.initial_values
        touched = compute_touched(next_values, initial_values)

    return state.model_copy(
        update={
            "values": next_values,
            "initial_values": initial_values,
            "touched": touched,
        }
    )
