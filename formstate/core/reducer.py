"""
Core form reducer.

form_reducer(state, message) is a pure function: it never mutates the
incoming state or message and always returns a FormState. Messages it
does not recognise return the input state unchanged.

Array messages are strict about their target:
- PUSH_A and UNSHIFT_A treat an absent field as an empty list.
- All other array messages require the field to already hold a list.
"""

import logging
from typing import Any, Callable

from formstate.core import arrays
from formstate.core.checkbox import resolve_checkbox_value
from formstate.core.errors import ArrayFieldError, aggregate
from formstate.core.fields import set_field, update_field
from formstate.core.messages import (
    FlipCheckbox,
    InsertArray,
    MoveArray,
    PushArray,
    RemoveArray,
    ReplaceArray,
    SetErrors,
    SetFieldValue,
    SetTouched,
    SetValues,
    SwapArray,
    UnshiftArray,
)
from formstate.core.state import FormState
from formstate.core.touched import set_values_and_touched

logger = logging.getLogger(__name__)


def form_reducer(state: FormState, message: Any) -> FormState:
    """Apply one message to the state and return the next state.

    Args:
        state: The current snapshot.
        message: One of the message models from formstate.core.messages.

    Returns:
        A new FormState (or `state` itself for unrecognised messages).

    Raises:
        ArrayFieldError: If an array message targets a non-list field.
        IndexError: If an array index is out of range.
    """
    match message:
        case SetErrors():
            logger.debug("SET_ERRORS on %d field(s)", len(message.errors))
            return state.model_copy(
                update={
                    "errors": aggregate([message.errors, state.errors]),
                    "errors_set": True,
                }
            )

        case SetTouched():
            return state.model_copy(
                update={"touched": {**state.touched, message.field: True}}
            )

        case SetFieldValue():
            values = set_field(state.values, message.field, message.value)
            return set_values_and_touched(state, values, message.reset_initial_values)

        case SetValues():
            values = {**state.values, **message.values}
            return set_values_and_touched(state, values, message.reset_initial_values)

        case FlipCheckbox():
            values = update_field(
                state.values,
                message.field,
                lambda current: resolve_checkbox_value(
                    current, message.checked, message.value, message.kind
                ),
            )
            return set_values_and_touched(state, values, False)

        case PushArray():
            return _update_array(
                state, message.field,
                lambda items: [*items, message.value],
                allow_absent=True,
            )

        case UnshiftArray():
            return _update_array(
                state, message.field,
                lambda items: [message.value, *items],
                allow_absent=True,
            )

        case SwapArray():
            return _update_array(
                state, message.field,
                lambda items: arrays.swap(items, message.index_a, message.index_b),
            )

        case MoveArray():
            return _update_array(
                state, message.field,
                lambda items: arrays.move(items, message.from_index, message.to_index),
            )

        case InsertArray():
            return _update_array(
                state, message.field,
                lambda items: arrays.insert(items, message.index, message.value),
            )

        case ReplaceArray():
            return _update_array(
                state, message.field,
                lambda items: arrays.replace(items, message.index, message.value),
            )

        case RemoveArray():
            return _update_array(
                state, message.field,
                lambda items: arrays.remove(items, message.index),
            )

    logger.debug("Ignoring unrecognised message: %r", message)
    return state


def _update_array(
    state: FormState,
    field: str,
    transform: Callable[[list], list],
    allow_absent: bool = False,
) -> FormState:
    """Run transform over the list stored in field and recompute touched."""
    current = state.values.get(field)

    if current is None:
        if not allow_absent:
            raise ArrayFieldError(field, "array operation on a field with no value")
        current = []
    elif not isinstance(current, (list, tuple)):
        raise ArrayFieldError(
            field, f"expected a list value, got {type(current).__name__}"
        )

    values = set_field(state.values, field, transform(current))
    logger.debug("Array field '%s' now has %d item(s)", field, len(values[field]))
    return set_values_and_touched(state, values, False)
