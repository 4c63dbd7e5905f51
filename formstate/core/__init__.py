"""
Form state core: the reducer, its helpers and the validation wrapper.

Each message maps one FormState snapshot to the next; nothing here
performs I/O or mutates its inputs.
"""

from formstate.core.checkbox import CheckboxKind, checkbox_kind_for, resolve_checkbox_value
from formstate.core.config import FormConfig
from formstate.core.errors import (
    ArrayFieldError,
    ErrorsMap,
    FormStateError,
    FormValidationError,
    aggregate,
)
from formstate.core.messages import Message, MessageType, parse_message
from formstate.core.reducer import form_reducer
from formstate.core.state import FormState, create_form_state
from formstate.core.store import FormStore
from formstate.core.touched import compute_touched, deep_equal, set_values_and_touched
from formstate.core.validation import build_validating_reducer

__all__ = [
    "ArrayFieldError",
    "CheckboxKind",
    "ErrorsMap",
    "FormConfig",
    "FormState",
    "FormStateError",
    "FormStore",
    "FormValidationError",
    "Message",
    "MessageType",
    "aggregate",
    "build_validating_reducer",
    "checkbox_kind_for",
    "compute_touched",
    "create_form_state",
    "deep_equal",
    "form_reducer",
    "parse_message",
    "resolve_checkbox_value",
    "set_values_and_touched",
]
