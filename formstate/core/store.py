"""
In-memory form store.

Holds the current FormState for one form and applies messages through
the validating reducer one at a time. Listeners are notified with each
new snapshot after the lock is released.
"""

import logging
import threading
from typing import Any, Callable

from formstate.core.checkbox import CheckboxKind
from formstate.core.config import FormConfig
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
    parse_message,
)
from formstate.core.state import FormState, create_form_state

logger = logging.getLogger(__name__)

Listener = Callable[[FormState], None]


class FormStore:
    """Serializes messages into the reducer and keeps the latest snapshot.

    Usage:
        store = FormStore(FormConfig(validation_schema=MyModel), initial_values={"name": ""})
        store.set_field_value("name", "Alice")
        store.push("tags", "new")
        store.state.errors

    Args:
        config: Form configuration (schema, validate callback, props mapper).
        props: Host props passed to the schema factory and values mapper.
        initial_values: Explicit baseline; overrides config.map_props_to_values.
    """

    def __init__(
        self,
        config: FormConfig | None = None,
        props: Any = None,
        initial_values: dict[str, Any] | None = None,
    ):
        self.config = config or FormConfig()
        self._reducer = self.config.build_reducer(props)
        if initial_values is None:
            initial_values = self.config.initial_values(props)
        self._state = create_form_state(initial_values)
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> FormState:
        """The current snapshot."""
        with self._lock:
            return self._state

    def dispatch(self, message: Any) -> FormState:
        """Apply a message (model or wire dict) and return the new snapshot."""
        if isinstance(message, dict):
            message = parse_message(message)

        with self._lock:
            self._state = self._reducer(self._state, message)
            state = self._state
            listeners = list(self._listeners)

        for listener in listeners:
            listener(state)
        return state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def reset(self, values: dict[str, Any] | None = None) -> FormState:
        """Start over from a pristine state at the given baseline.

        Defaults to the current initial values. Validation is not re-run
        until the next message.
        """
        with self._lock:
            baseline = self._state.initial_values if values is None else values
            self._state = create_form_state(baseline)
            state = self._state
            listeners = list(self._listeners)
        logger.info("Form store reset with %d field(s)", len(state.values))

        for listener in listeners:
            listener(state)
        return state

    # -----------------------------------------------------------------
    # Message helpers
    # -----------------------------------------------------------------

    def set_field_value(self, field: str, value: Any, reset_initial_values: bool = False) -> FormState:
        return self.dispatch(
            SetFieldValue(field=field, value=value, reset_initial_values=reset_initial_values)
        )

    def set_values(self, values: dict[str, Any], reset_initial_values: bool = False) -> FormState:
        return self.dispatch(SetValues(values=values, reset_initial_values=reset_initial_values))

    def set_errors(self, errors: dict[str, Any]) -> FormState:
        return self.dispatch(SetErrors(errors=errors))

    def set_touched(self, field: str) -> FormState:
        return self.dispatch(SetTouched(field=field))

    def flip_checkbox(
        self,
        field: str,
        checked: bool,
        value: Any,
        kind: CheckboxKind | None = None,
    ) -> FormState:
        return self.dispatch(FlipCheckbox(field=field, checked=checked, value=value, kind=kind))

    def push(self, field: str, value: Any = None) -> FormState:
        return self.dispatch(PushArray(field=field, value=value))

    def unshift(self, field: str, value: Any = None) -> FormState:
        return self.dispatch(UnshiftArray(field=field, value=value))

    def swap(self, field: str, index_a: int, index_b: int) -> FormState:
        return self.dispatch(SwapArray(field=field, index_a=index_a, index_b=index_b))

    def move(self, field: str, from_index: int, to_index: int) -> FormState:
        return self.dispatch(MoveArray(field=field, from_index=from_index, to_index=to_index))

    def insert(self, field: str, index: int, value: Any = None) -> FormState:
        return self.dispatch(InsertArray(field=field, index=index, value=value))

    def replace(self, field: str, index: int, value: Any = None) -> FormState:
        return self.dispatch(ReplaceArray(field=field, index=index, value=value))

    def remove(self, field: str, index: int) -> FormState:
        return self.dispatch(RemoveArray(field=field, index=index))
