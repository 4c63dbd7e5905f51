"""
Validation integration.

Wraps the core reducer so that every message (except SET_ERRORS) is
followed by a fresh validation pass over the resulting values. Errors
are merged in precedence order:

    schema errors < validate() errors < explicit SET_ERRORS payload

A schema is either a Pydantic model class, validated with
model_validate(), or any object exposing validate(values) that returns
an errors mapping (or None when the values are valid).

Validation failures are data: pydantic.ValidationError and
FormValidationError are converted into the errors mapping. Any other
exception is a defect in the schema or callback and propagates.
"""

import logging
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from formstate.core.errors import ErrorsMap, FormValidationError, aggregate
from formstate.core.messages import SetErrors
from formstate.core.reducer import form_reducer
from formstate.core.state import FormState

logger = logging.getLogger(__name__)

# Errors that pydantic reports against the whole model (empty location)
FORM_ERROR_KEY = "_form"

# Int location parts at or above this stay dict keys instead of list positions
MAX_LIST_POSITIONS = 1000

ValidateFn = Callable[[dict[str, Any]], Mapping[str, Any] | None]
Reducer = Callable[[FormState, Any], FormState]


# -----------------------------------------------------------------
# Schema validation
# -----------------------------------------------------------------


def is_model_schema(schema: Any) -> bool:
    """True if schema is a Pydantic model class."""
    return isinstance(schema, type) and issubclass(schema, BaseModel)


def check_schema(schema: Any) -> None:
    """Raise TypeError unless schema is usable as a validation schema."""
    if is_model_schema(schema):
        return
    if callable(getattr(schema, "validate", None)):
        return
    raise TypeError(
        f"Validation schema must be a Pydantic model class or expose validate(values), "
        f"got {type(schema).__name__}"
    )


def validation_error_to_errors(exc: ValidationError) -> ErrorsMap:
    """Convert a pydantic ValidationError into a nested errors mapping.

    The first message reported for a location wins. Location parts become
    dict keys; a level whose keys are all non-negative ints below
    MAX_LIST_POSITIONS is then turned into a list padded with None, so an
    error at ("items", 1, "name") lands in errors["items"][1]["name"].
    Negative, large or mixed keys (e.g. from dict[int, ...] fields) stay
    as dict keys.
    """
    errors: ErrorsMap = {}
    for error in exc.errors():
        loc = tuple(error.get("loc", ())) or (FORM_ERROR_KEY,)
        _set_in(errors, loc, error.get("msg", "Invalid value"))
    return {field: _listify(value) for field, value in errors.items()}


def run_validation_schema(schema: Any, values: dict[str, Any]) -> ErrorsMap:
    """Validate values against schema and return the resulting errors map."""
    try:
        if is_model_schema(schema):
            schema.model_validate(values)
            return {}
        return dict(schema.validate(values) or {})
    except ValidationError as e:
        errors = validation_error_to_errors(e)
        logger.debug("Schema validation failed for field(s): %s", list(errors))
        return errors
    except FormValidationError as e:
        logger.debug("Schema raised FormValidationError for field(s): %s", list(e.errors))
        return dict(e.errors)


def run_validate_handler(validate: ValidateFn, values: dict[str, Any]) -> ErrorsMap:
    """Run a custom validate function and return its errors map."""
    try:
        return dict(validate(values) or {})
    except FormValidationError as e:
        logger.debug("validate() raised FormValidationError for field(s): %s", list(e.errors))
        return dict(e.errors)


# -----------------------------------------------------------------
# Validating reducer
# -----------------------------------------------------------------


def build_validating_reducer(
    schema: Any = None,
    validate: ValidateFn | None = None,
) -> Reducer:
    """Build a reducer that re-validates after every message.

    Args:
        schema: Optional Pydantic model class or object with validate(values).
        validate: Optional callback (values) -> errors mapping.

    Returns:
        A reducer (state, message) -> state.

    Raises:
        TypeError: If schema is given but is not a usable schema.
    """
    if schema is not None:
        check_schema(schema)

    def validating_reducer(state: FormState, message: Any) -> FormState:
        is_set_errors = isinstance(message, SetErrors)
        next_state = state if is_set_errors else form_reducer(state, message)

        collected: list[Mapping[str, Any]] = []
        if schema is not None:
            collected.append(run_validation_schema(schema, next_state.values))
        if validate is not None:
            collected.append(run_validate_handler(validate, next_state.values))
        if is_set_errors:
            collected.append(message.errors)

        errors = aggregate(collected)
        logger.debug(
            "Validated after %s: %d field error(s)",
            getattr(message, "type", type(message).__name__),
            len(errors),
        )
        return next_state.model_copy(
            update={"errors": errors, "errors_set": is_set_errors}
        )

    return validating_reducer


# -----------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------


def _set_in(target: dict, path: tuple, message: str) -> None:
    """Store message at path inside target unless something is already there."""
    node: Any = target
    for key in path[:-1]:
        node = node.setdefault(key, {})
        if not isinstance(node, dict):
            # A message already sits at a parent location
            return
    node.setdefault(path[-1], message)


def _listify(node: Any) -> Any:
    """Turn dicts keyed only by small non-negative ints into padded lists."""
    if not isinstance(node, dict):
        return node
    converted = {key: _listify(value) for key, value in node.items()}
    if converted and all(_is_list_position(key) for key in converted):
        items: list[Any] = [None] * (max(converted) + 1)
        for position, value in converted.items():
            items[position] = value
        return items
    return converted


def _is_list_position(key: Any) -> bool:
    return (
        isinstance(key, int)
        and not isinstance(key, bool)
        and 0 <= key < MAX_LIST_POSITIONS
    )
