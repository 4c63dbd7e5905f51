"""
Message protocol — the closed set of form mutations.

Each message is an immutable Pydantic model naming one field-level or
whole-form change. Hosts either build the models directly or send wire
dicts, which parse_message() validates. Wire dicts may carry the
payload flat ({"type": ..., "field": ...}) or nested under "payload"
({"type": ..., "payload": {...}}); for SET_ERRORS the nested payload is
the errors mapping itself.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from formstate.core.checkbox import CheckboxKind


# --- Message Type Enum ---


class MessageType(str, Enum):
    """All supported message types."""

    SET_ERRORS = "SET_ERRORS"
    SET_FIELD_VALUE = "SET_FIELD_VALUE"
    SET_TOUCHED = "SET_TOUCHED"
    SET_VALUES = "SET_VALUES"
    PUSH_A = "PUSH_A"
    SWAP_A = "SWAP_A"
    MOVE_A = "MOVE_A"
    INSERT_A = "INSERT_A"
    REPLACE_A = "REPLACE_A"
    UNSHIFT_A = "UNSHIFT_A"
    REMOVE_A = "REMOVE_A"
    FLIP_CB = "FLIP_CB"


# --- Base Models ---


class BaseMessage(BaseModel):
    """Common configuration: immutable, accepts field names or wire aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FieldMessage(BaseMessage):
    """A message scoped to a single named field."""

    field: str = Field(
        ...,
        min_length=1,
        description="Name of the targeted field",
    )


# --- Whole-form Messages ---


class SetErrors(BaseMessage):
    """Inject errors explicitly, overriding computed validation errors."""

    type: Literal["SET_ERRORS"] = "SET_ERRORS"
    errors: dict[str, Any]


class SetValues(BaseMessage):
    """Shallow-merge new values into the form."""

    type: Literal["SET_VALUES"] = "SET_VALUES"
    values: dict[str, Any]
    reset_initial_values: bool = Field(default=False, alias="resetInitialValues")


# --- Field Messages ---


class SetFieldValue(FieldMessage):
    """Set one field's value."""

    type: Literal["SET_FIELD_VALUE"] = "SET_FIELD_VALUE"
    value: Any = None
    reset_initial_values: bool = Field(default=False, alias="resetInitialValues")


class SetTouched(FieldMessage):
    """Force a field's touched flag on."""

    type: Literal["SET_TOUCHED"] = "SET_TOUCHED"


class FlipCheckbox(FieldMessage):
    """Toggle a checkbox bound to the field."""

    type: Literal["FLIP_CB"] = "FLIP_CB"
    checked: bool
    value: Any
    kind: CheckboxKind | None = Field(
        default=None,
        description="Checkbox kind; inferred from value when absent",
    )


class PushArray(FieldMessage):
    type: Literal["PUSH_A"] = "PUSH_A"
    value: Any = None


class SwapArray(FieldMessage):
    type: Literal["SWAP_A"] = "SWAP_A"
    index_a: int = Field(..., alias="indexA")
    index_b: int = Field(..., alias="indexB")


class MoveArray(FieldMessage):
    type: Literal["MOVE_A"] = "MOVE_A"
    from_index: int = Field(..., alias="from")
    to_index: int = Field(..., alias="to")


class InsertArray(FieldMessage):
    type: Literal["INSERT_A"] = "INSERT_A"
    index: int
    value: Any = None


class ReplaceArray(FieldMessage):
    type: Literal["REPLACE_A"] = "REPLACE_A"
    index: int
    value: Any = None


class UnshiftArray(FieldMessage):
    type: Literal["UNSHIFT_A"] = "UNSHIFT_A"
    value: Any = None


class RemoveArray(FieldMessage):
    type: Literal["REMOVE_A"] = "REMOVE_A"
    index: int


# --- Union type for all messages ---

Message = Union[
    SetErrors,
    SetFieldValue,
    SetTouched,
    SetValues,
    PushArray,
    SwapArray,
    MoveArray,
    InsertArray,
    ReplaceArray,
    UnshiftArray,
    RemoveArray,
    FlipCheckbox,
]

_message_adapter: TypeAdapter = TypeAdapter(
    Annotated[Message, Field(discriminator="type")]
)


def parse_message(data: dict[str, Any]) -> Message:
    """Validate a wire dict into a message model.

    Args:
        data: A dict with a "type" key and either flat payload keys or a
            nested "payload" dict.

    Returns:
        The matching message model.

    Raises:
        pydantic.ValidationError: If the type is unknown or the payload
            is malformed.
    """
    if "payload" not in data:
        return _message_adapter.validate_python(data)

    msg_type = data.get("type")
    payload = data["payload"]
    if msg_type == MessageType.SET_ERRORS.value:
        flat = {"type": msg_type, "errors": payload}
    else:
        if not isinstance(payload, dict):
            raise TypeError(f"Payload of '{msg_type}' must be a dict, got {type(payload).__name__}")
        flat = {"type": msg_type, **payload}
    return _message_adapter.validate_python(flat)
