"""
Immutable form state snapshot.

A FormState is never modified after creation. Every transition builds
a new snapshot with model_copy(update=...), which keeps unchanged
members (and the values passed in) by reference.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FormState(BaseModel):
    """Values, baseline values, touched flags and errors of one form."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, Any] = Field(
        default_factory=dict,
        description="Current field values keyed by field name",
    )
    initial_values: dict[str, Any] = Field(
        default_factory=dict,
        description="Baseline values that touched flags are computed against",
    )
    touched: dict[str, bool] = Field(
        default_factory=dict,
        description="Fields whose value differs from the baseline (only True entries)",
    )
    errors: dict[str, Any] = Field(
        default_factory=dict,
        description="Field errors; an absent key means no error",
    )
    errors_set: bool = Field(
        default=False,
        description="True when the last transition was an explicit SET_ERRORS",
    )

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_pristine(self) -> bool:
        return not self.touched

    @property
    def is_dirty(self) -> bool:
        return not self.is_pristine


def create_form_state(initial_values: dict[str, Any] | None = None) -> FormState:
    """Create a pristine state whose values equal the given baseline."""
    initial_values = dict(initial_values or {})
    return FormState(values=dict(initial_values), initial_values=initial_values)
