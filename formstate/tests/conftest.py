"""
Shared test fixtures for the formstate test suite.

Provides a small Pydantic schema used as a validation schema, and a
few ready-made states.
"""

from typing import Any

import pytest
from pydantic import BaseModel, Field

from formstate.core.state import FormState, create_form_state


class ContactSchema(BaseModel):
    """Validation schema used across tests."""

    name: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)


class DictSchema:
    """Schema object exposing validate(values) instead of being a model."""

    def validate(self, values: dict[str, Any]) -> dict[str, Any] | None:
        if not values.get("email"):
            return {"email": "required"}
        return None


@pytest.fixture
def contact_schema() -> type[ContactSchema]:
    return ContactSchema


@pytest.fixture
def dict_schema() -> DictSchema:
    return DictSchema()


@pytest.fixture
def empty_state() -> FormState:
    return create_form_state({})


@pytest.fixture
def items_state() -> FormState:
    """A pristine state holding a list field."""
    return create_form_state({"items": [1, 2, 3], "name": "Alice"})
