"""
Unit tests for the validation-integrated reducer.

Tests cover:
- Pydantic ValidationError conversion into a (nested) errors map
- Schema objects exposing validate(values)
- FormValidationError raised by schema or validate callback
- Precedence: SET_ERRORS > validate() > schema
- errors_set only after SET_ERRORS
- Unexpected exceptions and malformed schemas are not swallowed
"""

import pytest
from pydantic import BaseModel, ValidationError

from formstate.core.errors import FormValidationError
from formstate.core.messages import PushArray, SetErrors, SetFieldValue
from formstate.core.state import create_form_state
from formstate.core.validation import (
    FORM_ERROR_KEY,
    build_validating_reducer,
    run_validate_handler,
    run_validation_schema,
    validation_error_to_errors,
)


class Address(BaseModel):
    city: str


class Person(BaseModel):
    address: Address
    emails: list[str]


class Scores(BaseModel):
    scores: dict[int, int] = {}


# =============================================================
# Test: schema runner
# =============================================================


class TestRunValidationSchema:
    def test_valid_values_give_no_errors(self, contact_schema):
        assert run_validation_schema(contact_schema, {"name": "Alice"}) == {}

    def test_missing_field(self, contact_schema):
        errors = run_validation_schema(contact_schema, {})
        assert set(errors) == {"name"}
        assert isinstance(errors["name"], str)

    def test_list_item_errors_keep_positions(self, contact_schema):
        errors = run_validation_schema(contact_schema, {"name": "A", "tags": ["ok", 2]})
        assert errors["tags"][0] is None
        assert isinstance(errors["tags"][1], str)

    def test_nested_model_errors(self):
        errors = run_validation_schema(Person, {"address": {}, "emails": ["a@b.c"]})
        assert set(errors) == {"address"}
        assert set(errors["address"]) == {"city"}

    def test_negative_int_key_stays_dict_key(self):
        errors = run_validation_schema(Scores, {"scores": {-1: "bad"}})
        assert isinstance(errors["scores"], dict)
        assert set(errors["scores"]) == {-1}

    def test_large_int_key_is_not_padded(self):
        errors = run_validation_schema(Scores, {"scores": {100000: "bad"}})
        assert isinstance(errors["scores"], dict)
        assert set(errors["scores"]) == {100000}

    def test_mixed_int_and_str_keys(self):
        errors = run_validation_schema(Scores, {"scores": {1: "x", "b": 2}})
        assert isinstance(errors["scores"], dict)
        assert 1 in errors["scores"]
        assert "b" in errors["scores"]

    def test_model_level_error_uses_form_key(self):
        with pytest.raises(ValidationError) as exc_info:
            Address.model_validate("not a dict")
        errors = validation_error_to_errors(exc_info.value)
        assert FORM_ERROR_KEY in errors

    def test_object_schema(self, dict_schema):
        assert run_validation_schema(dict_schema, {}) == {"email": "required"}
        assert run_validation_schema(dict_schema, {"email": "a@b.c"}) == {}

    def test_schema_raising_form_validation_error(self):
        class Raising:
            def validate(self, values):
                raise FormValidationError({"age": "too young"})

        assert run_validation_schema(Raising(), {}) == {"age": "too young"}

    def test_unexpected_exception_propagates(self):
        class Broken:
            def validate(self, values):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            run_validation_schema(Broken(), {})


class TestRunValidateHandler:
    def test_none_means_no_errors(self):
        assert run_validate_handler(lambda values: None, {}) == {}

    def test_returns_copy_of_mapping(self):
        returned = {"a": "bad"}
        errors = run_validate_handler(lambda values: returned, {})
        assert errors == {"a": "bad"}
        assert errors is not returned

    def test_form_validation_error_converted(self):
        def validate(values):
            raise FormValidationError({"a": "bad"})

        assert run_validate_handler(validate, {}) == {"a": "bad"}


# =============================================================
# Test: validating reducer
# =============================================================


class TestValidatingReducer:
    def test_schema_errors_after_value_change(self, contact_schema):
        reducer = build_validating_reducer(contact_schema)
        state = create_form_state({"name": "Alice"})

        result = reducer(state, SetFieldValue(field="name", value=""))
        assert "name" in result.errors
        assert result.errors_set is False
        assert result.touched == {"name": True}

        fixed = reducer(result, SetFieldValue(field="name", value="Bob"))
        assert fixed.errors == {}

    def test_validate_wins_over_schema(self, contact_schema):
        reducer = build_validating_reducer(
            contact_schema, lambda values: {"name": "from validate"}
        )
        result = reducer(create_form_state({}), SetFieldValue(field="name", value=""))
        assert result.errors["name"] == "from validate"

    def test_set_errors_wins_over_validation(self, contact_schema):
        reducer = build_validating_reducer(
            contact_schema, lambda values: {"name": "from validate", "x": "v"}
        )
        result = reducer(create_form_state({}), SetErrors(errors={"name": "forced"}))
        assert result.errors == {"name": "forced", "x": "v"}
        assert result.errors_set is True

    def test_set_errors_leaves_values_untouched(self, items_state):
        reducer = build_validating_reducer()
        result = reducer(items_state, SetErrors(errors={"name": "required"}))
        assert result.values is items_state.values
        assert result.touched is items_state.touched
        assert result.errors == {"name": "required"}

    def test_next_message_replaces_injected_errors(self, items_state):
        reducer = build_validating_reducer(validate=lambda values: {})
        forced = reducer(items_state, SetErrors(errors={"name": "required"}))
        result = reducer(forced, PushArray(field="items", value=4))
        assert result.errors == {}
        assert result.errors_set is False

    def test_validation_sees_reduced_values(self):
        seen = []

        def validate(values):
            seen.append(dict(values))
            return {}

        reducer = build_validating_reducer(validate=validate)
        reducer(create_form_state({"tags": []}), PushArray(field="tags", value="a"))
        assert seen == [{"tags": ["a"]}]

    def test_no_validators_gives_empty_errors(self, items_state):
        reducer = build_validating_reducer()
        result = reducer(items_state, SetFieldValue(field="name", value="Bob"))
        assert result.errors == {}

    def test_malformed_schema_rejected_at_build(self):
        with pytest.raises(TypeError):
            build_validating_reducer(schema=42)

    def test_unrecognised_message_still_validates(self, dict_schema):
        reducer = build_validating_reducer(dict_schema)
        result = reducer(create_form_state({}), object())
        assert result.errors == {"email": "required"}

    def test_dict_int_key_errors_never_escape(self):
        reducer = build_validating_reducer(Scores)
        state = create_form_state({"scores": {}})
        for value in ({-1: "bad"}, {1: "x", "b": 2}, {100000: "bad"}):
            result = reducer(state, SetFieldValue(field="scores", value=value))
            assert "scores" in result.errors
            assert result.errors_set is False
