"""
Form configuration.

FormConfig bundles what a host supplies when it binds a form: a
validation schema (or a factory building one from host props), an
optional validate callback, and an optional mapper from props to the
initial values.
"""

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from formstate.core.validation import Reducer, ValidateFn, build_validating_reducer, is_model_schema


class FormConfig(BaseModel):
    """Host-supplied configuration for one form."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    validation_schema: Any = Field(
        default=None,
        description="Pydantic model class, object with validate(values), or props -> schema",
    )
    validate_fn: ValidateFn | None = Field(
        default=None,
        description="Custom validation callback returning an errors mapping",
    )
    map_props_to_values: Callable[[Any], dict[str, Any]] | None = Field(
        default=None,
        description="Builds the initial values from host props",
    )

    def resolve_schema(self, props: Any = None) -> Any:
        """Return the schema, calling a schema factory with props if needed.

        Model classes and objects exposing validate() are schemas already;
        any other callable is treated as a factory.
        """
        schema = self.validation_schema
        if schema is None or is_model_schema(schema):
            return schema
        if callable(getattr(schema, "validate", None)):
            return schema
        if callable(schema):
            return schema(props)
        return schema

    def initial_values(self, props: Any = None) -> dict[str, Any]:
        """Map props to initial values ({} when no mapper is configured)."""
        if self.map_props_to_values is None:
            return {}
        return dict(self.map_props_to_values(props))

    def build_reducer(self, props: Any = None) -> Reducer:
        """Build the validating reducer for these props."""
        return build_validating_reducer(self.resolve_schema(props), self.validate_fn)
