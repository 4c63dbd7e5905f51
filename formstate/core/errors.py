"""
Error types and error-map aggregation.

Two kinds of errors live here:
- Exceptions for caller misuse (bad array targets), raised immediately.
- ErrorsMap, the plain mapping of field name to error payload that
  validation produces and FormState.errors stores.
"""

from typing import Any, Iterable, Mapping

ErrorsMap = dict[str, Any]


class FormStateError(Exception):
    """Base class for formstate exceptions."""


class ArrayFieldError(FormStateError):
    """Raised when an array message targets a field that is not a list."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Field '{field}': {message}")


class FormValidationError(FormStateError):
    """Raised by a schema or validate function to report field errors.

    The validating reducer converts it into the errors mapping rather
    than letting it escape.
    """

    def __init__(self, errors: Mapping[str, Any], message: str = "Form validation failed"):
        self.errors: ErrorsMap = dict(errors)
        super().__init__(message)


def aggregate(error_maps: Iterable[Mapping[str, Any] | None]) -> ErrorsMap:
    """Merge error maps in order; a later map wins for a repeated field.

    None entries are skipped.
    """
    merged: ErrorsMap = {}
    for errors in error_maps:
        if errors:
            merged.update(errors)
    return merged
