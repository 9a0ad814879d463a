"""
Context manager for validation configuration (unknown fields, conversion).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationOptions:
    forbid_unknown: bool = False
    implicit_conversion: bool = False


# Context variable for the active options
_options: ContextVar[ValidationOptions] = ContextVar(
    "validation_options", default=ValidationOptions()
)


def current_options() -> ValidationOptions:
    """Return the options in effect for the current context."""
    return _options.get()


@contextmanager
def validation_context(
    *, forbid_unknown: bool = False, implicit_conversion: bool = False
):
    """
    Context manager for validation configuration.

    Args:
        forbid_unknown: If True, input keys the schema does not declare are
               reported as ``unknown_field`` violations.
        implicit_conversion: If True, text values from query strings are
               converted before checks run ("20" -> 20, "true" -> True).

    Example:
        from unidto import validate, validation_context
        from unidto.dto import ListSchedulesDto

        query = {"page": "2", "limit": "20", "weekday": "Monday"}

        # Normal: "2" is not an integer
        validate(ListSchedulesDto, query)  # Invalid

        # Query-string mode: converted, then checked
        with validation_context(implicit_conversion=True):
            validate(ListSchedulesDto, query)  # Valid
    """
    token = _options.set(
        ValidationOptions(
            forbid_unknown=forbid_unknown,
            implicit_conversion=implicit_conversion,
        )
    )
    try:
        yield
    finally:
        _options.reset(token)
