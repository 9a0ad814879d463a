from .context import current_options, validation_context
from .validation import (
    Invalid,
    Schema,
    Valid,
    compose,
    derive_partial,
    partial_of,
    to_pydantic,
    validate,
)

__all__ = [
    "validate",
    "derive_partial",
    "partial_of",
    "compose",
    "to_pydantic",
    "validation_context",
    "current_options",
    "Schema",
    "Valid",
    "Invalid",
]
