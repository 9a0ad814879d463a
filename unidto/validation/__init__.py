"""
unidto Validation - declarative field rules with partial derivation.

Usage:
    from unidto.validation import (
        IsInt, IsString, IsUUID, MaxLength, Optional, Required,
        define, partial_of, validate,
    )

    CreateLevelDto = define(
        "CreateLevelDto",
        Required("name", IsString(), MaxLength(50)),
        Required("order", IsInt(min=1)),
    )
    UpdateLevelDto = partial_of(
        CreateLevelDto, "UpdateLevelDto", Required("id", IsUUID())
    )

    result = validate(CreateLevelDto, {"name": "First", "order": 1})
"""

from .checks import (
    Check,
    IsArray,
    IsBoolean,
    IsDate,
    IsEmail,
    IsIn,
    IsInt,
    IsNotEmpty,
    IsNumber,
    IsString,
    IsUUID,
    Matches,
    MaxLength,
    MinLength,
    ValidateNested,
)
from .core import FieldRule, Optional, Required, Schema, define, merge_rules
from .registry import SchemaRegistry
from .schema import (
    compose,
    derive_partial,
    partial_of,
    to_pydantic,
    validate,
    with_identifier,
)
from .types import (
    Invalid,
    RequestValidationError,
    SchemaError,
    Valid,
    ValidationResult,
    Violation,
    ViolationKind,
)

__all__ = [
    # Result types
    "Valid",
    "Invalid",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "SchemaError",
    "RequestValidationError",
    # Core
    "FieldRule",
    "Schema",
    "Required",
    "Optional",
    "define",
    "merge_rules",
    "SchemaRegistry",
    # Checks
    "Check",
    "IsString",
    "IsInt",
    "IsNumber",
    "IsBoolean",
    "IsUUID",
    "IsDate",
    "IsIn",
    "MaxLength",
    "MinLength",
    "Matches",
    "IsNotEmpty",
    "IsEmail",
    "IsArray",
    "ValidateNested",
    # Schema
    "validate",
    "derive_partial",
    "with_identifier",
    "partial_of",
    "compose",
    "to_pydantic",
]
