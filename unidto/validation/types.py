"""
Type definitions for unidto validation.

Provides the result types (Valid/Invalid), the violation record and the
error taxonomy shared by every check.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ViolationKind(str, Enum):
    """Error taxonomy for field-level failures."""

    MISSING_REQUIRED_FIELD = "missing_required_field"
    TYPE_MISMATCH = "type_mismatch"
    RANGE_VIOLATION = "range_violation"
    PATTERN_MISMATCH = "pattern_mismatch"
    ENUM_MEMBERSHIP_VIOLATION = "enum_membership_violation"
    UNKNOWN_FIELD = "unknown_field"


@dataclass(frozen=True, slots=True)
class Violation:
    """A single failure of one check on one field."""

    field: str
    check: str
    kind: ViolationKind
    message: str

    def as_dict(self) -> dict[str, str]:
        return {
            "field": self.field,
            "check": self.check,
            "kind": self.kind.value,
            "message": self.message,
        }


class SchemaError(ValueError):
    """Raised when a schema definition is malformed."""


class RequestValidationError(ValueError):
    """Raised by ``Invalid.unwrap()`` to carry violations as an exception."""

    def __init__(self, violations: tuple[Violation, ...]):
        self.violations = violations
        summary = "; ".join(f"{v.field}: {v.message}" for v in violations)
        super().__init__(f"Validation failed: {summary}")


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    """Success result containing the validated record."""

    value: T

    def is_valid(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Invalid:
    """Failure result containing every violation found in one pass."""

    violations: tuple[Violation, ...]

    def is_valid(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise RequestValidationError(self.violations)

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]

    def as_dicts(self) -> list[dict[str, str]]:
        """Render violations in the shape HTTP error formatting consumes."""
        return [v.as_dict() for v in self.violations]


ValidationResult = Valid[dict[str, Any]] | Invalid
