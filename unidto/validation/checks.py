"""
Built-in checks for unidto validation.

Each check is an immutable, atomic predicate. Calling a check returns None
when the value passes, or a Failure ``(check_name, kind, message)``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar

from .types import SchemaError, Violation, ViolationKind

if TYPE_CHECKING:
    from .core import Schema

Failure = tuple[str, ViolationKind, str]

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
INT_TEXT = re.compile(r"[+-]?\d+")

TRUE_TEXT = frozenset({"true", "1"})
FALSE_TEXT = frozenset({"false", "0"})


@dataclass(frozen=True, slots=True)
class Check:
    """
    Base class for all checks.

    Subclasses set ``name`` and ``kind`` and implement ``test``. Checks with
    more than one failure mode override ``__call__`` directly.
    """

    name: ClassVar[str] = "check"
    kind: ClassVar[ViolationKind] = ViolationKind.TYPE_MISMATCH

    message: str | None = field(default=None, kw_only=True)

    def __call__(self, value: Any) -> Failure | None:
        if self.test(value):
            return None
        return self.fail(self.name, self.kind, self.describe())

    def test(self, value: Any) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        return f"failed {self.name}"

    def fail(self, name: str, kind: ViolationKind, default: str) -> Failure:
        return (name, kind, self.message or default)

    def coerce(self, value: Any) -> Any:
        """Transform applied before the check on every call."""
        return value

    def convert(self, value: Any) -> Any:
        """Transform applied only when implicit conversion is enabled."""
        return value

    def violations(self, field_name: str, value: Any) -> list[Violation]:
        failure = self(value)
        if failure is None:
            return []
        name, kind, message = failure
        return [Violation(field_name, name, kind, message)]


@dataclass(frozen=True, slots=True)
class IsString(Check):
    name: ClassVar[str] = "is_string"

    def test(self, value: Any) -> bool:
        return isinstance(value, str)

    def describe(self) -> str:
        return "must be a string"


def _within(
    check: Check, value: Any, lower: Any | None, upper: Any | None
) -> Failure | None:
    if lower is not None and value < lower:
        return check.fail(
            "min", ViolationKind.RANGE_VIOLATION, f"must not be less than {lower}"
        )
    if upper is not None and value > upper:
        return check.fail(
            "max", ViolationKind.RANGE_VIOLATION, f"must not be greater than {upper}"
        )
    return None


@dataclass(frozen=True, slots=True)
class IsInt(Check):
    """
    Validate an integer, optionally bounded (inclusive).

    Usage:
        IsInt()
        IsInt(min=1)
        IsInt(min=1, max=100)
    """

    name: ClassVar[str] = "is_int"

    min: int | None = None
    max: int | None = None

    def __call__(self, value: Any) -> Failure | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return self.fail(self.name, self.kind, "must be an integer number")
        return _within(self, value, self.min, self.max)

    def convert(self, value: Any) -> Any:
        if isinstance(value, str) and INT_TEXT.fullmatch(value.strip()):
            return int(value)
        return value


@dataclass(frozen=True, slots=True)
class IsNumber(Check):
    """Validate a finite number with optional bounds and decimal places."""

    name: ClassVar[str] = "is_number"

    min: float | None = None
    max: float | None = None
    max_decimal_places: int | None = None

    def __call__(self, value: Any) -> Failure | None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return self.fail(self.name, self.kind, "must be a number")
        if value != value or value in (float("inf"), float("-inf")):
            return self.fail(self.name, self.kind, "must be a finite number")
        if self.max_decimal_places is not None:
            exponent = Decimal(str(value)).as_tuple().exponent
            if isinstance(exponent, int) and -exponent > self.max_decimal_places:
                return self.fail(
                    self.name,
                    self.kind,
                    f"must have at most {self.max_decimal_places} decimal places",
                )
        return _within(self, value, self.min, self.max)

    def convert(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        if INT_TEXT.fullmatch(value.strip()):
            return int(value)
        try:
            return float(value)
        except ValueError:
            return value


@dataclass(frozen=True, slots=True)
class IsBoolean(Check):
    name: ClassVar[str] = "is_boolean"

    def test(self, value: Any) -> bool:
        return value is True or value is False

    def describe(self) -> str:
        return "must be a boolean value"

    def convert(self, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip().lower()
            if text in TRUE_TEXT:
                return True
            if text in FALSE_TEXT:
                return False
        return value


@dataclass(frozen=True, slots=True)
class IsUUID(Check):
    """Validate the textual UUID format, any version, case-insensitive."""

    name: ClassVar[str] = "is_uuid"

    def test(self, value: Any) -> bool:
        return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None

    def describe(self) -> str:
        return "must be a UUID"


@dataclass(frozen=True, slots=True)
class IsDate(Check):
    """
    Validate a calendar date/time.

    ISO-8601 strings are coerced to ``datetime`` before the check, so the
    validated record carries the parsed value.
    """

    name: ClassVar[str] = "is_date"

    def test(self, value: Any) -> bool:
        return isinstance(value, (datetime, date))

    def describe(self) -> str:
        return "must be a Date instance"

    def coerce(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return value


@dataclass(frozen=True, slots=True)
class IsIn(Check):
    """
    Validate membership by the value's string form.

    Usage:
        IsIn({"Active", "Inactive"})
    """

    name: ClassVar[str] = "is_in"
    kind: ClassVar[ViolationKind] = ViolationKind.ENUM_MEMBERSHIP_VIOLATION

    allowed: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowed", frozenset(str(a) for a in self.allowed))

    def test(self, value: Any) -> bool:
        return str(value) in self.allowed

    def describe(self) -> str:
        return f"must be one of the following values: {', '.join(sorted(self.allowed))}"


@dataclass(frozen=True, slots=True)
class MaxLength(Check):
    name: ClassVar[str] = "max_length"
    kind: ClassVar[ViolationKind] = ViolationKind.RANGE_VIOLATION

    n: int = 0

    def test(self, value: Any) -> bool:
        return isinstance(value, str) and len(value) <= self.n

    def describe(self) -> str:
        return f"must be shorter than or equal to {self.n} characters"


@dataclass(frozen=True, slots=True)
class MinLength(Check):
    name: ClassVar[str] = "min_length"
    kind: ClassVar[ViolationKind] = ViolationKind.RANGE_VIOLATION

    n: int = 0

    def test(self, value: Any) -> bool:
        return isinstance(value, str) and len(value) >= self.n

    def describe(self) -> str:
        return f"must be longer than or equal to {self.n} characters"


@dataclass(frozen=True, slots=True)
class Matches(Check):
    """
    Validate that a string matches a pattern as a whole.

    Usage:
        Matches(r"\\d{2}:\\d{2}")
    """

    name: ClassVar[str] = "matches"
    kind: ClassVar[ViolationKind] = ViolationKind.PATTERN_MISMATCH

    pattern: str = ""
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern)
        except re.error as e:
            raise SchemaError(f"Invalid pattern {self.pattern!r}: {e}") from e
        object.__setattr__(self, "compiled", compiled)

    def test(self, value: Any) -> bool:
        return isinstance(value, str) and self.compiled.fullmatch(value) is not None

    def describe(self) -> str:
        return f"must match {self.pattern} regular expression"


@dataclass(frozen=True, slots=True)
class IsNotEmpty(Check):
    name: ClassVar[str] = "is_not_empty"
    kind: ClassVar[ViolationKind] = ViolationKind.RANGE_VIOLATION

    def test(self, value: Any) -> bool:
        return value != ""

    def describe(self) -> str:
        return "should not be empty"


@dataclass(frozen=True, slots=True)
class IsEmail(Check):
    name: ClassVar[str] = "is_email"
    kind: ClassVar[ViolationKind] = ViolationKind.PATTERN_MISMATCH

    def test(self, value: Any) -> bool:
        return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None

    def describe(self) -> str:
        return "must be an email"


@dataclass(frozen=True, slots=True)
class IsArray(Check):
    name: ClassVar[str] = "is_array"

    min_size: int | None = None

    def __call__(self, value: Any) -> Failure | None:
        if not isinstance(value, (list, tuple)):
            return self.fail(self.name, self.kind, "must be an array")
        if self.min_size is not None and len(value) < self.min_size:
            return self.fail(
                "array_min_size",
                ViolationKind.RANGE_VIOLATION,
                f"must contain at least {self.min_size} elements",
            )
        return None


@dataclass(frozen=True, slots=True)
class ValidateNested(Check):
    """
    Validate every item of a list against a nested schema.

    Item violations are reported under ``field[index].item_field``. Valid
    items are replaced by their validated records, so nested defaults and
    parsed dates reach the outer record.

    Calling the check directly reports only the first violation, prefixed
    with its ``[index].item_field`` path; ``violations()`` reports them all.
    """

    name: ClassVar[str] = "validate_nested"

    schema: Schema | None = None

    def __call__(self, value: Any) -> Failure | None:
        found = self.violations("", value)
        if not found:
            return None
        first = found[0]
        return self.fail(self.name, self.kind, f"{first.field}: {first.message}")

    def coerce(self, value: Any) -> Any:
        from .schema import validate

        if self.schema is None or not isinstance(value, (list, tuple)):
            return value
        items = []
        for item in value:
            if isinstance(item, dict):
                result = validate(self.schema, item)
                if result.is_valid():
                    item = result.value
            items.append(item)
        return items

    def violations(self, field_name: str, value: Any) -> list[Violation]:
        # Import here to avoid circular dependency
        from .schema import validate

        if self.schema is None:
            return []
        if not isinstance(value, (list, tuple)):
            value = [value]

        found: list[Violation] = []
        for i, item in enumerate(value):
            prefix = f"{field_name}[{i}]"
            if not isinstance(item, dict):
                found.append(
                    Violation(
                        prefix, self.name, self.kind, "nested item must be an object"
                    )
                )
                continue
            result = validate(self.schema, item)
            if not result.is_valid():
                found.extend(
                    Violation(f"{prefix}.{v.field}", v.check, v.kind, v.message)
                    for v in result.violations
                )
        return found
