"""
Core schema classes for unidto validation.

Provides FieldRule and Schema as immutable dataclasses. Both are checked
when constructed; a malformed definition raises SchemaError at import time
rather than surfacing as a runtime validation failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Iterator, Mapping

from .checks import Check
from .types import SchemaError

logger = logging.getLogger(__name__)

Condition = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True, slots=True)
class FieldRule:
    """
    Validation contract for a single field.

    Checks run in declared order and stop at the first failure. When
    ``when`` is given and returns False for the input record, the field is
    skipped entirely.
    """

    name: str
    checks: tuple[Check, ...] = ()
    required: bool = True
    default: Any = None
    when: Condition | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise SchemaError(f"Field name must be a non-empty string: {self.name!r}")
        checks = tuple(self.checks)
        for check in checks:
            if not isinstance(check, Check):
                raise SchemaError(
                    f"Unknown check for field '{self.name}': {check!r}"
                )
        # Defaults are shared by every validated record
        try:
            hash(self.default)
        except TypeError:
            raise SchemaError(
                f"Default for field '{self.name}' must be immutable: {self.default!r}"
            ) from None
        object.__setattr__(self, "checks", checks)

    def as_optional(self) -> FieldRule:
        """Return a copy that is not required and carries no default."""
        return replace(self, required=False, default=None)

    def applies_to(self, record: Mapping[str, Any]) -> bool:
        return self.when is None or bool(self.when(record))


def Required(name: str, *checks: Check, **kwargs: Any) -> FieldRule:
    """
    Declare a required field.

    Usage:
        Required("code", IsString(), MaxLength(50))
    """
    return FieldRule(name, checks, required=True, **kwargs)


def Optional(name: str, *checks: Check, **kwargs: Any) -> FieldRule:
    """
    Declare an optional field: absent or None skips every check.

    Usage:
        Optional("available", IsBoolean())
        Optional("attempts", IsNumber(min=1), default=1)
    """
    return FieldRule(name, checks, required=False, **kwargs)


@dataclass(frozen=True, slots=True)
class Schema:
    """Named, ordered set of field rules, unique by field name."""

    name: str
    fields: tuple[FieldRule, ...] = ()

    def __post_init__(self) -> None:
        fields = tuple(self.fields)
        seen: set[str] = set()
        for rule in fields:
            if not isinstance(rule, FieldRule):
                raise SchemaError(f"{self.name}: expected FieldRule, got {rule!r}")
            if rule.name in seen:
                raise SchemaError(f"{self.name}: duplicate field '{rule.name}'")
            seen.add(rule.name)
        object.__setattr__(self, "fields", fields)
        logger.debug("Built schema %s with %d fields", self.name, len(fields))

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, name: object) -> bool:
        return any(rule.name == name for rule in self.fields)

    def __getitem__(self, name: str) -> FieldRule:
        for rule in self.fields:
            if rule.name == name:
                return rule
        raise KeyError(name)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.fields)

    def renamed(self, name: str) -> Schema:
        return Schema(name, self.fields)


def define(name: str, *fields: FieldRule) -> Schema:
    """
    Build a schema from field rules.

    Usage:
        CreateLevelDto = define(
            "CreateLevelDto",
            Required("name", IsString(), MaxLength(50)),
            Required("order", IsInt(min=1)),
        )
    """
    return Schema(name, fields)


def merge_rules(
    base: Iterable[FieldRule], overrides: Iterable[FieldRule]
) -> tuple[FieldRule, ...]:
    """
    Merge two rule sequences by field name.

    An override replaces the base rule of the same name in place; new names
    are appended in order.
    """
    merged: dict[str, FieldRule] = {rule.name: rule for rule in base}
    for rule in overrides:
        merged[rule.name] = rule
    return tuple(merged.values())
