"""
Schema operations for unidto validation.

Provides validate(), the partial derivation used by update schemas,
composition of schema fragments, and to_pydantic().
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping
from typing import Optional as TypingOptional

from pydantic import create_model

from ..context import current_options
from .checks import (
    IsArray,
    IsBoolean,
    IsDate,
    IsEmail,
    IsIn,
    IsInt,
    IsNumber,
    IsString,
    IsUUID,
    Matches,
)
from .core import FieldRule, Schema, merge_rules
from .types import Invalid, Valid, ValidationResult, Violation, ViolationKind

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "field is required"


def validate(schema: Schema, data: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a record against a schema.

    Args:
        schema: The schema to apply
        data: Plain record, e.g. a decoded request body or query string

    Returns:
        Valid(record) with defaults filled and dates parsed
        Invalid(violations) listing every failing field, in schema order

    Usage:
        result = validate(CreateClassroomDto, {"building": "A", "code": "101"})
        if not result.is_valid():
            return 400, result.as_dicts()
    """
    options = current_options()
    violations: list[Violation] = []
    record: dict[str, Any] = {}

    if not isinstance(data, Mapping):
        violation = Violation(
            "", "is_object", ViolationKind.TYPE_MISMATCH, "input must be an object"
        )
        return Invalid((violation,))

    for rule in schema.fields:
        if not rule.applies_to(data):
            if rule.name in data:
                record[rule.name] = data[rule.name]
            continue

        value = data.get(rule.name)
        if value is None:
            if rule.required:
                violations.append(
                    Violation(
                        rule.name,
                        "required",
                        ViolationKind.MISSING_REQUIRED_FIELD,
                        REQUIRED_MESSAGE,
                    )
                )
            elif rule.default is not None:
                record[rule.name] = rule.default
            elif rule.name in data:
                record[rule.name] = None
            continue

        failed = False
        for check in rule.checks:
            if options.implicit_conversion:
                value = check.convert(value)
            value = check.coerce(value)
            found = check.violations(rule.name, value)
            if found:
                violations.extend(found)
                failed = True
                break

        if not failed:
            record[rule.name] = value

    if options.forbid_unknown:
        declared = set(schema.field_names)
        for key in data:
            if key not in declared:
                violations.append(
                    Violation(
                        str(key),
                        "whitelist",
                        ViolationKind.UNKNOWN_FIELD,
                        f"property {key} should not exist",
                    )
                )
    else:
        for key, value in data.items():
            if key not in record and key not in schema:
                record[key] = value

    return Invalid(tuple(violations)) if violations else Valid(record)


def derive_partial(base: Schema, name: str | None = None) -> Schema:
    """
    Relax every field of a schema to optional.

    Check lists are kept as they are; defaults are dropped so that an update
    never writes a value the caller did not send. ``base`` is not modified.
    """
    derived = Schema(
        name or f"Partial{base.name}",
        tuple(rule.as_optional() for rule in base.fields),
    )
    logger.debug("Derived %s from %s", derived.name, base.name)
    return derived


def with_identifier(
    schema: Schema, identifier: FieldRule, name: str | None = None
) -> Schema:
    """
    Merge an identifier rule into a schema.

    On a name collision the identifier replaces the existing rule, keeping
    its position; otherwise it is appended.
    """
    return Schema(name or schema.name, merge_rules(schema.fields, [identifier]))


def partial_of(
    base: Schema,
    name: str,
    identifier: FieldRule | None = None,
) -> Schema:
    """
    Build an update schema from a create schema.

    Usage:
        UpdateClassroomDto = partial_of(
            CreateClassroomDto,
            "UpdateClassroomDto",
            Required("id", IsUUID()),
        )
    """
    partial = derive_partial(base, name)
    if identifier is None:
        return partial
    return with_identifier(partial, identifier)


def compose(name: str, *parts: Schema) -> Schema:
    """
    Union schema fragments in order.

    A rule in a later fragment replaces an earlier rule of the same name.

    Usage:
        ListSchedulesDto = compose("ListSchedulesDto", PAGINATION, filters)
    """
    fields: tuple[FieldRule, ...] = ()
    for part in parts:
        fields = merge_rules(fields, part.fields)
    return Schema(name, fields)


def to_pydantic(schema: Schema) -> type:
    """
    Compile a schema to a Pydantic model.

    Args:
        schema: The schema to compile; the model takes the schema's name

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        Classroom = to_pydantic(CreateClassroomDto)
        classroom = Classroom(**validate(CreateClassroomDto, body).unwrap())
    """
    fields: dict[str, Any] = {}

    for rule in schema.fields:
        field_type, default = _extract_pydantic_field(rule)
        fields[rule.name] = (field_type, default)

    return create_model(schema.name, **fields)


def _python_type(rule: FieldRule) -> Any:
    """Pick the Python type implied by the first type-bearing check."""
    for check in rule.checks:
        match check:
            case IsString() | IsUUID() | IsEmail() | Matches() | IsIn():
                return str
            case IsInt():
                return int
            case IsNumber():
                return float
            case IsBoolean():
                return bool
            case IsDate():
                return datetime
            case IsArray():
                return list[Any]
    return Any


def _extract_pydantic_field(rule: FieldRule) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a rule."""
    t = _python_type(rule)
    if rule.required and rule.when is None:
        return (t, ...)
    return (TypingOptional[t], rule.default)
