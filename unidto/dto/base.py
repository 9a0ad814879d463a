"""
Shared pieces for the DTO catalogue: the registry, the pagination fragment
composed into every list schema, and the identifier rules of update schemas.
"""

from ..validation import (
    FieldRule,
    IsInt,
    IsUUID,
    Optional,
    Required,
    Schema,
    SchemaRegistry,
    compose,
    define,
    partial_of,
)

REGISTRY = SchemaRegistry()

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

PAGINATION = define(
    "PaginationDto",
    Optional("page", IsInt(min=1), default=DEFAULT_PAGE),
    Optional("limit", IsInt(min=1, max=MAX_LIMIT), default=DEFAULT_LIMIT),
    Optional("skip", IsInt(min=0)),
)

REQUIRED_ID = Required("id", IsUUID())
OPTIONAL_ID = Optional("id", IsUUID())


def register(schema: Schema) -> Schema:
    return REGISTRY.register(schema)


def create_dto(name: str, *fields: FieldRule) -> Schema:
    return register(define(name, *fields))


def update_dto(name: str, base: Schema, identifier: FieldRule = REQUIRED_ID) -> Schema:
    return register(partial_of(base, name, identifier))


def list_dto(name: str, *filters: FieldRule) -> Schema:
    return register(compose(name, PAGINATION, define(f"{name}Filters", *filters)))
