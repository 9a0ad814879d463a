"""
Registry of named schemas, populated once at import time.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .core import Schema
from .types import SchemaError

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Maps schema names to schemas. Names are unique."""

    def __init__(self) -> None:
        self._schemas: dict[str, Schema] = {}

    def register(self, schema: Schema) -> Schema:
        if not isinstance(schema, Schema):
            raise SchemaError(f"Cannot register {type(schema).__name__}")
        if schema.name in self._schemas:
            raise SchemaError(f"Schema '{schema.name}' is already registered")
        self._schemas[schema.name] = schema
        logger.debug("Registered schema %s", schema.name)
        return schema

    def get(self, name: str) -> Schema:
        try:
            return self._schemas[name]
        except KeyError:
            raise KeyError(f"Unknown schema: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[Schema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)

    @property
    def names(self) -> list[str]:
        return list(self._schemas)
