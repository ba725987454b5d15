# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Global name registry and identifier normalization."""

from __future__ import annotations

from dbdspec.compiler.errors import DuplicateNameError
from dbdspec.model.schema import Schema

# ###############
# Public Interface
# ###############


class NameRegistry:
    """Tracks every entity, relationship and converse name of one schema.

    Names share a single namespace because each of them becomes a function
    name suffix in the generated specification. Matching is exact and
    case-sensitive.
    """

    def __init__(self) -> None:
        self._kinds: dict[str, str] = {}

    def register(self, name: str, kind: str) -> None:
        """Claim *name* for a schema element of the given *kind*.

        Raises:
            DuplicateNameError: If *name* has already been registered.
        """
        previous = self._kinds.get(name)
        if previous is not None:
            raise DuplicateNameError(name, kind, previous)
        self._kinds[name] = kind

    def kind_of(self, name: str) -> str | None:
        return self._kinds.get(name)

    @property
    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._kinds)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)


def register_schema(schema: Schema, registry: NameRegistry | None = None) -> NameRegistry:
    """Register all names of *schema*: relationships and converses first, then entities.

    Returns:
        The populated registry (a new one unless *registry* is given).

    Raises:
        DuplicateNameError: On the first name collision.
    """
    registry = registry if registry is not None else NameRegistry()
    for rel in schema.relationships:
        registry.register(rel.name, "relationship")
        registry.register(rel.converse, "converse relationship")
    for entity in schema.entities:
        registry.register(entity.name, "entity")
    return registry


def normalize_field_name(name: str) -> str:
    """Turn a schema field name into an output identifier (``pub-date`` -> ``pub_date``)."""
    return name.replace("-", "_")
