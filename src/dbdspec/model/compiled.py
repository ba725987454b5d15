# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiled records produced by the schema compiler.

All records are frozen and hold tuples rather than lists, so a compiled model
can be handed to the renderers as a read-only snapshot.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class LinkEdge:
    """One direction of a relationship, recorded against its source entity.

    Attributes:
        name: Relationship name for the forward direction, converse name for
            the reverse direction.
        to: Name of the entity at the other end of the edge.
    """

    name: str
    to: str


@dataclass(frozen=True)
class CompiledField:
    """A field after name normalization and type resolution.

    Attributes:
        name: Output identifier (hyphens replaced by underscores).
        sapling_name: Field name as written in the schema.
        type: Interface type, ``list<T>`` for relation-valued fields.
        base_type: Scalar interface type the field resolved to.
        notes: Field notes with per-line leading whitespace removed.
        field_rel: Relation name for relation-valued fields, else ``None``.
        nullable: Always ``True``; schema fields are treated as optional.
    """

    name: str
    sapling_name: str
    type: str
    base_type: str
    notes: str = ""
    field_rel: str | None = None
    nullable: bool = True


@dataclass(frozen=True)
class FunctionSignature:
    """A ``funcdef`` declaration: name, ``(type, name)`` parameters and return type."""

    name: str
    params: tuple[tuple[str, str], ...]
    returns: str


@dataclass(frozen=True)
class CompiledEntity:
    """Compiled form of one schema entity."""

    name: str
    sapling_name: str
    key_type: str
    id_type: str
    field_map: tuple[CompiledField, ...]
    relationships: tuple[LinkEdge, ...]
    functions: tuple[FunctionSignature, ...]
    comment: str = ""

    @property
    def typedef_name(self) -> str:
        return f"fields_{self.name}"

    @property
    def field_list(self) -> str:
        """Comma-joined, single-quoted field names (e.g. ``'name', 'size'``)."""
        return _field_list(self.field_map)


@dataclass(frozen=True)
class CompiledRelationship:
    """Compiled form of one direction of a schema relationship.

    A schema relationship always yields two of these records: the forward one
    (``is_converse`` false, named after the relationship) and the converse one
    (named after the converse, endpoints swapped). Both share the same
    ``field_map`` tuple and the same typedef.

    Endpoint entities are referenced by name only; use
    :meth:`CompiledModel.from_data` / :meth:`CompiledModel.to_data` to reach
    the compiled entity records.
    """

    name: str
    sapling_name: str
    relation: str
    is_converse: bool
    from_entity: str
    to_entity: str
    from_type: str
    to_type: str
    field_map: tuple[CompiledField, ...]
    functions: tuple[FunctionSignature, ...]
    arity: str | None = None
    comment: str = ""

    @property
    def typedef_name(self) -> str:
        return f"fields_{self.relation}"

    @property
    def field_list(self) -> str:
        return _field_list(self.field_map)


@dataclass(frozen=True)
class CompiledModel:
    """Snapshot of a complete compilation run, keyed by name.

    Attributes:
        service: Service name used in the specification module header.
        module: Module name used in the specification module header.
        entities: Compiled entities in lexical order of their names.
        relationships: Compiled relationship records, forward record
            immediately followed by its converse, relationships in lexical
            order.
    """

    service: str
    module: str
    entities: tuple[CompiledEntity, ...] = ()
    relationships: tuple[CompiledRelationship, ...] = ()
    entities_by_name: Mapping[str, CompiledEntity] = field(init=False, repr=False, compare=False)
    relationships_by_name: Mapping[str, CompiledRelationship] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entities_by_name", MappingProxyType({e.name: e for e in self.entities}))
        object.__setattr__(
            self, "relationships_by_name", MappingProxyType({r.name: r for r in self.relationships})
        )

    def entity(self, name: str) -> CompiledEntity | None:
        """Return the compiled entity called *name*, or ``None``."""
        return self.entities_by_name.get(name)

    def from_data(self, relationship: CompiledRelationship) -> CompiledEntity | None:
        """Return the compiled entity at the ``from`` end of *relationship*."""
        return self.entities_by_name.get(relationship.from_entity)

    def to_data(self, relationship: CompiledRelationship) -> CompiledEntity | None:
        """Return the compiled entity at the ``to`` end of *relationship*."""
        return self.entities_by_name.get(relationship.to_entity)


# ################
# Implementation
# ################


def _field_list(fields: tuple[CompiledField, ...]) -> str:
    return ", ".join(f"'{f.name}'" for f in fields)
