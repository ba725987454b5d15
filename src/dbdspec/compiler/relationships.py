# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Relationship compiler: forward and converse records for each relationship."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from dbdspec.compiler.errors import UnresolvedEndpointError
from dbdspec.compiler.fields import compile_fields
from dbdspec.model.compiled import CompiledEntity, CompiledRelationship, FunctionSignature
from dbdspec.model.schema import SchemaRelationship

if TYPE_CHECKING:
    from dbdspec.compiler.emitter import SpecEmitter

# ###############
# Public Interface
# ###############

RELATIONSHIP_PARAMS: tuple[tuple[str, str], ...] = (
    ("list<string>", "ids"),
    ("list<string>", "from_fields"),
    ("list<string>", "rel_fields"),
    ("list<string>", "to_fields"),
)


def compile_relationship(
    relationship: SchemaRelationship,
    entities_by_name: Mapping[str, CompiledEntity],
    emitter: SpecEmitter | None = None,
) -> tuple[CompiledRelationship, CompiledRelationship]:
    """Compile one relationship into its forward and converse records.

    Precondition: every entity of the schema has already been compiled into
    *entities_by_name*; endpoint identifier types are taken from there.

    Args:
        relationship: The schema relationship to compile.
        entities_by_name: Compiled entities keyed by name.
        emitter: When given, the shared typedef and both function
            declarations are appended to it.

    Returns:
        ``(forward, converse)``. Both records share the same field tuple.

    Raises:
        UnresolvedEndpointError: If ``from`` or ``to`` is not a compiled entity.
        UnknownTypeError: If a field type has no mapping.
    """
    source = _resolve_endpoint(relationship, entities_by_name, "from")
    target = _resolve_endpoint(relationship, entities_by_name, "to")

    name = relationship.name
    converse_name = relationship.converse
    typedef = f"fields_{name}"
    field_map = compile_fields(relationship.fields, f"relationship '{name}'")

    forward_fn = FunctionSignature(
        name=f"get_relationship_{name}",
        params=RELATIONSHIP_PARAMS,
        returns=f"list<tuple<{source.typedef_name}, {typedef}, {target.typedef_name}>>",
    )
    converse_fn = FunctionSignature(
        name=f"get_relationship_{converse_name}",
        params=RELATIONSHIP_PARAMS,
        returns=f"list<tuple<{target.typedef_name}, {typedef}, {source.typedef_name}>>",
    )

    forward = CompiledRelationship(
        name=name,
        sapling_name=name,
        relation=name,
        is_converse=False,
        from_entity=source.name,
        to_entity=target.name,
        from_type=source.id_type,
        to_type=target.id_type,
        field_map=field_map,
        functions=(forward_fn, converse_fn),
        arity=relationship.arity,
        comment=relationship.notes,
    )
    converse = CompiledRelationship(
        name=converse_name,
        sapling_name=converse_name,
        relation=name,
        is_converse=True,
        from_entity=target.name,
        to_entity=source.name,
        from_type=target.id_type,
        to_type=source.id_type,
        field_map=field_map,
        functions=(converse_fn, forward_fn),
        arity=relationship.arity,
        comment=relationship.notes,
    )

    if emitter is not None:
        emitter.relationship(forward, converse)
    return forward, converse


# ################
# Implementation
# ################


def _resolve_endpoint(
    relationship: SchemaRelationship,
    entities_by_name: Mapping[str, CompiledEntity],
    endpoint: str,
) -> CompiledEntity:
    entity_name = relationship.from_entity if endpoint == "from" else relationship.to_entity
    entity = entities_by_name.get(entity_name)
    if entity is None:
        raise UnresolvedEndpointError(relationship.name, entity_name, endpoint)
    return entity
