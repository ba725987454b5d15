# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entity compiler: typed records and accessor signatures for each entity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dbdspec.compiler.fields import compile_fields
from dbdspec.compiler.linker import Linkage
from dbdspec.compiler.type_map import map_type
from dbdspec.model.compiled import CompiledEntity, FunctionSignature
from dbdspec.model.schema import SchemaEntity

if TYPE_CHECKING:
    from dbdspec.compiler.emitter import SpecEmitter

# ###############
# Public Interface
# ###############


def compile_entity(
    entity: SchemaEntity,
    linkage: Linkage,
    emitter: SpecEmitter | None = None,
) -> CompiledEntity:
    """Compile one schema entity.

    Preconditions: *linkage* has been built from every relationship of the
    schema and all names have been registered.

    Args:
        entity: The schema entity to compile.
        linkage: Relationship edges per entity.
        emitter: When given, the entity's typedef and function declarations
            are appended to it.

    Returns:
        The compiled entity.

    Raises:
        UnknownTypeError: If the key type or a field type has no mapping.
    """
    owner = f"entity '{entity.name}'"
    id_type = map_type(entity.key_type, f"key type of {owner}")
    compiled = CompiledEntity(
        name=entity.name,
        sapling_name=entity.name,
        key_type=entity.key_type,
        id_type=id_type,
        field_map=compile_fields(entity.fields, owner),
        relationships=linkage.edges_for(entity.name),
        functions=entity_functions(entity.name),
        comment=entity.notes,
    )
    if emitter is not None:
        emitter.entity(compiled)
    return compiled


def entity_functions(name: str) -> tuple[FunctionSignature, ...]:
    """Return the fetch-by-id, query and paginate signatures for entity *name*."""
    returns = f"mapping<string, fields_{name}>"
    fields = ("list<string>", "fields")
    return (
        FunctionSignature(
            name=f"get_entity_{name}",
            params=(("list<string>", "ids"), fields),
            returns=returns,
        ),
        FunctionSignature(
            name=f"query_entity_{name}",
            params=(("list<tuple<string, string, string>>", "qry"), fields),
            returns=returns,
        ),
        FunctionSignature(
            name=f"all_entities_{name}",
            params=(("int", "start"), ("int", "count"), fields),
            returns=returns,
        ),
    )
