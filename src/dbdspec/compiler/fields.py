# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field compilation shared by the entity and relationship compilers."""

from __future__ import annotations

from collections.abc import Iterable

from dbdspec.compiler.names import normalize_field_name
from dbdspec.compiler.type_map import list_of, map_type
from dbdspec.model.compiled import CompiledField
from dbdspec.model.schema import SchemaField

# ###############
# Public Interface
# ###############


def compile_field(schema_field: SchemaField, owner: str) -> CompiledField:
    """Normalize and type-resolve one field.

    Relation-valued fields are flattened into ``list<T>`` of their scalar
    type. *owner* describes the containing element (e.g. ``"entity 'Genome'"``)
    and is only used in error messages.

    Raises:
        UnknownTypeError: If the field's type has no mapping.
    """
    name = normalize_field_name(schema_field.name)
    base_type = map_type(schema_field.type, f"field '{schema_field.name}' of {owner}")
    if schema_field.relation:
        return CompiledField(
            name=name,
            sapling_name=schema_field.name,
            type=list_of(base_type),
            base_type=base_type,
            notes=schema_field.notes,
            field_rel=schema_field.relation,
        )
    return CompiledField(
        name=name,
        sapling_name=schema_field.name,
        type=base_type,
        base_type=base_type,
        notes=schema_field.notes,
    )


def compile_fields(schema_fields: Iterable[SchemaField], owner: str) -> tuple[CompiledField, ...]:
    """Compile fields in schema order."""
    return tuple(compile_field(f, owner) for f in schema_fields)
