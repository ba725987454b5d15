# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema input model and compiled output records."""

from dbdspec.model.compiled import (
    CompiledEntity,
    CompiledField,
    CompiledModel,
    CompiledRelationship,
    FunctionSignature,
    LinkEdge,
)
from dbdspec.model.schema import (
    Schema,
    SchemaEntity,
    SchemaField,
    SchemaRelationship,
)

__all__ = [
    # Schema input
    "Schema",
    "SchemaEntity",
    "SchemaField",
    "SchemaRelationship",
    # Compiled output
    "LinkEdge",
    "CompiledField",
    "FunctionSignature",
    "CompiledEntity",
    "CompiledRelationship",
    "CompiledModel",
]
