# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema compiler: name registration, linkage, entity and relationship compilation, emission."""

from dbdspec.compiler.artifact import (
    MODEL_FORMAT_VERSION,
    MODEL_SUFFIX,
    deserialize,
    export_model,
    read_model,
    serialize,
    write_model,
)
from dbdspec.compiler.build import CompileResult, compile_files, compile_schema
from dbdspec.compiler.emitter import SpecEmitter, render_spec
from dbdspec.compiler.entities import compile_entity
from dbdspec.compiler.errors import (
    CompilerError,
    DuplicateNameError,
    SchemaIOError,
    UnknownTypeError,
    UnresolvedEndpointError,
)
from dbdspec.compiler.linker import Linkage, link_relationships
from dbdspec.compiler.names import NameRegistry, normalize_field_name, register_schema
from dbdspec.compiler.relationships import compile_relationship
from dbdspec.compiler.type_map import COMPOSITE_TYPES, TYPE_MAP, map_type

__all__ = [
    # Orchestration
    "compile_schema",
    "compile_files",
    "CompileResult",
    # Stages
    "map_type",
    "TYPE_MAP",
    "COMPOSITE_TYPES",
    "NameRegistry",
    "register_schema",
    "normalize_field_name",
    "Linkage",
    "link_relationships",
    "compile_entity",
    "compile_relationship",
    "SpecEmitter",
    "render_spec",
    # Model export
    "export_model",
    "serialize",
    "deserialize",
    "write_model",
    "read_model",
    "MODEL_FORMAT_VERSION",
    "MODEL_SUFFIX",
    # Errors
    "CompilerError",
    "DuplicateNameError",
    "UnknownTypeError",
    "UnresolvedEndpointError",
    "SchemaIOError",
]
