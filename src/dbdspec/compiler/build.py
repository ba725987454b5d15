# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Top-level compiler workflow for database definition schemas.

:func:`compile_schema` is the pure, in-memory compilation of a parsed
schema. It runs the stages in a fixed order, each a precondition of the
next:

1. Every relationship, converse and entity name is registered; any
   collision aborts the run before anything is emitted.
2. The relationship linkage table is built from all relationships.
3. Entities are compiled in lexical order of their names.
4. Relationships are compiled in lexical order of their names. Endpoint
   types are resolved against the entities compiled in step 3.

Both compilers stream into a single :class:`SpecEmitter`. The resulting
specification text and compiled model are returned together.

:func:`compile_files` wraps this with file I/O: it reads the schema, and
only once compilation has fully succeeded writes the specification, the
model artifact and the accessor stubs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dbdspec.compiler.artifact import export_model, write_model
from dbdspec.compiler.emitter import SpecEmitter
from dbdspec.compiler.entities import compile_entity
from dbdspec.compiler.errors import CompilerError, SchemaIOError
from dbdspec.compiler.linker import link_relationships
from dbdspec.compiler.names import register_schema
from dbdspec.compiler.relationships import compile_relationship
from dbdspec.model.compiled import CompiledEntity, CompiledModel, CompiledRelationship
from dbdspec.model.schema import Schema
from dbdspec.parser.reader import SchemaParseError, parse_schema
from dbdspec.stubs.render import write_stubs

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CompileResult:
    """Output of one compilation run.

    Attributes:
        spec: The interface specification text.
        model: The compiled model handed to downstream renderers.
    """

    spec: str
    model: CompiledModel


def compile_schema(schema: Schema, service: str, module: str) -> CompileResult:
    """Compile a parsed schema into specification text and a compiled model.

    Args:
        schema: The parsed schema.
        service: Service name for the specification module header.
        module: Module name for the specification module header.

    Returns:
        A :class:`CompileResult`.

    Raises:
        DuplicateNameError: If any entity, relationship or converse name is
            used more than once.
        UnknownTypeError: If an entity key type or a field type has no mapping.
        UnresolvedEndpointError: If a relationship names an unknown entity.
    """
    register_schema(schema)
    linkage = link_relationships(schema.relationships)

    emitter = SpecEmitter()
    emitter.begin(service, module)

    entities_by_name: dict[str, CompiledEntity] = {}
    for entity in sorted(schema.entities, key=lambda e: e.name):
        entities_by_name[entity.name] = compile_entity(entity, linkage, emitter)

    relationships: list[CompiledRelationship] = []
    for rel in sorted(schema.relationships, key=lambda r: r.name):
        relationships.extend(compile_relationship(rel, entities_by_name, emitter))

    emitter.end()

    model = export_model(service, module, entities_by_name.values(), relationships)
    return CompileResult(spec=emitter.getvalue(), model=model)


def compile_files(
    service: str,
    module: str,
    schema_file: Path,
    spec_file: Path,
    model_file: Path,
    stub_dir: Path,
) -> CompileResult:
    """Compile a schema file and write all outputs.

    Nothing is written unless compilation succeeds.

    Args:
        service: Service name for the specification module header.
        module: Module name for the specification module header.
        schema_file: Path of the XML schema document.
        spec_file: Destination of the specification text.
        model_file: Destination of the compiled model JSON.
        stub_dir: Existing directory that receives the accessor stubs.

    Returns:
        The :class:`CompileResult` that was written.

    Raises:
        SchemaIOError: If *stub_dir* does not exist, the schema cannot be read
            or an output cannot be written.
        CompilerError: If the schema cannot be parsed, or on any compilation
            error.
    """
    if not stub_dir.is_dir():
        raise SchemaIOError(f"Stub directory '{stub_dir}' does not exist", stub_dir)

    try:
        source = schema_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaIOError(f"Cannot read schema file '{schema_file}': {exc}", schema_file) from exc

    try:
        schema = parse_schema(source)
    except SchemaParseError as exc:
        raise CompilerError(f"Cannot parse schema file '{schema_file}': {exc}") from exc

    result = compile_schema(schema, service, module)

    _write_text(spec_file, result.spec)
    try:
        write_model(result.model, model_file)
    except OSError as exc:
        raise SchemaIOError(f"Cannot write model file '{model_file}': {exc}", model_file) from exc
    try:
        write_stubs(result.model, stub_dir)
    except OSError as exc:
        raise SchemaIOError(f"Cannot write stubs to '{stub_dir}': {exc}", stub_dir) from exc

    return result


# ################
# Implementation
# ################


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SchemaIOError(f"Cannot write '{path}': {exc}", path) from exc
