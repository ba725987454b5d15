# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of compiled records into interface specification text.

The emitter is an append-only writer: the compilers push each record into
it as soon as the record is compiled. It never validates anything. The
output layout is:

    module <service> : <module> {
    typedef string diamond;
    ...
    <typedef, notes and funcdefs per entity>
    <typedef, notes and funcdefs per relationship>
    };
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import TextIO

from dbdspec.compiler.type_map import COMPOSITE_TYPES
from dbdspec.model.compiled import (
    CompiledEntity,
    CompiledField,
    CompiledModel,
    CompiledRelationship,
    FunctionSignature,
)

# ###############
# Public Interface
# ###############


class SpecEmitter:
    """Writes specification text to a stream, in-memory by default."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else io.StringIO()

    def begin(self, service: str, module: str) -> None:
        """Write the module header and the composite type declarations."""
        self._write(f"module {service} : {module} {{\n")
        for composite in COMPOSITE_TYPES:
            self._write(f"typedef string {composite};\n")
        self._write("\n")

    def entity(self, entity: CompiledEntity) -> None:
        """Write the typedef, notes and accessor declarations of one entity."""
        self._typedef(entity.typedef_name, [f"{entity.id_type} id"], entity.field_map)
        self._notes(entity.comment, entity.field_map)
        for fn in entity.functions:
            self._funcdef(fn)
        self._write("\n")

    def relationship(self, forward: CompiledRelationship, converse: CompiledRelationship) -> None:
        """Write the shared typedef of a relationship and both direction accessors."""
        self._typedef(
            forward.typedef_name,
            [f"{forward.from_type} from_link", f"{forward.to_type} to_link"],
            forward.field_map,
        )
        self._notes(forward.comment, forward.field_map)
        self._funcdef(forward.functions[0])
        self._funcdef(converse.functions[0])
        self._write("\n")

    def end(self) -> None:
        """Close the module block."""
        self._write("};\n")

    def getvalue(self) -> str:
        """Return everything written so far (in-memory streams only)."""
        if not isinstance(self._out, io.StringIO):
            raise TypeError("getvalue() is only available when writing to an in-memory buffer")
        return self._out.getvalue()

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _typedef(self, name: str, key_members: list[str], fields: Iterable[CompiledField]) -> None:
        self._write("typedef structure {\n")
        for member in key_members:
            self._write(f"\t{member};\n")
        for f in fields:
            self._write(f"\t{f.type} {f.name} nullable;\n")
        self._write(f"}} {name} ;\n")
        self._write("\n")

    def _notes(self, comment: str, fields: Iterable[CompiledField]) -> None:
        text = comment + "\nIt has the following fields:\n\n=over 4\n\n"
        for f in fields:
            text += f"\n=item {f.name}\n\n{f.notes}\n\n"
        text += "\n\n=back\n\n"
        self._write(f"/*\n{text}\n*/\n")

    def _funcdef(self, fn: FunctionSignature) -> None:
        self._write(f"funcdef {fn.name}({format_params(fn)})\n")
        self._write(f"\treturns({fn.returns});\n")


def format_params(fn: FunctionSignature) -> str:
    """Render a parameter list, e.g. ``list<string> ids, list<string> fields``."""
    return ", ".join(f"{type_} {name}" for type_, name in fn.params)


def render_spec(model: CompiledModel) -> str:
    """Render the full specification text of an already compiled model.

    Produces the same text that was streamed while compiling the model.
    """
    emitter = SpecEmitter()
    emitter.begin(model.service, model.module)
    for entity in model.entities:
        emitter.entity(entity)
    for forward, converse in _relationship_pairs(model.relationships):
        emitter.relationship(forward, converse)
    emitter.end()
    return emitter.getvalue()


# ################
# Implementation
# ################


def _relationship_pairs(
    relationships: tuple[CompiledRelationship, ...],
) -> list[tuple[CompiledRelationship, CompiledRelationship]]:
    """Pair each forward record with the converse record of the same relation."""
    converses = {r.relation: r for r in relationships if r.is_converse}
    return [(r, converses[r.relation]) for r in relationships if not r.is_converse]
