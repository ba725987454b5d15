# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the specification text emitter."""

import io

import pytest

from dbdspec.compiler.build import compile_schema
from dbdspec.compiler.emitter import SpecEmitter, format_params, render_spec
from dbdspec.model.compiled import CompiledEntity, CompiledField, FunctionSignature
from dbdspec.model.schema import Schema, SchemaEntity, SchemaField, SchemaRelationship

# ###############
# Helpers
# ###############


def _entity(*fields: CompiledField, comment: str = "") -> CompiledEntity:
    return CompiledEntity(
        name="Genome",
        sapling_name="Genome",
        key_type="string",
        id_type="string",
        field_map=fields,
        relationships=(),
        functions=(),
        comment=comment,
    )


def _field(name: str, type_: str = "string", notes: str = "") -> CompiledField:
    return CompiledField(name=name, sapling_name=name, type=type_, base_type=type_, notes=notes)


# ###############
# Header and footer
# ###############


class TestModuleBlock:
    def test_header(self) -> None:
        emitter = SpecEmitter()
        emitter.begin("Sapling", "CDMI_API")
        assert emitter.getvalue() == (
            "module Sapling : CDMI_API {\n"
            "typedef string diamond;\n"
            "typedef string countVector;\n"
            "typedef string rectangle;\n"
            "\n"
        )

    def test_end(self) -> None:
        emitter = SpecEmitter()
        emitter.end()
        assert emitter.getvalue() == "};\n"

    def test_writes_to_given_stream(self) -> None:
        out = io.StringIO()
        emitter = SpecEmitter(out)
        emitter.end()
        assert out.getvalue() == "};\n"

    def test_getvalue_requires_in_memory_buffer(self, tmp_path) -> None:
        with open(tmp_path / "spec.txt", "w", encoding="utf-8") as out:
            emitter = SpecEmitter(out)
            with pytest.raises(TypeError):
                emitter.getvalue()


# ###############
# Entity blocks
# ###############


class TestEntityBlock:
    def test_typedef(self) -> None:
        emitter = SpecEmitter()
        emitter.entity(_entity(_field("name"), _field("aliases", "list<string>")))
        text = emitter.getvalue()
        assert text.startswith(
            "typedef structure {\n"
            "\tstring id;\n"
            "\tstring name nullable;\n"
            "\tlist<string> aliases nullable;\n"
            "} fields_Genome ;\n"
            "\n"
        )

    def test_notes_block(self) -> None:
        emitter = SpecEmitter()
        emitter.entity(_entity(_field("size", "int", notes="Genome size."), comment="A genome."))
        text = emitter.getvalue()
        assert (
            "/*\n"
            "A genome.\n"
            "It has the following fields:\n"
            "\n"
            "=over 4\n"
            "\n"
            "\n"
            "=item size\n"
            "\n"
            "Genome size.\n"
            "\n"
            "\n"
            "\n"
            "=back\n"
            "\n"
            "\n"
            "*/\n"
        ) in text

    def test_funcdef_format(self) -> None:
        fn = FunctionSignature(name="get_entity_Genome", params=(("list<string>", "ids"),), returns="int")
        emitter = SpecEmitter()
        emitter.entity(
            CompiledEntity(
                name="Genome",
                sapling_name="Genome",
                key_type="string",
                id_type="string",
                field_map=(),
                relationships=(),
                functions=(fn,),
            )
        )
        assert emitter.getvalue().endswith("funcdef get_entity_Genome(list<string> ids)\n\treturns(int);\n\n")


def test_format_params() -> None:
    fn = FunctionSignature(name="f", params=(("int", "start"), ("int", "count")), returns="int")
    assert format_params(fn) == "int start, int count"


# ###############
# Full documents
# ###############


GENOME_SPEC = (
    "module Sapling : CDMI_API {\n"
    "typedef string diamond;\n"
    "typedef string countVector;\n"
    "typedef string rectangle;\n"
    "\n"
    "typedef structure {\n"
    "\tstring id;\n"
    "\tstring name nullable;\n"
    "} fields_Genome ;\n"
    "\n"
    "/*\n"
    "\n"
    "It has the following fields:\n"
    "\n"
    "=over 4\n"
    "\n"
    "\n"
    "=item name\n"
    "\n"
    "\n"
    "\n"
    "\n"
    "\n"
    "=back\n"
    "\n"
    "\n"
    "*/\n"
    "funcdef get_entity_Genome(list<string> ids, list<string> fields)\n"
    "\treturns(mapping<string, fields_Genome>);\n"
    "funcdef query_entity_Genome(list<tuple<string, string, string>> qry, list<string> fields)\n"
    "\treturns(mapping<string, fields_Genome>);\n"
    "funcdef all_entities_Genome(int start, int count, list<string> fields)\n"
    "\treturns(mapping<string, fields_Genome>);\n"
    "\n"
    "};\n"
)


class TestDocument:
    def test_single_entity_document(self) -> None:
        schema = Schema(
            entities=[SchemaEntity(name="Genome", key_type="string", fields=[SchemaField(name="name", type="string")])]
        )
        result = compile_schema(schema, "Sapling", "CDMI_API")
        assert result.spec == GENOME_SPEC

    def test_relationship_block(self) -> None:
        schema = Schema(
            entities=[
                SchemaEntity(name="Genome", key_type="string"),
                SchemaEntity(name="Feature", key_type="string"),
            ],
            relationships=[
                SchemaRelationship(name="HasFeature", converse="IsFeatureOf", from_entity="Genome", to_entity="Feature")
            ],
        )
        spec = compile_schema(schema, "Sapling", "CDMI_API").spec
        assert (
            "typedef structure {\n"
            "\tstring from_link;\n"
            "\tstring to_link;\n"
            "} fields_HasFeature ;\n"
        ) in spec
        assert (
            "funcdef get_relationship_HasFeature(list<string> ids, list<string> from_fields, "
            "list<string> rel_fields, list<string> to_fields)\n"
            "\treturns(list<tuple<fields_Genome, fields_HasFeature, fields_Feature>>);\n"
            "funcdef get_relationship_IsFeatureOf(list<string> ids, list<string> from_fields, "
            "list<string> rel_fields, list<string> to_fields)\n"
            "\treturns(list<tuple<fields_Feature, fields_HasFeature, fields_Genome>>);\n"
            "\n"
            "};\n"
        ) in spec

    def test_render_spec_matches_streamed_text(self) -> None:
        schema = Schema(
            entities=[
                SchemaEntity(name="Genome", key_type="string", fields=[SchemaField(name="a-b", type="int")]),
                SchemaEntity(name="Feature", key_type="counter"),
            ],
            relationships=[
                SchemaRelationship(
                    name="HasFeature", converse="IsFeatureOf", from_entity="Genome", to_entity="Feature"
                ),
                SchemaRelationship(name="Alpha", converse="IsAlphaOf", from_entity="Feature", to_entity="Feature"),
            ],
        )
        result = compile_schema(schema, "S", "M")
        assert render_spec(result.model) == result.spec
