# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Integration tests for the DBDSpec compiler pipeline.

These tests run the full pipeline (XML reading, name registration, linkage,
entity and relationship compilation, emission) against the schema documents
stored in tests/data/. They document which schemas the compiler accepts or
rejects.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from dbdspec.compiler.build import CompileResult, compile_schema
from dbdspec.compiler.emitter import render_spec
from dbdspec.compiler.errors import (
    CompilerError,
    DuplicateNameError,
    UnknownTypeError,
    UnresolvedEndpointError,
)
from dbdspec.parser.reader import SchemaParseError, load_schema

# ###############
# Helpers
# ###############

DATA_DIR = Path(__file__).parent.parent / "data"
POSITIVE_DIR = DATA_DIR / "positive"
NEGATIVE_DIR = DATA_DIR / "negative"


def _compile(path: Path) -> CompileResult:
    return compile_schema(load_schema(path), "Sapling", "CDMI_API")


def _assert_rejected(path: Path, error: type[CompilerError], *fragments: str) -> None:
    with pytest.raises(error) as exc_info:
        _compile(path)
    for fragment in fragments:
        assert fragment in str(exc_info.value), f"{path.name}: expected {fragment!r} in {exc_info.value}"


# ###############
# Positive Examples
# ###############


class TestSaplingSchema:
    """tests/data/positive/sapling.xml compiles into the expected declarations."""

    def test_entities_and_relationships(self) -> None:
        model = _compile(POSITIVE_DIR / "sapling.xml").model
        assert [e.name for e in model.entities] == ["Feature", "Genome", "Publication"]
        assert [r.name for r in model.relationships] == ["Concerns", "IsATopicOf", "HasFeature", "IsFeatureOf"]

    def test_field_names_are_normalized(self) -> None:
        genome = _compile(POSITIVE_DIR / "sapling.xml").model.entity("Genome")
        assert genome is not None
        assert genome.field_list == "'scientific_name', 'contigs', 'complete', 'pegs'"
        assert [f.sapling_name for f in genome.field_map][0] == "scientific-name"

    def test_relation_field_is_a_list(self) -> None:
        feature = _compile(POSITIVE_DIR / "sapling.xml").model.entity("Feature")
        assert feature is not None
        alias = next(f for f in feature.field_map if f.name == "alias")
        assert alias.type == "list<string>"
        assert alias.field_rel == "FeatureAlias"

    def test_counter_keyed_entity(self) -> None:
        model = _compile(POSITIVE_DIR / "sapling.xml").model
        publication = model.entity("Publication")
        assert publication is not None
        assert publication.id_type == "int"
        concerns = model.relationships_by_name["Concerns"]
        assert concerns.from_type == "int"
        assert concerns.to_type == "string"

    def test_feature_edges(self) -> None:
        feature = _compile(POSITIVE_DIR / "sapling.xml").model.entity("Feature")
        assert feature is not None
        assert [(e.name, e.to) for e in feature.relationships] == [
            ("IsATopicOf", "Publication"),
            ("IsFeatureOf", "Genome"),
        ]

    def test_spec_text(self) -> None:
        spec = _compile(POSITIVE_DIR / "sapling.xml").spec
        assert spec.startswith("module Sapling : CDMI_API {\n")
        assert "\tlist<string> alias nullable;\n" in spec
        assert "\trectangle location nullable;\n" in spec
        assert "=item scientific_name\n\nFull scientific name of the organism.\n" in spec
        assert "funcdef get_relationship_IsATopicOf(" in spec
        assert "returns(list<tuple<fields_Feature, fields_Concerns, fields_Publication>>);" in spec
        assert spec.count("funcdef ") == 3 * 3 + 2 * 2

    def test_replayed_spec_matches(self) -> None:
        result = _compile(POSITIVE_DIR / "sapling.xml")
        assert render_spec(result.model) == result.spec


# ###############
# Negative Examples
# ###############


class TestNegativeExamples:
    """Every file in tests/data/negative/ is rejected with a specific error."""

    def test_duplicate_converse(self) -> None:
        _assert_rejected(NEGATIVE_DIR / "duplicate_converse.xml", DuplicateNameError, "IsFeatureOf")

    def test_entity_named_like_relationship(self) -> None:
        _assert_rejected(
            NEGATIVE_DIR / "entity_named_like_relationship.xml", DuplicateNameError, "HasFeature", "relationship"
        )

    def test_unknown_field_type(self) -> None:
        _assert_rejected(NEGATIVE_DIR / "unknown_field_type.xml", UnknownTypeError, "bignum")

    def test_unresolved_endpoint(self) -> None:
        _assert_rejected(NEGATIVE_DIR / "unresolved_endpoint.xml", UnresolvedEndpointError, "Feature")

    def test_malformed_document(self) -> None:
        with pytest.raises(SchemaParseError, match="Invalid XML"):
            load_schema(NEGATIVE_DIR / "malformed.xml")
