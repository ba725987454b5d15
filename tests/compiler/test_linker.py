# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the relationship linker."""

from dbdspec.compiler.linker import link_relationships
from dbdspec.model.compiled import LinkEdge
from dbdspec.model.schema import SchemaRelationship


def _rel(name: str, converse: str, source: str, target: str) -> SchemaRelationship:
    return SchemaRelationship(name=name, converse=converse, from_entity=source, to_entity=target)


class TestLinkRelationships:
    def test_forward_and_converse_edges(self) -> None:
        linkage = link_relationships([_rel("HasFeature", "IsFeatureOf", "Genome", "Feature")])
        assert linkage.edges_for("Genome") == (LinkEdge(name="HasFeature", to="Feature"),)
        assert linkage.edges_for("Feature") == (LinkEdge(name="IsFeatureOf", to="Genome"),)

    def test_edges_sorted_by_name(self) -> None:
        linkage = link_relationships(
            [
                _rel("Zeta", "IsZetaOf", "Genome", "Feature"),
                _rel("Alpha", "IsAlphaOf", "Genome", "Contig"),
                _rel("Middle", "IsMiddleOf", "Publication", "Genome"),
            ]
        )
        assert [e.name for e in linkage.edges_for("Genome")] == ["Alpha", "IsMiddleOf", "Zeta"]

    def test_sorting_is_ordinal(self) -> None:
        linkage = link_relationships(
            [
                _rel("beta", "IsBetaOf", "Genome", "Feature"),
                _rel("Gamma", "IsGammaOf", "Genome", "Feature"),
            ]
        )
        assert [e.name for e in linkage.edges_for("Genome")] == ["Gamma", "beta"]

    def test_unlinked_entity_has_no_edges(self) -> None:
        linkage = link_relationships([_rel("HasFeature", "IsFeatureOf", "Genome", "Feature")])
        assert linkage.edges_for("Publication") == ()

    def test_self_relationship_yields_both_edges_on_same_entity(self) -> None:
        linkage = link_relationships([_rel("IsParentOf", "IsChildOf", "Node", "Node")])
        assert linkage.edges_for("Node") == (
            LinkEdge(name="IsChildOf", to="Node"),
            LinkEdge(name="IsParentOf", to="Node"),
        )

    def test_edge_count_and_entities(self) -> None:
        linkage = link_relationships(
            [
                _rel("HasFeature", "IsFeatureOf", "Genome", "Feature"),
                _rel("Concerns", "IsATopicOf", "Publication", "Feature"),
            ]
        )
        assert len(linkage) == 4
        assert linkage.entities() == ["Genome", "Feature", "Publication"]

    def test_empty(self) -> None:
        linkage = link_relationships([])
        assert len(linkage) == 0
        assert linkage.edges_for("Genome") == ()
