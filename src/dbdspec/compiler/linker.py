# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Relationship linkage: which relationship directions start at each entity."""

from __future__ import annotations

from collections.abc import Iterable

from dbdspec.model.compiled import LinkEdge
from dbdspec.model.schema import SchemaRelationship

# ###############
# Public Interface
# ###############


class Linkage:
    """Per-entity lists of outgoing relationship edges.

    Built once from all relationships of a schema before any entity is
    compiled, and read-only afterwards.
    """

    def __init__(self, edges: dict[str, list[LinkEdge]]) -> None:
        self._edges = edges

    def edges_for(self, entity: str) -> tuple[LinkEdge, ...]:
        """Return the edges leaving *entity*, sorted by edge name."""
        return tuple(sorted(self._edges.get(entity, ()), key=lambda e: e.name))

    def entities(self) -> list[str]:
        """Return the names of all entities that have at least one edge."""
        return list(self._edges)

    def __len__(self) -> int:
        return sum(len(edges) for edges in self._edges.values())


def link_relationships(relationships: Iterable[SchemaRelationship]) -> Linkage:
    """Build the linkage table for a set of relationships.

    For each relationship, the ``from`` entity receives an edge named after
    the relationship and pointing at ``to``; the ``to`` entity receives an
    edge named after the converse and pointing back at ``from``. Edges are
    kept in schema order here; :meth:`Linkage.edges_for` sorts them.
    """
    edges: dict[str, list[LinkEdge]] = {}
    for rel in relationships:
        edges.setdefault(rel.from_entity, []).append(LinkEdge(name=rel.name, to=rel.to_entity))
        edges.setdefault(rel.to_entity, []).append(LinkEdge(name=rel.converse, to=rel.from_entity))
    return Linkage(edges)
