# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader for XML database definition (DBD) documents.

A DBD document declares entities and relationships::

    <Database>
      <Entities>
        <Entity name="Genome" keyType="string">
          <Notes>A complete genome.</Notes>
          <Fields>
            <Field name="pub-date" type="date"><Notes>...</Notes></Field>
          </Fields>
        </Entity>
      </Entities>
      <Relationships>
        <Relationship name="HasFeature" converse="IsFeatureOf"
                      from="Genome" to="Feature" arity="1M" />
      </Relationships>
    </Database>

Only the structure is read here. Types, names and endpoints are checked by
the compiler.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from dbdspec.model.schema import Schema, SchemaEntity, SchemaField, SchemaRelationship

# ###############
# Public Interface
# ###############


class SchemaParseError(Exception):
    """Raised when a schema document is malformed or lacks a required attribute."""


def parse_schema(source: str) -> Schema:
    """Parse DBD XML text into a :class:`Schema`.

    Raises:
        SchemaParseError: If the XML is malformed or a required attribute is
            missing.
    """
    try:
        root = ET.fromstring(source)
    except ET.ParseError as exc:
        raise SchemaParseError(f"Invalid XML: {exc}") from exc

    return Schema(
        entities=[_parse_entity(e) for e in _find_all(root, "Entities", "Entity")],
        relationships=[_parse_relationship(r) for r in _find_all(root, "Relationships", "Relationship")],
    )


def load_schema(path: Path) -> Schema:
    """Read and parse the DBD document at *path*.

    Raises:
        SchemaParseError: If the file cannot be read or does not parse.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaParseError(f"Cannot read schema file '{path}': {exc}") from exc
    return parse_schema(text)


# ################
# Implementation
# ################

_LEADING_WHITESPACE = re.compile(r"^\s*", re.MULTILINE)


def _find_all(root: ET.Element, container: str, tag: str) -> list[ET.Element]:
    """Return every *tag* element whose parent is a *container* element, at any depth."""
    return [node for parent in root.iter(container) for node in parent.findall(tag)]


def _require(node: ET.Element, attribute: str, what: str) -> str:
    value = node.get(attribute)
    if value is None:
        name = node.get("name")
        label = f"{what} '{name}'" if name is not None else what
        raise SchemaParseError(f"{label} is missing required attribute '{attribute}'")
    return value


def _notes(node: ET.Element) -> str:
    """Return the text of the direct ``Notes`` children, each line left-trimmed."""
    parts = [_LEADING_WHITESPACE.sub("", "".join(n.itertext())) for n in node.findall("Notes")]
    return "\n".join(parts)


def _parse_fields(node: ET.Element, owner: str) -> list[SchemaField]:
    fields: list[SchemaField] = []
    for f in node.findall("Fields/Field"):
        fields.append(
            SchemaField(
                name=_require(f, "name", f"field of {owner}"),
                type=f.get("type", ""),
                relation=f.get("relation") or None,
                notes=_notes(f),
            )
        )
    return fields


def _parse_entity(node: ET.Element) -> SchemaEntity:
    name = _require(node, "name", "Entity")
    return SchemaEntity(
        name=name,
        key_type=node.get("keyType", ""),
        fields=_parse_fields(node, f"entity '{name}'"),
        notes=_notes(node),
    )


def _parse_relationship(node: ET.Element) -> SchemaRelationship:
    name = _require(node, "name", "Relationship")
    return SchemaRelationship(
        name=name,
        converse=_require(node, "converse", "Relationship"),
        from_entity=_require(node, "from", "Relationship"),
        to_entity=_require(node, "to", "Relationship"),
        arity=node.get("arity"),
        fields=_parse_fields(node, f"relationship '{name}'"),
        notes=_notes(node),
    )
