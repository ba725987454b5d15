# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input schema model: entities, relationships and their typed fields."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class SchemaField(BaseModel):
    """A typed data element of an entity or relationship.

    A field with a ``relation`` marker holds zero or more identifiers of
    related objects instead of a single scalar value.
    """

    name: str
    type: str
    relation: str | None = None
    notes: str = ""


class SchemaEntity(BaseModel):
    """An object type with an identifier and an ordered list of fields."""

    name: str
    key_type: str
    fields: list[SchemaField] = _Field(default_factory=list)
    notes: str = ""


class SchemaRelationship(BaseModel):
    """A named, directed association between two entities.

    Every relationship is paired with a converse name that identifies the
    reverse direction (``to`` -> ``from``).
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    converse: str
    from_entity: str = _Field(alias="from")
    to_entity: str = _Field(alias="to")
    arity: str | None = None
    fields: list[SchemaField] = _Field(default_factory=list)
    notes: str = ""


class Schema(BaseModel):
    """Top-level model of a database definition document."""

    entities: list[SchemaEntity] = _Field(default_factory=list)
    relationships: list[SchemaRelationship] = _Field(default_factory=list)
