# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly and serialization of the compiled model.

The model is exported as a JSON document that downstream code generators
consume. The format is versioned so future changes can be detected.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from dbdspec.model.compiled import (
    CompiledEntity,
    CompiledField,
    CompiledModel,
    CompiledRelationship,
    FunctionSignature,
    LinkEdge,
)

# ###############
# Public Interface
# ###############

MODEL_FORMAT_VERSION = "1"
MODEL_SUFFIX = ".model.json"


def export_model(
    service: str,
    module: str,
    entities: Iterable[CompiledEntity],
    relationships: Iterable[CompiledRelationship],
) -> CompiledModel:
    """Assemble compiled records into a read-only model keyed by name."""
    return CompiledModel(
        service=service,
        module=module,
        entities=tuple(entities),
        relationships=tuple(relationships),
    )


def serialize(model: CompiledModel) -> str:
    """Serialize a compiled model to a compact JSON string."""
    return json.dumps(_model_to_dict(model), separators=(",", ":"))


def deserialize(data: str) -> CompiledModel:
    """Deserialize a compiled model from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`CompiledModel`. Field notes come back in
        their flattened single-line form.

    Raises:
        ValueError: If the model format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != MODEL_FORMAT_VERSION:
        raise ValueError(f"Unsupported model format version: {version!r}")
    return _model_from_dict(obj)


def write_model(model: CompiledModel, path: Path) -> None:
    """Write a compiled model to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(model), encoding="utf-8")


def read_model(path: Path) -> CompiledModel:
    """Read and deserialize a compiled model from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _model_to_dict(model: CompiledModel) -> dict[str, Any]:
    return {
        "v": MODEL_FORMAT_VERSION,
        "service": model.service,
        "module": model.module,
        "entities": [_entity_to_dict(e) for e in model.entities],
        "relationships": [_relationship_to_dict(r) for r in model.relationships],
    }


def _model_from_dict(obj: dict[str, Any]) -> CompiledModel:
    return export_model(
        service=obj["service"],
        module=obj["module"],
        entities=[_entity_from_dict(e) for e in obj.get("entities", [])],
        relationships=_relationships_from_dicts(obj.get("relationships", [])),
    )


def _field_to_dict(f: CompiledField) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": f.name,
        "sapling_name": f.sapling_name,
        "type": f.type,
        "base_type": f.base_type,
        "notes": f.notes.replace("\n", " "),
    }
    if f.field_rel is not None:
        d["field_rel"] = f.field_rel
    return d


def _field_from_dict(obj: dict[str, Any]) -> CompiledField:
    return CompiledField(
        name=obj["name"],
        sapling_name=obj["sapling_name"],
        type=obj["type"],
        base_type=obj.get("base_type", obj["type"]),
        notes=obj.get("notes", ""),
        field_rel=obj.get("field_rel"),
    )


def _function_to_dict(fn: FunctionSignature) -> dict[str, Any]:
    return {"name": fn.name, "params": [list(p) for p in fn.params], "returns": fn.returns}


def _function_from_dict(obj: dict[str, Any]) -> FunctionSignature:
    return FunctionSignature(
        name=obj["name"],
        params=tuple((t, n) for t, n in obj["params"]),
        returns=obj["returns"],
    )


def _entity_to_dict(entity: CompiledEntity) -> dict[str, Any]:
    return {
        "name": entity.name,
        "sapling_name": entity.sapling_name,
        "comment": entity.comment,
        "key_type": entity.key_type,
        "id_type": entity.id_type,
        "field_map": [_field_to_dict(f) for f in entity.field_map],
        "field_list": entity.field_list,
        "relationships": [{"name": e.name, "to": e.to} for e in entity.relationships],
        "functions": [_function_to_dict(fn) for fn in entity.functions],
    }


def _entity_from_dict(obj: dict[str, Any]) -> CompiledEntity:
    return CompiledEntity(
        name=obj["name"],
        sapling_name=obj.get("sapling_name", obj["name"]),
        key_type=obj["key_type"],
        id_type=obj["id_type"],
        field_map=tuple(_field_from_dict(f) for f in obj.get("field_map", [])),
        relationships=tuple(LinkEdge(name=e["name"], to=e["to"]) for e in obj.get("relationships", [])),
        functions=tuple(_function_from_dict(fn) for fn in obj.get("functions", [])),
        comment=obj.get("comment", ""),
    )


def _relationship_to_dict(rel: CompiledRelationship) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": rel.name,
        "sapling_name": rel.sapling_name,
        "relation": rel.relation,
        "is_converse": rel.is_converse,
        "from": rel.from_entity,
        "to": rel.to_entity,
        "from_type": rel.from_type,
        "to_type": rel.to_type,
        "comment": rel.comment,
        "field_map": [_field_to_dict(f) for f in rel.field_map],
        "field_list": rel.field_list,
        "functions": [_function_to_dict(fn) for fn in rel.functions],
    }
    if rel.arity is not None:
        d["arity"] = rel.arity
    return d


def _relationships_from_dicts(objs: list[dict[str, Any]]) -> list[CompiledRelationship]:
    """Rebuild relationship records, restoring the shared field tuple of each pair."""
    shared: dict[str, tuple[CompiledField, ...]] = {}
    result: list[CompiledRelationship] = []
    for obj in objs:
        relation = obj.get("relation", obj["name"])
        if relation not in shared:
            shared[relation] = tuple(_field_from_dict(f) for f in obj.get("field_map", []))
        result.append(
            CompiledRelationship(
                name=obj["name"],
                sapling_name=obj.get("sapling_name", obj["name"]),
                relation=relation,
                is_converse=obj.get("is_converse", False),
                from_entity=obj["from"],
                to_entity=obj["to"],
                from_type=obj["from_type"],
                to_type=obj["to_type"],
                field_map=shared[relation],
                functions=tuple(_function_from_dict(fn) for fn in obj.get("functions", [])),
                arity=obj.get("arity"),
                comment=obj.get("comment", ""),
            )
        )
    return result
