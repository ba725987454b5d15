# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Client-side accessor stubs rendered from a compiled model.

Each accessor in the specification gets a small command-line script that
parses its arguments, calls the matching method on the generated service
client and prints the result as JSON:

* ``get_entity_<E>.py``, ``query_entity_<E>.py`` and ``all_entities_<E>.py``
  for every entity,
* ``get_relationship_<R>.py`` for every relationship direction (forward and
  converse).

Rendering (:func:`render_stubs`) is pure; :func:`write_stubs` only writes
the rendered text to disk.
"""

from __future__ import annotations

from pathlib import Path

from dbdspec.model.compiled import CompiledEntity, CompiledField, CompiledModel, CompiledRelationship

# ###############
# Public Interface
# ###############

STUB_SUFFIX = ".py"


def render_stubs(model: CompiledModel) -> dict[str, str]:
    """Render all stub scripts of *model*.

    Returns:
        A mapping from file name to script source, in model order.
    """
    stubs: dict[str, str] = {}
    for entity in model.entities:
        stubs[f"get_entity_{entity.name}{STUB_SUFFIX}"] = _render_get_entity(model, entity)
        stubs[f"query_entity_{entity.name}{STUB_SUFFIX}"] = _render_query_entity(model, entity)
        stubs[f"all_entities_{entity.name}{STUB_SUFFIX}"] = _render_all_entities(model, entity)
    for rel in model.relationships:
        stubs[f"get_relationship_{rel.name}{STUB_SUFFIX}"] = _render_get_relationship(model, rel)
    return stubs


def write_stubs(model: CompiledModel, directory: Path) -> list[Path]:
    """Render the stubs of *model* into *directory* as executable scripts.

    Returns:
        The written paths, in model order.
    """
    written: list[Path] = []
    for file_name, source in render_stubs(model).items():
        path = directory / file_name
        path.write_text(source, encoding="utf-8")
        path.chmod(0o755)
        written.append(path)
    return written


# ################
# Implementation
# ################


def _field_names(fields: tuple[CompiledField, ...]) -> str:
    return repr([f.name for f in fields])


def _comment_lines(comment: str) -> list[str]:
    return [f"# {line}".rstrip() for line in comment.strip().splitlines()]


def _header(model: CompiledModel, function: str, summary: str, comment: str) -> list[str]:
    lines = [
        "#!/usr/bin/env python3",
        f'"""{function}: {summary}',
        "",
        f"Generated from the {model.service} : {model.module} specification. Do not edit.",
        '"""',
        "",
    ]
    if comment.strip():
        lines.extend(_comment_lines(comment))
        lines.append("")
    lines.extend(
        [
            "import argparse",
            "import json",
            "import sys",
            "",
            f"from {model.module}.client import {model.service}Client",
            "",
        ]
    )
    return lines


def _helpers() -> list[str]:
    return [
        "",
        "",
        "def _split_fields(value: str, allowed: list[str], label: str) -> list[str]:",
        '    fields = [f.strip() for f in value.split(",") if f.strip()]',
        "    unknown = [f for f in fields if f not in allowed]",
        "    if unknown:",
        '        print(f"Error: unknown {label} field(s): {\', \'.join(unknown)}", file=sys.stderr)',
        "        sys.exit(1)",
        "    return fields",
        "",
        "",
        "def _read_ids(ids: list[str]) -> list[str]:",
        "    if ids:",
        "        return ids",
        "    return [line.strip() for line in sys.stdin if line.strip()]",
        "",
        "",
        "def _print(result: object) -> None:",
        "    json.dump(result, sys.stdout, indent=2, sort_keys=True)",
        '    sys.stdout.write("\\n")',
    ]


def _footer() -> list[str]:
    return [
        "",
        "",
        'if __name__ == "__main__":',
        "    sys.exit(main())",
        "",
    ]


def _parser_lines(function: str, description: str) -> list[str]:
    return [
        "def main() -> int:",
        f"    parser = argparse.ArgumentParser(prog={function!r}, description={description!r})",
        '    parser.add_argument("--url", default=None, help="Service URL (default: client default)")',
    ]


def _render_get_entity(model: CompiledModel, entity: CompiledEntity) -> str:
    function = f"get_entity_{entity.name}"
    summary = f"fetch {entity.name} entities by identifier."
    lines = _header(model, function, summary, entity.comment)
    lines.append(f"FIELDS = {_field_names(entity.field_map)}")
    lines.append("")
    lines.append("")
    lines.extend(_parser_lines(function, summary))
    lines.extend(
        [
            '    parser.add_argument("ids", nargs="*", help="Identifiers (default: one per line from stdin)")',
            '    parser.add_argument("--fields", default=",".join(FIELDS), help="Comma-separated fields to return")',
            "    args = parser.parse_args()",
            "",
            '    fields = _split_fields(args.fields, FIELDS, "entity")',
            f"    client = {model.service}Client(args.url)",
            f"    _print(client.{function}(_read_ids(args.ids), fields))",
            "    return 0",
        ]
    )
    lines.extend(_helpers())
    lines.extend(_footer())
    return "\n".join(lines)


def _render_query_entity(model: CompiledModel, entity: CompiledEntity) -> str:
    function = f"query_entity_{entity.name}"
    summary = f"query {entity.name} entities by field conditions."
    lines = _header(model, function, summary, entity.comment)
    lines.append(f"FIELDS = {_field_names(entity.field_map)}")
    lines.append("")
    lines.append("")
    lines.extend(_parser_lines(function, summary))
    lines.extend(
        [
            "    parser.add_argument(",
            '        "--is",',
            '        dest="equals",',
            '        nargs=2,',
            '        action="append",',
            "        default=[],",
            '        metavar=("FIELD", "VALUE"),',
            '        help="Match entities whose FIELD equals VALUE",',
            "    )",
            "    parser.add_argument(",
            '        "--op",',
            '        dest="ops",',
            "        nargs=3,",
            '        action="append",',
            "        default=[],",
            '        metavar=("FIELD", "OPERATOR", "VALUE"),',
            '        help="Match entities using an arbitrary comparison operator",',
            "    )",
            '    parser.add_argument("--fields", default=",".join(FIELDS), help="Comma-separated fields to return")',
            "    args = parser.parse_args()",
            "",
            '    fields = _split_fields(args.fields, FIELDS, "entity")',
            '    qry = [(f, "=", v) for f, v in args.equals] + [tuple(op) for op in args.ops]',
            '    _split_fields(",".join(q[0] for q in qry), FIELDS + ["id"], "query")',
            f"    client = {model.service}Client(args.url)",
            f"    _print(client.{function}(qry, fields))",
            "    return 0",
        ]
    )
    lines.extend(_helpers())
    lines.extend(_footer())
    return "\n".join(lines)


def _render_all_entities(model: CompiledModel, entity: CompiledEntity) -> str:
    function = f"all_entities_{entity.name}"
    summary = f"page through all {entity.name} entities."
    lines = _header(model, function, summary, entity.comment)
    lines.append(f"FIELDS = {_field_names(entity.field_map)}")
    lines.append("")
    lines.append("")
    lines.extend(_parser_lines(function, summary))
    lines.extend(
        [
            '    parser.add_argument("--start", type=int, default=0, help="Index of the first entity (default: 0)")',
            '    parser.add_argument("--count", type=int, default=1000, help="Number of entities (default: 1000)")',
            '    parser.add_argument("--fields", default=",".join(FIELDS), help="Comma-separated fields to return")',
            "    args = parser.parse_args()",
            "",
            '    fields = _split_fields(args.fields, FIELDS, "entity")',
            f"    client = {model.service}Client(args.url)",
            f"    _print(client.{function}(args.start, args.count, fields))",
            "    return 0",
        ]
    )
    lines.extend(_helpers())
    lines.extend(_footer())
    return "\n".join(lines)


def _render_get_relationship(model: CompiledModel, rel: CompiledRelationship) -> str:
    function = f"get_relationship_{rel.name}"
    summary = f"follow {rel.name} from {rel.from_entity} to {rel.to_entity}."
    source = model.from_data(rel)
    target = model.to_data(rel)
    lines = _header(model, function, summary, rel.comment)
    lines.append(f"FROM_FIELDS = {_field_names(source.field_map) if source else '[]'}")
    lines.append(f"REL_FIELDS = {_field_names(rel.field_map)}")
    lines.append(f"TO_FIELDS = {_field_names(target.field_map) if target else '[]'}")
    lines.append("")
    lines.append("")
    lines.extend(_parser_lines(function, summary))
    lines.extend(
        [
            f'    parser.add_argument("ids", nargs="*", help="{rel.from_entity} identifiers (default: stdin)")',
            '    parser.add_argument("--from-fields", default="", help="Fields of the source entity")',
            '    parser.add_argument("--rel-fields", default="", help="Fields of the relationship")',
            '    parser.add_argument("--to-fields", default="", help="Fields of the target entity")',
            "    args = parser.parse_args()",
            "",
            '    from_fields = _split_fields(args.from_fields, FROM_FIELDS + ["id"], "from")',
            '    rel_fields = _split_fields(args.rel_fields, REL_FIELDS + ["from_link", "to_link"], "relationship")',
            '    to_fields = _split_fields(args.to_fields, TO_FIELDS + ["id"], "to")',
            f"    client = {model.service}Client(args.url)",
            f"    _print(client.{function}(_read_ids(args.ids), from_fields, rel_fields, to_fields))",
            "    return 0",
        ]
    )
    lines.extend(_helpers())
    lines.extend(_footer())
    return "\n".join(lines)
