# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the DBDSpec command-line interface."""

import argparse
import sys
from pathlib import Path

from dbdspec.compiler.artifact import read_model
from dbdspec.compiler.build import CompileResult, compile_files, compile_schema
from dbdspec.compiler.errors import CompilerError
from dbdspec.parser.reader import SchemaParseError, load_schema
from dbdspec.project.config import CONFIG_FILE_NAME, ProjectConfigError, load_project_config
from dbdspec.stubs.render import write_stubs

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the DBDSpec CLI."""
    parser = argparse.ArgumentParser(
        prog="dbdspec",
        description="DBDSpec - compile database definitions into interface specifications",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # compile subcommand
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile a schema into a specification, a model and accessor stubs",
        description=(
            "Compile a database definition document into an interface specification, "
            "a compiled model file and one accessor stub script per function."
        ),
    )
    compile_parser.add_argument("service", help="Service name of the specification module")
    compile_parser.add_argument("module", help="Module name of the specification module")
    compile_parser.add_argument("schema_file", metavar="schema-file", help="Database definition XML document")
    compile_parser.add_argument("spec_file", metavar="spec-output-file", help="Where to write the specification")
    compile_parser.add_argument("model_file", metavar="model-output-file", help="Where to write the compiled model")
    compile_parser.add_argument("stub_dir", metavar="stub-output-dir", help="Existing directory for the stub scripts")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a schema without writing any output",
        description="Compile a database definition document in memory and report errors.",
    )
    check_parser.add_argument("schema_file", metavar="schema-file", help="Database definition XML document")

    # build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help=f"Compile the project described by {CONFIG_FILE_NAME}",
        description=f"Read {CONFIG_FILE_NAME} from a project directory and compile it.",
    )
    build_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    # stubs subcommand
    stubs_parser = subparsers.add_parser(
        "stubs",
        help="Render accessor stubs from a compiled model file",
        description="Re-render the accessor stub scripts from a previously written model file.",
    )
    stubs_parser.add_argument("model_file", metavar="model-file", help="Compiled model JSON file")
    stubs_parser.add_argument("stub_dir", metavar="stub-output-dir", help="Existing directory for the stub scripts")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "compile":
        return _cmd_compile(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "build":
        return _cmd_build(args)
    if args.command == "stubs":
        return _cmd_stubs(args)
    return 0


def _run_compile(
    service: str,
    module: str,
    schema_file: Path,
    spec_file: Path,
    model_file: Path,
    stub_dir: Path,
) -> int:
    """Compile and write all outputs, reporting to stdout/stderr."""
    if not stub_dir.is_dir():
        print(f"Error: stub directory '{stub_dir}' does not exist.", file=sys.stderr)
        return 1

    try:
        result = compile_files(service, module, schema_file, spec_file, model_file, stub_dir)
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_summary(result)
    print(f"Wrote specification to '{spec_file}'.")
    print(f"Wrote model to '{model_file}'.")
    print(f"Wrote stubs to '{stub_dir}'.")
    return 0


def _print_summary(result: CompileResult) -> None:
    entity_count = len(result.model.entities)
    relationship_count = len(result.model.relationships) // 2
    print(f"Compiled {entity_count} entities and {relationship_count} relationships.")


def _cmd_compile(args: argparse.Namespace) -> int:
    """Handle the compile subcommand."""
    return _run_compile(
        args.service,
        args.module,
        Path(args.schema_file),
        Path(args.spec_file),
        Path(args.model_file),
        Path(args.stub_dir),
    )


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    schema_file = Path(args.schema_file)
    try:
        schema = load_schema(schema_file)
    except SchemaParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Checking '{schema_file}'...")
    try:
        result = compile_schema(schema, service="check", module="check")
    except CompilerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_summary(result)
    print("No issues found.")
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    """Handle the build subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        print(f"Error: no {CONFIG_FILE_NAME} found in '{directory}'.", file=sys.stderr)
        return 1

    try:
        config = load_project_config(config_file)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    paths = config.resolve(directory)
    return _run_compile(
        config.service,
        config.module,
        paths.schema_file,
        paths.spec_output,
        paths.model_output,
        paths.stub_directory,
    )


def _cmd_stubs(args: argparse.Namespace) -> int:
    """Handle the stubs subcommand."""
    model_file = Path(args.model_file)
    stub_dir = Path(args.stub_dir)

    if not stub_dir.is_dir():
        print(f"Error: stub directory '{stub_dir}' does not exist.", file=sys.stderr)
        return 1

    try:
        model = read_model(model_file)
    except (OSError, ValueError, KeyError) as exc:
        print(f"Error: cannot load model '{model_file}': {exc}", file=sys.stderr)
        return 1

    written = write_stubs(model, stub_dir)
    print(f"Wrote {len(written)} stub(s) to '{stub_dir}'.")
    return 0
