# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader for XML database definition documents."""

from dbdspec.parser.reader import SchemaParseError, load_schema, parse_schema

__all__ = [
    "parse_schema",
    "load_schema",
    "SchemaParseError",
]
