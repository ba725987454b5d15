# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping from schema primitive types to interface specification types."""

from __future__ import annotations

from types import MappingProxyType

from dbdspec.compiler.errors import UnknownTypeError

# ###############
# Public Interface
# ###############

# Opaque composite types, declared as string typedefs in the specification
# header in this order.
COMPOSITE_TYPES: tuple[str, ...] = ("diamond", "countVector", "rectangle")

TYPE_MAP = MappingProxyType(
    {
        "boolean": "int",
        "semi-boolean": "string",
        "char": "string",
        "countVector": "countVector",
        "counter": "int",
        "date": "string",
        "diamond": "diamond",
        "dna": "string",
        "float": "float",
        "image": "string",
        "int": "int",
        "link": "string",
        "rectangle": "rectangle",
        "string": "string",
        "long-string": "string",
        "long-text": "string",
        "text": "string",
    }
)


def map_type(type_name: str, context: str | None = None) -> str:
    """Return the interface type for a schema primitive type.

    Args:
        type_name: Schema type name, e.g. ``"counter"``.
        context: Optional description of where the type is used; included in
            the error message.

    Raises:
        UnknownTypeError: If *type_name* has no mapping.
    """
    try:
        return TYPE_MAP[type_name]
    except KeyError:
        raise UnknownTypeError(type_name, context) from None


def list_of(type_name: str) -> str:
    """Wrap an interface type in a list type."""
    return f"list<{type_name}>"
