# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error kinds raised by the schema compiler.

Every error is fatal: compilation is all-or-nothing, so none of these is
caught inside the compiler. They propagate to the caller with enough context
to locate the offending schema element.
"""

from __future__ import annotations

from pathlib import Path

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Base class for all unrecoverable compilation errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DuplicateNameError(CompilerError):
    """Raised when an entity, relationship or converse name is used twice.

    Attributes:
        name: The name that was registered a second time.
        kind: What the second registration was (e.g. ``"entity"``).
        previous_kind: What the name was first registered as.
    """

    def __init__(self, name: str, kind: str, previous_kind: str) -> None:
        super().__init__(f"Duplicate name detected in {kind}: '{name}' (already used by a {previous_kind})")
        self.name = name
        self.kind = kind
        self.previous_kind = previous_kind


class UnknownTypeError(CompilerError):
    """Raised when a schema type has no interface type mapping.

    Attributes:
        type_name: The unmapped schema type.
        context: Where the type was used (e.g. ``"field 'x' of entity 'Y'"``).
    """

    def __init__(self, type_name: str, context: str | None = None) -> None:
        where = f" in {context}" if context else ""
        super().__init__(f"Unknown type '{type_name}'{where}")
        self.type_name = type_name
        self.context = context


class UnresolvedEndpointError(CompilerError):
    """Raised when a relationship endpoint does not name a compiled entity.

    Attributes:
        relationship: Name of the relationship.
        entity: The entity name that could not be resolved.
        endpoint: ``"from"`` or ``"to"``.
    """

    def __init__(self, relationship: str, entity: str, endpoint: str) -> None:
        super().__init__(f"Relationship '{relationship}': '{endpoint}' entity '{entity}' is not defined")
        self.relationship = relationship
        self.entity = entity
        self.endpoint = endpoint


class SchemaIOError(CompilerError):
    """Raised when a schema cannot be read or an output cannot be written.

    Attributes:
        path: The file or directory involved.
    """

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path
