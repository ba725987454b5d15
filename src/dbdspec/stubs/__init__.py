# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Accessor stub scripts rendered from a compiled model."""

from dbdspec.stubs.render import STUB_SUFFIX, render_stubs, write_stubs

__all__ = [
    "STUB_SUFFIX",
    "render_stubs",
    "write_stubs",
]
