# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""DBDSpec: compile entity-relationship database definitions into typed interface specifications."""

__version__ = "0.1.0"
