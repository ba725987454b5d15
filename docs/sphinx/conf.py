# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for DBDSpec documentation."""

project = "DBDSpec"
author = "DBDSpec Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
