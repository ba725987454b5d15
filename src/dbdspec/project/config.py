# Copyright 2026 DBDSpec Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the DBDSpec project configuration file."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".dbdspec.yaml"


class ProjectConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


class ProjectConfig(BaseModel):
    """Settings of one compilation, as stored in ``.dbdspec.yaml``.

    Paths are relative to the directory containing the configuration file
    until :meth:`resolve` is called.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, protected_namespaces=())

    service: str
    module: str
    schema_file: str = Field(alias="schema")
    spec_output: str = Field(alias="spec-output")
    model_output: str = Field(alias="model-output")
    stub_directory: str = Field(alias="stub-directory")

    def resolve(self, base: Path) -> ResolvedPaths:
        """Return the configured paths resolved against *base*."""
        return ResolvedPaths(
            schema_file=(base / self.schema_file).resolve(),
            spec_output=(base / self.spec_output).resolve(),
            model_output=(base / self.model_output).resolve(),
            stub_directory=(base / self.stub_directory).resolve(),
        )


class ResolvedPaths(BaseModel):
    """Absolute input and output paths of a project."""

    schema_file: Path
    spec_output: Path
    model_output: Path
    stub_directory: Path


def load_project_config(path: Path) -> ProjectConfig:
    """Load and validate a project configuration file.

    Args:
        path: Path to the ``.dbdspec.yaml`` file.

    Returns:
        A validated ProjectConfig instance.

    Raises:
        ProjectConfigError: If the file cannot be read, is not valid YAML, or
            does not match the expected layout.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProjectConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ProjectConfigError(f"Cannot read project config file: {exc}") from exc

    return _parse_project_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ProjectConfigError(f"{source_label}: project config must be a YAML mapping")

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ProjectConfigError(f"Invalid project config {source_label}: {exc}") from exc
