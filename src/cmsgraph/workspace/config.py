# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the cmsgraph configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".cmsgraph.yaml"
DEFAULT_OUTPUT = "schema.graphql"


class WorkspaceConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class WorkspaceConfig:
    """The parsed configuration of a cmsgraph workspace.

    Attributes:
        content_model: Path (relative to the workspace root) of the content model export.
        output: Path (relative to the workspace root) of the generated schema.
        use_name_for_id: Name types after content type display names instead of identifiers.
    """

    content_model: str
    output: str = DEFAULT_OUTPUT
    use_name_for_id: bool = False


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a cmsgraph configuration file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


def render_workspace_config(config: WorkspaceConfig) -> str:
    """Return the YAML text of *config*."""
    data = {
        "content-model": config.content_model,
        "output": config.output,
        "use-name-for-id": config.use_name_for_id,
    }
    return "# cmsgraph configuration\n" + yaml.safe_dump(data, sort_keys=False)


# ################
# Implementation
# ################


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: config must be a YAML mapping")

    content_model = _require_string(data, "content-model", source_label)
    output = DEFAULT_OUTPUT
    if "output" in data:
        output = _require_string(data, "output", source_label)

    use_name_for_id = data.get("use-name-for-id", False)
    if not isinstance(use_name_for_id, bool):
        raise WorkspaceConfigError(f"{source_label}: 'use-name-for-id' must be a boolean")

    return WorkspaceConfig(content_model=content_model, output=output, use_name_for_id=use_name_for_id)


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising WorkspaceConfigError if missing."""
    if key not in mapping:
        raise WorkspaceConfigError(f"{source_label}: missing required field '{key}'")
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value
