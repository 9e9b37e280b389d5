# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace configuration for cmsgraph."""

from cmsgraph.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    render_workspace_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_OUTPUT",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "load_workspace_config",
    "render_workspace_config",
]
