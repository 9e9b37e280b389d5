# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cascaded, path-scoped values for tree traversals."""

from cmsgraph.context.cascade import PATH_SEPARATOR, CascadedContext, InvalidPathError, PathNode, path_of

__all__ = [
    "PATH_SEPARATOR",
    "CascadedContext",
    "InvalidPathError",
    "PathNode",
    "path_of",
]
