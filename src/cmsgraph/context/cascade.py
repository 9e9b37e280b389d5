# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Path-scoped values for tree traversals.

A :class:`CascadedContext` stores values by traversal path::

    a:b        -> True
    a:b:c:d    -> False
    a:b:c:d:e  -> True

Looking up a path returns the value stored under its longest registered
ancestor path, so a value set for a node holds for its whole subtree until a
descendant overrides it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

# ###############
# Public Interface
# ###############

T = TypeVar("T")

PATH_SEPARATOR = ":"


class InvalidPathError(Exception):
    """Raised when a traversal path is missing or has a node without a key."""


@dataclass(frozen=True)
class PathNode:
    """One step of a traversal path, linked to its parent through ``prev``.

    Any object exposing ``key`` and ``prev`` attributes (such as a GraphQL
    resolve-info path) can be used in its place.
    """

    key: str | int | None
    prev: PathNode | None = None

    def child(self, key: str | int) -> PathNode:
        """Return the path node one level below this one."""
        return PathNode(key=key, prev=self)


def path_of(node: Any) -> str:
    """Return the root-first, colon-joined key string of *node*.

    Raises:
        InvalidPathError: If *node* is ``None`` or any node on the chain has no key.
    """
    if node is None:
        raise InvalidPathError("path was undefined")

    keys: list[str] = []
    current = node
    while current is not None:
        key = getattr(current, "key", None)
        if key is None:
            raise InvalidPathError(f"path node without key below '{PATH_SEPARATOR.join(reversed(keys))}'")
        keys.append(str(key))
        current = getattr(current, "prev", None)
    keys.reverse()
    return PATH_SEPARATOR.join(keys)


class CascadedContext(Generic[T]):
    """Stores values by path and resolves them through the nearest ancestor."""

    def __init__(self, default: T | None = None) -> None:
        self.default = default
        self._cascade: dict[str, T] = {}

    def set(self, node: Any, value: T) -> None:
        """Store *value* for *node* and its subtree."""
        self._cascade[path_of(node)] = value

    def get(self, node: Any) -> T | None:
        """Return the value of the longest stored path that prefixes the path of *node*, else the default."""
        match = _longest_prefix(path_of(node), self._cascade)
        if match is None:
            return self.default
        return self._cascade[match]

    def has(self, value: Any) -> bool:
        """Return True if *value* is stored under any path."""
        return any(_same_value(stored, value) for stored in self._cascade.values())

    def __len__(self) -> int:
        return len(self._cascade)


# ################
# Implementation
# ################

_NUMBERS = (int, float)
_PRIMITIVES = (str, bytes, type(None))


def _longest_prefix(target: str, prefixes: dict[str, Any]) -> str | None:
    match: str | None = None
    for prefix in prefixes:
        if target.startswith(prefix) and (match is None or len(prefix) > len(match)):
            match = prefix
    return match


def _same_value(stored: Any, value: Any) -> bool:
    if stored is value:
        return True
    if isinstance(stored, bool) or isinstance(value, bool):
        return False
    if isinstance(stored, _NUMBERS) and isinstance(value, _NUMBERS):
        return stored == value
    if isinstance(stored, _PRIMITIVES) and type(stored) is type(value):
        return stored == value
    return False
