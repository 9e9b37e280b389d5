# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Bookkeeping of synthesized union types."""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class UnionTypeRegistry:
    """Remembers which union names were already declared during one schema build."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._seen: set[str] = set()

    def register(self, name: str) -> bool:
        """Record *name*. Returns True the first time, False for a repeat."""
        if name in self._seen:
            return False
        self._seen.add(name)
        self._names.append(name)
        return True

    @property
    def names(self) -> list[str]:
        """Registered union names in registration order."""
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._seen

    def __len__(self) -> int:
        return len(self._names)
