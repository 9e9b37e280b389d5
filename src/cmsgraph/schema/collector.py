# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory type registration."""

from __future__ import annotations

from cmsgraph.model.declarations import InterfaceType, ObjectType, UnionType

# ###############
# Public Interface
# ###############


class DuplicateTypeError(Exception):
    """Raised when two declarations share a type name."""


class SchemaCollector:
    """Receives declarations through :meth:`create_types` and keeps them in order."""

    def __init__(self) -> None:
        self.declarations: list[InterfaceType | ObjectType | UnionType] = []
        self._by_name: dict[str, InterfaceType | ObjectType | UnionType] = {}

    def create_types(self, declaration: InterfaceType | ObjectType | UnionType) -> None:
        """Register *declaration*.

        Raises:
            DuplicateTypeError: If a type with the same name was already registered.
        """
        if declaration.name in self._by_name:
            raise DuplicateTypeError(f"Type '{declaration.name}' is declared more than once")
        self._by_name[declaration.name] = declaration
        self.declarations.append(declaration)

    def get(self, name: str) -> InterfaceType | ObjectType | UnionType | None:
        """Return the declaration named *name*, if any."""
        return self._by_name.get(name)

    def objects(self) -> list[ObjectType]:
        return [d for d in self.declarations if isinstance(d, ObjectType)]

    def interfaces(self) -> list[InterfaceType]:
        return [d for d in self.declarations if isinstance(d, InterfaceType)]

    def unions(self) -> list[UnionType]:
        return [d for d in self.declarations if isinstance(d, UnionType)]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self.declarations)
