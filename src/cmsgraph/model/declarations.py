# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type declarations submitted to the host type system."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

LINK_SUFFIX = "___NODE"


class TypeDescriptor(BaseModel):
    """The type of one field: a type expression plus resolution metadata.

    ``type`` is a type-system expression such as ``String``, ``Author!`` or
    ``[Tag]``. ``extensions["link"]`` names the foreign-key field a resolver
    follows at data-fetch time.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    extensions: dict[str, Any] = _Field(default_factory=dict)
    resolve: Callable[..., Any] | None = _Field(default=None, exclude=True)

    @field_validator("type")
    @classmethod
    def check_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("type expression must not be empty")
        return value

    def with_type(self, type_expression: str) -> TypeDescriptor:
        """Return a copy carrying *type_expression*."""
        return self.model_copy(update={"type": type_expression})


def link_extension(field_id: str) -> dict[str, str]:
    """Return the link extension pointing at the foreign key of *field_id*."""
    return {"by": "id", "from": f"{field_id}{LINK_SUFFIX}"}


class InterfaceType(BaseModel):
    """An interface declaration."""

    kind: Literal["interface"] = "interface"
    name: str
    fields: dict[str, TypeDescriptor] = _Field(default_factory=dict)
    interfaces: list[str] = _Field(default_factory=list)
    extensions: dict[str, Any] = _Field(default_factory=dict)


class ObjectType(BaseModel):
    """An object type declaration."""

    kind: Literal["object"] = "object"
    name: str
    fields: dict[str, TypeDescriptor] = _Field(default_factory=dict)
    interfaces: list[str] = _Field(default_factory=list)
    extensions: dict[str, Any] = _Field(default_factory=dict)


class UnionType(BaseModel):
    """A union of named object types."""

    kind: Literal["union"] = "union"
    name: str
    types: list[str] = _Field(default_factory=list)


TypeDeclaration = Annotated[
    InterfaceType | ObjectType | UnionType,
    _Field(discriminator="kind"),
]

# Host callback receiving each declaration, e.g. ``SchemaCollector.create_types``.
CreateTypes = Callable[[InterfaceType | ObjectType | UnionType], None]
