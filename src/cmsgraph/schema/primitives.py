# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fixed translation table for primitive field kinds."""

from __future__ import annotations

from collections.abc import Callable

from cmsgraph.model.content import FieldDefinition, FieldKind
from cmsgraph.model.declarations import TypeDescriptor, link_extension

# ###############
# Public Interface
# ###############

TEXT_TYPE = "ContentfulNodeTypeText"
LOCATION_TYPE = "ContentfulNodeTypeLocation"
RICH_TEXT_TYPE = "ContentfulNodeTypeRichText"


def primitive_descriptor(kind: FieldKind, field: FieldDefinition) -> TypeDescriptor:
    """Return a fresh descriptor for a field of primitive *kind*.

    Raises:
        KeyError: If *kind* is a structural kind (``Array`` or ``Link``).
    """
    return PRIMITIVE_TYPES[kind](field)


def _text(field: FieldDefinition) -> TypeDescriptor:
    return TypeDescriptor(type=TEXT_TYPE, extensions={"link": link_extension(field.id)})


def _date(field: FieldDefinition) -> TypeDescriptor:
    return TypeDescriptor(type="Date", extensions={"dateformat": {}})


def _named(type_name: str) -> Callable[[FieldDefinition], TypeDescriptor]:
    def factory(field: FieldDefinition) -> TypeDescriptor:
        return TypeDescriptor(type=type_name)

    return factory


PRIMITIVE_TYPES: dict[FieldKind, Callable[[FieldDefinition], TypeDescriptor]] = {
    FieldKind.SYMBOL: _named("String"),
    FieldKind.TEXT: _text,
    FieldKind.INTEGER: _named("Int"),
    FieldKind.NUMBER: _named("Float"),
    FieldKind.DATE: _date,
    FieldKind.OBJECT: _named("JSON"),
    FieldKind.BOOLEAN: _named("Boolean"),
    FieldKind.LOCATION: _named(LOCATION_TYPE),
    FieldKind.RICH_TEXT: _named(RICH_TEXT_TYPE),
}
