# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive translation of field definitions into type descriptors."""

from __future__ import annotations

from cmsgraph.model.content import FieldDefinition, FieldKind
from cmsgraph.model.declarations import CreateTypes, TypeDescriptor
from cmsgraph.schema.links import link_field_type
from cmsgraph.schema.primitives import primitive_descriptor
from cmsgraph.schema.unions import UnionTypeRegistry

# ###############
# Public Interface
# ###############

REQUIRED_MARKER = "!"


class UnknownFieldTypeError(Exception):
    """Raised when a field declares a kind without a translation rule."""

    def __init__(self, kind: str, field_id: str) -> None:
        super().__init__(f"Unknown field type '{kind}' for field '{field_id}'")
        self.kind = kind
        self.field_id = field_id


def field_kind(field: FieldDefinition) -> FieldKind:
    """Return the kind of *field*.

    Raises:
        UnknownFieldTypeError: If the declared type is not a known kind.
    """
    try:
        return FieldKind(field.type)
    except ValueError:
        raise UnknownFieldTypeError(field.type, field.id) from None


def translate_field_type(
    field: FieldDefinition,
    registry: UnionTypeRegistry,
    create_types: CreateTypes,
) -> TypeDescriptor:
    """Translate one field definition into its type descriptor.

    The element type is resolved first, then wrapped in ``[...]`` for arrays,
    then marked required. Each wrapping happens exactly once.

    Raises:
        UnknownFieldTypeError: If the field, or an array's items, has an unknown kind.
    """
    kind = field_kind(field)
    if kind is FieldKind.ARRAY:
        descriptor = _array_field_type(field, registry, create_types)
    elif kind is FieldKind.LINK:
        descriptor = link_field_type(field.link_type, field, registry, create_types)
    else:
        descriptor = primitive_descriptor(kind, field)

    if field.required:
        descriptor = descriptor.with_type(f"{descriptor.type}{REQUIRED_MARKER}")
    return descriptor


# ################
# Implementation
# ################


def _array_field_type(
    field: FieldDefinition,
    registry: UnionTypeRegistry,
    create_types: CreateTypes,
) -> TypeDescriptor:
    items = field.items
    if items is None:
        raise ValueError(f"Array field '{field.id}' does not declare its items")
    if not items.id:
        # Item definitions are anonymous and take the array field's id.
        items = items.model_copy(update={"id": field.id})

    if field_kind(items) is FieldKind.LINK:
        # The foreign key belongs to the array field, not to its items.
        element = link_field_type(items.link_type, field, registry, create_types)
        if items.required:
            element = element.with_type(f"{element.type}{REQUIRED_MARKER}")
    else:
        element = translate_field_type(items, registry, create_types)

    return element.with_type(f"[{element.type}]")
