# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translation of reference (link) fields.

A link resolves to one of three shapes depending on its
``linkContentType`` validation:

* no validation: the generic ``Contentful<linkType>`` type,
* one content type: that content type's object type,
* several content types: a synthesized union, declared once per build.
"""

from __future__ import annotations

import logging

from cmsgraph.model.content import FieldDefinition, LinkContentTypeValidation, Validation
from cmsgraph.model.declarations import CreateTypes, TypeDescriptor, UnionType, link_extension
from cmsgraph.schema.naming import make_type_name
from cmsgraph.schema.unions import UnionTypeRegistry

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# ###############
# Public Interface
# ###############

UNION_PREFIX = "UnionContentful"
GENERIC_LINK_PREFIX = "Contentful"


def link_field_type(
    link_type: str | None,
    field: FieldDefinition,
    registry: UnionTypeRegistry,
    create_types: CreateTypes,
) -> TypeDescriptor:
    """Return the descriptor of a link field.

    Args:
        link_type: The link target kind, ``"Entry"`` or ``"Asset"``.
        field: The link field, or the array field whose items are links. The
            foreign key is always named after this field.
        registry: Union names already declared in this build.
        create_types: Host callback receiving new union declarations.
    """
    extensions = {"link": link_extension(field.id)}
    validation = _find_link_content_type(_validations_of(field))
    if validation is None:
        return TypeDescriptor(type=f"{GENERIC_LINK_PREFIX}{link_type or ''}", extensions=extensions)

    content_types = content_type_names(validation)
    translated = [make_type_name(name) for name in content_types]
    compact = [make_type_name(name, "") for name in content_types]

    if len(translated) == 1:
        return TypeDescriptor(type=translated[0], extensions=extensions)

    union_name = union_type_name(compact)
    if registry.register(union_name):
        logger.debug("Declaring union %s = %s", union_name, " | ".join(translated))
        create_types(UnionType(name=union_name, types=translated))
    return TypeDescriptor(type=union_name, extensions=extensions)


def content_type_names(validation: LinkContentTypeValidation) -> list[str]:
    """Return the validated content type names as a list."""
    value = validation.link_content_type
    if isinstance(value, str):
        return [value]
    return list(value)


def union_type_name(compact_names: list[str]) -> str:
    """Join member names in the given order. The order is part of the identity."""
    return UNION_PREFIX + "".join(compact_names)


# ################
# Implementation
# ################


def _validations_of(field: FieldDefinition) -> list[Validation]:
    # Arrays of links carry their validations on the item definition.
    if field.items is not None:
        return field.items.validations
    return field.validations


def _find_link_content_type(validations: list[Validation]) -> LinkContentTypeValidation | None:
    for validation in validations:
        if isinstance(validation, LinkContentTypeValidation) and validation.link_content_type:
            return validation
    return None
