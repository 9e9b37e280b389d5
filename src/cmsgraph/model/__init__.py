# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Content model input records and type declaration output records."""

from cmsgraph.model.content import (
    ContentTypeItem,
    ContentTypeSys,
    FieldDefinition,
    FieldKind,
    GenericValidation,
    LinkContentTypeValidation,
    Validation,
)
from cmsgraph.model.declarations import (
    LINK_SUFFIX,
    CreateTypes,
    InterfaceType,
    ObjectType,
    TypeDeclaration,
    TypeDescriptor,
    UnionType,
    link_extension,
)
from cmsgraph.model.loader import ContentModelError, load_content_model, parse_content_model

__all__ = [
    # Content model
    "FieldKind",
    "LinkContentTypeValidation",
    "GenericValidation",
    "Validation",
    "FieldDefinition",
    "ContentTypeSys",
    "ContentTypeItem",
    # Declarations
    "LINK_SUFFIX",
    "TypeDescriptor",
    "link_extension",
    "InterfaceType",
    "ObjectType",
    "UnionType",
    "TypeDeclaration",
    "CreateTypes",
    # Loading
    "ContentModelError",
    "load_content_model",
    "parse_content_model",
]
