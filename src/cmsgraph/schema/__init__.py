# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translation of content models into graph type declarations."""

from cmsgraph.schema.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from cmsgraph.schema.builder import ContentTypeTranslationError, build_content_type, generate_schema
from cmsgraph.schema.collector import DuplicateTypeError, SchemaCollector
from cmsgraph.schema.fields import UnknownFieldTypeError, translate_field_type
from cmsgraph.schema.links import link_field_type
from cmsgraph.schema.naming import make_type_name
from cmsgraph.schema.primitives import PRIMITIVE_TYPES, primitive_descriptor
from cmsgraph.schema.rich_text import get_rich_text_entity_links, make_rich_text_links_resolver
from cmsgraph.schema.sdl import render_sdl
from cmsgraph.schema.unions import UnionTypeRegistry

__all__ = [
    "make_type_name",
    "PRIMITIVE_TYPES",
    "primitive_descriptor",
    "UnionTypeRegistry",
    "link_field_type",
    "UnknownFieldTypeError",
    "translate_field_type",
    "get_rich_text_entity_links",
    "make_rich_text_links_resolver",
    "ContentTypeTranslationError",
    "build_content_type",
    "generate_schema",
    "DuplicateTypeError",
    "SchemaCollector",
    "render_sdl",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
]
