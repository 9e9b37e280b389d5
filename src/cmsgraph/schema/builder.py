# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema generation for a whole content model.

Declares the fixed types every schema needs (references, entries, assets,
rich text, locations, long text) and one object type per content type.
"""

from __future__ import annotations

import logging

from cmsgraph.model.content import ContentTypeItem
from cmsgraph.model.declarations import (
    CreateTypes,
    InterfaceType,
    ObjectType,
    TypeDescriptor,
    link_extension,
)
from cmsgraph.schema.fields import translate_field_type
from cmsgraph.schema.naming import make_type_name
from cmsgraph.schema.primitives import LOCATION_TYPE, RICH_TEXT_TYPE, TEXT_TYPE
from cmsgraph.schema.rich_text import make_rich_text_links_resolver, resolve_source
from cmsgraph.schema.unions import UnionTypeRegistry

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# ###############
# Public Interface
# ###############

REFERENCE_INTERFACE = "ContentfulInternalReference"
ENTRY_INTERFACE = "ContentfulEntry"
NODE_INTERFACE = "Node"
SYS_TYPE = "ContentfulInternalSys"
CONTENT_TYPE_TYPE = "ContentfulContentType"
ASSET_TYPE = "ContentfulAsset"

CONTENT_TYPE_INTERFACES = [REFERENCE_INTERFACE, ENTRY_INTERFACE, NODE_INTERFACE]


class ContentTypeTranslationError(Exception):
    """Raised when a content type cannot be translated.

    Attributes:
        content_type: Display name of the content type, else its identifier.
        field_id: The field being translated when the failure happened, if any.
    """

    def __init__(self, content_type: str, message: str, field_id: str | None = None) -> None:
        location = f" (field '{field_id}')" if field_id else ""
        super().__init__(f"Unable to create schema for content type {content_type}{location}:\n{message}")
        self.content_type = content_type
        self.field_id = field_id


def generate_schema(
    content_type_items: list[ContentTypeItem],
    create_types: CreateTypes,
    *,
    use_name_for_id: bool = False,
    registry: UnionTypeRegistry | None = None,
) -> UnionTypeRegistry:
    """Declare the complete schema for *content_type_items*.

    Args:
        content_type_items: The content model, in declaration order.
        create_types: Host callback receiving every declaration.
        use_name_for_id: Name object types after the content type's display
            name instead of its identifier.
        registry: Union names already declared. A fresh registry is used when
            omitted, so unions never leak between builds.

    Returns:
        The union registry used for this build.

    Raises:
        ContentTypeTranslationError: On the first content type that fails to
            translate. No further content types are declared.
    """
    registry = registry if registry is not None else UnionTypeRegistry()
    _declare_generic_types(create_types)
    for item in content_type_items:
        create_types(build_content_type(item, registry, create_types, use_name_for_id=use_name_for_id))
    return registry


def build_content_type(
    item: ContentTypeItem,
    registry: UnionTypeRegistry,
    create_types: CreateTypes,
    *,
    use_name_for_id: bool = False,
) -> ObjectType:
    """Translate one content type into its object type declaration.

    Disabled and omitted fields are skipped.

    Raises:
        ContentTypeTranslationError: If any enabled field fails to translate.
    """
    fields: dict[str, TypeDescriptor] = {}
    field_id: str | None = None
    try:
        for field in item.fields:
            if field.disabled or field.omitted:
                continue
            field_id = field.id
            fields[field.id] = translate_field_type(field, registry, create_types)
        field_id = None
        name = make_type_name(item.name if use_name_for_id else item.sys.id)
    except Exception as exc:
        logger.error("Unable to create schema for content type %s", item.label, exc_info=True)
        raise ContentTypeTranslationError(item.label, str(exc), field_id=field_id) from exc

    logger.debug("Declaring content type %s with %d field(s)", name, len(fields))
    return ObjectType(
        name=name,
        fields={
            "id": TypeDescriptor(type="ID!"),
            "sys": TypeDescriptor(type=SYS_TYPE),
            **fields,
        },
        interfaces=list(CONTENT_TYPE_INTERFACES),
        extensions={"dontInfer": {}},
    )


# ################
# Implementation
# ################


def _declare_generic_types(create_types: CreateTypes) -> None:
    create_types(
        InterfaceType(
            name=REFERENCE_INTERFACE,
            fields={"id": TypeDescriptor(type="ID!"), "sys": TypeDescriptor(type=SYS_TYPE)},
            interfaces=[NODE_INTERFACE],
        )
    )
    create_types(
        ObjectType(
            name=CONTENT_TYPE_TYPE,
            fields={
                "id": TypeDescriptor(type="ID!"),
                "name": TypeDescriptor(type="String!"),
                "displayField": TypeDescriptor(type="String!"),
                "description": TypeDescriptor(type="String!"),
            },
            interfaces=[NODE_INTERFACE],
        )
    )
    create_types(
        ObjectType(
            name=SYS_TYPE,
            fields={
                "type": TypeDescriptor(type="String!"),
                "id": TypeDescriptor(type="String!"),
                "spaceId": TypeDescriptor(type="String!"),
                "environmentId": TypeDescriptor(type="String!"),
                "contentType": TypeDescriptor(
                    type=CONTENT_TYPE_TYPE,
                    extensions={"link": link_extension("contentType")},
                ),
                "firstPublishedAt": TypeDescriptor(type="Date!"),
                "publishedAt": TypeDescriptor(type="Date!"),
                "publishedVersion": TypeDescriptor(type="Int!"),
                "locale": TypeDescriptor(type="String!"),
            },
            extensions={"dontInfer": {}},
        )
    )
    create_types(
        InterfaceType(
            name=ENTRY_INTERFACE,
            fields={"id": TypeDescriptor(type="ID!"), "sys": TypeDescriptor(type=SYS_TYPE)},
            interfaces=[NODE_INTERFACE],
            extensions={"dontInfer": {}},
        )
    )
    _declare_asset_type(create_types)
    _declare_rich_text_types(create_types)
    create_types(
        ObjectType(
            name=LOCATION_TYPE,
            fields={"lat": TypeDescriptor(type="Float!"), "lon": TypeDescriptor(type="Float!")},
            extensions={"dontInfer": {}},
        )
    )
    create_types(
        ObjectType(
            name=TEXT_TYPE,
            fields={"raw": TypeDescriptor(type="String!")},
            interfaces=[NODE_INTERFACE],
            extensions={"dontInfer": {}},
        )
    )


def _declare_asset_type(create_types: CreateTypes) -> None:
    create_types(
        ObjectType(
            name=ASSET_TYPE,
            fields={
                "sys": TypeDescriptor(type=SYS_TYPE),
                "id": TypeDescriptor(type="ID!"),
                "title": TypeDescriptor(type="String"),
                "description": TypeDescriptor(type="String"),
                "contentType": TypeDescriptor(type="String"),
                "fileName": TypeDescriptor(type="String"),
                "url": TypeDescriptor(type="String"),
                "size": TypeDescriptor(type="Int"),
                "width": TypeDescriptor(type="Int"),
                "height": TypeDescriptor(type="Int"),
            },
            interfaces=[REFERENCE_INTERFACE, NODE_INTERFACE],
        )
    )


def _links_field(type_name: str, node_type: str, entity_type: str) -> TypeDescriptor:
    return TypeDescriptor(type=f"[{type_name}]!", resolve=make_rich_text_links_resolver(node_type, entity_type))


def _declare_rich_text_types(create_types: CreateTypes) -> None:
    create_types(
        ObjectType(
            name=f"{RICH_TEXT_TYPE}Assets",
            fields={
                "block": _links_field(ASSET_TYPE, "embedded-asset-block", "Asset"),
                "hyperlink": _links_field(ASSET_TYPE, "asset-hyperlink", "Asset"),
            },
        )
    )
    create_types(
        ObjectType(
            name=f"{RICH_TEXT_TYPE}Entries",
            fields={
                "inline": _links_field(ENTRY_INTERFACE, "embedded-entry-inline", "Entry"),
                "block": _links_field(ENTRY_INTERFACE, "embedded-entry-block", "Entry"),
                "hyperlink": _links_field(ENTRY_INTERFACE, "entry-hyperlink", "Entry"),
            },
        )
    )
    create_types(
        ObjectType(
            name=f"{RICH_TEXT_TYPE}Links",
            fields={
                "assets": TypeDescriptor(type=f"{RICH_TEXT_TYPE}Assets", resolve=resolve_source),
                "entries": TypeDescriptor(type=f"{RICH_TEXT_TYPE}Entries", resolve=resolve_source),
            },
        )
    )
    create_types(
        ObjectType(
            name=RICH_TEXT_TYPE,
            fields={
                "json": TypeDescriptor(type="JSON", resolve=resolve_source),
                "links": TypeDescriptor(type=f"{RICH_TEXT_TYPE}Links", resolve=resolve_source),
            },
            extensions={"dontInfer": {}},
        )
    )
