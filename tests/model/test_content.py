# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the content model records."""

from cmsgraph.model import (
    ContentTypeItem,
    FieldDefinition,
    FieldKind,
    GenericValidation,
    LinkContentTypeValidation,
    TypeDescriptor,
    link_extension,
)


def test_field_definition_from_cms_json() -> None:
    """Camel-cased CMS keys populate the snake-cased attributes."""
    field = FieldDefinition.model_validate(
        {
            "id": "author",
            "name": "Author",
            "type": "Link",
            "linkType": "Entry",
            "required": True,
            "validations": [{"linkContentType": ["person"]}],
        }
    )
    assert field.link_type == "Entry"
    assert field.required is True
    assert field.disabled is False
    assert field.validations == [LinkContentTypeValidation(link_content_type=["person"])]


def test_validations_are_classified() -> None:
    """Only linkContentType rules become link validations; others stay opaque."""
    field = FieldDefinition.model_validate(
        {
            "id": "slug",
            "type": "Symbol",
            "validations": [{"unique": True}, {"linkContentType": "page", "message": "Pages only"}],
        }
    )
    generic, link = field.validations
    assert isinstance(generic, GenericValidation)
    assert generic.rule == {"unique": True}
    assert isinstance(link, LinkContentTypeValidation)
    assert link.link_content_type == "page"
    assert link.message == "Pages only"


def test_array_items_are_nested_definitions() -> None:
    field = FieldDefinition.model_validate(
        {"id": "tags", "type": "Array", "items": {"id": "tags", "type": "Symbol"}}
    )
    assert field.items is not None
    assert field.items.type == FieldKind.SYMBOL.value


def test_unknown_kind_still_loads() -> None:
    """Unknown kinds are rejected at translation time, not at load time."""
    field = FieldDefinition(id="x", type="Hologram")
    assert field.type == "Hologram"


def test_content_type_label_falls_back_to_id() -> None:
    named = ContentTypeItem.model_validate({"sys": {"id": "blogPost"}, "name": "Blog Post"})
    unnamed = ContentTypeItem.model_validate({"sys": {"id": "blogPost"}})
    assert named.label == "Blog Post"
    assert unnamed.label == "blogPost"


def test_content_type_ignores_unknown_keys() -> None:
    item = ContentTypeItem.model_validate(
        {"sys": {"id": "page", "type": "ContentType", "revision": 3}, "name": "Page", "displayField": "title"}
    )
    assert item.display_field == "title"
    assert item.fields == []


def test_type_descriptor_with_type_copies() -> None:
    original = TypeDescriptor(type="Author", extensions={"link": link_extension("author")})
    required = original.with_type("Author!")
    assert original.type == "Author"
    assert required.type == "Author!"
    assert required.extensions == {"link": {"by": "id", "from": "author___NODE"}}
