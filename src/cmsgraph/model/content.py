# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Content model records as delivered by the headless CMS."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class FieldKind(Enum):
    """Field kinds known to the type translator."""

    SYMBOL = "Symbol"
    TEXT = "Text"
    INTEGER = "Integer"
    NUMBER = "Number"
    DATE = "Date"
    OBJECT = "Object"
    BOOLEAN = "Boolean"
    LOCATION = "Location"
    RICH_TEXT = "RichText"
    ARRAY = "Array"
    LINK = "Link"


class LinkContentTypeValidation(BaseModel):
    """Restricts a link field to entries of the named content types."""

    model_config = ConfigDict(populate_by_name=True)

    link_content_type: str | list[str] = _Field(alias="linkContentType")
    message: str | None = None


class GenericValidation(BaseModel):
    """Any other validation rule. Kept as-is, never interpreted."""

    rule: dict[str, Any] = _Field(default_factory=dict)


Validation = LinkContentTypeValidation | GenericValidation


class FieldDefinition(BaseModel):
    """One declared field on a content type.

    ``type`` is kept as a plain string so that kinds unknown to
    :class:`FieldKind` still load and are rejected by the translator.
    Array ``items`` definitions carry no ``id``; fields of a content type
    always do, which :class:`ContentTypeItem` enforces.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    name: str | None = None
    type: str
    required: bool = False
    disabled: bool = False
    omitted: bool = False
    localized: bool = False
    items: FieldDefinition | None = None
    link_type: str | None = _Field(default=None, alias="linkType")
    validations: list[Validation] = _Field(default_factory=list)

    @field_validator("validations", mode="before")
    @classmethod
    def classify_validations(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [_classify_validation(entry) for entry in value]


class ContentTypeSys(BaseModel):
    """System metadata of a content type."""

    model_config = ConfigDict(extra="ignore")

    id: str


class ContentTypeItem(BaseModel):
    """A content type: a named record schema with an ordered list of fields."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sys: ContentTypeSys
    name: str = ""
    display_field: str | None = _Field(default=None, alias="displayField")
    description: str | None = None
    fields: list[FieldDefinition] = _Field(default_factory=list)

    @field_validator("fields")
    @classmethod
    def require_field_ids(cls, value: list[FieldDefinition]) -> list[FieldDefinition]:
        for index, field in enumerate(value):
            if not field.id:
                raise ValueError(f"field at index {index} has no id")
        return value

    @property
    def label(self) -> str:
        """Name used in diagnostics: the display name, else the identifier."""
        return self.name or self.sys.id


FieldDefinition.model_rebuild()


# ################
# Implementation
# ################


def _classify_validation(entry: Any) -> Any:
    """Turn a raw validation mapping into its explicit variant."""
    if isinstance(entry, (LinkContentTypeValidation, GenericValidation)):
        return entry
    if isinstance(entry, dict):
        if entry.get("linkContentType"):
            return LinkContentTypeValidation.model_validate(entry)
        return GenericValidation(rule=dict(entry))
    return entry
