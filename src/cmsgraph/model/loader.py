# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading content models from JSON or YAML exports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cmsgraph.model.content import ContentTypeItem

# ###############
# Public Interface
# ###############


class ContentModelError(Exception):
    """Raised when a content model cannot be read or does not have the expected shape."""


def load_content_model(path: Path) -> list[ContentTypeItem]:
    """Load the content types stored in *path*.

    ``.json`` files are decoded as JSON, everything else as YAML (a superset
    of JSON). The document is either a list of content types or a mapping
    holding them under ``items`` or ``contentTypes``.

    Raises:
        ContentModelError: If the file cannot be read or decoded, or a content
            type does not validate.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ContentModelError(f"Content model file not found: {path}") from None
    except OSError as exc:
        raise ContentModelError(f"Cannot read content model file: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ContentModelError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ContentModelError(f"Invalid YAML in {path}: {exc}") from exc

    return parse_content_model(data, source_label=str(path))


def parse_content_model(data: Any, source_label: str = "<data>") -> list[ContentTypeItem]:
    """Validate already-decoded content model *data*."""
    raw_items = _extract_items(data, source_label)
    items: list[ContentTypeItem] = []
    for index, entry in enumerate(raw_items):
        try:
            items.append(ContentTypeItem.model_validate(entry))
        except ValidationError as exc:
            raise ContentModelError(f"{source_label}: invalid content type at index {index}: {exc}") from exc
    return items


# ################
# Implementation
# ################

_ITEM_KEYS = ("items", "contentTypes")


def _extract_items(data: Any, source_label: str) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in _ITEM_KEYS:
            if key in data:
                items = data[key]
                if not isinstance(items, list):
                    raise ContentModelError(f"{source_label}: '{key}' must be a list")
                return items
        raise ContentModelError(f"{source_label}: expected one of {', '.join(repr(k) for k in _ITEM_KEYS)}")
    raise ContentModelError(f"{source_label}: content model must be a list or a mapping")
