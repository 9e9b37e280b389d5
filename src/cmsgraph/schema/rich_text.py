# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of entities embedded in rich-text documents."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

# ###############
# Public Interface
# ###############

NODE_OWNER = "gatsby-source-contentful"
ENTITY_TYPES = ("Entry", "Asset")


def get_rich_text_entity_links(document: Any, node_type: str | None = None) -> dict[str, list[dict[str, str]]]:
    """Collect the entries and assets referenced by a rich-text *document*.

    Args:
        document: A rich-text node, usually the ``document`` root.
        node_type: Only consider nodes of this type (e.g. ``"embedded-entry-block"``).

    Returns:
        ``{"Entry": [...], "Asset": [...]}`` where each item is the link's
        ``sys`` record (``id``, ``type``, ``linkType``), in document order and
        without duplicate ids.
    """
    links: dict[str, list[dict[str, str]]] = {entity_type: [] for entity_type in ENTITY_TYPES}
    seen: set[tuple[str, str]] = set()

    def _visit(node: Any) -> None:
        if not isinstance(node, dict):
            return
        if node_type is None or node.get("nodeType") == node_type:
            sys = _link_target_sys(node)
            if sys is not None:
                key = (sys["linkType"], sys["id"])
                if key not in seen:
                    seen.add(key)
                    links[sys["linkType"]].append(sys)
        for child in node.get("content") or []:
            _visit(child)

    _visit(document)
    return links


def make_rich_text_links_resolver(node_type: str, entity_type: str) -> Callable[[Any, Any, Any], list[dict[str, Any]]]:
    """Return a resolver listing the *entity_type* nodes linked from *node_type* nodes.

    The resolver filters ``context.node_model.get_all_nodes()`` down to nodes
    owned by this source whose ``sys.type`` is *entity_type* and whose
    ``sys.id`` is referenced by the rich-text *source*.
    """

    def resolve(source: Any, args: Any, context: Any) -> list[dict[str, Any]]:
        ids = {link["id"] for link in get_rich_text_entity_links(source, node_type)[entity_type]}
        return [node for node in context.node_model.get_all_nodes() if _matches(node, entity_type, ids)]

    return resolve


def resolve_source(source: Any, args: Any = None, context: Any = None) -> Any:
    """Resolver passing its source object through unchanged."""
    return source


# ################
# Implementation
# ################


def _link_target_sys(node: dict[str, Any]) -> dict[str, str] | None:
    target = (node.get("data") or {}).get("target")
    if not isinstance(target, dict):
        return None
    sys = target.get("sys")
    if not isinstance(sys, dict) or sys.get("linkType") not in ENTITY_TYPES or not sys.get("id"):
        return None
    return {"id": sys["id"], "type": sys.get("type", "Link"), "linkType": sys["linkType"]}


def _matches(node: dict[str, Any], entity_type: str, ids: set[str]) -> bool:
    if (node.get("internal") or {}).get("owner") != NODE_OWNER:
        return False
    sys = node.get("sys") or {}
    return bool(sys.get("id")) and sys.get("type") == entity_type and sys["id"] in ids
