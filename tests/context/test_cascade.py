# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for path-scoped cascaded values."""

from types import SimpleNamespace

import pytest

from cmsgraph.context import CascadedContext, InvalidPathError, PathNode, path_of

# ###############
# Helpers
# ###############


def _path(*keys: str | int) -> PathNode:
    """Build a path node chain from root-first keys."""
    node = PathNode(key=keys[0])
    for key in keys[1:]:
        node = node.child(key)
    return node


# ###############
# path_of
# ###############


class TestPathOf:
    def test_single_node(self) -> None:
        assert path_of(PathNode(key="a")) == "a"

    def test_ancestors_come_first(self) -> None:
        assert path_of(_path("a", "b", "c")) == "a:b:c"

    def test_integer_keys(self) -> None:
        assert path_of(_path("posts", 0, "author")) == "posts:0:author"

    def test_duck_typed_nodes(self) -> None:
        root = SimpleNamespace(key="query", prev=None)
        leaf = SimpleNamespace(key="title", prev=root)
        assert path_of(leaf) == "query:title"

    def test_none_path_raises(self) -> None:
        with pytest.raises(InvalidPathError):
            path_of(None)

    def test_missing_key_raises(self) -> None:
        broken = PathNode(key="leaf", prev=PathNode(key=None))
        with pytest.raises(InvalidPathError):
            path_of(broken)

    def test_deep_path_does_not_recurse(self) -> None:
        node = PathNode(key=0)
        for i in range(1, 5000):
            node = node.child(i)
        assert path_of(node).count(":") == 4999


# ###############
# CascadedContext
# ###############


class TestCascadedContext:
    def test_get_after_set_returns_value(self) -> None:
        ctx: CascadedContext[int] = CascadedContext()
        node = _path("a", "b")
        ctx.set(node, 1)
        assert ctx.get(node) == 1

    def test_longest_prefix_wins(self) -> None:
        ctx: CascadedContext[int] = CascadedContext(default=0)
        ctx.set(_path("a", "b"), 1)
        ctx.set(_path("a", "b", "c"), 2)
        assert ctx.get(_path("a", "b", "c", "d")) == 2
        assert ctx.get(_path("a", "b", "x")) == 1
        assert ctx.get(_path("z")) == 0

    def test_descendant_falls_back_to_nearest_ancestor(self) -> None:
        ctx: CascadedContext[str] = CascadedContext()
        ctx.set(_path("root"), "outer")
        ctx.set(_path("root", "a", "b"), "inner")
        assert ctx.get(_path("root", "a")) == "outer"
        assert ctx.get(_path("root", "a", "b", "c", "d")) == "inner"

    def test_default_is_none_when_not_configured(self) -> None:
        ctx: CascadedContext[bool] = CascadedContext()
        assert ctx.get(_path("nothing")) is None

    def test_set_overwrites_exact_path_only(self) -> None:
        ctx: CascadedContext[int] = CascadedContext()
        ctx.set(_path("a"), 1)
        ctx.set(_path("a", "b"), 2)
        ctx.set(_path("a"), 3)
        assert ctx.get(_path("a", "c")) == 3
        assert ctx.get(_path("a", "b")) == 2
        assert len(ctx) == 2

    def test_stored_path_matches_as_plain_string_prefix(self) -> None:
        ctx: CascadedContext[int] = CascadedContext(default=-1)
        ctx.set(_path("a", "b"), 1)
        assert ctx.get(_path("a", "bc")) == 1
        assert ctx.get(_path("a", "c")) == -1

    def test_get_with_invalid_path_raises(self) -> None:
        ctx: CascadedContext[int] = CascadedContext()
        with pytest.raises(InvalidPathError):
            ctx.get(None)

    def test_has_primitive_by_value(self) -> None:
        ctx: CascadedContext[object] = CascadedContext()
        ctx.set(_path("a"), "draft")
        assert ctx.has("draft")
        assert not ctx.has("published")

    def test_has_distinguishes_bool_and_int(self) -> None:
        ctx: CascadedContext[object] = CascadedContext()
        ctx.set(_path("a"), 1)
        assert ctx.has(1)
        assert not ctx.has(True)

    def test_has_compares_int_and_float_by_value(self) -> None:
        ctx: CascadedContext[object] = CascadedContext()
        ctx.set(_path("a"), 1)
        ctx.set(_path("b"), 2.5)
        assert ctx.has(1.0)
        assert not ctx.has(2)
        assert not ctx.has("1")

    def test_has_false_is_not_zero(self) -> None:
        ctx: CascadedContext[object] = CascadedContext()
        ctx.set(_path("a"), 0)
        assert not ctx.has(False)

    def test_has_complex_value_by_identity(self) -> None:
        ctx: CascadedContext[object] = CascadedContext()
        settings = {"locale": "en"}
        ctx.set(_path("a"), settings)
        assert ctx.has(settings)
        assert not ctx.has({"locale": "en"})
