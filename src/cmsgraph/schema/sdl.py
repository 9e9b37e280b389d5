# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of type declarations as GraphQL SDL.

Extensions become directives: ``{"link": {"by": "id", "from": "a___NODE"}}``
renders as ``@link(by: "id", from: "a___NODE")`` and an empty extension such
as ``{"dontInfer": {}}`` as a bare ``@dontInfer``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from cmsgraph.model.declarations import InterfaceType, ObjectType, TypeDescriptor, UnionType

# ###############
# Public Interface
# ###############


def render_sdl(declarations: Iterable[InterfaceType | ObjectType | UnionType]) -> str:
    """Render *declarations* in order, separated by blank lines."""
    return "\n\n".join(render_declaration(d) for d in declarations) + "\n"


def render_declaration(declaration: InterfaceType | ObjectType | UnionType) -> str:
    """Render a single declaration."""
    if isinstance(declaration, UnionType):
        return f"union {declaration.name} = {' | '.join(declaration.types)}"

    keyword = "interface" if isinstance(declaration, InterfaceType) else "type"
    header = f"{keyword} {declaration.name}"
    if declaration.interfaces:
        header += f" implements {' & '.join(declaration.interfaces)}"
    header += _directives(declaration.extensions)

    lines = [f"{header} {{"]
    lines.extend(f"  {name}: {_field(descriptor)}" for name, descriptor in declaration.fields.items())
    lines.append("}")
    return "\n".join(lines)


# ################
# Implementation
# ################


def _field(descriptor: TypeDescriptor) -> str:
    return descriptor.type + _directives(descriptor.extensions)


def _directives(extensions: dict[str, Any]) -> str:
    return "".join(f" {_directive(name, args)}" for name, args in extensions.items())


def _directive(name: str, args: Any) -> str:
    if not args:
        return f"@{name}"
    rendered = ", ".join(f"{key}: {json.dumps(value)}" for key, value in args.items())
    return f"@{name}({rendered})"
