# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of generated schemas as JSON artifacts.

Artifacts are compact, versioned JSON documents. Resolvers are runtime
objects and are not part of an artifact.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter

from cmsgraph.model.declarations import InterfaceType, ObjectType, TypeDeclaration, UnionType

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".json"


def serialize(declarations: Iterable[InterfaceType | ObjectType | UnionType]) -> str:
    """Serialize *declarations* to a compact JSON string."""
    types = [d.model_dump(mode="json") for d in declarations]
    return json.dumps({"v": ARTIFACT_FORMAT_VERSION, "types": types}, separators=(",", ":"))


def deserialize(data: str) -> list[InterfaceType | ObjectType | UnionType]:
    """Deserialize declarations from a JSON string produced by :func:`serialize`.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return _DECLARATIONS.validate_python(obj.get("types", []))


def write_artifact(declarations: Iterable[InterfaceType | ObjectType | UnionType], path: Path) -> None:
    """Write a schema artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(declarations), encoding="utf-8")


def read_artifact(path: Path) -> list[InterfaceType | ObjectType | UnionType]:
    """Read and deserialize a schema artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################

_DECLARATIONS: TypeAdapter[list[TypeDeclaration]] = TypeAdapter(list[TypeDeclaration])
