# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type name normalization for content types."""

from __future__ import annotations

import re

# ###############
# Public Interface
# ###############

CONTENT_TYPE_PREFIX = "ContentfulContentType"


def make_type_name(name: str, prefix: str = CONTENT_TYPE_PREFIX) -> str:
    """Return the type-system name for the content type *name*.

    ``"<prefix> <name>"`` is split into words (on separators, case changes
    and digit runs), camel-cased and given an upper-case first letter::

        make_type_name("blogPost")      -> "ContentfulContentTypeBlogPost"
        make_type_name("blog-post", "") -> "BlogPost"
    """
    camel = _camel_case(f"{prefix} {name}")
    return camel[:1].upper() + camel[1:]


# ################
# Implementation
# ################

_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def _camel_case(text: str) -> str:
    words = _WORD_RE.findall(text)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in tail)
