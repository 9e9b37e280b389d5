# Copyright 2026 CMSGraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for cmsgraph documentation."""

project = "cmsgraph"
author = "CMSGraph Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
