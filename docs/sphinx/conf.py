# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the dbustree documentation."""

project = "dbustree"
author = "dbustree Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.doctest"]
autodoc_typehints = "description"

html_theme = "alabaster"
