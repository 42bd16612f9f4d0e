# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the docsyntax documentation."""

project = "docsyntax"
author = "docsyntax Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
