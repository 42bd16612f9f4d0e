# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Comparison of syntax-declared types against documented parameter types."""

import re
from collections.abc import Iterable

from docsyntax.parser.tokenizer import require_text

# ###############
# Public Interface
# ###############

ANY_TYPE = "any"

# Alternate spellings of the same type; symmetric.
TYPE_EQUIVALENCES: dict[str, str] = {
    "real": "number",
    "number": "real",
}


def is_type_valid(declared: str, actual: str | Iterable[str]) -> bool:
    """Return True if a declared syntax type agrees with the documented type(s).

    Matching is case-insensitive and ignores surrounding whitespace. ``real``
    and ``number`` are interchangeable. The declared type may list several
    types separated by commas.

    Two calling conventions are supported:

    - ``actual`` is a **string**, as found in documentation records. It is
      split on commas, slashes, and the word ``or``. Every declared type must
      be ``any`` or appear in that list.
    - ``actual`` is a **collection** of type names. The declared types and the
      collection must name the same set of types, unless either side
      contains ``any``.

    Args:
        declared: The type written in the syntax, e.g. ``"Text,Blob"``.
        actual: The documented type string or collection of type names.

    Raises:
        SyntaxInputError: If ``declared`` (or a string ``actual``) is not a string.
    """
    require_text(declared, "declared")
    declared_types = [_normalize(segment) for segment in declared.split(",")]

    if isinstance(actual, str):
        if _normalize(declared) == _normalize(actual):
            return True
        actual_list = split_documented_type(actual)
        return all(_matches_any(segment, actual_list) for segment in declared_types)

    actual_types = {_normalize(entry) for entry in actual}
    if ANY_TYPE in declared_types or ANY_TYPE in actual_types:
        return True
    return {_canonical(t) for t in declared_types} == {_canonical(t) for t in actual_types}


def split_documented_type(actual: str) -> list[str]:
    """Split a documented type string such as ``"Text, Blob or Object"`` into lowercased names."""
    require_text(actual, "actual")
    return [part for part in (_normalize(p) for p in _DOCUMENTED_SEPARATOR_RE.split(actual)) if part]


# ################
# Implementation
# ################

_DOCUMENTED_SEPARATOR_RE = re.compile(r"[,/]|\s+or\s+", re.IGNORECASE)


def _normalize(type_name: str) -> str:
    return type_name.strip().lower()


def _canonical(type_name: str) -> str:
    """Map equivalent spellings onto one representative."""
    return min(type_name, TYPE_EQUIVALENCES.get(type_name, type_name))


def _matches_any(declared: str, actual_list: list[str]) -> bool:
    """Apply the single-type rule of the string convention."""
    if declared == ANY_TYPE:
        return True
    if declared in actual_list:
        return True
    return TYPE_EQUIVALENCES.get(declared) in actual_list
