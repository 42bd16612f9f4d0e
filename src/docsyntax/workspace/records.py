# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loader for documented command records (``{category: {command: record}}``).

Records are produced by an external documentation preprocessor and stored as
YAML or JSON; JSON input is read with the YAML loader.
"""

from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from docsyntax.model.records import CommandRecord

# ###############
# Public Interface
# ###############

RecordSet = dict[str, dict[str, CommandRecord]]


class RecordsError(Exception):
    """Raised when a records file cannot be read or is invalid."""


def load_records(path: Path) -> RecordSet:
    """Load and validate a records file.

    Args:
        path: Path to a YAML or JSON file mapping categories to commands.

    Returns:
        The validated records, keyed by category and command name.

    Raises:
        RecordsError: If the file cannot be read, is not valid YAML/JSON, or
            does not match the record schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RecordsError(f"Cannot read records file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RecordsError(f"Invalid YAML in records file '{path}': {exc}") from exc

    if data is None:
        return {}

    try:
        return _RECORD_SET_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise RecordsError(f"Invalid records file '{path}': {exc}") from exc


# ################
# Implementation
# ################

_RECORD_SET_ADAPTER: TypeAdapter[RecordSet] = TypeAdapter(RecordSet)
