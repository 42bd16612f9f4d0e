# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documented command records, as produced by the documentation preprocessor."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Direction(enum.Enum):
    """Data direction of a documented parameter."""

    INPUT = "input"
    INPUT_OUTPUT = "input-output"
    OUTPUT = "output"
    UNKNOWN = "unknown"

    @classmethod
    def from_marker(cls, marker: str) -> Direction:
        """Map a documentation direction marker (``->``, ``&#8594;``, ...) to a Direction."""
        return _DIRECTION_MARKERS.get(marker.strip(), cls.UNKNOWN)


class DocumentedParameter(BaseModel):
    """One row of a command's documented parameter table.

    Accepts either a mapping or the legacy ``[name, type, direction,
    description]`` list; null cells read as empty strings. The ``direction``
    field holds the raw marker.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""
    direction: str = ""
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            keys = ("name", "type", "direction", "description")
            return {key: "" if value is None else str(value) for key, value in zip(keys, data)}
        if isinstance(data, dict):
            # Null cells fall back to the field defaults.
            return {key: value for key, value in data.items() if value is not None}
        return data

    @property
    def flow(self) -> Direction:
        """The parsed direction marker."""
        return Direction.from_marker(self.direction)


class CommandRecord(BaseModel):
    """A documented command: its syntax string and its parameter table."""

    model_config = ConfigDict(populate_by_name=True)

    syntax: str | None = _Field(default=None, alias="Syntax")
    params: list[DocumentedParameter] = _Field(default_factory=list, alias="Params")

    @field_validator("params", mode="before")
    @classmethod
    def _null_params(cls, value: Any) -> Any:
        return [] if value is None else value


# ################
# Implementation
# ################

_DIRECTION_MARKERS: dict[str, Direction] = {
    "->": Direction.INPUT,
    "&#8594;": Direction.INPUT,
    "<->": Direction.INPUT_OUTPUT,
    "&#8596;": Direction.INPUT_OUTPUT,
    "<-": Direction.OUTPUT,
    "&#8592;": Direction.OUTPUT,
}
