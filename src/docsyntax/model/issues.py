# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostic kinds reported for malformed syntax notation.

Every kind is its own model, discriminated by a stable ``id`` string. The
severity level and the rendered message are derived from the kind and its
parameters.
"""

import enum
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class WarningLevel(enum.IntEnum):
    """Severity of a diagnostic. Lower values are higher priority."""

    STRUCTURAL = 1
    TYPE = 2


class _Issue(BaseModel):
    """Common behaviour of all diagnostic kinds."""

    model_config = ConfigDict(frozen=True)

    LEVEL: ClassVar[WarningLevel]

    @computed_field
    @property
    def level(self) -> WarningLevel:
        """Severity of this diagnostic kind."""
        return self.LEVEL

    @computed_field
    @property
    def message(self) -> str:
        """Human-readable rendering of the diagnostic."""
        return self._render()

    def _render(self) -> str:
        raise NotImplementedError


class MissingClosingParenthesis(_Issue):
    """An opening parenthesis has no matching close."""

    id: Literal["MAL001"] = "MAL001"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    def _render(self) -> str:
        return "Missing closing parenthesis"


class UnclosedOptionalBlock(_Issue):
    """One or more ``{`` optional blocks are never closed."""

    id: Literal["MAL002"] = "MAL002"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    missing: int

    def _render(self) -> str:
        noun = "brace" if self.missing == 1 else "braces"
        return f"Unclosed optional block (missing {self.missing} closing {noun})"


class ExtraClosingBrace(_Issue):
    """A ``}`` without a matching ``{``."""

    id: Literal["MAL003"] = "MAL003"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    def _render(self) -> str:
        return "Extra closing brace"


class EmptyParameterDoubleSemicolon(_Issue):
    id: Literal["MAL004"] = "MAL004"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    def _render(self) -> str:
        return "Empty parameter found (double semicolon)"


class EmptyParameterAtStart(_Issue):
    id: Literal["MAL005"] = "MAL005"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    def _render(self) -> str:
        return "Empty parameter found (semicolon at start)"


class UnexpectedColon(_Issue):
    """A colon that does not follow a parameter name."""

    id: Literal["MAL006"] = "MAL006"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    def _render(self) -> str:
        return "Unexpected colon (missing parameter name)"


class DoubleColon(_Issue):
    id: Literal["MAL007"] = "MAL007"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    def _render(self) -> str:
        return "Double colon"


class UnexpectedSemicolonAfterColon(_Issue):
    id: Literal["MAL008"] = "MAL008"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    def _render(self) -> str:
        return "Unexpected semicolon after colon (empty type)"


class UnexpectedClosingBraceAfterColon(_Issue):
    id: Literal["MAL009"] = "MAL009"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    def _render(self) -> str:
        return "Unexpected closing brace after colon (empty type)"


class NonIdentifierParameterName(_Issue):
    """A parameter name that is not a plain identifier (policy-controlled)."""

    id: Literal["MAL010"] = "MAL010"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    name: str

    def _render(self) -> str:
        return f"Parameter name '{self.name}' is not a valid identifier"


class ReservedParameterName(_Issue):
    """A parameter name that is a reserved word (policy-controlled)."""

    id: Literal["MAL011"] = "MAL011"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.STRUCTURAL

    name: str

    def _render(self) -> str:
        return f"Parameter name '{self.name}' is a reserved word"


class EmptyTypeAfterColon(_Issue):
    """The parameter list ends right after a colon."""

    id: Literal["MAL012"] = "MAL012"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.TYPE

    def _render(self) -> str:
        return "Empty type after colon"


class InvalidTypeFormat(_Issue):
    """A type that is neither a built-in type nor a ``4D.``/``cs.`` qualified name."""

    id: Literal["MAL013"] = "MAL013"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.TYPE

    type_name: str

    def _render(self) -> str:
        return f"Invalid type format '{self.type_name}'"


class ParameterMissingType(_Issue):
    """A parameter that is terminated before any ``: Type`` annotation."""

    id: Literal["PAR001"] = "PAR001"
    LEVEL: ClassVar[WarningLevel] = WarningLevel.TYPE

    name: str

    def _render(self) -> str:
        return f"Parameter '{self.name}' has no type"


# Any diagnostic. The ``id`` discriminator keeps (de)serialization unambiguous.
MalformationIssue = Annotated[
    MissingClosingParenthesis
    | UnclosedOptionalBlock
    | ExtraClosingBrace
    | EmptyParameterDoubleSemicolon
    | EmptyParameterAtStart
    | UnexpectedColon
    | DoubleColon
    | UnexpectedSemicolonAfterColon
    | UnexpectedClosingBraceAfterColon
    | NonIdentifierParameterName
    | ReservedParameterName
    | EmptyTypeAfterColon
    | InvalidTypeFormat
    | ParameterMissingType,
    _Field(discriminator="id"),
]

ISSUE_KINDS: tuple[type[_Issue], ...] = (
    MissingClosingParenthesis,
    UnclosedOptionalBlock,
    ExtraClosingBrace,
    EmptyParameterDoubleSemicolon,
    EmptyParameterAtStart,
    UnexpectedColon,
    DoubleColon,
    UnexpectedSemicolonAfterColon,
    UnexpectedClosingBraceAfterColon,
    NonIdentifierParameterName,
    ReservedParameterName,
    EmptyTypeAfterColon,
    InvalidTypeFormat,
    ParameterMissingType,
)


def issue_id(kind: type[_Issue]) -> str:
    """Return the stable id string of a diagnostic kind."""
    return kind.model_fields["id"].default


def level_for_id(code: str) -> WarningLevel:
    """Return the severity level of the diagnostic kind with the given id.

    Raises:
        KeyError: If no diagnostic kind has this id.
    """
    return _LEVEL_BY_ID[code]


# ################
# Implementation
# ################

_LEVEL_BY_ID: dict[str, WarningLevel] = {issue_id(kind): kind.LEVEL for kind in ISSUE_KINDS}
