# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Result model for parsed syntax (variants, parameters, diagnostics)."""

from docsyntax.model.issues import (
    ISSUE_KINDS,
    DoubleColon,
    EmptyParameterAtStart,
    EmptyParameterDoubleSemicolon,
    EmptyTypeAfterColon,
    ExtraClosingBrace,
    InvalidTypeFormat,
    MalformationIssue,
    MissingClosingParenthesis,
    NonIdentifierParameterName,
    ParameterMissingType,
    ReservedParameterName,
    UnclosedOptionalBlock,
    UnexpectedClosingBraceAfterColon,
    UnexpectedColon,
    UnexpectedSemicolonAfterColon,
    WarningLevel,
    issue_id,
    level_for_id,
)
from docsyntax.model.records import CommandRecord, Direction, DocumentedParameter
from docsyntax.model.syntax import (
    OPERATOR_TYPE,
    UNKNOWN_TYPE,
    ParsedParameter,
    ParsedReturnType,
    ParsedVariant,
)

__all__ = [
    # Diagnostics
    "WarningLevel",
    "MalformationIssue",
    "ISSUE_KINDS",
    "issue_id",
    "level_for_id",
    "MissingClosingParenthesis",
    "UnclosedOptionalBlock",
    "ExtraClosingBrace",
    "EmptyParameterDoubleSemicolon",
    "EmptyParameterAtStart",
    "UnexpectedColon",
    "DoubleColon",
    "UnexpectedSemicolonAfterColon",
    "UnexpectedClosingBraceAfterColon",
    "NonIdentifierParameterName",
    "ReservedParameterName",
    "EmptyTypeAfterColon",
    "InvalidTypeFormat",
    "ParameterMissingType",
    # Parse results
    "UNKNOWN_TYPE",
    "OPERATOR_TYPE",
    "ParsedParameter",
    "ParsedReturnType",
    "ParsedVariant",
    # Documentation records
    "Direction",
    "DocumentedParameter",
    "CommandRecord",
]
