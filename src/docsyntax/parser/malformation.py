# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural checks over a parameter-list token stream.

These checks only report problems; they never raise for malformed notation
and do not depend on the parameter list assembled from the same tokens.
"""

import re
from dataclasses import dataclass, field

from docsyntax.model.issues import (
    DoubleColon,
    EmptyParameterAtStart,
    EmptyParameterDoubleSemicolon,
    EmptyTypeAfterColon,
    ExtraClosingBrace,
    InvalidTypeFormat,
    MalformationIssue,
    MissingClosingParenthesis,
    NonIdentifierParameterName,
    ReservedParameterName,
    UnclosedOptionalBlock,
    UnexpectedClosingBraceAfterColon,
    UnexpectedColon,
    UnexpectedSemicolonAfterColon,
)
from docsyntax.parser.tokenizer import Token, TokenType, require_text

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class IdentifierPolicy:
    """Optional parameter-name checks. Both are disabled by default.

    Attributes:
        check_parameter_names: Report names that are not plain identifiers
            (``[A-Za-z_$][A-Za-z0-9_$]*``).
        check_reserved_words: Report names that are reserved words.
    """

    check_parameter_names: bool = False
    check_reserved_words: bool = False


@dataclass
class ParenBalance:
    """Location of the parameter section inside a raw variant.

    Attributes:
        param_text: Trimmed text between the first ``(`` and its matching
            ``)``, or ``None`` when there are no parentheses or the section is
            unterminated.
        param_end: Index of the matching ``)`` in the variant, or -1.
        issues: ``[MissingClosingParenthesis]`` for an unterminated section,
            otherwise empty.
    """

    param_text: str | None
    param_end: int
    issues: list[MalformationIssue] = field(default_factory=list)


BUILTIN_TYPES: frozenset[str] = frozenset(
    [
        "text",
        "real",
        "any",
        "integer",
        "collection",
        "date",
        "time",
        "boolean",
        "picture",
        "blob",
        "variant",
        "pointer",
    ]
    + [
        f"{name} array"
        for name in ("text", "real", "integer", "date", "time", "boolean", "picture", "blob", "pointer", "object")
    ]
    + ["object", "number", "null", "undefined", "expression", "field", "table"]
)


def check_malformations(tokens: list[Token], policy: IdentifierPolicy | None = None) -> list[MalformationIssue]:
    """Check a token stream for structural defects.

    Checks performed:

    1. **Brace balance**: one ``ExtraClosingBrace`` per excess ``}``, and one
       ``UnclosedOptionalBlock`` carrying the number of unclosed ``{``.
    2. **Empty parameters**: ``;;`` and a leading ``;``.
    3. **Colon placement**: a colon without a preceding name, ``::``, a
       colon directly followed by ``;`` or ``}``, and a trailing colon.
    4. **Type format**: every comma-separated segment of a type must be a
       built-in type name or a ``4D.``/``cs.`` qualified identifier.
    5. **Parameter names**: identifier and reserved-word checks, only when
       enabled by ``policy``.

    Args:
        tokens: Tokens produced by :func:`~docsyntax.parser.tokenizer.tokenize`.
        policy: Optional parameter-name checks; defaults to all disabled.

    Returns:
        The issues found, possibly empty.
    """
    policy = policy or IdentifierPolicy()
    issues: list[MalformationIssue] = []
    issues.extend(_check_brace_balance(tokens))
    issues.extend(_check_empty_parameters(tokens))
    issues.extend(_check_colon_placement(tokens))
    issues.extend(_check_parameter_names(tokens, policy))
    issues.extend(_check_type_formats(tokens))
    return issues


def check_paren_balance(text: str) -> ParenBalance:
    """Locate the parameter section of a raw variant by balanced-parenthesis scanning.

    A variant without any ``(`` is a property and is not malformed.

    Args:
        text: The raw (trimmed) variant text.

    Returns:
        A :class:`ParenBalance` describing the section.

    Raises:
        SyntaxInputError: If ``text`` is not a string.
    """
    require_text(text, "text")
    start = -1
    depth = 0
    for index, ch in enumerate(text):
        if ch == "(":
            if start == -1:
                start = index
            depth += 1
        elif ch == ")" and start != -1:
            depth -= 1
            if depth == 0:
                return ParenBalance(param_text=text[start + 1 : index].strip(), param_end=index)

    if start == -1:
        return ParenBalance(param_text=None, param_end=-1)
    return ParenBalance(param_text=None, param_end=-1, issues=[MissingClosingParenthesis()])


def is_valid_type_format(type_name: str) -> bool:
    """Return True if every comma-separated segment of ``type_name`` is a known type form."""
    return all(_is_valid_type_segment(segment.strip()) for segment in type_name.split(","))


# ################
# Implementation
# ################

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_QUALIFIED_TYPE_RE = re.compile(r"(?:4D|cs)(?:\.[A-Za-z_$][A-Za-z0-9_$]*){1,2}")

_RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger", "default",
        "delete", "do", "else", "enum", "export", "extends", "false", "finally", "for",
        "function", "if", "import", "in", "instanceof", "new", "null", "return", "super",
        "switch", "this", "throw", "true", "try", "typeof", "var", "void", "while", "with",
        "yield", "let", "static", "implements", "interface", "package", "private",
        "protected", "public", "await",
    }
)  # fmt: skip


def _is_valid_type_segment(segment: str) -> bool:
    if segment.lower() in BUILTIN_TYPES:
        return True
    return _QUALIFIED_TYPE_RE.fullmatch(segment) is not None


def _check_brace_balance(tokens: list[Token]) -> list[MalformationIssue]:
    """Track ``{``/``}`` depth; a negative depth is reported and clamped to zero."""
    issues: list[MalformationIssue] = []
    depth = 0
    for token in tokens:
        if token.type == TokenType.OPEN_BRACE:
            depth += 1
        elif token.type == TokenType.CLOSE_BRACE:
            depth -= 1
            if depth < 0:
                issues.append(ExtraClosingBrace())
                depth = 0
    if depth > 0:
        issues.append(UnclosedOptionalBlock(missing=depth))
    return issues


def _check_empty_parameters(tokens: list[Token]) -> list[MalformationIssue]:
    issues: list[MalformationIssue] = []
    for index, token in enumerate(tokens):
        if token.type != TokenType.SEMICOLON:
            continue
        if index + 1 < len(tokens) and tokens[index + 1].type == TokenType.SEMICOLON:
            issues.append(EmptyParameterDoubleSemicolon())
        if index == 0:
            issues.append(EmptyParameterAtStart())
    return issues


def _check_colon_placement(tokens: list[Token]) -> list[MalformationIssue]:
    issues: list[MalformationIssue] = []
    for index, token in enumerate(tokens):
        if token.type != TokenType.COLON:
            continue
        prev_type = tokens[index - 1].type if index > 0 else None
        next_type = tokens[index + 1].type if index + 1 < len(tokens) else None

        if prev_type not in (TokenType.PARAMETER_NAME, TokenType.SPREAD):
            issues.append(UnexpectedColon())
        if next_type == TokenType.COLON:
            issues.append(DoubleColon())
        elif next_type == TokenType.SEMICOLON:
            issues.append(UnexpectedSemicolonAfterColon())
        elif next_type == TokenType.CLOSE_BRACE:
            issues.append(UnexpectedClosingBraceAfterColon())
        elif next_type is None:
            issues.append(EmptyTypeAfterColon())
    return issues


def _check_parameter_names(tokens: list[Token], policy: IdentifierPolicy) -> list[MalformationIssue]:
    if not (policy.check_parameter_names or policy.check_reserved_words):
        return []
    issues: list[MalformationIssue] = []
    for token in tokens:
        if token.type == TokenType.PARAMETER_NAME:
            name = token.value
        elif token.type == TokenType.SPREAD:
            name = token.value.removeprefix("...")
        else:
            continue
        if policy.check_parameter_names and _IDENTIFIER_RE.fullmatch(name) is None:
            issues.append(NonIdentifierParameterName(name=name))
        if policy.check_reserved_words and name in _RESERVED_WORDS:
            issues.append(ReservedParameterName(name=name))
    return issues


def _check_type_formats(tokens: list[Token]) -> list[MalformationIssue]:
    return [
        InvalidTypeFormat(type_name=token.value)
        for token in tokens
        if token.type == TokenType.TYPE and not is_valid_type_format(token.value)
    ]
