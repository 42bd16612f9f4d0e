# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assembly of the parameter list from a parameter-list token stream."""

from dataclasses import dataclass, field

from docsyntax.model.issues import MalformationIssue, ParameterMissingType
from docsyntax.model.syntax import OPERATOR_TYPE, UNKNOWN_TYPE, ParsedParameter
from docsyntax.parser.tokenizer import Token, TokenType

# ###############
# Public Interface
# ###############


@dataclass
class ParameterCheckResult:
    """Parameters assembled from a token stream and the type issues found on the way."""

    parameters: list[ParsedParameter] = field(default_factory=list)
    issues: list[MalformationIssue] = field(default_factory=list)


def check_parameters(tokens: list[Token]) -> ParameterCheckResult:
    """Build the parameter list from a token stream in a single left-to-right pass.

    A parameter starts at a name or spread token and ends at the next
    parameter start, a semicolon, or the end of the stream. A parameter is
    optional if its name occurs inside at least one ``{ }`` block. Bare and
    escaped asterisks become standalone ``*`` parameters of type ``operator``.

    Args:
        tokens: Tokens produced by :func:`~docsyntax.parser.tokenizer.tokenize`.

    Returns:
        A :class:`ParameterCheckResult` with the parameters in declaration
        order and a ``ParameterMissingType`` issue for each parameter that is
        terminated before a colon.
    """
    return _ParameterBuilder(tokens).build()


# ################
# Implementation
# ################

_STRUCTURAL_NAMES = frozenset({"{", "}", ";"})

# A name directly followed by one of these (or by nothing) can never receive a type.
_TYPELESS_TERMINATORS = frozenset({TokenType.SEMICOLON, TokenType.OPEN_BRACE, TokenType.CLOSE_BRACE})


@dataclass
class _PendingParameter:
    name: str
    optional: bool
    spread: bool
    type: str = UNKNOWN_TYPE


class _ParameterBuilder:
    """Internal single-pass assembler with a brace-depth counter and one pending slot."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._depth = 0
        self._current: _PendingParameter | None = None
        self._result = ParameterCheckResult()

    def build(self) -> ParameterCheckResult:
        for index, token in enumerate(self._tokens):
            if token.type == TokenType.OPEN_BRACE:
                self._depth += 1
            elif token.type == TokenType.CLOSE_BRACE:
                self._depth -= 1
            elif token.type == TokenType.PARAMETER_NAME:
                self._start(token.value, spread=False, index=index)
            elif token.type == TokenType.SPREAD:
                self._start(token.value.removeprefix("..."), spread=True, index=index)
            elif token.type == TokenType.TYPE:
                if self._current is not None and index > 0 and self._tokens[index - 1].type == TokenType.COLON:
                    self._current.type = token.value
            elif token.type == TokenType.SEMICOLON:
                self._finish()
            elif token.type in (TokenType.OPERATOR, TokenType.ESCAPED_ASTERISK):
                self._result.parameters.append(
                    ParsedParameter(name="*", type=OPERATOR_TYPE, optional=self._depth > 0, spread=False)
                )
        self._finish()
        return self._result

    def _start(self, name: str, spread: bool, index: int) -> None:
        self._finish()
        self._current = _PendingParameter(name=name, optional=self._depth > 0, spread=spread)

        # A bare "..." placeholder is not a parameter.
        if not name.strip():
            return
        next_index = index + 1
        if next_index >= len(self._tokens) or self._tokens[next_index].type in _TYPELESS_TERMINATORS:
            self._result.issues.append(ParameterMissingType(name=name))

    def _finish(self) -> None:
        pending = self._current
        self._current = None
        if pending is None:
            return
        name = pending.name.strip()
        if not name or name in _STRUCTURAL_NAMES:
            return
        self._result.parameters.append(
            ParsedParameter(name=pending.name, type=pending.type, optional=pending.optional, spread=pending.spread)
        )
