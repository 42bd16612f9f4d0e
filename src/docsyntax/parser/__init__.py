# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer, checkers, and parser for command syntax notation."""

from docsyntax.parser.malformation import IdentifierPolicy, ParenBalance, check_malformations, check_paren_balance
from docsyntax.parser.parameters import ParameterCheckResult, check_parameters
from docsyntax.parser.parser import parse_parameters, parse_return_type, parse_syntax, preprocess
from docsyntax.parser.tokenizer import SyntaxInputError, Token, TokenType, tokenize

__all__ = [
    "IdentifierPolicy",
    "ParenBalance",
    "ParameterCheckResult",
    "SyntaxInputError",
    "Token",
    "TokenType",
    "check_malformations",
    "check_paren_balance",
    "check_parameters",
    "parse_parameters",
    "parse_return_type",
    "parse_syntax",
    "preprocess",
    "tokenize",
]
