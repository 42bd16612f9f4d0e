# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for multi-variant command syntax strings.

Splits a syntax string into ``<br/>``-delimited variants and runs each one
through the pipeline: locate the parameter section, strip markdown emphasis,
tokenize, check structure and parameters, and parse the return-type tail.
"""

import re

from docsyntax.model.issues import MalformationIssue
from docsyntax.model.syntax import ParsedParameter, ParsedReturnType, ParsedVariant
from docsyntax.parser.malformation import IdentifierPolicy, check_malformations, check_paren_balance
from docsyntax.parser.parameters import check_parameters
from docsyntax.parser.tokenizer import Token, TokenType, require_text, tokenize

# ###############
# Public Interface
# ###############

VARIANT_SEPARATOR = "<br/>"


def parse_syntax(syntax: str, policy: IdentifierPolicy | None = None) -> list[ParsedVariant]:
    """Parse a syntax string into its variants.

    Every variant is parsed independently; a malformed variant never affects
    the others. Malformed notation is reported on the variant, not raised.

    Args:
        syntax: The full syntax string, variants joined by ``<br/>``.
        policy: Optional parameter-name checks passed to the malformation checker.

    Returns:
        One :class:`ParsedVariant` per non-empty variant, in input order.

    Raises:
        SyntaxInputError: If ``syntax`` is not a string.
    """
    require_text(syntax, "syntax")
    return [
        _parse_variant(variant, policy)
        for variant in (segment.strip() for segment in syntax.split(VARIANT_SEPARATOR))
        if variant
    ]


def parse_parameters(param_text: str) -> list[ParsedParameter]:
    """Parse a bare parameter-list string into its parameters.

    No structural checks are run and no issues are returned.

    Raises:
        SyntaxInputError: If ``param_text`` is not a string.
    """
    require_text(param_text, "param_text")
    return check_parameters(tokenize(preprocess(param_text))).parameters


def preprocess(param_text: str) -> str:
    """Strip markdown emphasis asterisks around names, keeping escaped ``\\*``.

    ``*name*`` and ``*...name*`` become ``name`` and ``...name``. Unpaired
    asterisks are left in place.
    """
    text = param_text.replace("\\*", _ESCAPED_ASTERISK_PLACEHOLDER)
    text = _EMPHASIS_SPREAD_RE.sub(r"\1", text)
    text = _EMPHASIS_SEPARATED_SPREAD_RE.sub(r"\1", text)
    text = _EMPHASIS_RE.sub(r"\1", text)
    return text.replace(_ESCAPED_ASTERISK_PLACEHOLDER, "\\*")


def parse_return_type(tokens: list[Token]) -> ParsedReturnType | None:
    """Parse the tokens that follow a variant's closing parenthesis.

    Recognized forms are ``-> name : Type``, ``-> name`` and ``: Type``. Only
    the first token on each side of the colon is taken.

    Returns:
        The return type, or ``None`` when the tail declares neither a name nor a type.
    """
    if not tokens:
        return None

    name: str | None = None
    type_: str | None = None
    head, rest = tokens[0], tokens[1:]
    if head.type == TokenType.ARROW:
        colon_index = next((i for i, tok in enumerate(rest) if tok.type == TokenType.COLON), -1)
        if colon_index == -1:
            name = rest[0].value.strip() if rest else None
        else:
            name = rest[0].value.strip() if colon_index > 0 else None
            after = rest[colon_index + 1 :]
            type_ = after[0].value.strip() if after else None
    elif head.type == TokenType.COLON:
        type_ = rest[0].value.strip() if rest else None

    if not name and not type_:
        return None
    return ParsedReturnType(name=name or None, type=type_ or None)


# ################
# Implementation
# ################

_ESCAPED_ASTERISK_PLACEHOLDER = "\ue000"

_EMPHASIS_SPREAD_RE = re.compile(r"\*(\.\.\.[^*:;{}()\s]+)\*")
_EMPHASIS_SEPARATED_SPREAD_RE = re.compile(r"\*(;\.\.\.[^*:;{}()\s]+)\*")
_EMPHASIS_RE = re.compile(r"\*([^*:;{}()\s]+)\*")


def _parse_variant(variant: str, policy: IdentifierPolicy | None) -> ParsedVariant:
    """Run one trimmed variant through the full pipeline."""
    balance = check_paren_balance(variant)
    if balance.issues:
        return ParsedVariant(source_text=variant, malformation=balance.issues)
    if balance.param_text is None:
        return ParsedVariant(source_text=variant)

    tokens = tokenize(preprocess(balance.param_text))
    issues: list[MalformationIssue] = check_malformations(tokens, policy)
    parameter_result = check_parameters(tokens)
    issues.extend(parameter_result.issues)

    tail_tokens = tokenize(preprocess(variant[balance.param_end + 1 :]))
    return ParsedVariant(
        source_text=variant,
        parameters=parameter_result.parameters,
        return_type=parse_return_type(tail_tokens),
        malformation=issues or None,
    )
