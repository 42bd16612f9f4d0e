# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Context-sensitive tokenizer for command syntax parameter lists.

Converts a preprocessed parameter-list string into a sequence of tokens. The
same identifier run can be a parameter name or a type; the kind of the
previously emitted token decides which.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the tokenizer."""

    # Identifiers
    PARAMETER_NAME = "parameter_name"
    TYPE = "type"
    SPREAD = "spread"

    # Punctuation
    COLON = ":"
    SEMICOLON = ";"
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    LT = "<"
    GT = ">"

    # Operators
    ARROW = "->"
    OPERATOR = "*"
    ESCAPED_ASTERISK = "\\*"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source offset.

    Attributes:
        type: The kind of token.
        value: The raw text of the token. SPREAD tokens keep their ``...`` prefix.
        offset: 0-based character position of the token in the tokenized text.
    """

    type: TokenType
    value: str
    offset: int


class SyntaxInputError(TypeError):
    """Raised when a non-string value is passed where syntax text is required."""


def tokenize(text: str) -> list[Token]:
    """Tokenize a parameter-list string into a sequence of tokens.

    Whitespace is consumed and never emitted. Characters that cannot start
    any token are skipped, so tokenizing never fails on string input.

    Args:
        text: The preprocessed parameter string.

    Returns:
        The tokens in source order. Empty or whitespace-only input yields an
        empty list.

    Raises:
        SyntaxInputError: If ``text`` is not a string.
    """
    require_text(text, "text")
    return _Tokenizer(text).tokenize()


def require_text(value: object, name: str) -> None:
    """Raise SyntaxInputError unless ``value`` is a string."""
    if not isinstance(value, str):
        raise SyntaxInputError(f"{name} must be a string, got {type(value).__name__}")


# ################
# Implementation
# ################

_WHITESPACE = frozenset(" \t\r\n")

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "*": TokenType.OPERATOR,
    "<": TokenType.LT,
    ">": TokenType.GT,
}

_IDENTIFIER_ASCII = frozenset(
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
    "_-$./[]<>"
)

# Kind of an identifier run, keyed by the kind of the token emitted just before it.
_IDENTIFIER_KIND_AFTER: dict[TokenType | None, TokenType] = {
    TokenType.COLON: TokenType.TYPE,
    TokenType.SEMICOLON: TokenType.PARAMETER_NAME,
    TokenType.OPEN_BRACE: TokenType.PARAMETER_NAME,
    TokenType.OPEN_PAREN: TokenType.PARAMETER_NAME,
    TokenType.PARAMETER_NAME: TokenType.PARAMETER_NAME,
    TokenType.TYPE: TokenType.PARAMETER_NAME,
    TokenType.SPREAD: TokenType.PARAMETER_NAME,
}


def _is_identifier_char(ch: str) -> bool:
    """Return True for characters that may appear inside an identifier run."""
    return ch in _IDENTIFIER_ASCII or ord(ch) > 127


class _Tokenizer:
    """Internal single-pass scanner.

    The kind of the last emitted token is carried forward in ``_last_type`` so
    that identifier classification never looks back through emitted tokens.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._tokens: list[Token] = []
        self._last_type: TokenType | None = None

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens."""
        while self._pos < len(self._text):
            self._scan_token()
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._text):
            return self._text[self._pos + 1]
        return ""

    def _emit(self, token_type: TokenType, value: str, offset: int) -> None:
        self._tokens.append(Token(token_type, value, offset))
        self._last_type = token_type

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch on the current character."""
        ch = self._text[self._pos]
        start = self._pos

        if ch in _WHITESPACE:
            self._pos += 1
        elif ch == "\\" and self._peek() == "*":
            self._pos += 2
            self._emit(TokenType.ESCAPED_ASTERISK, "\\*", start)
        elif ch == "-" and self._peek() == ">":
            self._pos += 2
            self._emit(TokenType.ARROW, "->", start)
        elif ch in _SINGLE_CHAR_TOKENS:
            self._pos += 1
            self._emit(_SINGLE_CHAR_TOKENS[ch], ch, start)
        else:
            self._scan_identifier(start)

    def _scan_identifier(self, start: int) -> None:
        """Scan a maximal identifier run and classify it from the preceding token.

        A run directly after a colon is a type; commas are part of a type run
        so that ``Text,Blob`` stays a single multi-type token.
        """
        text = self._text
        if text.startswith("...", start):
            token_type = TokenType.SPREAD
        else:
            token_type = _IDENTIFIER_KIND_AFTER.get(self._last_type, TokenType.PARAMETER_NAME)
        allow_comma = token_type == TokenType.TYPE

        while self._pos < len(text) and (
            _is_identifier_char(text[self._pos]) or (allow_comma and text[self._pos] == ",")
        ):
            self._pos += 1

        if self._pos == start:
            # Unrecognized symbol (e.g. a lone backslash); skip it.
            self._pos += 1
            return
        self._emit(token_type, text[start : self._pos], start)
