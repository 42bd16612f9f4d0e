# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the structural malformation checks."""

import pytest

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
    WarningLevel,
)
from docsyntax.parser.malformation import (
    IdentifierPolicy,
    check_malformations,
    check_paren_balance,
    is_valid_type_format,
)
from docsyntax.parser.tokenizer import SyntaxInputError, tokenize

# ###############
# Test Helpers
# ###############


def _check(text: str, policy: IdentifierPolicy | None = None) -> list[MalformationIssue]:
    """Tokenize a parameter string and return its malformation issues."""
    return check_malformations(tokenize(text), policy)


def _ids(text: str, policy: IdentifierPolicy | None = None) -> list[str]:
    return [issue.id for issue in _check(text, policy)]


# ###############
# Clean Input
# ###############


class TestCleanInput:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "param : Text",
            "a : Text ; b : Integer",
            "a : Text { ; b : Real }",
            "a : Text ; { b : Real { ; c : Date } }",
            "...rest : Text",
            "file : 4D.File",
            "entity : cs.DataStore.Entity",
            "value : Text,Blob,Object",
            "list : Collection",
        ],
    )
    def test_no_issues(self, text: str) -> None:
        assert _check(text) == []


# ###############
# Brace Balance
# ###############


class TestBraceBalance:
    def test_unclosed_optional_block(self) -> None:
        issues = _check("param : Text { optional : Text")
        assert issues == [UnclosedOptionalBlock(missing=1)]
        assert issues[0].message == "Unclosed optional block (missing 1 closing brace)"
        assert issues[0].level == WarningLevel.STRUCTURAL

    def test_unclosed_nested_blocks_report_exact_count(self) -> None:
        issues = _check("a : Text { ; b : Text { ; c : Text")
        assert issues == [UnclosedOptionalBlock(missing=2)]
        assert "missing 2 closing braces" in issues[0].message

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_one_issue_per_unmatched_open_block_count(self, count: int) -> None:
        issues = _check("a : Text " + "{ " * count)
        assert issues == [UnclosedOptionalBlock(missing=count)]

    @pytest.mark.parametrize("count", [1, 2, 4])
    def test_one_issue_per_extra_closing_brace(self, count: int) -> None:
        issues = _check("a : Text " + "} " * count)
        assert issues == [ExtraClosingBrace()] * count

    def test_depth_is_clamped_after_extra_closing_brace(self) -> None:
        # The "{" after the stray "}" is balanced by the final "}".
        assert _ids("a : Text } { ; b : Text }") == ["MAL003"]

    def test_extra_and_unclosed_together(self) -> None:
        assert _ids("} a : Text {") == ["MAL003", "MAL002"]


# ###############
# Empty Parameters
# ###############


class TestEmptyParameters:
    def test_double_semicolon(self) -> None:
        issues = _check("a : Text ;; b : Text")
        assert issues == [EmptyParameterDoubleSemicolon()]
        assert issues[0].message == "Empty parameter found (double semicolon)"

    def test_double_semicolon_with_whitespace(self) -> None:
        assert _check("a : Text ; ; b : Text") == [EmptyParameterDoubleSemicolon()]

    def test_semicolon_at_start(self) -> None:
        assert _check("; a : Text") == [EmptyParameterAtStart()]

    def test_semicolon_at_start_followed_by_semicolon(self) -> None:
        assert _ids(";; a : Text") == ["MAL004", "MAL005"]

    def test_semicolon_after_brace_is_not_at_start(self) -> None:
        assert _check("{ ; a : Text }") == []


# ###############
# Colon Placement
# ###############


class TestColonPlacement:
    def test_colon_without_name(self) -> None:
        assert _check(": Text") == [UnexpectedColon()]

    def test_colon_after_semicolon(self) -> None:
        assert _check("a : Text ; : Text") == [UnexpectedColon()]

    def test_colon_after_spread_is_accepted(self) -> None:
        assert _check("...values : Text") == []

    def test_double_colon(self) -> None:
        # The second colon also lacks a preceding name.
        assert _check("a :: Text") == [DoubleColon(), UnexpectedColon()]

    def test_semicolon_after_colon(self) -> None:
        assert _check("a : ; b : Text") == [UnexpectedSemicolonAfterColon()]

    def test_closing_brace_after_colon(self) -> None:
        assert _check("x : Text { ; a : }") == [UnexpectedClosingBraceAfterColon()]

    def test_trailing_colon(self) -> None:
        issues = _check("a : Text ; b :")
        assert issues == [EmptyTypeAfterColon()]
        assert issues[0].level == WarningLevel.TYPE


# ###############
# Type Format
# ###############


class TestTypeFormat:
    @pytest.mark.parametrize(
        "type_name",
        [
            "Text",
            "text",
            "INTEGER",
            "Real",
            "Any",
            "Collection",
            "Object",
            "Variant",
            "Pointer",
            "Number",
            "Null",
            "Undefined",
            "Expression",
            "Field",
            "Table",
            "Text array",
            "object array",
            "4D.File",
            "4D.Function",
            "cs.MyClass",
            "cs.DataStore.Employee",
            "Text,Blob,Object",
            "Text, Blob",
        ],
    )
    def test_valid_type_formats(self, type_name: str) -> None:
        assert is_valid_type_format(type_name)

    @pytest.mark.parametrize(
        "type_name",
        [
            "Type",
            "Foo",
            "4D",
            "cs",
            "4D.",
            "4D.a.b.c",
            "ds.Employee",
            "4D.1File",
            "Text,Foo",
            "",
            "Collection array",
        ],
    )
    def test_invalid_type_formats(self, type_name: str) -> None:
        assert not is_valid_type_format(type_name)

    def test_invalid_type_names_the_whole_token(self) -> None:
        issues = _check("value : Text,Foo")
        assert issues == [InvalidTypeFormat(type_name="Text,Foo")]
        assert "Text,Foo" in issues[0].message
        assert issues[0].level == WarningLevel.TYPE

    def test_generic_type_placeholder_is_invalid(self) -> None:
        assert _check("param : Type") == [InvalidTypeFormat(type_name="Type")]


# ###############
# Parameter Names
# ###############


class TestParameterNames:
    def test_name_checks_disabled_by_default(self) -> None:
        assert _check("my-param : Text ; class : Text") == []

    def test_non_identifier_name(self) -> None:
        policy = IdentifierPolicy(check_parameter_names=True)
        assert _check("my-param : Text", policy) == [NonIdentifierParameterName(name="my-param")]

    def test_spread_name_checked_without_prefix(self) -> None:
        policy = IdentifierPolicy(check_parameter_names=True)
        assert _check("...values : Text", policy) == []

    def test_dollar_and_underscore_names_are_identifiers(self) -> None:
        policy = IdentifierPolicy(check_parameter_names=True)
        assert _check("$value : Text ; _other : Text", policy) == []

    def test_reserved_word(self) -> None:
        policy = IdentifierPolicy(check_reserved_words=True)
        issues = _check("class : Text ; value : Text", policy)
        assert issues == [ReservedParameterName(name="class")]
        assert issues[0].message == "Parameter name 'class' is a reserved word"

    def test_reserved_word_check_is_case_sensitive(self) -> None:
        policy = IdentifierPolicy(check_reserved_words=True)
        assert _check("Class : Text", policy) == []


# ###############
# Parenthesis Balance
# ###############


class TestParenBalance:
    def test_balanced_section(self) -> None:
        text = "**myFunction** ( param : Type )"
        balance = check_paren_balance(text)
        assert balance.param_text == "param : Type"
        assert balance.param_end == 30
        assert balance.issues == []

    def test_nested_parentheses_match_outer_close(self) -> None:
        balance = check_paren_balance("cmd ( a : Text ; (b) ) : Text")
        assert balance.param_text == "a : Text ; (b)"
        assert balance.param_end == 21

    def test_no_parentheses_is_property(self) -> None:
        balance = check_paren_balance(".length : Integer")
        assert balance.param_text is None
        assert balance.param_end == -1
        assert balance.issues == []

    def test_missing_closing_parenthesis(self) -> None:
        balance = check_paren_balance("cmd ( a : Text")
        assert balance.param_text is None
        assert balance.param_end == -1
        assert balance.issues == [MissingClosingParenthesis()]
        assert balance.issues[0].message == "Missing closing parenthesis"

    def test_closing_before_opening_is_ignored(self) -> None:
        balance = check_paren_balance(") cmd ( )")
        assert balance.param_text == ""
        assert balance.param_end == 8

    def test_non_string_is_rejected(self) -> None:
        with pytest.raises(SyntaxInputError):
            check_paren_balance(None)  # type: ignore[arg-type]


# ###############
# Properties
# ###############


class TestProperties:
    @pytest.mark.parametrize("text", ["", " ", "((((", "))))", "{{{{", "}}}}", ":;:;", "* \\* -> <>", "...:..."])
    def test_never_raises(self, text: str) -> None:
        check_malformations(tokenize(text))
        check_paren_balance(text)
