# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Latency checks for large parameter lists.

The budgets are generous; they catch quadratic behaviour in the tokenizer and
the checkers, not small regressions.
"""

import time

import pytest

from docsyntax.parser.malformation import check_malformations
from docsyntax.parser.parameters import check_parameters
from docsyntax.parser.parser import parse_syntax
from docsyntax.parser.tokenizer import tokenize

# ###############
# Test Helpers
# ###############


def _parameter_list(count: int) -> str:
    """Build a parameter list with a mix of required, optional, and spread parameters."""
    parts = []
    for index in range(count):
        if index % 10 == 9:
            parts.append(f"{{ *opt{index}* : Integer }}")
        else:
            parts.append(f"*param{index}* : Text")
    parts.append("*...rest* : Real")
    return " ; ".join(parts)


def _elapsed(func, *args) -> float:
    start = time.perf_counter()
    func(*args)
    return time.perf_counter() - start


# ###############
# Stress Tests
# ###############


class TestLargeInputs:
    @pytest.mark.parametrize("count", [100, 500])
    def test_parse_large_parameter_list(self, count: int) -> None:
        syntax = f"BIG ( {_parameter_list(count)} ) -> result : Object"
        assert _elapsed(parse_syntax, syntax) < 1.0
        variant = parse_syntax(syntax)[0]
        assert len(variant.parameters) == count + 1
        assert variant.malformation is None

    def test_tokenizer_scales_linearly(self) -> None:
        small = _parameter_list(200)
        large = _parameter_list(2000)
        small_time = min(_elapsed(tokenize, small) for _ in range(3))
        large_time = min(_elapsed(tokenize, large) for _ in range(3))
        # Ten times the input must not take anywhere near a hundred times as long.
        assert large_time < max(small_time, 1e-4) * 40

    def test_checkers_on_large_token_stream(self) -> None:
        tokens = tokenize(_parameter_list(2000))
        assert _elapsed(check_malformations, tokens) < 1.0
        assert _elapsed(check_parameters, tokens) < 1.0

    def test_many_variants(self) -> None:
        syntax = "<br/>".join(f"cmd ( a{index} : Text ; {{ b : Integer }} )" for index in range(500))
        assert _elapsed(parse_syntax, syntax) < 2.0
        assert len(parse_syntax(syntax)) == 500

    def test_deeply_malformed_input(self) -> None:
        syntax = "cmd ( " + "{ ; :: ; } } " * 500 + ")"
        assert _elapsed(parse_syntax, syntax) < 1.0
        assert parse_syntax(syntax)[0].is_malformed
