# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type comparison and cross-validation of syntax against documented parameters."""

from docsyntax.validation.checks import (
    CommandReport,
    SyntaxChecker,
    TypeMismatch,
    VariantAnalysis,
    VariantValidation,
    check_return_type_mismatches,
    check_type_mismatches,
    extract_actual_param_names,
    validate_variant_parameters,
)
from docsyntax.validation.report import render_report
from docsyntax.validation.type_match import is_type_valid, split_documented_type

__all__ = [
    "CommandReport",
    "SyntaxChecker",
    "TypeMismatch",
    "VariantAnalysis",
    "VariantValidation",
    "check_return_type_mismatches",
    "check_type_mismatches",
    "extract_actual_param_names",
    "is_type_valid",
    "render_report",
    "split_documented_type",
    "validate_variant_parameters",
]
