# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Plain-text rendering of command check reports."""

import json

from docsyntax.model.issues import MalformationIssue, WarningLevel
from docsyntax.validation.checks import CommandReport, TypeMismatch, VariantAnalysis

# ###############
# Public Interface
# ###############

SEPARATOR = "-" * 60


def render_report(report: CommandReport) -> list[str]:
    """Render one command report as lines of text.

    Clean commands are rendered as a single summary line. Commands with issues
    get the parsed variants, the documented parameters (if any), and a
    per-variant analysis, followed by a separator line.
    """
    if not report.has_issues:
        return [f"Command: {report.name} - Syntax: {report.syntax}"]

    lines = [
        f"Command: {report.name}",
        f"Syntax: {report.syntax}",
        "Parsed variants: " + _dump_variants(report),
    ]
    if report.params:
        lines.append("")
        lines.append("Actual Params: " + json.dumps([p.model_dump() for p in report.params], indent=2))
        lines.append(f"Expected parameter names: {report.actual_param_names}")
        for index, analysis in enumerate(report.variants):
            lines.extend(_render_variant(index, analysis))
    else:
        lines.append("")
        lines.append("No Params field found for this command")
        for index, analysis in enumerate(report.variants):
            if analysis.issues:
                lines.append("")
                lines.append(f"Variant {index + 1} analysis:")
                lines.extend(_render_issues(analysis.issues))
    lines.append(SEPARATOR)
    return lines


def level_tag(level: WarningLevel) -> str:
    """Return the short tag (``L1``/``L2``) for a warning level."""
    return f"L{int(level)}"


# ################
# Implementation
# ################


def _dump_variants(report: CommandReport) -> str:
    return json.dumps(
        [analysis.variant.model_dump(mode="json", exclude_none=True) for analysis in report.variants],
        indent=2,
        ensure_ascii=False,
    )


def _render_issues(issues: list[MalformationIssue]) -> list[str]:
    lines = ["Syntax malformation detected:"]
    lines.extend(f"   - [{level_tag(issue.level)}] {issue.message}" for issue in issues)
    return lines


def _render_mismatches(title: str, mismatches: list[TypeMismatch]) -> list[str]:
    lines = [f"{title}:"]
    lines.extend(
        f"   - {m.name}: syntax declares '{m.syntax_type}' but params declare '{m.params_type}'" for m in mismatches
    )
    return lines


def _render_variant(index: int, analysis: VariantAnalysis) -> list[str]:
    lines = ["", f"Variant {index + 1} analysis:"]
    lines.append(f"Parsed parameter names: {[p.name.lower() for p in analysis.variant.parameters]}")
    if analysis.issues:
        lines.extend(_render_issues(analysis.issues))

    validation = analysis.validation
    if validation is not None:
        if validation.extra_params:
            lines.append(f"Extra/Invalid parameters: {', '.join(validation.extra_params)}")
        if validation.type_mismatches:
            lines.extend(_render_mismatches("Type mismatches", validation.type_mismatches))
        if validation.return_type_mismatches:
            lines.extend(_render_mismatches("Return type mismatches", validation.return_type_mismatches))

    if not analysis.has_issues:
        lines.append("All parsed parameters are valid!")
    return lines
