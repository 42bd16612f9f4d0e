# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cross-validation of parsed syntax against documented parameter tables.

These checks operate on parsed variants and compare them with the parameter
records of the same command: parameters that are not documented, and
declared types that disagree with the documented types.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from docsyntax.model.issues import MalformationIssue, WarningLevel
from docsyntax.model.records import CommandRecord, Direction, DocumentedParameter
from docsyntax.model.syntax import UNKNOWN_TYPE, ParsedVariant
from docsyntax.parser.malformation import IdentifierPolicy
from docsyntax.parser.parser import parse_syntax
from docsyntax.validation.type_match import is_type_valid

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

RESULT_PARAMETER_NAMES: frozenset[str] = frozenset({"result", "function result"})
DEFAULT_RETURN_NAME = "Function result"
MISSING_TYPE = "missing"


@dataclass(frozen=True)
class TypeMismatch:
    """A parameter whose syntax type disagrees with its documented type.

    Attributes:
        name: Parameter (or return value) name.
        syntax_type: Type declared in the syntax string.
        params_type: Type documented in the parameter table, or ``"missing"``.
    """

    name: str
    syntax_type: str
    params_type: str


@dataclass
class VariantValidation:
    """Result of comparing one variant with the documented parameters.

    Attributes:
        extra_params: Lowercased parsed names that are not documented.
        type_mismatches: Parameter type disagreements.
        return_type_mismatches: Return type disagreements.
    """

    extra_params: list[str] = field(default_factory=list)
    type_mismatches: list[TypeMismatch] = field(default_factory=list)
    return_type_mismatches: list[TypeMismatch] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any disagreement was found."""
        return bool(self.extra_params or self.type_mismatches or self.return_type_mismatches)


@dataclass
class VariantAnalysis:
    """Findings for one variant of a command.

    Attributes:
        variant: The parsed variant.
        issues: Malformation issues at or above the checker's warning level.
        validation: Comparison with the documented parameters, or ``None``
            when the command has no parameter table.
    """

    variant: ParsedVariant
    issues: list[MalformationIssue] = field(default_factory=list)
    validation: VariantValidation | None = None

    @property
    def has_issues(self) -> bool:
        """Return True if the variant is malformed or disagrees with the documentation."""
        return bool(self.issues) or (self.validation is not None and self.validation.has_errors)


@dataclass
class CommandReport:
    """Findings for one documented command.

    Attributes:
        name: Qualified command name, e.g. ``"Commands.WebSocket.send"``.
        syntax: The raw syntax string.
        params: The documented parameter table.
        actual_param_names: Lowercased documented names used for comparison.
        variants: One analysis per parsed variant.
    """

    name: str
    syntax: str
    params: list[DocumentedParameter] = field(default_factory=list)
    actual_param_names: list[str] = field(default_factory=list)
    variants: list[VariantAnalysis] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Return True if any variant has issues."""
        return any(analysis.has_issues for analysis in self.variants)


def extract_actual_param_names(params: Iterable[DocumentedParameter]) -> list[str]:
    """Return the lowercased names of all documented parameters with a known direction.

    The pseudo-parameters ``Result`` and ``Function result`` are excluded.
    """
    return [
        param.name.lower()
        for param in params
        if param.flow != Direction.UNKNOWN and param.name.lower() not in RESULT_PARAMETER_NAMES
    ]


def check_type_mismatches(variant: ParsedVariant, params: list[DocumentedParameter]) -> list[TypeMismatch]:
    """Compare the types of a variant's parameters with their documented input types.

    Spread and operator parameters, parameters without a declared type, and
    parameters that are not documented as inputs or have a blank documented
    type are skipped.
    """
    mismatches: list[TypeMismatch] = []
    for parsed in variant.parameters:
        if parsed.name == "*" or parsed.spread or parsed.type == UNKNOWN_TYPE:
            continue
        documented = _find_input_parameter(parsed.name, params)
        if documented is None or not documented.type.strip():
            continue
        if not is_type_valid(parsed.type, documented.type):
            mismatches.append(TypeMismatch(name=parsed.name, syntax_type=parsed.type, params_type=documented.type))
    return mismatches


def check_return_type_mismatches(variant: ParsedVariant, params: list[DocumentedParameter]) -> list[TypeMismatch]:
    """Compare a variant's declared return type with its documented output parameter.

    The output parameter is the one named ``Result``, ``Function result``, or
    the variant's return name. A declared return type without any such
    parameter is reported with ``params_type="missing"``.
    """
    return_type = variant.return_type
    if return_type is None or return_type.type is None:
        return []

    name = return_type.name or DEFAULT_RETURN_NAME
    documented = _find_output_parameter(return_type.name, params)
    if documented is None:
        return [TypeMismatch(name=name, syntax_type=return_type.type, params_type=MISSING_TYPE)]
    if documented.type.strip() and not is_type_valid(return_type.type, documented.type):
        return [TypeMismatch(name=name, syntax_type=return_type.type, params_type=documented.type)]
    return []


def validate_variant_parameters(
    variant: ParsedVariant,
    params: list[DocumentedParameter],
    actual_param_names: list[str],
) -> VariantValidation:
    """Run all documentation comparisons for one variant."""
    parsed_names = [p.name.lower() for p in variant.parameters if not p.spread]
    known = set(actual_param_names)
    return VariantValidation(
        extra_params=[name for name in parsed_names if name not in known and name != "*"],
        type_mismatches=check_type_mismatches(variant, params),
        return_type_mismatches=check_return_type_mismatches(variant, params),
    )


class SyntaxChecker:
    """Checks documented commands: syntax malformation plus documentation agreement.

    Args:
        warning_level: Highest issue level to report. ``STRUCTURAL`` reports
            only structural issues; ``TYPE`` reports all of them.
        policy: Optional parameter-name checks passed to the parser.
    """

    def __init__(
        self,
        warning_level: WarningLevel = WarningLevel.STRUCTURAL,
        policy: IdentifierPolicy | None = None,
    ) -> None:
        self.warning_level = warning_level
        self.policy = policy

    def check_command(self, name: str, record: CommandRecord) -> CommandReport | None:
        """Check one command. Returns ``None`` for records without a syntax string."""
        if not record.syntax:
            logger.debug("Skipping %s: no syntax", name)
            return None

        params = record.params
        actual_names = extract_actual_param_names(params)
        report = CommandReport(name=name, syntax=record.syntax, params=params, actual_param_names=actual_names)
        for variant in parse_syntax(record.syntax, self.policy):
            validation = validate_variant_parameters(variant, params, actual_names) if params else None
            report.variants.append(
                VariantAnalysis(variant=variant, issues=variant.issues_at(self.warning_level), validation=validation)
            )
        logger.debug("Checked %s: %d variant(s), issues=%s", name, len(report.variants), report.has_issues)
        return report

    def check_records(
        self,
        records: Mapping[str, Mapping[str, CommandRecord]],
        exclude: Iterable[str] = (),
    ) -> list[CommandReport]:
        """Check every command of a ``{category: {command: record}}`` mapping.

        Command names in the reports are qualified as ``category.command``.
        Categories listed in ``exclude`` are skipped.
        """
        excluded = set(exclude)
        reports: list[CommandReport] = []
        for category, commands in records.items():
            if category in excluded:
                logger.debug("Skipping excluded category %s", category)
                continue
            logger.debug("Checking %s (%d items)", category, len(commands))
            for command_name, record in commands.items():
                report = self.check_command(f"{category}.{command_name}", record)
                if report is not None:
                    reports.append(report)
        return reports


# ################
# Implementation
# ################


def _find_input_parameter(name: str, params: list[DocumentedParameter]) -> DocumentedParameter | None:
    """Return the documented INPUT or INPUT_OUTPUT parameter with the given name."""
    lowered = name.lower()
    for param in params:
        if param.name.lower() == lowered and param.flow in (Direction.INPUT, Direction.INPUT_OUTPUT):
            return param
    return None


def _find_output_parameter(return_name: str | None, params: list[DocumentedParameter]) -> DocumentedParameter | None:
    """Return the documented OUTPUT parameter that holds the return value."""
    wanted = set(RESULT_PARAMETER_NAMES)
    if return_name:
        wanted.add(return_name.lower())
    for param in params:
        if param.flow == Direction.OUTPUT and param.name.lower() in wanted:
            return param
    return None
