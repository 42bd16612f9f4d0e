# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the docsyntax command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from docsyntax.model.issues import WarningLevel
from docsyntax.parser.parser import parse_syntax
from docsyntax.validation.checks import SyntaxChecker
from docsyntax.validation.report import render_report
from docsyntax.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    save_workspace_config,
)
from docsyntax.workspace.records import RecordsError, load_records

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the docsyntax CLI."""
    parser = argparse.ArgumentParser(
        prog="docsyntax",
        description="docsyntax - command syntax notation checker for API documentation",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a default workspace configuration",
        description=f"Write a default {CONFIG_FILE_NAME} into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize (default: current directory)",
    )

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a syntax string and print the result as JSON",
        description="Parse a syntax string into variants, parameters, return types, and issues.",
    )
    parse_parser.add_argument("syntax", help="The syntax string, variants separated by <br/>")
    _add_config_argument(parse_parser)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check documented commands against their syntax",
        description="Check every command of a records file for malformed syntax and documentation mismatches.",
    )
    check_parser.add_argument("records", help="YAML or JSON file mapping categories to command records")
    _add_config_argument(check_parser)
    check_parser.add_argument(
        "-w",
        "--warning-level",
        type=int,
        choices=[int(level) for level in WarningLevel],
        default=None,
        help="1: structural issues only, 2: all issues (default: from config, else 1)",
    )
    check_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Also write the report to this file",
    )
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress details",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_config_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config",
        default=None,
        help=f"Workspace configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "parse":
        return _cmd_parse(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _load_config(config_arg: str | None) -> WorkspaceConfig:
    """Load the explicit config file, the default one in the working directory, or defaults.

    Raises:
        WorkspaceConfigError: If the selected file is invalid.
    """
    if config_arg is not None:
        return load_workspace_config(Path(config_arg))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_workspace_config(default_path)
    return WorkspaceConfig()


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    try:
        save_workspace_config(WorkspaceConfig(), config_file)
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Initialized docsyntax workspace at '{config_file}'.")
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    try:
        config = _load_config(args.config)
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    variants = parse_syntax(args.syntax, config.policy)
    payload = [variant.model_dump(mode="json", exclude_none=True) for variant in variants]
    print(json.dumps(payload, indent=2, ensure_ascii=False))

    if any(variant.issues_at(config.warning_level) for variant in variants):
        return 1
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = _load_config(args.config)
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    records_path = Path(args.records)
    if not records_path.exists():
        print(f"Error: records file '{records_path}' does not exist.", file=sys.stderr)
        return 1

    try:
        records = load_records(records_path)
    except RecordsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    warning_level = WarningLevel(args.warning_level) if args.warning_level is not None else config.warning_level
    checker = SyntaxChecker(warning_level=warning_level, policy=config.policy)
    reports = checker.check_records(records, exclude=config.exclude)

    lines = [
        f"Warning level: {int(warning_level)} ({warning_level.name.lower()})",
        f"Checking {len(reports)} command(s) from '{records_path}'",
        "=" * 50,
    ]
    for report in reports:
        lines.extend(render_report(report))
    failed = sum(1 for report in reports if report.has_issues)
    lines.append("=" * 50)
    lines.append(f"Syntax check completed: {failed} command(s) with issues.")

    for line in lines:
        print(line)

    if args.output is not None:
        output_path = Path(args.output)
        try:
            output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot write report to '{output_path}': {exc}", file=sys.stderr)
            return 1
        print(f"Results written to: {output_path}")

    return 1 if failed else 0
