# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the docsyntax workspace configuration file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from docsyntax.model.issues import WarningLevel
from docsyntax.parser.malformation import IdentifierPolicy

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".docsyntax.yaml"


class WorkspaceConfigError(Exception):
    """Raised when a workspace configuration file is invalid or cannot be loaded."""


class WorkspaceConfig(BaseModel):
    """The parsed configuration of a docsyntax workspace.

    Attributes:
        warning_level: Highest issue level reported by ``check``.
        check_parameter_names: Report parameter names that are not plain identifiers.
        check_reserved_words: Report parameter names that are reserved words.
        exclude: Record categories skipped by ``check``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    warning_level: WarningLevel = Field(alias="warning-level", default=WarningLevel.STRUCTURAL)
    check_parameter_names: bool = Field(alias="check-parameter-names", default=False)
    check_reserved_words: bool = Field(alias="check-reserved-words", default=False)
    exclude: list[str] = Field(default_factory=list)

    @property
    def policy(self) -> IdentifierPolicy:
        """The parameter-name checks selected by this configuration."""
        return IdentifierPolicy(
            check_parameter_names=self.check_parameter_names,
            check_reserved_words=self.check_reserved_words,
        )


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and validate a workspace configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.docsyntax.yaml`` file.

    Returns:
        A validated WorkspaceConfig instance.

    Raises:
        WorkspaceConfigError: If the file cannot be read, contains invalid
            YAML, or does not conform to the expected schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Workspace config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read workspace config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


def save_workspace_config(config: WorkspaceConfig, path: Path) -> None:
    """Write a workspace configuration file.

    Raises:
        WorkspaceConfigError: If the file cannot be written.
    """
    data = config.model_dump(by_alias=True, mode="json")
    try:
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=True), encoding="utf-8")
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot write workspace config file '{path}': {exc}") from exc


# ################
# Implementation
# ################


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse workspace config YAML text into a WorkspaceConfig.

    Raises:
        WorkspaceConfigError: If the YAML is invalid or the schema is violated.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: workspace config must be a YAML mapping")

    try:
        return WorkspaceConfig.model_validate(data)
    except ValidationError as exc:
        raise WorkspaceConfigError(f"Invalid workspace config {source_label}: {exc}") from exc
