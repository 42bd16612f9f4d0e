# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace configuration and documented-record input for docsyntax."""

from docsyntax.workspace.config import (
    CONFIG_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    save_workspace_config,
)
from docsyntax.workspace.records import RecordSet, RecordsError, load_records

__all__ = [
    "CONFIG_FILE_NAME",
    "RecordSet",
    "RecordsError",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "load_records",
    "load_workspace_config",
    "save_workspace_config",
]
