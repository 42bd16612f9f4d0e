# Copyright 2026 docsyntax Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured results of parsing a command syntax string."""

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from docsyntax.model.issues import MalformationIssue, WarningLevel

# ###############
# Public Interface
# ###############

UNKNOWN_TYPE = "unknown"
OPERATOR_TYPE = "operator"


class ParsedParameter(BaseModel):
    """A single parameter of a syntax variant."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = UNKNOWN_TYPE
    optional: bool = False
    spread: bool = False


class ParsedReturnType(BaseModel):
    """The ``-> name : Type`` tail of a syntax variant.

    At least one of the two fields is set on every instance produced by the
    parser.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    type: str | None = None


class ParsedVariant(BaseModel):
    """One ``<br/>``-delimited alternative signature of a command.

    Attributes:
        source_text: The trimmed variant text as it appeared in the input.
        parameters: Parameters in declaration order.
        return_type: The declared return value, or ``None`` if there is none.
        malformation: Issues found in the variant, or ``None`` if it is clean.
            Never an empty list.
    """

    model_config = ConfigDict(frozen=True)

    source_text: str
    parameters: list[ParsedParameter] = _Field(default_factory=list)
    return_type: ParsedReturnType | None = None
    malformation: list[MalformationIssue] | None = None

    @property
    def is_malformed(self) -> bool:
        """Return True if any issue was found in this variant."""
        return self.malformation is not None

    def issues_at(self, threshold: WarningLevel) -> list[MalformationIssue]:
        """Return the issues whose level is at or above the given priority."""
        if self.malformation is None:
            return []
        return [issue for issue in self.malformation if issue.level <= threshold]
