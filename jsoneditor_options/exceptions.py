"""
Exception hierarchy for the options model.

Configuration-shape problems are normally reported as ``OptionIssue`` values;
these exceptions are only raised by the explicit ``*_or_raise`` helpers and
when a misconfigured query pipeline is actually run.
"""

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .config.validator import OptionIssue


class OptionsError(Exception):
    """Base class for every error raised by jsoneditor_options"""

    pass


class OptionsValidationError(OptionsError, ValueError):
    """The configuration failed shape validation"""

    def __init__(self, issues: Sequence["OptionIssue"]):
        self.issues = list(issues)
        details = "\n".join(f"- {issue.path}: {issue.message}" for issue in self.issues)
        super().__init__(f"Editor options validation failed:\n{details}")


class QueryConfigurationError(OptionsError):
    """Only one of create_query / execute_query was supplied"""

    def __init__(self, missing: str):
        self.missing = missing
        super().__init__(
            f"Custom query hooks must be supplied together; '{missing}' is missing"
        )
