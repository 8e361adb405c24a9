"""
Pydantic models for Jira issue API payloads.

Re-exports the most used models for easier imports.
"""

from .base import ApiModel
from .constants import (  # noqa: F401 - Keep constants available
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DEFAULT_KEY,
    NONE_VALUE,
    UNASSIGNED,
    UNKNOWN,
)
from .jira import (
    BasicIssue,
    BulkOperationResult,
    CustomField,
    IssueInput,
    JiraIssue,
    JiraTransition,
    JiraUser,
    ResourceKind,
    ResourceLocator,
    SpecialAssignee,
    StandardField,
    TransitionInput,
)

__all__ = [
    "ApiModel",
    "BasicIssue",
    "BulkOperationResult",
    "CustomField",
    "IssueInput",
    "JiraIssue",
    "JiraTransition",
    "JiraUser",
    "ResourceKind",
    "ResourceLocator",
    "SpecialAssignee",
    "StandardField",
    "TransitionInput",
]
