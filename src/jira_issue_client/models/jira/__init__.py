"""
Jira data models for the issue client.

Read models convert REST payloads; input models build them; locators
reference sub-resources of an issue without exposing their URIs.
"""

from .bulk import BulkOperationFailure, BulkOperationItem, BulkOperationResult
from .comment import JiraComment
from .common import (
    JiraAttachment,
    JiraIssueType,
    JiraPriority,
    JiraStatus,
    JiraStatusCategory,
    JiraUser,
)
from .input import (
    AdjustEstimate,
    CommentInput,
    CustomField,
    FieldKey,
    IssueInput,
    LinkIssuesInput,
    SpecialAssignee,
    StandardField,
    TransitionInput,
    WorklogInput,
)
from .issue import BasicIssue, JiraIssue
from .link import JiraIssueLink, JiraIssueLinkType
from .locator import ResourceKind, ResourceLocator
from .metadata import (
    CimIssueType,
    CimProject,
    CreateIssueMetadataOptions,
    JiraFieldMeta,
)
from .watchers import JiraBasicVotes, JiraBasicWatchers, JiraVotes, JiraWatchers
from .workflow import JiraTransition
from .worklog import JiraWorklog

__all__ = [
    # Common models
    "JiraUser",
    "JiraStatusCategory",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    "JiraAttachment",
    # Issues and their sub-resources
    "BasicIssue",
    "JiraIssue",
    "JiraComment",
    "JiraWorklog",
    "JiraBasicWatchers",
    "JiraWatchers",
    "JiraBasicVotes",
    "JiraVotes",
    "JiraIssueLink",
    "JiraIssueLinkType",
    "JiraTransition",
    "ResourceKind",
    "ResourceLocator",
    # Metadata
    "JiraFieldMeta",
    "CimProject",
    "CimIssueType",
    "CreateIssueMetadataOptions",
    # Inputs
    "IssueInput",
    "TransitionInput",
    "CommentInput",
    "WorklogInput",
    "LinkIssuesInput",
    "StandardField",
    "CustomField",
    "FieldKey",
    "SpecialAssignee",
    "AdjustEstimate",
    # Bulk results
    "BulkOperationFailure",
    "BulkOperationItem",
    "BulkOperationResult",
]
