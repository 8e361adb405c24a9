"""Jira API module for jira_issue_client.

This module composes the issue client from per-concern mixins.
"""

# flake8: noqa

from .attachments import AttachmentsMixin
from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .fields import FieldsMixin
from .issues import IssuesMixin
from .links import LinksMixin
from .transitions import TransitionsMixin
from .users import UsersMixin
from .votes import VotesMixin
from .watchers import WatchersMixin
from .worklog import WorklogMixin


class JiraIssueClient(
    IssuesMixin,
    TransitionsMixin,
    FieldsMixin,
    UsersMixin,
    WatchersMixin,
    VotesMixin,
    CommentsMixin,
    WorklogMixin,
    AttachmentsMixin,
    LinksMixin,
):
    """
    The Jira issue client providing access to all issue operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Issue read, creation (single and bulk) and deletion
    - TransitionsMixin: Workflow transition discovery and application
    - FieldsMixin: Field edits, labels and create metadata
    - UsersMixin: Current user, assignable users and assignment
    - WatchersMixin: Watcher operations
    - VotesMixin: Vote operations
    - CommentsMixin: Comment operations
    - WorklogMixin: Worklog operations
    - AttachmentsMixin: Attachment uploads
    - LinksMixin: Issue links and link types
    """

    pass


__all__ = ["JiraIssueClient", "JiraConfig", "JiraClient"]
