"""
Jira issue representations.

A :class:`JiraIssue` is an immutable snapshot of an issue at fetch time.
Mutating operations never update it; callers fetch the issue again to see
the new state.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import ConfigDict

from ...exceptions import JiraValidationError
from ...utils import parse_date
from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .comment import JiraComment
from .common import JiraAttachment, JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .link import JiraIssueLink
from .locator import ResourceKind, ResourceLocator, locator_from_self
from .watchers import JiraBasicVotes, JiraBasicWatchers

logger = logging.getLogger(__name__)


class BasicIssue(ApiModel):
    """
    The minimal view of an issue: id, key and the issue's own locator.

    Returned when an issue is created.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    self_locator: ResourceLocator | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "BasicIssue":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            self_locator=locator_from_self(ResourceKind.ISSUE, data),
        )

    def locator(self, kind: ResourceKind = ResourceKind.ISSUE) -> ResourceLocator:
        """
        Get the locator of this issue or of one of its sub-resources.

        Args:
            kind: The kind of resource to locate

        Returns:
            The resource locator

        Raises:
            JiraValidationError: If the representation carries no ``self`` link
        """
        if self.self_locator is None:
            raise JiraValidationError(
                f"Issue {self.key} has no self link to derive locators from"
            )
        if kind is ResourceKind.ISSUE:
            return self.self_locator
        return self.self_locator.child(kind)

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"id": self.id, "key": self.key}


class JiraIssue(BasicIssue):
    """
    Full issue snapshot as returned by ``GET issue/{key}``.

    Custom fields are keyed by display name (taken from the ``names``
    expansion, or the field id when the name is unknown). ``custom_field_ids``
    maps those names back to ids.
    """

    summary: str = EMPTY_STRING
    description: str | None = None
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    labels: list[str] = []
    project_key: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    parent_key: str | None = None
    subtask_keys: list[str] = []
    watchers: JiraBasicWatchers | None = None
    votes: JiraBasicVotes | None = None
    comments: list[JiraComment] = []
    attachments: list[JiraAttachment] = []
    issue_links: list[JiraIssueLink] = []
    fields: dict[str, Any] = {}
    custom_fields: dict[str, Any] = {}
    custom_field_ids: dict[str, str] = {}

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data, ideally fetched with ``expand=names``

        Returns:
            A JiraIssue instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue data")
            return cls()

        fields = data.get("fields") or {}
        names = data.get("names") or {}

        standard: dict[str, Any] = {}
        custom_fields: dict[str, Any] = {}
        custom_field_ids: dict[str, str] = {}
        for field_id, value in fields.items():
            if not field_id.startswith("customfield_"):
                standard[field_id] = value
                continue
            name = names.get(field_id) or field_id
            if name in custom_fields:
                # Two custom fields share a display name; keep both reachable
                name = field_id
            custom_fields[name] = value
            custom_field_ids[name] = field_id

        def _model(model: type[ApiModel], key: str) -> Any:
            value = fields.get(key)
            return model.from_api_response(value) if isinstance(value, dict) else None

        comment_data = fields.get("comment") or {}
        comments = [
            JiraComment.from_api_response(c)
            for c in comment_data.get("comments", [])
            if isinstance(c, dict)
        ]
        parent = fields.get("parent") or {}

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            self_locator=locator_from_self(ResourceKind.ISSUE, data),
            summary=str(fields.get("summary") or EMPTY_STRING),
            description=fields.get("description"),
            status=_model(JiraStatus, "status"),
            issue_type=_model(JiraIssueType, "issuetype"),
            priority=_model(JiraPriority, "priority"),
            assignee=_model(JiraUser, "assignee"),
            reporter=_model(JiraUser, "reporter"),
            labels=[str(label) for label in fields.get("labels") or []],
            project_key=(fields.get("project") or {}).get("key"),
            created=parse_date(fields.get("created")),
            updated=parse_date(fields.get("updated")),
            parent_key=parent.get("key"),
            subtask_keys=[
                str(s["key"]) for s in fields.get("subtasks") or [] if "key" in s
            ],
            watchers=_model(JiraBasicWatchers, "watches"),
            votes=_model(JiraBasicVotes, "votes"),
            comments=comments,
            attachments=[
                JiraAttachment.from_api_response(a)
                for a in fields.get("attachment") or []
            ],
            issue_links=[
                JiraIssueLink.from_api_response(link)
                for link in fields.get("issuelinks") or []
            ],
            fields=standard,
            custom_fields=custom_fields,
            custom_field_ids=custom_field_ids,
        )

    def locator(self, kind: ResourceKind = ResourceKind.ISSUE) -> ResourceLocator:
        """
        Get a sub-resource locator, preferring the links embedded in the
        representation over derivation from the issue's own link.
        """
        if kind is ResourceKind.WATCHERS and self.watchers and self.watchers.locator:
            return self.watchers.locator
        if kind is ResourceKind.VOTES and self.votes and self.votes.locator:
            return self.votes.locator
        return super().locator(kind)

    def get_custom_field(self, name: str, default: Any = None) -> Any:
        """Get a custom field value by display name or field id."""
        if name in self.custom_fields:
            return self.custom_fields[name]
        for field_name, field_id in self.custom_field_ids.items():
            if field_id == name:
                return self.custom_fields[field_name]
        return default

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "key": self.key,
            "summary": self.summary,
        }
        if self.description:
            result["description"] = self.description
        if self.status:
            result["status"] = self.status.to_simplified_dict()
        if self.issue_type:
            result["issue_type"] = self.issue_type.to_simplified_dict()
        if self.priority:
            result["priority"] = self.priority.to_simplified_dict()
        result["assignee"] = (
            self.assignee.to_simplified_dict() if self.assignee else None
        )
        if self.reporter:
            result["reporter"] = self.reporter.to_simplified_dict()
        if self.project_key:
            result["project"] = self.project_key
        result["labels"] = self.labels
        if self.created:
            result["created"] = self.created.isoformat()
        if self.updated:
            result["updated"] = self.updated.isoformat()
        if self.parent_key:
            result["parent"] = self.parent_key
        if self.subtask_keys:
            result["subtasks"] = self.subtask_keys
        if self.watchers:
            result["watchers"] = self.watchers.to_simplified_dict()
        if self.votes:
            result["votes"] = self.votes.to_simplified_dict()
        if self.comments:
            result["comments"] = [c.to_simplified_dict() for c in self.comments]
        if self.attachments:
            result["attachments"] = [a.to_simplified_dict() for a in self.attachments]
        if self.issue_links:
            result["issue_links"] = [
                link.to_simplified_dict() for link in self.issue_links
            ]
        if self.custom_fields:
            result["custom_fields"] = self.custom_fields
        return result
