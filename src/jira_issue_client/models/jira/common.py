"""
Common Jira entity models.

Users, statuses, issue types, priorities and attachments appear inside
issues, transitions, watcher and voter lists alike.
"""

import logging
from datetime import datetime
from typing import Any

from ...utils import parse_date
from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    NONE_VALUE,
    UNASSIGNED,
    UNKNOWN,
)

logger = logging.getLogger(__name__)


def _string_id(data: dict[str, Any]) -> str:
    """Jira returns ids as strings or integers; normalize to string."""
    value = data.get("id", JIRA_DEFAULT_ID)
    return str(value) if value is not None else JIRA_DEFAULT_ID


class JiraUser(ApiModel):
    """
    Model representing a Jira user.

    Cloud identifies users by ``account_id``; Server/Data Center by
    ``name`` (the username) and ``key``.
    """

    account_id: str | None = None
    name: str | None = None
    key: str | None = None
    display_name: str = UNASSIGNED
    email: str | None = None
    active: bool = True

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            account_id=data.get("accountId"),
            name=data.get("name"),
            key=data.get("key"),
            display_name=str(data.get("displayName", UNASSIGNED)),
            email=data.get("emailAddress"),
            active=bool(data.get("active", True)),
        )

    @property
    def identifier(self) -> str | None:
        """The identifier Jira expects in write payloads for this user."""
        return self.account_id or self.name or self.key

    def matches(self, user: str) -> bool:
        """Check whether ``user`` names this user by any of its identifiers."""
        return user in {self.account_id, self.name, self.key} - {None}

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"display_name": self.display_name}
        if self.identifier:
            result["id"] = self.identifier
        if self.email:
            result["email"] = self.email
        return result


class JiraStatusCategory(ApiModel):
    """
    Model representing a Jira status category.
    """

    id: int = 0
    key: str = EMPTY_STRING
    name: str = UNKNOWN

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraStatusCategory":
        if not data or not isinstance(data, dict):
            return cls()

        try:
            category_id = int(data.get("id", 0) or 0)
        except (ValueError, TypeError):
            category_id = 0

        return cls(
            id=category_id,
            key=str(data.get("key", EMPTY_STRING)),
            name=str(data.get("name", UNKNOWN)),
        )


class JiraStatus(ApiModel):
    """
    Model representing a Jira issue status.

    Status names are workflow configuration; the client never interprets them.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    description: str | None = None
    category: JiraStatusCategory | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraStatus":
        if not data or not isinstance(data, dict):
            return cls()

        category = None
        if category_data := data.get("statusCategory"):
            category = JiraStatusCategory.from_api_response(category_data)

        return cls(
            id=_string_id(data),
            name=str(data.get("name", UNKNOWN)),
            description=data.get("description"),
            category=category,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.category:
            result["category"] = self.category.name
        return result


class JiraIssueType(ApiModel):
    """
    Model representing a Jira issue type.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    subtask: bool = False

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssueType":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=_string_id(data),
            name=str(data.get("name", UNKNOWN)),
            subtask=bool(data.get("subtask", False)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"name": self.name}


class JiraPriority(ApiModel):
    """
    Model representing a Jira priority.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = NONE_VALUE

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraPriority":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(id=_string_id(data), name=str(data.get("name", NONE_VALUE)))

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"name": self.name}


class JiraAttachment(ApiModel):
    """
    Model representing a file attached to an issue.
    """

    id: str = JIRA_DEFAULT_ID
    filename: str = EMPTY_STRING
    size: int = 0
    content_type: str | None = None
    created: datetime | None = None
    author: JiraUser | None = None
    url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraAttachment":
        if not data or not isinstance(data, dict):
            return cls()

        author = None
        if author_data := data.get("author"):
            author = JiraUser.from_api_response(author_data)

        try:
            size = int(data.get("size", 0) or 0)
        except (ValueError, TypeError):
            size = 0

        return cls(
            id=_string_id(data),
            filename=str(data.get("filename", EMPTY_STRING)),
            size=size,
            content_type=data.get("mimeType"),
            created=parse_date(data.get("created")),
            author=author,
            url=data.get("content"),  # download URL
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "filename": self.filename,
            "size": self.size,
        }
        if self.url:
            result["url"] = self.url
        if self.content_type:
            result["content_type"] = self.content_type
        if self.author:
            result["author"] = self.author.to_simplified_dict()
        return result
