"""
Jira comment models.
"""

import logging
from datetime import datetime
from typing import Any

from ...utils import parse_date
from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraComment(ApiModel):
    """
    Model representing one comment on an issue.

    ``visibility`` is the ``{"type": "role"|"group", "value": name}``
    restriction when the comment is not public.
    """

    id: str = JIRA_DEFAULT_ID
    body: str = EMPTY_STRING
    author: JiraUser | None = None
    created: datetime | None = None
    updated: datetime | None = None
    visibility: dict[str, str] | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary comment data")
            return cls()

        author = None
        if author_data := data.get("author"):
            author = JiraUser.from_api_response(author_data)

        visibility = data.get("visibility")
        if not isinstance(visibility, dict):
            visibility = None

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            body=str(data.get("body") or EMPTY_STRING),
            author=author,
            created=parse_date(data.get("created")),
            updated=parse_date(data.get("updated")),
            visibility=visibility,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "body": self.body}
        if self.author:
            result["author"] = self.author.display_name
        if self.created:
            result["created"] = self.created.isoformat()
        if self.visibility:
            result["visibility"] = self.visibility
        return result
