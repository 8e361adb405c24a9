"""
Jira worklog models.
"""

from datetime import datetime
from typing import Any

from ...utils import parse_date
from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraUser


class JiraWorklog(ApiModel):
    """
    Model representing time logged against an issue.
    """

    id: str = JIRA_DEFAULT_ID
    author: JiraUser | None = None
    comment: str | None = None
    started: datetime | None = None
    time_spent: str = EMPTY_STRING
    time_spent_seconds: int = 0

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraWorklog":
        if not data or not isinstance(data, dict):
            return cls()

        author = None
        if author_data := data.get("author"):
            author = JiraUser.from_api_response(author_data)

        try:
            seconds = int(data.get("timeSpentSeconds") or 0)
        except (ValueError, TypeError):
            seconds = 0

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            author=author,
            comment=data.get("comment"),
            started=parse_date(data.get("started")),
            time_spent=str(data.get("timeSpent", EMPTY_STRING)),
            time_spent_seconds=seconds,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "time_spent": self.time_spent,
            "time_spent_seconds": self.time_spent_seconds,
        }
        if self.author:
            result["author"] = self.author.display_name
        if self.started:
            result["started"] = self.started.isoformat()
        if self.comment:
            result["comment"] = self.comment
        return result
