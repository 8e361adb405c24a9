"""
Jira issue link models.
"""

from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN


class JiraIssueLinkType(ApiModel):
    """
    A link type configured on the server, e.g. ``Blocks``.

    ``outward`` is the phrase read from the linking issue ("blocks"),
    ``inward`` the phrase read from the linked one ("is blocked by").
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    inward: str = EMPTY_STRING
    outward: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueLinkType":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", UNKNOWN)),
            inward=str(data.get("inward", EMPTY_STRING)),
            outward=str(data.get("outward", EMPTY_STRING)),
        )


class JiraIssueLink(ApiModel):
    """
    A link embedded in an issue's ``issuelinks`` field, seen from that issue.
    """

    id: str = JIRA_DEFAULT_ID
    type: JiraIssueLinkType | None = None
    direction: str = "outward"
    issue_key: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssueLink":
        if not data or not isinstance(data, dict):
            return cls()

        link_type = None
        if type_data := data.get("type"):
            link_type = JiraIssueLinkType.from_api_response(type_data)

        if outward := data.get("outwardIssue"):
            direction, other = "outward", outward
        else:
            direction, other = "inward", data.get("inwardIssue") or {}

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            type=link_type,
            direction=direction,
            issue_key=str(other.get("key", EMPTY_STRING)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        phrase = EMPTY_STRING
        if self.type:
            phrase = getattr(self.type, self.direction)
        return {"type": phrase, "issue": self.issue_key}
