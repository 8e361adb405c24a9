"""
Jira workflow models.

Transitions are discovered per issue and per call; their ids and target
statuses are workflow configuration and never hardcoded.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID
from .common import JiraStatus
from .metadata import JiraFieldMeta, parse_field_metas

logger = logging.getLogger(__name__)


class JiraTransition(ApiModel):
    """
    Model representing a transition currently available on an issue.

    ``fields`` describes the transition screen: which fields may be set and
    which are required. It is only populated when the transitions were
    fetched with ``expand=transitions.fields``.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    to_status: JiraStatus | None = None
    has_screen: bool = False
    is_global: bool = False
    is_initial: bool = False
    is_conditional: bool = False
    fields: list[JiraFieldMeta] = []

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTransition":
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary transition data")
            return cls()

        to_status = None
        if isinstance(to := data.get("to"), dict):
            to_status = JiraStatus.from_api_response(to)

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", EMPTY_STRING)),
            to_status=to_status,
            has_screen=bool(data.get("hasScreen", False)),
            is_global=bool(data.get("isGlobal", False)),
            is_initial=bool(data.get("isInitial", False)),
            is_conditional=bool(data.get("isConditional", False)),
            fields=parse_field_metas(data.get("fields")),
        )

    @property
    def required_fields(self) -> list[JiraFieldMeta]:
        """Fields the caller must supply: required and without a default."""
        return [f for f in self.fields if f.required and not f.has_default_value]

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.to_status:
            result["to_status"] = self.to_status.to_simplified_dict()
        if self.fields:
            result["fields"] = [f.to_simplified_dict() for f in self.fields]
        return result
