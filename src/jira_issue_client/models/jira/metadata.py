"""
Field, edit and create metadata models.

Jira describes writable fields the same way in edit metadata, create
metadata and transition screens: a map of field id to ``required``,
``schema``, ``operations`` and ``allowedValues``.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from ...utils import format_jira_date, format_jira_datetime
from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN
from .common import JiraUser

# Schema types whose values are referenced by name or id in write payloads
NAMED_VALUE_TYPES = frozenset(
    {
        "priority",
        "issuetype",
        "resolution",
        "version",
        "component",
        "securitylevel",
        "project",
        "group",
    }
)


def _accepts_scalar(schema_type: str | None, value: Any) -> bool:
    if isinstance(value, bool):
        return schema_type in (None, "any", "boolean")
    if schema_type in (None, "any"):
        return True
    if schema_type == "string":
        return isinstance(value, str)
    if schema_type == "number":
        return isinstance(value, int | float)
    if schema_type == "date":
        return isinstance(value, date | str)
    if schema_type == "datetime":
        return isinstance(value, datetime | str)
    if schema_type == "user":
        return isinstance(value, str | JiraUser) and bool(value)
    if schema_type == "option" or schema_type in NAMED_VALUE_TYPES:
        return isinstance(value, str | dict)
    # Types without a stable Python mapping (timetracking, issuelinks...)
    return True


def format_write_value(
    schema_type: str | None,
    value: Any,
    *,
    items: str | None = None,
    is_cloud: bool = False,
) -> Any:
    """
    Format a Python value for a write payload according to its schema type.

    Args:
        schema_type: The declared schema type of the field
        value: The value to format; dicts are passed through as-is
        items: The item schema type when ``schema_type`` is ``array``
        is_cloud: Users are referenced by ``accountId`` on Cloud and by
            ``name`` on Server/Data Center

    Returns:
        The value in the shape Jira expects
    """
    if value is None or isinstance(value, dict):
        return value
    if schema_type == "array":
        return [format_write_value(items, item, is_cloud=is_cloud) for item in value]
    if schema_type == "user":
        if isinstance(value, JiraUser):
            value = value.account_id if is_cloud else (value.name or value.key)
        return {"accountId": value} if is_cloud else {"name": value}
    if schema_type == "option":
        return {"value": str(value)}
    if schema_type in ("project", "parent"):
        return {"key": str(value)}
    if schema_type in NAMED_VALUE_TYPES:
        return {"name": str(value)}
    if schema_type == "date":
        return format_jira_date(value)
    if schema_type == "datetime":
        return format_jira_datetime(value)
    return value


class JiraFieldMeta(ApiModel):
    """
    Metadata about one writable field.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    required: bool = False
    has_default_value: bool = False
    schema_type: str | None = None
    schema_items: str | None = None
    schema_custom: str | None = None
    operations: list[str] = []
    allowed_values: list[dict[str, Any]] = []

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraFieldMeta":
        """
        Create field metadata from one entry of a ``fields`` map.

        Args:
            data: The field metadata entry
            **kwargs: ``field_id``, the key of the entry in the map, used when
                the entry carries no ``key``/``fieldId`` of its own

        Returns:
            A JiraFieldMeta instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        field_id = data.get("key") or data.get("fieldId") or kwargs.get("field_id")
        schema = data.get("schema") or {}
        allowed = [v for v in data.get("allowedValues") or [] if isinstance(v, dict)]

        return cls(
            id=str(field_id or JIRA_DEFAULT_ID),
            name=str(data.get("name") or field_id or UNKNOWN),
            required=bool(data.get("required", False)),
            has_default_value=bool(data.get("hasDefaultValue", False)),
            schema_type=schema.get("type"),
            schema_items=schema.get("items"),
            schema_custom=schema.get("custom"),
            operations=[str(op) for op in data.get("operations") or []],
            allowed_values=allowed,
        )

    @property
    def is_custom(self) -> bool:
        return self.id.startswith("customfield_")

    def accepts(self, value: Any) -> bool:
        """Check a Python value against the declared schema type.

        ``None`` is accepted here; whether the field may be cleared is a
        separate question answered by ``required``.
        """
        if value is None:
            return True
        if self.schema_type == "array":
            if not isinstance(value, list | tuple | set | frozenset):
                return False
            return all(_accepts_scalar(self.schema_items, item) for item in value)
        return _accepts_scalar(self.schema_type, value)

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "required": self.required,
        }
        if self.schema_type:
            result["type"] = self.schema_type
        if self.allowed_values:
            result["allowed_values"] = [
                v.get("name") or v.get("value") or v.get("id")
                for v in self.allowed_values
            ]
        return result


def parse_field_metas(fields: Any) -> list[JiraFieldMeta]:
    """Parse a ``{field_id: meta}`` map into a list of field metadata."""
    if not isinstance(fields, dict):
        return []
    return [
        JiraFieldMeta.from_api_response(meta, field_id=field_id)
        for field_id, meta in fields.items()
        if isinstance(meta, dict)
    ]


class CimIssueType(ApiModel):
    """
    Issue type entry of the create metadata, with its creatable fields.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = UNKNOWN
    subtask: bool = False
    fields: list[JiraFieldMeta] = []

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "CimIssueType":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            name=str(data.get("name", UNKNOWN)),
            subtask=bool(data.get("subtask", False)),
            fields=parse_field_metas(data.get("fields")),
        )

    @property
    def required_fields(self) -> list[JiraFieldMeta]:
        return [f for f in self.fields if f.required and not f.has_default_value]

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "fields": [f.to_simplified_dict() for f in self.fields],
        }


class CimProject(ApiModel):
    """
    Project entry of the create metadata.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    issue_types: list[CimIssueType] = []

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "CimProject":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", EMPTY_STRING)),
            name=str(data.get("name", UNKNOWN)),
            issue_types=[
                CimIssueType.from_api_response(it)
                for it in data.get("issuetypes") or []
            ],
        )

    def issue_type(self, name: str) -> CimIssueType | None:
        return next(
            (it for it in self.issue_types if it.name.lower() == name.lower()), None
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "issue_types": [it.to_simplified_dict() for it in self.issue_types],
        }


@dataclass(frozen=True)
class CreateIssueMetadataOptions:
    """Filters for the create metadata request."""

    project_keys: Sequence[str] = field(default_factory=tuple)
    project_ids: Sequence[str] = field(default_factory=tuple)
    issue_type_ids: Sequence[str] = field(default_factory=tuple)
    issue_type_names: Sequence[str] = field(default_factory=tuple)
    expand_fields: bool = True

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.project_keys:
            params["projectKeys"] = ",".join(self.project_keys)
        if self.project_ids:
            params["projectIds"] = ",".join(str(i) for i in self.project_ids)
        if self.issue_type_ids:
            params["issuetypeIds"] = ",".join(str(i) for i in self.issue_type_ids)
        if self.issue_type_names:
            params["issuetypeNames"] = ",".join(self.issue_type_names)
        if self.expand_fields:
            params["expand"] = "projects.issuetypes.fields"
        return params
