"""
Write-side payloads.

Input models are never returned by the server; they are built by callers and
turned into REST payloads by the client.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from ...exceptions import JiraValidationError
from ..base import ApiModel
from .metadata import JiraFieldMeta, format_write_value


class StandardField(str, Enum):
    """Ids of the system fields every Jira instance has."""

    SUMMARY = "summary"
    DESCRIPTION = "description"
    ENVIRONMENT = "environment"
    PROJECT = "project"
    ISSUE_TYPE = "issuetype"
    PARENT = "parent"
    PRIORITY = "priority"
    ASSIGNEE = "assignee"
    REPORTER = "reporter"
    LABELS = "labels"
    COMPONENTS = "components"
    FIX_VERSIONS = "fixVersions"
    AFFECTS_VERSIONS = "versions"
    DUE_DATE = "duedate"
    RESOLUTION = "resolution"
    SECURITY = "security"


# Schema type and item type of each standard field, as reported by editmeta
STANDARD_FIELD_SCHEMAS: dict[StandardField, tuple[str, str | None]] = {
    StandardField.SUMMARY: ("string", None),
    StandardField.DESCRIPTION: ("string", None),
    StandardField.ENVIRONMENT: ("string", None),
    StandardField.PROJECT: ("project", None),
    StandardField.ISSUE_TYPE: ("issuetype", None),
    StandardField.PARENT: ("parent", None),
    StandardField.PRIORITY: ("priority", None),
    StandardField.ASSIGNEE: ("user", None),
    StandardField.REPORTER: ("user", None),
    StandardField.LABELS: ("array", "string"),
    StandardField.COMPONENTS: ("array", "component"),
    StandardField.FIX_VERSIONS: ("array", "version"),
    StandardField.AFFECTS_VERSIONS: ("array", "version"),
    StandardField.DUE_DATE: ("date", None),
    StandardField.RESOLUTION: ("resolution", None),
    StandardField.SECURITY: ("securitylevel", None),
}


@dataclass(frozen=True)
class CustomField:
    """A custom field referenced by its display name."""

    name: str

    def __str__(self) -> str:
        return self.name


FieldKey = StandardField | CustomField


class SpecialAssignee(str, Enum):
    """Assignee values that are not users."""

    AUTOMATIC = "automatic"  # let the project's default assignee rule decide
    UNASSIGNED = "unassigned"


class AdjustEstimate(str, Enum):
    """How logging work changes the remaining estimate."""

    AUTO = "auto"
    LEAVE = "leave"
    NEW = "new"
    MANUAL = "manual"


def _field_id(key: StandardField | str) -> str:
    if isinstance(key, StandardField):
        return key.value
    if isinstance(key, str) and key:
        return key
    raise TypeError(f"Field keys are StandardField members or field ids, not {key!r}")


class IssueInput(ApiModel):
    """
    Field values for creating an issue.

    An omitted field has no key in ``fields``; an explicitly cleared field
    maps to ``None``. Builders return a new instance.

    Example:
        IssueInput.create("PROJ", "Bug", "Crash on save").with_field(
            StandardField.LABELS, ["crash"]
        )
    """

    fields: dict[str, Any] = {}
    update: dict[str, list[dict[str, Any]]] = {}

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "IssueInput":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            fields=dict(data.get("fields") or {}),
            update=dict(data.get("update") or {}),
        )

    @classmethod
    def create(
        cls, project_key: str, issue_type: str, summary: str, **fields: Any
    ) -> "IssueInput":
        """Build the input for the common case: project, type and summary.

        Extra keyword arguments are field ids mapped to values.
        """
        values: dict[str, Any] = {
            StandardField.PROJECT.value: project_key,
            StandardField.ISSUE_TYPE.value: issue_type,
            StandardField.SUMMARY.value: summary,
        }
        values.update(fields)
        return cls(fields=values)

    def with_field(self, key: StandardField | str, value: Any) -> "IssueInput":
        fields = {**self.fields, _field_id(key): value}
        return self.model_copy(update={"fields": fields})

    def clear_field(self, key: StandardField | str) -> "IssueInput":
        return self.with_field(key, None)

    def without_field(self, key: StandardField | str) -> "IssueInput":
        field_id = _field_id(key)
        return self.model_copy(
            update={"fields": {k: v for k, v in self.fields.items() if k != field_id}}
        )

    def is_set(self, key: StandardField | str) -> bool:
        """True when the field is present, including explicitly cleared."""
        return _field_id(key) in self.fields

    def is_cleared(self, key: StandardField | str) -> bool:
        field_id = _field_id(key)
        return field_id in self.fields and self.fields[field_id] is None

    def get(self, key: StandardField | str, default: Any = None) -> Any:
        return self.fields.get(_field_id(key), default)

    def to_api_payload(self, is_cloud: bool = False) -> dict[str, Any]:
        """
        Build the REST payload.

        Standard field values given as plain Python values are shaped the way
        Jira expects them; custom field values are sent as given.

        Args:
            is_cloud: Whether users are referenced by ``accountId``

        Returns:
            The ``{"fields": ..., "update": ...}`` payload

        Raises:
            JiraValidationError: If a standard field value does not fit the
                field's type or cannot be formatted
        """
        fields: dict[str, Any] = {}
        for field_id, value in self.fields.items():
            try:
                schema_type, items = STANDARD_FIELD_SCHEMAS[StandardField(field_id)]
            except ValueError:
                fields[field_id] = value
                continue
            meta = JiraFieldMeta(
                id=field_id, name=field_id, schema_type=schema_type, schema_items=items
            )
            if not meta.accepts(value):
                expected = (
                    f"array of {items}" if schema_type == "array" else schema_type
                )
                raise JiraValidationError(
                    f"Field {field_id} expects a value of type {expected}, "
                    f"got {type(value).__name__}",
                    errors={field_id: f"Expected {expected}"},
                )
            try:
                fields[field_id] = format_write_value(
                    schema_type, value, items=items, is_cloud=is_cloud
                )
            except (TypeError, ValueError, OverflowError) as e:
                raise JiraValidationError(
                    f"Field {field_id} has an invalid value: {e}",
                    errors={field_id: str(e)},
                ) from e

        payload: dict[str, Any] = {"fields": fields}
        if self.update:
            payload["update"] = self.update
        return payload


class TransitionInput(ApiModel):
    """
    The transition to apply, with screen field values and an optional comment.
    """

    id: str | int | None = None
    fields: dict[str, Any] = {}
    comment: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "TransitionInput":
        raise NotImplementedError("TransitionInput is write-only")

    @property
    def transition_id(self) -> str | None:
        if self.id is None or str(self.id).strip() == "":
            return None
        return str(self.id).strip()

    def to_api_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"transition": {"id": self.transition_id}}
        if self.fields:
            payload["fields"] = self.fields
        if self.comment:
            payload["update"] = {"comment": [{"add": {"body": self.comment}}]}
        return payload


class CommentInput(ApiModel):
    """
    A new comment. Visibility restricts it to a project role or a group.
    """

    body: str
    visibility_type: str | None = None  # "role" or "group"
    visibility_value: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "CommentInput":
        raise NotImplementedError("CommentInput is write-only")

    def to_api_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"body": self.body}
        if self.visibility_type and self.visibility_value:
            payload["visibility"] = {
                "type": self.visibility_type,
                "value": self.visibility_value,
            }
        return payload


class WorklogInput(ApiModel):
    """
    Time to log against an issue.

    ``new_estimate`` is required with ``AdjustEstimate.NEW`` and
    ``reduce_by`` with ``AdjustEstimate.MANUAL``.
    """

    time_spent: str
    started: datetime | None = None
    comment: str | None = None
    adjust_estimate: AdjustEstimate = AdjustEstimate.AUTO
    new_estimate: str | None = None
    reduce_by: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "WorklogInput":
        raise NotImplementedError("WorklogInput is write-only")


class LinkIssuesInput(ApiModel):
    """
    A link from one issue to another, e.g. ``PROJ-1`` blocks ``PROJ-2``.
    """

    from_issue_key: str
    to_issue_key: str
    link_type: str
    comment: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "LinkIssuesInput":
        raise NotImplementedError("LinkIssuesInput is write-only")

    def to_api_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": {"name": self.link_type},
            "inwardIssue": {"key": self.from_issue_key},
            "outwardIssue": {"key": self.to_issue_key},
        }
        if self.comment:
            payload["comment"] = {"body": self.comment}
        return payload
