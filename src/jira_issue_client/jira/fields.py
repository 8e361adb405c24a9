"""Module for Jira field edits and field metadata."""

import logging
from typing import Any

from thefuzz import fuzz

from ..exceptions import JiraNotFoundError, JiraValidationError
from ..models.jira import (
    BasicIssue,
    CimProject,
    CreateIssueMetadataOptions,
    CustomField,
    FieldKey,
    JiraFieldMeta,
    ResourceKind,
    ResourceLocator,
    StandardField,
)
from ..models.jira.metadata import format_write_value, parse_field_metas
from .client import JiraClient

logger = logging.getLogger("jira-issues")

# Minimum fuzzy score for a field name to be offered as a suggestion
SUGGESTION_THRESHOLD = 60


class FieldsMixin(JiraClient):
    """Mixin for Jira field operations.

    Edit metadata is fetched from the issue on every call; nothing about
    the server's field configuration is cached.
    """

    def get_edit_metadata(
        self, target: ResourceLocator | BasicIssue
    ) -> list[JiraFieldMeta]:
        """
        Get the fields the caller may edit on an issue.

        Args:
            target: The issue's editmeta locator, or the issue itself

        Returns:
            Metadata of every editable field
        """
        locator = self._resolve_locator(target, ResourceKind.EDITMETA)
        response = self._request("get", locator, action="getting edit metadata")
        response = self._expect_dict(response, "get edit metadata")
        return parse_field_metas(response.get("fields"))

    def _find_field(
        self, metas: list[JiraFieldMeta], field_key: FieldKey
    ) -> JiraFieldMeta:
        if isinstance(field_key, StandardField):
            meta = next((m for m in metas if m.id == field_key.value), None)
            if meta is None:
                raise JiraValidationError(
                    f"Field {field_key.value} is not editable on this issue",
                    errors={field_key.value: "Field is not editable"},
                )
            return meta

        name = field_key.name
        matches = [
            m for m in metas if m.is_custom and name.lower() in (m.name.lower(), m.id)
        ]
        if len(matches) > 1:
            ids = ", ".join(m.id for m in matches)
            raise JiraValidationError(
                f"Custom field name {name!r} is ambiguous ({ids}); use the field id"
            )
        if matches:
            return matches[0]

        suggestions = self._suggest_field_names(name, metas)
        message = f"No editable custom field named {name!r}"
        if suggestions:
            message += f". Did you mean: {', '.join(suggestions)}?"
        raise JiraNotFoundError(message)

    @staticmethod
    def _suggest_field_names(
        name: str, metas: list[JiraFieldMeta], limit: int = 3
    ) -> list[str]:
        scored = sorted(
            ((fuzz.partial_ratio(name.lower(), m.name.lower()), m.name) for m in metas),
            reverse=True,
        )
        return [
            field_name
            for score, field_name in scored[:limit]
            if score >= SUGGESTION_THRESHOLD
        ]

    def edit_field(
        self, issue: BasicIssue, field_key: FieldKey | str, value: Any
    ) -> None:
        """
        Set one field of an issue.

        Args:
            issue: The issue to edit
            field_key: A standard field, or a custom field by display name
                (a plain string is taken as a custom field name)
            value: The new value, as a Python value; ``None`` clears the field

        Raises:
            JiraNotFoundError: If no custom field has that name
            JiraValidationError: If the field is not editable, the value does
                not match the field's type, or a required field would be cleared
        """
        if isinstance(field_key, str) and not isinstance(field_key, StandardField):
            field_key = CustomField(field_key)

        meta = self._find_field(self.get_edit_metadata(issue), field_key)

        if value is None and meta.required:
            raise JiraValidationError(
                f"Field {meta.name} is required and cannot be cleared",
                errors={meta.id: "Field is required"},
            )
        if not meta.accepts(value):
            raise JiraValidationError(
                f"Invalid value for field {meta.name}: expected {meta.schema_type}"
                + (f" of {meta.schema_items}" if meta.schema_items else ""),
                errors={meta.id: f"Expected {meta.schema_type}"},
            )
        if meta.operations and "set" not in meta.operations:
            raise JiraValidationError(
                f"Field {meta.name} cannot be set, only: {', '.join(meta.operations)}"
            )

        formatted = format_write_value(
            meta.schema_type,
            value,
            items=meta.schema_items,
            is_cloud=self.config.is_cloud,
        )
        self._update_issue(
            issue,
            {meta.id: [{"set": formatted}]},
            action=f"editing field {meta.name} of {issue.key}",
        )
        logger.info(f"Updated field {meta.id} of {issue.key}")

    def _update_issue(
        self, issue: BasicIssue, update: dict[str, Any], action: str
    ) -> None:
        locator = self._resolve_locator(issue, ResourceKind.ISSUE)
        self._request("put", locator, action=action, data={"update": update})

    @staticmethod
    def _check_label(label: str) -> None:
        if not isinstance(label, str) or not label:
            raise JiraValidationError("Label must be a non-empty string")
        if any(char.isspace() for char in label):
            raise JiraValidationError(f"Label {label!r} must not contain whitespace")

    def add_label(self, issue: BasicIssue, label: str) -> None:
        """
        Add a label to an issue. Adding a label the issue already has is a no-op.

        Raises:
            JiraValidationError: If the label is empty or contains whitespace
        """
        self._check_label(label)
        self._update_issue(
            issue,
            {StandardField.LABELS.value: [{"add": label}]},
            action=f"adding label {label} to {issue.key}",
        )

    def remove_label(self, issue: BasicIssue, label: str) -> None:
        """
        Remove a label from an issue. Removing an absent label is a no-op.

        Raises:
            JiraValidationError: If the label is empty or contains whitespace
        """
        self._check_label(label)
        self._update_issue(
            issue,
            {StandardField.LABELS.value: [{"remove": label}]},
            action=f"removing label {label} from {issue.key}",
        )

    def get_create_issue_metadata(
        self, options: CreateIssueMetadataOptions | None = None
    ) -> list[CimProject]:
        """
        Get the projects and issue types the caller may create issues in.

        Args:
            options: Project and issue type filters; all projects with
                field details when omitted

        Returns:
            Create metadata per project
        """
        options = options or CreateIssueMetadataOptions()
        response = self._request(
            "get",
            f"{self.jira.resource_url('issue')}/createmeta",
            action="getting create metadata",
            params=options.to_params(),
        )
        response = self._expect_dict(response, "get create metadata")
        return [
            CimProject.from_api_response(project)
            for project in response.get("projects", [])
            if isinstance(project, dict)
        ]
