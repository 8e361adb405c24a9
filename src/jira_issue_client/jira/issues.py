"""Module for Jira issue operations."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from ..exceptions import (
    JiraIssueClientError,
    JiraValidationError,
    error_class_for_status,
    parse_error_payload,
)
from ..models.jira import (
    BasicIssue,
    BulkOperationFailure,
    BulkOperationItem,
    BulkOperationResult,
    IssueInput,
    JiraIssue,
    StandardField,
)
from .client import JiraClient
from .constants import ISSUE_EXPAND

logger = logging.getLogger("jira-issues")

# Fields without which Jira cannot create any issue
_CREATE_REQUIRED = (
    StandardField.PROJECT,
    StandardField.ISSUE_TYPE,
    StandardField.SUMMARY,
)


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g. PROJ-123)

        Returns:
            A snapshot of the issue; custom fields are keyed by display name

        Raises:
            JiraNotFoundError: If the issue does not exist or is not visible
        """
        response = self._request(
            "get",
            self._issue_path(issue_key),
            action=f"getting issue {issue_key}",
            params={"expand": ISSUE_EXPAND},
        )
        return JiraIssue.from_api_response(
            self._expect_dict(response, f"get issue {issue_key}")
        )

    def _build_issue_payload(self, issue_input: Any) -> dict[str, Any]:
        """Turn one creation input into a REST payload, validating it locally."""
        if isinstance(issue_input, Mapping):
            try:
                issue_input = IssueInput(fields=dict(issue_input))
            except ValidationError as e:
                raise JiraValidationError(f"Invalid issue fields: {e}") from e
        if not isinstance(issue_input, IssueInput):
            raise JiraValidationError(
                f"Expected an IssueInput, got {type(issue_input).__name__}"
            )

        missing = [
            field.value
            for field in _CREATE_REQUIRED
            if issue_input.get(field) in (None, "")
        ]
        if missing:
            raise JiraValidationError(
                f"Missing required fields: {', '.join(missing)}",
                errors={field: "Field is required" for field in missing},
            )
        return issue_input.to_api_payload(is_cloud=self.config.is_cloud)

    def create_issue(self, issue_input: IssueInput) -> BasicIssue:
        """
        Create one issue.

        Args:
            issue_input: The field values of the new issue

        Returns:
            The id, key and locator of the created issue

        Raises:
            JiraValidationError: If the input is incomplete or rejected
            JiraPermissionError: If the caller may not create issues in the project
        """
        payload = self._build_issue_payload(issue_input)
        response = self._request(
            "post",
            self.jira.resource_url("issue"),
            action="creating issue",
            data=payload,
        )
        issue = BasicIssue.from_api_response(
            self._expect_dict(response, "create issue")
        )
        logger.info(f"Created issue {issue.key}")
        return issue

    def create_issues(
        self, batch: Sequence[IssueInput]
    ) -> BulkOperationResult[BasicIssue]:
        """
        Create several issues in one request.

        The result has one slot per input item, in input order. Items that
        cannot be turned into a payload locally fail in their slot and are
        not sent; items the server rejects fail with the error class matching
        the status Jira reports for them.

        Args:
            batch: The issues to create

        Returns:
            The per-item outcome

        Raises:
            JiraTransportError: If the exchange itself failed
            JiraAuthenticationError: If the credentials were rejected
            JiraPermissionError: If the whole request was refused
        """
        slots: list[BulkOperationItem[BasicIssue] | None] = [None] * len(batch)
        sent: list[int] = []
        payloads: list[dict[str, Any]] = []

        for index, issue_input in enumerate(batch):
            try:
                payloads.append(self._build_issue_payload(issue_input))
            except JiraValidationError as e:
                slots[index] = BulkOperationItem(
                    index=index,
                    failure=BulkOperationFailure(
                        index=index,
                        error=e,
                        errors=e.errors,
                        error_messages=e.error_messages,
                    ),
                )
                continue
            sent.append(index)

        if payloads:
            response = self._post_bulk(payloads)
            self._reconcile_bulk(response, sent, slots)

        return BulkOperationResult(items=[slot for slot in slots if slot is not None])

    def _post_bulk(self, payloads: list[dict[str, Any]]) -> dict[str, Any]:
        try:
            response = self._request(
                "post",
                f"{self.jira.resource_url('issue')}/bulk",
                action="creating issues in bulk",
                data={"issueUpdates": payloads},
            )
        except JiraValidationError as e:
            # Jira answers 400 when every item failed; the body is still
            # the per-item report
            payload = e.payload
            if isinstance(payload, dict) and isinstance(payload.get("errors"), list):
                return payload
            raise
        return self._expect_dict(response, "create issues in bulk")

    def _reconcile_bulk(
        self,
        response: dict[str, Any],
        sent: list[int],
        slots: list[BulkOperationItem[BasicIssue] | None],
    ) -> None:
        element_errors: dict[int, dict[str, Any]] = {}
        for error in response.get("errors") or []:
            if not isinstance(error, dict):
                continue
            element = error.get("failedElementNumber")
            if isinstance(element, int) and 0 <= element < len(sent):
                element_errors[element] = error.get("elementErrors") or {}

        created = iter(response.get("issues") or [])
        for position, index in enumerate(sent):
            if position in element_errors:
                slots[index] = self._bulk_failure(index, element_errors[position])
                continue
            issue_data = next(created, None)
            if issue_data is None:
                slots[index] = BulkOperationItem(
                    index=index,
                    failure=BulkOperationFailure(
                        index=index,
                        error=JiraIssueClientError(
                            "No result reported for this item"
                        ),
                    ),
                )
                continue
            slots[index] = BulkOperationItem(
                index=index, value=BasicIssue.from_api_response(issue_data)
            )

        logger.info(
            f"Bulk creation: {len(sent) - len(element_errors)} created, "
            f"{len(slots) - len(sent) + len(element_errors)} failed"
        )

    @staticmethod
    def _bulk_failure(
        index: int, element_errors: dict[str, Any]
    ) -> BulkOperationItem[BasicIssue]:
        status = element_errors.get("status")
        if not isinstance(status, int):
            status = 400
        messages, errors = parse_error_payload(element_errors)
        details = "; ".join(messages + [f"{k}: {v}" for k, v in errors.items()])
        error = error_class_for_status(status)(
            f"Error creating issue at index {index} (HTTP {status}): {details}",
            status_code=status,
            error_messages=messages,
            errors=errors,
            payload=element_errors,
        )
        return BulkOperationItem(
            index=index,
            failure=BulkOperationFailure(
                index=index,
                error=error,
                status=status,
                errors=errors,
                error_messages=messages,
            ),
        )

    def delete_issue(self, issue_key: str, delete_subtasks: bool) -> None:
        """
        Delete an issue.

        Args:
            issue_key: The key of the issue to delete
            delete_subtasks: Whether to delete the issue's subtasks too; an
                issue with subtasks cannot be deleted otherwise

        Raises:
            JiraValidationError: If the issue has subtasks and
                ``delete_subtasks`` is False
            JiraNotFoundError: If the issue does not exist
        """
        self._request(
            "delete",
            self._issue_path(issue_key),
            action=f"deleting issue {issue_key}",
            params={"deleteSubtasks": "true" if delete_subtasks else "false"},
        )
        logger.info(f"Deleted issue {issue_key}")
