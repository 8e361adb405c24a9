"""Module for Jira user and assignee operations."""

import logging

from ..exceptions import JiraValidationError
from ..models.jira import BasicIssue, JiraUser, ResourceKind, SpecialAssignee
from .client import JiraClient
from .constants import AUTOMATIC_ASSIGNEE, MAX_RESULTS_CEILING

logger = logging.getLogger("jira-issues")


def clamp_page(start_at: int | None, max_results: int | None) -> tuple[int, int]:
    """
    Validate pagination arguments and clamp the page size.

    Args:
        start_at: 0-based index of the first result, 0 when omitted
        max_results: Page size, the ceiling when omitted

    Returns:
        ``(start_at, max_results)`` with ``max_results`` at most
        ``MAX_RESULTS_CEILING``

    Raises:
        JiraValidationError: If either value is negative
    """
    start_at = 0 if start_at is None else start_at
    max_results = MAX_RESULTS_CEILING if max_results is None else max_results
    if start_at < 0:
        raise JiraValidationError(f"start_at must not be negative, got {start_at}")
    if max_results < 0:
        raise JiraValidationError(
            f"max_results must not be negative, got {max_results}"
        )
    if max_results > MAX_RESULTS_CEILING:
        logger.debug(f"Clamping max_results {max_results} to {MAX_RESULTS_CEILING}")
        max_results = MAX_RESULTS_CEILING
    return start_at, max_results


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_current_user(self) -> JiraUser:
        """
        Get the authenticated user.

        The answer is not cached; each call asks the server.

        Returns:
            The user the client acts as
        """
        response = self._request(
            "get", self.jira.resource_url("myself"), action="getting current user"
        )
        return JiraUser.from_api_response(
            self._expect_dict(response, "get current user")
        )

    def get_assignable_users(
        self,
        issue_key: str,
        start_at: int | None = None,
        max_results: int | None = None,
    ) -> list[JiraUser]:
        """
        Get the users an issue can be assigned to.

        Args:
            issue_key: The issue key
            start_at: 0-based index of the first user
            max_results: Maximum number of users; values above
                ``MAX_RESULTS_CEILING`` are clamped

        Returns:
            At most ``max_results`` (clamped) users

        Raises:
            JiraValidationError: If ``start_at`` or ``max_results`` is negative
        """
        if not issue_key or not issue_key.strip():
            raise JiraValidationError("Issue key is required")
        start_at, max_results = clamp_page(start_at, max_results)

        response = self._request(
            "get",
            f"{self.jira.resource_url('user')}/assignable/search",
            action=f"getting assignable users for {issue_key}",
            params={
                "issueKey": issue_key.strip(),
                "startAt": start_at,
                "maxResults": max_results,
            },
        )
        if not isinstance(response, list):
            response = []
        users = [
            JiraUser.from_api_response(user)
            for user in response
            if isinstance(user, dict)
        ]
        return users[:max_results]

    def assign_to(self, issue: BasicIssue, user: str | SpecialAssignee) -> None:
        """
        Assign an issue.

        Args:
            issue: The issue to assign
            user: The account id (Cloud) or username (Server/DC) of the new
                assignee, ``SpecialAssignee.AUTOMATIC`` for the project's
                default assignee, or ``SpecialAssignee.UNASSIGNED``

        Raises:
            JiraValidationError: If ``user`` is empty or rejected by the server
            JiraNotFoundError: If the user or the issue does not exist
        """
        if user is SpecialAssignee.AUTOMATIC:
            identifier: str | None = AUTOMATIC_ASSIGNEE
        elif user is SpecialAssignee.UNASSIGNED:
            identifier = None
        elif isinstance(user, str) and user.strip():
            identifier = user.strip()
        else:
            raise JiraValidationError("Assignee must be a non-empty user identifier")

        key = "accountId" if self.config.is_cloud else "name"
        locator = self._resolve_locator(issue, ResourceKind.ASSIGNEE)
        self._request(
            "put",
            locator,
            action=f"assigning {issue.key}",
            data={key: identifier},
        )
        logger.info(f"Assigned {issue.key} to {identifier or 'nobody'}")
