"""Module for Jira vote operations."""

import logging

from ..exceptions import JiraConflictError
from ..models.jira import BasicIssue, JiraVotes, ResourceKind, ResourceLocator
from .client import JiraClient

logger = logging.getLogger("jira-issues")


class VotesMixin(JiraClient):
    """Mixin for Jira vote operations.

    The current vote state is read before voting, so voting twice or
    unvoting without a vote raises :class:`JiraConflictError`.
    """

    def get_votes(self, target: ResourceLocator | BasicIssue) -> JiraVotes:
        """
        Get the votes of an issue.

        Args:
            target: The issue's votes locator, or the issue itself

        Returns:
            The vote count, whether the caller voted and, when visible, voters
        """
        locator = self._resolve_locator(target, ResourceKind.VOTES)
        response = self._request("get", locator, action="getting votes")
        return JiraVotes.from_api_response(self._expect_dict(response, "get votes"))

    def vote(self, target: ResourceLocator | BasicIssue) -> None:
        """
        Vote for an issue as the authenticated user.

        Raises:
            JiraConflictError: If the user already voted
        """
        locator = self._resolve_locator(target, ResourceKind.VOTES)
        if self.get_votes(locator).has_voted:
            raise JiraConflictError("Already voted for this issue")
        self._request("post", locator, action="voting")

    def unvote(self, target: ResourceLocator | BasicIssue) -> None:
        """
        Withdraw the authenticated user's vote.

        Raises:
            JiraConflictError: If the user has not voted
        """
        locator = self._resolve_locator(target, ResourceKind.VOTES)
        if not self.get_votes(locator).has_voted:
            raise JiraConflictError("Not voted for this issue")
        self._request("delete", locator, action="removing vote")
