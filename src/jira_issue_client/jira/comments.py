"""Module for Jira comment operations."""

import logging

from ..exceptions import JiraValidationError
from ..models.jira import (
    BasicIssue,
    CommentInput,
    JiraComment,
    ResourceKind,
    ResourceLocator,
)
from .client import JiraClient

logger = logging.getLogger("jira-issues")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def add_comment(
        self,
        target: ResourceLocator | BasicIssue,
        comment: CommentInput | str,
    ) -> JiraComment:
        """
        Add a comment to an issue.

        Args:
            target: The issue's comment locator, or the issue itself
            comment: The comment body, or a CommentInput with visibility

        Returns:
            The created comment

        Raises:
            JiraValidationError: If the body is empty
        """
        if isinstance(comment, str):
            comment = CommentInput(body=comment)
        if not comment.body.strip():
            raise JiraValidationError("Comment body must not be empty")

        locator = self._resolve_locator(target, ResourceKind.COMMENTS)
        response = self._request(
            "post", locator, action="adding comment", data=comment.to_api_payload()
        )
        return JiraComment.from_api_response(
            self._expect_dict(response, "add comment")
        )
