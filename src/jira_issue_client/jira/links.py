"""Module for Jira issue link operations."""

import logging

from ..exceptions import JiraValidationError
from ..models.jira import JiraIssueLinkType, LinkIssuesInput
from .client import JiraClient

logger = logging.getLogger("jira-issues")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    def get_issue_link_types(self) -> list[JiraIssueLinkType]:
        """
        Get the link types configured on the server.

        Returns:
            The available link types
        """
        response = self._request(
            "get",
            self.jira.resource_url("issueLinkType"),
            action="getting issue link types",
        )
        response = self._expect_dict(response, "get issue link types")
        return [
            JiraIssueLinkType.from_api_response(link_type)
            for link_type in response.get("issueLinkTypes", [])
        ]

    def link_issue(self, link_input: LinkIssuesInput) -> None:
        """
        Link two issues.

        Args:
            link_input: The two issue keys, the link type name and an
                optional comment

        Raises:
            JiraValidationError: If a key or the link type is missing, or the
                server rejects the link type
            JiraNotFoundError: If either issue does not exist
        """
        missing = [
            name
            for name, value in (
                ("from_issue_key", link_input.from_issue_key),
                ("to_issue_key", link_input.to_issue_key),
                ("link_type", link_input.link_type),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise JiraValidationError(f"Missing link values: {', '.join(missing)}")

        self._request(
            "post",
            self.jira.resource_url("issueLink"),
            action=(
                f"linking {link_input.from_issue_key} to {link_input.to_issue_key}"
            ),
            data=link_input.to_api_payload(),
        )
        logger.info(
            f"Linked {link_input.from_issue_key} {link_input.link_type} "
            f"{link_input.to_issue_key}"
        )
