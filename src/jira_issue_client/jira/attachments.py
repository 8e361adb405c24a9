"""Attachment operations for Jira API."""

import logging
import os
from pathlib import Path

from ..exceptions import JiraValidationError
from ..models.jira import BasicIssue, JiraAttachment, ResourceKind, ResourceLocator
from .client import JiraClient
from .constants import ATTACHMENT_HEADERS

# Configure logging
logger = logging.getLogger("jira-issues")


class AttachmentsMixin(JiraClient):
    """Mixin for Jira attachment operations."""

    def add_attachment(
        self,
        target: ResourceLocator | BasicIssue,
        file_path: str | os.PathLike[str],
    ) -> list[JiraAttachment]:
        """
        Attach a file to an issue.

        Args:
            target: The issue's attachments locator, or the issue itself
            file_path: Path of the file to upload

        Returns:
            The attachments created by the upload

        Raises:
            JiraValidationError: If the file does not exist
        """
        path = Path(file_path).expanduser()
        if not path.is_file():
            raise JiraValidationError(f"File not found: {file_path}")

        locator = self._resolve_locator(target, ResourceKind.ATTACHMENTS)
        logger.info(f"Uploading attachment {path.name} ({path.stat().st_size} bytes)")
        with path.open("rb") as attachment:
            response = self._request(
                "post",
                locator,
                action=f"uploading attachment {path.name}",
                headers=ATTACHMENT_HEADERS,
                files={"file": (path.name, attachment)},
            )

        if not isinstance(response, list):
            response = [response] if isinstance(response, dict) else []
        return [
            JiraAttachment.from_api_response(item)
            for item in response
            if isinstance(item, dict)
        ]
