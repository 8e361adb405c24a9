"""Base client module for Jira API interactions."""

import logging
from typing import Any, Literal

from atlassian import Jira
from requests.exceptions import HTTPError, RequestException

from ..exceptions import (
    JiraIssueClientError,
    JiraTransportError,
    JiraValidationError,
    error_from_response,
)
from ..models.jira import BasicIssue, ResourceKind, ResourceLocator
from ..models.jira.locator import locator_uri
from ..utils import log_config_param
from ..utils.ssl import configure_ssl_verification
from .config import JiraConfig

# Configure logging
logger = logging.getLogger("jira-issues")

HttpMethod = Literal["get", "post", "put", "delete"]


class JiraClient:
    """Base client for Jira API interactions.

    Every REST exchange goes through :meth:`_request`, which turns failures
    into the typed exceptions of :mod:`jira_issue_client.exceptions`. No
    request is retried.
    """

    config: JiraConfig

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )

        configure_ssl_verification(
            url=self.config.url,
            session=self.jira._session,
            ssl_verify=self.config.ssl_verify,
        )

        if proxies := self.config.proxies:
            self.jira._session.proxies = proxies

        log_config_param(logger, "URL", self.config.url)
        log_config_param(logger, "auth type", self.config.auth_type)
        log_config_param(logger, "username", self.config.username)
        log_config_param(logger, "API token", self.config.api_token, sensitive=True)
        log_config_param(
            logger, "personal token", self.config.personal_token, sensitive=True
        )

    def _request(
        self,
        method: HttpMethod,
        target: str | ResourceLocator,
        *,
        action: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> Any:
        """
        Perform one REST exchange.

        Args:
            method: The HTTP method
            target: A path relative to the Jira base URL or a resource locator
            action: What is attempted, e.g. ``"getting issue PROJ-1"``; used in
                log and error messages
            data: The request body (serialized to JSON unless ``files`` is set)
            params: Query parameters
            headers: Extra request headers
            files: Multipart files

        Returns:
            The decoded JSON response, or None for empty responses

        Raises:
            JiraIssueClientError: The typed failure for the response status, or
                JiraTransportError when no response was received
        """
        if isinstance(target, ResourceLocator):
            path, absolute = locator_uri(target), True
        else:
            path, absolute = target, False

        kwargs: dict[str, Any] = {"params": params, "absolute": absolute}
        if data is not None:
            kwargs["data"] = data
        if headers is not None:
            kwargs["headers"] = headers
        if files is not None:
            kwargs["files"] = files

        try:
            return getattr(self.jira, method)(path, **kwargs)
        except HTTPError as e:
            error = error_from_response(e.response, action)
            logger.error(str(error))
            raise error from e
        except RequestException as e:
            logger.error(f"Error {action}: {e}")
            raise JiraTransportError(f"Error {action}: {e}") from e

    def _resolve_locator(
        self, target: ResourceLocator | BasicIssue, kind: ResourceKind
    ) -> ResourceLocator:
        """
        Resolve the locator an operation works on.

        Args:
            target: A locator of ``kind``, or an issue representation whose
                ``kind`` sub-resource is meant
            kind: The kind of resource the operation expects

        Returns:
            The locator to dereference

        Raises:
            JiraValidationError: If the locator has the wrong kind or the
                target is neither a locator nor an issue
        """
        if isinstance(target, ResourceLocator):
            if target.kind is not kind:
                raise JiraValidationError(
                    f"Expected a {kind.value} locator, "
                    f"got a {target.kind.value} locator"
                )
            return target
        if isinstance(target, BasicIssue):
            return target.locator(kind)
        raise JiraValidationError(
            f"Expected a {kind.value} locator or an issue, got {type(target).__name__}"
        )

    def _issue_path(self, issue_key: str, *segments: str) -> str:
        """Relative path of an issue or one of its sub-resources by key."""
        if not issue_key or not issue_key.strip():
            raise JiraValidationError("Issue key is required")
        return "/".join([self.jira.resource_url("issue"), issue_key.strip(), *segments])

    def _expect_dict(self, response: Any, action: str) -> dict[str, Any]:
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from {action}: {type(response)}"
            logger.error(msg)
            raise JiraIssueClientError(msg, payload=response)
        return response
