"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass
from typing import Literal

from ..utils.urls import is_atlassian_cloud_url

logger = logging.getLogger("jira-issue-client.config")


@dataclass
class JiraConfig:
    """Jira API configuration.

    Handles authentication for Jira Cloud and Server/Data Center:
    - Cloud: username/API token (basic auth)
    - Server/DC: personal access token or basic auth
    """

    url: str  # Base URL for Jira
    auth_type: Literal["basic", "token"]
    username: str | None = None  # Email (Cloud) or username (Server/DC)
    api_token: str | None = None  # API token (Cloud) or password (Server/DC)
    personal_token: str | None = None  # Personal access token (Server/DC)
    ssl_verify: bool = True
    http_proxy: str | None = None
    https_proxy: str | None = None

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True for Atlassian Cloud hosts. Localhost and private network
            URLs are always Server/Data Center.
        """
        return is_atlassian_cloud_url(self.url)

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy mapping in the shape ``requests`` expects."""
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        return proxies

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)

        username = os.getenv("JIRA_USERNAME")
        api_token = os.getenv("JIRA_API_TOKEN")
        personal_token = os.getenv("JIRA_PERSONAL_TOKEN")

        auth_type: Literal["basic", "token"]
        if is_atlassian_cloud_url(url):
            if not (username and api_token):
                error_msg = (
                    "Cloud authentication requires JIRA_USERNAME and JIRA_API_TOKEN"
                )
                raise ValueError(error_msg)
            auth_type = "basic"
        elif personal_token:
            auth_type = "token"
        elif username and api_token:
            auth_type = "basic"
        else:
            error_msg = (
                "Server/Data Center authentication requires JIRA_PERSONAL_TOKEN "
                "or JIRA_USERNAME and JIRA_API_TOKEN"
            )
            raise ValueError(error_msg)

        ssl_verify = os.getenv("JIRA_SSL_VERIFY", "true").lower() not in (
            "false",
            "0",
            "no",
        )

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            ssl_verify=ssl_verify,
            http_proxy=os.getenv("JIRA_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("JIRA_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
        )

    def is_auth_configured(self) -> bool:
        """Check whether the credentials needed for ``auth_type`` are present."""
        if self.auth_type == "token":
            return bool(self.personal_token)
        if self.auth_type == "basic":
            return bool(self.username and self.api_token)
        logger.warning(f"Unknown or unsupported auth_type: {self.auth_type}")
        return False
