"""Tests for the Jira client module."""

from unittest.mock import MagicMock, patch

import pytest
from requests.exceptions import ConnectionError, ReadTimeout

from jira_issue_client.exceptions import (
    JiraAuthenticationError,
    JiraConflictError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraTransportError,
    JiraValidationError,
)
from jira_issue_client.jira.client import JiraClient
from jira_issue_client.jira.config import JiraConfig
from jira_issue_client.models.jira import BasicIssue, ResourceKind
from tests.fixtures.jira_mocks import ISSUE_SELF, created_issue, make_http_error


def test_init_with_basic_auth():
    """Test initializing the client with basic auth configuration."""
    with (
        patch("jira_issue_client.jira.client.Jira") as mock_jira,
        patch(
            "jira_issue_client.jira.client.configure_ssl_verification"
        ) as mock_configure_ssl,
    ):
        config = JiraConfig(
            url="https://test.atlassian.net",
            auth_type="basic",
            username="test_username",
            api_token="test_token",
        )

        client = JiraClient(config=config)

        mock_jira.assert_called_once_with(
            url="https://test.atlassian.net",
            username="test_username",
            password="test_token",
            cloud=True,
            verify_ssl=True,
        )
        mock_configure_ssl.assert_called_once_with(
            url="https://test.atlassian.net",
            session=mock_jira.return_value._session,
            ssl_verify=True,
        )
        assert client.config == config


def test_init_with_token_auth():
    """Test initializing the client with token auth configuration."""
    with (
        patch("jira_issue_client.jira.client.Jira") as mock_jira,
        patch(
            "jira_issue_client.jira.client.configure_ssl_verification"
        ) as mock_configure_ssl,
    ):
        config = JiraConfig(
            url="https://jira.example.com",
            auth_type="token",
            personal_token="test_personal_token",
            ssl_verify=False,
        )

        JiraClient(config=config)

        mock_jira.assert_called_once_with(
            url="https://jira.example.com",
            token="test_personal_token",
            cloud=False,
            verify_ssl=False,
        )
        mock_configure_ssl.assert_called_once_with(
            url="https://jira.example.com",
            session=mock_jira.return_value._session,
            ssl_verify=False,
        )


def test_init_from_env(mock_env_vars):
    """Test initializing the client from environment variables."""
    with (
        patch("jira_issue_client.jira.client.Jira") as mock_jira,
        patch("jira_issue_client.jira.client.configure_ssl_verification"),
    ):
        client = JiraClient()

        assert client.config.url == "https://test.atlassian.net"
        assert client.config.auth_type == "basic"
        mock_jira.assert_called_once()


def test_init_sets_proxies():
    """Test that configured proxies are set on the session."""
    mock_jira = MagicMock()
    with (
        patch("jira_issue_client.jira.client.Jira", return_value=mock_jira),
        patch("jira_issue_client.jira.client.configure_ssl_verification"),
    ):
        config = JiraConfig(
            url="https://test.atlassian.net",
            auth_type="basic",
            username="user",
            api_token="token",
            http_proxy="http://proxy:8080",
            https_proxy="https://proxy:8443",
        )
        JiraClient(config=config)

    assert mock_jira._session.proxies == {
        "http": "http://proxy:8080",
        "https": "https://proxy:8443",
    }


def test_init_does_not_log_secrets(caplog):
    """Test that credentials are masked in the configuration log."""
    with (
        patch("jira_issue_client.jira.client.Jira"),
        patch("jira_issue_client.jira.client.configure_ssl_verification"),
        caplog.at_level("INFO", logger="jira-issues"),
    ):
        JiraClient(
            config=JiraConfig(
                url="https://test.atlassian.net",
                auth_type="basic",
                username="test_username",
                api_token="super-secret-api-token",
            )
        )

    assert "super-secret-api-token" not in caplog.text
    assert "Jira API token: supe" in caplog.text


class TestRequest:
    """Tests for JiraClient._request error translation."""

    @pytest.mark.parametrize(
        ("status_code", "error_class"),
        [
            (400, JiraValidationError),
            (401, JiraAuthenticationError),
            (403, JiraPermissionError),
            (404, JiraNotFoundError),
            (409, JiraConflictError),
            (422, JiraValidationError),
            (500, JiraTransportError),
            (503, JiraTransportError),
        ],
    )
    def test_http_errors_are_typed(self, jira_client, status_code, error_class):
        jira_client.jira.get.side_effect = make_http_error(
            status_code, {"errorMessages": ["Something went wrong"], "errors": {}}
        )

        with pytest.raises(error_class) as exc_info:
            jira_client._request("get", "rest/api/2/issue/PROJ-1", action="testing")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.error_messages == ["Something went wrong"]
        assert "Error testing (HTTP" in str(exc_info.value)

    def test_field_errors_are_carried(self, jira_client):
        jira_client.jira.post.side_effect = make_http_error(
            400, {"errorMessages": [], "errors": {"summary": "Field is required"}}
        )

        with pytest.raises(JiraValidationError) as exc_info:
            jira_client._request("post", "rest/api/2/issue", action="creating", data={})

        assert exc_info.value.errors == {"summary": "Field is required"}
        assert "summary: Field is required" in str(exc_info.value)

    def test_non_json_error_body(self, jira_client):
        jira_client.jira.get.side_effect = make_http_error(404)

        with pytest.raises(JiraNotFoundError) as exc_info:
            jira_client._request("get", "rest/api/2/issue/PROJ-1", action="testing")

        assert exc_info.value.payload is None

    @pytest.mark.parametrize(
        "error", [ConnectionError("refused"), ReadTimeout("too slow")]
    )
    def test_transport_errors(self, jira_client, error):
        jira_client.jira.get.side_effect = error

        with pytest.raises(JiraTransportError) as exc_info:
            jira_client._request("get", "rest/api/2/issue/PROJ-1", action="testing")

        assert exc_info.value.retryable is True
        assert exc_info.value.status_code is None

    def test_only_transport_errors_are_retryable(self):
        assert JiraTransportError.retryable is True
        for error_class in (
            JiraValidationError,
            JiraNotFoundError,
            JiraPermissionError,
            JiraConflictError,
        ):
            assert error_class.retryable is False

    def test_failures_are_logged(self, jira_client, caplog):
        jira_client.jira.delete.side_effect = make_http_error(404)

        with caplog.at_level("ERROR", logger="jira-issues"):
            with pytest.raises(JiraNotFoundError):
                jira_client._request(
                    "delete", "rest/api/2/issue/X-1", action="deleting"
                )

        assert "Error deleting (HTTP 404)" in caplog.text

    def test_locator_is_requested_absolute(self, jira_client):
        locator = BasicIssue.from_api_response(
            created_issue("12345", "PROJ-123")
        ).locator(ResourceKind.VOTES)
        jira_client.jira.get.return_value = {"votes": 0}

        jira_client._request("get", locator, action="testing")

        jira_client.jira.get.assert_called_once_with(
            f"{ISSUE_SELF}/votes", params=None, absolute=True
        )

    def test_path_is_requested_relative(self, jira_client):
        jira_client._request(
            "put", "rest/api/2/issue/PROJ-1", action="testing", data={"update": {}}
        )

        jira_client.jira.put.assert_called_once_with(
            "rest/api/2/issue/PROJ-1", params=None, absolute=False, data={"update": {}}
        )


class TestResolveLocator:
    """Tests for resolving locators from locators or issues."""

    def test_issue_resolves_to_child_locator(self, jira_client, issue):
        locator = jira_client._resolve_locator(issue, ResourceKind.TRANSITIONS)

        assert locator.kind is ResourceKind.TRANSITIONS
        assert locator == issue.locator(ResourceKind.TRANSITIONS)

    def test_matching_locator_is_returned(self, jira_client, issue):
        locator = issue.locator(ResourceKind.WATCHERS)

        assert jira_client._resolve_locator(locator, ResourceKind.WATCHERS) is locator

    def test_wrong_kind_is_rejected(self, jira_client, issue):
        with pytest.raises(JiraValidationError, match="Expected a votes locator"):
            jira_client._resolve_locator(
                issue.locator(ResourceKind.WATCHERS), ResourceKind.VOTES
            )

    def test_other_types_are_rejected(self, jira_client):
        with pytest.raises(JiraValidationError):
            jira_client._resolve_locator("PROJ-123", ResourceKind.ISSUE)

    def test_issue_without_self_link_is_rejected(self, jira_client):
        with pytest.raises(JiraValidationError, match="no self link"):
            jira_client._resolve_locator(
                BasicIssue(id="1", key="PROJ-1"), ResourceKind.VOTES
            )
