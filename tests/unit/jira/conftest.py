"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from jira_issue_client.jira import JiraIssueClient
from jira_issue_client.jira.config import JiraConfig
from jira_issue_client.models.jira import JiraIssue
from tests.fixtures.jira_mocks import MOCK_JIRA_ISSUE_RESPONSE


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a Cloud JiraConfig instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        auth_type="basic",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def server_config():
    """Create a Server/Data Center JiraConfig instance."""
    return JiraConfig(
        url="https://jira.example.com",
        auth_type="token",
        personal_token="test_personal_token",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client."""
    mock_jira = MagicMock()
    mock_jira.resource_url.side_effect = lambda resource: f"rest/api/2/{resource}"
    yield mock_jira


def _make_client(config, mock_atlassian_jira):
    with patch("jira_issue_client.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        client = JiraIssueClient(config=config)
    client.jira = mock_atlassian_jira
    return client


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira):
    """Create a Cloud JiraIssueClient with a mocked REST wrapper."""
    yield _make_client(mock_config, mock_atlassian_jira)


@pytest.fixture
def server_jira_client(server_config, mock_atlassian_jira):
    """Create a Server/Data Center JiraIssueClient with a mocked REST wrapper."""
    yield _make_client(server_config, mock_atlassian_jira)


@pytest.fixture
def issue():
    """An issue snapshot carrying self links."""
    return JiraIssue.from_api_response(MOCK_JIRA_ISSUE_RESPONSE)
