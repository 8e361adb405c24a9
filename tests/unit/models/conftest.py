"""
Test fixtures for model testing.
"""

import copy
from typing import Any

import pytest

from tests.fixtures.jira_mocks import (
    MOCK_EDITMETA_RESPONSE,
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_TRANSITIONS_RESPONSE,
)


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return a private copy of mock Jira issue data."""
    return copy.deepcopy(MOCK_JIRA_ISSUE_RESPONSE)


@pytest.fixture
def jira_transitions_data() -> dict[str, Any]:
    """Return mock Jira transitions data."""
    return copy.deepcopy(MOCK_TRANSITIONS_RESPONSE)


@pytest.fixture
def jira_editmeta_data() -> dict[str, Any]:
    """Return mock Jira edit metadata."""
    return copy.deepcopy(MOCK_EDITMETA_RESPONSE)
