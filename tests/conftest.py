"""
Root pytest configuration file for jira-issue-client tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_client_loggers():
    """Keep logger levels set by one test from leaking into the next."""
    names = ("jira-issue-client", "jira-issues")
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
