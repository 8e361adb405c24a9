"""Tests for masking credentials in logs."""

import logging
from unittest.mock import MagicMock

import pytest

from jira_issue_client.utils.logging import log_config_param, mask_sensitive


@pytest.mark.parametrize(
    ("value", "keep_chars", "expected"),
    [
        (None, 4, "Not Provided"),
        ("", 4, "Not Provided"),
        ("short", 4, "*****"),
        ("12345678", 4, "********"),
        ("ATATT3xFfGF0token", 4, "ATAT*********oken"),
        ("abcdefghij", 2, "ab******ij"),
    ],
)
def test_mask_sensitive(value, keep_chars, expected):
    assert mask_sensitive(value, keep_chars=keep_chars) == expected


def test_masked_value_keeps_length():
    secret = "x" * 40

    assert len(mask_sensitive(secret)) == len(secret)


class TestLogConfigParam:
    """Tests for logging configuration values."""

    def test_plain_value(self):
        logger = MagicMock(spec=logging.Logger)

        log_config_param(logger, "URL", "https://jira.example.com")

        logger.info.assert_called_once_with("Jira URL: https://jira.example.com")

    def test_missing_value(self):
        logger = MagicMock(spec=logging.Logger)

        log_config_param(logger, "username", None)

        logger.info.assert_called_once_with("Jira username: Not Provided")

    def test_sensitive_value(self):
        logger = MagicMock(spec=logging.Logger)

        log_config_param(logger, "API token", "abcd1234efgh5678", sensitive=True)

        logger.info.assert_called_once_with("Jira API token: abcd********5678")
