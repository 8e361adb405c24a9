"""
Utility functions for the Jira issue client.
"""

from .date import format_jira_date, format_jira_datetime, parse_date
from .logging import log_config_param, mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import is_atlassian_cloud_url

__all__ = [
    "SSLIgnoreAdapter",
    "configure_ssl_verification",
    "format_jira_date",
    "format_jira_datetime",
    "is_atlassian_cloud_url",
    "log_config_param",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
]
