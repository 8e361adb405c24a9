"""Date parsing and formatting for Jira payloads."""

import logging
from datetime import date, datetime, timezone

import dateutil.parser

logger = logging.getLogger("jira-issue-client")

# Jira expects e.g. 2024-01-01T10:00:00.000+0000
JIRA_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S.000%z"


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a Jira timestamp into a datetime.

    Accepts None, epoch milliseconds (int or digit string), or anything
    `dateutil.parser` understands (ISO 8601, RFC 3339, ...).

    Args:
        date_str: Date string or epoch milliseconds

    Returns:
        Parsed datetime or None for empty input
    """
    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def format_jira_datetime(value: datetime | date | str) -> str:
    """
    Format a value for a Jira ``datetime`` field or worklog ``started``.

    Naive datetimes are treated as UTC. Strings are parsed first so any
    ISO 8601 variant is normalized.

    Args:
        value: datetime, date or date string

    Returns:
        Timestamp in Jira's wire format
    """
    if isinstance(value, str):
        value = dateutil.parser.parse(value)
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.strftime(JIRA_DATETIME_FORMAT)


def format_jira_date(value: datetime | date | str) -> str:
    """Format a value for a Jira ``date`` field (YYYY-MM-DD)."""
    if isinstance(value, str):
        value = dateutil.parser.parse(value)
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()
