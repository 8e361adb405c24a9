"""Module for Jira worklog operations."""

import logging
import re
from typing import Any

from ..exceptions import JiraValidationError
from ..models.jira import (
    AdjustEstimate,
    BasicIssue,
    JiraWorklog,
    ResourceKind,
    ResourceLocator,
    WorklogInput,
)
from ..utils import format_jira_datetime
from .client import JiraClient

logger = logging.getLogger("jira-issues")

# Jira's default working time: 5-day weeks of 8-hour days
_TIME_UNITS = {
    "w": 5 * 8 * 60 * 60,
    "d": 8 * 60 * 60,
    "h": 60 * 60,
    "m": 60,
    "s": 1,
}
_TIME_COMPONENT = re.compile(r"(\d+(?:\.\d+)?)\s*([wdhms])")


class WorklogMixin(JiraClient):
    """Mixin for Jira worklog operations."""

    def _parse_time_spent(self, time_spent: str) -> int:
        """
        Parse time spent string into seconds.

        Args:
            time_spent: Time spent string (e.g. 1h 30m, 1d, etc.); a bare
                number is seconds

        Returns:
            Time spent in seconds

        Raises:
            JiraValidationError: If the string is not a positive duration
        """
        text = (time_spent or "").strip().lower()
        if text.isdigit():
            seconds = int(text)
        else:
            matches = _TIME_COMPONENT.findall(text)
            if not matches or _TIME_COMPONENT.sub("", text).strip():
                raise JiraValidationError(f"Could not parse time spent: {time_spent!r}")
            seconds = int(
                sum(float(value) * _TIME_UNITS[unit] for value, unit in matches)
            )

        if seconds <= 0:
            raise JiraValidationError(f"Time spent must be positive: {time_spent!r}")
        return seconds

    @staticmethod
    def _estimate_params(worklog_input: WorklogInput) -> dict[str, Any]:
        adjust = worklog_input.adjust_estimate
        params: dict[str, Any] = {"adjustEstimate": adjust.value}
        if adjust is AdjustEstimate.NEW:
            if not worklog_input.new_estimate:
                raise JiraValidationError("new_estimate is required with NEW")
            params["newEstimate"] = worklog_input.new_estimate
        elif adjust is AdjustEstimate.MANUAL:
            if not worklog_input.reduce_by:
                raise JiraValidationError("reduce_by is required with MANUAL")
            params["reduceBy"] = worklog_input.reduce_by
        return params

    def add_worklog(
        self,
        target: ResourceLocator | BasicIssue,
        worklog_input: WorklogInput,
    ) -> JiraWorklog:
        """
        Log work on an issue.

        Args:
            target: The issue's worklog locator, or the issue itself
            worklog_input: Time spent, start time, comment and how to adjust
                the remaining estimate

        Returns:
            The created worklog

        Raises:
            JiraValidationError: If the time spent cannot be parsed or the
                estimate adjustment misses its value
        """
        worklog_data: dict[str, Any] = {
            "timeSpentSeconds": self._parse_time_spent(worklog_input.time_spent)
        }
        if worklog_input.comment:
            worklog_data["comment"] = worklog_input.comment
        if worklog_input.started:
            worklog_data["started"] = format_jira_datetime(worklog_input.started)
        params = self._estimate_params(worklog_input)

        locator = self._resolve_locator(target, ResourceKind.WORKLOG)
        response = self._request(
            "post", locator, action="adding worklog", data=worklog_data, params=params
        )
        worklog = JiraWorklog.from_api_response(
            self._expect_dict(response, "add worklog")
        )
        logger.info(f"Logged {worklog.time_spent or worklog_input.time_spent}")
        return worklog
