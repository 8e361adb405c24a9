"""Typed failures raised by the Jira issue client.

Callers distinguish "my call was wrong" (:class:`JiraValidationError`) from
"the world changed under me" (:class:`JiraConflictError`,
:class:`JiraNotFoundError`), from "I can't do this"
(:class:`JiraPermissionError`) and from "the service is unavailable"
(:class:`JiraTransportError`). Only transport failures are worth retrying.
"""

from typing import Any

from requests import Response


class JiraIssueClientError(Exception):
    """Base class for every failure surfaced by the client."""

    retryable = False

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_messages: list[str] | None = None,
        errors: dict[str, str] | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_messages = error_messages or []
        self.errors = errors or {}
        self.payload = payload


class JiraNotFoundError(JiraIssueClientError):
    """The resource or locator no longer resolves."""


class JiraPermissionError(JiraIssueClientError):
    """The caller is authenticated but not allowed to perform the action."""


class JiraAuthenticationError(JiraPermissionError):
    """The credentials were rejected (401)."""


class JiraValidationError(JiraIssueClientError):
    """The input is malformed or misses required values."""


class JiraConflictError(JiraIssueClientError):
    """The action is not valid for the current remote state."""


class JiraTransportError(JiraIssueClientError):
    """The exchange failed below the application layer."""

    retryable = True


def error_class_for_status(status_code: int | None) -> type[JiraIssueClientError]:
    """Pick the exception class matching an HTTP status code."""
    if status_code is None:
        return JiraTransportError
    if status_code == 401:
        return JiraAuthenticationError
    if status_code == 403:
        return JiraPermissionError
    if status_code == 404:
        return JiraNotFoundError
    if status_code == 409:
        return JiraConflictError
    if 400 <= status_code < 500:
        return JiraValidationError
    return JiraTransportError


def parse_error_payload(payload: Any) -> tuple[list[str], dict[str, str]]:
    """Extract ``errorMessages`` and field ``errors`` from a Jira error body."""
    if not isinstance(payload, dict):
        return [], {}

    messages = payload.get("errorMessages") or []
    if not isinstance(messages, list):
        messages = [str(messages)]

    errors = payload.get("errors") or {}
    if not isinstance(errors, dict):
        errors = {}

    return [str(m) for m in messages], {str(k): str(v) for k, v in errors.items()}


def error_from_response(
    response: Response | None, action: str
) -> JiraIssueClientError:
    """Build the typed exception for a failed HTTP response.

    Args:
        response: The failed response (may be None when the server never answered)
        action: Short description of what was attempted, used in the message

    Returns:
        An instance of the matching :class:`JiraIssueClientError` subclass
    """
    status_code = getattr(response, "status_code", None)
    payload = None
    if response is not None:
        try:
            payload = response.json()
        except ValueError:
            payload = None

    error_messages, errors = parse_error_payload(payload)
    details = "; ".join(
        error_messages + [f"{field}: {msg}" for field, msg in errors.items()]
    )
    message = f"Error {action} (HTTP {status_code})"
    if details:
        message = f"{message}: {details}"

    error_class = error_class_for_status(status_code)
    return error_class(
        message,
        status_code=status_code,
        error_messages=error_messages,
        errors=errors,
        payload=payload,
    )
