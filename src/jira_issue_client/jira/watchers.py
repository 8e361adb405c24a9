"""Module for Jira watcher operations."""

import logging

from ..exceptions import JiraConflictError, JiraValidationError
from ..models.jira import BasicIssue, JiraWatchers, ResourceKind, ResourceLocator
from .client import JiraClient
from .protocols import UsersOperationsProto

logger = logging.getLogger("jira-issues")


class WatchersMixin(JiraClient, UsersOperationsProto):
    """Mixin for Jira watcher operations.

    Watching is not idempotent: watching twice or unwatching an issue one
    does not watch raises :class:`JiraConflictError`.
    """

    def get_watchers(self, target: ResourceLocator | BasicIssue) -> JiraWatchers:
        """
        Get the watchers of an issue.

        Args:
            target: The issue's watchers locator, or the issue itself

        Returns:
            The watcher list and whether the caller is watching
        """
        locator = self._resolve_locator(target, ResourceKind.WATCHERS)
        response = self._request("get", locator, action="getting watchers")
        return JiraWatchers.from_api_response(
            self._expect_dict(response, "get watchers")
        )

    def add_watcher(self, target: ResourceLocator | BasicIssue, user: str) -> None:
        """
        Add a user to the watchers of an issue.

        Args:
            target: The issue's watchers locator, or the issue itself
            user: Account id (Cloud) or username (Server/DC)

        Raises:
            JiraConflictError: If the user already watches the issue
        """
        user = self._check_user(user)
        locator = self._resolve_locator(target, ResourceKind.WATCHERS)
        if self.get_watchers(locator).contains(user):
            raise JiraConflictError(f"User {user} is already watching the issue")
        self._post_watcher(locator, user)

    def remove_watcher(self, target: ResourceLocator | BasicIssue, user: str) -> None:
        """
        Remove a user from the watchers of an issue.

        Args:
            target: The issue's watchers locator, or the issue itself
            user: Account id (Cloud) or username (Server/DC)

        Raises:
            JiraConflictError: If the user does not watch the issue
        """
        user = self._check_user(user)
        locator = self._resolve_locator(target, ResourceKind.WATCHERS)
        if not self.get_watchers(locator).contains(user):
            raise JiraConflictError(f"User {user} is not watching the issue")
        self._delete_watcher(locator, user)

    def watch(self, target: ResourceLocator | BasicIssue) -> None:
        """
        Start watching an issue as the authenticated user.

        Whether the user already watches is read from ``isWatching``, not
        from the watcher list.

        Raises:
            JiraConflictError: If the authenticated user already watches it
        """
        user = self._current_user_id()
        locator = self._resolve_locator(target, ResourceKind.WATCHERS)
        if self.get_watchers(locator).is_watching:
            raise JiraConflictError("You are already watching the issue")
        self._post_watcher(locator, user)

    def unwatch(self, target: ResourceLocator | BasicIssue) -> None:
        """
        Stop watching an issue as the authenticated user.

        Raises:
            JiraConflictError: If the authenticated user does not watch it
        """
        user = self._current_user_id()
        locator = self._resolve_locator(target, ResourceKind.WATCHERS)
        if not self.get_watchers(locator).is_watching:
            raise JiraConflictError("You are not watching the issue")
        self._delete_watcher(locator, user)

    def _post_watcher(self, locator: ResourceLocator, user: str) -> None:
        self._request("post", locator, action=f"adding watcher {user}", data=user)

    def _delete_watcher(self, locator: ResourceLocator, user: str) -> None:
        param = "accountId" if self.config.is_cloud else "username"
        self._request(
            "delete", locator, action=f"removing watcher {user}", params={param: user}
        )

    def _current_user_id(self) -> str:
        user = self.get_current_user()
        identifier = user.account_id if self.config.is_cloud else user.name
        identifier = identifier or user.identifier
        if not identifier:
            raise JiraValidationError("Could not determine the authenticated user")
        return identifier

    @staticmethod
    def _check_user(user: str) -> str:
        if not isinstance(user, str) or not user.strip():
            raise JiraValidationError("User must be a non-empty identifier")
        return user.strip()
