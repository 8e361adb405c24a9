"""
Watcher and voter models.

The ``Basic`` variants are the summaries embedded in an issue
representation; the full variants are the dereferenced collections.
"""

from typing import Any

from ..base import ApiModel
from .common import JiraUser
from .locator import ResourceKind, ResourceLocator, locator_from_self


class JiraBasicWatchers(ApiModel):
    """Watcher summary embedded in an issue's ``watches`` field."""

    locator: ResourceLocator | None = None
    is_watching: bool = False
    watch_count: int = 0

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraBasicWatchers":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            locator=locator_from_self(ResourceKind.WATCHERS, data),
            is_watching=bool(data.get("isWatching", False)),
            watch_count=int(data.get("watchCount", 0) or 0),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"is_watching": self.is_watching, "watch_count": self.watch_count}


class JiraWatchers(JiraBasicWatchers):
    """The dereferenced watcher list of an issue."""

    watchers: list[JiraUser] = []

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraWatchers":
        if not data or not isinstance(data, dict):
            return cls()

        watchers = [
            JiraUser.from_api_response(user)
            for user in data.get("watchers", [])
            if isinstance(user, dict)
        ]
        return cls(
            locator=locator_from_self(ResourceKind.WATCHERS, data),
            is_watching=bool(data.get("isWatching", False)),
            watch_count=int(data.get("watchCount", len(watchers)) or 0),
            watchers=watchers,
        )

    def contains(self, user: str) -> bool:
        return any(watcher.matches(user) for watcher in self.watchers)

    def to_simplified_dict(self) -> dict[str, Any]:
        result = super().to_simplified_dict()
        result["watchers"] = [w.to_simplified_dict() for w in self.watchers]
        return result


class JiraBasicVotes(ApiModel):
    """Vote summary embedded in an issue's ``votes`` field."""

    locator: ResourceLocator | None = None
    has_voted: bool = False
    votes: int = 0

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraBasicVotes":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            locator=locator_from_self(ResourceKind.VOTES, data),
            has_voted=bool(data.get("hasVoted", False)),
            votes=int(data.get("votes", 0) or 0),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"has_voted": self.has_voted, "votes": self.votes}


class JiraVotes(JiraBasicVotes):
    """The dereferenced voter list of an issue.

    ``voters`` is empty when the caller may not view voters; the count is
    still reported.
    """

    voters: list[JiraUser] = []

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraVotes":
        if not data or not isinstance(data, dict):
            return cls()

        voters = [
            JiraUser.from_api_response(user)
            for user in data.get("voters", [])
            if isinstance(user, dict)
        ]
        return cls(
            locator=locator_from_self(ResourceKind.VOTES, data),
            has_voted=bool(data.get("hasVoted", False)),
            votes=int(data.get("votes", len(voters)) or 0),
            voters=voters,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result = super().to_simplified_dict()
        result["voters"] = [v.to_simplified_dict() for v in self.voters]
        return result
