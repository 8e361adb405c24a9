"""
Opaque references to issue resources.

A :class:`ResourceLocator` is a capability reference: it is obtained from a
representation's own ``self`` link (or derived from the parent issue's
``self`` link) and never built from an issue key by the caller. Server-side
URI scheme changes therefore never break callers holding locators.
"""

from enum import Enum
from typing import Any

_FACTORY_TOKEN = object()


class ResourceKind(str, Enum):
    """Kinds of resources reachable from an issue; values are path segments."""

    ISSUE = "issue"
    WATCHERS = "watchers"
    VOTES = "votes"
    COMMENTS = "comment"
    WORKLOG = "worklog"
    TRANSITIONS = "transitions"
    ATTACHMENTS = "attachments"
    ASSIGNEE = "assignee"
    EDITMETA = "editmeta"


class ResourceLocator:
    """Equality-comparable handle to one remote resource.

    Instances cannot be created directly; use the issue representation's
    ``locator(kind)`` or the ``watchers``/``votes`` summaries.
    """

    __slots__ = ("_kind", "_uri")

    def __init__(self, kind: ResourceKind, uri: str, *, _token: object = None) -> None:
        if _token is not _FACTORY_TOKEN:
            raise TypeError(
                "ResourceLocator instances are obtained from issue representations"
            )
        self._kind = kind
        self._uri = uri

    @property
    def kind(self) -> ResourceKind:
        return self._kind

    def child(self, kind: ResourceKind) -> "ResourceLocator":
        """Derive a sub-resource locator from an issue locator."""
        if self._kind is not ResourceKind.ISSUE:
            raise ValueError(
                f"Only issue locators have sub-resources, not {self._kind.value}"
            )
        return ResourceLocator(
            kind, f"{self._uri.rstrip('/')}/{kind.value}", _token=_FACTORY_TOKEN
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceLocator):
            return NotImplemented
        return self._kind is other._kind and self._uri == other._uri

    def __hash__(self) -> int:
        return hash((self._kind, self._uri))

    def __repr__(self) -> str:
        return f"<ResourceLocator {self._kind.value}>"

    def __copy__(self) -> "ResourceLocator":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "ResourceLocator":
        return self


def locator_from_self(kind: ResourceKind, data: Any) -> ResourceLocator | None:
    """Read the ``self`` link of a representation as a locator of ``kind``."""
    if not isinstance(data, dict):
        return None
    uri = data.get("self")
    if not isinstance(uri, str) or not uri:
        return None
    return ResourceLocator(kind, uri, _token=_FACTORY_TOKEN)


def locator_uri(locator: ResourceLocator) -> str:
    """Absolute URI behind a locator, for the transport layer only."""
    return locator._uri
