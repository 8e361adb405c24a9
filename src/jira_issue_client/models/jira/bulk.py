"""
Per-item results of bulk operations.

A :class:`BulkOperationResult` always has one slot per input item, in input
order, so ``result[i]`` answers for ``batch[i]``.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ...exceptions import JiraIssueClientError

T = TypeVar("T")


@dataclass(frozen=True)
class BulkOperationFailure:
    """Why one item of a batch failed."""

    index: int
    error: JiraIssueClientError
    status: int | None = None
    errors: dict[str, str] = field(default_factory=dict)
    error_messages: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class BulkOperationItem(Generic[T]):
    """One slot of a bulk result: either a value or a failure."""

    index: int
    value: T | None = None
    failure: BulkOperationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(frozen=True)
class BulkOperationResult(Generic[T]):
    """Ordered outcome of a batch."""

    items: Sequence[BulkOperationItem[T]]

    @property
    def successes(self) -> list[T]:
        return [item.value for item in self.items if item.ok]  # type: ignore[misc]

    @property
    def failures(self) -> list[BulkOperationFailure]:
        return [item.failure for item in self.items if item.failure is not None]

    @property
    def all_succeeded(self) -> bool:
        return all(item.ok for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> BulkOperationItem[T]:
        return self.items[index]

    def __iter__(self) -> Iterator[BulkOperationItem[T]]:
        return iter(self.items)
