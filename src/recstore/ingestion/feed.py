"""External feed adapter.

Translates externally sourced records, one at a time, into
:meth:`RecordStore.set` calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from recstore.state.store import RecordStore

T = TypeVar("T")


class FeedAdapter(Generic[T]):
    """Adapter between a record source and a :class:`RecordStore`."""

    def __init__(self, store: RecordStore[T]) -> None:
        self._store = store

    @property
    def store(self) -> RecordStore[T]:
        return self._store

    def add_record(self, record: T) -> None:
        self._store.set(record)


def feed_records(adapter: FeedAdapter[T], records: Iterable[T]) -> int:
    """Call ``adapter.add_record`` once per record; return how many were added.

    Stops at the first failure; records already added stay in the store.
    """
    count = 0
    for record in records:
        adapter.add_record(record)
        count += 1
    return count
