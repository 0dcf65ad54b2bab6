"""In-memory record store with before/after change notifications.

This is the only component that mutates the keyed record collection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from recstore.exceptions import InvalidRecordError
from recstore.observer import EventChannel, Listener, Unsubscribe
from recstore.state.events import AfterSetEvent, BeforeSetEvent

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Visitor = Callable[[T], None]
ScoreFn = Callable[[T], float]


def record_id_of(record: Any, *, record_type: type | None = None) -> str:
    """Return the id of *record*, or raise :class:`InvalidRecordError`."""
    record_id = getattr(record, "id", None)
    if not isinstance(record_id, str):
        raise InvalidRecordError(
            f"record {record!r} has no string id",
            record_id=record_id,
            record_type=record_type,
        )
    if not record_id.strip():
        raise InvalidRecordError(
            "record id must be non-empty",
            record_id=record_id,
            record_type=record_type,
        )
    return record_id


class RecordStore(Generic[T]):
    """Keyed, observable in-memory collection of records.

    Records are stored by their ``id`` attribute; setting a record whose id is
    already present replaces it entirely. Every :meth:`set` publishes a
    :class:`BeforeSetEvent` on the before-channel, commits the record, then
    publishes an :class:`AfterSetEvent` on the after-channel.

    Listener failures propagate to the :meth:`set` caller. A failing
    before-listener therefore prevents the mutation, while a failing
    after-listener leaves the record committed.

    Parameters
    ----------
    record_type : type or None
        When given and *strict_types* is true, :meth:`set` rejects records
        that are not instances of this type.
    strict_types : bool
        Enforce *record_type* on :meth:`set`.
    """

    def __init__(
        self,
        record_type: type[T] | None = None,
        *,
        strict_types: bool = True,
    ) -> None:
        self._record_type = record_type
        self._strict_types = strict_types
        self._records: dict[str, T] = {}
        label = record_type.__name__ if record_type is not None else "record"
        self._before_add: EventChannel[BeforeSetEvent[T]] = EventChannel(f"{label}.before_add")
        self._after_add: EventChannel[AfterSetEvent[T]] = EventChannel(f"{label}.after_add")

    @property
    def record_type(self) -> type[T] | None:
        return self._record_type

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __repr__(self) -> str:
        label = self._record_type.__name__ if self._record_type is not None else "Any"
        return f"<RecordStore[{label}] records={len(self._records)}>"

    def ids(self) -> list[str]:
        """Stored ids in insertion order."""
        return list(self._records)

    # ------------------------------------------------------------------
    # Core get/set
    # ------------------------------------------------------------------

    def get(self, record_id: str) -> T | None:
        """Return the record stored under *record_id*, or ``None``."""
        return self._records.get(record_id)

    def set(self, record: T) -> None:
        """Insert or replace *record* under its id, notifying listeners."""
        self._validate(record)
        record_id = record_id_of(record, record_type=self._record_type)

        previous = self._records.get(record_id)
        self._before_add.publish(BeforeSetEvent(previous=previous, incoming=record))

        self._records[record_id] = record
        _logger.debug("Committed record id=%s replaced=%s", record_id, previous is not None)

        self._after_add.publish(AfterSetEvent(value=record))

    def _validate(self, record: Any) -> None:
        if self._record_type is None or not self._strict_types:
            return
        if not isinstance(record, self._record_type):
            raise InvalidRecordError(
                f"expected {self._record_type.__name__}, got {type(record).__name__}",
                record_id=getattr(record, "id", None),
                record_type=self._record_type,
            )

    # ------------------------------------------------------------------
    # Change notifications
    # ------------------------------------------------------------------

    def on_before_add(self, listener: Listener[BeforeSetEvent[T]]) -> Unsubscribe:
        """Subscribe to events published before each mutation."""
        return self._before_add.subscribe(listener)

    def on_after_add(self, listener: Listener[AfterSetEvent[T]]) -> Unsubscribe:
        """Subscribe to events published after each mutation."""
        return self._after_add.subscribe(listener)

    # ------------------------------------------------------------------
    # Traversal and selection
    # ------------------------------------------------------------------

    def visit(self, visitor: Visitor[T]) -> None:
        """Call *visitor* once per stored record, in insertion order.

        The records are snapshotted first; records set by the visitor itself
        are not visited during this call.
        """
        for record in tuple(self._records.values()):
            visitor(record)

    def select_best(self, score: ScoreFn[T]) -> T | None:
        """Return the record with the strictly greatest ``score(record)``.

        Ties keep the first record in insertion order. The first record is the
        initial candidate, so a population with only negative scores still
        yields a winner. Returns ``None`` for an empty store.
        """
        best: T | None = None
        best_score = 0.0
        for record in tuple(self._records.values()):
            candidate_score = score(record)
            if best is None or candidate_score > best_score:
                best = record
                best_score = candidate_score
        return best
