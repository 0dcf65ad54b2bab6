"""Generic publish/subscribe channel.

An :class:`EventChannel` knows nothing about records; the record store owns
two of them (before-change and after-change) and publishes through them.

Dispatch is synchronous and fail-fast: a listener exception propagates to the
caller of :meth:`EventChannel.publish` and the remaining listeners are not
notified.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

_logger = logging.getLogger(__name__)

E = TypeVar("E")

Listener = Callable[[E], None]
Unsubscribe = Callable[[], None]


@dataclass(slots=True, eq=False)
class _Registration:
    """One subscription.

    Compared by identity so the same callable subscribed twice yields two
    independent registrations.
    """

    listener: Listener[Any]
    active: bool = True


class EventChannel(Generic[E]):
    """Ordered, synchronous publish/subscribe primitive."""

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._registrations: list[_Registration] = []

    def __len__(self) -> int:
        return len(self._registrations)

    def subscribe(self, listener: Listener[E]) -> Unsubscribe:
        """Register *listener* and return a function that removes it.

        The returned function may be called any number of times; only the
        first call has an effect.
        """
        registration = _Registration(listener)
        self._registrations.append(registration)

        def unsubscribe() -> None:
            if not registration.active:
                return
            registration.active = False
            self._registrations.remove(registration)

        return unsubscribe

    def publish(self, event: E) -> None:
        """Invoke every active listener, in subscription order, with *event*."""
        # Snapshot: listeners may (un)subscribe while we dispatch.
        for registration in tuple(self._registrations):
            # Removed earlier in this same dispatch.
            if not registration.active:
                continue
            try:
                registration.listener(event)
            except Exception:
                _logger.debug("Listener on channel %r failed", self._name, exc_info=True)
                raise

    def clear(self) -> None:
        """Drop every registration; outstanding unsubscribe functions become no-ops."""
        for registration in self._registrations:
            registration.active = False
        self._registrations.clear()
