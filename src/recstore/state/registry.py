"""Store creation variants.

Two lifetime policies are supported and a deployment picks exactly one:

* **instance**: :func:`create_store` builds an independent store every time;
  the caller owns its lifetime.
* **singleton**: a :class:`StoreRegistry` holds one store per record type,
  created on first use and handed out by :func:`get_store` afterwards.

There is no module-level default registry. The process that wants
per-type singletons creates one registry and passes it around explicitly.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from recstore.config import StoreConfig, StoreLifetime
from recstore.exceptions import RecStoreConfigError
from recstore.state.store import RecordStore

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_store(record_type: type[T] | None = None, *, strict_types: bool = True) -> RecordStore[T]:
    """Build a new, independent store for *record_type*."""
    return RecordStore(record_type, strict_types=strict_types)


class StoreRegistry:
    """Process-wide holder of one :class:`RecordStore` per record type."""

    def __init__(self, *, strict_types: bool = True) -> None:
        self._strict_types = strict_types
        self._stores: dict[type, RecordStore[Any]] = {}

    @property
    def strict_types(self) -> bool:
        return self._strict_types

    def __len__(self) -> int:
        return len(self._stores)

    def __contains__(self, record_type: object) -> bool:
        return record_type in self._stores

    def store_for(self, record_type: type[T]) -> RecordStore[T]:
        """Return the store for *record_type*, creating it on first use."""
        store = self._stores.get(record_type)
        if store is None:
            store = RecordStore(record_type, strict_types=self._strict_types)
            self._stores[record_type] = store
            _logger.debug("Created singleton store for %s", record_type.__name__)
        return store

    def record_types(self) -> list[type]:
        return list(self._stores)


def get_store(registry: StoreRegistry, record_type: type[T]) -> RecordStore[T]:
    """Well-known accessor for the singleton store of *record_type*."""
    return registry.store_for(record_type)


def provide_store(
    record_type: type[T],
    *,
    config: StoreConfig,
    registry: StoreRegistry | None = None,
) -> RecordStore[T]:
    """Return a store for *record_type* according to ``config.lifetime``.

    Raises
    ------
    RecStoreConfigError
        A singleton deployment was given no registry or a registry whose
        ``strict_types`` differs from the config, or an instance deployment
        was given a registry.
    """
    if config.lifetime == StoreLifetime.SINGLETON:
        if registry is None:
            raise RecStoreConfigError("singleton lifetime requires a StoreRegistry")
        if registry.strict_types != config.strict_types:
            raise RecStoreConfigError(
                f"registry strict_types={registry.strict_types} does not match config strict_types={config.strict_types}"
            )
        return get_store(registry, record_type)

    if registry is not None:
        raise RecStoreConfigError("instance lifetime must not be combined with a StoreRegistry")
    return create_store(record_type, strict_types=config.strict_types)
