"""recstore - Observable in-memory record store."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("recstore")
except PackageNotFoundError:
    __version__ = "0+local"
from recstore.config import StoreConfig, StoreLifetime
from recstore.exceptions import (
    FeedLoadError,
    InvalidRecordError,
    RecStoreConfigError,
    RecStoreError,
)
from recstore.ingestion.feed import FeedAdapter, feed_records
from recstore.ingestion.loader import load_records
from recstore.models import BaseRecord, HasId, Pokemon
from recstore.observer import EventChannel
from recstore.state.events import AfterSetEvent, BeforeSetEvent
from recstore.state.registry import StoreRegistry, create_store, get_store, provide_store
from recstore.state.store import RecordStore
from recstore.strategies import field_score, sum_of_fields

__all__ = [
    "__version__",
    "AfterSetEvent",
    "BaseRecord",
    "BeforeSetEvent",
    "EventChannel",
    "FeedAdapter",
    "FeedLoadError",
    "HasId",
    "InvalidRecordError",
    "Pokemon",
    "RecStoreConfigError",
    "RecStoreError",
    "RecordStore",
    "StoreConfig",
    "StoreLifetime",
    "StoreRegistry",
    "create_store",
    "feed_records",
    "field_score",
    "get_store",
    "load_records",
    "provide_store",
    "sum_of_fields",
]
