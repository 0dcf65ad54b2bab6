"""Custom exception hierarchy for recstore."""

from __future__ import annotations


class RecStoreError(Exception):
    """Base exception for all recstore errors."""


class RecStoreConfigError(RecStoreError):
    """Invalid configuration, or creation variants mixed in one deployment."""


class InvalidRecordError(RecStoreError):
    """A record was rejected by ``RecordStore.set``.

    Raised before any change event is published, so listeners never
    observe a malformed record.
    """

    def __init__(
        self,
        message: str,
        *,
        record_id: object = None,
        record_type: type | None = None,
    ) -> None:
        self.record_id = record_id
        self.record_type = record_type
        super().__init__(message)


class FeedLoadError(RecStoreError):
    """An external record file could not be read or validated."""

    def __init__(
        self,
        message: str,
        *,
        source: str = "",
        line: int | None = None,
    ) -> None:
        self.source = source
        self.line = line
        super().__init__(message)
