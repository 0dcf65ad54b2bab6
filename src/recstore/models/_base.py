"""Base model for stored records.

Every record model inherits from :class:`BaseRecord`, which provides:

* a required, immutable ``id`` string (surrounding whitespace stripped,
  must be non-empty after stripping);
* ``frozen=True`` so a stored record cannot be mutated behind the store's
  back; replacing a record always goes through ``RecordStore.set``.

The store itself does not require :class:`BaseRecord`; any object with a
string ``id`` attribute can be stored.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator


@runtime_checkable
class HasId(Protocol):
    """Structural type accepted by the record store."""

    @property
    def id(self) -> str: ...


class BaseRecord(BaseModel):
    """Base for record models kept in a ``RecordStore``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        record_id = value.strip()
        if not record_id:
            raise ValueError("id must be non-empty")
        return record_id
