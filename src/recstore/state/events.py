"""Change events published by the record store.

Both events are frozen and carry the record objects themselves (no copy),
so a listener sees exactly the instance that is, or is about to be, stored.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class BeforeSetEvent(BaseModel, Generic[T]):
    """Published immediately before a record is inserted or replaced."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    previous: T | None = Field(
        default=None,
        description="Record currently stored under the incoming id; None when the id is new.",
    )
    incoming: T = Field(..., description="Record about to be stored")

    @property
    def is_new(self) -> bool:
        return self.previous is None


class AfterSetEvent(BaseModel, Generic[T]):
    """Published immediately after a record has been committed."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T = Field(..., description="Record that was just stored")
