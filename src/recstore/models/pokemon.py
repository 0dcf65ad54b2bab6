"""Example record type used by the CLI and the end-to-end tests."""

from __future__ import annotations

from pydantic import Field

from recstore.models._base import BaseRecord


class Pokemon(BaseRecord):
    """A pokemon with its two combat stats."""

    attack: int = Field(..., ge=0, description="Attack stat")
    defense: int = Field(..., ge=0, description="Defense stat")
