"""Score functions for :meth:`RecordStore.select_best`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def field_score(name: str) -> Callable[[Any], float]:
    """Score records by the numeric attribute *name*."""

    def score(record: Any) -> float:
        return float(getattr(record, name))

    score.__name__ = f"field_score_{name}"
    return score


def sum_of_fields(*names: str) -> Callable[[Any], float]:
    """Score records by the sum of several numeric attributes."""
    if not names:
        raise ValueError("sum_of_fields needs at least one field name")

    def score(record: Any) -> float:
        return float(sum(getattr(record, name) for name in names))

    score.__name__ = "sum_of_" + "_".join(names)
    return score
