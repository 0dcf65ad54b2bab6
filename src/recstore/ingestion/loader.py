"""File loader for external records.

Supported inputs (UTF-8):

- ``.jsonl`` / ``.ndjson``: one JSON object per line, blank lines skipped.
  Records are yielded lazily, so a bad line surfaces only after every
  preceding record has been yielded.
- anything else: a single JSON array of objects, validated as a whole.

Every object is validated against the given pydantic record model.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from recstore.exceptions import FeedLoadError

_logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_LINE_SUFFIXES = frozenset({".jsonl", ".ndjson"})


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FeedLoadError(f"cannot read {path}: {exc}", source=str(path)) from exc


def _load_array(path: Path, record_type: type[ModelT]) -> list[ModelT]:
    text = _read_text(path)
    adapter = TypeAdapter(list[record_type])  # type: ignore[valid-type]
    try:
        records = adapter.validate_json(text)
    except ValidationError as exc:
        raise FeedLoadError(f"invalid records in {path}: {exc}", source=str(path)) from exc
    _logger.debug("Loaded %d %s records from %s", len(records), record_type.__name__, path)
    return records


def _iter_lines(path: Path, record_type: type[ModelT]) -> Iterator[ModelT]:
    text = _read_text(path)
    count = 0
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            record = record_type.model_validate_json(line)
        except ValidationError as exc:
            raise FeedLoadError(
                f"invalid record at {path}:{lineno}: {exc}",
                source=str(path),
                line=lineno,
            ) from exc
        count += 1
        yield record
    _logger.debug("Loaded %d %s records from %s", count, record_type.__name__, path)


def load_records(path: str | Path, record_type: type[ModelT]) -> Iterator[ModelT]:
    """Yield validated *record_type* instances read from *path*.

    Raises
    ------
    FeedLoadError
        The file cannot be read, is not valid JSON, or a record fails
        validation.
    """
    file_path = Path(path)
    if file_path.suffix.lower() in _LINE_SUFFIXES:
        return _iter_lines(file_path, record_type)
    return iter(_load_array(file_path, record_type))
