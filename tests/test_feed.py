from __future__ import annotations

import json
from pathlib import Path

import pytest

from recstore.exceptions import FeedLoadError, InvalidRecordError
from recstore.ingestion.feed import FeedAdapter, feed_records
from recstore.ingestion.loader import load_records
from recstore.models import Pokemon
from recstore.state.store import RecordStore

_POKEMON = [
    {"id": "bulbasaur", "attack": 50, "defense": 10},
    {"id": "squirtle", "attack": 40, "defense": 30},
]


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_add_record_sets_into_store_and_notifies() -> None:
    store: RecordStore[Pokemon] = RecordStore(Pokemon)
    observed: list[str] = []
    store.on_after_add(lambda ev: observed.append(ev.value.id))
    adapter = FeedAdapter(store)

    adapter.add_record(Pokemon(id="bulbasaur", attack=50, defense=10))

    assert adapter.store is store
    assert observed == ["bulbasaur"]


def test_feed_records_counts_and_stops_on_failure() -> None:
    store: RecordStore[Pokemon] = RecordStore(Pokemon)
    records = [
        Pokemon(id="bulbasaur", attack=50, defense=10),
        Pokemon.model_construct(id="", attack=1, defense=1),
        Pokemon(id="squirtle", attack=40, defense=30),
    ]

    with pytest.raises(InvalidRecordError):
        feed_records(FeedAdapter(store), records)

    assert store.ids() == ["bulbasaur"]


def test_load_json_array(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "pokemon.json", _POKEMON)

    records = list(load_records(path, Pokemon))

    assert [record.id for record in records] == ["bulbasaur", "squirtle"]
    assert records[0].attack == 50


def test_load_json_lines_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "pokemon.jsonl"
    path.write_text(json.dumps(_POKEMON[0]) + "\n\n" + json.dumps(_POKEMON[1]) + "\n", encoding="utf-8")

    records = list(load_records(path, Pokemon))

    assert [record.id for record in records] == ["bulbasaur", "squirtle"]


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FeedLoadError) as excinfo:
        list(load_records(tmp_path / "absent.json", Pokemon))

    assert excinfo.value.source.endswith("absent.json")


def test_load_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(FeedLoadError, match="invalid records"):
        load_records(path, Pokemon)


def test_load_invalid_record_in_array_raises(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "pokemon.json", [{"id": "x", "attack": -5, "defense": 0}])

    with pytest.raises(FeedLoadError):
        load_records(path, Pokemon)


def test_json_lines_error_reports_line_after_earlier_records(tmp_path: Path) -> None:
    path = tmp_path / "pokemon.ndjson"
    path.write_text(json.dumps(_POKEMON[0]) + "\n" + '{"id": ""}\n', encoding="utf-8")
    store: RecordStore[Pokemon] = RecordStore(Pokemon)

    with pytest.raises(FeedLoadError) as excinfo:
        feed_records(FeedAdapter(store), load_records(path, Pokemon))

    assert excinfo.value.line == 2
    assert store.ids() == ["bulbasaur"]


def test_file_feed_end_to_end(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "pokemon.json", _POKEMON)
    store: RecordStore[Pokemon] = RecordStore(Pokemon)
    observed: list[str] = []
    store.on_after_add(lambda ev: observed.append(ev.value.id))

    count = feed_records(FeedAdapter(store), load_records(path, Pokemon))

    assert count == 2
    assert observed == ["bulbasaur", "squirtle"]
    bulbasaur = store.get("bulbasaur")
    assert bulbasaur is not None
    assert bulbasaur.attack == 50
