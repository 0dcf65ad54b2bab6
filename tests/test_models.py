from __future__ import annotations

import pytest
from pydantic import ValidationError

from recstore.models import BaseRecord, HasId, Pokemon
from recstore.state.events import AfterSetEvent, BeforeSetEvent


def test_pokemon_id_is_stripped() -> None:
    pokemon = Pokemon(id="  bulbasaur ", attack=50, defense=10)

    assert pokemon.id == "bulbasaur"


@pytest.mark.parametrize("record_id", ["", "   "])
def test_blank_id_rejected(record_id: str) -> None:
    with pytest.raises(ValidationError, match="id must be non-empty"):
        Pokemon(id=record_id, attack=1, defense=1)


def test_negative_stats_rejected() -> None:
    with pytest.raises(ValidationError):
        Pokemon(id="missingno", attack=-1, defense=0)


def test_records_are_frozen() -> None:
    pokemon = Pokemon(id="squirtle", attack=40, defense=30)

    with pytest.raises(ValidationError):
        pokemon.attack = 99  # type: ignore[misc]


def test_unknown_fields_rejected() -> None:
    with pytest.raises(ValidationError):
        BaseRecord.model_validate({"id": "x", "extra": 1})


def test_records_satisfy_has_id_protocol() -> None:
    assert isinstance(Pokemon(id="eevee", attack=55, defense=50), HasId)


def test_events_are_frozen_and_keep_identity() -> None:
    pokemon = Pokemon(id="eevee", attack=55, defense=50)

    before = BeforeSetEvent(previous=None, incoming=pokemon)
    after = AfterSetEvent(value=pokemon)

    assert before.incoming is pokemon
    assert before.is_new
    assert after.value is pokemon
    with pytest.raises(ValidationError):
        after.value = pokemon  # type: ignore[misc]
