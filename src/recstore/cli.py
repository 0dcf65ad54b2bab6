"""Command-line entry point: load a pokemon file into a store.

Usage
-----
::

    recstore pokemon.json
    recstore pokemon.jsonl --list --best attack defense
    RECSTORE_LIFETIME=singleton recstore pokemon.json -v

Options::

    --list               Print every stored id (visitor)
    --best FIELD ...     Print the record with the greatest sum of FIELDs
    -v, --verbose        DEBUG console logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from recstore.config import StoreConfig, StoreLifetime
from recstore.exceptions import RecStoreError
from recstore.ingestion.feed import FeedAdapter, feed_records
from recstore.ingestion.loader import load_records
from recstore.models import Pokemon
from recstore.state.events import AfterSetEvent
from recstore.state.registry import StoreRegistry, provide_store
from recstore.strategies import sum_of_fields

_logger = logging.getLogger(__name__)

_STAT_FIELDS = ("attack", "defense")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="recstore", description="Load pokemon records into an in-memory store.")
    parser.add_argument("file", type=Path, help="JSON array (.json) or JSON Lines (.jsonl) file")
    parser.add_argument("--list", action="store_true", help="print every stored id")
    parser.add_argument("--best", nargs="+", choices=_STAT_FIELDS, metavar="FIELD", help="stat fields to rank by")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable DEBUG logging")
    return parser.parse_args(argv)


def _log_added(event: AfterSetEvent[Pokemon]) -> None:
    _logger.info("new pokemon added: %s", event.value.id)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        config = StoreConfig.from_env()
    except RecStoreError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    registry = StoreRegistry(strict_types=config.strict_types) if config.lifetime == StoreLifetime.SINGLETON else None
    store = provide_store(Pokemon, config=config, registry=registry)
    store.on_after_add(_log_added)

    try:
        count = feed_records(FeedAdapter(store), load_records(args.file, Pokemon))
    except RecStoreError as exc:
        print(f"Load failed: {exc}", file=sys.stderr)
        return 2

    print(f"Loaded {count} records ({len(store)} unique ids)")

    if args.list:
        store.visit(lambda pokemon: print(pokemon.id))

    if args.best:
        best = store.select_best(sum_of_fields(*args.best))
        if best is None:
            print("No records")
        else:
            print(f"Best by {'+'.join(args.best)}: {best.id} (attack={best.attack}, defense={best.defense})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
