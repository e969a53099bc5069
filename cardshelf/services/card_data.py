"""
Card and metadata loading.

Reads the JSON exports used by the CLI job and converts raw dicts into
Card and Metadata objects. Unknown fields in the raw data are ignored.
"""

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

from cardshelf.config import settings
from cardshelf.models.card import Card
from cardshelf.models.metadata import Cycle, EncounterSet, Metadata, Pack

logger = logging.getLogger(__name__)

_CARD_FIELDS = {f.name for f in fields(Card)}


def card_from_dict(data: dict[str, Any]) -> Card:
    """Build a Card from a raw dict, dropping fields Card does not know."""
    return Card(**{k: v for k, v in data.items() if k in _CARD_FIELDS})


def cards_from_list(items: list[dict[str, Any]]) -> list[Card]:
    return [card_from_dict(item) for item in items]


def metadata_from_dict(data: dict[str, Any]) -> Metadata:
    """
    Build Metadata from raw lists.

    Expects {"packs": [...], "cycles": [...], "encounter_sets": [...]}; any
    of the lists may be missing. A pack's "reprint" may be a bool or an
    object (e.g. {"type": "player"}); any truthy value marks a reprint.
    """
    packs = {
        p["code"]: Pack(
            code=p["code"],
            name=p.get("name", p["code"]),
            cycle_code=p["cycle_code"],
            position=p.get("position", 0),
            reprint=bool(p.get("reprint")),
        )
        for p in data.get("packs", [])
    }
    cycles = {
        c["code"]: Cycle(
            code=c["code"],
            name=c.get("name", c["code"]),
            position=c.get("position", 0),
        )
        for c in data.get("cycles", [])
    }
    encounter_sets = {
        e["code"]: EncounterSet(code=e["code"], name=e.get("name", e["code"]))
        for e in data.get("encounter_sets", [])
    }
    return Metadata(packs=packs, cycles=cycles, encounter_sets=encounter_sets)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Data file not found at {path}.")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_metadata(path: Path | None = None) -> Metadata:
    """
    Load metadata from a JSON file.

    Args:
        path: Path to JSON file. Defaults to <data_dir>/metadata.json

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if path is None:
        path = settings.data_dir / "metadata.json"

    metadata = metadata_from_dict(_read_json(path))
    logger.info(
        "Loaded metadata: %d packs, %d cycles, %d encounter sets",
        len(metadata.packs),
        len(metadata.cycles),
        len(metadata.encounter_sets),
    )
    return metadata


def load_cards(path: Path | None = None) -> list[Card]:
    """
    Load cards from a JSON file containing a list of card objects.

    Args:
        path: Path to JSON file. Defaults to <data_dir>/cards.json

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if path is None:
        path = settings.data_dir / "cards.json"

    cards = cards_from_list(_read_json(path))
    logger.info("Loaded %d cards from %s", len(cards), path)
    return cards
