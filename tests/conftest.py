from collections.abc import Callable
from typing import Any

import pytest

from cardshelf.models.card import Card
from cardshelf.models.metadata import Cycle, EncounterSet, Metadata, Pack
from cardshelf.services.collation import Collator, make_collator
from cardshelf.services.i18n import Translator, get_translator


@pytest.fixture
def metadata() -> Metadata:
    """
    Two cycles: "core" (no reprints) and "dwl", whose player and encounter
    cards were re-released in the "dwlp" and "dwlc" reprint packs.
    """
    return Metadata(
        cycles={
            "core": Cycle(code="core", name="Core Set", position=1),
            "dwl": Cycle(code="dwl", name="The Dunwich Legacy", position=2),
        },
        packs={
            "core": Pack(code="core", name="Core Set", cycle_code="core", position=1),
            "dwl": Pack(code="dwl", name="The Dunwich Legacy", cycle_code="dwl", position=1),
            "tmm": Pack(code="tmm", name="The Miskatonic Museum", cycle_code="dwl", position=2),
            "dwlp": Pack(
                code="dwlp",
                name="The Dunwich Legacy Investigator Expansion",
                cycle_code="dwl",
                position=10,
                reprint=True,
            ),
            "dwlc": Pack(
                code="dwlc",
                name="The Dunwich Legacy Campaign Expansion",
                cycle_code="dwl",
                position=11,
                reprint=True,
            ),
        },
        encounter_sets={
            "torch": EncounterSet(code="torch", name="The Gathering"),
            "rats": EncounterSet(code="rats", name="Rats"),
            "cultists": EncounterSet(code="cultists", name="Cult of Umôrdhoth"),
        },
    )


@pytest.fixture
def collator() -> Collator:
    return make_collator("en")


@pytest.fixture
def translate() -> Translator:
    return get_translator("en")


@pytest.fixture
def make_card() -> Callable[..., Card]:
    """Build a player card with defaults for every field not given."""
    counter = iter(range(1, 10_000))

    def _make(**kwargs: Any) -> Card:
        n = next(counter)
        defaults: dict[str, Any] = {
            "code": f"{n:05d}",
            "name": f"Card {n}",
            "type_code": "asset",
            "pack_code": "core",
        }
        return Card(**{**defaults, **kwargs})

    return _make


def by_code(a: Card, b: Card) -> int:
    return (a.code > b.code) - (a.code < b.code)


def keep_order(_a: Card, _b: Card) -> int:
    return 0


@pytest.fixture
def sort_by_code() -> Callable[[Card, Card], int]:
    return by_code


@pytest.fixture
def sort_keep_order() -> Callable[[Card, Card], int]:
    return keep_order
