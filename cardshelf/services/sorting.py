"""
Orderings used by the grouping engine and card sort functions.

Two families live here:
- Key orderings: three-way comparators over bucket keys (type codes,
  faction codes, slots, encounter set codes, numbers)
- Card sort functions: three-way comparators over cards, combined by
  make_sort_function() into the comparator handed to the hierarchy builder
"""

import logging
from collections.abc import Callable, Sequence

from cardshelf.models.card import Card
from cardshelf.models.grouping import NONE
from cardshelf.models.metadata import Metadata
from cardshelf.services.collation import Collator

logger = logging.getLogger(__name__)

SortFunction = Callable[[Card, Card], int]
KeyComparator = Callable[[str, str], int]

TYPE_ORDER: list[str] = [
    "investigator",
    "asset",
    "event",
    "skill",
    "location",
    "enemy",
    "enemy_location",
    "key",
    "treachery",
    "story",
    "act",
    "agenda",
    "scenario",
]

FACTION_ORDER: list[str] = [
    "guardian",
    "seeker",
    "rogue",
    "mystic",
    "survivor",
    "multiclass",
    "neutral",
    "mythos",
]

PERMANENT = "permanent"


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def _sort_by_fixed_order(order: list[str]) -> KeyComparator:
    """Codes in `order` come first by index; unknown codes follow by code."""
    ranks = {code: i for i, code in enumerate(order)}

    def compare(a: str, b: str) -> int:
        rank_a = ranks.get(a, len(order))
        rank_b = ranks.get(b, len(order))
        return _cmp(rank_a, rank_b) or _cmp(a, b)

    return compare


sort_types_by_order = _sort_by_fixed_order(TYPE_ORDER)
sort_by_faction_order = _sort_by_fixed_order(FACTION_ORDER)


def sort_numerical(a: int | float, b: int | float) -> int:
    return _cmp(a, b)


def sort_numerical_with_none(a: int | str, b: int | str) -> int:
    """NONE sorts first, everything else ascending."""
    if a == NONE:
        return 0 if b == NONE else -1
    if b == NONE:
        return 1
    return sort_numerical(a, b)  # type: ignore[arg-type]


def sort_by_slots(collator: Collator) -> KeyComparator:
    """Named slots alphabetically, then permanents, then cards without a slot."""

    def rank(slot: str) -> int:
        if slot == NONE:
            return 2
        if slot == PERMANENT:
            return 1
        return 0

    def compare(a: str, b: str) -> int:
        return _cmp(rank(a), rank(b)) or collator(a, b)

    return compare


def sort_by_encounter_set(metadata: Metadata, collator: Collator) -> KeyComparator:
    """Encounter sets by display name; cards without a set go last."""

    def name(code: str) -> str:
        encounter_set = metadata.encounter_sets.get(code)
        return encounter_set.name if encounter_set else code

    def compare(a: str, b: str) -> int:
        if a == NONE or b == NONE:
            return _cmp(a == NONE, b == NONE)
        return collator(name(a), name(b)) or _cmp(a, b)

    return compare


# Card sort functions


def sort_by_name(collator: Collator) -> SortFunction:
    def compare(a: Card, b: Card) -> int:
        return collator(a.name, b.name)

    return compare


def sort_by_level(a: Card, b: Card) -> int:
    """Cards without a level sort before level 0."""
    return _cmp(-1 if a.xp is None else a.xp, -1 if b.xp is None else b.xp)


def sort_by_cost(a: Card, b: Card) -> int:
    """Cards without a cost sort first, X costs (-2) right after."""
    return _cmp(-3 if a.cost is None else a.cost, -3 if b.cost is None else b.cost)


def sort_by_position(a: Card, b: Card) -> int:
    return _cmp(a.position, b.position)


def sort_by_type(a: Card, b: Card) -> int:
    return sort_types_by_order(a.type_code, b.type_code)


def sort_by_faction(a: Card, b: Card) -> int:
    faction_a = "multiclass" if a.faction2_code else a.faction_code
    faction_b = "multiclass" if b.faction2_code else b.faction_code
    return sort_by_faction_order(faction_a, faction_b)


def sort_by_slot(collator: Collator) -> SortFunction:
    compare_slots = sort_by_slots(collator)

    def slot(card: Card) -> str:
        return PERMANENT if card.permanent else (card.real_slot or NONE)

    def compare(a: Card, b: Card) -> int:
        return compare_slots(slot(a), slot(b))

    return compare


def sort_by_cycle(metadata: Metadata) -> SortFunction:
    """By cycle position, then pack position, then position in pack."""

    def key(card: Card) -> tuple[int, int, int]:
        pack = metadata.get_pack(card.pack_code)
        cycle = metadata.get_cycle(pack.cycle_code)
        return (cycle.position, pack.position, card.position)

    def compare(a: Card, b: Card) -> int:
        return _cmp(key(a), key(b))

    return compare


SORTING_TYPES: list[str] = [
    "name",
    "level",
    "cost",
    "position",
    "type",
    "faction",
    "slot",
    "cycle",
]


def _card_sort_function(sorting: str, metadata: Metadata, collator: Collator) -> SortFunction:
    match sorting:
        case "name":
            return sort_by_name(collator)
        case "level":
            return sort_by_level
        case "cost":
            return sort_by_cost
        case "position":
            return sort_by_position
        case "type":
            return sort_by_type
        case "faction":
            return sort_by_faction
        case "slot":
            return sort_by_slot(collator)
        case "cycle":
            return sort_by_cycle(metadata)
    raise ValueError(f"Unknown sorting: {sorting}")


def make_sort_function(
    sorting: Sequence[str],
    metadata: Metadata,
    collator: Collator,
) -> SortFunction:
    """
    Combine card sort functions into a single comparator.

    Earlier entries take precedence; later entries only break ties.
    Remaining ties are broken by card code so the order is total.

    Args:
        sorting: Sort names from SORTING_TYPES, most significant first
        metadata: Metadata used by the cycle sort
        collator: Locale-aware string comparator

    Raises:
        ValueError: If a sort name is unknown
    """
    functions = [_card_sort_function(s, metadata, collator) for s in sorting]
    logger.debug("Built card sort function from %s", list(sorting))

    def compare(a: Card, b: Card) -> int:
        for fn in functions:
            result = fn(a, b)
            if result:
                return result
        return _cmp(a.code, b.code)

    return compare
