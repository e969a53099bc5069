"""
Single-dimension partitioning of cards.

Each strategy walks the cards once, appending every card to the bucket for
its derived key and recording the order in which keys were first seen.
Empty buckets are dropped and the surviving keys are ordered by the
dimension's comparator (or kept in fixed order for base_upgrades/subtype).

INVARIANTS:
- Every returned group is non-empty
- Every card lands in exactly one group, except for subtype grouping,
  which only keeps the NONE / weakness / basicweakness buckets
- Keys are strings; numeric bucket keys are stringified
"""

import logging
from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key

from cardshelf.models.card import Card
from cardshelf.models.grouping import LEVEL_0, NONE, UPGRADE, GroupingResult, GroupingType
from cardshelf.models.metadata import Metadata
from cardshelf.services.collation import Collator
from cardshelf.services.sorting import (
    sort_by_encounter_set,
    sort_by_faction_order,
    sort_by_slots,
    sort_numerical_with_none,
    sort_types_by_order,
)

logger = logging.getLogger(__name__)

SUBTYPE_BUCKETS: list[str] = [NONE, "weakness", "basicweakness"]

BucketKey = Hashable


@dataclass
class Grouping:
    """Buckets of one partition call, with keys in display order."""

    type: GroupingType
    data: dict[BucketKey, list[Card]] = field(default_factory=dict)
    groupings: list[BucketKey] = field(default_factory=list)

    def add(self, key: BucketKey, card: Card) -> None:
        bucket = self.data.get(key)
        if bucket is None:
            self.data[key] = [card]
            self.groupings.append(key)
        else:
            bucket.append(card)

    def omit_empty(self) -> None:
        self.groupings = [key for key in self.groupings if self.data[key]]
        self.data = {key: self.data[key] for key in self.groupings}

    def sort(self, compare: Callable[[BucketKey, BucketKey], int]) -> None:
        self.groupings.sort(key=cmp_to_key(compare))

    def to_results(self) -> list[GroupingResult]:
        return [
            GroupingResult(cards=self.data[key], key=str(key), type=self.type.value)
            for key in self.groupings
        ]


def _group_by(
    cards: Sequence[Card],
    grouping_type: GroupingType,
    key_for: Callable[[Card], BucketKey],
) -> Grouping:
    result = Grouping(type=grouping_type)
    for card in cards:
        result.add(key_for(card), card)
    result.omit_empty()
    return result


def group_by_type_code(cards: Sequence[Card]) -> list[GroupingResult]:
    result = _group_by(cards, GroupingType.TYPE, lambda card: card.type_code)
    result.sort(sort_types_by_order)
    return result.to_results()


def group_by_slots(cards: Sequence[Card], collator: Collator) -> list[GroupingResult]:
    result = _group_by(
        cards,
        GroupingType.SLOT,
        lambda card: "permanent" if card.permanent else (card.real_slot or NONE),
    )
    result.sort(sort_by_slots(collator))
    return result.to_results()


def group_by_level(cards: Sequence[Card]) -> list[GroupingResult]:
    result = _group_by(
        cards,
        GroupingType.LEVEL,
        lambda card: NONE if card.xp is None else card.xp,
    )
    result.sort(sort_numerical_with_none)
    return result.to_results()


def group_by_level0_vs_upgrade(cards: Sequence[Card]) -> list[GroupingResult]:
    """Level 0 (no or zero experience) before upgrades, regardless of input order."""
    result = Grouping(
        type=GroupingType.BASE_UPGRADES,
        data={LEVEL_0: [], UPGRADE: []},
        groupings=[LEVEL_0, UPGRADE],
    )
    for card in cards:
        result.data[UPGRADE if card.xp else LEVEL_0].append(card)
    result.omit_empty()
    return result.to_results()


def group_by_faction(cards: Sequence[Card]) -> list[GroupingResult]:
    result = _group_by(
        cards,
        GroupingType.FACTION,
        lambda card: "multiclass" if card.faction2_code else card.faction_code,
    )
    result.sort(sort_by_faction_order)
    return result.to_results()


def group_by_encounter_set(
    cards: Sequence[Card],
    metadata: Metadata,
    collator: Collator,
) -> list[GroupingResult]:
    result = _group_by(
        cards,
        GroupingType.ENCOUNTER_SET,
        lambda card: card.encounter_code or NONE,
    )
    result.sort(sort_by_encounter_set(metadata, collator))
    return result.to_results()


def group_by_cost(cards: Sequence[Card]) -> list[GroupingResult]:
    result = _group_by(
        cards,
        GroupingType.COST,
        lambda card: NONE if card.cost is None else card.cost,
    )
    result.sort(sort_numerical_with_none)
    return result.to_results()


def group_by_cycle(cards: Sequence[Card], metadata: Metadata) -> list[GroupingResult]:
    result = _group_by(
        cards,
        GroupingType.CYCLE,
        lambda card: metadata.get_pack_cycle(card.pack_code).code,
    )

    def cycle_order(code: BucketKey) -> int:
        return metadata.get_cycle(code).position  # type: ignore[arg-type]

    result.groupings.sort(key=cycle_order)
    return result.to_results()


def resolve_pack_code(card: Card, metadata: Metadata) -> str:
    """
    Pack a card is listed under, accounting for reprints.

    Cycles re-released as separate player ("<cycle>p") and encounter
    ("<cycle>c") packs list their cards under the reprint pack when it
    exists and is marked as a reprint.
    """
    pack = metadata.get_pack(card.pack_code)
    reprint_code = f"{pack.cycle_code}{'c' if card.is_encounter else 'p'}"
    reprint_pack = metadata.packs.get(reprint_code)

    if reprint_pack is not None and reprint_pack.reprint:
        if reprint_pack.code != pack.code:
            logger.debug("Listing card %s under reprint pack %s", card.code, reprint_code)
        return reprint_pack.code

    return pack.code


def group_by_pack(cards: Sequence[Card], metadata: Metadata) -> list[GroupingResult]:
    result = _group_by(cards, GroupingType.PACK, lambda card: resolve_pack_code(card, metadata))

    def pack_order(code: BucketKey) -> tuple[int, int]:
        pack = metadata.get_pack(code)  # type: ignore[arg-type]
        return (metadata.get_cycle(pack.cycle_code).position, pack.position)

    result.groupings.sort(key=pack_order)
    return result.to_results()


def group_by_subtype_code(cards: Sequence[Card]) -> list[GroupingResult]:
    """
    Group into the NONE, weakness and basicweakness buckets.

    Cards with any other subtype are left out of the result.
    """
    result = Grouping(
        type=GroupingType.SUBTYPE,
        data={key: [] for key in SUBTYPE_BUCKETS},
        groupings=list(SUBTYPE_BUCKETS),
    )
    excluded = 0
    for card in cards:
        bucket = result.data.get(card.subtype_code or NONE)
        if bucket is None:
            excluded += 1
        else:
            bucket.append(card)

    if excluded:
        logger.debug("Subtype grouping excluded %d cards with other subtypes", excluded)

    result.omit_empty()
    return result.to_results()


def apply_grouping(
    cards: Sequence[Card],
    grouping: GroupingType,
    metadata: Metadata,
    collator: Collator,
) -> list[GroupingResult]:
    """
    Partition cards along one dimension.

    Args:
        cards: Cards to partition (not modified)
        grouping: Dimension to partition along
        metadata: Pack/cycle/encounter set lookups
        collator: Locale-aware string comparator for slots and encounter sets

    Returns:
        Non-empty groups in the dimension's display order.

    Raises:
        MetadataLookupError: If a card's pack or cycle is missing from metadata
    """
    match grouping:
        case GroupingType.NONE:
            if not cards:
                return []
            return [GroupingResult(cards=list(cards), key="all", type=GroupingType.NONE.value)]
        case GroupingType.SUBTYPE:
            return group_by_subtype_code(cards)
        case GroupingType.TYPE:
            return group_by_type_code(cards)
        case GroupingType.SLOT:
            return group_by_slots(cards, collator)
        case GroupingType.LEVEL:
            return group_by_level(cards)
        case GroupingType.BASE_UPGRADES:
            return group_by_level0_vs_upgrade(cards)
        case GroupingType.FACTION:
            return group_by_faction(cards)
        case GroupingType.ENCOUNTER_SET:
            return group_by_encounter_set(cards, metadata, collator)
        case GroupingType.COST:
            return group_by_cost(cards)
        case GroupingType.CYCLE:
            return group_by_cycle(cards, metadata)
        case GroupingType.PACK:
            return group_by_pack(cards, metadata)
    raise ValueError(f"Unknown grouping: {grouping}")
