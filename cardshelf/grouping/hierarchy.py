"""
Multi-level grouping of cards.

The hierarchy is built by applying one dimension at a time: the first
dimension partitions the cards, every following dimension replaces each
current group with its child groups at the same position. Leaf order is
therefore a pre-order walk of the implied tree.

The tree itself is never materialized. GroupedCards.hierarchy maps every
full key ("core|guardian") to an entry holding its parent's key.
"""

import logging
from collections.abc import Sequence
from functools import cmp_to_key

from cardshelf.grouping.partition import apply_grouping
from cardshelf.models.card import Card
from cardshelf.models.grouping import (
    KEY_SEPARATOR,
    GroupedCards,
    GroupingResult,
    GroupingType,
    GroupTreeEntry,
)
from cardshelf.models.metadata import Metadata
from cardshelf.services.collation import Collator
from cardshelf.services.sorting import SortFunction

logger = logging.getLogger(__name__)


def _parent_key(key: str) -> str | None:
    if KEY_SEPARATOR not in key:
        return None
    return key.rsplit(KEY_SEPARATOR, 1)[0]


def _entry(group: GroupingResult, parent: str | None) -> GroupTreeEntry:
    return GroupTreeEntry(
        key=group.key,
        type=group.type,
        count=len(group.cards),
        parent=parent,
    )


def _expand(
    groups: list[GroupingResult],
    grouping: GroupingType,
    hierarchy: dict[str, GroupTreeEntry],
    metadata: Metadata,
    collator: Collator,
) -> list[GroupingResult]:
    """Replace every group with its children along `grouping`."""
    expanded: list[GroupingResult] = []

    for group in groups:
        hierarchy[group.key] = _entry(group, _parent_key(group.key))

        for child in apply_grouping(group.cards, grouping, metadata, collator):
            nested = GroupingResult(
                cards=child.cards,
                key=f"{group.key}{KEY_SEPARATOR}{child.key}",
                type=f"{group.type}{KEY_SEPARATOR}{child.type}",
            )
            hierarchy[nested.key] = _entry(nested, group.key)
            expanded.append(nested)

    return expanded


def get_grouped_cards(
    groupings: Sequence[GroupingType],
    cards: Sequence[Card],
    sort_function: SortFunction,
    metadata: Metadata,
    collator: Collator,
) -> GroupedCards:
    """
    Group cards along an ordered list of dimensions.

    Args:
        groupings: Dimensions, outermost first. Empty means a single "all" group.
        cards: Cards to group (not modified)
        sort_function: Three-way card comparator applied inside each leaf group
        metadata: Pack/cycle/encounter set lookups
        collator: Locale-aware string comparator

    Returns:
        GroupedCards with leaf groups in pre-order and an entry for every
        group at every depth.

    Raises:
        MetadataLookupError: If a card's pack or cycle is missing from metadata

    Examples:
        >>> grouped = get_grouped_cards(
        ...     [GroupingType.TYPE, GroupingType.COST], cards, sort_fn, metadata, collator
        ... )
        >>> [g.key for g in grouped.data]
        ['asset|none', 'asset|2', 'event|2']
    """
    if not groupings:
        groupings = [GroupingType.NONE]

    data = apply_grouping(cards, groupings[0], metadata, collator)
    hierarchy: dict[str, GroupTreeEntry] = {}

    if len(groupings) > 1:
        for grouping in groupings[1:]:
            data = _expand(data, grouping, hierarchy, metadata, collator)
            logger.debug("Expanded along %s into %d groups", grouping.value, len(data))
    else:
        for group in data:
            hierarchy[group.key] = _entry(group, None)

    sort_key = cmp_to_key(sort_function)
    for group in data:
        group.cards.sort(key=sort_key)

    return GroupedCards(data=data, hierarchy=hierarchy)
