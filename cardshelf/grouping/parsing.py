"""Validation of grouping names coming from requests and the CLI."""

from collections.abc import Iterable
from typing import Literal

from cardshelf.models.failure import InvalidGroupingError
from cardshelf.models.grouping import (
    ENCOUNTER_GROUPING_TYPES,
    PLAYER_GROUPING_TYPES,
    GroupingType,
)

CardKind = Literal["player", "encounter"]

GROUPING_DOMAINS: dict[str, list[GroupingType]] = {
    "player": PLAYER_GROUPING_TYPES,
    "encounter": ENCOUNTER_GROUPING_TYPES,
}


def parse_groupings(
    names: Iterable[str],
    card_kind: CardKind | None = None,
) -> list[GroupingType]:
    """
    Convert grouping names to GroupingType values.

    Args:
        names: Grouping names, outermost first
        card_kind: When set, only the groupings offered for that kind of
            card list are accepted ("none" is always accepted)

    Raises:
        InvalidGroupingError: If a name is unknown or not allowed
    """
    allowed = list(GroupingType) if card_kind is None else GROUPING_DOMAINS[card_kind]
    allowed_names = [g.value for g in allowed]

    groupings: list[GroupingType] = []
    for name in names:
        if name != GroupingType.NONE.value and name not in allowed_names:
            raise InvalidGroupingError(name, allowed_names)
        groupings.append(GroupingType(name))
    return groupings
