"""
Grouping result types.

Keys and types of nested groups are "|"-joined paths, e.g. key
"core|guardian" with type "cycle|faction". The hierarchy is a flat mapping
from full key to entry; parents are referenced by key, never owned.
"""

from dataclasses import dataclass, field
from enum import Enum

from cardshelf.models.card import Card

# Placeholder bucket for cards without a value for a dimension
NONE = "none"

LEVEL_0 = "level0"
UPGRADE = "upgrade"

KEY_SEPARATOR = "|"


class GroupingType(str, Enum):
    """Dimensions cards can be grouped along."""

    NONE = "none"
    BASE_UPGRADES = "base_upgrades"
    COST = "cost"
    CYCLE = "cycle"
    ENCOUNTER_SET = "encounter_set"
    FACTION = "faction"
    LEVEL = "level"
    PACK = "pack"
    SLOT = "slot"
    SUBTYPE = "subtype"
    TYPE = "type"


PLAYER_GROUPING_TYPES: list[GroupingType] = [
    GroupingType.BASE_UPGRADES,
    GroupingType.COST,
    GroupingType.CYCLE,
    GroupingType.FACTION,
    GroupingType.LEVEL,
    GroupingType.PACK,
    GroupingType.SLOT,
    GroupingType.SUBTYPE,
    GroupingType.TYPE,
]

ENCOUNTER_GROUPING_TYPES: list[GroupingType] = [
    GroupingType.CYCLE,
    GroupingType.ENCOUNTER_SET,
    GroupingType.PACK,
    GroupingType.SUBTYPE,
    GroupingType.TYPE,
]


@dataclass
class GroupingResult:
    """A non-empty group of cards at some depth of the hierarchy."""

    cards: list[Card]
    key: str
    type: str


@dataclass(frozen=True, slots=True)
class GroupTreeEntry:
    key: str
    type: str
    count: int
    parent: str | None = None


@dataclass
class GroupedCards:
    """
    Output of the hierarchy builder.

    Attributes:
        data: Leaf groups in pre-order of the implied tree
        hierarchy: Every group (leaf and intermediate) keyed by full key
    """

    data: list[GroupingResult] = field(default_factory=list)
    hierarchy: dict[str, GroupTreeEntry] = field(default_factory=dict)

    def children_of(self, key: str | None) -> list[GroupTreeEntry]:
        """Direct children of a group, or the top-level groups for None."""
        return [entry for entry in self.hierarchy.values() if entry.parent == key]

    def total_cards(self) -> int:
        """Number of cards across all leaf groups."""
        return sum(len(group.cards) for group in self.data)
