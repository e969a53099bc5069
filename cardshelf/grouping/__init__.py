"""
Card grouping engine.

Partitions flat card lists into multi-level, ordered groups for
sectioned list views.
"""

from cardshelf.grouping.hierarchy import get_grouped_cards
from cardshelf.grouping.labels import get_group_label, get_grouping_key_label
from cardshelf.grouping.parsing import GROUPING_DOMAINS, CardKind, parse_groupings
from cardshelf.grouping.partition import (
    SUBTYPE_BUCKETS,
    apply_grouping,
    resolve_pack_code,
)

__all__ = [
    "CardKind",
    "GROUPING_DOMAINS",
    "SUBTYPE_BUCKETS",
    "apply_grouping",
    "get_group_label",
    "get_grouped_cards",
    "get_grouping_key_label",
    "parse_groupings",
    "resolve_pack_code",
]
