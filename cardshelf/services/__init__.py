"""
CardShelf services.

Orderings, collation, localization and data loading used around the
grouping engine.
"""

from cardshelf.services.card_data import (
    card_from_dict,
    cards_from_list,
    load_cards,
    load_metadata,
    metadata_from_dict,
)
from cardshelf.services.collation import Collator, make_collator
from cardshelf.services.formatting import display_pack_name, format_slots, shorten_pack_name
from cardshelf.services.i18n import TranslateFunction, Translator, get_translator
from cardshelf.services.sorting import (
    FACTION_ORDER,
    SORTING_TYPES,
    TYPE_ORDER,
    SortFunction,
    make_sort_function,
)

__all__ = [
    "Collator",
    "FACTION_ORDER",
    "SORTING_TYPES",
    "SortFunction",
    "TYPE_ORDER",
    "TranslateFunction",
    "Translator",
    "card_from_dict",
    "cards_from_list",
    "display_pack_name",
    "format_slots",
    "get_translator",
    "load_cards",
    "load_metadata",
    "make_collator",
    "make_sort_function",
    "metadata_from_dict",
    "shorten_pack_name",
]
