"""
Locale-aware string comparison.

Collators are plain three-way comparison functions so they can be passed
around like the card sort functions and wrapped with functools.cmp_to_key.
"""

import unicodedata
from collections.abc import Callable

Collator = Callable[[str, str], int]


def _fold(value: str) -> str:
    """Strip accents and case so "Éclat" sorts next to "eclat"."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def make_collator(locale: str = "en") -> Collator:  # noqa: ARG001
    """
    Build a collator for a locale.

    Every locale collates the same way: strings are compared on their
    accent- and case-folded form first, with the raw strings as tiebreak so
    the order stays total and deterministic. `locale` does not change the
    result.
    """

    def compare(a: str, b: str) -> int:
        return _cmp(_fold(a), _fold(b)) or _cmp(a, b)

    return compare
