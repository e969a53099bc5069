"""
Print a grouped card list.

Loads cards and metadata from JSON files and prints the group tree with
labels and card counts, e.g.:

    python -m cardshelf.jobs.group_cards --group-by cycle faction
"""

import argparse
import logging
from collections import defaultdict
from pathlib import Path

from cardshelf.config import settings
from cardshelf.grouping import get_group_label, get_grouped_cards, parse_groupings
from cardshelf.models.grouping import GroupedCards, GroupTreeEntry
from cardshelf.models.metadata import Metadata
from cardshelf.services.card_data import load_cards, load_metadata
from cardshelf.services.collation import make_collator
from cardshelf.services.i18n import TranslateFunction, get_translator
from cardshelf.services.sorting import make_sort_function

logger = logging.getLogger(__name__)


def render_tree(
    grouped: GroupedCards,
    metadata: Metadata,
    translate: TranslateFunction,
    show_cards: bool = False,
) -> str:
    """
    Render grouped cards as an indented outline.

    Groups are printed in pre-order, each under its parent; leaf groups
    optionally list their card names.
    """
    lines: list[str] = []
    leaves = {group.key: group for group in grouped.data}
    children: dict[str | None, list[GroupTreeEntry]] = defaultdict(list)
    for entry in grouped.hierarchy.values():
        children[entry.parent].append(entry)

    def visit(parent: str | None, depth: int) -> None:
        for entry in children.get(parent, []):
            label = get_group_label(entry.key, entry.type, metadata, translate) or entry.key
            lines.append(f"{'  ' * depth}{label} ({entry.count})")
            leaf = leaves.get(entry.key)
            if leaf is not None and show_cards:
                for card in leaf.cards:
                    lines.append(f"{'  ' * (depth + 1)}- {card.name}")
            visit(entry.key, depth + 1)

    visit(None, 0)
    return "\n".join(lines)


def run_grouping(
    group_by: list[str],
    cards_path: Path | None = None,
    metadata_path: Path | None = None,
    sorting: list[str] | None = None,
    locale: str | None = None,
    show_cards: bool = False,
) -> str:
    """Load data, group it and return the rendered outline."""
    locale = locale or settings.default_locale
    groupings = parse_groupings(group_by)
    metadata = load_metadata(metadata_path)
    cards = load_cards(cards_path)
    collator = make_collator(locale)

    grouped = get_grouped_cards(
        groupings,
        cards,
        make_sort_function(sorting or settings.default_sorting, metadata, collator),
        metadata,
        collator,
    )
    logger.info("Grouped %d cards into %d groups", len(cards), len(grouped.data))

    return render_tree(grouped, metadata, get_translator(locale), show_cards=show_cards)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Print cards grouped into sections.")
    parser.add_argument("--group-by", nargs="*", default=[], help="Groupings, outermost first")
    parser.add_argument("--cards", type=Path, default=None, help="Path to cards JSON")
    parser.add_argument("--metadata", type=Path, default=None, help="Path to metadata JSON")
    parser.add_argument("--sort", nargs="*", default=None, help="Card sorting inside groups")
    parser.add_argument("--locale", default=None)
    parser.add_argument("--show-cards", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        output = run_grouping(
            args.group_by,
            cards_path=args.cards,
            metadata_path=args.metadata,
            sorting=args.sort,
            locale=args.locale,
            show_cards=args.show_cards,
        )
    except Exception as e:
        logger.error("Failed to group cards: %s", e)
        raise

    print(output)


if __name__ == "__main__":
    main()
