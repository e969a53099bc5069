"""Display helpers for pack names and slots."""

from cardshelf.models.metadata import Cycle, Pack
from cardshelf.services.i18n import TranslateFunction

_PACK_NAME_SUFFIXES = (
    "Investigator Expansion",
    "Campaign Expansion",
)


def display_pack_name(pack: Pack | Cycle | None) -> str | None:
    if pack is None:
        return None
    return pack.name


def shorten_pack_name(pack: Pack | None) -> str | None:
    """Drop the expansion suffix from a pack name, e.g. "Edge of the Earth"."""
    if pack is None:
        return None
    name = pack.name
    for suffix in _PACK_NAME_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)].strip()
    return name


def format_slots(slots: str, translate: TranslateFunction) -> str:
    """
    Translate a slot designation such as "Hand x2. Arcane".

    Each "."-separated slot is looked up under common.slot.<slot>; slots
    without a translation are kept as-is.
    """
    formatted = []
    for slot in slots.split("."):
        slot = slot.strip()
        if not slot:
            continue
        key = f"common.slot.{slot.lower().replace(' ', '_')}"
        label = translate(key)
        formatted.append(slot if label == key else label)
    return ". ".join(formatted)
