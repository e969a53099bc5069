"""Display labels for grouping key segments."""

from cardshelf.models.grouping import KEY_SEPARATOR, LEVEL_0, NONE, UPGRADE, GroupingType
from cardshelf.models.metadata import Metadata
from cardshelf.services.formatting import display_pack_name, format_slots, shorten_pack_name
from cardshelf.services.i18n import TranslateFunction


def get_grouping_key_label(
    type: str,
    segment: str,
    metadata: Metadata,
    translate: TranslateFunction,
) -> str:
    """
    Label for one segment of a grouping key.

    Args:
        type: Dimension name of the segment (one segment of GroupingResult.type)
        segment: Key segment (one segment of GroupingResult.key)
        metadata: Used to look up cycle, pack and encounter set names
        translate: Message resolver, called as translate(key, params)

    Returns:
        The label, or "" for segments that have no label (e.g. NONE under
        subtype, unknown packs or unknown dimensions).
    """
    match type:
        case GroupingType.NONE:
            return translate("lists.all_cards")

        case GroupingType.SUBTYPE:
            if segment == NONE:
                return ""
            return translate(f"common.subtype.{segment}")

        case GroupingType.TYPE:
            return translate(f"common.type.{segment}", {"count": 1})

        case GroupingType.CYCLE:
            return display_pack_name(metadata.cycles.get(segment)) or ""

        case GroupingType.ENCOUNTER_SET:
            encounter_set = metadata.encounter_sets.get(segment)
            return encounter_set.name if encounter_set else ""

        case GroupingType.SLOT:
            if segment == NONE:
                return translate("common.slot.none")
            if segment == "permanent":
                return translate("common.permanent")
            return format_slots(segment, translate)

        case GroupingType.LEVEL:
            if segment == NONE:
                return translate("common.level.none")
            return translate("common.level.value", {"level": segment})

        case GroupingType.COST:
            if segment == NONE:
                return translate("common.cost.none")
            if segment == "-2":
                return translate("common.cost.x")
            return translate("common.cost.value", {"cost": segment})

        case GroupingType.FACTION:
            return translate(f"common.factions.{segment}")

        case GroupingType.BASE_UPGRADES:
            if segment == LEVEL_0:
                return translate("common.level.base")
            if segment == UPGRADE:
                return translate("common.level.upgrades")
            return ""

        case GroupingType.PACK:
            return shorten_pack_name(metadata.packs.get(segment)) or ""

    return ""


def get_group_label(
    key: str,
    type: str,
    metadata: Metadata,
    translate: TranslateFunction,
) -> str:
    """Label for the deepest segment of a full group key/type path."""
    segment = key.rsplit(KEY_SEPARATOR, 1)[-1]
    segment_type = type.rsplit(KEY_SEPARATOR, 1)[-1]
    return get_grouping_key_label(segment_type, segment, metadata, translate)
