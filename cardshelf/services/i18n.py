"""
Label localization.

A Translator resolves dotted message keys against a nested catalog,
i18next style: "{{name}}" placeholders are interpolated from params and a
`count` param selects a "<key>_one" / "<key>_other" plural form. Unknown
keys resolve to the key itself.
"""

import logging
import re
from collections.abc import Callable, Mapping
from functools import lru_cache
from typing import Any

logger = logging.getLogger(__name__)

TranslateFunction = Callable[..., str]

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")

EN_MESSAGES: dict[str, Any] = {
    "lists": {
        "all_cards": "All cards",
    },
    "common": {
        "permanent": "Permanent",
        "cost": {
            "none": "No cost",
            "x": "Cost: X",
            "value": "Cost: {{cost}}",
        },
        "level": {
            "none": "No level",
            "value": "Level {{level}}",
            "base": "Level 0",
            "upgrades": "Upgrades",
        },
        "slot": {
            "none": "No slot",
            "accessory": "Accessory",
            "ally": "Ally",
            "arcane": "Arcane",
            "arcane_x2": "Arcane x2",
            "body": "Body",
            "hand": "Hand",
            "hand_x2": "Hand x2",
            "tarot": "Tarot",
        },
        "subtype": {
            "weakness": "Weakness",
            "basicweakness": "Basic weakness",
        },
        "factions": {
            "guardian": "Guardian",
            "seeker": "Seeker",
            "rogue": "Rogue",
            "mystic": "Mystic",
            "survivor": "Survivor",
            "multiclass": "Multiclass",
            "neutral": "Neutral",
            "mythos": "Mythos",
        },
        "type": {
            "investigator_one": "Investigator",
            "investigator_other": "Investigators",
            "asset_one": "Asset",
            "asset_other": "Assets",
            "event_one": "Event",
            "event_other": "Events",
            "skill_one": "Skill",
            "skill_other": "Skills",
            "location_one": "Location",
            "location_other": "Locations",
            "enemy_one": "Enemy",
            "enemy_other": "Enemies",
            "enemy_location_one": "Enemy-Location",
            "enemy_location_other": "Enemy-Locations",
            "key_one": "Key",
            "key_other": "Keys",
            "treachery_one": "Treachery",
            "treachery_other": "Treacheries",
            "story_one": "Story",
            "story_other": "Stories",
            "act_one": "Act",
            "act_other": "Acts",
            "agenda_one": "Agenda",
            "agenda_other": "Agendas",
            "scenario_one": "Scenario",
            "scenario_other": "Scenarios",
        },
    },
}

CATALOGS: dict[str, dict[str, Any]] = {
    "en": EN_MESSAGES,
}

DEFAULT_LOCALE = "en"


class Translator:
    """Resolves message keys for one locale, falling back to another catalog."""

    def __init__(
        self,
        messages: Mapping[str, Any],
        locale: str = DEFAULT_LOCALE,
        fallback: Mapping[str, Any] | None = None,
    ):
        self.messages = messages
        self.locale = locale
        self.fallback = fallback

    def __call__(self, key: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        return self.translate(key, {**(params or {}), **kwargs})

    def translate(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        params = params or {}
        message = self._resolve(key, params)
        if message is None:
            return key
        return _PLACEHOLDER.sub(lambda m: str(params.get(m.group(1), m.group(0))), message)

    def _resolve(self, key: str, params: Mapping[str, Any]) -> str | None:
        candidates = [key]
        if "count" in params:
            suffix = "_one" if params["count"] == 1 else "_other"
            candidates.insert(0, key + suffix)

        for catalog in (self.messages, self.fallback):
            if catalog is None:
                continue
            for candidate in candidates:
                message = _lookup(catalog, candidate)
                if message is not None:
                    return message

        logger.debug("Missing translation for %s (%s)", key, self.locale)
        return None


def _lookup(catalog: Mapping[str, Any], key: str) -> str | None:
    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


@lru_cache(maxsize=8)
def get_translator(locale: str = DEFAULT_LOCALE) -> Translator:
    """
    Get a cached translator for a locale.

    Locales without a bundled catalog use the English messages.
    """
    messages = CATALOGS.get(locale)
    if messages is None:
        logger.info("No catalog for locale %s, using %s", locale, DEFAULT_LOCALE)
        messages = CATALOGS[DEFAULT_LOCALE]
    return Translator(messages, locale=locale, fallback=CATALOGS[DEFAULT_LOCALE])
