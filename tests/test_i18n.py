"""Tests for label translation and display formatting."""

from cardshelf.models.metadata import Cycle, Pack
from cardshelf.services.formatting import display_pack_name, format_slots, shorten_pack_name
from cardshelf.services.i18n import Translator, get_translator


class TestTranslator:
    def test_nested_lookup(self) -> None:
        translate = Translator({"a": {"b": "Hello"}})

        assert translate("a.b") == "Hello"

    def test_interpolation(self) -> None:
        translate = Translator({"greeting": "Hi {{name}}, level {{ level }}"})

        assert translate("greeting", {"name": "Roland", "level": 2}) == "Hi Roland, level 2"

    def test_keyword_params(self) -> None:
        translate = Translator({"greeting": "Hi {{name}}"})

        assert translate("greeting", name="Daisy") == "Hi Daisy"

    def test_missing_param_left_in_place(self) -> None:
        translate = Translator({"greeting": "Hi {{name}}"})

        assert translate("greeting") == "Hi {{name}}"

    def test_plurals(self) -> None:
        translate = Translator({"card_one": "{{count}} card", "card_other": "{{count}} cards"})

        assert translate("card", {"count": 1}) == "1 card"
        assert translate("card", {"count": 3}) == "3 cards"

    def test_count_without_plural_forms(self) -> None:
        translate = Translator({"card": "Card"})

        assert translate("card", {"count": 2}) == "Card"

    def test_missing_key_returns_key(self) -> None:
        translate = Translator({})

        assert translate("common.unknown") == "common.unknown"

    def test_partial_path_is_not_a_message(self) -> None:
        translate = Translator({"common": {"level": {"none": "No level"}}})

        assert translate("common.level") == "common.level"

    def test_fallback_catalog(self) -> None:
        translate = Translator({"a": "Eins"}, locale="de", fallback={"a": "One", "b": "Two"})

        assert translate("a") == "Eins"
        assert translate("b") == "Two"


class TestGetTranslator:
    def test_english(self) -> None:
        assert get_translator("en")("lists.all_cards") == "All cards"

    def test_unknown_locale_uses_english(self) -> None:
        translate = get_translator("xx")

        assert translate.locale == "xx"
        assert translate("common.factions.seeker") == "Seeker"

    def test_cached(self) -> None:
        assert get_translator("en") is get_translator("en")


class TestFormatting:
    def test_display_pack_name(self) -> None:
        assert display_pack_name(Cycle(code="core", name="Core Set", position=1)) == "Core Set"
        assert display_pack_name(None) is None

    def test_shorten_pack_name(self) -> None:
        pack = Pack(
            code="eoep",
            name="The Edge of the Earth Investigator Expansion",
            cycle_code="eoe",
            position=1,
        )

        assert shorten_pack_name(pack) == "The Edge of the Earth"

    def test_shorten_pack_name_without_suffix(self) -> None:
        pack = Pack(code="tmm", name="The Miskatonic Museum", cycle_code="dwl", position=2)

        assert shorten_pack_name(pack) == "The Miskatonic Museum"

    def test_format_slots(self) -> None:
        translate = get_translator("en")

        assert format_slots("Arcane x2", translate) == "Arcane x2"
        assert format_slots("hand. ally", translate) == "Hand. Ally"

    def test_format_unknown_slot_kept(self) -> None:
        assert format_slots("Head", get_translator("en")) == "Head"
