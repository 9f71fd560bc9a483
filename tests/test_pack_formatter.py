from random import Random

from netdraft.models.card import Card, CardType, Faction, Rarity, Side
from netdraft.models.catalog import CardCatalog
from netdraft.models.slot import SlotSpec
from netdraft.services.pack_builder import RUNNER_SOFT_LIMITS, assemble_pack
from netdraft.services.pack_formatter import RARITY_GLYPHS, format_card_line, format_pack


def _card(name: str, rarity: Rarity) -> Card:
    return Card(name, CardType.ICE, rarity, Side.CORP, Faction.NBN)


class TestFormatCardLine:
    def test_quantity_name_and_glyph(self) -> None:
        assert format_card_line(_card("Ice Wall", Rarity.COMMON)) == "1 Ice Wall (🌘)"

    def test_each_rarity_has_distinct_glyph(self) -> None:
        assert RARITY_GLYPHS == {
            Rarity.AGENDA: "⭐",
            Rarity.RARE: "🌕",
            Rarity.UNCOMMON: "🌖",
            Rarity.COMMON: "🌘",
        }
        assert len(set(RARITY_GLYPHS.values())) == len(Rarity)


class TestFormatPack:
    def test_pack_followed_by_three_blank_lines(self) -> None:
        text = format_pack([_card("Vanilla", Rarity.COMMON), _card("Hostile", Rarity.AGENDA)])
        assert text == "1 Vanilla (🌘)\n1 Hostile (⭐)\n\n\n\n"

    def test_empty_pack_is_only_separator(self) -> None:
        assert format_pack([]) == "\n\n\n"

    def test_end_to_end_three_card_pack(self, tiny_catalog: CardCatalog) -> None:
        slots = [
            SlotSpec(Side.RUNNER, Rarity.RARE, None, RUNNER_SOFT_LIMITS, 3),
            SlotSpec(Side.RUNNER, Rarity.UNCOMMON, Faction.ANARCH, RUNNER_SOFT_LIMITS, 3),
            SlotSpec(Side.RUNNER, Rarity.COMMON, Faction.CRIMINAL, RUNNER_SOFT_LIMITS, 3),
        ]
        text = format_pack(assemble_pack(tiny_catalog, slots, Random(0)))

        assert text.splitlines()[:3] == ["1 A (🌕)", "1 B (🌖)", "1 C (🌘)"]
