"""
Pack formatter.

THIS MODULE HANDLES OUTPUT RENDERING ONLY. It trusts that packs are
complete; it does not validate them.
"""

from collections.abc import Iterable

from netdraft.models.card import Card, Rarity

RARITY_GLYPHS: dict[Rarity, str] = {
    Rarity.AGENDA: "\N{WHITE MEDIUM STAR}",
    Rarity.RARE: "\N{FULL MOON SYMBOL}",
    Rarity.UNCOMMON: "\N{WANING GIBBOUS MOON SYMBOL}",
    Rarity.COMMON: "\N{WANING CRESCENT MOON SYMBOL}",
}

# Blank lines printed after every pack
PACK_SEPARATOR = "\n\n\n"


def format_card_line(card: Card) -> str:
    """Format a single card line: quantity, name, rarity glyph."""
    return f"1 {card.name} ({RARITY_GLYPHS[card.rarity]})"


def format_pack(cards: Iterable[Card]) -> str:
    """
    Format one pack, followed by its separator.

    Args:
        cards: Pack cards in output order

    Returns:
        One line per card, then three blank lines
    """
    return "".join(f"{format_card_line(card)}\n" for card in cards) + PACK_SEPARATOR
