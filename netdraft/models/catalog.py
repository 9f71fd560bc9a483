"""
Card catalog with secondary indexes.

INVARIANTS:
- Every card appears in exactly one entry of each of the four indexes
- Indexes are built once at construction and never mutated
- Card names are unique; the name is the card identifier
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from netdraft.models.card import Card, CardType, Faction, Rarity, Side
from netdraft.models.failure import CatalogDataError


@dataclass(frozen=True)
class CardCatalog:
    """
    Read-only collection of classified cards.

    Card order is load order. `position` gives each card's index in that
    order, which is the ordering used for sampling pools and pack output.

    Attributes:
        cards: Cards in load order
        by_side: Side -> names of cards on that side
        by_rarity: Rarity -> names of cards at that rarity
        by_type: Card type -> names of cards of that type
        by_faction: Faction -> names of cards in that faction
    """

    cards: tuple[Card, ...] = ()
    by_side: dict[Side, frozenset[str]] = field(default_factory=dict)
    by_rarity: dict[Rarity, frozenset[str]] = field(default_factory=dict)
    by_type: dict[CardType, frozenset[str]] = field(default_factory=dict)
    by_faction: dict[Faction, frozenset[str]] = field(default_factory=dict)
    position: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "CardCatalog":
        """
        Build a catalog and its indexes.

        Raises:
            CatalogDataError: If two cards share a name
        """
        ordered = tuple(cards)
        position: dict[str, int] = {}
        by_side: dict[Side, set[str]] = {}
        by_rarity: dict[Rarity, set[str]] = {}
        by_type: dict[CardType, set[str]] = {}
        by_faction: dict[Faction, set[str]] = {}

        for i, card in enumerate(ordered):
            if card.name in position:
                raise CatalogDataError("stripped_title", card.name, card.name)
            position[card.name] = i
            by_side.setdefault(card.side, set()).add(card.name)
            by_rarity.setdefault(card.rarity, set()).add(card.name)
            by_type.setdefault(card.card_type, set()).add(card.name)
            by_faction.setdefault(card.faction, set()).add(card.name)

        return cls(
            cards=ordered,
            by_side={k: frozenset(v) for k, v in by_side.items()},
            by_rarity={k: frozenset(v) for k, v in by_rarity.items()},
            by_type={k: frozenset(v) for k, v in by_type.items()},
            by_faction={k: frozenset(v) for k, v in by_faction.items()},
            position=position,
        )

    def __contains__(self, card_name: str) -> bool:
        return card_name in self.position

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def get(self, card_name: str) -> Card:
        """Look up a card by name. Raises KeyError if absent."""
        return self.cards[self.position[card_name]]

    def side(self, side: Side) -> frozenset[str]:
        return self.by_side.get(side, frozenset())

    def rarity(self, rarity: Rarity) -> frozenset[str]:
        return self.by_rarity.get(rarity, frozenset())

    def card_type(self, card_type: CardType) -> frozenset[str]:
        return self.by_type.get(card_type, frozenset())

    def faction(self, faction: Faction) -> frozenset[str]:
        return self.by_faction.get(faction, frozenset())

    def in_order(self, card_names: Iterable[str]) -> list[Card]:
        """Return the named cards sorted by catalog position."""
        return [self.cards[i] for i in sorted(self.position[name] for name in card_names)]
