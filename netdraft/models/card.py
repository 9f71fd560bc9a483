"""
Card model and its closed enumerations.

Each enumeration parses raw record ids through `from_id`, which raises
CatalogDataError for anything outside the closed set. Unknown values are
never skipped or coerced.
"""

from dataclasses import dataclass
from enum import Enum

from netdraft.models.failure import CatalogDataError


class Side(str, Enum):
    RUNNER = "runner"
    CORP = "corp"

    @classmethod
    def from_id(cls, side_id: str, card_name: str) -> "Side":
        try:
            return cls(side_id)
        except ValueError:
            raise CatalogDataError("side_id", side_id, card_name) from None


class Rarity(str, Enum):
    RARE = "rare"
    UNCOMMON = "uncommon"
    COMMON = "common"
    AGENDA = "agenda"

    @classmethod
    def from_influence(cls, influence_cost: int | None, card_name: str) -> "Rarity":
        """
        Derive rarity from influence cost.

        0-2 is common, 3 is uncommon, 4-5 is rare. Anything else, including
        an absent cost, is a data error.
        """
        if influence_cost is not None:
            if 0 <= influence_cost <= 2:
                return cls.COMMON
            if influence_cost == 3:
                return cls.UNCOMMON
            if 4 <= influence_cost <= 5:
                return cls.RARE
        raise CatalogDataError("influence_cost", influence_cost, card_name)


class CardType(str, Enum):
    # Runner
    EVENT = "event"
    RESOURCE = "resource"
    PROGRAM = "program"
    HARDWARE = "hardware"
    # Corp
    AGENDA = "agenda"
    ASSET = "asset"
    ICE = "ice"
    OPERATION = "operation"
    UPGRADE = "upgrade"

    @classmethod
    def from_id(cls, card_type_id: str, card_name: str) -> "CardType":
        try:
            return cls(card_type_id)
        except ValueError:
            raise CatalogDataError("card_type_id", card_type_id, card_name) from None


class Faction(str, Enum):
    NEUTRAL = "neutral"
    # Runner
    ANARCH = "anarch"
    CRIMINAL = "criminal"
    SHAPER = "shaper"
    # Corp
    JINTEKI = "jinteki"
    HAAS_BIOROID = "haas_bioroid"
    NBN = "nbn"
    WEYLAND_CONSORTIUM = "weyland_consortium"

    @classmethod
    def from_id(cls, faction_id: str, card_name: str) -> "Faction":
        if faction_id in NEUTRAL_FACTION_IDS:
            return cls.NEUTRAL
        try:
            faction = cls(faction_id)
        except ValueError:
            raise CatalogDataError("faction_id", faction_id, card_name) from None
        # Bare "neutral" is not a record id; only the per-side variants are
        if faction is cls.NEUTRAL:
            raise CatalogDataError("faction_id", faction_id, card_name)
        return faction


# Both per-side neutral ids collapse to Faction.NEUTRAL
NEUTRAL_FACTION_IDS: frozenset[str] = frozenset({"neutral_runner", "neutral_corp"})

RUNNER_FACTIONS: tuple[Faction, ...] = (Faction.ANARCH, Faction.CRIMINAL, Faction.SHAPER)

CORP_FACTIONS: tuple[Faction, ...] = (
    Faction.HAAS_BIOROID,
    Faction.WEYLAND_CONSORTIUM,
    Faction.JINTEKI,
    Faction.NBN,
)


@dataclass(frozen=True, slots=True)
class Card:
    """
    A classified catalog entry.

    Attributes:
        name: Display name, unique within the catalog
        card_type: Card type
        rarity: Derived rarity tier
        side: Runner or Corp
        faction: Faction, Neutral for either side's neutral cards
    """

    name: str
    card_type: CardType
    rarity: Rarity
    side: Side
    faction: Faction
