"""
Slot specifications.

A slot describes one required pick within a pack: which cards qualify
(side, rarity, optional faction) and the type-limit policy checked after
the pick lands.
"""

from dataclasses import dataclass

from netdraft.models.card import CardType, Faction, Rarity, Side

# Ordered (card type, soft limit) pairs
TypeSoftLimits = tuple[tuple[CardType, int], ...]


@dataclass(frozen=True, slots=True)
class SlotSpec:
    """
    One pick within a pack.

    Attributes:
        side: Side the card must belong to
        rarity: Rarity the card must have
        faction: Faction the card must belong to, or None for any faction
        type_soft_limits: Per-type thresholds; only the overage above each
            threshold counts toward the hard limit
        type_hard_limit: Total overage across tracked types that locks the
            just-picked type out of the rest of the pack
    """

    side: Side
    rarity: Rarity
    faction: Faction | None
    type_soft_limits: TypeSoftLimits
    type_hard_limit: int

    def __post_init__(self) -> None:
        if self.type_hard_limit < 1:
            raise ValueError(f"type_hard_limit must be positive, got {self.type_hard_limit}")

    def describe(self) -> str:
        """Human-readable filter description, e.g. 'runner rare (any faction)'."""
        faction = self.faction.value if self.faction else "any faction"
        return f"{self.side.value} {self.rarity.value} ({faction})"
