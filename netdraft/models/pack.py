from collections import Counter
from dataclasses import dataclass, field

from netdraft.models.card import CardType
from netdraft.models.slot import TypeSoftLimits


@dataclass
class PackState:
    """
    Mutable state for one pack under construction.

    A chosen card is always also excluded. The exclusion set additionally
    holds every card of a type that has been locked out.

    Attributes:
        chosen: Names of cards picked so far, in pick order
        excluded: Names of cards ineligible for further picks
        type_counts: Number of chosen cards per card type
        locked_types: Card types locked out of the rest of the pack
    """

    chosen: list[str] = field(default_factory=list)
    excluded: set[str] = field(default_factory=set)
    type_counts: Counter[CardType] = field(default_factory=Counter)
    locked_types: list[CardType] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.chosen)

    def overage(self, soft_limits: TypeSoftLimits) -> int:
        """Sum of each tracked type's count above its soft limit."""
        return sum(max(self.type_counts[card_type] - limit, 0) for card_type, limit in soft_limits)
