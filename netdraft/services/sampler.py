"""
Guarded sampler.

Picks one card for a slot and updates the pack state. After every pick the
slot's type-limit policy is evaluated against the whole pack so far:

    overage = sum(max(count[type] - soft_limit, 0) for each tracked type)

When the overage equals the slot's hard limit, every card of the type just
picked is excluded for the rest of the pack. The soft limits share one
overage budget, so a type can be locked out even though no single type is
far above its own threshold.
"""

import logging
from random import Random

from netdraft.models.catalog import CardCatalog
from netdraft.models.failure import PackExhaustedError
from netdraft.models.pack import PackState
from netdraft.models.slot import SlotSpec

logger = logging.getLogger(__name__)


def candidate_pool(catalog: CardCatalog, state: PackState, slot: SlotSpec) -> list[str]:
    """
    Cards that satisfy the slot's filter and are not excluded.

    Returned in catalog order, so a seeded Random picks reproducibly.
    """
    pool = catalog.side(slot.side) & catalog.rarity(slot.rarity)
    if slot.faction is not None:
        pool &= catalog.faction(slot.faction)
    pool -= state.excluded
    return sorted(pool, key=catalog.position.__getitem__)


def pick_card(catalog: CardCatalog, state: PackState, slot: SlotSpec, rng: Random) -> str:
    """
    Pick one card for a slot.

    Args:
        catalog: Card catalog
        state: Pack under construction; updated in place
        slot: Slot to fill
        rng: Random source

    Returns:
        Name of the chosen card.

    Raises:
        PackExhaustedError: If no card satisfies the slot
    """
    pool = candidate_pool(catalog, state, slot)
    if not pool:
        raise PackExhaustedError(slot.describe(), state.chosen)

    chosen = rng.choice(pool)
    card_type = catalog.get(chosen).card_type

    state.chosen.append(chosen)
    state.excluded.add(chosen)
    state.type_counts[card_type] += 1

    if state.overage(slot.type_soft_limits) == slot.type_hard_limit:
        state.excluded |= catalog.card_type(card_type)
        state.locked_types.append(card_type)
        logger.debug(
            "Locked out %s after picking %s (%d cards in pack)",
            card_type.value,
            chosen,
            len(state),
        )

    return chosen
