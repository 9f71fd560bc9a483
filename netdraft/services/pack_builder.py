"""
Pack assembly.

Builds the ordered slot lists for each side and drives the guarded sampler
across them. Slot order is fixed. On the corp side the two factions that get
the agenda and uncommon slots come from a fresh permutation for every pack.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from random import Random

from netdraft.config import CORP_HARD_LIMIT, PACK_SIZE, RUNNER_HARD_LIMIT
from netdraft.models.card import (
    CORP_FACTIONS,
    RUNNER_FACTIONS,
    Card,
    CardType,
    Faction,
    Rarity,
    Side,
)
from netdraft.models.catalog import CardCatalog
from netdraft.models.pack import PackState
from netdraft.models.slot import SlotSpec, TypeSoftLimits
from netdraft.services.sampler import pick_card

RUNNER_SOFT_LIMITS: TypeSoftLimits = (
    (CardType.EVENT, 2),
    (CardType.RESOURCE, 2),
    (CardType.PROGRAM, 2),
    (CardType.HARDWARE, 1),
)

CORP_SOFT_LIMITS: TypeSoftLimits = (
    (CardType.ASSET, 2),
    (CardType.ICE, 2),
    (CardType.OPERATION, 2),
    (CardType.AGENDA, 2),
)


@dataclass(frozen=True, slots=True)
class Pack:
    """A generated pack, cards in catalog order."""

    side: Side
    cards: tuple[Card, ...]

    def __len__(self) -> int:
        return len(self.cards)

    def names(self) -> list[str]:
        return [card.name for card in self.cards]


def _runner_slot(rarity: Rarity, faction: Faction | None = None) -> SlotSpec:
    return SlotSpec(Side.RUNNER, rarity, faction, RUNNER_SOFT_LIMITS, RUNNER_HARD_LIMIT)


def _corp_slot(rarity: Rarity, faction: Faction | None = None) -> SlotSpec:
    return SlotSpec(Side.CORP, rarity, faction, CORP_SOFT_LIMITS, CORP_HARD_LIMIT)


def runner_slots() -> list[SlotSpec]:
    """
    Runner pack layout.

    One rare, one uncommon and one common from each runner faction, then
    commons from any faction fill the pack.
    """
    slots = [
        _runner_slot(Rarity.RARE),
        *(_runner_slot(Rarity.UNCOMMON, faction) for faction in RUNNER_FACTIONS),
        *(_runner_slot(Rarity.COMMON, faction) for faction in RUNNER_FACTIONS),
    ]
    slots.extend(_runner_slot(Rarity.COMMON) for _ in range(PACK_SIZE - len(slots)))
    return slots


def corp_slots(rng: Random) -> list[SlotSpec]:
    """
    Corp pack layout.

    One rare, two agendas and two uncommons, one common from each corp
    faction, then a common from any faction fills the pack.

    The first two factions of a fresh shuffle get the agenda slots and the
    uncommon slots alike, so both uncommons come from the agenda factions.
    A second shuffle is drawn after it and left unused so seeded runs draw
    in the same order as earlier pack generators.
    """
    agenda_factions = list(CORP_FACTIONS)
    rng.shuffle(agenda_factions)
    rng.shuffle(list(CORP_FACTIONS))

    slots = [
        _corp_slot(Rarity.RARE),
        _corp_slot(Rarity.AGENDA, agenda_factions[0]),
        _corp_slot(Rarity.AGENDA, agenda_factions[1]),
        _corp_slot(Rarity.UNCOMMON, agenda_factions[0]),
        _corp_slot(Rarity.UNCOMMON, agenda_factions[1]),
        *(_corp_slot(Rarity.COMMON, faction) for faction in CORP_FACTIONS),
    ]
    slots.extend(_corp_slot(Rarity.COMMON) for _ in range(PACK_SIZE - len(slots)))
    return slots


def assemble_pack(catalog: CardCatalog, slots: list[SlotSpec], rng: Random) -> list[Card]:
    """
    Fill every slot in order, sharing one pack state.

    Args:
        catalog: Card catalog
        slots: Ordered slot specifications
        rng: Random source

    Returns:
        Chosen cards in catalog order.

    Raises:
        PackExhaustedError: If any slot cannot be filled
    """
    state = PackState()
    for slot in slots:
        pick_card(catalog, state, slot, rng)
    return catalog.in_order(state.chosen)


def generate_packs(
    catalog: CardCatalog,
    runner_count: int,
    corp_count: int,
    rng: Random,
) -> Iterator[Pack]:
    """
    Generate runner packs, then corp packs.

    Packs are yielded as they complete so earlier packs can be written
    before a later pack fails.
    """
    for _ in range(runner_count):
        yield Pack(Side.RUNNER, tuple(assemble_pack(catalog, runner_slots(), rng)))
    for _ in range(corp_count):
        yield Pack(Side.CORP, tuple(assemble_pack(catalog, corp_slots(rng), rng)))
