import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from netdraft.models.card import Card, CardType, Faction, Rarity, Side
from netdraft.models.catalog import CardCatalog

RUNNER_FACTION_IDS = {
    Faction.ANARCH: "anarch",
    Faction.CRIMINAL: "criminal",
    Faction.SHAPER: "shaper",
    Faction.NEUTRAL: "neutral_runner",
}

CORP_FACTION_IDS = {
    Faction.HAAS_BIOROID: "haas_bioroid",
    Faction.WEYLAND_CONSORTIUM: "weyland_consortium",
    Faction.JINTEKI: "jinteki",
    Faction.NBN: "nbn",
    Faction.NEUTRAL: "neutral_corp",
}


def _make_record(
    name: str,
    card_type_id: str = "event",
    influence_cost: int | None = 1,
    side_id: str = "runner",
    faction_id: str = "anarch",
    designed_by: str = "null_signal_games",
) -> dict[str, Any]:
    """Raw card record as stored on disk."""
    return {
        "id": name.lower().replace(" ", "_"),
        "designed_by": designed_by,
        "stripped_title": name,
        "title": name,
        "card_type_id": card_type_id,
        "influence_cost": influence_cost,
        "side_id": side_id,
        "faction_id": faction_id,
    }


def _card(name: str, side: Side, rarity: Rarity, faction: Faction, card_type: CardType) -> Card:
    return Card(name=name, card_type=card_type, rarity=rarity, side=side, faction=faction)


def _runner_cards() -> list[Card]:
    """
    Runner pool whose type mix cannot be fully locked out.

    Rares are all hardware and each faction's uncommons are a single type,
    so no type can build a large lead before the commons start. Commons
    carry every type for every faction.
    """
    cards: list[Card] = []
    for faction in RUNNER_FACTION_IDS:
        cards.append(
            _card(
                f"Runner Rare {faction.value}",
                Side.RUNNER,
                Rarity.RARE,
                faction,
                CardType.HARDWARE,
            )
        )
    uncommon_types = {
        Faction.ANARCH: CardType.RESOURCE,
        Faction.CRIMINAL: CardType.PROGRAM,
        Faction.SHAPER: CardType.EVENT,
    }
    for faction, card_type in uncommon_types.items():
        for i in range(3):
            cards.append(
                _card(
                    f"Runner Uncommon {faction.value} {i}",
                    Side.RUNNER,
                    Rarity.UNCOMMON,
                    faction,
                    card_type,
                )
            )
    for faction in RUNNER_FACTION_IDS:
        for card_type in (CardType.EVENT, CardType.RESOURCE, CardType.PROGRAM, CardType.HARDWARE):
            for i in range(3):
                cards.append(
                    _card(
                        f"Runner Common {faction.value} {card_type.value} {i}",
                        Side.RUNNER,
                        Rarity.COMMON,
                        faction,
                        card_type,
                    )
                )
    return cards


def _corp_cards() -> list[Card]:
    """
    Corp pool whose type mix cannot be fully locked out.

    Rares are all upgrades, agendas come two per faction, and each
    faction's uncommons are a single type. Commons carry every non-agenda
    type for every faction.
    """
    cards: list[Card] = []
    for faction in CORP_FACTION_IDS:
        cards.append(
            _card(f"Corp Rare {faction.value}", Side.CORP, Rarity.RARE, faction, CardType.UPGRADE)
        )
    uncommon_types = {
        Faction.HAAS_BIOROID: CardType.ASSET,
        Faction.WEYLAND_CONSORTIUM: CardType.ICE,
        Faction.JINTEKI: CardType.OPERATION,
        Faction.NBN: CardType.UPGRADE,
    }
    for faction, card_type in uncommon_types.items():
        for i in range(2):
            cards.append(
                _card(
                    f"Corp Agenda {faction.value} {i}",
                    Side.CORP,
                    Rarity.AGENDA,
                    faction,
                    CardType.AGENDA,
                )
            )
        for i in range(3):
            cards.append(
                _card(
                    f"Corp Uncommon {faction.value} {i}",
                    Side.CORP,
                    Rarity.UNCOMMON,
                    faction,
                    card_type,
                )
            )
    for faction in CORP_FACTION_IDS:
        for card_type in (CardType.ASSET, CardType.ICE, CardType.OPERATION, CardType.UPGRADE):
            for i in range(3):
                cards.append(
                    _card(
                        f"Corp Common {faction.value} {card_type.value} {i}",
                        Side.CORP,
                        Rarity.COMMON,
                        faction,
                        card_type,
                    )
                )
    return cards


@pytest.fixture
def draft_catalog() -> CardCatalog:
    """Catalog able to fill every runner and corp slot."""
    return CardCatalog.from_cards(_runner_cards() + _corp_cards())


@pytest.fixture
def tiny_catalog() -> CardCatalog:
    """Three runner cards, one per rarity/faction combination."""
    return CardCatalog.from_cards(
        [
            _card("A", Side.RUNNER, Rarity.RARE, Faction.SHAPER, CardType.PROGRAM),
            _card("B", Side.RUNNER, Rarity.UNCOMMON, Faction.ANARCH, CardType.EVENT),
            _card("C", Side.RUNNER, Rarity.COMMON, Faction.CRIMINAL, CardType.RESOURCE),
        ]
    )


@pytest.fixture
def write_card_dir(tmp_path: Path) -> Callable[[list[dict[str, Any]]], Path]:
    """Write records to a fresh directory, one JSON file per card."""

    def _write(records: list[dict[str, Any]]) -> Path:
        card_dir = tmp_path / "cards"
        card_dir.mkdir()
        for i, record in enumerate(records):
            path = card_dir / f"{i:04d}_{record['id']}.json"
            path.write_text(json.dumps(record), encoding="utf-8")
        return card_dir

    return _write


def _catalog_records(catalog: CardCatalog) -> list[dict[str, Any]]:
    """Raw records that load back into the given catalog."""
    influence = {Rarity.COMMON: 1, Rarity.UNCOMMON: 3, Rarity.RARE: 4, Rarity.AGENDA: None}
    records = []
    for card in catalog:
        faction_ids = RUNNER_FACTION_IDS if card.side is Side.RUNNER else CORP_FACTION_IDS
        records.append(
            _make_record(
                card.name,
                card_type_id=card.card_type.value,
                influence_cost=influence[card.rarity],
                side_id=card.side.value,
                faction_id=faction_ids[card.faction],
            )
        )
    return records


@pytest.fixture
def draft_card_dir(draft_catalog: CardCatalog, write_card_dir: Callable[..., Path]) -> Path:
    """Card directory that loads back into draft_catalog."""
    return write_card_dir(_catalog_records(draft_catalog))
