"""
Card database service.

Loads a directory of per-card JSON records and classifies them into a
CardCatalog. Classification is strict: an unrecognized type, side, faction,
or rarity aborts the load with a CatalogDataError.

The data-quality patches (denylist, rarity overrides) are plain tables so
they can be audited and tested apart from the sampling logic.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from netdraft.config import settings
from netdraft.models.card import Card, CardType, Faction, Rarity, Side
from netdraft.models.catalog import CardCatalog
from netdraft.models.failure import CatalogDataError

logger = logging.getLogger(__name__)

# Cards never included in the pool, whatever their other fields say
EXCLUDED_CARD_NAMES: frozenset[str] = frozenset({"Direct Access", "Jeitinho"})

# Identity cards are never part of a pack pool
EXCLUDED_CARD_TYPE_IDS: frozenset[str] = frozenset({"runner_identity", "corp_identity"})

# Cards whose influence cost does not reflect their true rarity
RARITY_OVERRIDES: dict[str, Rarity] = {
    "Tribuatry": Rarity.RARE,
    "Gold Farmer": Rarity.RARE,
    "Rezeki": Rarity.UNCOMMON,
    "Nanisivik Grid": Rarity.RARE,
    "Engram Flush": Rarity.RARE,
}


class RecordHeader(BaseModel):
    """Fields that decide whether a record belongs in the pool at all."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    designed_by: str
    stripped_title: str | None = None
    card_type_id: str | None = None


class CardRecord(RecordHeader):
    """Fields read from a pool record. Other keys are ignored."""

    stripped_title: str
    card_type_id: str
    influence_cost: int | None = None
    side_id: str
    faction_id: str


def skip_reason(header: RecordHeader, released_designer: str) -> str | None:
    """
    Why a record stays out of the pool, or None if it belongs in it.

    Checked in order: designer, denylisted name, identity type. Nothing
    else in the record is looked at, so unreleased records may be partial.
    """
    if header.designed_by != released_designer:
        return f"designed by {header.designed_by}"
    if header.stripped_title in EXCLUDED_CARD_NAMES:
        return "excluded by name"
    if header.card_type_id in EXCLUDED_CARD_TYPE_IDS:
        return header.card_type_id
    return None


def derive_rarity(card_name: str, card_type: CardType, influence_cost: int | None) -> Rarity:
    """
    Derive a card's rarity.

    Order: named override, then agenda type, then influence cost.

    Raises:
        CatalogDataError: If influence cost is absent or out of range
    """
    override = RARITY_OVERRIDES.get(card_name)
    if override is not None:
        return override
    if card_type is CardType.AGENDA:
        return Rarity.AGENDA
    return Rarity.from_influence(influence_cost, card_name)


def classify_record(record: CardRecord, released_designer: str | None = None) -> Card | None:
    """
    Classify one raw record.

    Args:
        record: Parsed card record
        released_designer: Designer id marking released cards.
            Defaults to the configured value.

    Returns:
        The classified Card, or None if the record is not part of the pool.

    Raises:
        CatalogDataError: If any enumerated field is unrecognized
    """
    if released_designer is None:
        released_designer = settings.released_designer

    name = record.stripped_title
    reason = skip_reason(record, released_designer)
    if reason is not None:
        logger.debug("Skipping %s: %s", name, reason)
        return None

    card_type = CardType.from_id(record.card_type_id, name)
    return Card(
        name=name,
        card_type=card_type,
        rarity=derive_rarity(name, card_type, record.influence_cost),
        side=Side.from_id(record.side_id, name),
        faction=Faction.from_id(record.faction_id, name),
    )


def _record_error(e: ValidationError, path: Path) -> CatalogDataError:
    errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
    return CatalogDataError("record", errors, path.name)


def read_card_record(path: Path, released_designer: str | None = None) -> CardRecord | None:
    """
    Read one card record file.

    Only the header is validated for records that stay out of the pool.
    Pool records are validated in full.

    Returns:
        The validated record, or None if it is not part of the pool.

    Raises:
        CatalogDataError: If the file is not valid JSON or lacks required fields
    """
    if released_designer is None:
        released_designer = settings.released_designer

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogDataError("json", str(e), path.name) from e

    try:
        header = RecordHeader.model_validate(data)
    except ValidationError as e:
        raise _record_error(e, path) from e

    reason = skip_reason(header, released_designer)
    if reason is not None:
        logger.debug("Skipping %s: %s", header.stripped_title or path.name, reason)
        return None

    try:
        return CardRecord.model_validate(data)
    except ValidationError as e:
        raise _record_error(e, path) from e


def load_card_database(path: Path, released_designer: str | None = None) -> CardCatalog:
    """
    Load and classify every card record in a directory.

    Files are read in sorted name order so catalog order is stable.

    Args:
        path: Directory holding one JSON file per card
        released_designer: Designer id marking released cards.
            Defaults to the configured value.

    Returns:
        CardCatalog of every card in the pack pool.

    Raises:
        FileNotFoundError: If the directory doesn't exist
        CatalogDataError: On the first record that cannot be classified
    """
    if not path.is_dir():
        raise FileNotFoundError(f"Card directory not found at {path}.")

    cards: list[Card] = []
    skipped = 0
    for file in sorted(p for p in path.iterdir() if p.is_file()):
        record = read_card_record(file, released_designer)
        card = None if record is None else classify_record(record, released_designer)
        if card is None:
            skipped += 1
            continue
        cards.append(card)

    logger.info("Loaded %d cards from %s (%d skipped)", len(cards), path, skipped)
    return CardCatalog.from_cards(cards)
