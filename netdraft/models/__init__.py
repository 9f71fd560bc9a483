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
from netdraft.models.failure import (
    CatalogDataError,
    FailureDetail,
    FailureKind,
    NetdraftError,
    PackExhaustedError,
)
from netdraft.models.pack import PackState
from netdraft.models.slot import SlotSpec, TypeSoftLimits

__all__ = [
    "CORP_FACTIONS",
    "RUNNER_FACTIONS",
    "Card",
    "CardCatalog",
    "CardType",
    "CatalogDataError",
    "Faction",
    "FailureDetail",
    "FailureKind",
    "NetdraftError",
    "PackExhaustedError",
    "PackState",
    "Rarity",
    "Side",
    "SlotSpec",
    "TypeSoftLimits",
]
