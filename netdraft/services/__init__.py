from netdraft.services.card_database import (
    EXCLUDED_CARD_NAMES,
    EXCLUDED_CARD_TYPE_IDS,
    RARITY_OVERRIDES,
    CardRecord,
    RecordHeader,
    classify_record,
    derive_rarity,
    load_card_database,
    read_card_record,
    skip_reason,
)
from netdraft.services.pack_builder import (
    CORP_SOFT_LIMITS,
    RUNNER_SOFT_LIMITS,
    Pack,
    assemble_pack,
    corp_slots,
    generate_packs,
    runner_slots,
)
from netdraft.services.pack_formatter import RARITY_GLYPHS, format_card_line, format_pack
from netdraft.services.sampler import candidate_pool, pick_card

__all__ = [
    "CORP_SOFT_LIMITS",
    "EXCLUDED_CARD_NAMES",
    "EXCLUDED_CARD_TYPE_IDS",
    "RARITY_GLYPHS",
    "RARITY_OVERRIDES",
    "RUNNER_SOFT_LIMITS",
    "CardRecord",
    "Pack",
    "RecordHeader",
    "assemble_pack",
    "candidate_pool",
    "classify_record",
    "corp_slots",
    "derive_rarity",
    "format_card_line",
    "format_pack",
    "generate_packs",
    "load_card_database",
    "pick_card",
    "read_card_record",
    "runner_slots",
    "skip_reason",
]
