"""
Generate draft packs.

Usage:
    python -m netdraft.jobs.generate_packs CARDS_DIR RUNNER_COUNT CORP_COUNT

Prints the number of runner cards in the pool, then every runner pack,
then every corp pack. Any catalog data error or unfillable slot aborts the
run with exit status 1.
"""

import argparse
import logging
import sys
from pathlib import Path
from random import Random
from typing import TextIO

from netdraft.config import settings
from netdraft.models.card import Side
from netdraft.models.failure import NetdraftError
from netdraft.services.card_database import load_card_database
from netdraft.services.pack_builder import generate_packs
from netdraft.services.pack_formatter import format_pack

logger = logging.getLogger(__name__)


def run_generation(
    cards_dir: Path,
    runner_count: int,
    corp_count: int,
    rng: Random,
    out: TextIO,
) -> int:
    """
    Load the catalog and write the requested packs.

    Each pack is written as soon as it is complete.

    Returns:
        Number of packs written.

    Raises:
        NetdraftError: On bad card data or an unfillable slot
    """
    catalog = load_card_database(cards_dir)
    out.write(f"{len(catalog.side(Side.RUNNER))}\n")

    written = 0
    for pack in generate_packs(catalog, runner_count, corp_count, rng):
        out.write(format_pack(pack.cards))
        out.flush()
        written += 1
        logger.debug("Wrote %s pack %d", pack.side.value, written)

    logger.info("Generated %d runner and %d corp packs", runner_count, corp_count)
    return written


def _pack_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"pack count must be an integer, got {value!r}") from None
    if count < 0:
        raise argparse.ArgumentTypeError(f"pack count must be non-negative, got {count}")
    return count


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Generate draft packs from a card directory")
    parser.add_argument(
        "cards",
        type=Path,
        help="Directory with one JSON record per card",
    )
    parser.add_argument(
        "runner",
        type=_pack_count,
        help="Number of runner packs to generate",
    )
    parser.add_argument(
        "corp",
        type=_pack_count,
        help="Number of corp packs to generate",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rng = Random(settings.seed)
    try:
        run_generation(args.cards, args.runner, args.corp, rng, sys.stdout)
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(1)
    except NetdraftError as e:
        logger.error("Pack generation failed:\n%s", e.to_detail().render())
        sys.exit(1)


if __name__ == "__main__":
    main()
