import argparse
import asyncio
import logging
import sys

from royal_stats.errors import RoyalStatsError
from royal_stats.extract import DEFAULT_TIMEOUT, KINGS_URL, load_kings
from royal_stats.models import KingsStatistics
from royal_stats.report import format_statistics
from royal_stats.statistics import compute_statistics
from royal_stats.transform import to_monarchs

logger = logging.getLogger(__name__)


async def run(
    url: str = KINGS_URL,
    reference_year: int | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> KingsStatistics:
    """Download the monarchs and compute the statistics in one go."""
    kings = await load_kings(url, timeout=timeout)
    monarchs = to_monarchs(kings)
    return compute_statistics(monarchs, reference_year=reference_year)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="royal-stats",
        description="Answer four questions about the list of English and British monarchs.",
    )
    parser.add_argument("--url", default=KINGS_URL, help="URL of the kings JSON feed")
    parser.add_argument(
        "--reference-year",
        type=int,
        default=None,
        help="Year used as the end of ongoing reigns (default: current year)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Seconds to wait for the feed before giving up",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        stats = asyncio.run(
            run(args.url, reference_year=args.reference_year, timeout=args.timeout)
        )
    except RoyalStatsError as e:
        logger.error(f"Failed to compute statistics: {e}")
        return 1

    print(format_statistics(stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())
