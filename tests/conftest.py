"""
Pytest configuration for royal-stats tests.

Provides the recorded kings feed and helpers for building monarchs.
"""

from pathlib import Path

import pytest

from royal_stats.extract import parse_kings
from royal_stats.models import KingRecord, Monarch

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Ongoing reigns in the recorded feed are counted up to this year
REFERENCE_YEAR = 2024


def make_monarch(
    full_name: str,
    start_year: int,
    end_year: int | None,
    house: str = "House of Test",
    id: int = 0,
) -> Monarch:
    """Build a monarch without going through the feed."""
    return Monarch(
        id=id,
        first_name=full_name.split(" ")[0],
        full_name=full_name,
        start_year=start_year,
        end_year=end_year,
        house=house,
    )


@pytest.fixture(scope="session")
def kings_payload() -> bytes:
    """Raw body of the recorded kings feed."""
    return (FIXTURES_DIR / "kings.json").read_bytes()


@pytest.fixture(scope="session")
def king_records(kings_payload: bytes) -> list[KingRecord]:
    """The recorded kings feed, parsed into raw records."""
    return parse_kings(kings_payload)
