"""Statistical functions over the list of monarchs.

Every statistic picks exactly one winner. To keep things simple, candidates
are ranked by their metric (highest first) and then alphabetically by name,
and the first one wins.
"""

from collections import Counter, defaultdict
from datetime import datetime, timezone
from typing import Callable, Iterable, TypeVar

from royal_stats.errors import EmptyInputError
from royal_stats.models import KingsStatistics, Monarch, RuleYears

T = TypeVar("T")


def current_year() -> int:
    """Return the current year in UTC."""
    return datetime.now(timezone.utc).year


def rule_length(monarch: Monarch, reference_year: int) -> int:
    """Number of years a monarch ruled.

    Monarchs who are still reigning are counted up to the reference year.

    Example:
        >>> rule_length(Monarch(1, "Elizabeth", "Elizabeth II", 1952, None, "House of Windsor"), 2024)
        72
    """
    end_year = monarch.end_year if monarch.end_year is not None else reference_year
    return end_year - monarch.start_year


def top_ranked(
    items: Iterable[T],
    metric: Callable[[T], int],
    name: Callable[[T], str],
) -> T:
    """Return the item with the highest metric, ties broken alphabetically.

    Args:
        items: Candidates to rank
        metric: Quantity to maximize
        name: Identity used to break ties, smallest first

    Raises:
        EmptyInputError: If there are no items to rank.
    """
    ranked = sorted(items, key=lambda item: (-metric(item), name(item)))
    if not ranked:
        raise EmptyInputError("Cannot pick a winner from an empty list")
    return ranked[0]


def longest_ruling_monarch(monarchs: list[Monarch], reference_year: int) -> RuleYears:
    """Find the monarch that ruled the longest."""
    winner = top_ranked(
        monarchs,
        metric=lambda monarch: rule_length(monarch, reference_year),
        name=lambda monarch: monarch.full_name,
    )
    return RuleYears(name=winner.full_name, rule_years=rule_length(winner, reference_year))


def longest_ruling_house(monarchs: list[Monarch], reference_year: int) -> RuleYears:
    """Find the house with the most years ruled across all its monarchs."""
    house_years: dict[str, int] = defaultdict(int)
    for monarch in monarchs:
        house_years[monarch.house] += rule_length(monarch, reference_year)

    houses = [RuleYears(name=house, rule_years=years) for house, years in house_years.items()]
    return top_ranked(
        houses,
        metric=lambda house: house.rule_years,
        name=lambda house: house.name,
    )


def most_common_first_name(monarchs: list[Monarch]) -> str:
    """Find the first name shared by the most monarchs."""
    name_counts = Counter(monarch.first_name for monarch in monarchs)
    return top_ranked(
        name_counts,
        metric=lambda name: name_counts[name],
        name=lambda name: name,
    )


def compute_statistics(
    monarchs: list[Monarch], reference_year: int | None = None
) -> KingsStatistics:
    """Compute all statistics over the list of monarchs.

    Args:
        monarchs: The monarchs to analyze
        reference_year: Year used as the end of ongoing reigns (defaults to
            the current year in UTC)

    Returns:
        KingsStatistics with the count and the three winners

    Raises:
        EmptyInputError: If the list of monarchs is empty.
    """
    if not monarchs:
        raise EmptyInputError("No monarchs to compute statistics for")

    if reference_year is None:
        reference_year = current_year()

    return KingsStatistics(
        total_count=len(monarchs),
        longest_ruling_monarch=longest_ruling_monarch(monarchs, reference_year),
        longest_ruling_house=longest_ruling_house(monarchs, reference_year),
        most_common_first_name=most_common_first_name(monarchs),
    )
