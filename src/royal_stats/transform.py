import logging

from royal_stats.errors import FormatError
from royal_stats.models import KingRecord, Monarch

logger = logging.getLogger(__name__)


def first_name(full_name: str) -> str:
    """Extract the first name from a full name.

    The first name is everything before the first single space. Titles and
    epithets are not treated specially.

    Examples:
        >>> first_name("Edward the Confessor")
        'Edward'
        >>> first_name("Athelstan")
        'Athelstan'

    Raises:
        FormatError: If the name is empty.
    """
    name = full_name.split(" ")[0]
    if not name:
        raise FormatError(f"Could not extract a first name from '{full_name}'")
    return name


def parse_years(years: str) -> tuple[int, int | None]:
    """Parse a reign period into its start and end year.

    Three shapes are recognized:
    1. "1016" (a single year): the reign started and ended that year
    2. "1066-1087": the reign started and ended in the given years
    3. "1952-" (trailing hyphen): the monarch is still reigning

    Args:
        years: The reign period as published in the feed

    Returns:
        Tuple of (start_year, end_year), where end_year is None if still reigning

    Examples:
        >>> parse_years("1952-1962")
        (1952, 1962)
        >>> parse_years("1952-")
        (1952, None)
        >>> parse_years("1952")
        (1952, 1952)

    Raises:
        FormatError: If the text has more than one hyphen or a year is not numeric.
    """
    parts = years.split("-")
    if len(parts) > 2:
        raise FormatError(
            f"Unexpected reign format: '{years}' - expected 'YYYY', 'YYYY-YYYY' or 'YYYY-'"
        )

    try:
        start_year = int(parts[0])

        # Ruled a single year
        if len(parts) == 1:
            return start_year, start_year

        # Still reigning
        if parts[1] == "":
            return start_year, None

        return start_year, int(parts[1])
    except ValueError as e:
        raise FormatError(f"Could not parse years from '{years}': {e}") from e


def to_monarch(record: KingRecord) -> Monarch:
    """Convert a raw record from the feed into a Monarch.

    Raises:
        FormatError: If the name or the reign period cannot be parsed. The
            message names the offending record.
    """
    try:
        start_year, end_year = parse_years(record.years)
        return Monarch(
            id=record.id,
            first_name=first_name(record.name),
            full_name=record.name,
            start_year=start_year,
            end_year=end_year,
            house=record.house,
        )
    except FormatError as e:
        raise FormatError(f"Invalid record {record.id} ('{record.name}'): {e}") from e


def to_monarchs(records: list[KingRecord]) -> list[Monarch]:
    """Convert all raw records into monarchs, preserving their order.

    A single invalid record aborts the conversion, nothing is skipped.

    Raises:
        FormatError: If any record cannot be parsed.
    """
    monarchs = [to_monarch(record) for record in records]

    logger.info(f"Parsed {len(monarchs)} monarchs")
    return monarchs


def find_inverted_reigns(monarchs: list[Monarch]) -> list[Monarch]:
    """Find monarchs whose reign ends before it starts.

    Such reigns are accepted during parsing and yield a negative rule length.
    This is used to report them, not to reject them.
    """
    inverted = [
        monarch
        for monarch in monarchs
        if monarch.end_year is not None and monarch.end_year < monarch.start_year
    ]

    for monarch in inverted:
        logger.warning(
            f"Reign of {monarch.full_name} ends before it starts "
            f"({monarch.start_year}-{monarch.end_year})"
        )

    return inverted
