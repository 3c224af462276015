from royal_stats.models import KingsStatistics


def format_statistics(stats: KingsStatistics) -> str:
    """Render the statistics as numbered questions, each followed by its answer.

    Example:
        1. How many monarchs are there in the list?
        57
        2. Which monarch ruled the longest (and for how long)?
        Name: Elizabeth II Years: 72
        ...
    """
    monarch = stats.longest_ruling_monarch
    house = stats.longest_ruling_house

    lines = [
        "1. How many monarchs are there in the list?",
        str(stats.total_count),
        "2. Which monarch ruled the longest (and for how long)?",
        f"Name: {monarch.name} Years: {monarch.rule_years}",
        "3. Which house ruled the longest (and for how long)?",
        f"Name: {house.name} Years: {house.rule_years}",
        "4. What was the most common first name?",
        stats.most_common_first_name,
    ]
    return "\n".join(lines)
