"""Data models for the Royal Stats project.

This module contains the raw wire record received from the kings feed and
the dataclasses representing the core domain objects.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class KingRecord(BaseModel):
    """A single entry of the kings feed, as published.

    The feed uses terse field names (`nm`, `cty`, `hse`, `yrs`). They are
    accepted as aliases and exposed under readable attribute names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str = Field(alias="nm")
    country: str = Field(alias="cty")
    house: str = Field(alias="hse")
    years: str = Field(alias="yrs")


@dataclass(frozen=True)
class Monarch:
    """A monarch with their house and reign period.

    Attributes:
        id: Identifier carried over from the feed
        first_name: First word of the full name (e.g., "Edward")
        full_name: The monarch's full name (e.g., "Edward the Confessor")
        start_year: Year the reign began
        end_year: Year the reign ended (None if currently reigning)
        house: The royal house (e.g., "House of Wessex")
    """
    id: int
    first_name: str
    full_name: str
    start_year: int
    end_year: int | None
    house: str


@dataclass(frozen=True)
class RuleYears:
    """A name paired with the number of years it ruled.

    Attributes:
        name: A monarch's full name or a house name
        rule_years: Years ruled, summed over all members for a house
    """
    name: str
    rule_years: int


@dataclass(frozen=True)
class KingsStatistics:
    """The four statistics computed over the list of monarchs.

    Attributes:
        total_count: Number of monarchs in the list
        longest_ruling_monarch: The monarch that ruled the longest
        longest_ruling_house: The house with the most cumulative rule years
        most_common_first_name: The first name shared by the most monarchs
    """
    total_count: int
    longest_ruling_monarch: RuleYears
    longest_ruling_house: RuleYears
    most_common_first_name: str
