"""
Tests for the Dagster assets.

The kings_api resource is replaced with a stub serving a fixed payload, so
the assets run end to end without network access.
"""

import json

import dagster as dg
import pytest

from royal_stats.defs.assets import StatisticsConfig, kings, kings_statistics, monarchs
from royal_stats.defs.resources import KingsApi
from royal_stats.extract import parse_kings
from royal_stats.models import KingRecord, KingsStatistics, RuleYears

from conftest import REFERENCE_YEAR


class StubKingsApi(KingsApi):
    """Serves a fixed payload instead of downloading the feed."""

    payload: str

    async def get_kings(self) -> list[KingRecord]:
        return parse_kings(self.payload)


def _materialize(payload: str, reference_year: int | None = REFERENCE_YEAR, **kwargs):
    return dg.materialize(
        [kings, monarchs, kings_statistics],
        resources={"kings_api": StubKingsApi(payload=payload)},
        run_config=dg.RunConfig(
            {"kings_statistics": StatisticsConfig(reference_year=reference_year)}
        ),
        **kwargs,
    )


class TestKingsStatisticsAsset:
    """Test materializing the statistics from the feed."""

    def test_recorded_feed(self, kings_payload):
        result = _materialize(kings_payload.decode("utf-8"))

        assert result.success
        assert result.output_for_node("kings_statistics") == KingsStatistics(
            total_count=57,
            longest_ruling_monarch=RuleYears("Elizabeth II", 72),
            longest_ruling_house=RuleYears("House of Hanover", 187),
            most_common_first_name="Edward",
        )

    def test_monarchs_are_normalized(self, kings_payload):
        result = _materialize(kings_payload.decode("utf-8"))

        parsed = result.output_for_node("monarchs")
        assert len(parsed) == 57
        assert parsed[0].first_name == "Edward"
        assert parsed[0].full_name == "Edward the Elder"

    def test_metadata(self, kings_payload):
        result = _materialize(kings_payload.decode("utf-8"))

        [materialization] = result.asset_materializations_for_node("kings_statistics")
        metadata = materialization.metadata
        assert metadata["reference_year"].value == REFERENCE_YEAR
        assert metadata["longest_ruling_house"].value == "House of Hanover"
        assert metadata["longest_ruling_house_years"].value == 187

    def test_reference_year_zero_is_kept(self, kings_payload):
        result = _materialize(kings_payload.decode("utf-8"), reference_year=0)

        [materialization] = result.asset_materializations_for_node("kings_statistics")
        assert materialization.metadata["reference_year"].value == 0
        # Elizabeth II's open reign counts as negative, so Victoria rules longest
        assert result.output_for_node("kings_statistics").longest_ruling_monarch == RuleYears(
            "Victoria", 64
        )

    def test_malformed_reign_fails_run(self):
        payload = json.dumps(
            [
                {"id": 1, "nm": "Anne", "cty": "United Kingdom", "hse": "House of Stuart", "yrs": "1702-1714"},
                {"id": 2, "nm": "George I", "cty": "United Kingdom", "hse": "House of Hanover", "yrs": "1714-1727-1730"},
            ]
        )

        result = _materialize(payload, raise_on_error=False)

        assert not result.success

    def test_empty_feed_fails_run(self):
        result = _materialize("[]", raise_on_error=False)

        assert not result.success


class TestKingsApi:
    """Test the kings feed resource."""

    def test_defaults_to_published_feed(self):
        api = KingsApi()

        assert api.url.startswith("https://gist.githubusercontent.com/")
        assert api.timeout == 30.0

    @pytest.mark.parametrize("timeout", [1.0, 60.0])
    def test_timeout_is_configurable(self, timeout):
        assert KingsApi(timeout=timeout).timeout == timeout
