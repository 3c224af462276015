import dagster as dg
from pydantic import Field

from royal_stats import extract
from royal_stats.models import KingRecord


class KingsApi(dg.ConfigurableResource):
    """HTTP client for the kings feed.

    Wraps pure Python extract module with Dagster resource pattern.
    Defaults to the published gist of English and British monarchs.
    """

    url: str = Field(
        default=extract.KINGS_URL,
        description="URL of the kings JSON feed",
    )
    timeout: float = Field(
        default=extract.DEFAULT_TIMEOUT,
        description="Seconds to wait for the feed before giving up",
    )

    async def get_kings(self) -> list[KingRecord]:
        """Download and parse all kings from the feed."""
        return await extract.load_kings(self.url, timeout=self.timeout)
