import asyncio
import json
import logging

import aiohttp
from pydantic import TypeAdapter, ValidationError

from royal_stats.errors import FormatError, NetworkError
from royal_stats.models import KingRecord

logger = logging.getLogger(__name__)

# Headers for well behaved requests
HEADERS = {"User-Agent": "RoyalStatsBot/1.0"}

# List of English and British monarchs, published as a JSON array
KINGS_URL = (
    "https://gist.githubusercontent.com/christianpanton/"
    "10d65ccef9f29de3acd49d97ed423736/raw/"
    "b09563bc0c4b318132c7a738e679d4f984ef0048/kings"
)

# Seconds before giving up on the whole request, including reading the body
DEFAULT_TIMEOUT = 30.0

KING_RECORDS = TypeAdapter(list[KingRecord])


async def download_bytes(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Download the content of a web page and return the raw bytes.

    Raises:
        NetworkError: If the request fails, times out or returns non-2xx status.
    """
    try:
        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=timeout)
        ) as session:
            async with session.get(url, headers=HEADERS) as response:
                response.raise_for_status()
                return await response.read()
    except aiohttp.ClientResponseError as e:
        raise NetworkError(f"{url} returned HTTP {e.status}: {e.message}") from e
    except aiohttp.ClientError as e:
        raise NetworkError(f"Could not download {url}: {e}") from e
    except asyncio.TimeoutError as e:
        raise NetworkError(f"Timed out after {timeout}s downloading {url}") from e


def parse_kings(content: bytes | str) -> list[KingRecord]:
    """Parse the body of the kings feed into raw records.

    The gist is served as text/plain, so the body is decoded as JSON
    regardless of the content type.

    Raises:
        FormatError: If the body is not JSON or not an array of king records.
    """
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FormatError(f"Kings feed is not valid JSON: {e}") from e

    try:
        return KING_RECORDS.validate_python(data)
    except ValidationError as e:
        raise FormatError(f"Kings feed does not match the expected records: {e}") from e


async def load_kings(
    url: str = KINGS_URL, timeout: float = DEFAULT_TIMEOUT
) -> list[KingRecord]:
    """Download and parse the list of monarchs.

    Returns:
        List of KingRecord objects in the order they are published.
        Example: [KingRecord(id=1, name="Edward the Elder", ...), ...]

    Raises:
        NetworkError: If the request fails, times out or returns non-2xx status.
        FormatError: If the response is not a JSON array of king records.
    """
    logger.info(f"Downloading kings from {url}")

    content = await download_bytes(url, timeout=timeout)
    logger.info(f"Downloaded {len(content)} bytes")

    kings = parse_kings(content)

    logger.info(f"Found {len(kings)} kings")
    return kings
