"""
Source data downloads.

Fetches Scryfall bulk data and the 17Lands card list, caching each file on
disk so repeated runs reuse it.
"""

import logging
from pathlib import Path

import httpx

from arenacards.config import settings
from arenacards.errors import DownloadError
from arenacards.models.card import LandsCard, ScryfallCard
from arenacards.parsers.lands import load_lands_cards
from arenacards.parsers.scryfall import load_scryfall_cards

logger = logging.getLogger(__name__)

SCRYFALL_BULK_API = "https://api.scryfall.com/bulk-data"
DEFAULT_CARDS_TYPE = "default_cards"

SCRYFALL_CACHE_NAME = "scryfall-cards.json"
LANDS_CACHE_NAME = "17lands-cards.csv"


def make_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
        timeout=settings.http_timeout,
    )


def cache_file_name(url: str, extension: str, default_name: str) -> str:
    """
    Name of the cache file for a URL.

    Uses the URL's last path segment when it carries the expected extension,
    otherwise `default_name`.
    """
    file_name = url.split("?")[0].rstrip("/").split("/")[-1]
    if extension in file_name:
        return file_name
    return default_name


async def get_latest_bulk_data_url(client: httpx.AsyncClient | None = None) -> str:
    """
    Fetch the download URL of Scryfall's newest default-cards bulk file.

    Raises:
        DownloadError: If the API request fails or lists no default_cards entry
    """
    owns_client = client is None
    client = client or make_client()
    try:
        response = await client.get(SCRYFALL_BULK_API)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        raise DownloadError(
            f"Failed to fetch Scryfall bulk data index: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise DownloadError(f"Failed to fetch Scryfall bulk data index: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    for entry in data.get("data", []):
        if entry.get("type") == DEFAULT_CARDS_TYPE:
            logger.debug("Found latest default cards: %s", entry["download_uri"])
            logger.debug("Last updated: %s", entry.get("updated_at"))
            return str(entry["download_uri"])

    raise DownloadError("Could not find default_cards bulk data URL")


async def download_cached(
    url: str,
    cache_path: Path,
    client: httpx.AsyncClient | None = None,
    *,
    force: bool = False,
) -> Path:
    """
    Download a file unless it is already cached.

    Args:
        url: Source URL
        cache_path: Where the file lives on disk
        client: HTTP client to reuse; a new one is created if omitted
        force: If True, re-download even if the file exists

    Returns:
        Path to the cached file

    Raises:
        DownloadError: If the download fails
    """
    if cache_path.exists() and not force:
        logger.debug("Using cached data from: %s", cache_path)
        return cache_path

    cache_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path = cache_path.with_name(cache_path.name + ".part")
    logger.debug("Fetching data from: %s", url)

    owns_client = client is None
    client = client or make_client()
    try:
        async with client.stream("GET", url) as response:
            response.raise_for_status()
            with open(partial_path, "wb") as f:
                async for chunk in response.aiter_bytes(8192):
                    f.write(chunk)
    except httpx.HTTPStatusError as e:
        partial_path.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download {url}: HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        partial_path.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download {url}: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    partial_path.replace(cache_path)
    logger.debug("Cached data to: %s", cache_path)
    return cache_path


async def fetch_scryfall_cards(
    url: str | None = None,
    cache_dir: Path | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[ScryfallCard]:
    """
    Download (or reuse) Scryfall bulk data and parse it.

    Args:
        url: Bulk JSON URL. None resolves the latest default_cards file.
        cache_dir: Cache directory, defaults to settings.cache_dir
        client: HTTP client to reuse
    """
    cache_dir = cache_dir or settings.cache_dir
    if url is None:
        url = await get_latest_bulk_data_url(client)

    path = await download_cached(
        url, cache_dir / cache_file_name(url, ".json", SCRYFALL_CACHE_NAME), client
    )
    return load_scryfall_cards(path)


async def fetch_lands_cards(
    url: str | None = None,
    cache_dir: Path | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[LandsCard]:
    """
    Download (or reuse) the 17Lands card list and parse it.

    Args:
        url: cards.csv URL, defaults to settings.lands_url
        cache_dir: Cache directory, defaults to settings.cache_dir
        client: HTTP client to reuse
    """
    url = url or settings.lands_url
    cache_dir = cache_dir or settings.cache_dir

    path = await download_cached(
        url, cache_dir / cache_file_name(url, ".csv", LANDS_CACHE_NAME), client
    )
    return load_lands_cards(path)
