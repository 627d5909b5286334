"""Tests for source data downloads."""

import json
from pathlib import Path

import httpx
import pytest
import respx

from arenacards.errors import DownloadError
from arenacards.services.downloads import (
    LANDS_CACHE_NAME,
    SCRYFALL_BULK_API,
    SCRYFALL_CACHE_NAME,
    cache_file_name,
    download_cached,
    fetch_lands_cards,
    fetch_scryfall_cards,
    get_latest_bulk_data_url,
)

BULK_FILE_URL = "https://data.scryfall.io/default-cards/default-cards-20250101100000.json"
LANDS_URL = "https://17lands-public.s3.amazonaws.com/analysis_data/cards/cards.csv"

BULK_INDEX = {
    "object": "list",
    "data": [
        {
            "type": "oracle_cards",
            "download_uri": "https://data.scryfall.io/oracle-cards/oracle.json",
        },
        {
            "type": "default_cards",
            "download_uri": BULK_FILE_URL,
            "updated_at": "2025-01-01T10:00:00+00:00",
        },
    ],
}


class TestCacheFileName:
    def test_uses_url_file_name(self) -> None:
        assert (
            cache_file_name(BULK_FILE_URL, ".json", SCRYFALL_CACHE_NAME)
            == "default-cards-20250101100000.json"
        )

    def test_ignores_query_string(self) -> None:
        assert cache_file_name(f"{LANDS_URL}?v=2", ".csv", LANDS_CACHE_NAME) == "cards.csv"

    def test_falls_back_to_default(self) -> None:
        assert (
            cache_file_name("https://example.com/download", ".csv", LANDS_CACHE_NAME)
            == LANDS_CACHE_NAME
        )


class TestGetLatestBulkDataUrl:
    @respx.mock
    async def test_returns_default_cards_uri(self) -> None:
        respx.get(SCRYFALL_BULK_API).mock(return_value=httpx.Response(200, json=BULK_INDEX))

        assert await get_latest_bulk_data_url() == BULK_FILE_URL

    @respx.mock
    async def test_missing_default_cards(self) -> None:
        respx.get(SCRYFALL_BULK_API).mock(
            return_value=httpx.Response(200, json={"object": "list", "data": []})
        )

        with pytest.raises(DownloadError, match="default_cards"):
            await get_latest_bulk_data_url()

    @respx.mock
    async def test_http_error(self) -> None:
        respx.get(SCRYFALL_BULK_API).mock(return_value=httpx.Response(503))

        with pytest.raises(DownloadError, match="HTTP 503"):
            await get_latest_bulk_data_url()

    @respx.mock
    async def test_connection_error(self) -> None:
        respx.get(SCRYFALL_BULK_API).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(DownloadError, match="refused"):
            await get_latest_bulk_data_url()


class TestDownloadCached:
    @respx.mock
    async def test_downloads_to_cache_path(self, tmp_path: Path) -> None:
        respx.get(LANDS_URL).mock(return_value=httpx.Response(200, content=b"id,name\n"))
        target = tmp_path / "nested" / "cards.csv"

        result = await download_cached(LANDS_URL, target)

        assert result == target
        assert target.read_bytes() == b"id,name\n"
        assert not target.with_name("cards.csv.part").exists()

    @respx.mock(assert_all_called=False)
    async def test_reuses_cached_file(self, tmp_path: Path) -> None:
        route = respx.get(LANDS_URL).mock(return_value=httpx.Response(200, content=b"new"))
        target = tmp_path / "cards.csv"
        target.write_bytes(b"old")

        await download_cached(LANDS_URL, target)

        assert target.read_bytes() == b"old"
        assert route.call_count == 0

    @respx.mock
    async def test_force_redownloads(self, tmp_path: Path) -> None:
        respx.get(LANDS_URL).mock(return_value=httpx.Response(200, content=b"new"))
        target = tmp_path / "cards.csv"
        target.write_bytes(b"old")

        await download_cached(LANDS_URL, target, force=True)

        assert target.read_bytes() == b"new"

    @respx.mock
    async def test_raises_on_http_error(self, tmp_path: Path) -> None:
        respx.get(LANDS_URL).mock(return_value=httpx.Response(404))
        target = tmp_path / "cards.csv"

        with pytest.raises(DownloadError, match="Failed to download"):
            await download_cached(LANDS_URL, target)

        assert not target.exists()
        assert not target.with_name("cards.csv.part").exists()

    @respx.mock
    async def test_reuses_given_client(self, tmp_path: Path) -> None:
        respx.get(LANDS_URL).mock(return_value=httpx.Response(200, content=b"data"))

        async with httpx.AsyncClient() as client:
            await download_cached(LANDS_URL, tmp_path / "a.csv", client)
            await download_cached(LANDS_URL, tmp_path / "b.csv", client)
            assert not client.is_closed


class TestFetchCards:
    @respx.mock
    async def test_fetch_scryfall_resolves_latest(self, tmp_path: Path, sample_bulk_data) -> None:
        respx.get(SCRYFALL_BULK_API).mock(return_value=httpx.Response(200, json=BULK_INDEX))
        respx.get(BULK_FILE_URL).mock(
            return_value=httpx.Response(200, content=json.dumps(sample_bulk_data).encode())
        )

        cards = await fetch_scryfall_cards(cache_dir=tmp_path)

        assert cards[0].name == "Fireball"
        assert (tmp_path / "default-cards-20250101100000.json").exists()

    @respx.mock(assert_all_called=False)
    async def test_fetch_scryfall_explicit_url(
        self, tmp_path: Path, sample_bulk_data, respx_mock
    ) -> None:
        index = respx_mock.get(SCRYFALL_BULK_API)
        respx_mock.get(BULK_FILE_URL).mock(
            return_value=httpx.Response(200, content=json.dumps(sample_bulk_data).encode())
        )

        cards = await fetch_scryfall_cards(BULK_FILE_URL, tmp_path)

        assert len(cards) == len(sample_bulk_data)
        assert index.call_count == 0

    @respx.mock
    async def test_fetch_lands(self, tmp_path: Path) -> None:
        respx.get(LANDS_URL).mock(
            return_value=httpx.Response(
                200, content=b"id,expansion,name,rarity\n91234,BLB,Lightning Bolt,common\n"
            )
        )

        cards = await fetch_lands_cards(LANDS_URL, tmp_path)

        assert [(card.arena_id, card.name) for card in cards] == [(91234, "Lightning Bolt")]
        assert (tmp_path / "cards.csv").exists()
