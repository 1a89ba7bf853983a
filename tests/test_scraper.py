"""Tests for the static scraper."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import BLOOM_URL
from sitegen.schemas.signal import RawSignal
from sitegen.shared.errors import ScrapeError
from sitegen.shared.scraper import StaticScraper


class TestStaticScraper:
    @pytest.mark.asyncio
    async def test_known_url(self, bloom_signal: RawSignal) -> None:
        scraper = StaticScraper({BLOOM_URL: bloom_signal})
        assert await scraper.scrape(BLOOM_URL) == bloom_signal

    @pytest.mark.asyncio
    async def test_trailing_slash_ignored(self, bloom_signal: RawSignal) -> None:
        scraper = StaticScraper({BLOOM_URL + "/": bloom_signal})
        assert (await scraper.scrape(BLOOM_URL)).title == bloom_signal.title

    @pytest.mark.asyncio
    async def test_unknown_url_raises(self) -> None:
        with pytest.raises(ScrapeError, match="No scraped data available"):
            await StaticScraper().scrape("https://nowhere.example")

    @pytest.mark.asyncio
    async def test_returns_copies(self, bloom_signal: RawSignal) -> None:
        scraper = StaticScraper()
        scraper.add(BLOOM_URL, bloom_signal)
        first = await scraper.scrape(BLOOM_URL)
        first.images.append("https://evil.example/x.jpg")
        second = await scraper.scrape(BLOOM_URL)
        assert "https://evil.example/x.jpg" not in second.images


class TestFromFile:
    @pytest.mark.asyncio
    async def test_yaml(self, signals_file: Path) -> None:
        scraper = StaticScraper.from_file(signals_file)
        signal = await scraper.scrape(BLOOM_URL)
        assert signal.title == "Bloom Gardens"
        # Blank list entries are dropped on load
        assert signal.images == ["https://bloomgardens.example/img/hero.jpg"]

    @pytest.mark.asyncio
    async def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "signals.json"
        path.write_text(json.dumps({"https://acme.example": {"title": "Acme"}}))
        signal = await StaticScraper.from_file(path).scrape("https://acme.example/")
        assert signal.title == "Acme"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            StaticScraper.from_file(tmp_path / "nope.yml")

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "signals.yml"
        path.write_text("- https://acme.example\n")
        with pytest.raises(ValueError, match="mapping"):
            StaticScraper.from_file(path)
