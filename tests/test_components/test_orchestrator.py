"""Tests for the GenerationOrchestrator — job lifecycle against mocked collaborators."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from conftest import BLOOM_URL, STOCK_ASSETS
from sitegen.components.orchestrator.orchestrator import GenerationOrchestrator
from sitegen.components.orchestrator.stages import STAGE_ORDER
from sitegen.schemas.job import JobStatus
from sitegen.schemas.signal import RawSignal
from sitegen.shared.errors import AssetResolutionError, ScrapeError, SourceValidationError
from sitegen.shared.scraper import BaseScraper, StaticScraper


class GatedScraper(BaseScraper):
    """Blocks every scrape until ``gate`` is set; counts calls."""

    def __init__(self, signal: RawSignal) -> None:
        self.signal = signal
        self.gate = asyncio.Event()
        self.calls = 0

    async def scrape(self, url: str) -> RawSignal:
        self.calls += 1
        await self.gate.wait()
        return self.signal


async def _settle() -> None:
    """Let scheduled job tasks run up to their next real suspension point."""
    for _ in range(5):
        await asyncio.sleep(0)


class TestStart:
    @pytest.mark.asyncio
    async def test_full_run(self, bloom_signal: RawSignal, mock_resolver: AsyncMock) -> None:
        orch = GenerationOrchestrator(StaticScraper({BLOOM_URL: bloom_signal}), mock_resolver)

        snapshot = await orch.start("biz-1", BLOOM_URL, wait=True)

        assert snapshot.status is JobStatus.COMPLETED
        assert snapshot.progress == 100
        assert snapshot.step == "Complete!"
        assert snapshot.template_id == "service-heavy"
        assert snapshot.image_assets == STOCK_ASSETS
        assert snapshot.website_config.content.hero_image == STOCK_ASSETS.hero
        assert snapshot.website_config.slug == "bloom-gardens"
        assert snapshot.completed_at is not None
        assert orch.store.get("biz-1").profile.category == "Landscaping"

        mock_resolver.resolve.assert_awaited_once()
        args, kwargs = mock_resolver.resolve.call_args
        assert args[0] == bloom_signal.images
        assert kwargs["category"] == "Landscaping"
        assert kwargs["business_name"] == "Bloom Gardens"

    @pytest.mark.asyncio
    async def test_history_is_forward_only(self, bloom_signal: RawSignal, mock_resolver: AsyncMock) -> None:
        orch = GenerationOrchestrator(StaticScraper({BLOOM_URL: bloom_signal}), mock_resolver)
        await orch.start("biz-1", BLOOM_URL, wait=True)
        assert orch.store.get("biz-1").history == list(STAGE_ORDER)

    @pytest.mark.asyncio
    async def test_conversational_text_reaches_synthesis(self, mock_resolver: AsyncMock) -> None:
        orch = GenerationOrchestrator(StaticScraper({BLOOM_URL: RawSignal(title="Lux")}), mock_resolver)
        await orch.start(
            "biz-1", BLOOM_URL, conversational_text="Exclusive spa and wellness retreats.", wait=True,
        )
        profile = orch.store.get("biz-1").profile
        assert profile.brand_tone.value == "luxury"
        assert orch.status("biz-1").template_id == "luxury"

    @pytest.mark.asyncio
    async def test_invalid_url_creates_nothing(self, mock_resolver: AsyncMock) -> None:
        orch = GenerationOrchestrator(StaticScraper(), mock_resolver)
        with pytest.raises(SourceValidationError):
            await orch.start("biz-1", "http://127.0.0.1:8080/")
        with pytest.raises(SourceValidationError):
            await orch.start("biz-1", None)
        assert orch.status("biz-1") is None

    @pytest.mark.asyncio
    async def test_business_id_required(self, mock_resolver: AsyncMock) -> None:
        orch = GenerationOrchestrator(StaticScraper(), mock_resolver)
        with pytest.raises(ValueError, match="business_id"):
            await orch.start("  ", BLOOM_URL)


class TestIdempotency:
    @pytest.mark.asyncio
    async def test_second_start_joins_live_job(self, bloom_signal: RawSignal, mock_resolver: AsyncMock) -> None:
        scraper = GatedScraper(bloom_signal)
        orch = GenerationOrchestrator(scraper, mock_resolver)

        first = await orch.start("biz-1", BLOOM_URL)
        second = await orch.start("biz-1", BLOOM_URL)
        assert second.started_at == first.started_at

        await _settle()
        third = await orch.start("biz-1", "https://elsewhere.example")
        assert third.started_at == first.started_at
        assert third.status is JobStatus.SCRAPING

        scraper.gate.set()
        done = await orch.wait("biz-1")
        assert done.status is JobStatus.COMPLETED
        assert scraper.calls == 1
        mock_resolver.resolve.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_concurrent_starts(self, bloom_signal: RawSignal, mock_resolver: AsyncMock) -> None:
        scraper = GatedScraper(bloom_signal)
        orch = GenerationOrchestrator(scraper, mock_resolver)

        snapshots = await asyncio.gather(*(orch.start("biz-1", BLOOM_URL) for _ in range(10)))
        assert len({s.started_at for s in snapshots}) == 1

        scraper.gate.set()
        await orch.wait("biz-1")
        assert scraper.calls == 1

    @pytest.mark.asyncio
    async def test_restart_after_terminal(self, bloom_signal: RawSignal, mock_resolver: AsyncMock) -> None:
        scraper = StaticScraper()
        orch = GenerationOrchestrator(scraper, mock_resolver)

        failed = await orch.start("biz-1", BLOOM_URL, wait=True)
        assert failed.status is JobStatus.FAILED
        first_job = orch.store.get("biz-1").job_id

        scraper.add(BLOOM_URL, bloom_signal)
        retried = await orch.start("biz-1", BLOOM_URL, wait=True)
        assert retried.status is JobStatus.COMPLETED
        assert retried.error is None
        assert orch.store.get("biz-1").job_id != first_job

    @pytest.mark.asyncio
    async def test_businesses_are_independent(self, bloom_signal: RawSignal, mock_resolver: AsyncMock) -> None:
        scraper = GatedScraper(bloom_signal)
        orch = GenerationOrchestrator(scraper, mock_resolver)

        await orch.start("biz-1", BLOOM_URL)
        await orch.start("biz-2", BLOOM_URL)
        await _settle()
        assert scraper.calls == 2

        scraper.gate.set()
        assert (await orch.wait("biz-1")).status is JobStatus.COMPLETED
        assert (await orch.wait("biz-2")).status is JobStatus.COMPLETED


class TestStatus:
    @pytest.mark.asyncio
    async def test_unknown_business(self, mock_resolver: AsyncMock) -> None:
        orch = GenerationOrchestrator(StaticScraper(), mock_resolver)
        assert orch.status("nobody") is None
        assert await orch.wait("nobody") is None

    @pytest.mark.asyncio
    async def test_results_hidden_until_complete(self, bloom_signal: RawSignal, mock_resolver: AsyncMock) -> None:
        scraper = GatedScraper(bloom_signal)
        orch = GenerationOrchestrator(scraper, mock_resolver)

        queued = await orch.start("biz-1", BLOOM_URL)
        assert queued.status is JobStatus.QUEUED
        assert queued.progress == 5

        await _settle()
        live = orch.status("biz-1")
        assert live.status is JobStatus.SCRAPING
        assert live.step == "Analyzing your website"
        assert live.progress == 20
        assert live.website_config is None
        assert live.template_id is None

        scraper.gate.set()
        await orch.wait("biz-1")
        assert orch.status("biz-1").website_config is not None


class TestFailures:
    @pytest.mark.asyncio
    async def test_scrape_failure_message_verbatim(self, mock_resolver: AsyncMock) -> None:
        orch = GenerationOrchestrator(StaticScraper(), mock_resolver)
        snapshot = await orch.start("biz-1", "https://unknown.example", wait=True)

        assert snapshot.status is JobStatus.FAILED
        assert snapshot.error == "No scraped data available for https://unknown.example"
        assert snapshot.step == "Generation failed"
        assert snapshot.progress == 0
        assert snapshot.website_config is None
        assert orch.store.get("biz-1").history == [JobStatus.QUEUED, JobStatus.SCRAPING, JobStatus.FAILED]
        mock_resolver.resolve.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_scraper_exception(self, mock_resolver: AsyncMock) -> None:
        scraper = AsyncMock(spec=BaseScraper)
        scraper.scrape.side_effect = TimeoutError()
        orch = GenerationOrchestrator(scraper, mock_resolver)

        snapshot = await orch.start("biz-1", BLOOM_URL, wait=True)
        assert snapshot.status is JobStatus.FAILED
        assert snapshot.error == "TimeoutError"

    @pytest.mark.asyncio
    async def test_resolver_failure(self, bloom_signal: RawSignal) -> None:
        resolver = AsyncMock()
        resolver.resolve.side_effect = AssetResolutionError("No image assets could be resolved")
        orch = GenerationOrchestrator(StaticScraper({BLOOM_URL: bloom_signal}), resolver)

        snapshot = await orch.start("biz-1", BLOOM_URL, wait=True)

        assert snapshot.status is JobStatus.FAILED
        assert snapshot.error == "No image assets could be resolved"
        assert snapshot.template_id is None
        history = orch.store.get("biz-1").history
        assert history[-2:] == [JobStatus.ENRICHING_IMAGES, JobStatus.FAILED]
        assert history[:-1] == list(STAGE_ORDER[: len(history) - 1])

    @pytest.mark.asyncio
    async def test_failure_after_job_closed_is_dropped(self, bloom_signal: RawSignal, mock_resolver: AsyncMock) -> None:
        class BrokenGatedScraper(GatedScraper):
            async def scrape(self, url: str) -> RawSignal:
                await super().scrape(url)
                raise ScrapeError("upstream timed out")

        scraper = BrokenGatedScraper(bloom_signal)
        orch = GenerationOrchestrator(scraper, mock_resolver)

        await orch.start("biz-1", BLOOM_URL)
        await _settle()
        orch.store.fail("biz-1", orch.store.get("biz-1").job_id, "Cancelled by operator")

        scraper.gate.set()
        snapshot = await orch.wait("biz-1")

        assert snapshot.status is JobStatus.FAILED
        assert snapshot.error == "Cancelled by operator"
