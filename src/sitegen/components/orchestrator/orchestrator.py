"""Generation Orchestrator — drives one job per business through the stages.

Pipeline flow:
    queued → scraping → analyzing → selecting_template → generating_config
    → enriching_images → completed   (any live stage → failed)

Each started job runs as its own asyncio task; that task is the only writer
for the business id. ``status`` is a plain read of the store and never waits
on a running stage.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Sequence
from typing import TypeVar

from sitegen.components.assembler.assembler import assemble_config, attach_images
from sitegen.components.orchestrator.store import JobStore
from sitegen.components.recommender.catalog import CATALOG
from sitegen.components.recommender.recommender import recommend
from sitegen.components.synthesizer.synthesizer import synthesize
from sitegen.schemas.job import JobSnapshot, JobStatus
from sitegen.schemas.template import TemplateDefinition
from sitegen.shared.assets import BaseAssetResolver, StockAssetResolver
from sitegen.shared.errors import InvalidTransitionError, PipelineStageError
from sitegen.shared.scraper import BaseScraper
from sitegen.shared.validation import validate_source_url

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GenerationOrchestrator:
    """Starts generation jobs and answers status reads.

    ``start`` is idempotent while a job is live: it hands back the existing
    snapshot and schedules nothing. A finished (completed or failed) job is
    replaced by a fresh one. Failed stages are never retried automatically.
    """

    def __init__(
        self,
        scraper: BaseScraper,
        asset_resolver: BaseAssetResolver | None = None,
        *,
        catalog: Sequence[TemplateDefinition] = CATALOG,
        store: JobStore | None = None,
    ) -> None:
        self.scraper = scraper
        self.asset_resolver = asset_resolver or StockAssetResolver()
        self.catalog = tuple(catalog)
        self.store = store or JobStore()
        self._tasks: dict[str, asyncio.Task[None]] = {}

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def start(
        self,
        business_id: str,
        source_url: str | None,
        *,
        conversational_text: str | None = None,
        wait: bool = False,
    ) -> JobSnapshot:
        """Start (or join) the generation job for ``business_id``.

        Raises ``SourceValidationError`` for a bad URL before any job exists.
        With ``wait=True`` the call returns only once the job is terminal.
        """
        if not business_id or not business_id.strip():
            raise ValueError("business_id is required")
        url = validate_source_url(source_url)

        job_id, created = self.store.create_if_idle(business_id, url, conversational_text or "")
        if created:
            logger.info("Starting generation job %s for %s (%s)", job_id, business_id, url)
            task = asyncio.create_task(self._run(business_id, job_id), name=f"generate-{business_id}")
            self._tasks[business_id] = task
            task.add_done_callback(lambda t, key=business_id: self._forget(key, t))
        else:
            logger.info("Generation already running for %s, returning current state", business_id)

        if wait:
            return await self.wait(business_id)
        return self.store.snapshot(business_id)

    def status(self, business_id: str) -> JobSnapshot | None:
        """Current snapshot for ``business_id``, or ``None`` if never started."""
        return self.store.snapshot(business_id)

    async def wait(self, business_id: str) -> JobSnapshot | None:
        """Block until the live job for ``business_id`` (if any) finishes."""
        task = self._tasks.get(business_id)
        if task is not None:
            await asyncio.shield(task)
        return self.status(business_id)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _forget(self, business_id: str, task: asyncio.Task[None]) -> None:
        if self._tasks.get(business_id) is task:
            del self._tasks[business_id]

    async def _run(self, business_id: str, job_id: str) -> None:
        job = self.store.get(business_id)

        def advance(status: JobStatus, **fields: object) -> None:
            logger.info("Job %s for %s → %s", job_id, business_id, status.value)
            self.store.advance(business_id, job_id, status, **fields)

        try:
            advance(JobStatus.SCRAPING)
            signal = await self._call(JobStatus.SCRAPING, self.scraper.scrape(job.source_url))

            advance(JobStatus.ANALYZING)
            profile = synthesize(signal, job.conversational_text)

            advance(JobStatus.SELECTING_TEMPLATE, profile=profile)
            recommendation = recommend(profile, self.catalog)
            template = recommendation.best
            logger.info(
                "Selected template %s for %s (%s)", template.id, business_id, recommendation.reason,
            )

            advance(JobStatus.GENERATING_CONFIG, template_id=template.id)
            config = assemble_config(profile, template)

            advance(JobStatus.ENRICHING_IMAGES)
            assets = await self._call(
                JobStatus.ENRICHING_IMAGES,
                self.asset_resolver.resolve(
                    signal.images,
                    category=profile.category,
                    business_name=profile.name,
                    seo_keywords=profile.seo_keywords,
                ),
            )

            advance(
                JobStatus.COMPLETED,
                result_config=attach_images(config, assets),
                image_assets=assets,
            )
        except PipelineStageError as exc:
            logger.warning("Job %s for %s failed at %s: %s", job_id, business_id, exc.stage, exc)
            self._fail(business_id, job_id, exc.message)
        except Exception as exc:
            logger.exception("Job %s for %s failed unexpectedly", job_id, business_id)
            self._fail(business_id, job_id, str(exc) or type(exc).__name__)

    def _fail(self, business_id: str, job_id: str, error: str) -> None:
        try:
            self.store.fail(business_id, job_id, error)
        except InvalidTransitionError as exc:
            # The job was already finished or replaced; its record is not ours to write
            logger.warning("Dropping failure for job %s of %s: %s", job_id, business_id, exc)

    async def _call(self, stage: JobStatus, pending: Awaitable[T]) -> T:
        """Await a collaborator call, converting any failure to PipelineStageError."""
        try:
            return await pending
        except Exception as exc:
            logger.exception("Collaborator failed during %s", stage.value)
            raise PipelineStageError(stage.value, str(exc) or type(exc).__name__) from exc
