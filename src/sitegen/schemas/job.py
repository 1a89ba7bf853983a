"""Generation job state and the poll snapshot returned to clients."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sitegen.schemas.profile import BusinessProfile, ImageAssets
from sitegen.schemas.website import WebsiteGenerationConfig


class JobStatus(str, Enum):
    QUEUED = "queued"
    SCRAPING = "scraping"
    ANALYZING = "analyzing"
    SELECTING_TEMPLATE = "selecting_template"
    GENERATING_CONFIG = "generating_config"
    ENRICHING_IMAGES = "enriching_images"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenerationJob(BaseModel):
    """Mutable record owned by the job store. Never handed out directly."""

    job_id: str
    business_id: str
    source_url: str
    conversational_text: str = ""
    status: JobStatus = JobStatus.QUEUED
    message: str = ""
    history: list[JobStatus] = [JobStatus.QUEUED]
    profile: BusinessProfile | None = None
    result_config: WebsiteGenerationConfig | None = None
    template_id: str | None = None
    image_assets: ImageAssets | None = None
    error: str | None = None
    started_at: datetime = Field(default_factory=_utcnow)
    completed_at: datetime | None = None


class JobSnapshot(BaseModel):
    """Point-in-time view of a job, in the poll contract's shape.

    Result fields stay ``None`` until the job reaches ``completed``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    business_id: str
    status: JobStatus
    step: str
    message: str
    progress: int = 0
    website_config: WebsiteGenerationConfig | None = None
    template_id: str | None = None
    image_assets: ImageAssets | None = None
    error: str | None = None
    started_at: datetime
    completed_at: datetime | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal
