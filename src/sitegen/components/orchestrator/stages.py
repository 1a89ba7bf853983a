"""Stage order and the static label/progress table shown to pollers.

Progress numbers are fixed per stage. They say where a job is, not how much
work is left.
"""

from __future__ import annotations

from dataclasses import dataclass

from sitegen.schemas.job import JobStatus

STAGE_ORDER: tuple[JobStatus, ...] = (
    JobStatus.QUEUED,
    JobStatus.SCRAPING,
    JobStatus.ANALYZING,
    JobStatus.SELECTING_TEMPLATE,
    JobStatus.GENERATING_CONFIG,
    JobStatus.ENRICHING_IMAGES,
    JobStatus.COMPLETED,
)


@dataclass(frozen=True)
class StageInfo:
    label: str
    progress: int
    message: str


STAGE_INFO: dict[JobStatus, StageInfo] = {
    JobStatus.QUEUED: StageInfo("Preparing", 5, "Website generation queued"),
    JobStatus.SCRAPING: StageInfo("Analyzing your website", 20, "Collecting information from your website"),
    JobStatus.ANALYZING: StageInfo("Understanding your business", 40, "Building your business profile"),
    JobStatus.SELECTING_TEMPLATE: StageInfo("Selecting the perfect template", 60, "Matching your business to a template"),
    JobStatus.GENERATING_CONFIG: StageInfo("Generating website content", 80, "Writing your website content"),
    JobStatus.ENRICHING_IMAGES: StageInfo("Optimizing images", 90, "Choosing images for your website"),
    JobStatus.COMPLETED: StageInfo("Complete!", 100, "Your website is ready"),
    JobStatus.FAILED: StageInfo("Generation failed", 0, "Website generation failed"),
}


def can_transition(current: JobStatus, target: JobStatus) -> bool:
    """Only the next stage in order, or ``failed`` from any live stage."""
    if current.is_terminal:
        return False
    if target is JobStatus.FAILED:
        return True
    return STAGE_ORDER.index(target) == STAGE_ORDER.index(current) + 1
