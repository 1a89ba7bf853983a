"""Keyed job store: one writer per business id, any number of readers.

The lock only guards the map and is never held across an ``await``, so reads
never wait on a running stage. Writers identify themselves with the
``job_id`` they were given at creation; a write carrying a stale id, or one
that would move a job backwards or out of a terminal state, is refused.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Any

from sitegen.components.orchestrator.stages import STAGE_INFO, can_transition
from sitegen.schemas.job import GenerationJob, JobSnapshot, JobStatus
from sitegen.shared.errors import InvalidTransitionError


class JobStore:
    def __init__(self) -> None:
        self._jobs: dict[str, GenerationJob] = {}
        self._lock = threading.Lock()

    def create_if_idle(
        self,
        business_id: str,
        source_url: str,
        conversational_text: str = "",
    ) -> tuple[str, bool]:
        """Create a queued job unless a live one exists.

        Returns ``(job_id, created)``. A finished job is replaced.
        """
        with self._lock:
            current = self._jobs.get(business_id)
            if current is not None and not current.status.is_terminal:
                return current.job_id, False

            job = GenerationJob(
                job_id=uuid.uuid4().hex,
                business_id=business_id,
                source_url=source_url,
                conversational_text=conversational_text,
                message=STAGE_INFO[JobStatus.QUEUED].message,
            )
            self._jobs[business_id] = job
            return job.job_id, True

    def get(self, business_id: str) -> GenerationJob | None:
        with self._lock:
            job = self._jobs.get(business_id)
            return job.model_copy(deep=True) if job is not None else None

    def snapshot(self, business_id: str) -> JobSnapshot | None:
        job = self.get(business_id)
        return to_snapshot(job) if job is not None else None

    def advance(
        self,
        business_id: str,
        job_id: str,
        status: JobStatus,
        message: str | None = None,
        **fields: Any,
    ) -> None:
        """Move a job to ``status`` and set any extra job fields."""
        with self._lock:
            job = self._jobs.get(business_id)
            if job is None or job.job_id != job_id:
                raise InvalidTransitionError(f"Job {job_id} is not the active job for {business_id}")
            if not can_transition(job.status, status):
                raise InvalidTransitionError(
                    f"Cannot move job for {business_id} from {job.status.value} to {status.value}"
                )

            updates: dict[str, Any] = {
                **fields,
                "status": status,
                "message": message or STAGE_INFO[status].message,
                "history": [*job.history, status],
            }
            if status.is_terminal:
                updates["completed_at"] = datetime.now(timezone.utc)
            self._jobs[business_id] = job.model_copy(update=updates)

    def fail(self, business_id: str, job_id: str, error: str) -> None:
        self.advance(business_id, job_id, JobStatus.FAILED, message=error, error=error)


def to_snapshot(job: GenerationJob) -> JobSnapshot:
    info = STAGE_INFO[job.status]
    done = job.status is JobStatus.COMPLETED
    return JobSnapshot(
        business_id=job.business_id,
        status=job.status,
        step=info.label,
        message=job.message or info.message,
        progress=info.progress,
        website_config=job.result_config if done else None,
        template_id=job.template_id if done else None,
        image_assets=job.image_assets if done else None,
        error=job.error,
        started_at=job.started_at,
        completed_at=job.completed_at,
    )
