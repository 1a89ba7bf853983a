"""Error taxonomy for the generation pipeline."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for every error this package raises on purpose."""


class SourceValidationError(GenerationError, ValueError):
    """Missing or malformed source URL. Raised before any job exists."""


class PipelineStageError(GenerationError):
    """A stage's collaborator failed. Terminal for the job.

    ``str(exc)`` is the collaborator's message, unchanged, because that is
    what ends up in the job's ``error`` field.
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(message)
        self.stage = stage
        self.message = message


class ScrapeError(GenerationError):
    """The scraper could not produce a signal for a URL."""


class AssetResolutionError(GenerationError):
    """Image assets could not be resolved at all."""


class TransientIOError(GenerationError):
    """The status endpoint stayed unreachable for the whole poll budget."""


class InvalidTransitionError(GenerationError, RuntimeError):
    """A job write that would move backwards or touch a finished job."""
