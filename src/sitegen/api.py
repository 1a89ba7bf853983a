"""FastAPI app exposing the start and status operations."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sitegen.components.orchestrator.orchestrator import GenerationOrchestrator
from sitegen.schemas.job import JobSnapshot
from sitegen.schemas.template import TemplateDefinition
from sitegen.shared.errors import SourceValidationError

logger = logging.getLogger(__name__)


class GenerateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    source_url: str | None = None
    conversational_text: str | None = None


def create_app(orchestrator: GenerationOrchestrator) -> FastAPI:
    """Build the app around an orchestrator; one orchestrator per process."""
    app = FastAPI(title="Website Generator")
    app.state.orchestrator = orchestrator

    @app.post("/businesses/{business_id}/generate-website", response_model=JobSnapshot)
    async def generate_website(business_id: str, body: GenerateRequest, wait: bool = False):
        try:
            return await orchestrator.start(
                business_id,
                body.source_url,
                conversational_text=body.conversational_text,
                wait=wait,
            )
        except SourceValidationError as exc:
            logger.info("Rejected generation request for %s: %s", business_id, exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.get("/businesses/{business_id}/website-status", response_model=JobSnapshot)
    async def website_status(business_id: str):
        snapshot = orchestrator.status(business_id)
        if snapshot is None:
            raise HTTPException(status_code=404, detail=f"No website generation found for {business_id}")
        return snapshot

    @app.get("/templates", response_model=list[TemplateDefinition])
    async def templates():
        return list(orchestrator.catalog)

    return app
