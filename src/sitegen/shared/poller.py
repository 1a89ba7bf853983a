"""Poll client for the website-status endpoint."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import httpx

from sitegen.schemas.job import JobSnapshot
from sitegen.shared.errors import TransientIOError

logger = logging.getLogger(__name__)


class StatusPoller:
    """Polls a running server until a job reaches a terminal status.

    Transport errors, 5xx responses and unreadable bodies count against
    ``max_failures`` and are retried on the next tick. Any other non-2xx
    response is raised as-is.
    """

    def __init__(
        self,
        base_url: str,
        interval: float = 2.0,
        max_failures: int = 30,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.interval = interval
        self.max_failures = max_failures
        self._client = client

    def status_url(self, business_id: str) -> str:
        return f"{self.base_url}/businesses/{business_id}/website-status"

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=10.0) as client:
            yield client

    async def poll(
        self,
        business_id: str,
        on_update: Callable[[JobSnapshot], None] | None = None,
    ) -> JobSnapshot:
        """Return the first terminal snapshot for ``business_id``.

        Raises ``TransientIOError`` once ``max_failures`` polls have failed.
        """
        url = self.status_url(business_id)
        failures = 0

        async with self._session() as client:
            while True:
                snapshot = None
                try:
                    resp = await client.get(url)
                    if resp.status_code >= 500:
                        raise httpx.HTTPStatusError(
                            f"Server error {resp.status_code}", request=resp.request, response=resp,
                        )
                    resp.raise_for_status()
                    snapshot = JobSnapshot.model_validate(resp.json())
                except httpx.HTTPStatusError as exc:
                    if exc.response.status_code < 500:
                        raise
                    failures += 1
                    logger.warning("Status poll %d/%d failed: %s", failures, self.max_failures, exc)
                except httpx.TransportError as exc:
                    failures += 1
                    logger.warning("Status poll %d/%d failed: %s", failures, self.max_failures, exc)
                except ValueError as exc:
                    # Non-JSON body or a payload that isn't a JobSnapshot
                    failures += 1
                    logger.warning(
                        "Status poll %d/%d returned an unreadable body: %s", failures, self.max_failures, exc,
                    )

                if snapshot is not None:
                    if on_update is not None:
                        on_update(snapshot)
                    if snapshot.is_terminal:
                        return snapshot
                elif failures >= self.max_failures:
                    raise TransientIOError(
                        f"Connection lost after {failures} failed status checks for {business_id}"
                    )

                await asyncio.sleep(self.interval)
