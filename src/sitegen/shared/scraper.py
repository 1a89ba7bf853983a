"""Scraper collaborator interface and the static, file-backed implementation."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

import yaml

from sitegen.schemas.signal import RawSignal
from sitegen.shared.errors import ScrapeError

logger = logging.getLogger(__name__)


class BaseScraper(ABC):
    """Turns a source URL into a RawSignal.

    Implementations raise ``ScrapeError`` (or any exception) on failure; the
    orchestrator records the exception's message as the job error.
    """

    @abstractmethod
    async def scrape(self, url: str) -> RawSignal:
        """Fetch and extract a signal for ``url``."""


class StaticScraper(BaseScraper):
    """Serves pre-collected signals keyed by URL. Unknown URLs fail.

    Trailing slashes are ignored when matching, so ``https://a.com`` and
    ``https://a.com/`` resolve to the same entry.
    """

    def __init__(self, signals: dict[str, RawSignal] | None = None) -> None:
        self._signals = {self._key(url): signal for url, signal in (signals or {}).items()}

    @staticmethod
    def _key(url: str) -> str:
        return url.strip().rstrip("/")

    def add(self, url: str, signal: RawSignal) -> None:
        self._signals[self._key(url)] = signal

    async def scrape(self, url: str) -> RawSignal:
        signal = self._signals.get(self._key(url))
        if signal is None:
            raise ScrapeError(f"No scraped data available for {url}")
        logger.debug("Serving static signal for %s", url)
        return signal.model_copy(deep=True)

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticScraper":
        """Load a ``{url: signal}`` mapping from a YAML or JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Signals file not found: {path}")

        text = path.read_text()
        raw = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(f"Signals file must be a mapping of URL to signal, got {type(raw).__name__}")

        return cls({url: RawSignal.model_validate(data or {}) for url, data in raw.items()})
