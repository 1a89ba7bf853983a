"""Asset resolver collaborator — picks hero and gallery imagery for a site.

Preference order: scraped images (optionally HEAD-checked), Unsplash search
results when an access key is configured, then per-category stock images.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

import httpx

from sitegen.schemas.config import AssetSettings
from sitegen.schemas.profile import ImageAssets
from sitegen.shared.errors import AssetResolutionError

logger = logging.getLogger(__name__)

UNSPLASH_SEARCH_URL = "https://api.unsplash.com/search/photos"
MAX_SCRAPED_IMAGES = 5
TARGET_IMAGES = 4

FALLBACK_IMAGES: dict[str, tuple[str, ...]] = {
    "business": (
        "https://images.unsplash.com/photo-1497366216548-37526070297c?w=1200",
        "https://images.unsplash.com/photo-1454165804606-c3d57bc86b40?w=800",
        "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=800",
        "https://images.unsplash.com/photo-1519389950473-47ba0277781c?w=800",
    ),
    "restaurant": (
        "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?w=1200",
        "https://images.unsplash.com/photo-1466978913421-dad2ebd01d17?w=800",
        "https://images.unsplash.com/photo-1414235077428-338989a2e8c0?w=800",
        "https://images.unsplash.com/photo-1552566626-52f8b828add9?w=800",
    ),
    "fitness": (
        "https://images.unsplash.com/photo-1534438327276-14e5300c3a48?w=1200",
        "https://images.unsplash.com/photo-1571902943202-507ec2618e8f?w=800",
        "https://images.unsplash.com/photo-1540497077202-7c8a3999166f?w=800",
        "https://images.unsplash.com/photo-1517836357463-d25dfeac3438?w=800",
    ),
    "beauty": (
        "https://images.unsplash.com/photo-1560066984-138dadb4c035?w=1200",
        "https://images.unsplash.com/photo-1522337360788-8b13dee7a37e?w=800",
        "https://images.unsplash.com/photo-1487412947147-5cebf100ffc2?w=800",
        "https://images.unsplash.com/photo-1516975080664-ed2fc6a32937?w=800",
    ),
    "technology": (
        "https://images.unsplash.com/photo-1519389950473-47ba0277781c?w=1200",
        "https://images.unsplash.com/photo-1531297484001-80022131f5a1?w=800",
        "https://images.unsplash.com/photo-1488590528505-98d2b5aba04b?w=800",
        "https://images.unsplash.com/photo-1518770660439-4636190af475?w=800",
    ),
    "medical": (
        "https://images.unsplash.com/photo-1519494026892-80bbd2d6fd0d?w=1200",
        "https://images.unsplash.com/photo-1579684385127-1ef15d508118?w=800",
        "https://images.unsplash.com/photo-1576091160550-2173dba999ef?w=800",
        "https://images.unsplash.com/photo-1538108149393-fbbd81895907?w=800",
    ),
    "construction": (
        "https://images.unsplash.com/photo-1504307651254-35680f356dfd?w=1200",
        "https://images.unsplash.com/photo-1503387762-592deb58ef4e?w=800",
        "https://images.unsplash.com/photo-1541976590-713941681591?w=800",
        "https://images.unsplash.com/photo-1581094794329-c8112a89af12?w=800",
    ),
    "default": (
        "https://images.unsplash.com/photo-1497366216548-37526070297c?w=1200",
        "https://images.unsplash.com/photo-1497366811353-6870744d04b2?w=800",
        "https://images.unsplash.com/photo-1497215842964-222b430dc094?w=800",
        "https://images.unsplash.com/photo-1504384308090-c894fdcc538d?w=800",
    ),
}

# (substring of the lowercased category, FALLBACK_IMAGES key), first hit wins
FALLBACK_KEYS: tuple[tuple[str, str], ...] = (
    ("restaurant", "restaurant"),
    ("food", "restaurant"),
    ("fitness", "fitness"),
    ("gym", "fitness"),
    ("beauty", "beauty"),
    ("software", "technology"),
    ("technology", "technology"),
    ("medical", "medical"),
    ("health", "medical"),
    ("construction", "construction"),
    ("consult", "business"),
    ("marketing", "business"),
    ("business", "business"),
)


def fallback_images(category: str) -> tuple[str, ...]:
    normalized = category.lower()
    for needle, key in FALLBACK_KEYS:
        if needle in normalized:
            return FALLBACK_IMAGES[key]
    return FALLBACK_IMAGES["default"]


class BaseAssetResolver(ABC):
    """Resolves raw image URLs into the hero/gallery set a site will use."""

    @abstractmethod
    async def resolve(
        self,
        image_urls: Sequence[str],
        *,
        category: str = "",
        business_name: str = "",
        seo_keywords: Sequence[str] = (),
    ) -> ImageAssets:
        """Return resolved assets, or raise ``AssetResolutionError``."""


class StockAssetResolver(BaseAssetResolver):
    """Default resolver: scraped images first, stock imagery to fill gaps."""

    def __init__(
        self,
        settings: AssetSettings | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or AssetSettings()
        self._http = http

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._http is not None:
            yield self._http
            return
        async with httpx.AsyncClient(
            timeout=self.settings.timeout_seconds, follow_redirects=True,
        ) as http:
            yield http

    async def resolve(
        self,
        image_urls: Sequence[str],
        *,
        category: str = "",
        business_name: str = "",
        seo_keywords: Sequence[str] = (),
    ) -> ImageAssets:
        min_images = self.settings.min_images
        candidates = _absolute_unique(image_urls)[:MAX_SCRAPED_IMAGES]
        source = "fallback"

        if self.settings.validate_urls and candidates:
            async with self._session() as http:
                candidates = [url for url in candidates if await self._is_image(http, url)]

        images = list(candidates)
        if len(images) >= min_images:
            source = "scraped"

        if len(images) < min_images and self.settings.unsplash_access_key:
            queries = [f"{category} {business_name}".strip()]
            if seo_keywords:
                queries.append(" ".join(seo_keywords[:2]))
            async with self._session() as http:
                for query in queries:
                    if len(images) >= min_images or not query:
                        break
                    wanted = max(TARGET_IMAGES, min_images) - len(images)
                    found = await self._search_unsplash(http, query, wanted)
                    if found:
                        images.extend(found)
                        source = "unsplash"

        if len(images) < min_images:
            stock = fallback_images(category)
            images.extend(stock[: max(0, TARGET_IMAGES - len(images))])

        images = _absolute_unique(images)
        for url in FALLBACK_IMAGES["default"]:
            if len(images) >= min_images:
                break
            if url not in images:
                images.append(url)

        if not images:
            raise AssetResolutionError("No image assets could be resolved")

        logger.info("Resolved %d image(s) from %s", len(images), source)
        return ImageAssets(hero=images[0], gallery=images[1:], source=source)

    async def _is_image(self, http: httpx.AsyncClient, url: str) -> bool:
        try:
            resp = await http.head(url)
        except httpx.HTTPError as exc:
            logger.debug("Image check failed for %s: %s", url, exc)
            return False
        content_type = resp.headers.get("content-type", "")
        return resp.status_code == 200 and content_type.startswith("image/")

    async def _search_unsplash(self, http: httpx.AsyncClient, query: str, count: int) -> list[str]:
        try:
            resp = await http.get(
                UNSPLASH_SEARCH_URL,
                params={"query": query, "per_page": count, "orientation": "landscape"},
                headers={"Authorization": f"Client-ID {self.settings.unsplash_access_key}"},
            )
            resp.raise_for_status()
            return [photo["urls"]["regular"] for photo in resp.json().get("results", [])]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Unsplash search for %r failed: %s", query, exc)
            return []


def _absolute_unique(urls: Sequence[str]) -> list[str]:
    seen: list[str] = []
    for url in urls:
        url = (url or "").strip()
        if url.startswith("//"):
            url = f"https:{url}"
        if url.startswith(("http://", "https://")) and url not in seen:
            seen.append(url)
    return seen
