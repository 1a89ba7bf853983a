"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from sitegen.schemas.profile import BrandTone, BusinessProfile, ImageAssets
from sitegen.schemas.signal import RawSignal
from sitegen.shared.assets import BaseAssetResolver

BLOOM_URL = "https://bloomgardens.example"

STOCK_ASSETS = ImageAssets(
    hero="https://images.example/hero.jpg",
    gallery=["https://images.example/about.jpg", "https://images.example/g2.jpg"],
    source="fallback",
)


def make_profile(**overrides: object) -> BusinessProfile:
    """A valid profile with every required field filled; override as needed."""
    data: dict[str, object] = {
        "name": "Bloom Gardens",
        "category": "Landscaping",
        "location": "Portland, OR",
        "services": ["Design", "Landscaping"],
        "value_proposition": "Beautiful outdoor spaces designed around how you live",
        "target_audience": "Local businesses and homeowners",
        "brand_tone": BrandTone.FRIENDLY,
        "brand_colors": ["#22C55E", "#166534"],
        "trust_signals": ["Hundreds of satisfied clients"],
        "seo_keywords": ["Bloom Gardens", "landscaping", "garden design", "lawn care", "local services"],
    }
    data.update(overrides)
    return BusinessProfile(**data)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    cfg = tmp_path / "config.yml"
    cfg.write_text(
        """\
api_base_url: "http://localhost:9000"
poll_interval_seconds: 0.5
signals_path: "{signals}"
server:
  port: 9000
""".format(signals=str(tmp_path / "signals.yml"))
    )
    return cfg


@pytest.fixture
def bloom_signal() -> RawSignal:
    return RawSignal(
        title="Bloom Gardens | Portland Landscaping",
        description=(
            "We provide garden design and landscaping services, "
            "trusted by hundreds of satisfied clients"
        ),
        contact_email="hello@bloomgardens.example",
        images=[
            "https://bloomgardens.example/img/hero.jpg",
            "https://bloomgardens.example/img/team.jpg",
        ],
    )


@pytest.fixture
def signals_file(tmp_path: Path) -> Path:
    """A YAML signals file with one entry for BLOOM_URL."""
    path = tmp_path / "signals.yml"
    path.write_text(
        """\
"{url}":
  title: "Bloom Gardens"
  description: "We provide garden design and landscaping services, trusted by hundreds of satisfied clients"
  contact_email: "hello@bloomgardens.example"
  images:
    - "https://bloomgardens.example/img/hero.jpg"
    -
""".format(url=BLOOM_URL)
    )
    return path


@pytest.fixture
def mock_resolver() -> AsyncMock:
    """An asset resolver that always returns STOCK_ASSETS."""
    resolver = AsyncMock(spec=BaseAssetResolver)
    resolver.resolve.return_value = STOCK_ASSETS
    return resolver
