"""BusinessProfile — the complete, bounds-checked description of a business."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, field_validator, model_validator

MIN_SEO_KEYWORDS = 5
MAX_SEO_KEYWORDS = 20
MAX_TRUST_SIGNALS = 5


class BrandTone(str, Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    LUXURY = "luxury"
    BOLD = "bold"
    CASUAL = "casual"


class ContactPreferences(BaseModel):
    email: bool = True
    phone: bool = True
    booking: bool = True


class ImageAssets(BaseModel):
    """Resolved imagery for a site. ``source`` records where the URLs came from."""

    hero: str = ""
    gallery: list[str] = []
    source: str = "scraped"  # "scraped" | "unsplash" | "fallback"


class BusinessProfile(BaseModel):
    """Synthesized business record.

    The validators make a bounds violation impossible to construct, so the
    synthesizer's recovery path also catches its own programming errors.
    """

    name: str = "Business"
    category: str = "Services"
    location: str = ""
    services: list[str] = ["Services"]
    value_proposition: str = ""
    target_audience: str = ""
    brand_tone: BrandTone = BrandTone.PROFESSIONAL
    brand_colors: list[str] = []
    trust_signals: list[str]
    seo_keywords: list[str]
    contact_preferences: ContactPreferences = ContactPreferences()
    logo_url: str | None = None
    image_assets: ImageAssets | None = None

    @field_validator("name", "category")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("services")
    @classmethod
    def check_services(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one service is required")
        if len({s.lower() for s in v}) != len(v):
            raise ValueError("services must not repeat")
        return v

    @field_validator("trust_signals")
    @classmethod
    def check_trust_signals(cls, v: list[str]) -> list[str]:
        if not 1 <= len(v) <= MAX_TRUST_SIGNALS:
            raise ValueError(f"expected 1..{MAX_TRUST_SIGNALS} trust signals, got {len(v)}")
        return v

    @field_validator("seo_keywords")
    @classmethod
    def check_seo_keywords(cls, v: list[str]) -> list[str]:
        if not MIN_SEO_KEYWORDS <= len(v) <= MAX_SEO_KEYWORDS:
            raise ValueError(
                f"expected {MIN_SEO_KEYWORDS}..{MAX_SEO_KEYWORDS} SEO keywords, got {len(v)}"
            )
        if len({k.casefold() for k in v}) != len(v):
            raise ValueError("SEO keywords must not repeat")
        return v

    @model_validator(mode="after")
    def check_assets_have_hero(self) -> "BusinessProfile":
        if self.image_assets is not None and not self.image_assets.hero:
            raise ValueError("image_assets requires a hero image")
        return self
