"""Template catalog entries and recommendation results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from sitegen.schemas.profile import BrandTone

SECTION_TYPES = ("hero", "services", "about", "testimonials", "contact", "booking")


class TemplateLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    hero_style: str = "image-left"     # "image-left" | "image-full" | "centered"
    services_layout: str = "grid"      # "grid" | "list"
    typography: str = "classic"        # "modern" | "classic" | "luxury"


class StylingRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    spacing: str = "comfortable"       # "compact" | "comfortable" | "spacious"
    image_radius: int = 8
    shadow_intensity: str = "light"    # "none" | "light" | "medium" | "heavy"
    border_style: str = "none"         # "none" | "subtle" | "bold"


class TemplateDefinition(BaseModel):
    """One immutable catalog entry.

    ``categories`` are lowercase affinity tags (hyphenated for multi-word
    industries, e.g. ``real-estate``); ``tones`` are the brand tones it suits.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    layout: TemplateLayout = TemplateLayout()
    default_sections: tuple[str, ...] = SECTION_TYPES
    styling: StylingRules = StylingRules()
    categories: frozenset[str] = frozenset()
    tones: frozenset[BrandTone] = frozenset()


class TemplateMatch(BaseModel):
    """A catalog entry with its score against one profile."""

    template: TemplateDefinition
    score: int
    reasons: list[str] = []


class Recommendation(BaseModel):
    """Ranked catalog plus the single pick.

    ``ranked`` is sorted by score, highest first, ties in catalog order.
    """

    ranked: list[TemplateMatch]
    best: TemplateDefinition
    confidence: int = 0  # 0-100, share of the maximum achievable score
    reason: str = ""
