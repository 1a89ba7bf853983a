"""WebsiteGenerationConfig — the renderer-facing output of a generation job.

Field names are snake_case in Python and camelCase on the wire
(``primaryColor``, ``heroHeadline``, ``leadForm`` ...), which is the shape
the site renderer consumes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Theme(_WireModel):
    primary_color: str
    secondary_color: str
    font: str
    hero_style: str = "image-left"
    services_layout: str = "grid"
    spacing: str = "comfortable"
    image_radius: int = 8
    shadow_intensity: str = "light"
    border_style: str = "none"


class ServiceCard(_WireModel):
    title: str
    description: str


class SiteContent(_WireModel):
    hero_headline: str
    hero_subtext: str
    cta_text: str = "Learn More"
    cta_link: str = "#contact"
    services: list[ServiceCard] = []
    about: str = ""
    highlights: list[str] = []
    hero_image: str | None = None
    about_image: str | None = None


class LeadForm(_WireModel):
    fields: list[str]


class BookingConfig(_WireModel):
    provider: str = "internal"  # "internal" | "google" | "calendly"
    calendar_id: str | None = None


class SeoMetadata(_WireModel):
    title: str
    description: str
    keywords: list[str]
    local_keywords: list[str] = []


class WebsiteGenerationConfig(_WireModel):
    slug: str
    template_id: str
    theme: Theme
    sections: list[str]
    content: SiteContent
    lead_form: LeadForm
    booking: BookingConfig | None = None
    seo: SeoMetadata
