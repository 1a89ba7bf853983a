"""Config assembly — profile + chosen template -> WebsiteGenerationConfig.

Deterministic: the same inputs always produce an equal config (no clock,
no randomness). Images are attached later by ``attach_images`` once the
enrichment stage has resolved them.
"""

from __future__ import annotations

import re

from sitegen.components.assembler import phrases
from sitegen.schemas.profile import BusinessProfile, ContactPreferences, ImageAssets
from sitegen.schemas.template import TemplateDefinition
from sitegen.schemas.website import (
    BookingConfig,
    LeadForm,
    SeoMetadata,
    ServiceCard,
    SiteContent,
    Theme,
    WebsiteGenerationConfig,
)

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def assemble_config(profile: BusinessProfile, template: TemplateDefinition) -> WebsiteGenerationConfig:
    prefs = profile.contact_preferences

    sections = [
        section for section in template.default_sections
        if section != "booking" or prefs.booking
    ]

    return WebsiteGenerationConfig(
        slug=slugify(profile.name),
        template_id=template.id,
        theme=_build_theme(profile, template),
        sections=sections,
        content=SiteContent(
            hero_headline=hero_headline(profile),
            hero_subtext=hero_subtext(profile),
            cta_text=cta_text(prefs),
            cta_link="#booking" if prefs.booking else "#contact",
            services=[
                ServiceCard(title=service, description=service_description(service, profile))
                for service in profile.services
            ],
            about=about_content(profile),
            highlights=profile.trust_signals[:4],
        ),
        lead_form=LeadForm(fields=lead_form_fields(profile)),
        booking=BookingConfig(provider="internal", calendar_id=None) if prefs.booking else None,
        seo=SeoMetadata(
            title=seo_title(profile),
            description=meta_description(profile),
            keywords=list(profile.seo_keywords),
            local_keywords=local_seo_keywords(profile),
        ),
    )


def attach_images(config: WebsiteGenerationConfig, assets: ImageAssets) -> WebsiteGenerationConfig:
    """Return a copy of ``config`` with hero/about imagery filled in."""
    content = config.content.model_copy(update={
        "hero_image": assets.hero or None,
        "about_image": assets.gallery[0] if assets.gallery else None,
    })
    return config.model_copy(update={"content": content})


def slugify(name: str) -> str:
    return _SLUG_STRIP.sub("-", name.lower()).strip("-") or "business"


def _build_theme(profile: BusinessProfile, template: TemplateDefinition) -> Theme:
    colors = profile.brand_colors
    return Theme(
        primary_color=colors[0] if colors else phrases.DEFAULT_PRIMARY_COLOR,
        secondary_color=colors[1] if len(colors) > 1 else phrases.DEFAULT_SECONDARY_COLOR,
        font=phrases.FONTS_BY_TYPOGRAPHY.get(template.layout.typography, phrases.DEFAULT_FONT),
        hero_style=template.layout.hero_style,
        services_layout=template.layout.services_layout,
        spacing=template.styling.spacing,
        image_radius=template.styling.image_radius,
        shadow_intensity=template.styling.shadow_intensity,
        border_style=template.styling.border_style,
    )


def hero_headline(profile: BusinessProfile) -> str:
    value = profile.value_proposition
    if 10 < len(value) < 100:
        return value
    if profile.services:
        return f"Professional {profile.services[0]} Services You Can Trust"
    return f"Welcome to {profile.name}"


def hero_subtext(profile: BusinessProfile) -> str:
    parts: list[str] = []
    if profile.target_audience:
        parts.append(f"Helping {profile.target_audience}")
    if profile.services:
        parts.append(f"with {', '.join(profile.services[:3])}")
    if profile.location:
        parts.append(f"in {profile.location}")
    return " ".join(parts) if parts else phrases.DEFAULT_SUBTEXT


def cta_text(prefs: ContactPreferences) -> str:
    if prefs.booking:
        return "Book Now"
    if prefs.phone:
        return "Call Us Today"
    if prefs.email:
        return "Get in Touch"
    return "Learn More"


def service_description(service: str, profile: BusinessProfile) -> str:
    template = phrases.SERVICE_DESCRIPTIONS[profile.brand_tone]
    return template.format(service=service.lower())


def about_content(profile: BusinessProfile) -> str:
    content = profile.value_proposition or f"{profile.name} is dedicated to providing exceptional services."
    if profile.target_audience:
        content += (
            f" We specialize in serving {profile.target_audience.lower()}, understanding their "
            "unique needs and delivering solutions that exceed expectations."
        )
    if profile.trust_signals:
        content += (
            " Our commitment to excellence is demonstrated through "
            f"{', '.join(s.lower() for s in profile.trust_signals[:3])}."
        )
    return f"{content} {phrases.ABOUT_CLOSINGS[profile.brand_tone]}"


def lead_form_fields(profile: BusinessProfile) -> list[str]:
    fields = ["name", "email"]
    if profile.contact_preferences.phone:
        fields.append("phone")
    if len(profile.services) > 1:
        fields.append("service")
    fields.append("message")
    return fields


def seo_title(profile: BusinessProfile) -> str:
    title = f"{profile.name} | {profile.category} Services"
    if profile.location:
        title += f" in {profile.location}"
    return title


def meta_description(profile: BusinessProfile) -> str:
    service_list = ", ".join(profile.services[:3]) or "professional services"
    description = f"{profile.name} offers {service_list}"
    if profile.location:
        description += f" in {profile.location}"
    if profile.target_audience:
        description += f" for {profile.target_audience.lower()}"
    description += ". Contact us today!"

    if len(description) > phrases.MAX_META_DESCRIPTION:
        description = description[: phrases.MAX_META_DESCRIPTION - 3] + "..."
    return description


def local_seo_keywords(profile: BusinessProfile) -> list[str]:
    keywords: list[str] = []
    category = profile.category.lower()
    location = profile.location

    if location:
        keywords.append(f"{category} in {location}")
        keywords.append(f"{location} {category}")
        for service in profile.services[:3]:
            keywords.append(f"{service.lower()} {location}")
            keywords.append(f"{service.lower()} near me")

    for service in profile.services[:5]:
        keywords.append(f"best {service.lower()}")
        keywords.append(f"professional {service.lower()}")

    # Order-preserving dedupe.
    return list(dict.fromkeys(keywords))
